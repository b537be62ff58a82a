import datetime as dt
import uuid
from typing import Annotated, Optional

from schemas.rules import FormModel, day, longest, text, uuid_string


class CreateRewardValidation(FormModel):
    name: Annotated[Optional[str], text("Name is required.", max_length=longest(150, "Name"))] = None
    description: Annotated[Optional[str], text("Description is required.")] = None
    certificate_type: Annotated[
        Optional[str],
        text("Certificate name is required.", max_length=longest(150, "Certificate name")),
    ] = None
    certificate_description: Annotated[
        Optional[str], text("Certificate description is required.")
    ] = None


class EditRewardValidation(CreateRewardValidation):
    id: Annotated[Optional[uuid.UUID], uuid_string("Id is required.", "Invalid reward id.")] = None


class GiveRewardValidation(FormModel):
    cooperative_id: Annotated[
        Optional[uuid.UUID], uuid_string("Cooperative is required.", "Invalid cooperative id.")
    ] = None
    reward_id: Annotated[Optional[uuid.UUID], uuid_string("Id is required.", "Invalid reward id.")] = None
    date: Annotated[Optional[dt.date], day("Date is required.")] = None


class EditGivenRewardValidation(GiveRewardValidation):
    id: Annotated[Optional[uuid.UUID], uuid_string("Id is required.", "Invalid id.")] = None
