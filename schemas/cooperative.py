import uuid
from datetime import date
from typing import Annotated, Optional

from schemas.rules import FormModel, day, longest, text, uuid_string


class CooperativeAccountForm(FormModel):
    given_name: Annotated[
        Optional[str], text("Given name is required.", max_length=longest(100, "Given name"))
    ] = None
    middle_name: Annotated[
        Optional[str], text("Middle name is required.", max_length=longest(100, "Middle name"))
    ] = None
    surname: Annotated[
        Optional[str], text("Surname is required.", max_length=longest(100, "Surname"))
    ] = None
    email: Annotated[
        Optional[str],
        text("Account email is required.", email="Email is invalid.", max_length=longest(255, "Email")),
    ] = None


class EditCooperativeAccountForm(CooperativeAccountForm):
    id: Annotated[Optional[uuid.UUID], uuid_string("Account id is required.", "Invalid account id.")] = None


class CreateCooperativeSchema(FormModel):
    name: Annotated[
        Optional[str], text("Cooperative name is required.", max_length=longest(200, "Cooperative name"))
    ] = None
    registration_number: Annotated[
        Optional[str],
        text(
            "Cooperative registration number is required.",
            max_length=longest(100, "Registration number"),
        ),
    ] = None
    registration_date: Annotated[Optional[date], day("Registration date is required.")] = None
    category_id: Annotated[Optional[uuid.UUID], uuid_string("Category is required.", "Invalid category.")] = None
    initials: Annotated[
        Optional[str], text("Cooperative initials is required.", max_length=longest(50, "Initials"))
    ] = None
    address: Annotated[
        Optional[str], text("Address is required.", max_length=longest(255, "Address"))
    ] = None
    account: CooperativeAccountForm = {}


class EditCooperativeSchema(CreateCooperativeSchema):
    id: Annotated[Optional[uuid.UUID], uuid_string("Id is required.", "Invalid cooperative id.")] = None
    account: EditCooperativeAccountForm = {}
