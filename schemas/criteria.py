import uuid
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import Field, field_validator

from schemas.rules import FormModel, longest, number, text, uuid_string

CriteriaPoints = Annotated[
    Optional[int],
    number(
        "Points are required.",
        minimum=(1, "Value should be greater than zero."),
        integer="Value should not be decimal value.",
    ),
]
AwardedPoints = Annotated[
    Optional[int],
    number(
        "Points are required.",
        minimum=(0, "Value should not be negative."),
        integer="Value should not be decimal value.",
    ),
]


class CreateCooperativeCategoryValidation(FormModel):
    name: Annotated[Optional[str], text("Name is required.", max_length=longest(150, "Name"))] = None
    required_assets: Annotated[
        Optional[Decimal],
        number(
            "Required assets is required.",
            minimum=(0, "Required assets cannot be negative."),
            places=(2, "Required assets should not have more than 2 decimal places."),
        ),
    ] = None
    criteria_id: Annotated[Optional[uuid.UUID], uuid_string("Criteria is required.", "Invalid criteria.")] = None


class EditCooperativeCategoryValidation(CreateCooperativeCategoryValidation):
    id: Annotated[Optional[uuid.UUID], uuid_string("Id is required.", "Invalid category id.")] = None


class CriteriaFieldForm(FormModel):
    # Present when editing a field that already exists
    id: Annotated[Optional[uuid.UUID], uuid_string(None, "Invalid criteria field id.")] = None
    name: Annotated[Optional[str], text("Name is required.", max_length=longest(150, "Name"))] = None
    max_points: Annotated[
        Optional[int],
        number(
            "Max points is required.",
            minimum=(1, "Value should be greater than zero."),
            integer="Value should not contain decimal values.",
            invalid_as_zero=True,
        ),
    ] = None


class CreateCriteriaValidation(FormModel):
    name: Annotated[
        Optional[str],
        text("Criteria name is required.", max_length=longest(150, "Criteria name")),
    ] = None
    financial_performance_points: CriteriaPoints = None
    organization_management_points: CriteriaPoints = None
    criteria_fields: List[CriteriaFieldForm] = Field(default_factory=list)

    @field_validator("criteria_fields", mode="before")
    @classmethod
    def _criteria_fields_default(cls, value):
        return [] if value is None else value


class EditCriteriaValidation(CreateCriteriaValidation):
    id: Annotated[Optional[uuid.UUID], uuid_string("Id is required.", "Invalid criteria id.")] = None


class EditDefaultCriteriaPointValidation(FormModel):
    cooperative_id: Annotated[
        Optional[uuid.UUID], uuid_string("Cooperative is required.", "Invalid cooperative id.")
    ] = None
    category_id: Annotated[Optional[uuid.UUID], uuid_string("Category is required.", "Invalid category.")] = None
    financial_performance_points: AwardedPoints = None
    organization_management_points: AwardedPoints = None


class EditCriteriaFieldPointValidation(FormModel):
    cooperative_id: Annotated[
        Optional[uuid.UUID], uuid_string("Cooperative is required.", "Invalid cooperative id.")
    ] = None
    category_id: Annotated[Optional[uuid.UUID], uuid_string("Category is required.", "Invalid category.")] = None
    criteria_field_id: Annotated[
        Optional[uuid.UUID], uuid_string("Criteria field is required.", "Invalid criteria field id.")
    ] = None
    points: Annotated[
        Optional[int],
        number(
            "Points are required.",
            minimum=(0, "Value should not be negative."),
            integer="Value should not be decimal value.",
            invalid_as_zero=True,
        ),
    ] = None
