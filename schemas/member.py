from datetime import date
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import Field, field_validator

from schemas.rules import FormModel, day, longest, number, text

GivenName = Annotated[
    Optional[str], text("Given name is required.", max_length=longest(100, "Given name"))
]
MiddleName = Annotated[
    Optional[str], text("Middle name is required.", max_length=longest(100, "Middle name"))
]
Surname = Annotated[
    Optional[str], text("Surname is required.", max_length=longest(100, "Surname"))
]
Address = Annotated[Optional[str], text(max_length=longest(255, "Address"))]


class DependentForm(FormModel):
    name: Annotated[
        Optional[str],
        text("Dependent name is required.", max_length=longest(150, "Dependent name")),
    ] = None
    relationship: Annotated[
        Optional[str],
        text(
            "Relationship of the dependent must be specified.",
            max_length=longest(50, "Relationship"),
        ),
    ] = None
    birthday: Annotated[
        Optional[date], day("Dependent's date of birth must be specified.")
    ] = None


class MemberAccountForm(FormModel):
    email: Annotated[
        Optional[str],
        text("Email is required.", email="Email is invalid.", max_length=longest(255, "Email")),
    ] = None
    mobile_number: Annotated[
        Optional[str], text("Mobile number is required.", mobile="Invalid mobile number.")
    ] = None


class NewMemberValidationSchema(FormModel):
    given_name: GivenName = None
    middle_name: MiddleName = None
    surname: Surname = None
    birthday: Annotated[Optional[date], day("Date of birth is required.")] = None
    gender: Annotated[
        Optional[str], text("Gender is required.", max_length=longest(30, "Gender"))
    ] = None
    educational_attainment: Annotated[
        Optional[str],
        text(
            "Educational Attainment is required.",
            max_length=longest(100, "Educational Attainment"),
        ),
    ] = None
    civil_status: Annotated[
        Optional[str], text("Civil status is required.", max_length=longest(30, "Civil status"))
    ] = None
    tin: Annotated[Optional[str], text(max_length=longest(30, "TIN"))] = Field(None, alias="TIN")
    spouse_name: Annotated[Optional[str], text(max_length=longest(150, "Spouse name"))] = None
    present_address: Annotated[
        Optional[str],
        text("Present address is required.", max_length=longest(255, "Present address")),
    ] = None
    provincial_address: Address = None
    office_address: Address = None
    office_phone_number: Annotated[
        Optional[str], text(max_length=longest(30, "Office phone number"))
    ] = None
    account: MemberAccountForm = {}
    dependents: List[DependentForm] = Field(default_factory=list)

    @field_validator("dependents", mode="before")
    @classmethod
    def _dependents_default(cls, value):
        return [] if value is None else value


class EditMemberValidationSchema(NewMemberValidationSchema):
    id: Annotated[
        Optional[int], number(minimum=(1, "Invalid member id."), integer="Invalid member id.")
    ] = None
    registration_fee: Annotated[
        Optional[Decimal],
        number(
            type_error="Invalid fee value.",
            places=(2, "Registration fee should not have more than 2 decimal places."),
        ),
    ] = None


class RegisteringMemberForm(FormModel):
    given_name: GivenName = None
    middle_name: MiddleName = None
    surname: Surname = None
    birthday: Annotated[Optional[date], day("Date of birth is required.")] = None


class RegisterMemberAccountSchema(FormModel):
    email: Annotated[
        Optional[str],
        text("Email is required.", email="Invalid email format.", max_length=longest(255, "Email")),
    ] = None
    password: Annotated[Optional[str], text("Password is required.")] = None
    member: RegisteringMemberForm = {}
