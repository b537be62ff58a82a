import uuid
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import ValidationInfo, field_validator

from schemas.rules import FormModel, number, uuid_string, within_balance
from schemas.transaction import Amount, MemberId, Remarks

Interest = Annotated[
    Optional[int],
    number(
        "Interest is required.",
        minimum=(1, "Interest should be at least 1."),
        integer="Interest value should not be decimal.",
    ),
]
Tenure = Annotated[
    Optional[int],
    number(
        "Tenure is required.",
        minimum=(1, "Tenure should be at least 1."),
        integer="Tenure value should not be decimal.",
    ),
]


class AddLoanSchemaValidation(FormModel):
    member_id: MemberId = None
    amount: Amount = None
    interest: Interest = None
    tenure: Tenure = None


class EditLoanSchemaValidation(FormModel):
    id: Annotated[Optional[uuid.UUID], uuid_string("Id is required.", "Invalid loan id.")] = None
    member_id: MemberId = None
    amount: Amount = None
    interest: Interest = None
    tenure: Tenure = None


class AddRepaymentModalSchemaValidation(FormModel):
    loan_id: Annotated[Optional[uuid.UUID], uuid_string("Loan is required.", "Invalid loan id.")] = None
    remaining_balance: Annotated[
        Optional[Decimal], number("Remaining balance is required.")
    ] = None
    amount: Annotated[
        Optional[Decimal],
        number(
            "Amount is required.",
            minimum=(Decimal("0.01"), "Amount should be greater than zero."),
            places=(2, "Amount should not have more than 2 decimal places."),
        ),
    ] = None
    remarks: Remarks = None

    @field_validator("amount")
    @classmethod
    def _amount_within_remaining_balance(cls, value, info: ValidationInfo):
        return within_balance(
            value,
            info.data.get("remaining_balance"),
            "Amount cannot be greater than remaining balance.",
        )
