from decimal import Decimal
from typing import Annotated, Optional

from pydantic import ValidationInfo, field_validator

from schemas.rules import FormModel, longest, number, text, within_balance
from store.enums import TransactionType

TRANSACTION_TYPES = [TransactionType.DEPOSIT.value, TransactionType.WITHDRAW.value]

MemberId = Annotated[
    Optional[int],
    number(
        "Please select a member.",
        minimum=(1, "Please select a member."),
        integer="Invalid member id.",
    ),
]
EntryId = Annotated[
    Optional[int],
    number("Id is required.", minimum=(1, "Invalid id."), integer="Invalid id."),
]
TransactionKind = Annotated[
    Optional[str],
    text("Type is required.", choices=TRANSACTION_TYPES, choices_message="Invalid type value."),
]
Amount = Annotated[
    Optional[Decimal],
    number(
        "Amount is required.",
        minimum=(10, "Amount should be at least 10."),
        places=(2, "Amount should not have more than 2 decimal places."),
    ),
]
Balance = Annotated[
    Optional[Decimal],
    number("Balance is required.", minimum=(0, "Balance cannot be negative.")),
]
Remarks = Annotated[Optional[str], text(max_length=longest(255, "Remarks"))]

INSUFFICIENT_SHARE_BALANCE = "Insufficient share balance."
INSUFFICIENT_SAVING_BALANCE = "Insufficient saving balance."


class AddSharesSchemaValidation(FormModel):
    member_id: MemberId = None
    type: TransactionKind = None
    amount: Amount = None
    remarks: Remarks = None


class EditSharesSchemaValidation(FormModel):
    id: EntryId = None
    member_id: MemberId = None
    type: TransactionKind = None
    amount: Amount = None
    remarks: Remarks = None


class AddShareWithdrawalSchemaValidation(FormModel):
    member_id: MemberId = None
    type: TransactionKind = None
    share: Balance = None
    amount: Amount = None
    remarks: Remarks = None

    @field_validator("amount")
    @classmethod
    def _amount_within_share(cls, value, info: ValidationInfo):
        return within_balance(value, info.data.get("share"), INSUFFICIENT_SHARE_BALANCE)


class EditShareWithdrawalSchemaValidation(AddShareWithdrawalSchemaValidation):
    pass


class AddSavingSchemaValidation(FormModel):
    member_id: MemberId = None
    type: TransactionKind = None
    amount: Amount = None
    remarks: Remarks = None


class EditSavingSchemaValidation(FormModel):
    id: EntryId = None
    member_id: MemberId = None
    type: TransactionKind = None
    amount: Amount = None
    remarks: Remarks = None


class AddSavingWithdrawalSchemaValidation(FormModel):
    member_id: MemberId = None
    type: TransactionKind = None
    saving: Balance = None
    amount: Amount = None
    remarks: Remarks = None

    @field_validator("amount")
    @classmethod
    def _amount_within_saving(cls, value, info: ValidationInfo):
        return within_balance(value, info.data.get("saving"), INSUFFICIENT_SAVING_BALANCE)


class EditSavingWithdrawalSchemaValidation(AddSavingWithdrawalSchemaValidation):
    pass
