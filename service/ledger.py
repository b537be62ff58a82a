"""
Share and saving ledgers.

Both instruments behave the same way: deposits add, withdrawals subtract, and
a withdrawal is validated against the balance computed here from the stored
entries, never against a balance supplied by the client.
"""
from dataclasses import dataclass
from fastapi import status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import Any, Optional, Type
import uuid
import logging

from schemas.rules import FormModel
from schemas.transaction import (
    INSUFFICIENT_SAVING_BALANCE,
    INSUFFICIENT_SHARE_BALANCE,
    AddSavingSchemaValidation,
    AddSavingWithdrawalSchemaValidation,
    AddShareWithdrawalSchemaValidation,
    AddSharesSchemaValidation,
    EditSavingSchemaValidation,
    EditSavingWithdrawalSchemaValidation,
    EditShareWithdrawalSchemaValidation,
    EditSharesSchemaValidation,
)
from store.enums import TransactionType
from store.repositories import LedgerRepository, MemberRepository
from utils.response import (
    UNKNOWN_ERROR_MESSAGE,
    error_response,
    success_response,
    validation_error_response,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Instrument:
    label: str
    balance_field: str
    insufficient_message: str
    add_schema: Type[FormModel]
    add_withdrawal_schema: Type[FormModel]
    edit_schema: Type[FormModel]
    edit_withdrawal_schema: Type[FormModel]


SHARES = Instrument(
    label="Share",
    balance_field="share",
    insufficient_message=INSUFFICIENT_SHARE_BALANCE,
    add_schema=AddSharesSchemaValidation,
    add_withdrawal_schema=AddShareWithdrawalSchemaValidation,
    edit_schema=EditSharesSchemaValidation,
    edit_withdrawal_schema=EditShareWithdrawalSchemaValidation,
)

SAVINGS = Instrument(
    label="Saving",
    balance_field="saving",
    insufficient_message=INSUFFICIENT_SAVING_BALANCE,
    add_schema=AddSavingSchemaValidation,
    add_withdrawal_schema=AddSavingWithdrawalSchemaValidation,
    edit_schema=EditSavingSchemaValidation,
    edit_withdrawal_schema=EditSavingWithdrawalSchemaValidation,
)


def serialize_entry(entry) -> dict:
    return {
        "id": entry.id,
        "memberId": entry.member_id,
        "type": entry.type.value if isinstance(entry.type, TransactionType) else entry.type,
        "amount": entry.amount,
        "remarks": entry.remarks,
        "createdAt": entry.created_at,
        "updatedAt": entry.updated_at,
    }


def _validate(schema: Type[FormModel], payload: dict, extra: Optional[dict] = None):
    data = dict(payload)
    if extra:
        data.update(extra)
    return schema.model_validate(data)


async def record_transaction(
    instrument: Instrument,
    payload: Any,
    current_cooperative: dict,
    db: Session,
    ledger_repo: LedgerRepository,
    member_repo: MemberRepository,
):
    """Add a deposit or a withdrawal to a member's ledger."""
    payload = payload if isinstance(payload, dict) else {}
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])

    try:
        form = _validate(instrument.add_schema, payload)
    except ValidationError as e:
        return validation_error_response(e)

    member = member_repo.get_in_cooperative(form.member_id, coop_id)
    if member is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Member not found")

    if form.type == TransactionType.WITHDRAW.value:
        balance = ledger_repo.balance_for(member.id)
        try:
            form = _validate(
                instrument.add_withdrawal_schema, payload, {instrument.balance_field: balance}
            )
        except ValidationError as e:
            return validation_error_response(e)

    try:
        entry = ledger_repo.create(
            {
                "member_id": member.id,
                "type": TransactionType(form.type),
                "amount": form.amount,
                "remarks": form.remarks,
            }
        )
        db.commit()
        db.refresh(entry)
    except Exception as e:
        db.rollback()
        logger.error(f"{instrument.label} transaction failed: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    logger.info(f"{instrument.label} {form.type.lower()} of {form.amount} recorded for member {member.id}")
    return success_response(
        status_code=status.HTTP_201_CREATED,
        message=f"{instrument.label} transaction has been added.",
        data={
            "transaction": serialize_entry(entry),
            "balance": ledger_repo.balance_for(member.id),
        },
    )


async def update_transaction(
    instrument: Instrument,
    entry_id: int,
    payload: Any,
    current_cooperative: dict,
    db: Session,
    ledger_repo: LedgerRepository,
    member_repo: MemberRepository,
):
    """
    Edit an existing entry.

    The edited entry is left out of every balance computed here, so the new
    values are checked as if the entry were being recorded for the first time.
    Moving an entry to another member must also leave the previous member with
    a non-negative balance.
    """
    payload = payload if isinstance(payload, dict) else {}
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])

    try:
        form = _validate(instrument.edit_schema, payload)
    except ValidationError as e:
        return validation_error_response(e)

    if form.id != entry_id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Transaction id mismatch.")

    entry = ledger_repo.get_in_cooperative(entry_id, coop_id)
    if entry is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Transaction not found")

    member = member_repo.get_in_cooperative(form.member_id, coop_id)
    if member is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Member not found")

    balance = ledger_repo.balance_for(member.id, exclude_id=entry.id)
    if form.type == TransactionType.WITHDRAW.value:
        try:
            form = _validate(
                instrument.edit_withdrawal_schema, payload, {instrument.balance_field: balance}
            )
        except ValidationError as e:
            return validation_error_response(e)
    elif balance + form.amount < 0:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message=instrument.insufficient_message)

    previous_member_id = entry.member_id
    if previous_member_id != member.id and ledger_repo.balance_for(previous_member_id, exclude_id=entry.id) < 0:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message=instrument.insufficient_message)

    try:
        ledger_repo.update(
            entry,
            {
                "member_id": member.id,
                "type": TransactionType(form.type),
                "amount": form.amount,
                "remarks": form.remarks,
            },
        )
        db.commit()
        db.refresh(entry)
    except Exception as e:
        db.rollback()
        logger.error(f"{instrument.label} transaction {entry_id} update failed: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    return success_response(
        status_code=status.HTTP_200_OK,
        message=f"{instrument.label} transaction has been updated.",
        data={
            "transaction": serialize_entry(entry),
            "balance": ledger_repo.balance_for(member.id),
        },
    )


async def get_history(
    instrument: Instrument,
    member_id: int,
    current_cooperative: dict,
    ledger_repo: LedgerRepository,
    member_repo: MemberRepository,
):
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])
    member = member_repo.get_in_cooperative(member_id, coop_id)
    if member is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Member not found")

    entries = ledger_repo.history_for(member.id)
    return success_response(
        status_code=status.HTTP_200_OK,
        message=f"{instrument.label} transactions retrieved",
        data={
            "memberId": member.id,
            "transactions": [serialize_entry(entry) for entry in entries],
            "balance": ledger_repo.balance_for(member.id),
        },
    )
