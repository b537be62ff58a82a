from decimal import Decimal
from fastapi import status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import Any, Optional
import uuid
import logging

from models.loan import Loan
from schemas.loan import (
    AddLoanSchemaValidation,
    AddRepaymentModalSchemaValidation,
    EditLoanSchemaValidation,
)
from store.repositories import LoanRepository, MemberRepository, RepaymentRepository
from utils.response import (
    UNKNOWN_ERROR_MESSAGE,
    error_response,
    success_response,
    validation_error_response,
)

logger = logging.getLogger(__name__)


def serialize_loan(loan: Loan, loan_repo: LoanRepository, include_repayments: bool = False) -> dict:
    repaid = loan_repo.total_repaid(loan.id)
    data = {
        "id": loan.id,
        "memberId": loan.member_id,
        "memberName": loan.member.full_name if loan.member else None,
        "amount": loan.amount,
        "interest": loan.interest,
        "tenure": loan.tenure,
        "totalPayable": loan.total_payable,
        "totalRepaid": repaid,
        "remainingBalance": loan.total_payable - repaid,
        "createdAt": loan.created_at,
    }
    if include_repayments:
        data["repayments"] = [
            {
                "id": repayment.id,
                "amount": repayment.amount,
                "remarks": repayment.remarks,
                "createdAt": repayment.created_at,
            }
            for repayment in loan.repayments
        ]
    return data


async def create_loan(
    form: AddLoanSchemaValidation,
    current_cooperative: dict,
    db: Session,
    loan_repo: LoanRepository,
    member_repo: MemberRepository,
):
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])
    member = member_repo.get_in_cooperative(form.member_id, coop_id)
    if member is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Member not found")

    try:
        loan = loan_repo.create(
            {
                "member_id": member.id,
                "amount": form.amount,
                "interest": form.interest,
                "tenure": form.tenure,
            }
        )
        db.commit()
        db.refresh(loan)
    except Exception as e:
        db.rollback()
        logger.error(f"Loan creation failed: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    logger.info(f"Loan {loan.id} of {loan.amount} granted to member {member.id}")
    return success_response(
        status_code=status.HTTP_201_CREATED,
        message="Loan has been added.",
        data=serialize_loan(loan, loan_repo),
    )


async def update_loan(
    loan_id: uuid.UUID,
    form: EditLoanSchemaValidation,
    current_cooperative: dict,
    db: Session,
    loan_repo: LoanRepository,
    member_repo: MemberRepository,
):
    """Edit loan terms; the new total payable must still cover what was repaid."""
    if form.id != loan_id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Loan id mismatch.")

    coop_id = uuid.UUID(current_cooperative["cooperative_id"])
    loan = loan_repo.get_in_cooperative(loan_id, coop_id)
    if loan is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Loan not found")

    member = member_repo.get_in_cooperative(form.member_id, coop_id)
    if member is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Member not found")

    repaid = loan_repo.total_repaid(loan.id)
    new_total = (form.amount * (1 + Decimal(form.interest) / 100)).quantize(Decimal("0.01"))
    if new_total < repaid:
        return error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Total payable cannot be less than the amount already repaid.",
        )

    try:
        loan_repo.update(
            loan,
            {
                "member_id": member.id,
                "amount": form.amount,
                "interest": form.interest,
                "tenure": form.tenure,
            },
        )
        db.commit()
        db.refresh(loan)
    except Exception as e:
        db.rollback()
        logger.error(f"Loan {loan_id} update failed: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Loan has been updated.",
        data=serialize_loan(loan, loan_repo, include_repayments=True),
    )


async def list_loans(
    current_cooperative: dict,
    loan_repo: LoanRepository,
    member_id: Optional[int] = None,
):
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])
    loans = loan_repo.list_by_cooperative(coop_id, member_id=member_id)
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Loans retrieved",
        data=[serialize_loan(loan, loan_repo) for loan in loans],
    )


async def get_loan(loan_id: uuid.UUID, current_cooperative: dict, loan_repo: LoanRepository):
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])
    loan = loan_repo.get_in_cooperative(loan_id, coop_id)
    if loan is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Loan not found")

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Loan retrieved",
        data=serialize_loan(loan, loan_repo, include_repayments=True),
    )


async def add_repayment(
    loan_id: uuid.UUID,
    payload: Any,
    current_cooperative: dict,
    db: Session,
    loan_repo: LoanRepository,
    repayment_repo: RepaymentRepository,
):
    """
    Record a repayment against a loan.

    The remaining balance the amount is checked against is computed from the
    stored repayments and replaces whatever the client sent.
    """
    payload = payload if isinstance(payload, dict) else {}
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])

    loan = loan_repo.get_in_cooperative(loan_id, coop_id)
    if loan is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Loan not found")

    data = {"loanId": str(loan.id), **payload}
    data.pop("remaining_balance", None)
    data["remainingBalance"] = loan_repo.remaining_balance(loan)
    try:
        form = AddRepaymentModalSchemaValidation.model_validate(data)
    except ValidationError as e:
        return validation_error_response(e)

    if form.loan_id != loan.id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Loan id mismatch.")

    try:
        repayment = repayment_repo.create(
            {"loan_id": loan.id, "amount": form.amount, "remarks": form.remarks}
        )
        db.commit()
        db.refresh(loan)
    except Exception as e:
        db.rollback()
        logger.error(f"Repayment for loan {loan_id} failed: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    logger.info(f"Repayment {repayment.id} of {repayment.amount} recorded for loan {loan.id}")
    return success_response(
        status_code=status.HTTP_201_CREATED,
        message="Repayment has been added.",
        data=serialize_loan(loan, loan_repo, include_repayments=True),
    )
