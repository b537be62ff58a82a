"""
Loan controller - loans and repayments of the signed-in cooperative's members.
"""
import uuid
from typing import Any, Optional

from fastapi import Body, Depends, Query
from sqlalchemy.orm import Session

from database.postgres import get_db
from schemas.loan import AddLoanSchemaValidation, EditLoanSchemaValidation
from service.loan import add_repayment, create_loan, get_loan, list_loans, update_loan
from store.repositories import LoanRepository, MemberRepository, RepaymentRepository
from utils.auth import get_current_cooperative
from utils.dependencies import get_repository


async def create_loan_controller(
    request: AddLoanSchemaValidation,
    current_cooperative: dict = Depends(get_current_cooperative),
    db: Session = Depends(get_db),
    loan_repo: LoanRepository = Depends(get_repository(LoanRepository)),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
):
    return await create_loan(
        form=request,
        current_cooperative=current_cooperative,
        db=db,
        loan_repo=loan_repo,
        member_repo=member_repo,
    )


async def update_loan_controller(
    loan_id: uuid.UUID,
    request: EditLoanSchemaValidation,
    current_cooperative: dict = Depends(get_current_cooperative),
    db: Session = Depends(get_db),
    loan_repo: LoanRepository = Depends(get_repository(LoanRepository)),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
):
    return await update_loan(
        loan_id=loan_id,
        form=request,
        current_cooperative=current_cooperative,
        db=db,
        loan_repo=loan_repo,
        member_repo=member_repo,
    )


async def list_loans_controller(
    member_id: Optional[int] = Query(None, alias="memberId"),
    current_cooperative: dict = Depends(get_current_cooperative),
    loan_repo: LoanRepository = Depends(get_repository(LoanRepository)),
):
    return await list_loans(
        current_cooperative=current_cooperative, loan_repo=loan_repo, member_id=member_id
    )


async def get_loan_controller(
    loan_id: uuid.UUID,
    current_cooperative: dict = Depends(get_current_cooperative),
    loan_repo: LoanRepository = Depends(get_repository(LoanRepository)),
):
    return await get_loan(loan_id=loan_id, current_cooperative=current_cooperative, loan_repo=loan_repo)


async def add_repayment_controller(
    loan_id: uuid.UUID,
    payload: Any = Body(None),
    current_cooperative: dict = Depends(get_current_cooperative),
    db: Session = Depends(get_db),
    loan_repo: LoanRepository = Depends(get_repository(LoanRepository)),
    repayment_repo: RepaymentRepository = Depends(get_repository(RepaymentRepository)),
):
    return await add_repayment(
        loan_id=loan_id,
        payload=payload,
        current_cooperative=current_cooperative,
        db=db,
        loan_repo=loan_repo,
        repayment_repo=repayment_repo,
    )
