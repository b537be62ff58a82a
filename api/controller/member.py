"""
Member controller - online registration (public) and member records (cooperative session).
"""
from typing import Any, Optional

from fastapi import Body, Depends, Query
from sqlalchemy.orm import Session

from database.postgres import get_db
from schemas.member import EditMemberValidationSchema, NewMemberValidationSchema
from service.member import (
    create_member,
    get_member,
    get_registration,
    list_members,
    register_member_account,
    update_member,
)
from store.repositories import (
    CooperativeRepository,
    DependentRepository,
    LoanRepository,
    MemberAccountRepository,
    MemberRepository,
    SavingTransactionRepository,
    SessionRepository,
    ShareTransactionRepository,
)
from utils.auth import get_current_cooperative
from utils.dependencies import get_repository


async def register_member_controller(
    cooperative_id: str,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
    member_account_repo: MemberAccountRepository = Depends(get_repository(MemberAccountRepository)),
    session_repo: SessionRepository = Depends(get_repository(SessionRepository)),
):
    return await register_member_account(
        cooperative_id=cooperative_id,
        payload=payload,
        db=db,
        cooperative_repo=cooperative_repo,
        member_repo=member_repo,
        member_account_repo=member_account_repo,
        session_repo=session_repo,
    )


async def get_registration_controller(
    token: str,
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
    session_repo: SessionRepository = Depends(get_repository(SessionRepository)),
):
    return await get_registration(
        token=token,
        member_repo=member_repo,
        cooperative_repo=cooperative_repo,
        session_repo=session_repo,
    )


async def create_member_controller(
    request: NewMemberValidationSchema,
    current_cooperative: dict = Depends(get_current_cooperative),
    db: Session = Depends(get_db),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
    dependent_repo: DependentRepository = Depends(get_repository(DependentRepository)),
):
    return await create_member(
        form=request,
        current_cooperative=current_cooperative,
        db=db,
        member_repo=member_repo,
        dependent_repo=dependent_repo,
    )


async def update_member_controller(
    member_id: int,
    request: EditMemberValidationSchema,
    current_cooperative: dict = Depends(get_current_cooperative),
    db: Session = Depends(get_db),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
    dependent_repo: DependentRepository = Depends(get_repository(DependentRepository)),
):
    return await update_member(
        member_id=member_id,
        form=request,
        current_cooperative=current_cooperative,
        db=db,
        member_repo=member_repo,
        dependent_repo=dependent_repo,
    )


async def list_members_controller(
    search: Optional[str] = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    current_cooperative: dict = Depends(get_current_cooperative),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
):
    return await list_members(
        current_cooperative=current_cooperative,
        member_repo=member_repo,
        search=search,
        limit=limit,
        offset=offset,
    )


async def get_member_controller(
    member_id: int,
    current_cooperative: dict = Depends(get_current_cooperative),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
    share_repo: ShareTransactionRepository = Depends(get_repository(ShareTransactionRepository)),
    saving_repo: SavingTransactionRepository = Depends(get_repository(SavingTransactionRepository)),
    loan_repo: LoanRepository = Depends(get_repository(LoanRepository)),
):
    return await get_member(
        member_id=member_id,
        current_cooperative=current_cooperative,
        member_repo=member_repo,
        share_repo=share_repo,
        saving_repo=saving_repo,
        loan_repo=loan_repo,
    )
