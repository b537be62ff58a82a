"""
Cooperative controller - admin management of cooperatives plus both dashboards.
"""
import uuid

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from database.postgres import get_db
from schemas.cooperative import CreateCooperativeSchema, EditCooperativeSchema
from service.cooperative import (
    admin_dashboard,
    cooperative_dashboard,
    create_cooperative,
    get_cooperative,
    list_cooperatives,
    update_cooperative,
)
from store.repositories import (
    CategoryRepository,
    CooperativeAccountRepository,
    CooperativeRepository,
    LoanRepository,
    MemberRepository,
    RewardRepository,
    SavingTransactionRepository,
    ShareTransactionRepository,
)
from utils.auth import get_current_admin, get_current_cooperative
from utils.dependencies import get_repository


async def create_cooperative_controller(
    request: CreateCooperativeSchema,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
    account_repo: CooperativeAccountRepository = Depends(get_repository(CooperativeAccountRepository)),
    category_repo: CategoryRepository = Depends(get_repository(CategoryRepository)),
):
    return await create_cooperative(
        form=request,
        db=db,
        cooperative_repo=cooperative_repo,
        account_repo=account_repo,
        category_repo=category_repo,
    )


async def update_cooperative_controller(
    cooperative_id: uuid.UUID,
    request: EditCooperativeSchema,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
    account_repo: CooperativeAccountRepository = Depends(get_repository(CooperativeAccountRepository)),
    category_repo: CategoryRepository = Depends(get_repository(CategoryRepository)),
):
    return await update_cooperative(
        cooperative_id=cooperative_id,
        form=request,
        db=db,
        cooperative_repo=cooperative_repo,
        account_repo=account_repo,
        category_repo=category_repo,
    )


async def list_cooperatives_controller(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    current_admin: dict = Depends(get_current_admin),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
):
    return await list_cooperatives(cooperative_repo=cooperative_repo, skip=skip, limit=limit)


async def get_cooperative_controller(
    cooperative_id: uuid.UUID,
    current_admin: dict = Depends(get_current_admin),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
):
    return await get_cooperative(cooperative_id=cooperative_id, cooperative_repo=cooperative_repo)


async def cooperative_dashboard_controller(
    current_cooperative: dict = Depends(get_current_cooperative),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
    share_repo: ShareTransactionRepository = Depends(get_repository(ShareTransactionRepository)),
    saving_repo: SavingTransactionRepository = Depends(get_repository(SavingTransactionRepository)),
    loan_repo: LoanRepository = Depends(get_repository(LoanRepository)),
):
    return await cooperative_dashboard(
        current_cooperative=current_cooperative,
        member_repo=member_repo,
        share_repo=share_repo,
        saving_repo=saving_repo,
        loan_repo=loan_repo,
    )


async def admin_dashboard_controller(
    current_admin: dict = Depends(get_current_admin),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
    reward_repo: RewardRepository = Depends(get_repository(RewardRepository)),
    category_repo: CategoryRepository = Depends(get_repository(CategoryRepository)),
):
    return await admin_dashboard(
        current_admin=current_admin,
        cooperative_repo=cooperative_repo,
        reward_repo=reward_repo,
        category_repo=category_repo,
    )
