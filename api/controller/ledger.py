"""
Ledger controller - share and saving transactions of the signed-in cooperative.
"""
from typing import Any

from fastapi import Body, Depends
from sqlalchemy.orm import Session

from database.postgres import get_db
from service.ledger import SAVINGS, SHARES, get_history, record_transaction, update_transaction
from store.repositories import (
    MemberRepository,
    SavingTransactionRepository,
    ShareTransactionRepository,
)
from utils.auth import get_current_cooperative
from utils.dependencies import get_repository


async def add_share_controller(
    payload: Any = Body(None),
    current_cooperative: dict = Depends(get_current_cooperative),
    db: Session = Depends(get_db),
    share_repo: ShareTransactionRepository = Depends(get_repository(ShareTransactionRepository)),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
):
    return await record_transaction(
        instrument=SHARES,
        payload=payload,
        current_cooperative=current_cooperative,
        db=db,
        ledger_repo=share_repo,
        member_repo=member_repo,
    )


async def edit_share_controller(
    transaction_id: int,
    payload: Any = Body(None),
    current_cooperative: dict = Depends(get_current_cooperative),
    db: Session = Depends(get_db),
    share_repo: ShareTransactionRepository = Depends(get_repository(ShareTransactionRepository)),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
):
    return await update_transaction(
        instrument=SHARES,
        entry_id=transaction_id,
        payload=payload,
        current_cooperative=current_cooperative,
        db=db,
        ledger_repo=share_repo,
        member_repo=member_repo,
    )


async def share_history_controller(
    member_id: int,
    current_cooperative: dict = Depends(get_current_cooperative),
    share_repo: ShareTransactionRepository = Depends(get_repository(ShareTransactionRepository)),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
):
    return await get_history(
        instrument=SHARES,
        member_id=member_id,
        current_cooperative=current_cooperative,
        ledger_repo=share_repo,
        member_repo=member_repo,
    )


async def add_saving_controller(
    payload: Any = Body(None),
    current_cooperative: dict = Depends(get_current_cooperative),
    db: Session = Depends(get_db),
    saving_repo: SavingTransactionRepository = Depends(get_repository(SavingTransactionRepository)),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
):
    return await record_transaction(
        instrument=SAVINGS,
        payload=payload,
        current_cooperative=current_cooperative,
        db=db,
        ledger_repo=saving_repo,
        member_repo=member_repo,
    )


async def edit_saving_controller(
    transaction_id: int,
    payload: Any = Body(None),
    current_cooperative: dict = Depends(get_current_cooperative),
    db: Session = Depends(get_db),
    saving_repo: SavingTransactionRepository = Depends(get_repository(SavingTransactionRepository)),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
):
    return await update_transaction(
        instrument=SAVINGS,
        entry_id=transaction_id,
        payload=payload,
        current_cooperative=current_cooperative,
        db=db,
        ledger_repo=saving_repo,
        member_repo=member_repo,
    )


async def saving_history_controller(
    member_id: int,
    current_cooperative: dict = Depends(get_current_cooperative),
    saving_repo: SavingTransactionRepository = Depends(get_repository(SavingTransactionRepository)),
    member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
):
    return await get_history(
        instrument=SAVINGS,
        member_id=member_id,
        current_cooperative=current_cooperative,
        ledger_repo=saving_repo,
        member_repo=member_repo,
    )
