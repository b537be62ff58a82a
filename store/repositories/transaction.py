"""
Ledger repositories for share and saving transactions.
"""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from models.member import Member
from models.transaction import ShareTransaction, SavingTransaction
from store.enums import TransactionType
from store.repositories.base import BaseRepository


class LedgerRepository(BaseRepository):
    """Balance and history queries shared by both ledgers"""

    def _signed_amount(self):
        return case(
            (self.model.type == TransactionType.WITHDRAW, -self.model.amount),
            else_=self.model.amount,
        )

    def balance_for(self, member_id: int, exclude_id: Optional[int] = None) -> Decimal:
        """Deposits minus withdrawals for a member, optionally ignoring one entry"""
        query = self.db.query(func.coalesce(func.sum(self._signed_amount()), 0)).filter(
            self.model.member_id == member_id
        )
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return Decimal(str(query.scalar() or 0))

    def total_for_cooperative(self, cooperative_id: UUID) -> Decimal:
        """Net balance across every member of a cooperative"""
        total = (
            self.db.query(func.coalesce(func.sum(self._signed_amount()), 0))
            .join(Member, Member.id == self.model.member_id)
            .filter(Member.cooperative_id == cooperative_id)
            .scalar()
        )
        return Decimal(str(total or 0))

    def history_for(self, member_id: int) -> List:
        """All entries for a member, newest first"""
        return (
            self.db.query(self.model)
            .filter(self.model.member_id == member_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .all()
        )

    def get_in_cooperative(self, entry_id: int, cooperative_id: UUID):
        """Get an entry only if its member belongs to the cooperative"""
        return (
            self.db.query(self.model)
            .join(Member, Member.id == self.model.member_id)
            .filter(self.model.id == entry_id, Member.cooperative_id == cooperative_id)
            .first()
        )


class ShareTransactionRepository(LedgerRepository):
    """Repository for ShareTransaction model"""

    def __init__(self, db: Session):
        super().__init__(ShareTransaction, db)


class SavingTransactionRepository(LedgerRepository):
    """Repository for SavingTransaction model"""

    def __init__(self, db: Session):
        super().__init__(SavingTransaction, db)
