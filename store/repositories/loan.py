"""
Loan repository for loan and repayment database operations.
"""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from models.loan import Loan, Repayment
from models.member import Member
from store.repositories.base import BaseRepository


class LoanRepository(BaseRepository[Loan]):
    """Repository for Loan model"""

    def __init__(self, db: Session):
        super().__init__(Loan, db)

    def get_in_cooperative(self, loan_id: UUID, cooperative_id: UUID) -> Optional[Loan]:
        """Get a loan only if its borrower belongs to the cooperative"""
        return (
            self.db.query(Loan)
            .join(Member, Member.id == Loan.member_id)
            .options(selectinload(Loan.repayments), selectinload(Loan.member))
            .filter(Loan.id == loan_id, Member.cooperative_id == cooperative_id)
            .first()
        )

    def list_by_cooperative(
        self, cooperative_id: UUID, member_id: Optional[int] = None
    ) -> List[Loan]:
        query = (
            self.db.query(Loan)
            .join(Member, Member.id == Loan.member_id)
            .options(selectinload(Loan.repayments), selectinload(Loan.member))
            .filter(Member.cooperative_id == cooperative_id)
        )
        if member_id is not None:
            query = query.filter(Loan.member_id == member_id)
        return query.order_by(Loan.created_at.desc()).all()

    def total_repaid(self, loan_id: UUID) -> Decimal:
        total = (
            self.db.query(func.coalesce(func.sum(Repayment.amount), 0))
            .filter(Repayment.loan_id == loan_id)
            .scalar()
        )
        return Decimal(str(total or 0))

    def remaining_balance(self, loan: Loan) -> Decimal:
        """Total payable minus everything repaid so far"""
        return loan.total_payable - self.total_repaid(loan.id)

    def outstanding_for_cooperative(self, cooperative_id: UUID) -> Decimal:
        return sum(
            (max(self.remaining_balance(loan), Decimal("0")) for loan in self.list_by_cooperative(cooperative_id)),
            Decimal("0"),
        )


class RepaymentRepository(BaseRepository[Repayment]):
    """Repository for Repayment model"""

    def __init__(self, db: Session):
        super().__init__(Repayment, db)
