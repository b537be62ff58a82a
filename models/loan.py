import uuid
from decimal import Decimal

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from database.postgres import Base
from models.audit import AuditMixin


class Loan(AuditMixin, Base):
    __tablename__ = "loans"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id = Column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    interest = Column(Integer, nullable=False)  # percent, flat over the tenure
    tenure = Column(Integer, nullable=False)  # months

    member = relationship("Member", back_populates="loans")
    repayments = relationship(
        "Repayment",
        back_populates="loan",
        order_by="Repayment.created_at",
        cascade="all, delete-orphan",
    )

    @property
    def total_payable(self) -> Decimal:
        total = Decimal(self.amount) * (1 + Decimal(self.interest) / 100)
        return total.quantize(Decimal("0.01"))


class Repayment(AuditMixin, Base):
    __tablename__ = "repayments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    loan_id = Column(Uuid, ForeignKey("loans.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    remarks = Column(String(255), nullable=True)

    loan = relationship("Loan", back_populates="repayments")
