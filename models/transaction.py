from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Enum
from sqlalchemy.orm import declared_attr, relationship
from database.postgres import Base
from models.audit import AuditMixin
from store.enums import TransactionType


class LedgerEntryMixin:
    """Columns shared by the shares and savings ledgers."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(
        Enum(TransactionType, values_callable=lambda obj: [e.value for e in obj], name="transaction_type"),
        nullable=False,
    )
    amount = Column(Numeric(12, 2), nullable=False)
    remarks = Column(String(255), nullable=True)

    @declared_attr
    def member_id(cls):
        return Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True)

    @declared_attr
    def member(cls):
        return relationship("Member")


class ShareTransaction(LedgerEntryMixin, AuditMixin, Base):
    __tablename__ = "share_transactions"


class SavingTransaction(LedgerEntryMixin, AuditMixin, Base):
    __tablename__ = "saving_transactions"
