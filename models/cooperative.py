import uuid

from sqlalchemy import Column, String, Date, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from database.postgres import Base
from models.audit import AuditMixin


class Cooperative(AuditMixin, Base):
    __tablename__ = "cooperatives"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    registration_number = Column(String(100), nullable=False)
    registration_date = Column(Date, nullable=False)
    category_id = Column(Uuid, ForeignKey("cooperative_categories.id"), nullable=False)
    initials = Column(String(50), nullable=False)
    address = Column(String(255), nullable=False)

    category = relationship("CooperativeCategory", back_populates="cooperatives")
    account = relationship(
        "CooperativeAccount",
        uselist=False,
        back_populates="cooperative",
        cascade="all, delete-orphan",
    )
    members = relationship("Member", back_populates="cooperative")
    given_rewards = relationship("GivenReward", back_populates="cooperative")


class CooperativeAccount(AuditMixin, Base):
    """Administrative contact that signs in on behalf of a cooperative."""
    __tablename__ = "cooperative_accounts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    cooperative_id = Column(
        Uuid, ForeignKey("cooperatives.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    given_name = Column(String(100), nullable=False)
    middle_name = Column(String(100), nullable=False)
    surname = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)

    cooperative = relationship("Cooperative", back_populates="account")


class AdminAccount(AuditMixin, Base):
    __tablename__ = "admin_accounts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(150), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
