import uuid

from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from database.postgres import Base
from models.audit import AuditMixin


class Member(AuditMixin, Base):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True, autoincrement=True)
    cooperative_id = Column(Uuid, ForeignKey("cooperatives.id"), nullable=False)
    given_name = Column(String(100), nullable=False)
    middle_name = Column(String(100), nullable=False, default="")
    surname = Column(String(100), nullable=False)
    birthday = Column(Date, nullable=False)
    gender = Column(String(30), nullable=False, default="")
    educational_attainment = Column(String(100), nullable=False, default="")
    civil_status = Column(String(30), nullable=False, default="")
    tin = Column(String(30), nullable=True)
    spouse_name = Column(String(150), nullable=True)
    present_address = Column(String(255), nullable=False, default="")
    provincial_address = Column(String(255), nullable=True)
    office_address = Column(String(255), nullable=True)
    office_phone_number = Column(String(30), nullable=True)
    registration_fee = Column(Numeric(12, 2), nullable=True)

    cooperative = relationship("Cooperative", back_populates="members")
    account = relationship(
        "MemberAccount",
        uselist=False,
        back_populates="member",
        cascade="all, delete-orphan",
    )
    dependents = relationship(
        "Dependent", back_populates="member", cascade="all, delete-orphan"
    )
    loans = relationship("Loan", back_populates="member")

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.given_name, self.middle_name, self.surname) if part)


class MemberAccount(AuditMixin, Base):
    __tablename__ = "member_accounts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), unique=True, nullable=False)
    email = Column(String(255), nullable=False)
    mobile_number = Column(String(20), nullable=False, default="")
    # Members entered by the cooperative have no password until they register online
    password = Column(String(255), nullable=True)

    member = relationship("Member", back_populates="account")


class Dependent(AuditMixin, Base):
    __tablename__ = "dependents"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(150), nullable=False)
    relationship_to_member = Column("relationship", String(50), nullable=False)
    birthday = Column(Date, nullable=False)

    member = relationship("Member", back_populates="dependents")
