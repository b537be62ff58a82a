import uuid

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.schema import UniqueConstraint
from database.postgres import Base
from models.audit import AuditMixin


class Criteria(AuditMixin, Base):
    __tablename__ = "criteria"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(150), nullable=False)
    financial_performance_points = Column(Integer, nullable=False)
    organization_management_points = Column(Integer, nullable=False)

    fields = relationship(
        "CriteriaField",
        back_populates="criteria",
        order_by="CriteriaField.position",
        cascade="all, delete-orphan",
    )
    categories = relationship("CooperativeCategory", back_populates="criteria")


class CriteriaField(AuditMixin, Base):
    __tablename__ = "criteria_fields"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    criteria_id = Column(Uuid, ForeignKey("criteria.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(150), nullable=False)
    max_points = Column(Integer, nullable=False, default=0)
    position = Column(Integer, nullable=False, default=0)

    criteria = relationship("Criteria", back_populates="fields")


class CooperativeCategory(AuditMixin, Base):
    __tablename__ = "cooperative_categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(150), nullable=False)
    required_assets = Column(Numeric(14, 2), nullable=False)
    criteria_id = Column(Uuid, ForeignKey("criteria.id"), nullable=False)

    criteria = relationship("Criteria", back_populates="categories")
    cooperatives = relationship("Cooperative", back_populates="category")


class CooperativeScore(AuditMixin, Base):
    """Default criteria points a cooperative earned for a category."""
    __tablename__ = "cooperative_scores"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    cooperative_id = Column(Uuid, ForeignKey("cooperatives.id", ondelete="CASCADE"), nullable=False)
    category_id = Column(Uuid, ForeignKey("cooperative_categories.id", ondelete="CASCADE"), nullable=False)
    financial_performance_points = Column(Integer, nullable=False, default=0)
    organization_management_points = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("cooperative_id", "category_id", name="unique_cooperative_score"),
    )


class CriteriaFieldPoint(AuditMixin, Base):
    __tablename__ = "criteria_field_points"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    cooperative_id = Column(Uuid, ForeignKey("cooperatives.id", ondelete="CASCADE"), nullable=False)
    category_id = Column(Uuid, ForeignKey("cooperative_categories.id", ondelete="CASCADE"), nullable=False)
    criteria_field_id = Column(Uuid, ForeignKey("criteria_fields.id", ondelete="CASCADE"), nullable=False)
    points = Column(Integer, nullable=False, default=0)

    criteria_field = relationship("CriteriaField")

    __table_args__ = (
        UniqueConstraint(
            "cooperative_id", "category_id", "criteria_field_id", name="unique_criteria_field_point"
        ),
    )
