import uuid

from sqlalchemy import Column, String, Text, Date, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from database.postgres import Base
from models.audit import AuditMixin


class Reward(AuditMixin, Base):
    __tablename__ = "rewards"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=False)
    certificate_type = Column(String(150), nullable=False)
    certificate_description = Column(Text, nullable=False)

    given_rewards = relationship("GivenReward", back_populates="reward")


class GivenReward(AuditMixin, Base):
    __tablename__ = "given_rewards"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    reward_id = Column(Uuid, ForeignKey("rewards.id"), nullable=False)
    cooperative_id = Column(Uuid, ForeignKey("cooperatives.id"), nullable=False)
    date = Column(Date, nullable=False)

    reward = relationship("Reward", back_populates="given_rewards")
    cooperative = relationship("Cooperative", back_populates="given_rewards")
