"""
Reward repository for reward definitions and rewards given to cooperatives.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from models.reward import Reward, GivenReward
from store.repositories.base import BaseRepository


class RewardRepository(BaseRepository[Reward]):
    """Repository for Reward model"""

    def __init__(self, db: Session):
        super().__init__(Reward, db)

    def list_by_name(self) -> List[Reward]:
        return self.db.query(Reward).order_by(Reward.name).all()


class GivenRewardRepository(BaseRepository[GivenReward]):
    """Repository for GivenReward model"""

    def __init__(self, db: Session):
        super().__init__(GivenReward, db)

    def list_recent(self, cooperative_id: Optional[UUID] = None) -> List[GivenReward]:
        """Given rewards, newest first, optionally for one cooperative"""
        query = self.db.query(GivenReward).options(
            joinedload(GivenReward.reward), joinedload(GivenReward.cooperative)
        )
        if cooperative_id is not None:
            query = query.filter(GivenReward.cooperative_id == cooperative_id)
        return query.order_by(GivenReward.date.desc()).all()
