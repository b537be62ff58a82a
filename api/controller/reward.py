"""
Reward controller - reward definitions and rewards given to cooperatives (admin).
"""
import uuid
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from database.postgres import get_db
from schemas.reward import (
    CreateRewardValidation,
    EditGivenRewardValidation,
    EditRewardValidation,
    GiveRewardValidation,
)
from service.reward import (
    create_reward,
    give_reward,
    list_given_rewards,
    list_rewards,
    update_given_reward,
    update_reward,
)
from store.repositories import CooperativeRepository, GivenRewardRepository, RewardRepository
from utils.auth import get_current_admin
from utils.dependencies import get_repository


async def create_reward_controller(
    request: CreateRewardValidation,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    reward_repo: RewardRepository = Depends(get_repository(RewardRepository)),
):
    return await create_reward(form=request, db=db, reward_repo=reward_repo)


async def update_reward_controller(
    reward_id: uuid.UUID,
    request: EditRewardValidation,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    reward_repo: RewardRepository = Depends(get_repository(RewardRepository)),
):
    return await update_reward(reward_id=reward_id, form=request, db=db, reward_repo=reward_repo)


async def list_rewards_controller(
    current_admin: dict = Depends(get_current_admin),
    reward_repo: RewardRepository = Depends(get_repository(RewardRepository)),
):
    return await list_rewards(reward_repo=reward_repo)


async def give_reward_controller(
    request: GiveRewardValidation,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    reward_repo: RewardRepository = Depends(get_repository(RewardRepository)),
    given_reward_repo: GivenRewardRepository = Depends(get_repository(GivenRewardRepository)),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
):
    return await give_reward(
        form=request,
        db=db,
        reward_repo=reward_repo,
        given_reward_repo=given_reward_repo,
        cooperative_repo=cooperative_repo,
    )


async def update_given_reward_controller(
    given_reward_id: uuid.UUID,
    request: EditGivenRewardValidation,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    reward_repo: RewardRepository = Depends(get_repository(RewardRepository)),
    given_reward_repo: GivenRewardRepository = Depends(get_repository(GivenRewardRepository)),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
):
    return await update_given_reward(
        given_reward_id=given_reward_id,
        form=request,
        db=db,
        reward_repo=reward_repo,
        given_reward_repo=given_reward_repo,
        cooperative_repo=cooperative_repo,
    )


async def list_given_rewards_controller(
    cooperative_id: Optional[uuid.UUID] = Query(None, alias="cooperativeId"),
    current_admin: dict = Depends(get_current_admin),
    given_reward_repo: GivenRewardRepository = Depends(get_repository(GivenRewardRepository)),
):
    return await list_given_rewards(given_reward_repo=given_reward_repo, cooperative_id=cooperative_id)
