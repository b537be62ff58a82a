from fastapi import status
from sqlalchemy.orm import Session
from typing import Optional
import uuid
import logging

from models.reward import GivenReward, Reward
from schemas.reward import (
    CreateRewardValidation,
    EditGivenRewardValidation,
    EditRewardValidation,
    GiveRewardValidation,
)
from store.repositories import CooperativeRepository, GivenRewardRepository, RewardRepository
from utils.response import UNKNOWN_ERROR_MESSAGE, error_response, success_response

logger = logging.getLogger(__name__)


def serialize_reward(reward: Reward) -> dict:
    return {
        "id": reward.id,
        "name": reward.name,
        "description": reward.description,
        "certificateType": reward.certificate_type,
        "certificateDescription": reward.certificate_description,
    }


def serialize_given_reward(given: GivenReward) -> dict:
    return {
        "id": given.id,
        "rewardId": given.reward_id,
        "rewardName": given.reward.name if given.reward else None,
        "cooperativeId": given.cooperative_id,
        "cooperativeName": given.cooperative.name if given.cooperative else None,
        "date": given.date,
    }


def _reward_values(form: CreateRewardValidation) -> dict:
    return {
        "name": form.name,
        "description": form.description,
        "certificate_type": form.certificate_type,
        "certificate_description": form.certificate_description,
    }


def _failed(action: str, e: Exception, db: Session):
    db.rollback()
    logger.error(f"{action} failed: {str(e)}", exc_info=True)
    return error_response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE)


async def create_reward(form: CreateRewardValidation, db: Session, reward_repo: RewardRepository):
    try:
        reward = reward_repo.create(_reward_values(form))
        db.commit()
    except Exception as e:
        return _failed("Reward creation", e, db)

    return success_response(
        status_code=status.HTTP_201_CREATED,
        message="Reward has been added.",
        data=serialize_reward(reward),
    )


async def update_reward(
    reward_id: uuid.UUID, form: EditRewardValidation, db: Session, reward_repo: RewardRepository
):
    if form.id != reward_id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Reward id mismatch.")

    reward = reward_repo.get_by_id(reward_id)
    if reward is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Reward not found")

    try:
        reward_repo.update(reward, _reward_values(form))
        db.commit()
    except Exception as e:
        return _failed(f"Reward {reward_id} update", e, db)

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Reward has been updated.",
        data=serialize_reward(reward),
    )


async def list_rewards(reward_repo: RewardRepository):
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Rewards retrieved",
        data=[serialize_reward(reward) for reward in reward_repo.list_by_name()],
    )


async def give_reward(
    form: GiveRewardValidation,
    db: Session,
    reward_repo: RewardRepository,
    given_reward_repo: GivenRewardRepository,
    cooperative_repo: CooperativeRepository,
):
    """Grant a reward to a cooperative on a given date."""
    if reward_repo.get_by_id(form.reward_id) is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Reward not found")
    if cooperative_repo.get_by_id(form.cooperative_id) is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Cooperative not found")

    try:
        given = given_reward_repo.create(
            {"reward_id": form.reward_id, "cooperative_id": form.cooperative_id, "date": form.date}
        )
        db.commit()
        db.refresh(given)
    except Exception as e:
        return _failed("Giving reward", e, db)

    logger.info(f"Reward {form.reward_id} given to cooperative {form.cooperative_id}")
    return success_response(
        status_code=status.HTTP_201_CREATED,
        message="Reward has been given.",
        data=serialize_given_reward(given),
    )


async def update_given_reward(
    given_reward_id: uuid.UUID,
    form: EditGivenRewardValidation,
    db: Session,
    reward_repo: RewardRepository,
    given_reward_repo: GivenRewardRepository,
    cooperative_repo: CooperativeRepository,
):
    if form.id != given_reward_id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Given reward id mismatch.")

    given = given_reward_repo.get_by_id(given_reward_id)
    if given is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Given reward not found")
    if reward_repo.get_by_id(form.reward_id) is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Reward not found")
    if cooperative_repo.get_by_id(form.cooperative_id) is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Cooperative not found")

    try:
        given_reward_repo.update(
            given,
            {"reward_id": form.reward_id, "cooperative_id": form.cooperative_id, "date": form.date},
        )
        db.commit()
        db.refresh(given)
    except Exception as e:
        return _failed(f"Given reward {given_reward_id} update", e, db)

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Given reward has been updated.",
        data=serialize_given_reward(given),
    )


async def list_given_rewards(
    given_reward_repo: GivenRewardRepository, cooperative_id: Optional[uuid.UUID] = None
):
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Given rewards retrieved",
        data=[serialize_given_reward(given) for given in given_reward_repo.list_recent(cooperative_id)],
    )
