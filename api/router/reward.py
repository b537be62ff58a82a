from fastapi import APIRouter

from api.controller.reward import (
    create_reward_controller,
    give_reward_controller,
    list_given_rewards_controller,
    list_rewards_controller,
    update_given_reward_controller,
    update_reward_controller,
)

reward_router = APIRouter(tags=["Rewards"])

reward_router.add_api_route(
    "/rewards",
    endpoint=create_reward_controller,
    methods=["POST"],
    summary="Define a reward",
)

reward_router.add_api_route(
    "/rewards",
    endpoint=list_rewards_controller,
    methods=["GET"],
    summary="List reward definitions",
)

reward_router.add_api_route(
    "/rewards/{reward_id}",
    endpoint=update_reward_controller,
    methods=["PUT"],
    summary="Update a reward definition",
)

reward_router.add_api_route(
    "/given-rewards",
    endpoint=give_reward_controller,
    methods=["POST"],
    summary="Give a reward to a cooperative",
)

reward_router.add_api_route(
    "/given-rewards",
    endpoint=list_given_rewards_controller,
    methods=["GET"],
    summary="List rewards given, newest first",
)

reward_router.add_api_route(
    "/given-rewards/{given_reward_id}",
    endpoint=update_given_reward_controller,
    methods=["PUT"],
    summary="Update a given reward",
)
