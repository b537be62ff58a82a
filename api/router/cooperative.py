from fastapi import APIRouter

from api.controller.cooperative import (
    create_cooperative_controller,
    get_cooperative_controller,
    list_cooperatives_controller,
    update_cooperative_controller,
)

cooperative_router = APIRouter(prefix="/cooperatives", tags=["Cooperatives"])

cooperative_router.add_api_route(
    "",
    endpoint=create_cooperative_controller,
    methods=["POST"],
    summary="Register a cooperative and its sign-in account",
)

cooperative_router.add_api_route(
    "",
    endpoint=list_cooperatives_controller,
    methods=["GET"],
    summary="List cooperatives",
)

cooperative_router.add_api_route(
    "/{cooperative_id}",
    endpoint=get_cooperative_controller,
    methods=["GET"],
    summary="Get a cooperative with its account",
)

cooperative_router.add_api_route(
    "/{cooperative_id}",
    endpoint=update_cooperative_controller,
    methods=["PUT"],
    summary="Update a cooperative and its account",
)
