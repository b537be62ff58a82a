from fastapi import APIRouter

from api.controller.member import (
    create_member_controller,
    get_member_controller,
    get_registration_controller,
    list_members_controller,
    register_member_controller,
    update_member_controller,
)

registration_router = APIRouter(tags=["Registration"])

registration_router.add_api_route(
    "/cooperatives/{cooperative_id}/members",
    endpoint=register_member_controller,
    methods=["POST"],
    summary="Register online as a member of a cooperative",
)

registration_router.add_api_route(
    "/registrations/{token}",
    endpoint=get_registration_controller,
    methods=["GET"],
    summary="Look up a fresh registration by its token",
)

member_router = APIRouter(prefix="/members", tags=["Members"])

member_router.add_api_route(
    "",
    endpoint=create_member_controller,
    methods=["POST"],
    summary="Add a member",
)

member_router.add_api_route(
    "",
    endpoint=list_members_controller,
    methods=["GET"],
    summary="List members of the signed-in cooperative",
)

member_router.add_api_route(
    "/{member_id}",
    endpoint=get_member_controller,
    methods=["GET"],
    summary="Get a member with balances",
)

member_router.add_api_route(
    "/{member_id}",
    endpoint=update_member_controller,
    methods=["PUT"],
    summary="Update a member",
)
