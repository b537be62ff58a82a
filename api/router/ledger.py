from fastapi import APIRouter

from api.controller.ledger import (
    add_saving_controller,
    add_share_controller,
    edit_saving_controller,
    edit_share_controller,
    saving_history_controller,
    share_history_controller,
)

ledger_router = APIRouter(tags=["Ledger"])

ledger_router.add_api_route(
    "/shares",
    endpoint=add_share_controller,
    methods=["POST"],
    summary="Record a share deposit or withdrawal",
)

ledger_router.add_api_route(
    "/shares/{transaction_id}",
    endpoint=edit_share_controller,
    methods=["PUT"],
    summary="Edit a share transaction",
)

ledger_router.add_api_route(
    "/members/{member_id}/shares",
    endpoint=share_history_controller,
    methods=["GET"],
    summary="Share transactions and balance of a member",
)

ledger_router.add_api_route(
    "/savings",
    endpoint=add_saving_controller,
    methods=["POST"],
    summary="Record a saving deposit or withdrawal",
)

ledger_router.add_api_route(
    "/savings/{transaction_id}",
    endpoint=edit_saving_controller,
    methods=["PUT"],
    summary="Edit a saving transaction",
)

ledger_router.add_api_route(
    "/members/{member_id}/savings",
    endpoint=saving_history_controller,
    methods=["GET"],
    summary="Saving transactions and balance of a member",
)
