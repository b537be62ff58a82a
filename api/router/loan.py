from fastapi import APIRouter

from api.controller.loan import (
    add_repayment_controller,
    create_loan_controller,
    get_loan_controller,
    list_loans_controller,
    update_loan_controller,
)

loan_router = APIRouter(prefix="/loans", tags=["Loans"])

loan_router.add_api_route(
    "",
    endpoint=create_loan_controller,
    methods=["POST"],
    summary="Grant a loan to a member",
)

loan_router.add_api_route(
    "",
    endpoint=list_loans_controller,
    methods=["GET"],
    summary="List loans, optionally for one member",
)

loan_router.add_api_route(
    "/{loan_id}",
    endpoint=get_loan_controller,
    methods=["GET"],
    summary="Get a loan with its repayments",
)

loan_router.add_api_route(
    "/{loan_id}",
    endpoint=update_loan_controller,
    methods=["PUT"],
    summary="Edit loan terms",
)

loan_router.add_api_route(
    "/{loan_id}/repayments",
    endpoint=add_repayment_controller,
    methods=["POST"],
    summary="Record a loan repayment",
)
