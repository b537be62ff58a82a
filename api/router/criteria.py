from fastapi import APIRouter

from api.controller.criteria import (
    create_category_controller,
    create_criteria_controller,
    get_criteria_controller,
    get_scores_controller,
    list_categories_controller,
    list_criteria_controller,
    update_category_controller,
    update_criteria_controller,
    update_default_points_controller,
    update_field_points_controller,
)

criteria_router = APIRouter(tags=["Criteria"])

criteria_router.add_api_route(
    "/categories",
    endpoint=create_category_controller,
    methods=["POST"],
    summary="Add a cooperative category",
)

criteria_router.add_api_route(
    "/categories",
    endpoint=list_categories_controller,
    methods=["GET"],
    summary="List cooperative categories",
)

criteria_router.add_api_route(
    "/categories/{category_id}",
    endpoint=update_category_controller,
    methods=["PUT"],
    summary="Update a cooperative category",
)

criteria_router.add_api_route(
    "/criteria",
    endpoint=create_criteria_controller,
    methods=["POST"],
    summary="Add scoring criteria with its fields",
)

criteria_router.add_api_route(
    "/criteria",
    endpoint=list_criteria_controller,
    methods=["GET"],
    summary="List scoring criteria",
)

criteria_router.add_api_route(
    "/criteria/{criteria_id}",
    endpoint=get_criteria_controller,
    methods=["GET"],
    summary="Get scoring criteria with its fields",
)

criteria_router.add_api_route(
    "/criteria/{criteria_id}",
    endpoint=update_criteria_controller,
    methods=["PUT"],
    summary="Update scoring criteria and reconcile its fields",
)

criteria_router.add_api_route(
    "/cooperatives/{cooperative_id}/scores",
    endpoint=update_default_points_controller,
    methods=["PUT"],
    summary="Award default criteria points to a cooperative",
)

criteria_router.add_api_route(
    "/cooperatives/{cooperative_id}/scores",
    endpoint=get_scores_controller,
    methods=["GET"],
    summary="Points awarded to a cooperative",
)

criteria_router.add_api_route(
    "/cooperatives/{cooperative_id}/criteria-fields/{field_id}/points",
    endpoint=update_field_points_controller,
    methods=["PUT"],
    summary="Award points for one criteria field",
)
