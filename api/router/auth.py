"""
Auth router - sign-in form actions, logout and dashboards for both portals.
"""
from fastapi import APIRouter

from api.controller.auth import (
    admin_login_controller,
    admin_logout_controller,
    cooperative_login_controller,
    cooperative_logout_controller,
)
from api.controller.cooperative import admin_dashboard_controller, cooperative_dashboard_controller

auth_router = APIRouter(tags=["Auth"])

auth_router.add_api_route(
    "/cooperative/login",
    endpoint=cooperative_login_controller,
    methods=["POST"],
    summary="Sign in a cooperative account (form post)",
)

auth_router.add_api_route(
    "/cooperative/logout",
    endpoint=cooperative_logout_controller,
    methods=["POST"],
    summary="End the cooperative session",
)

auth_router.add_api_route(
    "/cooperative/dashboard",
    endpoint=cooperative_dashboard_controller,
    methods=["GET"],
    summary="Totals for the signed-in cooperative",
)

auth_router.add_api_route(
    "/admin/login",
    endpoint=admin_login_controller,
    methods=["POST"],
    summary="Sign in an administrator (form post)",
)

auth_router.add_api_route(
    "/admin/logout",
    endpoint=admin_logout_controller,
    methods=["POST"],
    summary="End the admin session",
)

auth_router.add_api_route(
    "/admin/dashboard",
    endpoint=admin_dashboard_controller,
    methods=["GET"],
    summary="System-wide counts for administrators",
)
