from fastapi import status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from typing import Optional
import logging

from models.cooperative import AdminAccount, CooperativeAccount
from store.enums import SessionKind
from store.repositories import (
    AdminAccountRepository,
    CooperativeAccountRepository,
    SessionRepository,
)
from utils.auth import verify_password
from utils.response import UNKNOWN_ERROR_MESSAGE, error_response
from config.settings import settings

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password."

COOPERATIVE_LOGIN_URL = "/cooperative/login"
COOPERATIVE_DASHBOARD_URL = "/cooperative/dashboard"
ADMIN_LOGIN_URL = "/admin/login"
ADMIN_DASHBOARD_URL = "/admin/dashboard"


def cooperative_snapshot(account: CooperativeAccount) -> dict:
    """Account data kept on the session row (never the password hash)."""
    cooperative = account.cooperative
    return {
        "account_id": str(account.id),
        "email": account.email,
        "given_name": account.given_name,
        "middle_name": account.middle_name,
        "surname": account.surname,
        "cooperative_id": str(cooperative.id),
        "cooperative_name": cooperative.name,
        "cooperative_initials": cooperative.initials,
    }


def admin_snapshot(admin: AdminAccount) -> dict:
    return {
        "admin_id": str(admin.id),
        "name": admin.name,
        "email": admin.email,
    }


def set_session_cookie(response, cookie_name: str, sid: str) -> None:
    response.set_cookie(
        key=cookie_name,
        value=sid,
        path="/",
        httponly=True,
        samesite="strict",
        secure=settings.COOKIE_SECURE,
        max_age=settings.SESSION_TTL_SECONDS,
    )


def _issue_session(
    db: Session,
    session_repo: SessionRepository,
    kind: SessionKind,
    snapshot: dict,
    cookie_name: str,
    redirect_to: str,
):
    try:
        session_repo.purge_expired()
        session = session_repo.issue(kind, snapshot, settings.SESSION_TTL_SECONDS)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to issue {kind.value} session: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    response = RedirectResponse(url=redirect_to, status_code=status.HTTP_303_SEE_OTHER)
    set_session_cookie(response, cookie_name, session.sid)
    return response


async def cooperative_login(
    email: Optional[str],
    password: Optional[str],
    db: Session,
    account_repo: CooperativeAccountRepository,
    session_repo: SessionRepository,
):
    """
    Authenticate a cooperative account and start a one-day session.

    An unknown email and a wrong password get the same response so the form
    never reveals which accounts exist.
    """
    if not email or not password:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message=INVALID_CREDENTIALS)

    account = account_repo.get_by_email_with_cooperative(email.strip())
    if not account or not verify_password(password, account.password):
        logger.info("Rejected cooperative login attempt")
        return error_response(status_code=status.HTTP_401_UNAUTHORIZED, message=INVALID_CREDENTIALS)

    logger.info(f"Cooperative account {account.id} signed in")
    return _issue_session(
        db,
        session_repo,
        SessionKind.COOPERATIVE,
        cooperative_snapshot(account),
        settings.COOPERATIVE_SESSION_COOKIE,
        COOPERATIVE_DASHBOARD_URL,
    )


async def admin_login(
    email: Optional[str],
    password: Optional[str],
    db: Session,
    admin_repo: AdminAccountRepository,
    session_repo: SessionRepository,
):
    """Authenticate an administrator, same flow as the cooperative login."""
    if not email or not password:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message=INVALID_CREDENTIALS)

    admin = admin_repo.get_by_email(email.strip())
    if not admin or not verify_password(password, admin.password):
        logger.info("Rejected admin login attempt")
        return error_response(status_code=status.HTTP_401_UNAUTHORIZED, message=INVALID_CREDENTIALS)

    logger.info(f"Admin {admin.id} signed in")
    return _issue_session(
        db,
        session_repo,
        SessionKind.ADMIN,
        admin_snapshot(admin),
        settings.ADMIN_SESSION_COOKIE,
        ADMIN_DASHBOARD_URL,
    )


async def logout(
    sid: Optional[str],
    cookie_name: str,
    login_url: str,
    db: Session,
    session_repo: SessionRepository,
):
    """Drop the session row and clear its cookie."""
    if sid:
        try:
            if session_repo.revoke(sid):
                db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Logout failed: {str(e)}")
            return error_response(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
            )

    response = RedirectResponse(url=login_url, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(cookie_name, path="/", httponly=True, samesite="strict")
    return response
