"""
Auth controller - login form actions and logout for cooperatives and admins.
"""
from typing import Optional

from fastapi import Cookie, Depends, Form
from sqlalchemy.orm import Session

from config.settings import settings
from database.postgres import get_db
from service.auth import (
    ADMIN_LOGIN_URL,
    COOPERATIVE_LOGIN_URL,
    admin_login,
    cooperative_login,
    logout,
)
from store.repositories import (
    AdminAccountRepository,
    CooperativeAccountRepository,
    SessionRepository,
)
from utils.dependencies import get_repository


async def cooperative_login_controller(
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    account_repo: CooperativeAccountRepository = Depends(get_repository(CooperativeAccountRepository)),
    session_repo: SessionRepository = Depends(get_repository(SessionRepository)),
):
    return await cooperative_login(
        email=email,
        password=password,
        db=db,
        account_repo=account_repo,
        session_repo=session_repo,
    )


async def cooperative_logout_controller(
    sid: Optional[str] = Cookie(None, alias=settings.COOPERATIVE_SESSION_COOKIE),
    db: Session = Depends(get_db),
    session_repo: SessionRepository = Depends(get_repository(SessionRepository)),
):
    return await logout(
        sid=sid,
        cookie_name=settings.COOPERATIVE_SESSION_COOKIE,
        login_url=COOPERATIVE_LOGIN_URL,
        db=db,
        session_repo=session_repo,
    )


async def admin_login_controller(
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    admin_repo: AdminAccountRepository = Depends(get_repository(AdminAccountRepository)),
    session_repo: SessionRepository = Depends(get_repository(SessionRepository)),
):
    return await admin_login(
        email=email,
        password=password,
        db=db,
        admin_repo=admin_repo,
        session_repo=session_repo,
    )


async def admin_logout_controller(
    sid: Optional[str] = Cookie(None, alias=settings.ADMIN_SESSION_COOKIE),
    db: Session = Depends(get_db),
    session_repo: SessionRepository = Depends(get_repository(SessionRepository)),
):
    return await logout(
        sid=sid,
        cookie_name=settings.ADMIN_SESSION_COOKIE,
        login_url=ADMIN_LOGIN_URL,
        db=db,
        session_repo=session_repo,
    )
