from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Optional
import bcrypt
from config.settings import settings
from database.postgres import get_db
from store.enums import SessionKind
from store.repositories.session import SessionRepository
import logging

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a plain password against a hashed password."""
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Password check against a malformed hash")
        return False


def _session_data(db: Session, sid: Optional[str], kind: SessionKind) -> dict:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Authentication required",
    )
    if not sid:
        raise credentials_exception

    session_repo = SessionRepository(db)
    session = session_repo.get_active(sid, kind)
    if session is None:
        raise credentials_exception
    return dict(session.data)


async def get_current_cooperative(
    sid: Optional[str] = Cookie(None, alias=settings.COOPERATIVE_SESSION_COOKIE),
    db: Session = Depends(get_db),
) -> dict:
    """Resolve the cooperative account snapshot behind the ``coop_sid`` cookie."""
    return _session_data(db, sid, SessionKind.COOPERATIVE)


async def get_current_admin(
    sid: Optional[str] = Cookie(None, alias=settings.ADMIN_SESSION_COOKIE),
    db: Session = Depends(get_db),
) -> dict:
    """Resolve the administrator snapshot behind the ``admin_sid`` cookie."""
    return _session_data(db, sid, SessionKind.ADMIN)
