"""
Session repository: opaque-id sessions with an expiration timestamp.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session as DbSession

from models.session import Session
from store.enums import SessionKind
from store.repositories.base import BaseRepository


class SessionRepository(BaseRepository[Session]):
    """Repository for Session model"""

    def __init__(self, db: DbSession):
        super().__init__(Session, db)

    def issue(self, kind: SessionKind, data: dict, ttl_seconds: int) -> Session:
        """Create a session that expires ``ttl_seconds`` from now"""
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=ttl_seconds)
        return self.create({"kind": kind, "data": data, "expires_at": expires_at})

    def get_active(self, sid: str, kind: SessionKind) -> Optional[Session]:
        """Get a live session of the given kind; expired rows are removed"""
        session = self.find_one_by(sid=sid, kind=kind)
        if session is None:
            return None
        if session.is_expired():
            self.delete(session)
            self.db.commit()
            return None
        return session

    def revoke(self, sid: str) -> bool:
        """Delete a session by id"""
        session = self.get_by_id(sid)
        if session is None:
            return False
        self.delete(session)
        return True

    def purge_expired(self) -> int:
        """Delete every expired session, returning the number removed"""
        now = datetime.now(timezone.utc)
        return (
            self.db.query(Session)
            .filter(Session.expires_at <= now)
            .delete(synchronize_session=False)
        )
