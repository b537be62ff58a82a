import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, JSON, Enum
from database.postgres import Base
from store.enums import SessionKind


def _new_sid() -> str:
    return str(uuid.uuid4())


class Session(Base):
    __tablename__ = "sessions"

    sid = Column(String(36), primary_key=True, default=_new_sid)
    kind = Column(
        Enum(SessionKind, values_callable=lambda obj: [e.value for e in obj], name="session_kind"),
        nullable=False,
    )
    data = Column(JSON, nullable=False, default=dict)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        # SQLite hands back naive datetimes; stored values are always UTC
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at <= now
