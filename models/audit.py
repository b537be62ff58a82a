from sqlalchemy import Column, DateTime, event
from datetime import datetime, timezone


class AuditMixin:
    """
    Mixin class that provides automatic audit timestamps for database models.

    Automatically tracks:
    - created_at: Timestamp when the record was created
    - updated_at: Timestamp when the record was last updated

    Usage:
        class MyModel(AuditMixin, Base):
            __tablename__ = "my_table"
            id = Column(Integer, primary_key=True)
            # ... other fields

    The audit fields are automatically populated by SQLAlchemy event listeners.
    """
    __tablename__ = None

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        comment="Timestamp when this record was created"
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="Timestamp when this record was last updated"
    )


@event.listens_for(AuditMixin, "before_insert", propagate=True)
def receive_before_insert(mapper, connection, target):
    """
    Automatically set created_at before inserting a new record.

    If it is already set (e.g., explicitly in service code),
    it won't be overwritten.
    """
    if not target.created_at:
        target.created_at = datetime.now(timezone.utc)


@event.listens_for(AuditMixin, "before_update", propagate=True)
def receive_before_update(mapper, connection, target):
    """Automatically set updated_at before updating a record."""
    target.updated_at = datetime.now(timezone.utc)
