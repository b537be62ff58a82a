"""
Base repository with common database operations.
Provides reusable CRUD operations for all repositories.
"""
from typing import TypeVar, Generic, Optional, Dict, Any
from sqlalchemy.orm import Session
from database.postgres import Base

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Base repository with common CRUD operations"""

    def __init__(self, model: type[T], db: Session):
        self.model = model
        self.db = db

    def get_by_id(self, id: Any) -> Optional[T]:
        """Get entity by primary key"""
        return self.db.get(self.model, id)

    def create(self, obj_in: Dict[str, Any]) -> T:
        """Create new entity"""
        db_obj = self.model(**obj_in)
        self.db.add(db_obj)
        self.db.flush()
        return db_obj

    def update(self, db_obj: T, obj_in: Dict[str, Any]) -> T:
        """Apply field values to a loaded entity"""
        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        self.db.flush()
        return db_obj

    def delete(self, db_obj: T) -> None:
        """Delete a loaded entity"""
        self.db.delete(db_obj)
        self.db.flush()

    def find_one_by(self, **filters) -> Optional[T]:
        """Find one entity by filters"""
        query = self.db.query(self.model)
        for field, value in filters.items():
            if hasattr(self.model, field):
                query = query.filter(getattr(self.model, field) == value)
        return query.first()

    def count(self, **filters) -> int:
        """Count entities matching filters"""
        query = self.db.query(self.model)
        for field, value in filters.items():
            if hasattr(self.model, field):
                query = query.filter(getattr(self.model, field) == value)
        return query.count()

