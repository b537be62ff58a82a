"""
Dependency injection utilities for FastAPI.
"""
from typing import Callable, Type, TypeVar
from sqlalchemy.orm import Session
from fastapi import Depends

from database.postgres import get_db

T = TypeVar("T")


def get_repository(repository_class: Type[T]) -> Callable[[Session], T]:
    """
    Generic dependency function that creates and returns repository instances.
    Works with SQLAlchemy repositories that require a db session.

    Usage:
        async def list_members_controller(
            db: Session = Depends(get_db),
            member_repo: MemberRepository = Depends(get_repository(MemberRepository)),
        ):
            ...

    Args:
        repository_class: The repository class to instantiate

    Returns:
        A callable dependency function that returns the repository instance
    """
    def _get_repository(db: Session = Depends(get_db)) -> T:
        return repository_class(db)

    return _get_repository
