"""
Cooperative repository for cooperative and account related database operations.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from models.cooperative import Cooperative, CooperativeAccount, AdminAccount
from store.repositories.base import BaseRepository


class CooperativeRepository(BaseRepository[Cooperative]):
    """Repository for Cooperative model"""

    def __init__(self, db: Session):
        super().__init__(Cooperative, db)

    def get_with_account(self, cooperative_id: UUID) -> Optional[Cooperative]:
        """Get cooperative with its account loaded"""
        return (
            self.db.query(Cooperative)
            .options(joinedload(Cooperative.account))
            .filter(Cooperative.id == cooperative_id)
            .first()
        )

    def list_with_accounts(self, skip: int = 0, limit: int = 100) -> List[Cooperative]:
        """List cooperatives alphabetically with accounts loaded"""
        return (
            self.db.query(Cooperative)
            .options(joinedload(Cooperative.account))
            .order_by(func.lower(Cooperative.name))
            .offset(skip)
            .limit(limit)
            .all()
        )


class CooperativeAccountRepository(BaseRepository[CooperativeAccount]):
    """Repository for CooperativeAccount model"""

    def __init__(self, db: Session):
        super().__init__(CooperativeAccount, db)

    def get_by_email_with_cooperative(self, email: str) -> Optional[CooperativeAccount]:
        """Get account by email joined with its owning cooperative"""
        return (
            self.db.query(CooperativeAccount)
            .join(CooperativeAccount.cooperative)
            .options(joinedload(CooperativeAccount.cooperative))
            .filter(func.lower(CooperativeAccount.email) == email.lower())
            .first()
        )

    def email_taken(self, email: str, exclude_id: Optional[UUID] = None) -> bool:
        """Check whether another account already uses the email"""
        query = self.db.query(CooperativeAccount).filter(
            func.lower(CooperativeAccount.email) == email.lower()
        )
        if exclude_id is not None:
            query = query.filter(CooperativeAccount.id != exclude_id)
        return query.first() is not None


class AdminAccountRepository(BaseRepository[AdminAccount]):
    """Repository for AdminAccount model"""

    def __init__(self, db: Session):
        super().__init__(AdminAccount, db)

    def get_by_email(self, email: str) -> Optional[AdminAccount]:
        """Get admin by email"""
        return (
            self.db.query(AdminAccount)
            .filter(func.lower(AdminAccount.email) == email.lower())
            .first()
        )
