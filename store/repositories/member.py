"""
Member repository for member, account and dependent database operations.
"""
from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from models.member import Member, MemberAccount, Dependent
from store.repositories.base import BaseRepository


class MemberRepository(BaseRepository[Member]):
    """Repository for Member model"""

    def __init__(self, db: Session):
        super().__init__(Member, db)

    def find_existing_record(self, given_name: str, surname: str, birthday: date) -> Optional[Member]:
        """Find a member with the same given name, surname and date of birth"""
        return (
            self.db.query(Member)
            .filter(
                func.lower(Member.given_name) == given_name.lower(),
                func.lower(Member.surname) == surname.lower(),
                Member.birthday == birthday,
            )
            .first()
        )

    def get_in_cooperative(self, member_id: int, cooperative_id: UUID) -> Optional[Member]:
        """Get a member only if it belongs to the cooperative"""
        return (
            self.db.query(Member)
            .options(selectinload(Member.account), selectinload(Member.dependents))
            .filter(Member.id == member_id, Member.cooperative_id == cooperative_id)
            .first()
        )

    def list_by_cooperative(
        self,
        cooperative_id: UUID,
        *,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[List[Member], int]:
        """List members of a cooperative with an optional name search"""
        query = self.db.query(Member).filter(Member.cooperative_id == cooperative_id)
        if search:
            pattern = f"%{search.lower()}%"
            query = query.filter(
                func.lower(Member.given_name).like(pattern)
                | func.lower(Member.middle_name).like(pattern)
                | func.lower(Member.surname).like(pattern)
            )
        total = query.count()
        members = (
            query.options(selectinload(Member.account))
            .order_by(Member.surname, Member.given_name)
            .offset(skip)
            .limit(limit)
            .all()
        )
        return members, total

    def count_by_cooperative(self, cooperative_id: UUID) -> int:
        return self.count(cooperative_id=cooperative_id)


class MemberAccountRepository(BaseRepository[MemberAccount]):
    """Repository for MemberAccount model"""

    def __init__(self, db: Session):
        super().__init__(MemberAccount, db)


class DependentRepository(BaseRepository[Dependent]):
    """Repository for Dependent model"""

    def __init__(self, db: Session):
        super().__init__(Dependent, db)

    def replace_for_member(self, member: Member, dependents: List[dict]) -> List[Dependent]:
        """Swap the member's dependents for the submitted list"""
        for existing in list(member.dependents):
            member.dependents.remove(existing)
        self.db.flush()
        created = [Dependent(**item) for item in dependents]
        member.dependents.extend(created)
        self.db.flush()
        return created
