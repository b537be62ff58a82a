"""
Criteria repository for the cooperative scoring rubric.
"""
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from models.criteria import (
    Criteria,
    CriteriaField,
    CooperativeCategory,
    CooperativeScore,
    CriteriaFieldPoint,
)
from store.repositories.base import BaseRepository


class CriteriaRepository(BaseRepository[Criteria]):
    """Repository for Criteria model"""

    def __init__(self, db: Session):
        super().__init__(Criteria, db)

    def get_with_fields(self, criteria_id: UUID) -> Optional[Criteria]:
        return (
            self.db.query(Criteria)
            .options(selectinload(Criteria.fields))
            .filter(Criteria.id == criteria_id)
            .first()
        )

    def list_with_fields(self) -> List[Criteria]:
        return (
            self.db.query(Criteria)
            .options(selectinload(Criteria.fields))
            .order_by(Criteria.name)
            .all()
        )

    def sync_fields(self, criteria: Criteria, submitted: List[dict]) -> None:
        """
        Make the criteria's fields match the submitted list.

        Items carrying the id of an existing field update it in place, items
        without one are inserted, and fields missing from the list are removed.
        Positions follow the submitted order.
        """
        existing = {field.id: field for field in criteria.fields}
        for position, item in enumerate(submitted):
            field = existing.pop(item.get("id"), None) if item.get("id") else None
            if field is None:
                field = CriteriaField(name=item["name"], max_points=item["max_points"])
                criteria.fields.append(field)
            field.name = item["name"]
            field.max_points = item["max_points"]
            field.position = position
        for stale in existing.values():
            criteria.fields.remove(stale)
        self.db.flush()


class CriteriaFieldRepository(BaseRepository[CriteriaField]):
    """Repository for CriteriaField model"""

    def __init__(self, db: Session):
        super().__init__(CriteriaField, db)


class CategoryRepository(BaseRepository[CooperativeCategory]):
    """Repository for CooperativeCategory model"""

    def __init__(self, db: Session):
        super().__init__(CooperativeCategory, db)

    def list_by_name(self) -> List[CooperativeCategory]:
        return self.db.query(CooperativeCategory).order_by(CooperativeCategory.name).all()


class ScoreRepository(BaseRepository[CooperativeScore]):
    """Repository for awarded points (default criteria and per field)"""

    def __init__(self, db: Session):
        super().__init__(CooperativeScore, db)

    def upsert_default_points(self, cooperative_id: UUID, category_id: UUID, values: dict) -> CooperativeScore:
        score = self.find_one_by(cooperative_id=cooperative_id, category_id=category_id)
        if score is None:
            return self.create({"cooperative_id": cooperative_id, "category_id": category_id, **values})
        return self.update(score, values)

    def upsert_field_points(
        self, cooperative_id: UUID, category_id: UUID, criteria_field_id: UUID, points: int
    ) -> CriteriaFieldPoint:
        entry = (
            self.db.query(CriteriaFieldPoint)
            .filter(
                CriteriaFieldPoint.cooperative_id == cooperative_id,
                CriteriaFieldPoint.category_id == category_id,
                CriteriaFieldPoint.criteria_field_id == criteria_field_id,
            )
            .first()
        )
        if entry is None:
            entry = CriteriaFieldPoint(
                cooperative_id=cooperative_id,
                category_id=category_id,
                criteria_field_id=criteria_field_id,
                points=points,
            )
            self.db.add(entry)
        else:
            entry.points = points
        self.db.flush()
        return entry

    def field_points_for(self, cooperative_id: UUID, category_id: UUID) -> List[CriteriaFieldPoint]:
        return (
            self.db.query(CriteriaFieldPoint)
            .filter(
                CriteriaFieldPoint.cooperative_id == cooperative_id,
                CriteriaFieldPoint.category_id == category_id,
            )
            .all()
        )

    def highest_default_points(self, criteria_id: UUID) -> Tuple[int, int]:
        """Largest financial and organization points awarded under categories using the criteria."""
        row = (
            self.db.query(
                func.max(CooperativeScore.financial_performance_points),
                func.max(CooperativeScore.organization_management_points),
            )
            .join(CooperativeCategory, CooperativeCategory.id == CooperativeScore.category_id)
            .filter(CooperativeCategory.criteria_id == criteria_id)
            .one()
        )
        return row[0] or 0, row[1] or 0

    def highest_field_points(self, criteria_field_ids: List[UUID]) -> Dict[UUID, int]:
        if not criteria_field_ids:
            return {}
        rows = (
            self.db.query(CriteriaFieldPoint.criteria_field_id, func.max(CriteriaFieldPoint.points))
            .filter(CriteriaFieldPoint.criteria_field_id.in_(criteria_field_ids))
            .group_by(CriteriaFieldPoint.criteria_field_id)
            .all()
        )
        return {field_id: points for field_id, points in rows}
