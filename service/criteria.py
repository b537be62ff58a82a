"""
Scoring rubric: criteria with their fields, cooperative categories, and the
points each cooperative was awarded under its category's criteria.
"""
from fastapi import status
from sqlalchemy.orm import Session
from typing import Optional
import uuid
import logging

from models.criteria import CooperativeCategory, Criteria
from schemas.criteria import (
    CreateCooperativeCategoryValidation,
    CreateCriteriaValidation,
    EditCooperativeCategoryValidation,
    EditCriteriaFieldPointValidation,
    EditCriteriaValidation,
    EditDefaultCriteriaPointValidation,
)
from store.repositories import (
    CategoryRepository,
    CooperativeRepository,
    CriteriaFieldRepository,
    CriteriaRepository,
    ScoreRepository,
)
from utils.response import UNKNOWN_ERROR_MESSAGE, error_response, success_response

logger = logging.getLogger(__name__)


def serialize_criteria(criteria: Criteria) -> dict:
    return {
        "id": criteria.id,
        "name": criteria.name,
        "financialPerformancePoints": criteria.financial_performance_points,
        "organizationManagementPoints": criteria.organization_management_points,
        "criteriaFields": [
            {"id": field.id, "name": field.name, "maxPoints": field.max_points}
            for field in criteria.fields
        ],
    }


def serialize_category(category: CooperativeCategory) -> dict:
    return {
        "id": category.id,
        "name": category.name,
        "requiredAssets": category.required_assets,
        "criteriaId": category.criteria_id,
    }


def _failed(action: str, e: Exception, db: Session):
    db.rollback()
    logger.error(f"{action} failed: {str(e)}", exc_info=True)
    return error_response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE)


def _submitted_fields(form: CreateCriteriaValidation) -> list:
    return [
        {"id": field.id, "name": field.name, "max_points": field.max_points}
        for field in form.criteria_fields
    ]


# Categories


async def create_category(
    form: CreateCooperativeCategoryValidation,
    db: Session,
    category_repo: CategoryRepository,
    criteria_repo: CriteriaRepository,
):
    if criteria_repo.get_by_id(form.criteria_id) is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Criteria not found")

    try:
        category = category_repo.create(
            {"name": form.name, "required_assets": form.required_assets, "criteria_id": form.criteria_id}
        )
        db.commit()
    except Exception as e:
        return _failed("Category creation", e, db)

    return success_response(
        status_code=status.HTTP_201_CREATED,
        message="Category has been added.",
        data=serialize_category(category),
    )


async def update_category(
    category_id: uuid.UUID,
    form: EditCooperativeCategoryValidation,
    db: Session,
    category_repo: CategoryRepository,
    criteria_repo: CriteriaRepository,
):
    if form.id != category_id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Category id mismatch.")

    category = category_repo.get_by_id(category_id)
    if category is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Category not found")
    if criteria_repo.get_by_id(form.criteria_id) is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Criteria not found")

    try:
        category_repo.update(
            category,
            {"name": form.name, "required_assets": form.required_assets, "criteria_id": form.criteria_id},
        )
        db.commit()
    except Exception as e:
        return _failed(f"Category {category_id} update", e, db)

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Category has been updated.",
        data=serialize_category(category),
    )


async def list_categories(category_repo: CategoryRepository):
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Categories retrieved",
        data=[serialize_category(category) for category in category_repo.list_by_name()],
    )


# Criteria


async def create_criteria(form: CreateCriteriaValidation, db: Session, criteria_repo: CriteriaRepository):
    try:
        criteria = criteria_repo.create(
            {
                "name": form.name,
                "financial_performance_points": form.financial_performance_points,
                "organization_management_points": form.organization_management_points,
            }
        )
        criteria_repo.sync_fields(criteria, _submitted_fields(form))
        db.commit()
        db.refresh(criteria)
    except Exception as e:
        return _failed("Criteria creation", e, db)

    return success_response(
        status_code=status.HTTP_201_CREATED,
        message="Criteria has been added.",
        data=serialize_criteria(criteria),
    )


def _below_awarded_points(
    criteria: Criteria, form: EditCriteriaValidation, score_repo: ScoreRepository
) -> Optional[str]:
    """Message for the first submitted maximum that is lower than awarded points."""
    financial, organization = score_repo.highest_default_points(criteria.id)
    if form.financial_performance_points < financial:
        return f"Financial performance points cannot be less than the {financial} points already awarded."
    if form.organization_management_points < organization:
        return f"Organization management points cannot be less than the {organization} points already awarded."

    awarded = score_repo.highest_field_points([field.id for field in criteria.fields])
    for field in form.criteria_fields:
        points = awarded.get(field.id, 0) if field.id is not None else 0
        if field.max_points < points:
            return f"Max points of {field.name} cannot be less than the {points} points already awarded."
    return None


async def update_criteria(
    criteria_id: uuid.UUID,
    form: EditCriteriaValidation,
    db: Session,
    criteria_repo: CriteriaRepository,
    score_repo: ScoreRepository,
):
    """
    Update criteria points and reconcile its fields with the submitted list.

    No maximum may drop below points already awarded against it.
    """
    if form.id != criteria_id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Criteria id mismatch.")

    criteria = criteria_repo.get_with_fields(criteria_id)
    if criteria is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Criteria not found")

    known = {field.id for field in criteria.fields}
    if any(field.id is not None and field.id not in known for field in form.criteria_fields):
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Invalid criteria field id.")

    below_awarded = _below_awarded_points(criteria, form, score_repo)
    if below_awarded:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message=below_awarded)

    try:
        criteria_repo.update(
            criteria,
            {
                "name": form.name,
                "financial_performance_points": form.financial_performance_points,
                "organization_management_points": form.organization_management_points,
            },
        )
        criteria_repo.sync_fields(criteria, _submitted_fields(form))
        db.commit()
        db.refresh(criteria)
    except Exception as e:
        return _failed(f"Criteria {criteria_id} update", e, db)

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Criteria has been updated.",
        data=serialize_criteria(criteria),
    )


async def get_criteria(criteria_id: uuid.UUID, criteria_repo: CriteriaRepository):
    criteria = criteria_repo.get_with_fields(criteria_id)
    if criteria is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Criteria not found")
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Criteria retrieved",
        data=serialize_criteria(criteria),
    )


async def list_criteria(criteria_repo: CriteriaRepository):
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Criteria retrieved",
        data=[serialize_criteria(criteria) for criteria in criteria_repo.list_with_fields()],
    )


# Scores


def _scoring_context(cooperative_id, category_id, cooperative_repo, category_repo, criteria_repo):
    """Cooperative, category and its criteria, or the error response to return."""
    cooperative = cooperative_repo.get_by_id(cooperative_id)
    if cooperative is None:
        return None, error_response(status_code=status.HTTP_404_NOT_FOUND, message="Cooperative not found")
    category = category_repo.get_by_id(category_id)
    if category is None:
        return None, error_response(status_code=status.HTTP_404_NOT_FOUND, message="Category not found")
    criteria = criteria_repo.get_with_fields(category.criteria_id)
    return (cooperative, category, criteria), None


async def update_default_points(
    cooperative_id: uuid.UUID,
    form: EditDefaultCriteriaPointValidation,
    db: Session,
    cooperative_repo: CooperativeRepository,
    category_repo: CategoryRepository,
    criteria_repo: CriteriaRepository,
    score_repo: ScoreRepository,
):
    if form.cooperative_id != cooperative_id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Cooperative id mismatch.")

    context, error = _scoring_context(
        cooperative_id, form.category_id, cooperative_repo, category_repo, criteria_repo
    )
    if error:
        return error
    _, _, criteria = context

    if form.financial_performance_points > criteria.financial_performance_points:
        return error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=f"Financial performance points cannot exceed {criteria.financial_performance_points}.",
        )
    if form.organization_management_points > criteria.organization_management_points:
        return error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=f"Organization management points cannot exceed {criteria.organization_management_points}.",
        )

    try:
        score_repo.upsert_default_points(
            cooperative_id,
            form.category_id,
            {
                "financial_performance_points": form.financial_performance_points,
                "organization_management_points": form.organization_management_points,
            },
        )
        db.commit()
    except Exception as e:
        return _failed(f"Scoring cooperative {cooperative_id}", e, db)

    return await get_scores(
        cooperative_id, form.category_id, cooperative_repo, category_repo, criteria_repo, score_repo,
        message="Points have been updated.",
    )


async def update_field_points(
    cooperative_id: uuid.UUID,
    criteria_field_id: uuid.UUID,
    form: EditCriteriaFieldPointValidation,
    db: Session,
    cooperative_repo: CooperativeRepository,
    category_repo: CategoryRepository,
    criteria_repo: CriteriaRepository,
    criteria_field_repo: CriteriaFieldRepository,
    score_repo: ScoreRepository,
):
    if form.cooperative_id != cooperative_id or form.criteria_field_id != criteria_field_id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Id mismatch.")

    context, error = _scoring_context(
        cooperative_id, form.category_id, cooperative_repo, category_repo, criteria_repo
    )
    if error:
        return error
    _, category, _ = context

    field = criteria_field_repo.get_by_id(criteria_field_id)
    if field is None or field.criteria_id != category.criteria_id:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Criteria field not found")

    if form.points > field.max_points:
        return error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=f"Points cannot exceed {field.max_points}.",
        )

    try:
        score_repo.upsert_field_points(cooperative_id, category.id, field.id, form.points)
        db.commit()
    except Exception as e:
        return _failed(f"Scoring field {criteria_field_id} for cooperative {cooperative_id}", e, db)

    return await get_scores(
        cooperative_id, category.id, cooperative_repo, category_repo, criteria_repo, score_repo,
        message="Points have been updated.",
    )


async def get_scores(
    cooperative_id: uuid.UUID,
    category_id: Optional[uuid.UUID],
    cooperative_repo: CooperativeRepository,
    category_repo: CategoryRepository,
    criteria_repo: CriteriaRepository,
    score_repo: ScoreRepository,
    message: str = "Scores retrieved",
):
    """Awarded points for a cooperative, defaulting to its own category."""
    if category_id is None:
        cooperative = cooperative_repo.get_by_id(cooperative_id)
        if cooperative is None:
            return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Cooperative not found")
        category_id = cooperative.category_id

    context, error = _scoring_context(
        cooperative_id, category_id, cooperative_repo, category_repo, criteria_repo
    )
    if error:
        return error
    _, category, criteria = context

    score = score_repo.find_one_by(cooperative_id=cooperative_id, category_id=category.id)
    awarded = {entry.criteria_field_id: entry.points for entry in score_repo.field_points_for(cooperative_id, category.id)}

    financial = score.financial_performance_points if score else 0
    organization = score.organization_management_points if score else 0
    fields = [
        {
            "criteriaFieldId": field.id,
            "name": field.name,
            "maxPoints": field.max_points,
            "points": awarded.get(field.id, 0),
        }
        for field in criteria.fields
    ]

    return success_response(
        status_code=status.HTTP_200_OK,
        message=message,
        data={
            "cooperativeId": cooperative_id,
            "categoryId": category.id,
            "criteriaId": criteria.id,
            "financialPerformancePoints": financial,
            "maxFinancialPerformancePoints": criteria.financial_performance_points,
            "organizationManagementPoints": organization,
            "maxOrganizationManagementPoints": criteria.organization_management_points,
            "criteriaFields": fields,
            "totalPoints": financial + organization + sum(field["points"] for field in fields),
            "maxTotalPoints": criteria.financial_performance_points
            + criteria.organization_management_points
            + sum(field.max_points for field in criteria.fields),
        },
    )
