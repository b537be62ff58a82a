"""
Criteria controller - categories, criteria and cooperative scoring (admin).
"""
import uuid
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from database.postgres import get_db
from schemas.criteria import (
    CreateCooperativeCategoryValidation,
    CreateCriteriaValidation,
    EditCooperativeCategoryValidation,
    EditCriteriaFieldPointValidation,
    EditCriteriaValidation,
    EditDefaultCriteriaPointValidation,
)
from service.criteria import (
    create_category,
    create_criteria,
    get_criteria,
    get_scores,
    list_categories,
    list_criteria,
    update_category,
    update_criteria,
    update_default_points,
    update_field_points,
)
from store.repositories import (
    CategoryRepository,
    CooperativeRepository,
    CriteriaFieldRepository,
    CriteriaRepository,
    ScoreRepository,
)
from utils.auth import get_current_admin
from utils.dependencies import get_repository


async def create_category_controller(
    request: CreateCooperativeCategoryValidation,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    category_repo: CategoryRepository = Depends(get_repository(CategoryRepository)),
    criteria_repo: CriteriaRepository = Depends(get_repository(CriteriaRepository)),
):
    return await create_category(
        form=request, db=db, category_repo=category_repo, criteria_repo=criteria_repo
    )


async def update_category_controller(
    category_id: uuid.UUID,
    request: EditCooperativeCategoryValidation,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    category_repo: CategoryRepository = Depends(get_repository(CategoryRepository)),
    criteria_repo: CriteriaRepository = Depends(get_repository(CriteriaRepository)),
):
    return await update_category(
        category_id=category_id,
        form=request,
        db=db,
        category_repo=category_repo,
        criteria_repo=criteria_repo,
    )


async def list_categories_controller(
    current_admin: dict = Depends(get_current_admin),
    category_repo: CategoryRepository = Depends(get_repository(CategoryRepository)),
):
    return await list_categories(category_repo=category_repo)


async def create_criteria_controller(
    request: CreateCriteriaValidation,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    criteria_repo: CriteriaRepository = Depends(get_repository(CriteriaRepository)),
):
    return await create_criteria(form=request, db=db, criteria_repo=criteria_repo)


async def update_criteria_controller(
    criteria_id: uuid.UUID,
    request: EditCriteriaValidation,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    criteria_repo: CriteriaRepository = Depends(get_repository(CriteriaRepository)),
    score_repo: ScoreRepository = Depends(get_repository(ScoreRepository)),
):
    return await update_criteria(
        criteria_id=criteria_id, form=request, db=db, criteria_repo=criteria_repo, score_repo=score_repo
    )


async def get_criteria_controller(
    criteria_id: uuid.UUID,
    current_admin: dict = Depends(get_current_admin),
    criteria_repo: CriteriaRepository = Depends(get_repository(CriteriaRepository)),
):
    return await get_criteria(criteria_id=criteria_id, criteria_repo=criteria_repo)


async def list_criteria_controller(
    current_admin: dict = Depends(get_current_admin),
    criteria_repo: CriteriaRepository = Depends(get_repository(CriteriaRepository)),
):
    return await list_criteria(criteria_repo=criteria_repo)


async def update_default_points_controller(
    cooperative_id: uuid.UUID,
    request: EditDefaultCriteriaPointValidation,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
    category_repo: CategoryRepository = Depends(get_repository(CategoryRepository)),
    criteria_repo: CriteriaRepository = Depends(get_repository(CriteriaRepository)),
    score_repo: ScoreRepository = Depends(get_repository(ScoreRepository)),
):
    return await update_default_points(
        cooperative_id=cooperative_id,
        form=request,
        db=db,
        cooperative_repo=cooperative_repo,
        category_repo=category_repo,
        criteria_repo=criteria_repo,
        score_repo=score_repo,
    )


async def update_field_points_controller(
    cooperative_id: uuid.UUID,
    field_id: uuid.UUID,
    request: EditCriteriaFieldPointValidation,
    current_admin: dict = Depends(get_current_admin),
    db: Session = Depends(get_db),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
    category_repo: CategoryRepository = Depends(get_repository(CategoryRepository)),
    criteria_repo: CriteriaRepository = Depends(get_repository(CriteriaRepository)),
    criteria_field_repo: CriteriaFieldRepository = Depends(get_repository(CriteriaFieldRepository)),
    score_repo: ScoreRepository = Depends(get_repository(ScoreRepository)),
):
    return await update_field_points(
        cooperative_id=cooperative_id,
        criteria_field_id=field_id,
        form=request,
        db=db,
        cooperative_repo=cooperative_repo,
        category_repo=category_repo,
        criteria_repo=criteria_repo,
        criteria_field_repo=criteria_field_repo,
        score_repo=score_repo,
    )


async def get_scores_controller(
    cooperative_id: uuid.UUID,
    category_id: Optional[uuid.UUID] = Query(None, alias="categoryId"),
    current_admin: dict = Depends(get_current_admin),
    cooperative_repo: CooperativeRepository = Depends(get_repository(CooperativeRepository)),
    category_repo: CategoryRepository = Depends(get_repository(CategoryRepository)),
    criteria_repo: CriteriaRepository = Depends(get_repository(CriteriaRepository)),
    score_repo: ScoreRepository = Depends(get_repository(ScoreRepository)),
):
    return await get_scores(
        cooperative_id=cooperative_id,
        category_id=category_id,
        cooperative_repo=cooperative_repo,
        category_repo=category_repo,
        criteria_repo=criteria_repo,
        score_repo=score_repo,
    )
