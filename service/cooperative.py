from fastapi import status
from sqlalchemy.orm import Session
import uuid
import logging

from models.cooperative import Cooperative
from schemas.cooperative import CreateCooperativeSchema, EditCooperativeSchema
from store.repositories import (
    CategoryRepository,
    CooperativeAccountRepository,
    CooperativeRepository,
    LoanRepository,
    MemberRepository,
    RewardRepository,
    SavingTransactionRepository,
    ShareTransactionRepository,
)
from utils.auth import hash_password
from utils.password_utils import generate_secure_password
from utils.response import UNKNOWN_ERROR_MESSAGE, error_response, success_response

logger = logging.getLogger(__name__)


def serialize_cooperative(cooperative: Cooperative) -> dict:
    account = cooperative.account
    return {
        "id": cooperative.id,
        "name": cooperative.name,
        "registrationNumber": cooperative.registration_number,
        "registrationDate": cooperative.registration_date,
        "categoryId": cooperative.category_id,
        "initials": cooperative.initials,
        "address": cooperative.address,
        "account": {
            "id": account.id,
            "givenName": account.given_name,
            "middleName": account.middle_name,
            "surname": account.surname,
            "email": account.email,
        }
        if account is not None
        else None,
    }


def _cooperative_values(form: CreateCooperativeSchema) -> dict:
    return {
        "name": form.name,
        "registration_number": form.registration_number,
        "registration_date": form.registration_date,
        "category_id": form.category_id,
        "initials": form.initials,
        "address": form.address,
    }


async def create_cooperative(
    form: CreateCooperativeSchema,
    db: Session,
    cooperative_repo: CooperativeRepository,
    account_repo: CooperativeAccountRepository,
    category_repo: CategoryRepository,
):
    """
    Register a cooperative together with the account that signs in for it.

    The account gets a generated temporary password, returned only in this
    response.
    """
    if category_repo.get_by_id(form.category_id) is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Category not found")

    if account_repo.email_taken(form.account.email):
        return error_response(status_code=status.HTTP_409_CONFLICT, message="Email is already in use.")

    temporary_password = generate_secure_password()
    try:
        cooperative = cooperative_repo.create(_cooperative_values(form))
        account_repo.create(
            {
                "cooperative_id": cooperative.id,
                "given_name": form.account.given_name,
                "middle_name": form.account.middle_name,
                "surname": form.account.surname,
                "email": form.account.email,
                "password": hash_password(temporary_password),
            }
        )
        db.commit()
        db.refresh(cooperative)
    except Exception as e:
        db.rollback()
        logger.error(f"Cooperative creation failed: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    logger.info(f"Cooperative {cooperative.id} created")
    data = serialize_cooperative(cooperative)
    data["temporaryPassword"] = temporary_password
    return success_response(
        status_code=status.HTTP_201_CREATED,
        message="Cooperative has been added.",
        data=data,
    )


async def update_cooperative(
    cooperative_id: uuid.UUID,
    form: EditCooperativeSchema,
    db: Session,
    cooperative_repo: CooperativeRepository,
    account_repo: CooperativeAccountRepository,
    category_repo: CategoryRepository,
):
    if form.id != cooperative_id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Cooperative id mismatch.")

    cooperative = cooperative_repo.get_with_account(cooperative_id)
    if cooperative is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Cooperative not found")

    if category_repo.get_by_id(form.category_id) is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Category not found")

    account = cooperative.account
    if account is None or form.account.id != account.id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Account id mismatch.")

    if account_repo.email_taken(form.account.email, exclude_id=account.id):
        return error_response(status_code=status.HTTP_409_CONFLICT, message="Email is already in use.")

    try:
        cooperative_repo.update(cooperative, _cooperative_values(form))
        account_repo.update(
            account,
            {
                "given_name": form.account.given_name,
                "middle_name": form.account.middle_name,
                "surname": form.account.surname,
                "email": form.account.email,
            },
        )
        db.commit()
        db.refresh(cooperative)
    except Exception as e:
        db.rollback()
        logger.error(f"Cooperative {cooperative_id} update failed: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Cooperative has been updated.",
        data=serialize_cooperative(cooperative),
    )


async def list_cooperatives(cooperative_repo: CooperativeRepository, skip: int = 0, limit: int = 100):
    cooperatives = cooperative_repo.list_with_accounts(skip=skip, limit=limit)
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Cooperatives retrieved",
        data=[serialize_cooperative(cooperative) for cooperative in cooperatives],
    )


async def get_cooperative(cooperative_id: uuid.UUID, cooperative_repo: CooperativeRepository):
    cooperative = cooperative_repo.get_with_account(cooperative_id)
    if cooperative is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Cooperative not found")

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Cooperative retrieved",
        data=serialize_cooperative(cooperative),
    )


async def cooperative_dashboard(
    current_cooperative: dict,
    member_repo: MemberRepository,
    share_repo: ShareTransactionRepository,
    saving_repo: SavingTransactionRepository,
    loan_repo: LoanRepository,
):
    """Totals shown on the landing page after a cooperative signs in."""
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Dashboard retrieved",
        data={
            "cooperative": {
                "id": current_cooperative["cooperative_id"],
                "name": current_cooperative["cooperative_name"],
                "initials": current_cooperative["cooperative_initials"],
            },
            "account": {
                "email": current_cooperative["email"],
                "givenName": current_cooperative["given_name"],
                "surname": current_cooperative["surname"],
            },
            "memberCount": member_repo.count_by_cooperative(coop_id),
            "shareTotal": share_repo.total_for_cooperative(coop_id),
            "savingTotal": saving_repo.total_for_cooperative(coop_id),
            "outstandingLoans": loan_repo.outstanding_for_cooperative(coop_id),
        },
    )


async def admin_dashboard(
    current_admin: dict,
    cooperative_repo: CooperativeRepository,
    reward_repo: RewardRepository,
    category_repo: CategoryRepository,
):
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Dashboard retrieved",
        data={
            "admin": {"name": current_admin["name"], "email": current_admin["email"]},
            "cooperativeCount": cooperative_repo.count(),
            "rewardCount": reward_repo.count(),
            "categoryCount": category_repo.count(),
        },
    )
