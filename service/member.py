from fastapi import status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import Any, Optional
import uuid
import logging

from models.member import Member, MemberAccount
from schemas.member import (
    EditMemberValidationSchema,
    NewMemberValidationSchema,
    RegisterMemberAccountSchema,
)
from schemas.rules import is_uuid
from store.enums import SessionKind
from store.repositories import (
    CooperativeRepository,
    DependentRepository,
    LoanRepository,
    MemberAccountRepository,
    MemberRepository,
    SavingTransactionRepository,
    SessionRepository,
    ShareTransactionRepository,
)
from utils.auth import hash_password
from utils.response import (
    UNKNOWN_ERROR_MESSAGE,
    error_response,
    success_response,
    validation_error_response,
)
from config.settings import settings

logger = logging.getLogger(__name__)

DUPLICATE_RECORD_MESSAGE = (
    "Looks like you already have a record. Please contact the cooperative to resolve this issue."
)


def serialize_member(member: Member, include_details: bool = False) -> dict:
    data = {
        "id": member.id,
        "cooperativeId": member.cooperative_id,
        "givenName": member.given_name,
        "middleName": member.middle_name,
        "surname": member.surname,
        "fullName": member.full_name,
        "birthday": member.birthday,
        "account": None,
    }
    if member.account is not None:
        data["account"] = {
            "id": member.account.id,
            "email": member.account.email,
            "mobileNumber": member.account.mobile_number,
            "registeredOnline": member.account.password is not None,
        }
    if include_details:
        data.update(
            {
                "gender": member.gender,
                "educationalAttainment": member.educational_attainment,
                "civilStatus": member.civil_status,
                "TIN": member.tin,
                "spouseName": member.spouse_name,
                "presentAddress": member.present_address,
                "provincialAddress": member.provincial_address,
                "officeAddress": member.office_address,
                "officePhoneNumber": member.office_phone_number,
                "registrationFee": member.registration_fee,
                "dependents": [
                    {
                        "id": dependent.id,
                        "name": dependent.name,
                        "relationship": dependent.relationship_to_member,
                        "birthday": dependent.birthday,
                    }
                    for dependent in member.dependents
                ],
            }
        )
    return data


def _member_values(form: NewMemberValidationSchema) -> dict:
    return {
        "given_name": form.given_name,
        "middle_name": form.middle_name,
        "surname": form.surname,
        "birthday": form.birthday,
        "gender": form.gender,
        "educational_attainment": form.educational_attainment,
        "civil_status": form.civil_status,
        "tin": form.tin,
        "spouse_name": form.spouse_name,
        "present_address": form.present_address,
        "provincial_address": form.provincial_address,
        "office_address": form.office_address,
        "office_phone_number": form.office_phone_number,
    }


def _dependent_values(form: NewMemberValidationSchema) -> list:
    return [
        {
            "name": dependent.name,
            "relationship_to_member": dependent.relationship,
            "birthday": dependent.birthday,
        }
        for dependent in form.dependents
    ]


async def register_member_account(
    cooperative_id: Optional[str],
    payload: Any,
    db: Session,
    cooperative_repo: CooperativeRepository,
    member_repo: MemberRepository,
    member_account_repo: MemberAccountRepository,
    session_repo: SessionRepository,
):
    """
    Online self-registration of a prospective member.

    Creates the Member and its MemberAccount in one transaction and answers
    with a short-lived token for the confirmation page. A person already on
    record (same given name, surname and birthday) must go through the
    cooperative instead.
    """
    if not cooperative_id or not is_uuid(cooperative_id):
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Invalid coop id")

    try:
        form = RegisterMemberAccountSchema.model_validate(payload if payload is not None else {})
    except ValidationError as e:
        return validation_error_response(e)

    coop_id = uuid.UUID(cooperative_id)
    try:
        if cooperative_repo.get_by_id(coop_id) is None:
            return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Cooperative not found")

        existing = member_repo.find_existing_record(
            form.member.given_name, form.member.surname, form.member.birthday
        )
        if existing:
            return error_response(status_code=status.HTTP_400_BAD_REQUEST, message=DUPLICATE_RECORD_MESSAGE)

        member = member_repo.create(
            {
                "cooperative_id": coop_id,
                "given_name": form.member.given_name,
                "middle_name": form.member.middle_name,
                "surname": form.member.surname,
                "birthday": form.member.birthday,
                "gender": "",
                "educational_attainment": "",
                "civil_status": "",
                "office_phone_number": "",
                "present_address": "",
                "spouse_name": "",
            }
        )
        member_account_repo.create(
            {
                "member_id": member.id,
                "email": form.email,
                "mobile_number": "",
                "password": hash_password(form.password),
            }
        )
        token = session_repo.issue(
            SessionKind.REGISTRATION,
            {"member_id": member.id, "cooperative_id": str(coop_id)},
            settings.REGISTRATION_TOKEN_TTL_SECONDS,
        )
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Member registration failed: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    logger.info(f"Member {member.id} registered online with cooperative {coop_id}")
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Account has been registered.",
        data={"token": token.sid},
    )


async def get_registration(
    token: str,
    member_repo: MemberRepository,
    cooperative_repo: CooperativeRepository,
    session_repo: SessionRepository,
):
    """Details shown on the page a freshly registered member lands on."""
    session = session_repo.get_active(token, SessionKind.REGISTRATION)
    if session is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Registration not found or expired")

    member = member_repo.get_by_id(session.data.get("member_id"))
    if member is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Registration not found or expired")
    cooperative = cooperative_repo.get_by_id(member.cooperative_id)

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Registration retrieved",
        data={
            "memberId": member.id,
            "fullName": member.full_name,
            "cooperative": {"id": cooperative.id, "name": cooperative.name},
            "expiresAt": session.expires_at,
        },
    )


async def create_member(
    form: NewMemberValidationSchema,
    current_cooperative: dict,
    db: Session,
    member_repo: MemberRepository,
    dependent_repo: DependentRepository,
):
    """Cooperative staff enrolls a member (no password until online registration)."""
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])

    existing = member_repo.find_existing_record(form.given_name, form.surname, form.birthday)
    if existing and existing.cooperative_id == coop_id:
        return error_response(status_code=status.HTTP_409_CONFLICT, message="Member already exists.")

    try:
        member = member_repo.create({"cooperative_id": coop_id, **_member_values(form)})
        member.account = MemberAccount(
            email=form.account.email,
            mobile_number=form.account.mobile_number,
        )
        dependent_repo.replace_for_member(member, _dependent_values(form))
        db.commit()
        db.refresh(member)
    except Exception as e:
        db.rollback()
        logger.error(f"Member creation failed: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    return success_response(
        status_code=status.HTTP_201_CREATED,
        message="Member has been added.",
        data=serialize_member(member, include_details=True),
    )


async def update_member(
    member_id: int,
    form: EditMemberValidationSchema,
    current_cooperative: dict,
    db: Session,
    member_repo: MemberRepository,
    dependent_repo: DependentRepository,
):
    if form.id is not None and form.id != member_id:
        return error_response(status_code=status.HTTP_400_BAD_REQUEST, message="Member id mismatch.")

    coop_id = uuid.UUID(current_cooperative["cooperative_id"])
    member = member_repo.get_in_cooperative(member_id, coop_id)
    if member is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Member not found")

    try:
        member_repo.update(
            member, {**_member_values(form), "registration_fee": form.registration_fee}
        )
        if member.account is None:
            member.account = MemberAccount(
                email=form.account.email, mobile_number=form.account.mobile_number
            )
        else:
            member.account.email = form.account.email
            member.account.mobile_number = form.account.mobile_number
        dependent_repo.replace_for_member(member, _dependent_values(form))
        db.commit()
        db.refresh(member)
    except Exception as e:
        db.rollback()
        logger.error(f"Member {member_id} update failed: {str(e)}", exc_info=True)
        return error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=UNKNOWN_ERROR_MESSAGE
        )

    return success_response(
        status_code=status.HTTP_200_OK,
        message="Member has been updated.",
        data=serialize_member(member, include_details=True),
    )


async def list_members(
    current_cooperative: dict,
    member_repo: MemberRepository,
    search: Optional[str] = None,
    limit: int = 50,
    offset: int = 0,
):
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])
    members, total = member_repo.list_by_cooperative(coop_id, search=search, skip=offset, limit=limit)
    return success_response(
        status_code=status.HTTP_200_OK,
        message="Members retrieved",
        data={
            "members": [serialize_member(member) for member in members],
            "total": total,
            "limit": limit,
            "offset": offset,
        },
    )


async def get_member(
    member_id: int,
    current_cooperative: dict,
    member_repo: MemberRepository,
    share_repo: ShareTransactionRepository,
    saving_repo: SavingTransactionRepository,
    loan_repo: LoanRepository,
):
    coop_id = uuid.UUID(current_cooperative["cooperative_id"])
    member = member_repo.get_in_cooperative(member_id, coop_id)
    if member is None:
        return error_response(status_code=status.HTTP_404_NOT_FOUND, message="Member not found")

    data = serialize_member(member, include_details=True)
    loans = loan_repo.list_by_cooperative(coop_id, member_id=member.id)
    data["balances"] = {
        "share": share_repo.balance_for(member.id),
        "saving": saving_repo.balance_for(member.id),
        "loan": sum((loan_repo.remaining_balance(loan) for loan in loans), 0),
    }
    return success_response(status_code=status.HTTP_200_OK, message="Member retrieved", data=data)
