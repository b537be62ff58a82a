import uuid
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from schemas.cooperative import CreateCooperativeSchema
from schemas.criteria import (
    CreateCriteriaValidation,
    EditCriteriaFieldPointValidation,
    EditDefaultCriteriaPointValidation,
)
from schemas.loan import AddLoanSchemaValidation, AddRepaymentModalSchemaValidation
from schemas.member import (
    EditMemberValidationSchema,
    NewMemberValidationSchema,
    RegisteringMemberForm,
    RegisterMemberAccountSchema,
)
from schemas.reward import GiveRewardValidation
from schemas.transaction import (
    AddShareWithdrawalSchemaValidation,
    AddSharesSchemaValidation,
    AddSavingWithdrawalSchemaValidation,
    EditSavingWithdrawalSchemaValidation,
)
from utils.response import field_errors


def errors_of(schema, payload):
    with pytest.raises(ValidationError) as exc_info:
        schema.model_validate(payload)
    return field_errors(exc_info.value.errors())


class TestTransactionSchemas:
    def test_amount_below_ten_is_rejected(self):
        errors = errors_of(AddSharesSchemaValidation, {"memberId": 1, "type": "Deposit", "amount": 9.99})
        assert errors == {"amount": "Amount should be at least 10."}

    def test_amount_of_ten_is_accepted(self):
        form = AddSharesSchemaValidation.model_validate({"memberId": "1", "type": "Deposit", "amount": "10"})
        assert form.member_id == 1
        assert form.amount == Decimal("10")

    def test_unknown_type_is_rejected(self):
        errors = errors_of(AddSharesSchemaValidation, {"memberId": 1, "type": "Transfer", "amount": 50})
        assert errors["type"] == "Invalid type value."

    def test_missing_member_asks_to_select_one(self):
        errors = errors_of(AddSharesSchemaValidation, {"type": "Deposit", "amount": 50})
        assert errors["memberId"] == "Please select a member."

    def test_withdrawal_equal_to_balance_is_accepted(self):
        form = AddShareWithdrawalSchemaValidation.model_validate(
            {"memberId": 1, "type": "Withdraw", "share": 100, "amount": 100}
        )
        assert form.amount == Decimal("100")

    def test_withdrawal_above_balance_is_rejected(self):
        errors = errors_of(
            AddShareWithdrawalSchemaValidation,
            {"memberId": 1, "type": "Withdraw", "share": 100, "amount": "100.01"},
        )
        assert errors == {"amount": "Insufficient share balance."}

    def test_saving_withdrawal_uses_saving_message(self):
        errors = errors_of(
            AddSavingWithdrawalSchemaValidation,
            {"memberId": 1, "type": "Withdraw", "saving": 20, "amount": 50},
        )
        assert errors == {"amount": "Insufficient saving balance."}

    def test_saving_withdrawal_edit_equal_to_balance_is_accepted(self):
        form = EditSavingWithdrawalSchemaValidation.model_validate(
            {"memberId": 1, "type": "Withdraw", "saving": "250.50", "amount": "250.50"}
        )
        assert form.amount == Decimal("250.50")

    def test_saving_withdrawal_edit_above_balance_is_rejected(self):
        errors = errors_of(
            EditSavingWithdrawalSchemaValidation,
            {"memberId": 1, "type": "Withdraw", "saving": "250.50", "amount": "250.51"},
        )
        assert errors == {"amount": "Insufficient saving balance."}

    def test_amount_with_fractions_of_a_cent_is_rejected(self):
        errors = errors_of(AddSharesSchemaValidation, {"memberId": 1, "type": "Deposit", "amount": "10.005"})
        assert errors == {"amount": "Amount should not have more than 2 decimal places."}

    def test_trailing_zeros_do_not_count_as_places(self):
        form = AddSharesSchemaValidation.model_validate({"memberId": 1, "type": "Deposit", "amount": "10.500"})
        assert form.amount == Decimal("10.5")

    def test_remarks_longer_than_column_are_rejected(self):
        errors = errors_of(
            AddSharesSchemaValidation,
            {"memberId": 1, "type": "Deposit", "amount": 50, "remarks": "x" * 256},
        )
        assert errors == {"remarks": "Remarks should not exceed 255 characters."}


class TestLoanSchemas:
    def test_decimal_interest_is_rejected(self):
        errors = errors_of(
            AddLoanSchemaValidation, {"memberId": 1, "amount": 1000, "interest": 2.5, "tenure": 12}
        )
        assert errors == {"interest": "Interest value should not be decimal."}

    def test_repayment_cannot_exceed_remaining_balance(self):
        errors = errors_of(
            AddRepaymentModalSchemaValidation,
            {"loanId": str(uuid.uuid4()), "remainingBalance": 500, "amount": 600},
        )
        assert errors == {"amount": "Amount cannot be greater than remaining balance."}

    def test_loan_id_must_be_a_uuid(self):
        errors = errors_of(
            AddRepaymentModalSchemaValidation,
            {"loanId": "12345", "remainingBalance": 500, "amount": 100},
        )
        assert errors == {"loanId": "Invalid loan id."}

    def test_repayment_with_fractions_of_a_cent_is_rejected(self):
        errors = errors_of(
            AddRepaymentModalSchemaValidation,
            {"loanId": str(uuid.uuid4()), "remainingBalance": 500, "amount": 0.001},
        )
        assert errors == {"amount": "Amount should not have more than 2 decimal places."}


class TestCriteriaSchemas:
    def test_null_max_points_fails_the_minimum(self):
        errors = errors_of(
            CreateCriteriaValidation,
            {
                "name": "Standard",
                "financialPerformancePoints": 40,
                "organizationManagementPoints": 30,
                "criteriaFields": [{"name": "Audit", "maxPoints": None}],
            },
        )
        assert errors == {"criteriaFields.0.maxPoints": "Value should be greater than zero."}

    def test_non_numeric_field_points_fail_the_minimum_not_the_type(self):
        form = EditCriteriaFieldPointValidation.model_validate(
            {
                "cooperativeId": str(uuid.uuid4()),
                "categoryId": str(uuid.uuid4()),
                "criteriaFieldId": str(uuid.uuid4()),
                "points": "abc",
            }
        )
        assert form.points == 0

    def test_negative_default_points_are_rejected(self):
        errors = errors_of(
            EditDefaultCriteriaPointValidation,
            {
                "cooperativeId": str(uuid.uuid4()),
                "categoryId": str(uuid.uuid4()),
                "financialPerformancePoints": -1,
                "organizationManagementPoints": 3,
            },
        )
        assert errors == {"financialPerformancePoints": "Value should not be negative."}

    def test_criteria_fields_default_to_empty_list(self):
        form = CreateCriteriaValidation.model_validate(
            {"name": "Standard", "financialPerformancePoints": 1, "organizationManagementPoints": 1}
        )
        assert form.criteria_fields == []


class TestMemberSchemas:
    def test_registration_requires_nested_member_fields(self):
        errors = errors_of(RegisterMemberAccountSchema, {"email": "juan@example.com", "password": "secret"})
        assert errors["member.givenName"] == "Given name is required."
        assert errors["member.birthday"] == "Date of birth is required."

    def test_registration_rejects_bad_email(self):
        errors = errors_of(
            RegisterMemberAccountSchema,
            {
                "email": "not-an-email",
                "password": "secret",
                "member": {
                    "givenName": "Juan",
                    "middleName": "Reyes",
                    "surname": "Dela Cruz",
                    "birthday": "1990-05-17",
                },
            },
        )
        assert errors == {"email": "Invalid email format."}

    def test_mobile_number_pattern(self):
        payload = {
            "givenName": "Juan",
            "middleName": "Reyes",
            "surname": "Dela Cruz",
            "birthday": "1990-05-17",
            "gender": "Male",
            "educationalAttainment": "College",
            "civilStatus": "Single",
            "presentAddress": "Manila",
            "account": {"email": "juan@example.com", "mobileNumber": "+639171234567"},
            "TIN": "123-456",
            "dependents": None,
        }
        form = NewMemberValidationSchema.model_validate(payload)
        assert form.tin == "123-456"
        assert form.dependents == []

        payload["account"]["mobileNumber"] = "0917123456"
        errors = errors_of(NewMemberValidationSchema, payload)
        assert errors == {"account.mobileNumber": "Invalid mobile number."}

    @pytest.mark.parametrize("birthday", ["1990-05-17 not a date", "17/05/1990"])
    def test_birthday_must_be_a_whole_iso_date(self, birthday):
        errors = errors_of(
            RegisteringMemberForm,
            {"givenName": "Juan", "middleName": "Reyes", "surname": "Dela Cruz", "birthday": birthday},
        )
        assert errors == {"birthday": "Invalid date."}

    def test_birthday_accepts_iso_datetime(self):
        form = RegisteringMemberForm.model_validate(
            {
                "givenName": "Juan",
                "middleName": "Reyes",
                "surname": "Dela Cruz",
                "birthday": "1990-05-17T08:30:00",
            }
        )
        assert form.birthday == date(1990, 5, 17)

    def test_names_longer_than_column_are_rejected(self):
        errors = errors_of(
            RegisteringMemberForm,
            {"givenName": "J" * 101, "middleName": "Reyes", "surname": "Dela Cruz", "birthday": "1990-05-17"},
        )
        assert errors == {"givenName": "Given name should not exceed 100 characters."}

    def test_registration_fee_is_limited_to_cents(self):
        errors = errors_of(EditMemberValidationSchema, {"id": 1, "registrationFee": "150.255"})
        assert errors["registrationFee"] == "Registration fee should not have more than 2 decimal places."


class TestCooperativeAndRewardSchemas:
    def test_missing_account_reports_account_fields(self):
        errors = errors_of(
            CreateCooperativeSchema,
            {
                "name": "Bayanihan",
                "registrationNumber": "REG-1",
                "registrationDate": "2015-03-01",
                "categoryId": str(uuid.uuid4()),
                "initials": "BC",
                "address": "Quezon City",
            },
        )
        assert errors["account.email"] == "Account email is required."

    def test_invalid_category_id(self):
        errors = errors_of(CreateCooperativeSchema, {"categoryId": "not-a-uuid"})
        assert errors["categoryId"] == "Invalid category."

    def test_reward_date_is_required(self):
        errors = errors_of(
            GiveRewardValidation,
            {"cooperativeId": str(uuid.uuid4()), "rewardId": str(uuid.uuid4())},
        )
        assert errors == {"date": "Date is required."}
