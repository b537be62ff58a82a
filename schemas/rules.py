"""
Field rules shared by the form schemas.

Each factory returns a pydantic ``BeforeValidator`` that coerces the raw form
value and raises a ``PydanticCustomError`` carrying the user-facing message of
the first rule that fails, so the rendered error is exactly that message.

    class AddLoanForm(FormModel):
        amount: Annotated[Optional[Decimal], number(
            "Amount is required.", minimum=(10, "Amount should be at least 10.")
        )] = None
"""
import re
import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Tuple, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, BeforeValidator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

UUID_PATTERN = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000)$",
    re.IGNORECASE,
)
# 09XXXXXXXXX or +639XXXXXXXXX
PH_MOBILE_PATTERN = re.compile(r"^(09|\+639)\d{9}$")

Number = Union[int, Decimal]


class FormModel(BaseModel):
    """Base for form payloads: camelCase keys, rules applied to missing fields too."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        validate_default = True
        extra = "ignore"


def fail(code: str, message: str):
    raise PydanticCustomError(code, message)


def longest(length: int, label: str) -> Tuple[int, str]:
    """``max_length`` option sized to the backing column."""
    return length, f"{label} should not exceed {length} characters."


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def is_uuid(value: Any) -> bool:
    return isinstance(value, str) and bool(UUID_PATTERN.match(value))


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def text(
    required: Optional[str] = None,
    *,
    email: Optional[str] = None,
    mobile: Optional[str] = None,
    choices: Optional[Iterable[str]] = None,
    choices_message: str = "Invalid value.",
    max_length: Optional[Tuple[int, str]] = None,
):
    """String rule. Blank optional values become ``None``."""
    allowed = tuple(choices) if choices is not None else None

    def check(value: Any) -> Optional[str]:
        if _is_blank(value):
            if required:
                fail("required", required)
            return None
        if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
            fail("string_type", "Invalid value.")
        value = str(value)
        if max_length is not None and len(value) > max_length[0]:
            fail("max_length", max_length[1])
        if email and not _is_email(value):
            fail("email", email)
        if mobile and not PH_MOBILE_PATTERN.match(value):
            fail("mobile_number", mobile)
        if allowed is not None and value not in allowed:
            fail("one_of", choices_message)
        return value

    return BeforeValidator(check)


def uuid_string(required: Optional[str] = "Id is required.", message: str = "Invalid id."):
    """RFC-4122 identifier in canonical hyphenated form; optional when ``required`` is None."""

    def check(value: Any) -> Optional[uuid.UUID]:
        if isinstance(value, uuid.UUID):
            return value
        if _is_blank(value):
            if required:
                fail("required", required)
            return None
        if not is_uuid(value):
            fail("uuid", message)
        return uuid.UUID(value)

    return BeforeValidator(check)


def _to_decimal(value: Any) -> Optional[Decimal]:
    """Parse a form value as a number; ``None`` when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = Decimal(str(value))
    elif isinstance(value, str):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not parsed.is_finite():
        return None
    return parsed


def number(
    required: Optional[str] = None,
    *,
    minimum: Optional[Tuple[Number, str]] = None,
    integer: Optional[str] = None,
    places: Optional[Tuple[int, str]] = None,
    type_error: str = "Invalid value.",
    invalid_as_zero: bool = False,
):
    """
    Numeric rule checked in the order: type, required, minimum, integer, places.

    ``invalid_as_zero`` coerces blank, null and non-numeric input to 0 before
    any other check, so such input fails the minimum rather than the type.
    Integer-checked fields come back as ``int``, the rest as ``Decimal``.
    """

    def check(value: Any) -> Optional[Number]:
        if _is_blank(value):
            parsed = Decimal(0) if invalid_as_zero else None
        else:
            parsed = _to_decimal(value)
            if parsed is None:
                if not invalid_as_zero:
                    fail("number_type", type_error)
                parsed = Decimal(0)

        if parsed is None:
            if required:
                fail("required", required)
            return None
        if minimum is not None and parsed < Decimal(str(minimum[0])):
            fail("minimum", minimum[1])
        if integer is not None:
            if parsed != parsed.to_integral_value():
                fail("integer", integer)
            return int(parsed)
        if places is not None and parsed.normalize().as_tuple().exponent < -places[0]:
            fail("decimal_places", places[1])
        return parsed

    return BeforeValidator(check)


def day(required: Optional[str] = None, message: str = "Invalid date."):
    """ISO ``YYYY-MM-DD`` date; full ISO datetimes keep only their date part."""

    def check(value: Any) -> Optional[date]:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if _is_blank(value):
            if required:
                fail("required", required)
            return None
        if not isinstance(value, str):
            fail("date", message)
        value = value.strip()
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            fail("date", message)

    return BeforeValidator(check)


def within_balance(amount: Optional[Number], balance: Optional[Number], message: str):
    """Cross-field rule: the amount may not exceed the balance supplied beside it."""
    if amount is None:
        return amount
    if balance is None or Decimal(str(balance)) < Decimal(str(amount)):
        fail("insufficient_balance", message)
    return amount
