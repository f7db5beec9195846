"""Validation of POST /api/apartments bodies.

Unlike the listing query parser this collects every problem before failing,
so a client can fix the whole form in one round trip.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from apartments_api.exceptions import RecordValidationException
from apartments_api.models import (
    APARTMENT_STATUSES,
    MAX_TEXT_LENGTH,
    ApartmentCreate,
    ApartmentStatus,
)

REQUIRED_TEXT_FIELDS = ("project", "unit_name", "unit_number", "city")
REQUIRED_NUMERIC_FIELDS = ("price", "area")

# Numeric(10, 2)
MAX_AMOUNT = Decimal("99999999.99")
CENTS = Decimal("0.01")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return None


def _parse_amount(field: str, value: Any) -> tuple[Optional[Decimal], Optional[str]]:
    """Parse a price or area into a Numeric(10, 2) value, or return an error message."""
    not_positive = f"{field.capitalize()} must be a positive number"
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        return None, not_positive
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return None, not_positive
    if not amount.is_finite() or amount <= 0:
        return None, not_positive
    # Range check before quantize: huge exponents overflow the decimal context.
    if amount > MAX_AMOUNT:
        return None, f"{field.capitalize()} must not exceed {MAX_AMOUNT}"

    amount = amount.quantize(CENTS)
    if amount <= 0:
        return None, not_positive
    if amount > MAX_AMOUNT:
        return None, f"{field.capitalize()} must not exceed {MAX_AMOUNT}"
    return amount, None


def validate_apartment_input(payload: Mapping[str, Any]) -> ApartmentCreate:
    """Validate a raw create body, reporting all violations together.

    Raises:
        RecordValidationException: With one message per offending field
    """
    missing: list[str] = []
    invalid: list[str] = []
    values: dict[str, Any] = {}

    for field in REQUIRED_TEXT_FIELDS + REQUIRED_NUMERIC_FIELDS:
        if _is_blank(payload.get(field)):
            missing.append(f"{field} is required")

    for field in REQUIRED_TEXT_FIELDS:
        raw = payload.get(field)
        if _is_blank(raw):
            continue
        text = _parse_text(raw)
        if text is None:
            invalid.append(f"{field} must be a string")
        elif len(text) > MAX_TEXT_LENGTH:
            invalid.append(f"{field} must be at most {MAX_TEXT_LENGTH} characters")
        else:
            values[field] = text

    for field in REQUIRED_NUMERIC_FIELDS:
        raw = payload.get(field)
        if _is_blank(raw):
            continue
        amount, error = _parse_amount(field, raw)
        if error:
            invalid.append(error)
        else:
            values[field] = amount

    description = payload.get("description")
    if description is not None and not isinstance(description, str):
        invalid.append("description must be a string")
    else:
        values["description"] = description

    status = payload.get("status")
    if _is_blank(status):
        values["status"] = ApartmentStatus.AVAILABLE.value
    elif status not in APARTMENT_STATUSES:
        invalid.append(f"Status must be one of: {', '.join(APARTMENT_STATUSES)}")
    else:
        values["status"] = status

    if missing or invalid:
        detail = "Missing required fields" if not invalid else "Validation error"
        raise RecordValidationException(missing + invalid, detail=detail)

    return ApartmentCreate(**values)
