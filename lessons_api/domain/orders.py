"""Validation rules for order and account payloads."""
from __future__ import annotations

import re
from typing import Any, Mapping

from lessons_api.core.errors import ValidationError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
ORDER_FIELDS = ("name", "phone", "email")
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


def is_valid_email(value: str | None) -> bool:
    """Return True for ``local@domain.tld`` shaped addresses."""
    if not value or not isinstance(value, str):
        return False
    return bool(EMAIL_PATTERN.fullmatch(value))


def ensure_storable(value: Any, field: str) -> None:
    """Reject values that BSON cannot store or JSON responses cannot render.

    Strings must encode as UTF-8 (no lone surrogates) and integers must fit in
    a signed 64-bit word. Containers are checked recursively, keys included.
    """
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValidationError(f"Invalid text in field: {field}") from None
    elif isinstance(value, bool):
        return
    elif isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValidationError(f"Number out of range in field: {field}")
    elif isinstance(value, dict):
        for key, item in value.items():
            ensure_storable(key, field)
            ensure_storable(item, field)
    elif isinstance(value, list):
        for item in value:
            ensure_storable(item, field)


def _text(payload: Mapping[str, Any], field: str) -> str:
    value = payload.get(field)
    ensure_storable(value, field)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        return ""
    return value.strip()


def validate_order(payload: Mapping[str, Any]) -> dict:
    """Check an order submission and return the normalized fields.

    Raises ValidationError when name/phone/email is missing, items is not a
    non-empty list, or the email is malformed.
    """
    fields = {field: _text(payload, field) for field in ORDER_FIELDS}
    items = payload.get("items")
    ensure_storable(items, "items")
    missing = [field for field, value in fields.items() if not value]
    if not isinstance(items, list) or not items:
        missing.append("items")
    if missing:
        raise ValidationError(f"Missing order fields: {', '.join(missing)}")
    if not is_valid_email(fields["email"]):
        raise ValidationError("Invalid email address")
    fields["items"] = items
    return fields


def require_fields(payload: Mapping[str, Any], fields: tuple[str, ...], label: str) -> dict:
    values = {field: _text(payload, field) for field in fields}
    missing = [field for field, value in values.items() if not value]
    if missing:
        raise ValidationError(f"Missing {label} fields: {', '.join(missing)}")
    return values
