from __future__ import annotations

import pytest

from lessons_api.core.errors import ValidationError
from lessons_api.domain.orders import ensure_storable, is_valid_email, require_fields, validate_order

VALID = {"name": "Ana", "phone": "0712345678", "email": "ana@example.com", "items": [{"id": "l1", "qty": 1}]}


@pytest.mark.parametrize("email", ["ana@example.com", "a.b+c@mail.co.uk", "x@y.z"])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["", None, "ana", "ana@example", "@example.com", "ana@.com.", "a na@example.com", "ana@@example.com", 42])
def test_invalid_emails(email):
    assert not is_valid_email(email)


def test_validate_order_returns_trimmed_fields():
    fields = validate_order({**VALID, "name": "  Ana  "})
    assert fields["name"] == "Ana"
    assert fields["items"] == VALID["items"]


def test_numeric_phone_is_accepted():
    assert validate_order({**VALID, "phone": 712345678})["phone"] == "712345678"


@pytest.mark.parametrize("field", ["name", "phone", "email"])
def test_missing_field_is_reported(field):
    payload = {k: v for k, v in VALID.items() if k != field}
    with pytest.raises(ValidationError) as excinfo:
        validate_order(payload)
    assert field in excinfo.value.message


@pytest.mark.parametrize("items", [[], None, "l1", {"id": "l1"}])
def test_items_must_be_a_non_empty_list(items):
    with pytest.raises(ValidationError) as excinfo:
        validate_order({**VALID, "items": items})
    assert "items" in excinfo.value.message


def test_bad_email_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        validate_order({**VALID, "email": "not-an-email"})
    assert excinfo.value.message == "Invalid email address"


def test_require_fields_lists_every_missing_field():
    with pytest.raises(ValidationError) as excinfo:
        require_fields({"name": " "}, ("name", "email"), "registration")
    assert excinfo.value.message == "Missing registration fields: name, email"


@pytest.mark.parametrize("value", ["plain", "naïve ☕", 2**63 - 1, -(2**63), 1.5e300, True, None, [{"qty": 3}], {"k": ["v"]}])
def test_storable_values_pass(value):
    ensure_storable(value, "field")


@pytest.mark.parametrize("value", ["\ud800", 2**63, -(2**63) - 1, [{"qty": 10**20}], {"\udfff": 1}, {"k": ["ok", "x\ud800"]}])
def test_unstorable_values_are_rejected(value):
    with pytest.raises(ValidationError):
        ensure_storable(value, "field")


def test_order_with_lone_surrogate_name_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        validate_order({**VALID, "name": "\ud800"})
    assert excinfo.value.message == "Invalid text in field: name"


def test_order_with_oversized_quantity_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        validate_order({**VALID, "items": [{"id": "l1", "qty": 10**20}]})
    assert excinfo.value.message == "Number out of range in field: items"
