"""Tests for the client error hierarchy."""

import json
from datetime import date

from flowform.core.errors import (
    ClientError,
    FieldValidationError,
    IncompleteResponseError,
    MalformedResponseError,
    UnknownFieldError,
)


def test_error_hierarchy():
    for cls in (MalformedResponseError, IncompleteResponseError, UnknownFieldError, FieldValidationError):
        assert issubclass(cls, ClientError)


def test_error_attributes():
    err = ClientError("something broke", "TEST_CODE")
    assert err.error_code == "TEST_CODE"
    assert err.status_code == 400
    assert str(err) == "something broke"
    assert err.context is None


def test_stable_codes():
    assert MalformedResponseError("x", "bad").error_code == "INVALID_LLM_RESPONSE"
    assert IncompleteResponseError("{}").error_code == "INCOMPLETE_LLM_RESPONSE"
    assert UnknownFieldError("f", "form").error_code == "UNKNOWN_FIELD"
    assert FieldValidationError("bad", "f", 1, "form").error_code == "VALIDATION_ERROR"


def test_to_dict_is_json_safe():
    err = FieldValidationError("Invalid date format", "dob", date(2024, 2, 1), "form1")
    payload = err.to_dict()

    assert payload == {
        "error_code": "VALIDATION_ERROR",
        "message": "Invalid date format",
        "status_code": 400,
        "context": {"field_name": "dob", "value": "2024-02-01", "form_id": "form1"},
    }
    json.dumps(payload)
