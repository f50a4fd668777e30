"""Field validation dispatcher: required/optional policy, then per-kind validators."""

from __future__ import annotations

from datetime import date
from typing import assert_never

from flowform.forms.models import FieldType, FieldValue, FormField, ValidationRule
from flowform.validation.results import VALID, Invalid, ValidationResult
from flowform.validation.validators import (
    INVALID_DATE,
    validate_date,
    validate_email,
    validate_enum,
    validate_number,
    validate_phone,
)


def check_required(field: FormField, value: FieldValue) -> ValidationResult | None:
    """Return a result when the required policy decides, or None to continue."""
    if value is None:
        if field.required:
            return Invalid("Field is required")
        return VALID
    return None


def _to_number(value: FieldValue) -> int | float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _validate_number_field(value: FieldValue, rules: ValidationRule | None) -> ValidationResult:
    number = _to_number(value)
    if number is None:
        return Invalid("Value must be a number")
    rules = rules or ValidationRule()
    return validate_number(number, min=rules.min, max=rules.max)


def _validate_date_field(value: FieldValue) -> ValidationResult:
    if isinstance(value, (date, str)):
        return validate_date(value)
    return Invalid(INVALID_DATE)


def _validate_enum_field(value: FieldValue, rules: ValidationRule | None) -> ValidationResult:
    options = (rules.options if rules else None) or ()
    return validate_enum(str(value), options)


def validate_field(field: FormField, value: FieldValue) -> ValidationResult:
    """Validate ``value`` against ``field``'s kind and constraints."""
    required = check_required(field, value)
    if required is not None:
        return required

    match field.type:
        case FieldType.EMAIL:
            return validate_email(str(value))
        case FieldType.PHONE:
            return validate_phone(str(value))
        case FieldType.NUMBER:
            return _validate_number_field(value, field.validation)
        case FieldType.DATE:
            return _validate_date_field(value)
        case FieldType.ENUM:
            return _validate_enum_field(value, field.validation)
        case FieldType.TEXT | FieldType.LONG_TEXT:
            # Length and pattern constraints are intentionally not enforced.
            return VALID
        case _:
            assert_never(field.type)
