"""Field value validation."""

from flowform.validation.dispatch import validate_field
from flowform.validation.results import Invalid, Valid, ValidationResult
from flowform.validation.validators import (
    validate_date,
    validate_email,
    validate_enum,
    validate_number,
    validate_phone,
)

__all__ = [
    "Invalid",
    "Valid",
    "ValidationResult",
    "validate_date",
    "validate_email",
    "validate_enum",
    "validate_field",
    "validate_number",
    "validate_phone",
]
