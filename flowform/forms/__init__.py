"""Form and field definitions."""

from flowform.forms.models import (
    FieldType,
    FieldValue,
    FormDefinition,
    FormField,
    ValidationRule,
)

__all__ = [
    "FieldType",
    "FieldValue",
    "FormDefinition",
    "FormField",
    "ValidationRule",
]
