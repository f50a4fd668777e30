"""Pydantic models for form definitions and the fields they collect."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Absent values are represented by None.
FieldValue = str | int | float | datetime | date | None


class FieldType(str, Enum):
    """Supported field kinds."""

    TEXT = "TEXT"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    NUMBER = "NUMBER"
    DATE = "DATE"
    ENUM = "ENUM"
    LONG_TEXT = "LONG_TEXT"


class ValidationRule(BaseModel):
    """Optional constraints attached to a field."""

    model_config = ConfigDict(frozen=True)

    min: Annotated[int | float | None, Field(default=None, description="NUMBER: minimum value; TEXT: min length (not enforced)")]
    max: Annotated[int | float | None, Field(default=None, description="NUMBER: maximum value; TEXT: max length (not enforced)")]
    pattern: Annotated[str | None, Field(default=None, description="Custom regex pattern (not enforced)")]
    options: Annotated[tuple[str, ...] | None, Field(default=None, description="ENUM: allowed values")]


class FormField(BaseModel):
    """A single field in a form."""

    model_config = ConfigDict(frozen=True)

    id: Annotated[str, Field(description="Unique identifier, e.g. field_001")]
    name: Annotated[str, Field(description="Programmatic name used as the extraction key")]
    label: Annotated[str, Field(description="Human-readable label")]
    type: FieldType
    required: bool = True
    validation: ValidationRule | None = None
    order: Annotated[int, Field(default=0, description="Display/collection order (0-indexed)")]
    description: Annotated[str | None, Field(default=None, description="Optional help text")]


class FormDefinition(BaseModel):
    """Complete, read-only form structure."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str | None = None
    fields: tuple[FormField, ...] = ()
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def field_ids_and_names_unique(self) -> "FormDefinition":
        seen_ids: set[str] = set()
        seen_names: set[str] = set()
        for field in self.fields:
            if field.id in seen_ids:
                raise ValueError(f"Duplicate field id '{field.id}' in form '{self.id}'.")
            if field.name in seen_names:
                raise ValueError(f"Duplicate field name '{field.name}' in form '{self.id}'.")
            seen_ids.add(field.id)
            seen_names.add(field.name)
        return self

    def get_field_by_name(self, name: str) -> FormField | None:
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def ordered_fields(self) -> list[FormField]:
        """Fields sorted by their declared display order."""
        return sorted(self.fields, key=lambda f: f.order)
