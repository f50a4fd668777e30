"""
flowform: conversational form filling.

Turns free-text user messages into validated field values, one turn at a
time, using an injected language-model client.
"""

from flowform.core.errors import (
    ClientError,
    FieldValidationError,
    IncompleteResponseError,
    MalformedResponseError,
    UnknownFieldError,
)
from flowform.core.orchestrator import OrchestratorResult, determine_next_field, is_form_complete, run_llm_step
from flowform.core.state import Session, SessionField, SessionStatus, SessionTurn, TurnRole
from flowform.forms.models import FieldType, FieldValue, FormDefinition, FormField, ValidationRule
from flowform.llm.base import LLMClient
from flowform.llm.schemas import LLMMessage, LLMResponse, TokenUsage
from flowform.validation import Invalid, Valid, ValidationResult, validate_field

__version__ = "0.1.0"
__all__ = [
    "ClientError",
    "FieldType",
    "FieldValidationError",
    "FieldValue",
    "FormDefinition",
    "FormField",
    "IncompleteResponseError",
    "Invalid",
    "LLMClient",
    "LLMMessage",
    "LLMResponse",
    "MalformedResponseError",
    "OrchestratorResult",
    "Session",
    "SessionField",
    "SessionStatus",
    "SessionTurn",
    "TokenUsage",
    "TurnRole",
    "UnknownFieldError",
    "Valid",
    "ValidationResult",
    "ValidationRule",
    "determine_next_field",
    "is_form_complete",
    "run_llm_step",
    "validate_field",
]
