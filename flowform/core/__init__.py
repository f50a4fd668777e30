"""Turn orchestration core: session state, prompts, reply interpretation."""

from flowform.core.errors import (
    ClientError,
    FieldValidationError,
    IncompleteResponseError,
    MalformedResponseError,
    UnknownFieldError,
)
from flowform.core.interpreter import ExtractionReply, parse_extracted_fields
from flowform.core.orchestrator import (
    OrchestratorResult,
    determine_next_field,
    is_form_complete,
    run_llm_step,
)
from flowform.core.prompt_builder import (
    build_conversation_history,
    build_field_context,
    build_messages,
    build_system_prompt,
)
from flowform.core.state import Session, SessionField, SessionStatus, SessionTurn, TurnRole

__all__ = [
    "ClientError",
    "ExtractionReply",
    "FieldValidationError",
    "IncompleteResponseError",
    "MalformedResponseError",
    "OrchestratorResult",
    "Session",
    "SessionField",
    "SessionStatus",
    "SessionTurn",
    "TurnRole",
    "UnknownFieldError",
    "build_conversation_history",
    "build_field_context",
    "build_messages",
    "build_system_prompt",
    "determine_next_field",
    "is_form_complete",
    "parse_extracted_fields",
    "run_llm_step",
]
