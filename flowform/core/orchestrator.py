"""Turn orchestrator for conversational form collection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from flowform.core.errors import FieldValidationError
from flowform.core.interpreter import parse_extracted_fields
from flowform.core.prompt_builder import build_messages
from flowform.core.state import Session
from flowform.forms.models import FieldValue, FormDefinition
from flowform.llm.base import LLMClient
from flowform.validation.dispatch import validate_field
from flowform.validation.results import Invalid


class OrchestratorResult(BaseModel):
    """Outcome of one successful turn."""

    model_config = ConfigDict(frozen=True)

    bot_response: Annotated[str, Field(description="Natural language reply to show the user")]
    extracted_fields: Annotated[
        dict[str, FieldValue],
        Field(description="Validated values extracted this turn, keyed by FormField.name"),
    ]
    is_complete: Annotated[bool, Field(description="All required fields are collected")]
    next_field: Annotated[str | None, Field(default=None, description="Name of the next required field to ask for")]


def _field_ids_for(form: FormDefinition, names: Iterable[str]) -> set[str]:
    ids_by_name = {f.name: f.id for f in form.fields}
    return {ids_by_name[name] for name in names if name in ids_by_name}


def determine_next_field(form: FormDefinition, collected_field_ids: set[str]) -> str | None:
    """First required field, in display order, whose id is not collected."""
    for field in form.ordered_fields():
        if field.required and field.id not in collected_field_ids:
            return field.name
    return None


def _all_required_collected(form: FormDefinition, collected_field_ids: set[str]) -> bool:
    return all(f.id in collected_field_ids for f in form.fields if f.required)


def is_form_complete(
    form: FormDefinition,
    session: Session,
    extracted_fields: Mapping[str, FieldValue],
) -> bool:
    """True when every required field is collected or newly extracted."""
    collected = session.collected_field_ids() | _field_ids_for(form, extracted_fields)
    return _all_required_collected(form, collected)


async def run_llm_step(
    form: FormDefinition,
    session: Session,
    user_message: str,
    llm_client: LLMClient,
) -> OrchestratorResult:
    """
    Run one turn of form collection.

    Builds the prompt, awaits ``llm_client``, interprets and validates the reply
    and decides completion. ``session`` is never mutated and nothing is
    persisted or logged; the caller derives the next snapshot from the result.

    Args:
        form: Form definition
        session: Current session snapshot
        user_message: The user's new message
        llm_client: Injected model client

    Returns:
        Reply text, validated extracted values, completion flag and next field

    Raises:
        ClientError: the reply was malformed, incomplete, named an unknown
            field, or a value failed validation (first failure only)
    """
    messages = build_messages(form, session, user_message)

    # Sole suspension point; client errors propagate unchanged.
    llm_response = await llm_client.complete(messages)

    reply = parse_extracted_fields(llm_response.content, form)

    fields_by_name = {f.name: f for f in form.fields}
    for field_name, value in reply.extracted_fields.items():
        result = validate_field(fields_by_name[field_name], value)
        if isinstance(result, Invalid):
            raise FieldValidationError(result.error, field_name, value, form.id)

    # Ephemeral union of existing and newly accepted ids; the session is untouched.
    collected = session.collected_field_ids() | _field_ids_for(form, reply.extracted_fields)
    complete = _all_required_collected(form, collected)

    return OrchestratorResult(
        bot_response=reply.bot_response,
        extracted_fields=dict(reply.extracted_fields),
        is_complete=complete,
        next_field=None if complete else determine_next_field(form, collected),
    )
