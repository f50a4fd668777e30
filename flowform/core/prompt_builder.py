"""Prompt building for one extraction turn.

The message sequence sent to the model is always:

1. **Instruction block** (system): form, fields, already-collected values and
   the JSON output contract.
2. **Replayed history**: every prior session turn, in order.
3. **Current message** (user): the new user text, last.

Everything here is deterministic given its inputs. The instruction text and
the ``botResponse`` / ``extractedFields`` reply keys are the wire contract
with the model; changing them changes what the model is asked to produce.
The "Already Collected" block lists values under the field *name* (the key
the model must reply with), not the internal field id; ids only appear for
collected entries that no longer match a form field.
"""

from __future__ import annotations

import json
from datetime import date

from flowform.core.state import Session, TurnRole
from flowform.forms.models import FieldValue, FormDefinition, FormField
from flowform.llm.schemas import LLMMessage

REPLY_TEXT_KEY = "botResponse"
EXTRACTED_FIELDS_KEY = "extractedFields"

OUTPUT_INSTRUCTIONS = f"""Your task:
1. Extract any field values mentioned in the user's message
2. Respond naturally and ask for the next missing required field
3. Return your response in JSON format:

{{
  "{REPLY_TEXT_KEY}": "Your natural language response to the user",
  "{EXTRACTED_FIELDS_KEY}": {{
    "fieldName": "extractedValue"
  }}
}}

Important:
- Only extract fields that are explicitly mentioned in the form definition
- Use exact field names from the form definition
- If no new fields can be extracted, return empty {EXTRACTED_FIELDS_KEY} object
"""


def _format_value(value: FieldValue) -> str:
    if value is None:
        return "null"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        # 36.0 reads as 36
        return str(int(value))
    return str(value)


def _format_field(field: FormField) -> str:
    flag = " [REQUIRED]" if field.required else " [OPTIONAL]"
    description = f": {field.description}" if field.description else ""
    return f"- {field.label} ({field.name}, {field.type.value}){flag}{description}"


def build_system_prompt(form: FormDefinition, session: Session) -> str:
    """Instruction block with form context, collected values and output format."""
    form_info = f"Form: {form.name}"
    if form.description:
        form_info += f"\nDescription: {form.description}"

    fields_info = "\n".join(_format_field(f) for f in form.fields)

    collected_info = ""
    if session.fields:
        names = {f.id: f.name for f in form.fields}
        lines = [
            f"- {names.get(sf.field_id, sf.field_id)}: {_format_value(sf.value)}"
            for sf in session.fields
        ]
        collected_info = "\n\nAlready Collected:\n" + "\n".join(lines)

    return (
        "You are a conversational form assistant collecting information for the following form:\n\n"
        f"{form_info}\n\n"
        f"Fields to collect:\n{fields_info}{collected_info}\n\n"
        f"{OUTPUT_INSTRUCTIONS}"
    )


def build_conversation_history(session: Session) -> list[LLMMessage]:
    """Replay session turns as role-tagged messages, in order."""
    return [
        LLMMessage(
            role="user" if turn.role == TurnRole.USER else "assistant",
            content=turn.content,
        )
        for turn in session.turns
    ]


def build_field_context(session: Session) -> str:
    """Collected values as a short context block; empty when nothing is collected."""
    if not session.fields:
        return ""
    lines = [
        f"- {sf.field_id}: {json.dumps(sf.value, default=_format_value)}"
        for sf in session.fields
    ]
    return "Collected fields:\n" + "\n".join(lines)


def build_messages(form: FormDefinition, session: Session, user_message: str) -> list[LLMMessage]:
    """Full message sequence for one turn: instruction, history, new message."""
    return [
        LLMMessage(role="system", content=build_system_prompt(form, session)),
        *build_conversation_history(session),
        LLMMessage(role="user", content=user_message),
    ]
