"""Test helpers: sample builders and a scripted LLM client."""

import json
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from flowform.core.state import Session, SessionField
from flowform.forms.models import FormDefinition, FormField
from flowform.llm.schemas import LLMMessage, LLMResponse

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class ScriptedLLMClient:
    """Returns queued replies in order and records every call."""

    def __init__(self, *replies: str | dict[str, Any]):
        self.replies = [r if isinstance(r, str) else json.dumps(r) for r in replies]
        self.calls: list[list[LLMMessage]] = []

    async def complete(self, messages: Sequence[LLMMessage]) -> LLMResponse:
        self.calls.append(list(messages))
        if len(self.calls) > len(self.replies):
            content = self.replies[-1]
        else:
            content = self.replies[len(self.calls) - 1]
        return LLMResponse(content=content)


def reply(bot_response: str, **extracted: Any) -> dict[str, Any]:
    return {"botResponse": bot_response, "extractedFields": extracted}


def make_form(*fields: FormField, form_id: str = "form1", name: str = "Contact Form", **kwargs: Any) -> FormDefinition:
    return FormDefinition(id=form_id, name=name, fields=fields, created_at=NOW, updated_at=NOW, **kwargs)


def make_session(*collected: tuple[str, Any], form_id: str = "form1", turns=()) -> Session:
    return Session(
        id="session1",
        form_id=form_id,
        turns=turns,
        fields=tuple(SessionField(field_id=fid, value=value, collected_at=NOW) for fid, value in collected),
        started_at=NOW,
    )
