"""Session state: conversation turns and collected field values."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field

from flowform.forms.models import FieldValue, FormDefinition

if TYPE_CHECKING:
    from flowform.core.orchestrator import OrchestratorResult


class SessionStatus(str, Enum):
    """Lifecycle states for a form session."""

    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    ABANDONED = "ABANDONED"


class TurnRole(str, Enum):
    """Who sent a message."""

    USER = "USER"
    ASSISTANT = "ASSISTANT"


class SessionTurn(BaseModel):
    """One message in the conversation."""

    model_config = ConfigDict(frozen=True)

    role: TurnRole
    content: str
    timestamp: datetime


class SessionField(BaseModel):
    """An accepted value for a field."""

    model_config = ConfigDict(frozen=True)

    field_id: Annotated[str, Field(description="Must match FormField.id")]
    value: FieldValue
    collected_at: datetime


class Session(BaseModel):
    """Immutable snapshot of one conversation for a given form.

    Nothing in the orchestrator mutates a session. Callers derive the next
    snapshot with :meth:`apply_turn` and persist it themselves.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    form_id: str
    status: SessionStatus = SessionStatus.ACTIVE
    turns: tuple[SessionTurn, ...] = ()
    fields: tuple[SessionField, ...] = ()
    started_at: datetime
    completed_at: datetime | None = None

    @classmethod
    def start(cls, session_id: str, form: FormDefinition, now: datetime | None = None) -> "Session":
        """Create an empty active session for ``form``."""
        return cls(
            id=session_id,
            form_id=form.id,
            started_at=now or datetime.now(timezone.utc),
        )

    def collected_field_ids(self) -> set[str]:
        return {f.field_id for f in self.fields}

    def get_value(self, field_id: str) -> FieldValue:
        for f in self.fields:
            if f.field_id == field_id:
                return f.value
        return None

    def is_done(self) -> bool:
        """Completed and abandoned are terminal."""
        return self.status in (SessionStatus.COMPLETED, SessionStatus.ABANDONED)

    def apply_turn(
        self,
        form: FormDefinition,
        user_message: str,
        result: "OrchestratorResult",
        now: datetime | None = None,
    ) -> "Session":
        """Return the next snapshot after a successful turn.

        Appends the user message and the assistant reply, records each newly
        extracted value (a later value for the same field replaces the earlier
        one) and marks the session completed when ``result.is_complete``.
        """
        now = now or datetime.now(timezone.utc)
        new_fields: dict[str, SessionField] = {}
        for name, value in result.extracted_fields.items():
            field = form.get_field_by_name(name)
            if field is None:
                raise ValueError(f"Field '{name}' is not part of form '{form.id}'.")
            new_fields[field.id] = SessionField(field_id=field.id, value=value, collected_at=now)

        kept = tuple(f for f in self.fields if f.field_id not in new_fields)
        turns = self.turns + (
            SessionTurn(role=TurnRole.USER, content=user_message, timestamp=now),
            SessionTurn(role=TurnRole.ASSISTANT, content=result.bot_response, timestamp=now),
        )
        update: dict = {"turns": turns, "fields": kept + tuple(new_fields.values())}
        if result.is_complete:
            update["status"] = SessionStatus.COMPLETED
            update["completed_at"] = now
        return self.model_copy(update=update)

    def abandon(self) -> "Session":
        return self.model_copy(update={"status": SessionStatus.ABANDONED})
