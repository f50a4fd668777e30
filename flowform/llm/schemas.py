"""Schemas for LLM requests and responses."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class LLMMessage(BaseModel):
    """A role-tagged message sent to the model."""

    model_config = ConfigDict(frozen=True)

    role: Annotated[Literal["system", "user", "assistant"], Field(description="Message role")]
    content: Annotated[str, Field(description="Message text")]


class TokenUsage(BaseModel):
    """Token accounting reported by the provider."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class LLMResponse(BaseModel):
    """Raw completion returned by a model client."""

    content: Annotated[str, Field(description="Text of the model reply")]
    usage: Annotated[TokenUsage | None, Field(default=None, description="Token usage, when reported")]
    finish_reason: Annotated[str | None, Field(default=None, description="Finish reason")]
