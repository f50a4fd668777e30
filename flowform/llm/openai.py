"""OpenAI LLM client implementation."""

from collections.abc import Sequence
from typing import Any

from openai import AsyncOpenAI

from flowform.llm.schemas import LLMMessage, LLMResponse, TokenUsage
from flowform.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_OPENAI_MODEL = "gpt-4o"


class OpenAIClient:
    """OpenAI client implementation."""

    def __init__(self, api_key: str | None = None, model: str = DEFAULT_OPENAI_MODEL, client: Any = None):
        """Initialize OpenAI client."""
        self.client = client or AsyncOpenAI(api_key=api_key)
        self.model = model
        self.logger = logger

    def _convert_messages(self, messages: Sequence[LLMMessage]) -> list[dict[str, Any]]:
        """Convert internal messages to OpenAI format."""
        return [{"role": msg.role, "content": msg.content} for msg in messages]

    async def complete(self, messages: Sequence[LLMMessage]) -> LLMResponse:
        """Generate a JSON reply from OpenAI."""
        self.logger.info("llm_call", model=self.model, provider="openai", messages=len(messages))

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=self._convert_messages(messages),
            # The system prompt asks for a JSON object; JSON mode enforces it.
            response_format={"type": "json_object"},
        )

        choice = response.choices[0]
        usage = None
        if response.usage:
            usage = TokenUsage(
                prompt_tokens=response.usage.prompt_tokens,
                completion_tokens=response.usage.completion_tokens,
                total_tokens=response.usage.total_tokens,
            )

        self.logger.debug(
            "llm_response",
            provider="openai",
            finish_reason=choice.finish_reason,
            total_tokens=usage.total_tokens if usage else None,
        )

        return LLMResponse(
            content=choice.message.content or "",
            usage=usage,
            finish_reason=choice.finish_reason,
        )
