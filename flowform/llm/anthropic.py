"""Anthropic Claude LLM client implementation."""

from collections.abc import Sequence
from typing import Any

from anthropic import AsyncAnthropic

from flowform.llm.schemas import LLMMessage, LLMResponse, TokenUsage
from flowform.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ANTHROPIC_MODEL = "claude-3-5-sonnet-20241022"


class AnthropicClient:
    """Anthropic Claude client implementation."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_ANTHROPIC_MODEL,
        max_tokens: int = 4096,
        client: Any = None,
    ):
        """Initialize Anthropic client."""
        self.client = client or AsyncAnthropic(api_key=api_key)
        self.model = model
        self.max_tokens = max_tokens
        self.logger = logger

    def _convert_messages(self, messages: Sequence[LLMMessage]) -> tuple[str | None, list[dict[str, Any]]]:
        """Split out system text; Anthropic takes it as a top-level parameter."""
        system_parts: list[str] = []
        result: list[dict[str, Any]] = []
        for msg in messages:
            if msg.role == "system":
                system_parts.append(msg.content)
                continue
            result.append({"role": msg.role, "content": msg.content})
        system = "\n\n".join(system_parts) if system_parts else None
        return system, result

    async def complete(self, messages: Sequence[LLMMessage]) -> LLMResponse:
        """Generate a reply from Anthropic."""
        self.logger.info("llm_call", model=self.model, provider="anthropic", messages=len(messages))
        system, anthropic_messages = self._convert_messages(messages)

        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": anthropic_messages,
            "max_tokens": self.max_tokens,
        }
        if system:
            kwargs["system"] = system

        response = await self.client.messages.create(**kwargs)

        text = "".join(block.text for block in response.content if block.type == "text")

        usage = TokenUsage(
            prompt_tokens=response.usage.input_tokens,
            completion_tokens=response.usage.output_tokens,
            total_tokens=response.usage.input_tokens + response.usage.output_tokens,
        )

        return LLMResponse(
            content=text,
            usage=usage,
            finish_reason=response.stop_reason,
        )
