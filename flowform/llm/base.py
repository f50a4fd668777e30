"""Base LLM client interface."""

from collections.abc import Sequence
from typing import Protocol

from flowform.llm.schemas import LLMMessage, LLMResponse


class LLMClient(Protocol):
    """Protocol for LLM clients.

    The orchestrator only needs one call. Retries, rate limiting and timeouts
    belong to the implementation.
    """

    async def complete(self, messages: Sequence[LLMMessage]) -> LLMResponse:
        """
        Complete a conversation.

        Args:
            messages: Ordered conversation, system instruction first

        Returns:
            The model's raw reply
        """
        ...
