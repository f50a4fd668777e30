"""Model client contract.

Provider adapters live in :mod:`flowform.llm.openai` and
:mod:`flowform.llm.anthropic` and are imported on demand.
"""

from flowform.llm.base import LLMClient
from flowform.llm.schemas import LLMMessage, LLMResponse, TokenUsage

__all__ = [
    "LLMClient",
    "LLMMessage",
    "LLMResponse",
    "TokenUsage",
]
