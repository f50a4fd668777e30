"""Runtime settings read from the environment (and a .env file, if present)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from flowform.llm.base import LLMClient

PROVIDERS = ("openai", "anthropic")


@dataclass(frozen=True)
class Settings:
    """Provider selection and credentials for the CLI host."""

    provider: str = "openai"
    model: str | None = None
    log_level: str = "INFO"
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """Build settings from FLOWFORM_* and provider API key variables."""
        if load_env_file:
            load_dotenv()
        provider = os.getenv("FLOWFORM_PROVIDER", "openai").lower()
        if provider not in PROVIDERS:
            raise ValueError(f"FLOWFORM_PROVIDER must be one of {', '.join(PROVIDERS)}, got '{provider}'")
        return cls(
            provider=provider,
            model=os.getenv("FLOWFORM_MODEL") or None,
            log_level=os.getenv("FLOWFORM_LOG_LEVEL", "INFO").upper(),
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY"),
        )


def create_llm_client(settings: Settings) -> LLMClient:
    """Create an LLM client based on provider."""
    if settings.provider == "anthropic":
        if not settings.anthropic_api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable not set")
        from flowform.llm.anthropic import DEFAULT_ANTHROPIC_MODEL, AnthropicClient

        return AnthropicClient(
            api_key=settings.anthropic_api_key,
            model=settings.model or DEFAULT_ANTHROPIC_MODEL,
        )

    if not settings.openai_api_key:
        raise ValueError("OPENAI_API_KEY environment variable not set")
    from flowform.llm.openai import DEFAULT_OPENAI_MODEL, OpenAIClient

    return OpenAIClient(
        api_key=settings.openai_api_key,
        model=settings.model or DEFAULT_OPENAI_MODEL,
    )
