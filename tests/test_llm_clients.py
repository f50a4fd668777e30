"""Tests for the provider adapters against mocked SDK clients."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from flowform.llm.anthropic import AnthropicClient
from flowform.llm.openai import OpenAIClient
from flowform.llm.schemas import LLMMessage

MESSAGES = [
    LLMMessage(role="system", content="Collect the form."),
    LLMMessage(role="user", content="Hi"),
    LLMMessage(role="assistant", content="Name?"),
    LLMMessage(role="user", content="John"),
]


def openai_sdk(content: str | None, usage=True) -> MagicMock:
    response = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content), finish_reason="stop")],
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=5, total_tokens=15) if usage else None,
    )
    sdk = MagicMock()
    sdk.chat.completions.create = AsyncMock(return_value=response)
    return sdk


class TestOpenAIClient:
    async def test_complete_sends_messages_in_json_mode(self):
        sdk = openai_sdk('{"botResponse": "Hi", "extractedFields": {}}')
        client = OpenAIClient(model="gpt-4o-mini", client=sdk)

        response = await client.complete(MESSAGES)

        kwargs = sdk.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"] == [{"role": m.role, "content": m.content} for m in MESSAGES]
        assert response.content == '{"botResponse": "Hi", "extractedFields": {}}'
        assert response.usage.total_tokens == 15
        assert response.finish_reason == "stop"

    async def test_missing_content_and_usage(self):
        client = OpenAIClient(client=openai_sdk(None, usage=False))

        response = await client.complete(MESSAGES)

        assert response.content == ""
        assert response.usage is None

    async def test_provider_errors_propagate(self):
        sdk = MagicMock()
        sdk.chat.completions.create = AsyncMock(side_effect=RuntimeError("rate limited"))

        with pytest.raises(RuntimeError, match="rate limited"):
            await OpenAIClient(client=sdk).complete(MESSAGES)


class TestAnthropicClient:
    async def test_complete_lifts_system_prompt(self):
        response = SimpleNamespace(
            content=[SimpleNamespace(type="text", text='{"botResponse": "Hi", '), SimpleNamespace(type="text", text='"extractedFields": {}}')],
            usage=SimpleNamespace(input_tokens=20, output_tokens=7),
            stop_reason="end_turn",
        )
        sdk = MagicMock()
        sdk.messages.create = AsyncMock(return_value=response)
        client = AnthropicClient(model="claude-test", max_tokens=512, client=sdk)

        result = await client.complete(MESSAGES)

        kwargs = sdk.messages.create.await_args.kwargs
        assert kwargs["system"] == "Collect the form."
        assert kwargs["max_tokens"] == 512
        assert [m["role"] for m in kwargs["messages"]] == ["user", "assistant", "user"]
        assert result.content == '{"botResponse": "Hi", "extractedFields": {}}'
        assert result.usage.total_tokens == 27
        assert result.finish_reason == "end_turn"

    async def test_no_system_message(self):
        response = SimpleNamespace(
            content=[SimpleNamespace(type="text", text="{}")],
            usage=SimpleNamespace(input_tokens=1, output_tokens=1),
            stop_reason="end_turn",
        )
        sdk = MagicMock()
        sdk.messages.create = AsyncMock(return_value=response)

        await AnthropicClient(client=sdk).complete(MESSAGES[1:])

        assert "system" not in sdk.messages.create.await_args.kwargs
