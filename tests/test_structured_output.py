"""Unit tests for schema-constrained output from AI providers."""

import json
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from common.ai import ClaudeProvider, OpenAIProvider, StructuredOutputError, parse_structured
from common.ai.base import AIProvider, extract_json_object
from skillup.schemas.roadmap import AdviceOutput, RoadmapOutput


ADVICE_JSON = json.dumps({
    "advice": "Start small {and} keep a steady pace.",
    "focusTechniques": ["Pomodoro sessions", "Daily review"],
})


class FakeChatProvider(AIProvider):
    """Provider whose chat() returns canned text."""

    def __init__(self, reply):
        self.reply = reply
        self.calls = []

    async def chat(self, message, system_prompt=None, conversation_history=None,
                   max_tokens=1024, temperature=0.7, **kwargs):
        self.calls.append({"message": message, "system_prompt": system_prompt, "max_tokens": max_tokens})
        return self.reply


# ─────────────────────────────────────────────────────────────────
# parse_structured
# ─────────────────────────────────────────────────────────────────


class TestParseStructured:
    def test_parses_bare_json(self):
        result = parse_structured(ADVICE_JSON, AdviceOutput)
        assert result.advice.startswith("Start small")
        assert result.focusTechniques == ["Pomodoro sessions", "Daily review"]

    def test_parses_fenced_json(self):
        result = parse_structured(f"```json\n{ADVICE_JSON}\n```", AdviceOutput)
        assert len(result.focusTechniques) == 2

    def test_parses_json_embedded_in_prose(self):
        text = f"Here is your advice:\n{ADVICE_JSON}\nGood luck!"
        result = parse_structured(text, AdviceOutput)
        # Braces inside the string value must not end the object early
        assert result.advice == "Start small {and} keep a steady pace."

    @pytest.mark.parametrize("text", [None, "", "   \n"])
    def test_empty_output_raises(self, text):
        with pytest.raises(StructuredOutputError, match="did not return any output"):
            parse_structured(text, AdviceOutput)

    def test_no_json_raises(self):
        with pytest.raises(StructuredOutputError):
            parse_structured("I cannot help with that.", AdviceOutput)

    def test_schema_violation_raises(self, step_factory):
        too_short = json.dumps({"roadmap": [step_factory(0), step_factory(1)]})
        with pytest.raises(StructuredOutputError, match="RoadmapOutput"):
            parse_structured(too_short, RoadmapOutput)

    def test_unknown_icon_is_rejected(self, step_factory):
        steps = [step_factory(0), step_factory(1), step_factory(2, icon="Banana")]
        with pytest.raises(StructuredOutputError):
            parse_structured(json.dumps({"roadmap": steps}), RoadmapOutput)


class TestExtractJsonObject:
    def test_returns_none_without_object(self):
        assert extract_json_object("no json here") is None

    def test_returns_none_for_unbalanced_object(self):
        assert extract_json_object('{"a": {"b": 1}') is None

    def test_handles_escaped_quotes(self):
        text = 'x {"a": "say \\"}\\" twice"} y'
        assert extract_json_object(text) == '{"a": "say \\"}\\" twice"}'


# ─────────────────────────────────────────────────────────────────
# AIProvider.generate_structured (default JSON-only strategy)
# ─────────────────────────────────────────────────────────────────


class TestDefaultGenerateStructured:
    @pytest.mark.asyncio
    async def test_appends_schema_to_system_prompt(self):
        provider = FakeChatProvider(ADVICE_JSON)

        result = await provider.generate_structured(
            "Help me", schema=AdviceOutput, system_prompt="You are a mentor.", max_tokens=300,
        )

        assert isinstance(result, AdviceOutput)
        call = provider.calls[0]
        assert call["message"] == "Help me"
        assert call["max_tokens"] == 300
        assert call["system_prompt"].startswith("You are a mentor.")
        assert "focusTechniques" in call["system_prompt"]

    @pytest.mark.asyncio
    async def test_uses_instructions_alone_without_system_prompt(self):
        provider = FakeChatProvider(ADVICE_JSON)

        await provider.generate_structured("Help me", schema=AdviceOutput)

        assert provider.calls[0]["system_prompt"].startswith("Respond with a single JSON object")

    @pytest.mark.asyncio
    async def test_empty_reply_raises(self):
        provider = FakeChatProvider("")
        with pytest.raises(StructuredOutputError):
            await provider.generate_structured("Help me", schema=AdviceOutput)


# ─────────────────────────────────────────────────────────────────
# ClaudeProvider.generate_structured (forced tool use)
# ─────────────────────────────────────────────────────────────────


@pytest.fixture
def claude():
    provider = ClaudeProvider(api_key="test-key", model="claude-test")
    provider.client = MagicMock()
    provider.client.messages.create = AsyncMock()
    return provider


class TestClaudeStructured:
    @pytest.mark.asyncio
    async def test_returns_validated_tool_input(self, claude):
        claude.client.messages.create.return_value = SimpleNamespace(
            stop_reason="tool_use",
            content=[SimpleNamespace(
                type="tool_use",
                name=ClaudeProvider.STRUCTURED_TOOL_NAME,
                input=json.loads(ADVICE_JSON),
            )],
        )

        result = await claude.generate_structured("Help me", schema=AdviceOutput, system_prompt="sys")

        assert result.focusTechniques == ["Pomodoro sessions", "Daily review"]
        params = claude.client.messages.create.call_args.kwargs
        assert params["model"] == "claude-test"
        assert params["system"] == "sys"
        assert params["tool_choice"] == {"type": "tool", "name": ClaudeProvider.STRUCTURED_TOOL_NAME}
        assert params["tools"][0]["input_schema"] == AdviceOutput.model_json_schema()

    @pytest.mark.asyncio
    async def test_missing_tool_call_raises(self, claude):
        claude.client.messages.create.return_value = SimpleNamespace(
            stop_reason="max_tokens",
            content=[SimpleNamespace(type="text", text="Sorry")],
        )

        with pytest.raises(StructuredOutputError, match="max_tokens"):
            await claude.generate_structured("Help me", schema=AdviceOutput)

    @pytest.mark.asyncio
    async def test_invalid_tool_input_raises(self, claude):
        claude.client.messages.create.return_value = SimpleNamespace(
            stop_reason="tool_use",
            content=[SimpleNamespace(
                type="tool_use",
                name=ClaudeProvider.STRUCTURED_TOOL_NAME,
                input={"advice": "Only advice"},
            )],
        )

        with pytest.raises(StructuredOutputError):
            await claude.generate_structured("Help me", schema=AdviceOutput)


# ─────────────────────────────────────────────────────────────────
# OpenAIProvider.generate_structured (json_schema response format)
# ─────────────────────────────────────────────────────────────────


class TestOpenAIStructured:
    @pytest.mark.asyncio
    async def test_requests_json_schema_format(self):
        provider = OpenAIProvider(api_key="test-key", model="gpt-test")
        provider.client = MagicMock()
        provider.client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=ADVICE_JSON))],
        ))

        result = await provider.generate_structured("Help me", schema=AdviceOutput, system_prompt="sys")

        assert len(result.focusTechniques) == 2
        params = provider.client.chat.completions.create.call_args.kwargs
        assert params["messages"][0] == {"role": "system", "content": "sys"}
        assert params["response_format"]["type"] == "json_schema"
        assert params["response_format"]["json_schema"]["name"] == "AdviceOutput"

    @pytest.mark.asyncio
    async def test_null_content_raises(self):
        provider = OpenAIProvider(api_key="test-key")
        provider.client = MagicMock()
        provider.client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=None))],
        ))

        with pytest.raises(StructuredOutputError):
            await provider.generate_structured("Help me", schema=AdviceOutput)
