"""Wire-format tests for every provider adapter (pure, no transport)."""

from __future__ import annotations

import pytest

from callai_providers.anthropic import AnthropicAdapter
from callai_providers.base.capabilities import ThinkingConfig
from callai_providers.base.dto import CallOptions
from callai_providers.base.errors import ErrorCode, ProviderError
from callai_providers.base.utils.messages import normalize_messages
from callai_providers.gemini import GeminiAdapter
from callai_providers.grok import GrokAdapter
from callai_providers.mistral import MistralAdapter
from callai_providers.openai import OpenAIAdapter
from callai_providers.openai.client import is_reasoning_model
from callai_providers.together import TogetherAdapter

PNG_URL = "data:image/png;base64,iVBORw0KGgo="
OPTS = CallOptions()


def _msgs(*raw):
    return normalize_messages(list(raw))


def _user(content):
    return {"role": "user", "content": content}


# ----- OpenAI-style -----

def test_openai_plain_payload():
    payload = OpenAIAdapter().format_payload(
        _msgs({"role": "system", "content": "be brief"}, _user("hi")), "gpt-4.1", 100, CallOptions(temperature=0)
    )
    assert payload == {
        "model": "gpt-4.1",
        "messages": [{"role": "system", "content": "be brief"}, {"role": "user", "content": "hi"}],
        "max_tokens": 100,
        "temperature": 0,
    }


def test_openai_default_temperature():
    payload = OpenAIAdapter().format_payload(_msgs(_user("hi")), "gpt-4.1", 10, OPTS)
    assert payload["temperature"] == 0.7


@pytest.mark.parametrize("wire", ["o3", "o3-mini", "o4-mini", "gpt-5", "gpt-5-mini", "gpt-5-nano"])
def test_openai_reasoning_family_detection(wire):
    assert is_reasoning_model(wire)


@pytest.mark.parametrize("wire", ["gpt-4.1", "gpt-4o-mini", "o1", "gpt-5-pro", "o3-pro"])
def test_openai_non_reasoning_models(wire):
    assert not is_reasoning_model(wire)


def test_openai_reasoning_payload_switches_fields():
    payload = OpenAIAdapter().format_payload(
        _msgs(_user("hi")), "o4-mini", 300, CallOptions(temperature=0.2), ThinkingConfig(effort="high")
    )
    assert "max_tokens" not in payload
    assert payload["max_completion_tokens"] == 300
    assert payload["temperature"] == 1
    assert payload["reasoning_effort"] == "high"


def test_openai_reasoning_effort_dropped_for_chat_models():
    payload = OpenAIAdapter().format_payload(_msgs(_user("hi")), "gpt-4.1", 10, OPTS, ThinkingConfig(effort="low"))
    assert "reasoning_effort" not in payload


def test_openai_images_use_image_url_wrapper():
    payload = OpenAIAdapter().format_payload(
        _msgs(_user(["what is this", {"type": "image", "url": PNG_URL}])), "gpt-4.1", 10, OPTS
    )
    assert payload["messages"][0]["content"] == [
        {"type": "text", "text": "what is this"},
        {"type": "image_url", "image_url": {"url": PNG_URL}},
    ]


def test_openai_style_forwards_unknown_parts():
    odd = {"type": "input_audio", "input_audio": {"data": "AAA"}}
    payload = MistralAdapter().format_payload(_msgs(_user(["x", odd])), "mistral-small-latest", 10, OPTS)
    assert payload["messages"][0]["content"][1] is odd


def test_openai_style_tolerant_extraction():
    adapter = GrokAdapter()
    assert adapter.extract_response({"choices": [{"message": {"content": "ok"}}]}) == "ok"
    assert adapter.extract_response({}) == ""
    assert adapter.extract_response({"choices": []}) == ""
    assert adapter.extract_response({"choices": [{"message": {"content": None}}]}) == ""


def test_grok_carries_reasoning_effort():
    payload = GrokAdapter().format_payload(_msgs(_user("hi")), "grok-4-latest", 10, OPTS, ThinkingConfig(effort="low"))
    assert payload["reasoning_effort"] == "low"
    assert payload["max_tokens"] == 10


def test_bearer_auth_and_endpoints():
    for adapter in (OpenAIAdapter(), MistralAdapter(), GrokAdapter(), TogetherAdapter()):
        assert adapter.build_headers("sk") == {"Authorization": "Bearer sk"}
        assert adapter.build_url("m", "sk").startswith("https://")
        assert adapter.build_url("m", "sk").endswith("/chat/completions")


# ----- Together -----

def test_together_sends_typed_part_lists():
    odd = {"type": "weird", "text": "keep me"}
    payload = TogetherAdapter().format_payload(
        _msgs({"role": "system", "content": "sys"}, _user(["hi", {"type": "image", "url": PNG_URL}, odd, 7])),
        "Qwen/Qwen2.5-VL-72B-Instruct",
        50,
        OPTS,
    )
    assert payload["messages"][0] == {"role": "system", "content": [{"type": "text", "text": "sys"}]}
    assert payload["messages"][1]["content"] == [
        {"type": "text", "text": "hi"},
        {"type": "image_url", "image_url": {"url": PNG_URL}},
        {"type": "text", "text": "keep me"},
        {"type": "text", "text": "7"},
    ]
    assert payload["max_tokens"] == 50 and payload["temperature"] == 0.7


def test_together_extraction_falls_back_to_output():
    adapter = TogetherAdapter()
    assert adapter.extract_response({"choices": [{"message": {"content": "a"}}]}) == "a"
    assert adapter.extract_response({"output": "b"}) == "b"
    assert adapter.extract_response({"output": {"nested": 1}}) == ""


# ----- Anthropic -----

def test_anthropic_extracts_system_and_sets_headers():
    adapter = AnthropicAdapter()
    payload = adapter.format_payload(
        _msgs({"role": "system", "content": "rules"}, _user("hi"), {"role": "assistant", "content": "yo"}),
        "claude-sonnet-4-20250514",
        256,
        CallOptions(temperature=0.1),
    )
    assert payload == {
        "model": "claude-sonnet-4-20250514",
        "messages": [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "yo"}],
        "max_tokens": 256,
        "system": "rules",
    }
    assert adapter.build_headers("sk-ant") == {"x-api-key": "sk-ant", "anthropic-version": "2023-06-01"}


def test_anthropic_system_only_becomes_user_turn():
    payload = AnthropicAdapter().format_payload(_msgs({"role": "system", "content": "do it"}), "m", 10, OPTS)
    assert payload["messages"] == [{"role": "user", "content": "[SYSTEM INSTRUCTIONS]do it"}]
    assert "system" not in payload


def test_anthropic_thinking_and_images():
    payload = AnthropicAdapter().format_payload(
        _msgs(_user(["see", {"type": "image", "url": PNG_URL}, {"type": "image", "url": "https://x.org/a.png"}])),
        "m",
        10,
        OPTS,
        ThinkingConfig(budget=4096),
    )
    assert payload["thinking"] == {"type": "enabled", "budget_tokens": 4096}
    assert payload["messages"][0]["content"] == [
        {"type": "text", "text": "see"},
        {"type": "image", "source": {"type": "base64", "media_type": "image/png", "data": "iVBORw0KGgo="}},
        {"type": "image", "source": {"type": "url", "url": "https://x.org/a.png"}},
    ]


def test_anthropic_strict_extraction():
    adapter = AnthropicAdapter()
    data = {"content": [{"type": "thinking", "thinking": "hmm"}, {"type": "text", "text": "A"}, {"type": "text", "text": "B"}]}
    assert adapter.extract_response(data) == "AB"
    for bad in ({}, {"content": []}, {"content": [{"type": "thinking", "thinking": "x"}]}):
        with pytest.raises(ProviderError) as ei:
            adapter.extract_response(bad)
        assert ei.value.code is ErrorCode.RESPONSE_SHAPE


# ----- Gemini -----

def test_gemini_renames_roles_and_merges_turns():
    payload = GeminiAdapter().format_payload(
        _msgs(
            {"role": "system", "content": "sys"},
            _user("a"),
            _user("b"),
            {"role": "assistant", "content": "c"},
            {"role": "assistant", "content": "d"},
            _user("e"),
        ),
        "gemini-2.5-pro",
        64,
        CallOptions(temperature=0.3),
    )
    assert payload["contents"] == [
        {"role": "user", "parts": [{"text": "a"}, {"text": "b"}]},
        {"role": "model", "parts": [{"text": "c"}, {"text": "d"}]},
        {"role": "user", "parts": [{"text": "e"}]},
    ]
    roles = [c["role"] for c in payload["contents"]]
    assert all(x != y for x, y in zip(roles, roles[1:]))
    assert payload["system_instruction"] == {"parts": [{"text": "sys"}]}
    assert payload["generationConfig"] == {"maxOutputTokens": 64, "temperature": 0.3}


def test_gemini_inline_images_and_thinking_budget():
    payload = GeminiAdapter().format_payload(
        _msgs(_user(["see", {"type": "image", "url": PNG_URL}])), "m", 10, OPTS, ThinkingConfig(budget=512)
    )
    assert payload["contents"][0]["parts"][1] == {"inlineData": {"mimeType": "image/png", "data": "iVBORw0KGgo="}}
    assert payload["generationConfig"]["thinkingConfig"] == {"thinkingBudget": 512}


def test_gemini_system_only_becomes_user_turn():
    payload = GeminiAdapter().format_payload(_msgs({"role": "system", "content": "only"}), "m", 10, OPTS)
    assert payload["contents"] == [{"role": "user", "parts": [{"text": "only"}]}]
    assert "system_instruction" not in payload


def test_gemini_url_carries_model_and_key():
    adapter = GeminiAdapter()
    assert adapter.build_url("gemini-2.5-flash", "K") == (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent?key=K"
    )
    assert adapter.build_headers("K") == {}


def test_gemini_strict_extraction_and_usage():
    adapter = GeminiAdapter()
    data = {
        "candidates": [{"content": {"parts": [{"text": "x"}, {"inlineData": {}}, {"text": "y"}]}}],
        "usageMetadata": {"promptTokenCount": 1},
    }
    assert adapter.extract_response(data) == "xy"
    assert adapter.extract_usage(data) == {"promptTokenCount": 1}
    for bad in ({}, {"candidates": []}, {"candidates": [{"content": {"parts": []}}]}, {"candidates": [{}]}):
        with pytest.raises(ProviderError) as ei:
            adapter.extract_response(bad)
        assert ei.value.code is ErrorCode.RESPONSE_SHAPE
