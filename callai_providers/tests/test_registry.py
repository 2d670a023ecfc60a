"""Tests for the model registry: resolution, capabilities, listings and overrides."""

from __future__ import annotations

import json
import logging
import threading

import pytest

from callai_providers.base import registry as registry_mod
from callai_providers.base.errors import ErrorCode, ProviderError
from callai_providers.base.logging import get_logger
from callai_providers.base.adapters import ProviderId
from callai_providers.base.registry import ModelRegistry, ProviderSlot, get_registry
from conftest import ALL_KEYS

PROVIDERS = ["openai", "anthropic", "mistral", "grok", "gemini", "together"]


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: list[dict] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.events.append(json.loads(record.getMessage()))


@pytest.fixture()
def registry_events():
    logger = get_logger("callai.registry")
    handler = _ListHandler()
    prev_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler.events
    logger.removeHandler(handler)
    logger.setLevel(prev_level)


def test_every_alias_resolves_to_its_single_owner(registry):
    seen = {}
    for provider in registry.providers():
        for alias in registry.models(provider):
            assert alias not in seen, f"{alias} in {seen.get(alias)} and {provider}"
            seen[alias] = provider
            assert registry.resolve(alias) == provider
    assert registry.providers() == PROVIDERS


def test_resolve_is_exact_match_only(registry):
    assert registry.resolve("mistral-small") == "mistral"
    assert registry.resolve("Mistral-Small") is None
    assert registry.resolve("mistral") is None


def test_entry_unknown_alias_for_provider(registry):
    with pytest.raises(ProviderError) as ei:
        registry.entry("openai", "mistral-small")
    assert ei.value.code is ErrorCode.UNKNOWN_MODEL


def test_unknown_provider_is_a_resolution_error(registry):
    with pytest.raises(ProviderError) as ei:
        registry.slot("cohere")
    assert ei.value.code is ErrorCode.PROVIDER_RESOLUTION


def test_vision_support(registry):
    assert registry.supports_vision("anthropic", "3-haiku")
    assert registry.supports_vision("gemini", "2.0-flash")
    assert registry.supports_vision("openai", "gpt-4.1")
    # listed by alias only
    assert not registry.supports_vision("openai", "4.1")
    assert not registry.supports_vision("openai", "4o-mini")
    assert not registry.supports_vision("mistral", "ministral-3b")
    assert not registry.supports_vision("grok", "grok-3m")
    assert not registry.supports_vision("together", "ds-r1")


def test_thinking_support(registry):
    assert registry.supports_thinking("openai", "gpt-5")
    assert registry.supports_thinking("openai", "o3-mini")
    assert registry.supports_thinking("anthropic", "4-sonnet")
    assert registry.supports_thinking("grok", "grok-3-mini")
    assert not registry.supports_thinking("openai", "gpt-4.1")
    assert not registry.supports_thinking("openai", "o4-mini")
    assert not registry.supports_thinking("openai", "gpt-o4m")
    assert not registry.supports_thinking("anthropic", "3.5-haiku")
    assert not registry.supports_thinking("mistral", "magistral-small")


def test_unique_models_has_one_alias_per_wire_name(registry):
    aliases = registry.unique_models()
    wire = [registry.entry(registry.resolve(a), a).wire_name for a in aliases]
    assert len(wire) == len(set(wire))
    assert "4o-mini" in aliases and "gpt-4om" not in aliases


def test_capability_listings(registry):
    assert "grok-4" in registry.vision_models()
    assert "grok-code-fast" not in registry.vision_models()
    assert set(registry.thinking_models()) >= {"5.0", "o3-mini", "3.7-sonnet", "2.5-pro", "grok-4"}


def test_available_models_need_credentials():
    reg = ModelRegistry.build(environ={"MISTRAL_API_KEY": "k"})
    assert reg.available_models() == [a for a in reg.unique_models() if reg.resolve(a) == "mistral"]
    assert reg.available_thinking_models() == []
    assert "mistral-small" in reg.available_vision_models()


def test_gemini_accepts_google_alias_key():
    reg = ModelRegistry.build(environ={"GOOGLE_API_KEY": "g"})
    assert reg.has_credential("gemini")
    assert reg.slot("gemini").env_var == "GEMINI_API_KEY"


def test_tables_are_read_only(registry):
    with pytest.raises(TypeError):
        registry.models("openai")["new"] = None  # type: ignore[index]


def test_duplicate_aliases_are_rejected():
    base = ModelRegistry.build(environ={})
    slots = dict(base._slots)
    clash = dict(slots[ProviderId.GROK].models)
    clash["mistral-small"] = base.entry("mistral", "mistral-small")
    slots[ProviderId.GROK] = ProviderSlot(slots[ProviderId.GROK].adapter, clash, None, "XAI_API_KEY")
    with pytest.raises(ValueError):
        ModelRegistry(slots)


# ----- custom models -----

def test_custom_models_from_json(tmp_path, registry_events):
    path = tmp_path / "models.json"
    path.write_text(
        json.dumps(
            {
                "mistral": {
                    "codestral": {"name": "codestral-latest", "cost": {"in": 0.3, "out": 0.9}},
                    "mistral-small": {"name": "mistral-small-2506"},
                },
                "openai": {"mistral-large": {"name": "hijack"}},
                "cohere": {"command": {"name": "command-r"}},
                "grok": {"broken": {"cost": {"in": 1}}},
            }
        ),
        encoding="utf-8",
    )
    reg = ModelRegistry.build(environ={}, models_file=str(path))
    entry = reg.entry("mistral", "codestral")
    assert entry.wire_name == "codestral-latest"
    assert entry.cost.in_per_million == 0.3
    assert reg.entry("mistral", "mistral-small").wire_name == "mistral-small-2506"
    assert reg.resolve("mistral-large") == "mistral"
    assert reg.resolve("broken") is None
    assert reg.resolve("command") is None
    skipped = [e for e in registry_events if e.get("status") == "skipped"]
    assert len(skipped) == 3
    loaded = [e for e in registry_events if e.get("status") == "loaded"]
    assert loaded and loaded[0]["added"] == 2


def test_custom_models_from_yaml(tmp_path):
    path = tmp_path / "models.yaml"
    path.write_text("together:\n  my-llama:\n    name: meta-llama/Llama-9\n    cost:\n      in: 1\n      out: 2\n")
    reg = ModelRegistry.build(environ={}, models_file=str(path))
    assert reg.resolve("my-llama") == "together"
    assert reg.entry("together", "my-llama").cost.out_per_million == 2


def test_custom_models_from_python_module(tmp_path):
    path = tmp_path / "my_models.py"
    path.write_text('MODELS = {"grok": {"grok-5": {"name": "grok-5-latest", "cost": {"in": 5, "out": 25}}}}\n')
    reg = ModelRegistry.build(environ={}, models_file=str(path))
    assert reg.entry("grok", "grok-5").wire_name == "grok-5-latest"


def test_custom_model_load_failure_keeps_builtins(tmp_path, registry_events):
    path = tmp_path / "bad.py"
    path.write_text("raise RuntimeError('boom')\n")
    reg = ModelRegistry.build(environ={}, models_file=str(path))
    assert reg.resolve("mistral-small") == "mistral"
    failed = [e for e in registry_events if e.get("status") == "failed"]
    assert failed and "boom" in failed[0]["error"]


def test_missing_custom_file_is_logged_not_raised(tmp_path, registry_events):
    reg = ModelRegistry.build(environ={}, models_file=str(tmp_path / "nope.json"))
    assert reg.resolve("gpt-5") == "openai"
    assert any(e.get("status") == "failed" for e in registry_events)


# ----- process-wide registry -----

def test_get_registry_builds_once_under_concurrency(monkeypatch):
    builds = []
    real_build = ModelRegistry.build

    def counting_build(*args, **kwargs):
        builds.append(1)
        return real_build(*args, **kwargs)

    monkeypatch.setattr(registry_mod.ModelRegistry, "build", staticmethod(counting_build))
    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(get_registry())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(builds) == 1
    assert all(r is results[0] for r in results)


def test_get_registry_reads_credentials_from_environment(monkeypatch):
    monkeypatch.setenv("TOGETHER_API_KEY", ALL_KEYS["TOGETHER_API_KEY"])
    assert get_registry().has_credential("together")
    assert not get_registry().has_credential("openai")
