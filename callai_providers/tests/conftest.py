"""Pytest configuration for the callai_providers test suite.

Provides a recording fake transport and registries built from explicit
environments so no test touches the network or the real process env.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional

import pytest

from callai_providers.api import ChatCaller
from callai_providers.base.http import close_all_clients
from callai_providers.base.registry import ModelRegistry, reset_registry
from callai_providers.config import get_settings
from callai_providers.config.env import ENV_ALIASES, ENV_MAP

ALL_KEYS: Dict[str, str] = {var: f"key-{provider}" for provider, var in ENV_MAP.items()}


class FakeTransport:
    """Transport double recording every call and replying with a fixed body."""

    def __init__(self, reply: Optional[Mapping[str, Any]] = None, error: Optional[Exception] = None) -> None:
        self.reply = dict(reply or {})
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, url: str, payload: Mapping[str, Any], headers: Mapping[str, str], timeout_ms: int) -> Dict[str, Any]:
        self.calls.append({"url": url, "payload": payload, "headers": dict(headers), "timeout_ms": timeout_ms})
        if self.error is not None:
            raise self.error
        return self.reply

    @property
    def last_payload(self) -> Mapping[str, Any]:
        return self.calls[-1]["payload"]


def openai_reply(text: str, usage: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"choices": [{"message": {"role": "assistant", "content": text}}]}
    if usage is not None:
        body["usage"] = dict(usage)
    return body


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip provider credentials and callai settings from the environment."""
    for var in ENV_MAP.values():
        monkeypatch.delenv(var, raising=False)
    for names in ENV_ALIASES.values():
        for var in names:
            monkeypatch.delenv(var, raising=False)
    for var in ("CALLAI_MODELS_FILE", "CALLAI_TIMEOUT_MS", "CALLAI_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("DOTENV_FILE", "/nonexistent/.env")
    get_settings(refresh=True)
    reset_registry()
    yield
    reset_registry()
    close_all_clients()


@pytest.fixture()
def registry() -> ModelRegistry:
    """Registry with a credential for every provider."""
    return ModelRegistry.build(environ=ALL_KEYS)


@pytest.fixture()
def keyless_registry() -> ModelRegistry:
    return ModelRegistry.build(environ={})


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport(openai_reply("hello"))


@pytest.fixture()
def caller(registry: ModelRegistry, transport: FakeTransport) -> ChatCaller:
    return ChatCaller(registry=registry, transport=transport)
