"""Adapter factory.

Purpose
-------
Map every :class:`ProviderId` to its adapter class and create instances on
demand. Adapter modules are imported lazily with ``importlib`` so that
importing the base layer never pulls in every provider package.

The mapping is keyed by the full ``ProviderId`` enum; adding a member
without an adapter entry fails at import time.

Failure modes
-------------
Unknown provider names, import failures and missing classes raise
``ProviderError(code=provider_resolution)`` with an actionable message.
"""

from __future__ import annotations

from importlib import import_module
from typing import Dict, Tuple, Type

from .adapters import ProviderAdapter, ProviderId
from .errors import ErrorCode, ProviderError

# Map provider ids to (module path, class name)
_ADAPTERS: Dict[ProviderId, Tuple[str, str]] = {
    ProviderId.OPENAI: ("callai_providers.openai.client", "OpenAIAdapter"),
    ProviderId.ANTHROPIC: ("callai_providers.anthropic.client", "AnthropicAdapter"),
    ProviderId.MISTRAL: ("callai_providers.mistral.client", "MistralAdapter"),
    ProviderId.GROK: ("callai_providers.grok.client", "GrokAdapter"),
    ProviderId.GEMINI: ("callai_providers.gemini.client", "GeminiAdapter"),
    ProviderId.TOGETHER: ("callai_providers.together.client", "TogetherAdapter"),
}

_missing = set(ProviderId) - set(_ADAPTERS)
if _missing:  # pragma: no cover - guards edits to ProviderId
    raise RuntimeError(f"No adapter registered for: {sorted(p.value for p in _missing)}")


def parse_provider(provider: str) -> ProviderId:
    """Return the :class:`ProviderId` for ``provider``.

    Raises:
        ProviderError: ``provider_resolution`` for unsupported names.
    """
    try:
        return ProviderId.parse(provider)
    except ValueError as exc:
        raise ProviderError(
            code=ErrorCode.PROVIDER_RESOLUTION,
            message=f"Unknown provider: {provider}. Supported: {', '.join(supported())}",
            provider=str(provider),
        ) from exc


def adapter_class(provider: ProviderId) -> Type[ProviderAdapter]:
    module_path, class_name = _ADAPTERS[provider]
    try:
        mod = import_module(module_path)
    except ImportError as exc:  # pragma: no cover - packaging failure path
        raise ProviderError(
            code=ErrorCode.PROVIDER_RESOLUTION,
            message=f"Failed to import module '{module_path}' for provider '{provider.value}': {exc}",
            provider=provider.value,
        ) from exc
    try:
        return getattr(mod, class_name)
    except AttributeError as exc:  # pragma: no cover - packaging failure path
        raise ProviderError(
            code=ErrorCode.PROVIDER_RESOLUTION,
            message=f"Adapter class '{class_name}' not found in '{module_path}'",
            provider=provider.value,
        ) from exc


def create_adapter(provider: str | ProviderId) -> ProviderAdapter:
    """Create the adapter for ``provider`` (name or :class:`ProviderId`)."""
    pid = provider if isinstance(provider, ProviderId) else parse_provider(provider)
    return adapter_class(pid)()


def supported() -> Tuple[str, ...]:
    """Return supported provider names in declaration order."""
    return tuple(p.value for p in ProviderId)


__all__ = ["parse_provider", "adapter_class", "create_adapter", "supported"]
