"""Provider credential variables.

Each provider reads its API key from one canonical environment variable
(``ENV_MAP``). Gemini also honours ``GOOGLE_API_KEY``; extra names live in
``ENV_ALIASES`` with the canonical one first.

Lookups never raise: an unknown provider or an unset variable yields
``None`` and the registry turns that into a ``missing_credential`` error
only when a call actually needs the key.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "mistral": "MISTRAL_API_KEY",
    "grok": "XAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "together": "TOGETHER_API_KEY",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}

_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example")


def is_placeholder(val: Optional[str]) -> bool:
    """True for values that look like template filler rather than a real key.

    A ``.env`` file may override such values even though it never overrides
    real ones.
    """
    if val is None:
        return False
    lowered = str(val).strip().lower()
    return lowered.startswith("test_") or any(m in lowered for m in _PLACEHOLDER_MARKERS)


def get_env_var_name(provider: str) -> Optional[str]:
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Variable names checked for ``provider``, canonical name first."""
    key = (provider or "").lower()
    names = [ENV_MAP[key]] if key in ENV_MAP else []
    names.extend(n for n in ENV_ALIASES.get(key, ()) if n not in names)
    return iter(names)


def resolve_provider_key(
    provider: str, environ: Optional[Mapping[str, str]] = None
) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(key, variable)`` for the first non-blank candidate.

    ``environ`` defaults to ``os.environ``; ``(None, None)`` means no
    credential is configured.
    """
    env = os.environ if environ is None else environ
    for name in get_env_var_candidates(provider):
        value = (env.get(name) or "").strip()
        if value:
            return value, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
