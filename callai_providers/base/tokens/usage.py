"""Usage normalization.

Providers report token counts under different field names (or not at all).
``normalize_usage`` maps every shape onto the canonical ``Usage`` triple and
falls back to a character-count estimate when the provider is silent.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional, Tuple

from ...config.defaults import CHARS_PER_TOKEN, IMAGE_CHAR_WEIGHT
from ..models import ContentPart, Message, Usage

# (prompt, completion, total) field names per provider family.
_OPENAI_FIELDS = ("prompt_tokens", "completion_tokens", "total_tokens")
USAGE_FIELDS: Mapping[str, Tuple[str, str, Optional[str]]] = {
    "openai": _OPENAI_FIELDS,
    "mistral": _OPENAI_FIELDS,
    "grok": _OPENAI_FIELDS,
    "together": _OPENAI_FIELDS,
    "anthropic": ("input_tokens", "output_tokens", None),
    "gemini": ("promptTokenCount", "candidatesTokenCount", "totalTokenCount"),
}


def _as_int(value: Any) -> int:
    """Coerce a reported count to a non-negative int; junk becomes 0."""
    if isinstance(value, bool):
        return 0
    try:
        n = int(value)
    except (TypeError, ValueError):
        return 0
    return max(n, 0)


def estimate_tokens(chars: int) -> int:
    """Return ``ceil(chars / CHARS_PER_TOKEN)``."""
    if chars <= 0:
        return 0
    return math.ceil(chars / CHARS_PER_TOKEN)


def _part_chars(part: ContentPart) -> int:
    if part.is_image:
        return IMAGE_CHAR_WEIGHT
    if part.is_text:
        return len(part.text or "")
    raw = part.raw
    if isinstance(raw, Mapping) and isinstance(raw.get("text"), str):
        return len(raw["text"])
    if isinstance(raw, str):
        return len(raw)
    return 0


def request_chars(messages: Iterable[Message]) -> int:
    """Character weight of the request (images count as a fixed weight)."""
    return sum(_part_chars(p) for m in messages for p in m.content)


def estimate_usage(messages: Iterable[Message], text: str) -> Usage:
    prompt = estimate_tokens(request_chars(messages))
    completion = estimate_tokens(len(text or ""))
    return Usage(
        prompt_tokens=prompt,
        completion_tokens=completion,
        total_tokens=prompt + completion,
        estimated=True,
    )


def normalize_usage(
    provider: str,
    raw_usage: Optional[Mapping[str, Any]],
    messages: Iterable[Message],
    text: str,
) -> Usage:
    """Return canonical usage for one call.

    Parameters:
        provider: Provider id selecting the field names.
        raw_usage: Provider usage block, or ``None`` when absent.
        messages: Normalized request messages (for the estimate).
        text: Extracted reply text (for the estimate).

    The total is the provider's own total when it reports one, otherwise
    the sum of prompt and completion.
    """
    if not isinstance(raw_usage, Mapping) or not raw_usage:
        return estimate_usage(messages, text)
    prompt_key, completion_key, total_key = USAGE_FIELDS.get(provider, _OPENAI_FIELDS)
    prompt = _as_int(raw_usage.get(prompt_key))
    completion = _as_int(raw_usage.get(completion_key))
    total = _as_int(raw_usage.get(total_key)) if total_key else 0
    return Usage(
        prompt_tokens=prompt,
        completion_tokens=completion,
        total_tokens=total or prompt + completion,
    )


__all__ = ["USAGE_FIELDS", "estimate_tokens", "request_chars", "estimate_usage", "normalize_usage"]
