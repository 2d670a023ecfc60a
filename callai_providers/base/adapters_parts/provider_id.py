"""
Closed set of supported provider identifiers.
"""
from __future__ import annotations

from enum import Enum


class ProviderId(str, Enum):
    """Provider identifiers; the value doubles as the public provider name."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    MISTRAL = "mistral"
    GROK = "grok"
    GEMINI = "gemini"
    TOGETHER = "together"

    @classmethod
    def parse(cls, value: str) -> "ProviderId":
        """Return the member for ``value`` (case-insensitive).

        Raises:
            ValueError: when ``value`` names no supported provider.
        """
        return cls(str(value).strip().lower())


__all__ = ["ProviderId"]
