"""
Structured provider error exception type.

Every failure of a call surfaces as a single `ProviderError` carrying a
normalized `ErrorCode`, so callers branch on ``code`` rather than on
exception classes or message text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured call failure with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable, actionable error message.
        provider: Provider id where the error originated, when known.
        model: Model alias associated with the failure, when known.
        status: HTTP status for upstream failures.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: Optional[str] = None
    model: Optional[str] = None
    status: Optional[int] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


__all__ = ["ProviderError"]
