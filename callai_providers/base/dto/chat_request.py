"""
Canonical request DTO consumed by the entry point.

A single struct with an optional ``provider``; the flexible positional call
shapes of ``call_ai`` are folded into it at the boundary. Messages are kept
as supplied (dicts or ``Message`` objects) and normalized later.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .call_options import CallOptions


class ChatRequest(BaseModel):
    """Normalized call request.

    Parameters:
        model: Model alias (non-empty).
        messages: Ordered, non-empty list of messages.
        provider: Provider id; resolved from the alias when omitted.
        options: Validated :class:`CallOptions`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    model: str = Field(..., min_length=1)
    messages: List[Any] = Field(..., min_length=1)
    provider: Optional[str] = None
    options: CallOptions = Field(default_factory=CallOptions)


__all__ = ["ChatRequest"]
