"""
Canonical result DTOs returned by a successful call.

`CallResult` is created once per call and never mutated. ``to_dict`` yields
the public result payload::

    {"text", "usage": {"prompt_tokens", "completion_tokens", "total_tokens",
     "estimated"}, "model", "cost": {"in", "out", "total"}}
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Usage:
    """Token accounting for one call.

    Attributes:
        prompt_tokens: Tokens consumed by the request.
        completion_tokens: Tokens generated in the reply.
        total_tokens: Provider-reported total, or the sum of the two parts.
        estimated: ``True`` when the provider returned no usage block and the
            counts come from the character heuristic rather than billing data.
    """

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    estimated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
            "estimated": self.estimated,
        }


@dataclass(frozen=True)
class Cost:
    """USD cost split into input, output and total (6 decimal places)."""

    input: float = 0.0
    output: float = 0.0
    total: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"in": self.input, "out": self.output, "total": self.total}


@dataclass(frozen=True)
class CallResult:
    """Provider-agnostic result of a chat completion call."""

    text: str
    usage: Usage
    model: str
    cost: Cost
    provider: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "usage": self.usage.to_dict(),
            "model": self.model,
            "cost": self.cost.to_dict(),
        }


__all__ = ["Usage", "Cost", "CallResult"]
