"""Fields shared by every log event of one call."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Provider id and model alias of a call, plus free-form extras.

    ``to_dict`` flattens ``extra`` into the top level; keys whose value is
    ``None`` are left out.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        merged: Dict[str, Any] = {"provider": self.provider, "model": self.model, **(self.extra or {})}
        return {k: v for k, v in merged.items() if v is not None}


__all__ = ["LogContext"]
