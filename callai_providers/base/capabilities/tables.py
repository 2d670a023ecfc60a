"""Static per-provider capability declarations.

Each provider declares either the sentinel ``ALL`` (every model qualifies)
or an explicit set of model aliases. Vision is an exact alias allow-list.
Thinking also accepts the wire name and the other aliases bound to the
same wire model (``siblings``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, Mapping, Union

from ..models import ModelEntry

ALL = "all"

Declaration = Union[str, FrozenSet[str]]


@dataclass(frozen=True)
class CapabilityTable:
    """Provider → declaration mapping for one capability."""

    name: str
    declared: Mapping[str, Declaration] = field(default_factory=dict)
    siblings: bool = False

    def covers(self, provider: str, entry: ModelEntry, models: Mapping[str, ModelEntry]) -> bool:
        """Return True when ``entry`` of ``provider`` has this capability.

        ``models`` is the provider's alias table, consulted only when the
        table matches sibling aliases of the same wire model.
        """
        decl = self.declared.get(provider)
        if decl is None:
            return False
        if decl == ALL or entry.alias in decl:
            return True
        if not self.siblings:
            return False
        if entry.wire_name in decl:
            return True
        return any(models[ref].wire_name == entry.wire_name for ref in decl if ref in models)

    def providers(self) -> Iterator[str]:
        return iter(self.declared)


VISION = CapabilityTable(
    "vision",
    {
        "openai": frozenset(
            {"gpt-4om", "gpt-4.1", "gpt-4.1m", "gpt-4.1n", "gpt-5", "gpt-5m", "gpt-5n", "gpt-o3m", "gpt-o4m"}
        ),
        "anthropic": ALL,
        "gemini": ALL,
        "mistral": frozenset({"mistral-small", "mistral-medium", "mistral-large", "pixtral-large", "pixtral-12b"}),
        "grok": frozenset({"grok-4"}),
        "together": frozenset({"qw2.5-vl-72b", "llam4-mav", "llam4-sc", "gemma-3n-4b"}),
    },
)

THINKING = CapabilityTable(
    "thinking",
    {
        "openai": frozenset({"gpt-o3m", "gpt-5", "gpt-5m", "gpt-5n"}),
        "anthropic": frozenset({"claude-3.7s", "claude-4s", "claude-4o", "claude-4.1o"}),
        "gemini": frozenset({"gemini-2.5p", "gemini-2.5f", "gemini-2.5fl"}),
        "grok": frozenset({"grok-3m", "grok-4"}),
    },
    siblings=True,
)


__all__ = ["ALL", "Declaration", "CapabilityTable", "VISION", "THINKING"]
