"""
Model table entry: alias → wire model name and per-million-token pricing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Sequence, Tuple


@dataclass(frozen=True)
class ModelCost:
    """USD price per one million tokens."""

    in_per_million: float = 0.0
    out_per_million: float = 0.0


@dataclass(frozen=True)
class ModelEntry:
    """A user-facing alias bound to a provider's wire-level model name.

    Several aliases may point at the same ``wire_name``; listings deduplicate
    on it so each underlying model counts once.
    """

    alias: str
    wire_name: str
    cost: ModelCost = ModelCost()


ModelRow = Tuple[Sequence[str], str, float, float]


def model_table(rows: Iterable[ModelRow]) -> Dict[str, ModelEntry]:
    """Build an alias table from ``(aliases, wire_name, in, out)`` rows.

    Every alias of a row maps to its own :class:`ModelEntry` sharing the wire
    name and pricing. Insertion order follows the rows.
    """
    table: Dict[str, ModelEntry] = {}
    for aliases, wire_name, cost_in, cost_out in rows:
        cost = ModelCost(in_per_million=cost_in, out_per_million=cost_out)
        for alias in aliases:
            table[alias] = ModelEntry(alias=alias, wire_name=wire_name, cost=cost)
    return table


__all__ = ["ModelCost", "ModelEntry", "ModelRow", "model_table"]
