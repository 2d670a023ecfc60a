"""Per-call cost computation from usage and per-million-token pricing."""

from __future__ import annotations

from ...config.defaults import COST_DECIMALS
from ..models import Cost, ModelCost, Usage

_PER_MILLION = 1_000_000


def compute_cost(usage: Usage, pricing: ModelCost) -> Cost:
    """Return the USD cost of ``usage`` at ``pricing``, rounded to 6 places.

    ``total`` is the rounded sum of the already rounded ``input`` and
    ``output``, so the three figures always add up.
    """
    cost_in = round(usage.prompt_tokens * pricing.in_per_million / _PER_MILLION, COST_DECIMALS)
    cost_out = round(usage.completion_tokens * pricing.out_per_million / _PER_MILLION, COST_DECIMALS)
    return Cost(input=cost_in, output=cost_out, total=round(cost_in + cost_out, COST_DECIMALS))


__all__ = ["compute_cost"]
