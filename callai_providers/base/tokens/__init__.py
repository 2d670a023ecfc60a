"""Token usage normalization and cost math."""

from .cost import compute_cost
from .usage import estimate_tokens, estimate_usage, normalize_usage

__all__ = ["compute_cost", "estimate_tokens", "estimate_usage", "normalize_usage"]
