"""Grok alias table (USD per million tokens)."""

from ..base.models import model_table

MODELS = model_table(
    [
        (("grok-4",), "grok-4-latest", 3, 15),
        (("grok-3-mini", "grok-3m"), "grok-3-mini-latest", 0.1, 0.5),
        (("grok-code-fast",), "grok-code-fast", 0.2, 1.5),
    ]
)

__all__ = ["MODELS"]
