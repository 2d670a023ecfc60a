"""Anthropic alias table (USD per million tokens)."""

from ..base.models import model_table

MODELS = model_table(
    [
        (("4.1-opus", "claude-4.1o"), "claude-opus-4-1-20250805", 15, 75),
        (("4-opus", "claude-4o"), "claude-opus-4-20250514", 15, 75),
        (("4-sonnet", "claude-4s"), "claude-sonnet-4-20250514", 3, 15),
        (("3.7-sonnet", "claude-3.7s"), "claude-3-7-sonnet-20250219", 3, 15),
        (("3.5-sonnet", "claude-3.5s"), "claude-3-5-sonnet-20241022", 3, 15),
        (("3.5-haiku", "claude-3.5h"), "claude-3-5-haiku-20241022", 0.8, 4),
        (("3-haiku", "claude-3h"), "claude-3-haiku-20240307", 0.4, 1.6),
    ]
)

__all__ = ["MODELS"]
