"""OpenAI alias table (USD per million tokens)."""

from ..base.models import model_table

MODELS = model_table(
    [
        (("4o-mini", "gpt-4om"), "gpt-4o-mini", 0.15, 0.6),
        (("4.1", "gpt-4.1"), "gpt-4.1", 2, 8),
        (("4.1-mini", "gpt-4.1m"), "gpt-4.1-mini", 0.4, 1.6),
        (("4.1-nano", "gpt-4.1n"), "gpt-4.1-nano", 0.1, 0.4),
        (("5.0", "gpt-5"), "gpt-5", 1.25, 10),
        (("5.0-mini", "gpt-5m"), "gpt-5-mini", 0.25, 2),
        (("5.0-nano", "gpt-5n"), "gpt-5-nano", 0.05, 0.4),
        (("o3-mini", "gpt-o3m"), "o3-mini", 1.1, 4.4),
        (("o4-mini", "gpt-o4m"), "o4-mini", 1.1, 4.4),
    ]
)

__all__ = ["MODELS"]
