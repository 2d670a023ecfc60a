"""Gemini alias table (USD per million tokens)."""

from ..base.models import model_table

MODELS = model_table(
    [
        (("2.5-flash", "gemini-2.5f"), "gemini-2.5-flash", 0.3, 2.5),
        (("2.5-pro", "gemini-2.5p"), "gemini-2.5-pro", 1.25, 10),
        (("2.5-flash-lite", "gemini-2.5fl"), "gemini-2.5-flash-lite-preview-06-17", 0.1, 0.4),
        (("2.0-flash", "gemini-2f"), "gemini-2.0-flash", 0.1, 0.4),
        (("2.0-flash-lite", "gemini-2fl"), "gemini-2.0-flash-lite", 0.075, 0.3),
    ]
)

__all__ = ["MODELS"]
