"""Mistral alias table (USD per million tokens)."""

from ..base.models import model_table

MODELS = model_table(
    [
        (("mistral-small",), "mistral-small-latest", 0.1, 0.3),
        (("mistral-large",), "mistral-large-latest", 2, 6),
        (("mistral-medium",), "mistral-medium-latest", 0.4, 2),
        (("ministral-8b",), "ministral-8b-latest", 0.1, 0.3),
        (("ministral-3b",), "ministral-3b-latest", 0.04, 0.04),
        (("magistral-small",), "magistral-small-latest", 0.5, 1.5),
        (("magistral-medium",), "magistral-medium-latest", 0.5, 1.5),
        (("pixtral-large",), "pixtral-large-latest", 2, 6),
        (("pixtral-12b",), "pixtral-12b", 0.15, 0.15),
    ]
)

__all__ = ["MODELS"]
