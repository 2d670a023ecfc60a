"""callai_providers.config.defaults
===============================

Central place for small, stable default values used across the
callai_providers package. Values here are plain constants (no I/O) so that
adapters, the usage estimator and the CLI stay free of magic literals.

This module intentionally avoids importing from other packages in the
project to prevent circular dependencies.
"""

from __future__ import annotations

from typing import Dict, Tuple

# ---- Call defaults ----
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 4096
DEFAULT_TIMEOUT_MS = 480_000
DEFAULT_MODEL = "mistral-small"

# ---- Usage estimation ----
# Empirical characters-per-token ratio used when a provider omits usage.
CHARS_PER_TOKEN = 3.75
# Stand-in character weight for an image part of unknown token cost.
IMAGE_CHAR_WEIGHT = 1000

# ---- Cost ----
COST_DECIMALS = 6

# ---- Thinking / reasoning ----
THINK_LEVEL_BUDGETS: Dict[str, int] = {"low": 1024, "medium": 2048, "high": 4096}
# Inclusive (floor, ceiling) budget range accepted by budget-style providers.
THINK_BUDGET_RANGES: Dict[str, Tuple[int, int]] = {
    "anthropic": (1024, 8012),
    "gemini": (512, 24576),
}

# ---- Transport ----
# Number of body characters kept when quoting an upstream reply in errors.
ERROR_BODY_PREVIEW_CHARS = 200

# ---- Provider endpoints ----
OPENAI_ENDPOINT = "https://api.openai.com/v1/chat/completions"
ANTHROPIC_ENDPOINT = "https://api.anthropic.com/v1/messages"
ANTHROPIC_API_VERSION = "2023-06-01"
MISTRAL_ENDPOINT = "https://api.mistral.ai/v1/chat/completions"
GROK_ENDPOINT = "https://api.x.ai/v1/chat/completions"
TOGETHER_ENDPOINT = "https://api.together.xyz/v1/chat/completions"
GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent?key={key}"


__all__ = [
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_MODEL",
    "CHARS_PER_TOKEN",
    "IMAGE_CHAR_WEIGHT",
    "COST_DECIMALS",
    "THINK_LEVEL_BUDGETS",
    "THINK_BUDGET_RANGES",
    "ERROR_BODY_PREVIEW_CHARS",
    "OPENAI_ENDPOINT",
    "ANTHROPIC_ENDPOINT",
    "ANTHROPIC_API_VERSION",
    "MISTRAL_ENDPOINT",
    "GROK_ENDPOINT",
    "TOGETHER_ENDPOINT",
    "GEMINI_ENDPOINT",
]
