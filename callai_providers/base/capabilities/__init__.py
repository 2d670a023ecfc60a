"""Capability tables (vision, thinking) and the thinking budget policy."""

from .tables import ALL, THINKING, VISION, CapabilityTable
from .thinking import ThinkingConfig, clamp_budget, resolve_thinking

__all__ = [
    "ALL",
    "THINKING",
    "VISION",
    "CapabilityTable",
    "ThinkingConfig",
    "clamp_budget",
    "resolve_thinking",
]
