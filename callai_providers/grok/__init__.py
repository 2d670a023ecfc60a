"""
xAI Grok provider package.

Exports:
- GrokAdapter: wire translation for the xAI chat endpoint
- MODELS: built-in alias table
"""

from .client import GrokAdapter
from .models import MODELS

__all__ = ["GrokAdapter", "MODELS"]
