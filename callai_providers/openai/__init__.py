"""
OpenAI provider package.

Exports:
- OpenAIAdapter: wire translation for the Chat Completions endpoint
- MODELS: built-in alias table
"""

from .client import OpenAIAdapter
from .models import MODELS

__all__ = ["OpenAIAdapter", "MODELS"]
