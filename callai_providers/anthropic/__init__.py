"""
Anthropic provider package.

Exports:
- AnthropicAdapter: wire translation for the Messages API
- MODELS: built-in alias table
"""

from .client import AnthropicAdapter
from .models import MODELS

__all__ = ["AnthropicAdapter", "MODELS"]
