"""
Mistral provider package.

Exports:
- MistralAdapter: wire translation for the Mistral chat endpoint
- MODELS: built-in alias table
"""

from .client import MistralAdapter
from .models import MODELS

__all__ = ["MistralAdapter", "MODELS"]
