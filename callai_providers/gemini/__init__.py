"""
Google Gemini provider package.

Exports:
- GeminiAdapter: wire translation for ``generateContent``
- MODELS: built-in alias table
"""

from .client import GeminiAdapter
from .models import MODELS

__all__ = ["GeminiAdapter", "MODELS"]
