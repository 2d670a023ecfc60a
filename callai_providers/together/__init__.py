"""
Together AI provider package.

Exports:
- TogetherAdapter: wire translation for the Together chat endpoint
- MODELS: built-in alias table
"""

from .client import TogetherAdapter
from .models import MODELS

__all__ = ["TogetherAdapter", "MODELS"]
