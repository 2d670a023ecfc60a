"""
Provider adapter contracts public surface.

Re-exports the implementations under ``callai_providers.base.adapters_parts``.
"""

from .adapters_parts.openai_style import OpenAIStyleAdapter, first_choice_content, image_url_part, wire_part
from .adapters_parts.provider_adapter import ProviderAdapter
from .adapters_parts.provider_id import ProviderId

__all__ = [
    "OpenAIStyleAdapter",
    "ProviderAdapter",
    "ProviderId",
    "first_choice_content",
    "image_url_part",
    "wire_part",
]
