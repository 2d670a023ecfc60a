"""
Provider-agnostic domain models public surface.

Re-exports the implementations under ``callai_providers.base.models_parts``.
"""

from .models_parts.content_part import ContentPart, IMAGE, TEXT
from .models_parts.message import Message, Role, ROLES
from .models_parts.model_entry import ModelCost, ModelEntry, model_table
from .models_parts.call_result import CallResult, Cost, Usage

__all__ = [
    "ContentPart",
    "IMAGE",
    "TEXT",
    "Message",
    "Role",
    "ROLES",
    "ModelCost",
    "ModelEntry",
    "model_table",
    "CallResult",
    "Cost",
    "Usage",
]
