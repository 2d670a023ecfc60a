"""Pydantic DTOs validating inbound call data."""

from .call_options import CallOptions, ThinkLevel, ThinkValue
from .chat_request import ChatRequest
from .custom_models import ModelCostDTO, ModelEntryDTO

__all__ = [
    "CallOptions",
    "ThinkLevel",
    "ThinkValue",
    "ChatRequest",
    "ModelCostDTO",
    "ModelEntryDTO",
]
