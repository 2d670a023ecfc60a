"""Mistral chat adapter (plain OpenAI-compatible body, no thinking knob)."""

from __future__ import annotations

from ..base.adapters import OpenAIStyleAdapter, ProviderId
from ..config.defaults import MISTRAL_ENDPOINT
from .models import MODELS


class MistralAdapter(OpenAIStyleAdapter):
    provider_id = ProviderId.MISTRAL
    endpoint = MISTRAL_ENDPOINT
    models = MODELS


__all__ = ["MistralAdapter"]
