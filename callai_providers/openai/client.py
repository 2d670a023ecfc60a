"""OpenAI Chat Completions adapter.

Reasoning models (``o3``/``o4`` and ``gpt-5`` families) reject
``max_tokens`` and any temperature other than 1, so their payload carries
``max_completion_tokens``, ``temperature: 1`` and, when thinking is on,
``reasoning_effort``. Everything else uses the plain OpenAI-style body.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from ..base.adapters import OpenAIStyleAdapter, ProviderId
from ..base.capabilities import ThinkingConfig
from ..base.dto import CallOptions
from ..base.models import Message
from ..config.defaults import OPENAI_ENDPOINT
from .models import MODELS

REASONING_MODEL = re.compile(r"^(o[3-4](-mini)?|gpt-5(-mini|-nano)?)$")


def is_reasoning_model(wire_model: str) -> bool:
    return bool(REASONING_MODEL.match(wire_model))


class OpenAIAdapter(OpenAIStyleAdapter):
    provider_id = ProviderId.OPENAI
    endpoint = OPENAI_ENDPOINT
    models = MODELS

    def format_payload(
        self,
        messages: List[Message],
        wire_model: str,
        max_tokens: int,
        options: CallOptions,
        thinking: Optional[ThinkingConfig] = None,
    ) -> Dict[str, Any]:
        payload = super().format_payload(messages, wire_model, max_tokens, options, thinking)
        if is_reasoning_model(wire_model):
            payload["max_completion_tokens"] = payload.pop("max_tokens")
            payload["temperature"] = 1
        else:
            payload.pop("reasoning_effort", None)
        return payload


__all__ = ["OpenAIAdapter", "REASONING_MODEL", "is_reasoning_model"]
