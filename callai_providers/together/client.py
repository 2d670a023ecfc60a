"""Together AI adapter.

Every message goes out as a list of typed parts, text-only ones included.
Parts of unknown shape are sent as text: their ``text`` field when present,
otherwise their string form. Replies come either in the OpenAI-style
``choices`` envelope or as a top-level ``output`` string.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from ..base.adapters import OpenAIStyleAdapter, ProviderId, first_choice_content, wire_part
from ..base.models import ContentPart, Message
from ..config.defaults import TOGETHER_ENDPOINT
from .models import MODELS


def _together_part(part: ContentPart) -> Dict[str, Any]:
    if not part.is_passthrough:
        return wire_part(part)
    raw = part.raw
    text = raw.get("text", raw) if isinstance(raw, Mapping) else raw
    return {"type": "text", "text": str(text)}


class TogetherAdapter(OpenAIStyleAdapter):
    provider_id = ProviderId.TOGETHER
    endpoint = TOGETHER_ENDPOINT
    models = MODELS

    def wire_content(self, message: Message) -> Any:
        return [_together_part(p) for p in message.content]

    def extract_response(self, data: Mapping[str, Any]) -> str:
        content = first_choice_content(data)
        if isinstance(content, str):
            return content
        output = data.get("output")
        return output if isinstance(output, str) else ""


__all__ = ["TogetherAdapter"]
