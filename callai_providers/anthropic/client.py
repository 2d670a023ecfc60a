"""Anthropic Messages API adapter.

Purpose:
- Translate canonical messages into the ``/v1/messages`` body and pull the
  reply text back out.

Wire notes:
- System turns are lifted into the top-level ``system`` field. A request
  that is left with no turns gets a single user turn carrying the system
  text, prefixed with ``[SYSTEM INSTRUCTIONS]``, and no ``system`` field.
- Images are sent as ``base64`` sources (MIME split from the data-URL);
  remote URLs as ``url`` sources.
- Extended thinking is ``{"type": "enabled", "budget_tokens": N}``.
- No temperature is sent.
- Extraction is strict: the reply must carry at least one text block.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.adapters import ProviderAdapter, ProviderId
from ..base.capabilities import ThinkingConfig
from ..base.dto import CallOptions
from ..base.models import ContentPart, Message
from ..base.utils.images import is_remote_url, split_data_url
from ..base.utils.messages import split_system
from ..config.defaults import ANTHROPIC_API_VERSION, ANTHROPIC_ENDPOINT
from .models import MODELS

SYSTEM_TURN_PREFIX = "[SYSTEM INSTRUCTIONS]"


def _image_block(url: str) -> Dict[str, Any]:
    if is_remote_url(url):
        return {"type": "image", "source": {"type": "url", "url": url}}
    mime, data = split_data_url(url)
    return {"type": "image", "source": {"type": "base64", "media_type": mime, "data": data}}


def _block(part: ContentPart) -> Any:
    if part.is_passthrough:
        return part.raw
    if part.is_image:
        return _image_block(part.url or "")
    return {"type": "text", "text": part.text or ""}


def _wire_content(message: Message) -> Any:
    if message.is_text_only():
        return message.text()
    return [_block(p) for p in message.content]


class AnthropicAdapter(ProviderAdapter):
    provider_id = ProviderId.ANTHROPIC
    endpoint = ANTHROPIC_ENDPOINT
    models = MODELS

    def build_headers(self, api_key: str) -> Dict[str, str]:
        return {"x-api-key": api_key, "anthropic-version": ANTHROPIC_API_VERSION}

    def format_payload(
        self,
        messages: List[Message],
        wire_model: str,
        max_tokens: int,
        options: CallOptions,
        thinking: Optional[ThinkingConfig] = None,
    ) -> Dict[str, Any]:
        system, turns = split_system(messages)
        wire: List[Dict[str, Any]] = [{"role": m.role, "content": _wire_content(m)} for m in turns]
        if not wire and system:
            wire = [{"role": "user", "content": SYSTEM_TURN_PREFIX + system}]
            system = ""

        payload: Dict[str, Any] = {"model": wire_model, "messages": wire, "max_tokens": max_tokens}
        if thinking is not None and thinking.budget:
            payload["thinking"] = {"type": "enabled", "budget_tokens": thinking.budget}
        if system.strip():
            payload["system"] = system
        return payload

    def extract_response(self, data: Mapping[str, Any]) -> str:
        blocks = data.get("content")
        if not isinstance(blocks, list):
            raise self.shape_error("missing 'content' list")
        texts = [
            b["text"]
            for b in blocks
            if isinstance(b, Mapping) and b.get("type", "text") == "text" and isinstance(b.get("text"), str)
        ]
        if not texts:
            raise self.shape_error("no text block in 'content'")
        return "".join(texts)


__all__ = ["AnthropicAdapter", "SYSTEM_TURN_PREFIX"]
