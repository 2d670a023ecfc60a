"""
Shared adapter for OpenAI-compatible chat completion endpoints.

Wire shape::

    {"model", "messages": [{"role", "content"}], "max_tokens", "temperature"}

Text-only content is sent as a plain string; mixed content as a list of
``{"type": "text"}`` / ``{"type": "image_url", "image_url": {"url"}}``
parts. Passthrough parts are forwarded untouched. Extraction is tolerant:
a missing ``choices[0].message.content`` yields ``""``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..capabilities import ThinkingConfig
from ..dto import CallOptions
from ..models import ContentPart, Message
from .provider_adapter import ProviderAdapter


def image_url_part(url: str) -> Dict[str, Any]:
    return {"type": "image_url", "image_url": {"url": url}}


def wire_part(part: ContentPart) -> Any:
    """Return the OpenAI-style representation of one content part."""
    if part.is_passthrough:
        return part.raw
    if part.is_image:
        return image_url_part(part.url or "")
    return {"type": "text", "text": part.text or ""}


def first_choice_content(data: Mapping[str, Any]) -> Any:
    """Return ``choices[0].message.content`` or ``None`` when any level is missing."""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], Mapping):
        return None
    message = choices[0].get("message")
    if not isinstance(message, Mapping):
        return None
    return message.get("content")


class OpenAIStyleAdapter(ProviderAdapter):
    """Base for openai, mistral, grok and together."""

    def wire_content(self, message: Message) -> Any:
        if message.is_text_only():
            return message.text()
        return [wire_part(p) for p in message.content]

    def wire_messages(self, messages: List[Message]) -> List[Dict[str, Any]]:
        return [{"role": m.role, "content": self.wire_content(m)} for m in messages]

    def format_payload(
        self,
        messages: List[Message],
        wire_model: str,
        max_tokens: int,
        options: CallOptions,
        thinking: Optional[ThinkingConfig] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": wire_model,
            "messages": self.wire_messages(messages),
            "max_tokens": max_tokens,
            "temperature": options.effective_temperature(),
        }
        if thinking is not None and thinking.effort:
            payload["reasoning_effort"] = thinking.effort
        return payload

    def extract_response(self, data: Mapping[str, Any]) -> str:
        content = first_choice_content(data)
        return content if isinstance(content, str) else ""


__all__ = ["OpenAIStyleAdapter", "first_choice_content", "image_url_part", "wire_part"]
