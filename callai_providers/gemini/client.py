"""Gemini ``generateContent`` adapter.

Purpose:
- Translate canonical messages into a ``contents`` list of role/parts turns
  and read the reply text from ``candidates[0].content.parts``.

Wire notes:
- ``assistant`` is renamed ``model``; consecutive turns with the same role
  are merged into one by concatenating their parts.
- The API key travels in the query string; no auth header is sent.
- Generation options live under ``generationConfig`` (``maxOutputTokens``,
  ``temperature``, ``thinkingConfig.thinkingBudget``).
- System text goes to ``system_instruction.parts``. With no turns left it
  becomes the single user turn instead.
- Usage is reported under ``usageMetadata``.
"""

from __future__ import annotations

import mimetypes
from typing import Any, Dict, List, Mapping, Optional

from ..base.adapters import ProviderAdapter, ProviderId
from ..base.capabilities import ThinkingConfig
from ..base.dto import CallOptions
from ..base.models import ContentPart, Message
from ..base.utils.images import DEFAULT_IMAGE_MIME, is_remote_url, split_data_url
from ..base.utils.messages import split_system
from ..config.defaults import GEMINI_ENDPOINT
from .models import MODELS

_ROLE_MAP = {"user": "user", "assistant": "model"}


def _image_part(url: str) -> Dict[str, Any]:
    if is_remote_url(url):
        mime = mimetypes.guess_type(url)[0] or DEFAULT_IMAGE_MIME
        return {"fileData": {"mimeType": mime, "fileUri": url}}
    mime, data = split_data_url(url)
    return {"inlineData": {"mimeType": mime, "data": data}}


def _part(part: ContentPart) -> Dict[str, Any]:
    if part.is_image:
        return _image_part(part.url or "")
    if part.is_text:
        return {"text": part.text or ""}
    raw = part.raw
    return dict(raw) if isinstance(raw, Mapping) else {"text": str(raw)}


def _contents(turns: List[Message]) -> List[Dict[str, Any]]:
    contents: List[Dict[str, Any]] = []
    for m in turns:
        role = _ROLE_MAP[m.role]
        parts = [_part(p) for p in m.content]
        if contents and contents[-1]["role"] == role:
            contents[-1]["parts"].extend(parts)
        else:
            contents.append({"role": role, "parts": parts})
    return contents


class GeminiAdapter(ProviderAdapter):
    provider_id = ProviderId.GEMINI
    endpoint = GEMINI_ENDPOINT
    models = MODELS

    def build_url(self, wire_model: str, api_key: str) -> str:
        return self.endpoint.format(model=wire_model, key=api_key)

    def build_headers(self, api_key: str) -> Dict[str, str]:
        return {}

    def format_payload(
        self,
        messages: List[Message],
        wire_model: str,
        max_tokens: int,
        options: CallOptions,
        thinking: Optional[ThinkingConfig] = None,
    ) -> Dict[str, Any]:
        system, turns = split_system(messages)
        contents = _contents(turns)
        if not contents and system:
            contents = [{"role": "user", "parts": [{"text": system}]}]
            system = ""

        generation: Dict[str, Any] = {
            "maxOutputTokens": max_tokens,
            "temperature": options.effective_temperature(),
        }
        if thinking is not None and thinking.budget:
            generation["thinkingConfig"] = {"thinkingBudget": thinking.budget}

        payload: Dict[str, Any] = {"contents": contents, "generationConfig": generation}
        if system.strip():
            payload["system_instruction"] = {"parts": [{"text": system}]}
        return payload

    def extract_response(self, data: Mapping[str, Any]) -> str:
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], Mapping):
            raise self.shape_error("missing 'candidates'")
        content = candidates[0].get("content")
        parts = content.get("parts") if isinstance(content, Mapping) else None
        if not isinstance(parts, list) or not parts:
            raise self.shape_error("missing 'candidates[0].content.parts'")
        return "".join(p["text"] for p in parts if isinstance(p, Mapping) and isinstance(p.get("text"), str))

    def extract_usage(self, data: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
        usage = data.get("usageMetadata")
        return usage if isinstance(usage, Mapping) else None


__all__ = ["GeminiAdapter"]
