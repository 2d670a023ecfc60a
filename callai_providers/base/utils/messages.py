"""Message normalization shared by every provider adapter.

Callers may hand in message content as a plain string, a list mixing strings,
text parts and image parts (``{"type": "image", "url" | "data": ...}`` or the
OpenAI-style ``{"type": "image_url", "image_url": {"url": ...}}``), or
nothing at all. These helpers fold all of that into ``Message`` objects whose
content is an ordered list of ``ContentPart`` items.

Item shapes that are not recognized are kept as passthrough parts rather
than rejected, so newer part types still reach the provider.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping

from ..errors import ErrorCode, ProviderError
from ..logging import get_logger, log_event
from ..models import ROLES, ContentPart, Message
from .images import canonicalize_image

_logger = get_logger("callai.content")


def _normalize_item(item: Any) -> ContentPart:
    if isinstance(item, ContentPart):
        return item
    if isinstance(item, str):
        return ContentPart.of_text(item)
    if isinstance(item, Mapping):
        kind = item.get("type")
        if kind == "text" and isinstance(item.get("text", ""), str):
            return ContentPart.of_text(item.get("text") or "")
        if kind == "image":
            source = item.get("url") if item.get("url") is not None else item.get("data")
            if source is not None:
                return ContentPart.of_image(canonicalize_image(source))
        nested = item.get("image_url")
        if kind == "image_url" and isinstance(nested, Mapping) and nested.get("url") is not None:
            return ContentPart.of_image(canonicalize_image(nested["url"]))
    log_event(_logger, "content.passthrough", level=logging.DEBUG, part_type=type(item).__name__)
    return ContentPart.passthrough(item)


def normalize_content(content: Any) -> List[ContentPart]:
    """Return the canonical part list for one message's content.

    ``None`` becomes a single empty text part so the turn is preserved.
    """
    if content is None:
        return [ContentPart.of_text("")]
    if isinstance(content, str):
        return [ContentPart.of_text(content)]
    if isinstance(content, (list, tuple)):
        return [_normalize_item(item) for item in content]
    return [ContentPart.of_text(str(content))]


def normalize_message(message: Any) -> Message:
    """Normalize a ``Message`` or a ``{"role", "content"}`` mapping.

    Raises:
        ProviderError: ``validation`` when the role is missing or unknown.
    """
    if isinstance(message, Message):
        role, content = message.role, message.content
    elif isinstance(message, Mapping):
        role, content = message.get("role"), message.get("content")
    else:
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message=f"Invalid message {message!r}: expected a mapping with 'role' and 'content'",
        )
    if role not in ROLES:
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message=f"Invalid message role {role!r}. Use one of: {', '.join(ROLES)}",
        )
    return Message(role=role, content=normalize_content(content))


def normalize_messages(messages: Iterable[Any]) -> List[Message]:
    return [normalize_message(m) for m in messages]


def has_image(messages: Iterable[Message]) -> bool:
    """Return True when any message carries an image part."""
    return any(m.has_image() for m in messages)


def split_system(messages: Iterable[Message]) -> tuple[str, List[Message]]:
    """Separate system turns from the conversation.

    Returns ``(system_text, remaining_turns)``; when several system messages
    are present the last one wins.
    """
    system_text = ""
    turns: List[Message] = []
    for m in messages:
        if m.role == "system":
            system_text = m.text()
        else:
            turns.append(m)
    return system_text, turns


__all__ = [
    "normalize_content",
    "normalize_message",
    "normalize_messages",
    "has_image",
    "split_system",
]
