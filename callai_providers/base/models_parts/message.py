"""
Canonical message model used by every provider adapter.

Defines the `Message` dataclass and the `Role` literal. Content is always an
ordered list of `ContentPart` items once normalized.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Tuple

from .content_part import ContentPart

Role = Literal["system", "user", "assistant"]
ROLES: Tuple[str, ...] = ("system", "user", "assistant")


@dataclass(frozen=True)
class Message:
    """A normalized chat turn.

    Attributes:
        role: ``"system"``, ``"user"`` or ``"assistant"``.
        content: Ordered content parts.
    """

    role: Role
    content: List[ContentPart]

    def has_image(self) -> bool:
        return any(p.is_image for p in self.content)

    def text(self) -> str:
        """Concatenate the text parts (non-text parts are skipped)."""
        return "".join(p.text or "" for p in self.content if p.is_text)

    def is_text_only(self) -> bool:
        return all(p.is_text for p in self.content)


__all__ = ["Message", "Role", "ROLES"]
