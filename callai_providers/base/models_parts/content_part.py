"""
Canonical content part model.

After normalization every message carries an ordered list of `ContentPart`
items. Text and image parts are typed; any other item shape is kept as a
passthrough part that remembers its original value so adapters can forward
it untouched.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

TEXT = "text"
IMAGE = "image"


@dataclass(frozen=True)
class ContentPart:
    """A single piece of message content.

    Attributes:
        type: ``"text"``, ``"image"`` or the ``type`` of a passthrough item.
        text: Text of a text part.
        url: Canonical image reference (data-URL or remote URL) of an image part.
        raw: Original value of a passthrough part; ``None`` for typed parts.
    """

    type: str
    text: Optional[str] = None
    url: Optional[str] = None
    raw: Any = None

    @classmethod
    def of_text(cls, text: str) -> "ContentPart":
        return cls(type=TEXT, text=text)

    @classmethod
    def of_image(cls, url: str) -> "ContentPart":
        return cls(type=IMAGE, url=url)

    @classmethod
    def passthrough(cls, item: Any) -> "ContentPart":
        kind = item.get("type") if isinstance(item, dict) else None
        return cls(type=str(kind or "other"), raw=item)

    @property
    def is_text(self) -> bool:
        return self.type == TEXT and self.raw is None

    @property
    def is_image(self) -> bool:
        return self.type == IMAGE and self.raw is None

    @property
    def is_passthrough(self) -> bool:
        return self.raw is not None

    def to_dict(self) -> Any:
        """Return the wire-neutral representation of the part."""
        if self.raw is not None:
            return self.raw
        if self.type == IMAGE:
            return {"type": IMAGE, "url": self.url}
        return {"type": TEXT, "text": self.text or ""}


__all__ = ["ContentPart", "TEXT", "IMAGE"]
