"""Image canonicalization helpers.

Every image reference is turned into either a ``data:<mime>;base64,<payload>``
URL or a remote ``http(s)://`` URL that is passed through untouched. MIME
sniffing is pure: it only looks at the first 12 bytes of the decoded image.
"""
from __future__ import annotations

import base64
import binascii
import re
from typing import Tuple, Union

DEFAULT_IMAGE_MIME = "image/jpeg"

_REMOTE_URL = re.compile(r"^https?://", re.IGNORECASE)
_DATA_URL = re.compile(r"^data:(?P<mime>[^;,]+)?(?:;[^,]*)?,(?P<data>.*)$", re.DOTALL)
# 16 base64 characters decode to exactly 12 bytes.
_SNIFF_B64_CHARS = 16

ImageInput = Union[str, bytes, bytearray, memoryview]


def sniff_image_mime(data: bytes) -> str:
    """Classify image bytes by magic number.

    Recognizes JPEG (``FF D8 FF``), PNG (``89 50 4E 47``), WEBP (``RIFF``
    container with ``WEBP`` at offset 8) and GIF (``47 49 46``). Anything
    else, including empty or truncated input, is reported as ``image/jpeg``.
    """
    head = bytes(data[:12])
    if head[:3] == b"\xff\xd8\xff":
        return "image/jpeg"
    if head[:4] == b"\x89PNG":
        return "image/png"
    if len(head) >= 12 and head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        return "image/webp"
    if head[:3] == b"GIF":
        return "image/gif"
    return DEFAULT_IMAGE_MIME


def _decode_head(b64: str) -> bytes:
    chunk = re.sub(r"\s+", "", b64)[:_SNIFF_B64_CHARS]
    chunk += "=" * (-len(chunk) % 4)
    try:
        return base64.b64decode(chunk)
    except (binascii.Error, ValueError):
        return b""


def is_remote_url(value: str) -> bool:
    return bool(_REMOTE_URL.match(value))


def canonicalize_image(value: ImageInput) -> str:
    """Return a data-URL or remote URL for an image reference.

    Raw bytes are base64 encoded; bare base64 strings are wrapped using the
    MIME type sniffed from their decoded head; data-URLs and http(s) URLs are
    returned unchanged.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        return f"data:{sniff_image_mime(raw)};base64,{base64.b64encode(raw).decode('ascii')}"
    text = str(value)
    if text.startswith("data:") or is_remote_url(text):
        return text
    payload = text.strip()
    return f"data:{sniff_image_mime(_decode_head(payload))};base64,{payload}"


def split_data_url(url: str) -> Tuple[str, str]:
    """Split ``data:<mime>;base64,<payload>`` into ``(mime, payload)``.

    A missing MIME falls back to ``image/jpeg``. Non data-URLs raise
    ``ValueError``.
    """
    m = _DATA_URL.match(url)
    if not m:
        raise ValueError("not a data URL")
    return m.group("mime") or DEFAULT_IMAGE_MIME, m.group("data")


__all__ = [
    "DEFAULT_IMAGE_MIME",
    "ImageInput",
    "sniff_image_mime",
    "is_remote_url",
    "canonicalize_image",
    "split_data_url",
]
