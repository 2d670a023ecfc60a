"""Tests for image MIME sniffing and canonicalization."""

from __future__ import annotations

import base64

import pytest

from callai_providers.base.utils.images import (
    canonicalize_image,
    sniff_image_mime,
    split_data_url,
)

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 8
JPEG = b"\xff\xd8\xff\xe0" + b"\x00" * 12
GIF = b"GIF89a" + b"\x00" * 10
WEBP = b"RIFF\x24\x00\x00\x00WEBPVP8 "


@pytest.mark.parametrize(
    "data, mime",
    [
        (JPEG, "image/jpeg"),
        (PNG, "image/png"),
        (WEBP, "image/webp"),
        (GIF, "image/gif"),
    ],
)
def test_sniff_recognizes_magic_numbers(data, mime):
    assert sniff_image_mime(data) == mime


@pytest.mark.parametrize("data", [b"", b"\x89", b"RIFF\x00\x00\x00\x00WEB", b"hello world!", b"RIFF\x00\x00\x00\x00AVI "])
def test_sniff_defaults_to_jpeg_for_unknown_or_short(data):
    assert sniff_image_mime(data) == "image/jpeg"


def test_sniff_only_looks_at_head():
    assert sniff_image_mime(PNG + b"GIF89a" * 100) == "image/png"


def test_canonicalize_bytes_builds_data_url():
    url = canonicalize_image(PNG)
    mime, payload = split_data_url(url)
    assert mime == "image/png"
    assert base64.b64decode(payload) == PNG


def test_canonicalize_passes_through_data_and_remote_urls():
    data_url = "data:image/gif;base64,R0lGODlh"
    assert canonicalize_image(data_url) == data_url
    assert canonicalize_image("https://example.org/cat.png") == "https://example.org/cat.png"
    assert canonicalize_image("HTTP://example.org/cat") == "HTTP://example.org/cat"


def test_canonicalize_bare_base64_sniffs_decoded_head():
    b64 = base64.b64encode(GIF).decode()
    assert canonicalize_image(b64) == f"data:image/gif;base64,{b64}"


def test_canonicalize_undecodable_base64_defaults_to_jpeg():
    assert canonicalize_image("!!!not-base64!!!").startswith("data:image/jpeg;base64,")


def test_split_data_url_without_mime_defaults_to_jpeg():
    assert split_data_url("data:;base64,AAAA") == ("image/jpeg", "AAAA")


def test_split_data_url_rejects_plain_strings():
    with pytest.raises(ValueError):
        split_data_url("https://example.org/cat.png")
