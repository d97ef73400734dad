"""Tests for image media type detection."""

import pytest

from mywinecellar.services.images import DEFAULT_MEDIA_TYPE, detect_image_type, media_type_for


@pytest.mark.parametrize(
    "content, expected",
    [
        (b"\xff\xd8\xff\xe0" + b"\x00" * 16, "image/jpeg"),
        (b"\x89PNG\r\n\x1a\n" + b"\x00" * 8, "image/png"),
        (b"GIF89a" + b"\x00" * 10, "image/gif"),
        (b"GIF87a" + b"\x00" * 10, "image/gif"),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "image/webp"),
    ],
)
def test_detects_known_formats(content, expected):
    assert detect_image_type(content) == expected


def test_riff_without_webp_is_unknown():
    assert detect_image_type(b"RIFF\x00\x00\x00\x00WAVEfmt ") is None


def test_short_content_is_unknown():
    assert detect_image_type(b"\xff\xd8\xff") is None


def test_media_type_fallback(sample_image_bytes):
    assert media_type_for(sample_image_bytes) == "image/png"
    assert media_type_for(b"not an image at all") == DEFAULT_MEDIA_TYPE
