"""Media type detection for stored wine images."""

DEFAULT_MEDIA_TYPE = "application/octet-stream"

# Each entry is (magic_bytes, offset, media_type)
IMAGE_MAGIC_SIGNATURES = [
    # JPEG: starts with FF D8 FF
    (b"\xff\xd8\xff", 0, "image/jpeg"),
    # PNG: starts with 89 50 4E 47 0D 0A 1A 0A
    (b"\x89PNG\r\n\x1a\n", 0, "image/png"),
    # GIF87a and GIF89a
    (b"GIF87a", 0, "image/gif"),
    (b"GIF89a", 0, "image/gif"),
    # WebP: RIFF....WEBP
    (b"RIFF", 0, "image/webp"),
]


def detect_image_type(content: bytes) -> str | None:
    """Detect an image's media type from its magic bytes.

    Args:
        content: The image bytes.

    Returns:
        The media type (e.g. "image/png") or None if unrecognised.
    """
    if len(content) < 12:
        return None

    for magic, offset, media_type in IMAGE_MAGIC_SIGNATURES:
        if content[offset:offset + len(magic)] == magic:
            if media_type == "image/webp" and content[8:12] != b"WEBP":
                continue
            return media_type

    return None


def media_type_for(content: bytes) -> str:
    """Media type to serve an image with, falling back to octet-stream."""
    return detect_image_type(content) or DEFAULT_MEDIA_TYPE
