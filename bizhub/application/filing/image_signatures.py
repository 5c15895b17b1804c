"""Recognise image payloads by their magic bytes."""

from dataclasses import dataclass

# WebP header requires at least 12 bytes for validation
WEBP_MIN_HEADER_SIZE = 12


@dataclass(frozen=True)
class ImageFormat:
    name: str
    content_type: str
    extension: str


JPEG = ImageFormat("jpeg", "image/jpeg", ".jpg")
PNG = ImageFormat("png", "image/png", ".png")
GIF = ImageFormat("gif", "image/gif", ".gif")
WEBP = ImageFormat("webp", "image/webp", ".webp")

# Magic bytes for image file type validation
IMAGE_SIGNATURES = {
    b"\xff\xd8\xff": JPEG,
    b"\x89PNG\r\n\x1a\n": PNG,
    b"GIF87a": GIF,
    b"GIF89a": GIF,
}


def detect_image_format(content: bytes) -> ImageFormat | None:
    """
    Validate image type by checking magic bytes.

    Args:
        content: The file content, or at least its first bytes

    Returns:
        The recognised format, or None if not recognized
    """
    for signature, image_format in IMAGE_SIGNATURES.items():
        if content.startswith(signature):
            return image_format

    # Check WebP (RIFF header followed by WEBP)
    if (
        content.startswith(b"RIFF")
        and len(content) >= WEBP_MIN_HEADER_SIZE
        and content[8:12] == b"WEBP"
    ):
        return WEBP

    return None
