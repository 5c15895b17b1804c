"""Tests for image magic byte detection."""

import pytest

from bizhub.application.filing.image_signatures import GIF, JPEG, PNG, WEBP, detect_image_format


class TestDetectImageFormat:
    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            (b"\xff\xd8\xff\xe0rest", JPEG),
            (b"\x89PNG\r\n\x1a\nrest", PNG),
            (b"GIF89a...", GIF),
            (b"GIF87a...", GIF),
            (b"RIFF\x00\x00\x00\x00WEBPVP8 ", WEBP),
        ],
    )
    def test_recognises_supported_formats(self, content: bytes, expected: object) -> None:
        assert detect_image_format(content) is expected

    def test_rejects_unknown_payload(self) -> None:
        assert detect_image_format(b"%PDF-1.7") is None

    def test_rejects_truncated_webp_header(self) -> None:
        assert detect_image_format(b"RIFF\x00\x00") is None
