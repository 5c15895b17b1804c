"""Tests for upload helpers."""

import base64

import pytest

from bizhub.application.filing.uploads import FileUpload, decode_base64_image
from bizhub.exceptions import InvalidImageError


class _EmptyStream:
    async def read(self, size: int = -1) -> bytes:
        return b""


class TestFileUpload:
    def test_extension_and_display_name(self) -> None:
        upload = FileUpload("Holiday.Photo.JPG", None, _EmptyStream())

        assert upload.extension == ".jpg"
        assert upload.display_name == "Holiday.Photo"

    def test_declared_content_type_wins(self) -> None:
        upload = FileUpload("clip.mp4", "video/quicktime", _EmptyStream())

        assert upload.resolved_content_type() == "video/quicktime"

    def test_content_type_guessed_from_name(self) -> None:
        upload = FileUpload("logo.png", None, _EmptyStream())

        assert upload.resolved_content_type() == "image/png"

    def test_content_type_fallback(self) -> None:
        upload = FileUpload("blob", "", _EmptyStream())

        assert upload.resolved_content_type("video/mp4") == "video/mp4"


class TestDecodeBase64Image:
    def test_plain_payload(self) -> None:
        encoded = base64.b64encode(b"\x89PNG\r\n\x1a\n").decode()

        assert decode_base64_image(encoded) == b"\x89PNG\r\n\x1a\n"

    def test_data_url_prefix_is_stripped(self) -> None:
        encoded = base64.b64encode(b"GIF89a").decode()

        assert decode_base64_image(f"data:image/gif;base64,{encoded}") == b"GIF89a"

    @pytest.mark.parametrize("payload", ["", "   ", "not base64!!"])
    def test_invalid_payload_raises(self, payload: str) -> None:
        with pytest.raises(InvalidImageError, match="Invalid base64 image payload."):
            decode_base64_image(payload)
