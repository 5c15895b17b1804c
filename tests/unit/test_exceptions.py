"""Tests for the exception hierarchy."""

from bizhub.exceptions import BizhubError, UploadTooLargeError, format_size_limit


class TestFormatSizeLimit:
    def test_gigabytes(self) -> None:
        assert format_size_limit(1_000_000_000) == "1 GB"

    def test_mebibytes(self) -> None:
        assert format_size_limit(500 * 1024 * 1024) == "500 MB"

    def test_plain_bytes(self) -> None:
        assert format_size_limit(1234) == "1234 bytes"


class TestUploadTooLargeError:
    def test_message_and_status(self) -> None:
        error = UploadTooLargeError(500 * 1024 * 1024)

        assert isinstance(error, BizhubError)
        assert error.message == "File too large (max 500 MB)"
        assert error.status_code == 413
        assert error.max_bytes == 500 * 1024 * 1024
