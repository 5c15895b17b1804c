"""Custom exception hierarchy for the bizhub application."""


class BizhubError(Exception):
    """Base exception for all bizhub errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(BizhubError):
    """Validation error."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400)


class UploadTooLargeError(ValidationError):
    """Uploaded content exceeded the configured size limit."""

    def __init__(self, max_bytes: int) -> None:
        """Initialize with the limit that was exceeded."""
        self.max_bytes = max_bytes
        super().__init__(f"File too large (max {format_size_limit(max_bytes)})")
        self.status_code = 413


class InvalidImageError(ValidationError):
    """Image payload could not be decoded or recognised."""


def format_size_limit(max_bytes: int) -> str:
    """Render a byte limit the way upload errors report it."""
    if max_bytes % 1_000_000_000 == 0:
        return f"{max_bytes // 1_000_000_000} GB"
    if max_bytes % (1024 * 1024) == 0:
        return f"{max_bytes // (1024 * 1024)} MB"
    return f"{max_bytes} bytes"
