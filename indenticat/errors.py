from __future__ import annotations

NO_IMAGE_MESSAGE = "No image provided"
PROCESSING_FAILED_MESSAGE = "Failed to process image"


class IndenticatError(Exception):
    """Base class for errors surfaced to API callers."""

    public_message = PROCESSING_FAILED_MESSAGE


class ValidationError(IndenticatError):
    """The caller did not supply a usable image."""

    def __init__(self, message: str = NO_IMAGE_MESSAGE) -> None:
        super().__init__(message)
        self.public_message = message


class UpstreamError(IndenticatError):
    """The inference service failed or could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


__all__ = [
    "IndenticatError",
    "NO_IMAGE_MESSAGE",
    "PROCESSING_FAILED_MESSAGE",
    "UpstreamError",
    "ValidationError",
]
