"""Error taxonomy for atlasclient.

Every failure surfaced by the client is an ``AtlasError`` carrying a
human-readable message and a machine-readable ``code``.
"""

from typing import Any


class AtlasError(Exception):
    """Base error for all client failures."""

    default_code = "UNKNOWN_ERROR"
    default_status_code = 500

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.status_code = (
            status_code if status_code is not None else self.default_status_code
        )
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the error."""
        return {
            "error": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "details": self.details,
        }


class AtlasNetworkError(AtlasError):
    """Timeout, transport failure, or non-success HTTP status."""

    default_code = "NETWORK_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        status_text: str | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, details=details)
        self.status_text = status_text


class AtlasValidationError(AtlasError):
    """Caller-supplied argument is missing or invalid.

    Raised before any network attempt and never retried.
    """

    default_code = "VALIDATION_ERROR"
    default_status_code = 400

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, details=details)


class AtlasUnknownError(AtlasError):
    """Any other exception, wrapped for a uniform error surface."""


class AtlasCancelledError(AtlasError):
    """The caller aborted an operation before it completed."""

    default_code = "CANCELLED"
    default_status_code = 499

    def __init__(self, message: str = "Request cancelled") -> None:
        super().__init__(message)


def to_atlas_error(error: BaseException) -> AtlasError:
    """Map an arbitrary exception onto the client's error taxonomy.

    Args:
        error: The exception raised while serving a call.

    Returns:
        The error itself if it already is an ``AtlasError``, otherwise
        an ``AtlasUnknownError`` wrapping it.
    """
    if isinstance(error, AtlasError):
        return error

    message = str(error) or "An unknown error occurred"
    return AtlasUnknownError(message, details={"type": type(error).__name__})
