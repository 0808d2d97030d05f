"""Exception type for the shipi18n client.

Every failure surfaced to callers is a Shipi18nError carrying a numeric
``status_code`` and a stable ``code`` suitable for programmatic handling.
The reconciliation engine never raises; only configuration validation and
the transport boundary do.

Python 3.13+.
"""

from __future__ import annotations

from shipi18n.enums import ErrorCode

__all__ = ["Shipi18nError"]


class Shipi18nError(Exception):
    """Classified client or service failure.

    Attributes:
        status_code: HTTP status (remote status for HTTP_ERROR, 400/408/500
            for client-assigned kinds)
        code: Stable error code. One of ErrorCode for client-assigned kinds,
            or the code string returned by the service.

    Example:
        >>> try:
        ...     client.translate_json({"hi": "Hello"}, "en", ["es"])
        ... except Shipi18nError as e:
        ...     if e.code == ErrorCode.TIMEOUT:
        ...         retry_later()
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str = ErrorCode.API_ERROR,
    ) -> None:
        """Initialize Shipi18nError.

        Args:
            message: Human-readable error description
            status_code: Numeric status associated with the failure
            code: Stable error code (default: API_ERROR)
        """
        super().__init__(message)
        self.status_code = status_code
        self.code = code

    @property
    def message(self) -> str:
        """Human-readable error description."""
        return str(self.args[0]) if self.args else ""

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"Shipi18nError({self.message!r}, "
            f"status_code={self.status_code}, code={str(self.code)!r})"
        )
