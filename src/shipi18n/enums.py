"""Enumerations for shipi18n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they can be placed directly
into request bodies and compared against codes decoded from responses.

Python 3.13+.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error codes carried by Shipi18nError.

    The service may return its own codes in error bodies; those are kept
    verbatim as plain strings. These members cover the codes the client
    assigns itself.
    """

    API_ERROR = "API_ERROR"
    """Default code when none is supplied."""

    MISSING_API_KEY = "MISSING_API_KEY"
    """Client configuration built without credentials (400)."""

    HTTP_ERROR = "HTTP_ERROR"
    """Non-success response without a code in its body."""

    TIMEOUT = "TIMEOUT"
    """Request aborted after the configured timeout (408)."""

    NETWORK_ERROR = "NETWORK_ERROR"
    """Connection, DNS, protocol or body decoding failure (500)."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    """Decoded payload of an unexpected shape (500)."""


class OutputFormat(StrEnum):
    """Output format requested from the translate operation."""

    JSON = "json"
    TEXT = "text"


class GroupByNamespace(StrEnum):
    """Namespace grouping mode for JSON translation.

    StrEnum provides automatic string conversion: str(GroupByNamespace.AUTO) == "auto"
    """

    AUTO = "auto"
    TRUE = "true"
    FALSE = "false"


class HttpMethod(StrEnum):
    """HTTP methods used by the transport."""

    GET = "GET"
    POST = "POST"


__all__ = [
    "ErrorCode",
    "GroupByNamespace",
    "HttpMethod",
    "OutputFormat",
]
