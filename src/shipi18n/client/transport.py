"""HTTP transport for the Shipi18n service.

Components:
    Transport - Protocol for exchanging one request with the service
    HttpxTransport - httpx-based implementation with error classification

The transport is the only layer that raises on the request path. Every
failure leaves it as a Shipi18nError with a stable code:

    non-2xx response        -> HTTP_ERROR (or the body's ``code``), remote status
    timeout                 -> TIMEOUT, 408
    connection/protocol/IO  -> NETWORK_ERROR, 500
    undecodable 2xx body    -> NETWORK_ERROR, 500
    any other exception     -> NETWORK_ERROR, 500

A Shipi18nError raised inside the exchange is re-raised unchanged.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

import httpx

from shipi18n.enums import ErrorCode, HttpMethod
from shipi18n.errors import Shipi18nError

if TYPE_CHECKING:
    from shipi18n.client.config import ClientConfig

__all__ = ["HttpxTransport", "Transport", "error_from_response"]

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Protocol for exchanging a single request with the service.

    Implementations return the decoded JSON body on success and raise
    Shipi18nError on any failure. This is a Protocol (structural typing)
    so that tests and callers can substitute their own exchange.

    Example:
        >>> class CannedTransport:
        ...     def request(self, endpoint, body, method=HttpMethod.POST):
        ...         return {"es": {"greeting": "Hola"}}
        ...     def close(self) -> None:
        ...         pass
        >>> client = Shipi18n(ClientConfig(api_key="k"), transport=CannedTransport())
    """

    def request(
        self,
        endpoint: str,
        body: Mapping[str, Any],
        method: HttpMethod = HttpMethod.POST,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Args:
            endpoint: Operation path (e.g., '/api/translate')
            body: Flat request body, sent as JSON for POST
            method: HTTP method

        Returns:
            Decoded JSON body

        Raises:
            Shipi18nError: On any failure
        """

    def close(self) -> None:
        """Release any held connections."""


def error_from_response(response: httpx.Response) -> Shipi18nError:
    """Build the HTTP_ERROR for a non-success response.

    ``message`` and ``code`` are taken from the JSON body when present.
    A body that is not a JSON object counts as empty.
    """
    try:
        data = response.json()
    except ValueError:
        data = {}
    if not isinstance(data, Mapping):
        data = {}

    message = data.get("message") or f"HTTP {response.status_code}: {response.reason_phrase}"
    code = data.get("code") or ErrorCode.HTTP_ERROR
    return Shipi18nError(str(message), response.status_code, code)


class HttpxTransport:
    """Transport backed by an ``httpx.Client``.

    Sends ``Content-Type: application/json`` and ``x-api-key`` on every
    request, with the configured timeout. When no client is injected, one is
    created over ``httpx.HTTPTransport(retries=config.max_retries)`` and
    owned by this transport; an injected client is left open by close().

    Example:
        >>> transport = HttpxTransport(ClientConfig(api_key="k"))
        >>> transport.request("/api/languages", {}, HttpMethod.GET)
        {'languages': [...]}
    """

    __slots__ = ("_client", "_config", "_owns_client")

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Client configuration (endpoint, key, timeout, retries)
            http_client: Pre-built httpx client (e.g., with a MockTransport)
        """
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            transport=httpx.HTTPTransport(retries=config.max_retries),
        )

    @property
    def config(self) -> ClientConfig:
        """Configuration this transport was built with (read-only)."""
        return self._config

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self._config.api_key,
        }

    def request(
        self,
        endpoint: str,
        body: Mapping[str, Any],
        method: HttpMethod = HttpMethod.POST,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            Shipi18nError: Classified failure (see module docstring)
        """
        url = self._config.url_for(endpoint)
        logger.debug("%s %s", method, url)

        try:
            response = self._client.request(
                str(method),
                url,
                headers=self._headers(),
                json=dict(body) if method == HttpMethod.POST else None,
                timeout=self._config.timeout,
            )
            if not response.is_success:
                raise error_from_response(response)
            return response.json()
        except Shipi18nError as e:
            logger.warning("%s %s failed: %s (%s)", method, endpoint, e, e.code)
            raise
        except httpx.TimeoutException as e:
            logger.warning("%s %s timed out after %ss", method, endpoint, self._config.timeout)
            msg = "Request timed out"
            raise Shipi18nError(msg, 408, ErrorCode.TIMEOUT) from e
        except (httpx.HTTPError, OSError, ValueError) as e:
            logger.warning("%s %s failed: %s", method, endpoint, e)
            raise Shipi18nError(str(e), 500, ErrorCode.NETWORK_ERROR) from e
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("%s %s failed unexpectedly: %r", method, endpoint, e)
            raise Shipi18nError(str(e) or type(e).__name__, 500, ErrorCode.NETWORK_ERROR) from e

    def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            self._client.close()
