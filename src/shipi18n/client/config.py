"""Client configuration for Shipi18n.

Provides a single frozen dataclass holding everything the client needs to
reach the service. The client keeps a reference to one ClientConfig and
reads it on every call; nothing is stored in module-level state.

Python 3.13+.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from shipi18n.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_TIMEOUT,
)
from shipi18n.enums import ErrorCode
from shipi18n.errors import Shipi18nError

__all__ = ["ClientConfig"]


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable configuration for the Shipi18n client.

    Attributes:
        api_key: Service API key, sent as the ``x-api-key`` header (required).
        base_url: Service base URL (default: the Shipi18n API Gateway
            endpoint, DEFAULT_BASE_URL). An empty string selects the default.
        timeout: Request timeout in seconds (default: 30.0). Applied by httpx
            to each phase of a request (connect, read, write, pool acquire)
            separately, not as a total deadline: a server that keeps sending
            slowly can hold a request open longer than ``timeout`` overall.
        max_retries: Connection-level retries performed by httpx when the
            client builds its own HTTP transport (default: 0).

    Example:
        >>> config = ClientConfig(api_key="sk-test", timeout=60.0)
        >>> config.base_url
        'https://ydjkwckq3f.execute-api.us-east-1.amazonaws.com'
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            Shipi18nError: If api_key is empty (code MISSING_API_KEY, status 400)
            ValueError: If timeout is not positive or max_retries is negative
        """
        if not self.api_key:
            msg = "API key is required"
            raise Shipi18nError(msg, 400, ErrorCode.MISSING_API_KEY)
        if not self.base_url:
            object.__setattr__(self, "base_url", DEFAULT_BASE_URL)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if self.max_retries < 0:
            msg = "max_retries must be non-negative"
            raise ValueError(msg)

    def __repr__(self) -> str:
        """Return string representation with the API key masked."""
        return (
            f"ClientConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout}, max_retries={self.max_retries})"
        )

    def url_for(self, endpoint: str) -> str:
        """Join the base URL and an operation path."""
        return f"{self.base_url.rstrip('/')}{endpoint}"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> ClientConfig:
        """Build a configuration from SHIPI18N_* environment variables.

        Reads SHIPI18N_API_KEY, SHIPI18N_BASE_URL and SHIPI18N_TIMEOUT
        (seconds). Keyword overrides take precedence over the environment.

        Args:
            environ: Mapping to read instead of os.environ
            **overrides: Explicit field values

        Returns:
            Validated ClientConfig

        Raises:
            Shipi18nError: If no API key is found (MISSING_API_KEY)
            ValueError: If SHIPI18N_TIMEOUT is not a number
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {"api_key": env.get(ENV_API_KEY, "")}
        if base_url := env.get(ENV_BASE_URL):
            values["base_url"] = base_url
        if timeout := env.get(ENV_TIMEOUT):
            values["timeout"] = float(timeout)
        values.update(overrides)
        return cls(**values)
