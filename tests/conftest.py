"""Pytest configuration for the shipi18n test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Shared fixtures build clients over httpx.MockTransport so that no test
touches the network.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest
from hypothesis import Phase, Verbosity, settings

from shipi18n import ClientConfig, Shipi18n
from shipi18n.client.transport import HttpxTransport

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os

    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# MOCKED SERVICE
# =============================================================================


class RecordingService:
    """Canned service behind httpx.MockTransport that records every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def respond(self, body: Any = None, status_code: int = 200, **kwargs: Any) -> None:
        """Queue a response. ``body`` is JSON-encoded unless ``content`` is given."""
        if "content" in kwargs:
            self._responses.append(httpx.Response(status_code, **kwargs))
        else:
            self._responses.append(httpx.Response(status_code, json=body, **kwargs))

    def fail(self, exc: Exception) -> None:
        """Queue an exception raised while handling the request."""
        self._responses.append(exc)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self._responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def last_body(self) -> dict[str, Any]:
        """Decoded JSON body of the most recent request."""
        return json.loads(self.requests[-1].content)


@pytest.fixture
def service() -> RecordingService:
    return RecordingService()


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key="test-key", base_url="https://api.example.test")


@pytest.fixture
def make_client(
    service: RecordingService, config: ClientConfig
) -> Iterator[Callable[..., Shipi18n]]:
    """Factory building a Shipi18n client wired to the recording service."""
    http_clients: list[httpx.Client] = []

    def _make(cfg: ClientConfig | None = None) -> Shipi18n:
        cfg = cfg or config
        http_client = httpx.Client(transport=httpx.MockTransport(service))
        http_clients.append(http_client)
        return Shipi18n(cfg, transport=HttpxTransport(cfg, http_client=http_client))

    yield _make

    for http_client in http_clients:
        http_client.close()


@pytest.fixture
def client(make_client: Callable[..., Shipi18n]) -> Shipi18n:
    return make_client()
