"""Shared constants for shipi18n.

This module provides centralized configuration constants used across the
reconciliation and client packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Service defaults: Endpoint and timeout used when the caller supplies none
- Operations: Remote operation paths
- Environment: Variable names read by ClientConfig.from_env()
- Response metadata: Top-level payload keys that are never language codes

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Service defaults
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_MAX_RETRIES",
    # Operations
    "TRANSLATE_ENDPOINT",
    "LANGUAGES_ENDPOINT",
    # Environment
    "ENV_API_KEY",
    "ENV_BASE_URL",
    "ENV_TIMEOUT",
    # Serialization
    "JSON_INDENT",
    "PATH_SEPARATOR",
    "REGION_SEPARATOR",
    # Response metadata
    "RESPONSE_METADATA_KEYS",
]

# ============================================================================
# SERVICE DEFAULTS
# ============================================================================

DEFAULT_BASE_URL: str = "https://ydjkwckq3f.execute-api.us-east-1.amazonaws.com"

# Seconds. httpx applies it to connect, read, write and pool acquisition alike.
DEFAULT_TIMEOUT: float = 30.0

# Connection-level retries performed by httpx.HTTPTransport.
DEFAULT_MAX_RETRIES: int = 0

# ============================================================================
# OPERATIONS
# ============================================================================

TRANSLATE_ENDPOINT: str = "/api/translate"
LANGUAGES_ENDPOINT: str = "/api/languages"

# ============================================================================
# ENVIRONMENT
# ============================================================================

ENV_API_KEY: str = "SHIPI18N_API_KEY"
ENV_BASE_URL: str = "SHIPI18N_BASE_URL"
ENV_TIMEOUT: str = "SHIPI18N_TIMEOUT"

# ============================================================================
# SERIALIZATION
# ============================================================================

# Indentation used when a mapping is stringified for the wire.
JSON_INDENT: int = 2

# Dot-path separator ("common.greeting").
PATH_SEPARATOR: str = "."

# Separator between base and region subtags ("pt-BR").
REGION_SEPARATOR: str = "-"

# ============================================================================
# RESPONSE METADATA
# ============================================================================

# Keys the service may place next to language codes in a translate response.
RESPONSE_METADATA_KEYS: frozenset[str] = frozenset(
    ("warnings", "namespaceInfo", "skipped", "fallbackInfo")
)
