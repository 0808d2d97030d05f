"""Client for the Shipi18n translation service.

Submodules:
    config     - ClientConfig (immutable endpoint, key, timeout, retries)
    transport  - Transport protocol and HttpxTransport
    requests   - Request bodies for the translate operation
    results    - TranslationResult and its per-language entries
    client     - Shipi18n

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from shipi18n.client.client import Shipi18n
from shipi18n.client.config import ClientConfig
from shipi18n.client.requests import JsonTranslationRequest, TextTranslationRequest
from shipi18n.client.results import (
    JsonTranslation,
    LanguageEntry,
    NamespaceDetail,
    NamespaceInfo,
    SupportedLanguage,
    TextTranslation,
    TranslationPair,
    TranslationResult,
    TranslationWarning,
)
from shipi18n.client.transport import HttpxTransport, Transport

__all__ = [
    # Client
    "Shipi18n",
    "ClientConfig",
    # Transport
    "Transport",
    "HttpxTransport",
    # Requests
    "JsonTranslationRequest",
    "TextTranslationRequest",
    # Results
    "TranslationResult",
    "LanguageEntry",
    "JsonTranslation",
    "TextTranslation",
    "TranslationPair",
    "TranslationWarning",
    "NamespaceInfo",
    "NamespaceDetail",
    "SupportedLanguage",
]
