"""Shipi18n API client.

Translates JSON documents and plain text through the remote service, then
completes JSON translations with the fallback reconciliation engine.

Each translate call issues exactly one request and reconciles in memory
afterwards. The client holds only its immutable ClientConfig and a
transport, so one instance may serve concurrent calls.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from shipi18n.client.config import ClientConfig
from shipi18n.client.requests import (
    JsonTranslationRequest,
    TextTranslationRequest,
    serialize_content,
)
from shipi18n.client.results import SupportedLanguage, TranslationResult, split_response
from shipi18n.client.transport import HttpxTransport, Transport
from shipi18n.constants import LANGUAGES_ENDPOINT, TRANSLATE_ENDPOINT
from shipi18n.enums import ErrorCode, GroupByNamespace, HttpMethod
from shipi18n.errors import Shipi18nError
from shipi18n.reconciliation.engine import apply_fallbacks
from shipi18n.reconciliation.regional import resolve_regional_languages
from shipi18n.reconciliation.report import FallbackOptions
from shipi18n.reconciliation.types import LanguageTag

__all__ = ["Shipi18n"]

logger = logging.getLogger(__name__)


def _expect_object(payload: Any, endpoint: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        msg = f"Unexpected response from {endpoint}: expected a JSON object"
        raise Shipi18nError(msg, 500, ErrorCode.UNKNOWN_ERROR)
    return payload


class Shipi18n:
    """Client for the Shipi18n translation service.

    Example:
        >>> client = Shipi18n(ClientConfig(api_key="your-api-key"))
        >>> result = client.translate_json(
        ...     {"greeting": "Hello", "farewell": "Goodbye"},
        ...     source_language="en",
        ...     target_languages=["es", "fr", "pt-BR"],
        ... )
        >>> result["es"]
        {'greeting': 'Hola', 'farewell': 'Adiós'}
        >>> if result.fallback:
        ...     print(result.fallback.regional_fallbacks)

    Example - Context manager:
        >>> with Shipi18n(ClientConfig.from_env()) as client:
        ...     languages = client.get_languages()
    """

    __slots__ = ("_config", "_transport")

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Validated client configuration
            transport: Exchange to use instead of the default HttpxTransport
        """
        self._config = config
        self._transport: Transport = transport or HttpxTransport(config)

    @classmethod
    def from_api_key(cls, api_key: str, **config: Any) -> Shipi18n:
        """Build a client from an API key and optional ClientConfig fields.

        Raises:
            Shipi18nError: If api_key is empty (MISSING_API_KEY)
        """
        return cls(ClientConfig(api_key=api_key, **config))

    @property
    def config(self) -> ClientConfig:
        """Client configuration (read-only)."""
        return self._config

    def __repr__(self) -> str:
        return f"Shipi18n(base_url={self._config.base_url!r})"

    def __enter__(self) -> Shipi18n:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Close the transport. Does not suppress exceptions."""
        self.close()

    def close(self) -> None:
        """Release the transport's connections."""
        self._transport.close()

    def translate_json(
        self,
        content: Mapping[str, Any] | str,
        source_language: LanguageTag,
        target_languages: Sequence[LanguageTag],
        *,
        preserve_placeholders: bool = True,
        enable_pluralization: bool = True,
        namespace: str | None = None,
        group_by_namespace: GroupByNamespace | str = GroupByNamespace.AUTO,
        export_per_namespace: bool = False,
        skip_keys: Sequence[str] | None = None,
        skip_paths: Sequence[str] | None = None,
        fallback: FallbackOptions | None = None,
    ) -> TranslationResult:
        """Translate JSON content to multiple languages.

        Regional targets (``pt-BR``) also request their base language when
        regional fallback is enabled, so the base can fill gaps. Missing
        languages and keys are then filled per ``fallback``.

        Args:
            content: Mapping or JSON string to translate
            source_language: Source language tag (e.g., 'en')
            target_languages: Target language tags (e.g., ['es', 'pt-BR'])
            preserve_placeholders: Keep ``{name}``/``{{count}}`` placeholders
            enable_pluralization: Generate i18next plural forms
            namespace: Wrap output in a namespace (e.g., 'common')
            group_by_namespace: 'auto', 'true' or 'false'
            export_per_namespace: Split output per namespace
            skip_keys: Keys or dot-paths to leave untranslated
            skip_paths: Glob patterns of paths to leave untranslated
            fallback: Fallback policy (default: FallbackOptions())

        Returns:
            TranslationResult with a FallbackReport when any fallback applied

        Raises:
            ValueError: If string content is not a JSON object
            Shipi18nError: On any transport or service failure
        """
        options = fallback or FallbackOptions()
        text, source_document = serialize_content(content)
        resolution = resolve_regional_languages(target_languages, options.regional_fallback)

        request = JsonTranslationRequest(
            text=text,
            source_language=source_language,
            target_languages=resolution.processed_targets,
            preserve_placeholders=preserve_placeholders,
            enable_pluralization=enable_pluralization,
            namespace=namespace,
            group_by_namespace=GroupByNamespace(group_by_namespace),
            export_per_namespace=export_per_namespace,
            skip_keys=tuple(skip_keys or ()),
            skip_paths=tuple(skip_paths or ()),
        )
        logger.debug(
            "translate_json %s -> %s (requested %s)",
            source_language,
            list(resolution.processed_targets),
            list(target_languages),
        )

        payload = _expect_object(
            self._transport.request(TRANSLATE_ENDPOINT, request.to_body(), HttpMethod.POST),
            TRANSLATE_ENDPOINT,
        )
        languages, metadata, extras = split_response(payload, resolution.processed_targets)
        translations, report = apply_fallbacks(
            languages,
            source_document,
            target_languages,
            source_language,
            options,
            resolution.regional_map,
        )
        return TranslationResult.from_languages(translations, metadata, extras, report)

    def translate_text(
        self,
        content: str | Sequence[str],
        source_language: LanguageTag,
        target_languages: Sequence[LanguageTag],
        *,
        preserve_placeholders: bool = True,
        fallback: FallbackOptions | None = None,
    ) -> TranslationResult:
        """Translate plain text to multiple languages.

        Text results are returned as the service sent them; fallback
        reconciliation applies to JSON mode only, so ``fallback`` is
        accepted and not used.

        Args:
            content: A string, or a sequence of lines joined with newlines
            source_language: Source language tag
            target_languages: Target language tags
            preserve_placeholders: Keep placeholders intact
            fallback: Ignored in text mode

        Raises:
            Shipi18nError: On any transport or service failure
        """
        request = TextTranslationRequest.from_content(
            content,
            source_language,
            target_languages,
            preserve_placeholders=preserve_placeholders,
        )
        logger.debug("translate_text %s -> %s", source_language, list(target_languages))

        payload = _expect_object(
            self._transport.request(TRANSLATE_ENDPOINT, request.to_body(), HttpMethod.POST),
            TRANSLATE_ENDPOINT,
        )
        languages, metadata, extras = split_response(payload, request.target_languages)
        return TranslationResult.from_languages(languages, metadata, extras)

    def translate_i18next(
        self,
        content: Mapping[str, Any] | str,
        source_language: LanguageTag,
        target_languages: Sequence[LanguageTag],
        **options: Any,
    ) -> TranslationResult:
        """Translate an i18next-style JSON file.

        Same as translate_json() with placeholders preserved, pluralization
        enabled and namespaces auto-detected, whatever ``options`` say.
        """
        options.update(
            preserve_placeholders=True,
            enable_pluralization=True,
            group_by_namespace=GroupByNamespace.AUTO,
        )
        return self.translate_json(content, source_language, target_languages, **options)

    def get_languages(self) -> tuple[SupportedLanguage, ...]:
        """List the languages supported by the service.

        Raises:
            Shipi18nError: On any transport or service failure
        """
        payload = _expect_object(
            self._transport.request(LANGUAGES_ENDPOINT, {}, HttpMethod.GET),
            LANGUAGES_ENDPOINT,
        )
        entries = payload.get("languages")
        if not isinstance(entries, list):
            msg = f"Unexpected response from {LANGUAGES_ENDPOINT}: missing 'languages' list"
            raise Shipi18nError(msg, 500, ErrorCode.UNKNOWN_ERROR)
        return tuple(
            SupportedLanguage.from_dict(item) for item in entries if isinstance(item, Mapping)
        )
