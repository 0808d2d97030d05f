"""Request bodies for the translate operation.

Components:
    serialize_content - Wire text and parsed source document for JSON input
    JsonTranslationRequest - Immutable JSON-translate request
    TextTranslationRequest - Immutable text-translate request

The service expects a flat body with string flags; the body builders here
are the single place that knows those encodings.

Python 3.13+.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from shipi18n.constants import JSON_INDENT
from shipi18n.enums import GroupByNamespace, OutputFormat
from shipi18n.reconciliation.types import Document, LanguageTag

__all__ = [
    "JsonTranslationRequest",
    "TextTranslationRequest",
    "serialize_content",
]

_INPUT_METHOD = "text"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _encode_languages(languages: Sequence[LanguageTag]) -> str:
    return json.dumps(list(languages), separators=(",", ":"))


def serialize_content(content: Mapping[str, Any] | str) -> tuple[str, Document]:
    """Return the wire text and the source document for JSON content.

    A mapping is stringified with two-space indentation (non-ASCII kept
    as-is). A string is sent verbatim and parsed to obtain the source
    document.

    Args:
        content: Source content as a mapping or a JSON string

    Returns:
        Tuple of (text, source_document)

    Raises:
        ValueError: If a string is not valid JSON or does not hold an object

    Example:
        >>> serialize_content({"greeting": "Hello"})
        ('{\\n  "greeting": "Hello"\\n}', {'greeting': 'Hello'})
    """
    if isinstance(content, str):
        document = json.loads(content)
        if not isinstance(document, dict):
            msg = f"JSON content must be an object, got {type(document).__name__}"
            raise ValueError(msg)
        return content, document

    return json.dumps(content, indent=JSON_INDENT, ensure_ascii=False), dict(content)


@dataclass(frozen=True, slots=True)
class JsonTranslationRequest:
    """JSON-translate request, ready to encode.

    Attributes:
        text: Serialized source content
        source_language: Source language tag
        target_languages: Processed targets (requested tags plus synthesized
            base tags), each exactly once
        preserve_placeholders: Keep ``{name}``/``{{count}}`` placeholders intact
        enable_pluralization: Generate i18next plural forms
        namespace: Wrap output in this namespace (omitted when None)
        group_by_namespace: Namespace auto-detection mode
        export_per_namespace: Split output per namespace
        skip_keys: Keys or dot-paths to leave untranslated
        skip_paths: Glob patterns (``states.*``) of paths to leave untranslated
    """

    text: str
    source_language: LanguageTag
    target_languages: tuple[LanguageTag, ...]
    preserve_placeholders: bool = True
    enable_pluralization: bool = True
    namespace: str | None = None
    group_by_namespace: GroupByNamespace = GroupByNamespace.AUTO
    export_per_namespace: bool = False
    skip_keys: tuple[str, ...] = ()
    skip_paths: tuple[str, ...] = ()

    def to_body(self) -> dict[str, Any]:
        """Encode as the flat request body the service expects."""
        body: dict[str, Any] = {
            "inputMethod": _INPUT_METHOD,
            "text": self.text,
            "sourceLanguage": self.source_language,
            "targetLanguages": _encode_languages(self.target_languages),
            "outputFormat": str(OutputFormat.JSON),
            "preservePlaceholders": _flag(self.preserve_placeholders),
            "enablePluralization": _flag(self.enable_pluralization),
            "groupByNamespace": str(self.group_by_namespace),
            "exportPerNamespace": self.export_per_namespace,
            "skipKeys": list(self.skip_keys),
            "skipPaths": list(self.skip_paths),
        }
        if self.namespace is not None:
            body["namespace"] = self.namespace
        return body


@dataclass(frozen=True, slots=True)
class TextTranslationRequest:
    """Plain-text translate request.

    Attributes:
        text: Text to translate; multiple segments joined by newlines
        source_language: Source language tag
        target_languages: Target language tags
        preserve_placeholders: Keep placeholders intact
    """

    text: str
    source_language: LanguageTag
    target_languages: tuple[LanguageTag, ...]
    preserve_placeholders: bool = True

    @classmethod
    def from_content(
        cls,
        content: str | Sequence[str],
        source_language: LanguageTag,
        target_languages: Sequence[LanguageTag],
        *,
        preserve_placeholders: bool = True,
    ) -> TextTranslationRequest:
        """Build a request from a string or a sequence of lines."""
        text = content if isinstance(content, str) else "\n".join(content)
        return cls(
            text=text,
            source_language=source_language,
            target_languages=tuple(target_languages),
            preserve_placeholders=preserve_placeholders,
        )

    def to_body(self) -> dict[str, Any]:
        """Encode as the flat request body the service expects."""
        return {
            "inputMethod": _INPUT_METHOD,
            "text": self.text,
            "sourceLanguage": self.source_language,
            "targetLanguages": _encode_languages(self.target_languages),
            "outputFormat": str(OutputFormat.TEXT),
            "preservePlaceholders": _flag(self.preserve_placeholders),
        }
