"""Result model for translate and languages operations.

Each language in a translate response becomes a tagged entry:
JsonTranslation (a document) or TextTranslation (original/translated
pairs). Service metadata (warnings, namespace detection, skipped keys) and
the client-side FallbackReport live in their own fields of
TranslationResult, never next to language codes.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Collection, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from shipi18n.constants import RESPONSE_METADATA_KEYS
from shipi18n.enums import OutputFormat
from shipi18n.locale_utils import language_display_name
from shipi18n.reconciliation.report import FallbackReport
from shipi18n.reconciliation.types import Document, LanguageTag, TranslationMap

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Per-language entries
    "TranslationPair",
    "JsonTranslation",
    "TextTranslation",
    "LanguageEntry",
    # Metadata
    "TranslationWarning",
    "NamespaceDetail",
    "NamespaceInfo",
    # Aggregates
    "TranslationResult",
    "SupportedLanguage",
    # Payload handling
    "split_response",
]


@dataclass(frozen=True, slots=True)
class TranslationPair:
    """One translated text segment."""

    original: str
    translated: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TranslationPair:
        return cls(
            original=str(data.get("original", "")),
            translated=str(data.get("translated", "")),
        )

    def to_dict(self) -> dict[str, str]:
        return {"original": self.original, "translated": self.translated}


@dataclass(frozen=True, slots=True)
class JsonTranslation:
    """Translated document for one language (JSON mode)."""

    language: LanguageTag
    document: Document

    @property
    def kind(self) -> OutputFormat:
        return OutputFormat.JSON

    @property
    def payload(self) -> Document:
        return self.document


@dataclass(frozen=True, slots=True)
class TextTranslation:
    """Translated text segments for one language (text mode)."""

    language: LanguageTag
    pairs: tuple[TranslationPair, ...]

    @property
    def kind(self) -> OutputFormat:
        return OutputFormat.TEXT

    @property
    def payload(self) -> list[TranslationPair]:
        return list(self.pairs)

    @property
    def texts(self) -> list[str]:
        """Translated strings, in segment order."""
        return [pair.translated for pair in self.pairs]


type LanguageEntry = JsonTranslation | TextTranslation


@dataclass(frozen=True, slots=True)
class TranslationWarning:
    """Non-fatal notice returned by the service."""

    type: str
    message: str
    details: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TranslationWarning:
        return cls(
            type=str(data.get("type", "")),
            message=str(data.get("message", "")),
            details=data.get("details"),
        )


@dataclass(frozen=True, slots=True)
class NamespaceDetail:
    """A namespace detected in the source content."""

    name: str
    key_count: int


@dataclass(frozen=True, slots=True)
class NamespaceInfo:
    """Namespace detection outcome reported by the service.

    Attributes:
        detected: Whether namespaces were detected or assigned
        count: Number of namespaces detected
        namespaces: Detected namespaces with their key counts
        user_assigned: True when the caller supplied the namespace
        namespace: Caller-supplied namespace name
    """

    detected: bool
    count: int | None = None
    namespaces: tuple[NamespaceDetail, ...] = ()
    user_assigned: bool | None = None
    namespace: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NamespaceInfo:
        details = tuple(
            NamespaceDetail(
                name=str(item.get("name", "")),
                key_count=int(item.get("keyCount", 0)),
            )
            for item in data.get("namespaces") or ()
            if isinstance(item, Mapping)
        )
        return cls(
            detected=bool(data.get("detected", False)),
            count=data.get("count"),
            namespaces=details,
            user_assigned=data.get("userAssigned"),
            namespace=data.get("namespace"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the info in the service's camelCase JSON shape."""
        data: dict[str, Any] = {"detected": self.detected}
        if self.count is not None:
            data["count"] = self.count
        if self.namespaces:
            data["namespaces"] = [
                {"name": n.name, "keyCount": n.key_count} for n in self.namespaces
            ]
        if self.user_assigned is not None:
            data["userAssigned"] = self.user_assigned
        if self.namespace is not None:
            data["namespace"] = self.namespace
        return data


def split_response(
    payload: Mapping[str, Any],
    target_languages: Collection[LanguageTag] = (),
) -> tuple[TranslationMap, dict[str, Any], dict[str, Any]]:
    """Split a translate response into languages, metadata and extras.

    Known metadata keys go to metadata. A requested target tag is a language
    entry whatever its value type, so a malformed value such as a bare string
    reaches reconciliation as present. Other keys holding objects or arrays
    are language entries too; any other scalar goes to extras. Null means
    absent and is dropped.

    Args:
        payload: Decoded response body
        target_languages: Tags sent to the service

    Returns:
        Tuple of (languages, metadata, extras)
    """
    languages: TranslationMap = {}
    metadata: dict[str, Any] = {}
    extras: dict[str, Any] = {}
    targets = frozenset(target_languages)

    for key, value in payload.items():
        if key in RESPONSE_METADATA_KEYS:
            metadata[key] = value
        elif value is None:
            continue
        elif key in targets or isinstance(value, (Mapping, list)):
            languages[key] = value
        else:
            extras[key] = value

    return languages, metadata, extras


def _entry_for(language: LanguageTag, value: Any) -> LanguageEntry | None:
    match value:
        case Mapping():
            return JsonTranslation(language=language, document=dict(value))
        case list():
            pairs = tuple(
                TranslationPair.from_dict(item) for item in value if isinstance(item, Mapping)
            )
            return TextTranslation(language=language, pairs=pairs)
        case _:
            return None


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Outcome of one translate call.

    Attributes:
        translations: Language tag -> tagged entry
        fallback: Fallback report, present only when a fallback was applied
        warnings: Warnings returned by the service
        namespace_info: Namespace detection info, when returned
        skipped: The service's report of keys left untranslated, verbatim
        extras: Other top-level response values, and language values that
            are neither documents nor pair lists, verbatim

    Example:
        >>> result = client.translate_json({"hi": "Hello"}, "en", ["es", "de"])
        >>> result["es"]
        {'hi': 'Hola'}
        >>> result.fallback is None
        True
    """

    translations: dict[LanguageTag, LanguageEntry]
    fallback: FallbackReport | None = None
    warnings: tuple[TranslationWarning, ...] = ()
    namespace_info: NamespaceInfo | None = None
    skipped: dict[str, Any] | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_languages(
        cls,
        languages: Mapping[LanguageTag, Any],
        metadata: Mapping[str, Any] | None = None,
        extras: Mapping[str, Any] | None = None,
        fallback: FallbackReport | None = None,
    ) -> TranslationResult:
        """Assemble a result from split (and possibly reconciled) response parts."""
        metadata = metadata or {}
        extra_values = dict(extras or {})
        translations: dict[LanguageTag, LanguageEntry] = {}
        for language, value in languages.items():
            entry = _entry_for(language, value)
            if entry is not None:
                translations[language] = entry
            else:
                # Malformed language value, kept verbatim
                extra_values[language] = value

        if "fallbackInfo" in metadata:
            extra_values["fallbackInfo"] = metadata["fallbackInfo"]

        raw_warnings = metadata.get("warnings")
        warnings = tuple(
            TranslationWarning.from_dict(item)
            for item in (raw_warnings if isinstance(raw_warnings, list) else ())
            if isinstance(item, Mapping)
        )
        raw_namespace = metadata.get("namespaceInfo")
        namespace_info = (
            NamespaceInfo.from_dict(raw_namespace) if isinstance(raw_namespace, Mapping) else None
        )
        raw_skipped = metadata.get("skipped")

        return cls(
            translations=translations,
            fallback=fallback if fallback is not None and fallback.used else None,
            warnings=warnings,
            namespace_info=namespace_info,
            skipped=dict(raw_skipped) if isinstance(raw_skipped, Mapping) else None,
            extras=extra_values,
        )

    def __getitem__(self, language: LanguageTag) -> Any:
        """Return the document (JSON) or pair list (text) for a language.

        Raises:
            KeyError: If the language has no entry
        """
        return self.translations[language].payload

    def __contains__(self, language: object) -> bool:
        return language in self.translations

    def __iter__(self) -> Iterator[LanguageTag]:
        return iter(self.translations)

    def __len__(self) -> int:
        return len(self.translations)

    @property
    def languages(self) -> tuple[LanguageTag, ...]:
        """Languages with an entry, in response order."""
        return tuple(self.translations)

    @property
    def fallback_used(self) -> bool:
        return self.fallback is not None

    def get(self, language: LanguageTag, default: Any = None) -> Any:
        entry = self.translations.get(language)
        return entry.payload if entry is not None else default

    def documents(self) -> dict[LanguageTag, Document]:
        """Return the JSON-mode documents keyed by language."""
        return {
            language: entry.document
            for language, entry in self.translations.items()
            if isinstance(entry, JsonTranslation)
        }

    def to_dict(self) -> dict[str, Any]:
        """Return the result in the service's flat JSON shape.

        Languages map to documents or pair lists; metadata keys and
        ``fallbackInfo`` (when a fallback was used) sit alongside them.
        Language entries take precedence over extras of the same name.
        """
        data: dict[str, Any] = dict(self.extras)
        for language, entry in self.translations.items():
            match entry:
                case JsonTranslation(document=document):
                    data[language] = document
                case TextTranslation(pairs=pairs):
                    data[language] = [pair.to_dict() for pair in pairs]
        if self.warnings:
            data["warnings"] = [
                {"type": w.type, "message": w.message, "details": w.details} for w in self.warnings
            ]
        if self.namespace_info is not None:
            data["namespaceInfo"] = self.namespace_info.to_dict()
        if self.skipped is not None:
            data["skipped"] = self.skipped
        if self.fallback is not None:
            data["fallbackInfo"] = self.fallback.to_dict()
        return data


@dataclass(frozen=True, slots=True)
class SupportedLanguage:
    """A language the service can translate to."""

    code: LanguageTag
    name: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SupportedLanguage:
        """Build from a service entry, naming it from CLDR when unnamed."""
        code = str(data.get("code", ""))
        name = data.get("name") or language_display_name(code) or code
        return cls(code=code, name=str(name))
