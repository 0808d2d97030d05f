"""Fallback options and the fallback report.

Components:
    FallbackOptions - Immutable switches controlling the fallback policy
    FallbackReport - Immutable record of every fallback applied in one pass

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from shipi18n.reconciliation.types import DotPath, LanguageTag

__all__ = ["FallbackOptions", "FallbackReport"]


@dataclass(frozen=True, slots=True)
class FallbackOptions:
    """Fallback policy for missing translations.

    Attributes:
        fallback_to_source: Substitute source content when a translation or
            a key is missing (default: True).
        regional_fallback: Fill a regional tag (``pt-BR``) from its base
            language (``pt``) before falling back to source (default: True).
        fallback_language: Accepted as the name of the last-resort language.
            Substituted content is always the source document regardless of
            this value; it is carried for callers that inspect it.

    Example:
        >>> options = FallbackOptions(regional_fallback=False)
        >>> client.translate_json(content, "en", ["pt-BR"], fallback=options)
    """

    fallback_to_source: bool = True
    regional_fallback: bool = True
    fallback_language: LanguageTag | None = None

    def effective_fallback_language(self, source_language: LanguageTag) -> LanguageTag:
        """Return the declared last-resort language (override or source)."""
        return self.fallback_language or source_language


@dataclass(frozen=True, slots=True)
class FallbackReport:
    """Record of every fallback substitution applied during reconciliation.

    Only attached to a result when ``used`` is True.

    Attributes:
        used: True iff any fallback of any kind was applied
        languages_fallback_to_source: Tags whose whole translation was
            replaced by source content, in processing order
        regional_fallbacks: Regional tag -> base tag it was filled from
        keys_fallback: Tag -> dot-paths detected missing and filled from a
            fallback source (regional or source)
    """

    used: bool = False
    languages_fallback_to_source: tuple[LanguageTag, ...] = ()
    regional_fallbacks: Mapping[LanguageTag, LanguageTag] = field(default_factory=dict)
    keys_fallback: Mapping[LanguageTag, tuple[DotPath, ...]] = field(default_factory=dict)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        key_counts = {lang: len(keys) for lang, keys in self.keys_fallback.items()}
        return (
            f"FallbackReport(used={self.used}, "
            f"to_source={list(self.languages_fallback_to_source)}, "
            f"regional={dict(self.regional_fallbacks)}, "
            f"keys={key_counts})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the report in the service's camelCase JSON shape."""
        return {
            "used": self.used,
            "languagesFallbackToSource": list(self.languages_fallback_to_source),
            "regionalFallbacks": dict(self.regional_fallbacks),
            "keysFallback": {lang: list(keys) for lang, keys in self.keys_fallback.items()},
        }
