"""Fallback reconciliation of translate responses.

Fills the gaps in a sparse per-language translation map returned by the
service, using a layered policy:

1. Regional fallback: a regional tag (``pt-BR``) missing entirely, or
   missing individual keys, takes content from its base language (``pt``).
2. Source fallback: anything still missing takes the source document's
   content.

Every substitution is recorded in a FallbackReport, which is returned only
when at least one fallback was applied.

Processing is per language and order-insensitive: base-language content is
always read from a snapshot taken before the pass, so nothing filled during
the pass feeds another language. Every document copied into the result is a
deep copy, so no two languages (and no caller-owned source document) share
mutable structure.

The engine never raises; missing data is either filled or left absent.

Python 3.13+.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from shipi18n.reconciliation.missing import find_missing_keys
from shipi18n.reconciliation.paths import get_path, set_path
from shipi18n.reconciliation.report import FallbackOptions, FallbackReport
from shipi18n.reconciliation.types import (
    Document,
    DotPath,
    LanguageTag,
    TranslationMap,
)

__all__ = ["apply_fallbacks", "reconcile"]

logger = logging.getLogger(__name__)

# Distinguishes an absent path from an explicit None value.
_ABSENT = object()


def _snapshot_bases(
    raw_result: Mapping[LanguageTag, Any],
    regional_map: Mapping[LanguageTag, LanguageTag],
) -> dict[LanguageTag, Document]:
    """Deep-copy every non-empty base-language document named by the map."""
    snapshot: dict[LanguageTag, Document] = {}
    for base in set(regional_map.values()):
        document = raw_result.get(base)
        if isinstance(document, Mapping) and document:
            snapshot[base] = copy.deepcopy(dict(document))
    return snapshot


def _fill_missing_keys(
    translation: MutableMapping[str, Any],
    missing_keys: Iterable[DotPath],
    source_document: Mapping[str, Any],
    base_document: Mapping[str, Any] | None,
) -> None:
    """Set each missing path from the base document, else from source."""
    for key in missing_keys:
        if base_document is not None:
            base_value = get_path(base_document, key, _ABSENT)
            if base_value is not _ABSENT:
                set_path(translation, key, copy.deepcopy(base_value))
                continue

        source_value = get_path(source_document, key, _ABSENT)
        if source_value is not _ABSENT:
            set_path(translation, key, copy.deepcopy(source_value))


def reconcile(
    raw_result: TranslationMap,
    source_document: Mapping[str, Any],
    target_languages: Iterable[LanguageTag],
    *,
    source_language: LanguageTag,
    fallback_to_source: bool = True,
    regional_fallback: bool = True,
    fallback_language: LanguageTag | None = None,
    regional_map: Mapping[LanguageTag, LanguageTag] | None = None,
) -> tuple[TranslationMap, FallbackReport | None]:
    """Fill missing languages and keys in a translate response.

    For each requested language, one of three cases applies:

    - Wholly absent or empty: copy the base-language document when regional
      fallback applies and the base is non-empty; otherwise copy the source
      document when source fallback is enabled; otherwise leave it as is.
    - Present with missing keys (source fallback enabled, document-shaped):
      fill each missing dot-path from the base document when it defines the
      path, else from the source document when it does.
    - Complete: untouched.

    ``raw_result`` is updated in place and returned.

    Args:
        raw_result: Per-language documents decoded from the response
        source_document: Content in the source language
        target_languages: Languages the caller asked for (not the processed
            superset sent to the service)
        source_language: Language of ``source_document``
        fallback_to_source: Substitute source content for missing data
        regional_fallback: Use base-language content for regional tags
        fallback_language: Declared last-resort language. Substituted content
            is the source document whatever this names.
        regional_map: Regional tag -> base tag, from regional resolution

    Returns:
        Tuple of (translations, report). ``report`` is None when no fallback
        was applied.

    Example:
        >>> raw = {"es": {"greeting": "Hola"}}
        >>> translations, report = reconcile(
        ...     raw, {"greeting": "Hello", "farewell": "Bye"}, ["es"], source_language="en"
        ... )
        >>> translations["es"]
        {'greeting': 'Hola', 'farewell': 'Bye'}
        >>> dict(report.keys_fallback)
        {'es': ('farewell',)}
    """
    regional_map = regional_map or {}
    if fallback_language and fallback_language != source_language:
        logger.debug(
            "fallback_language=%s declared; substituting %s source content",
            fallback_language,
            source_language,
        )

    bases = _snapshot_bases(raw_result, regional_map) if regional_fallback else {}

    used = False
    to_source: list[LanguageTag] = []
    regional_fallbacks: dict[LanguageTag, LanguageTag] = {}
    keys_fallback: dict[LanguageTag, tuple[DotPath, ...]] = {}

    for lang in target_languages:
        translation = raw_result.get(lang)
        base = regional_map.get(lang) if regional_fallback else None
        base_document = bases.get(base) if base is not None else None

        if not translation:
            if base_document is not None:
                raw_result[lang] = copy.deepcopy(base_document)
                regional_fallbacks[lang] = base
                used = True
                logger.debug("Language %s filled from base language %s", lang, base)
                continue

            if fallback_to_source:
                raw_result[lang] = copy.deepcopy(dict(source_document))
                to_source.append(lang)
                used = True
                logger.debug("Language %s filled from source %s", lang, source_language)
            continue

        if fallback_to_source and isinstance(translation, MutableMapping):
            missing_keys = find_missing_keys(source_document, translation)
            if not missing_keys:
                continue

            used = True
            keys_fallback[lang] = tuple(missing_keys)
            _fill_missing_keys(translation, missing_keys, source_document, base_document)
            logger.debug("Language %s: %d missing keys filled", lang, len(missing_keys))

    if not used:
        return raw_result, None

    report = FallbackReport(
        used=True,
        languages_fallback_to_source=tuple(to_source),
        regional_fallbacks=regional_fallbacks,
        keys_fallback=keys_fallback,
    )
    logger.info(
        "Fallbacks applied: %d to source, %d regional, %d with missing keys",
        len(to_source),
        len(regional_fallbacks),
        len(keys_fallback),
    )
    return raw_result, report


def apply_fallbacks(
    raw_result: TranslationMap,
    source_document: Mapping[str, Any],
    target_languages: Iterable[LanguageTag],
    source_language: LanguageTag,
    options: FallbackOptions,
    regional_map: Mapping[LanguageTag, LanguageTag] | None = None,
) -> tuple[TranslationMap, FallbackReport | None]:
    """Run reconcile() with the switches taken from a FallbackOptions."""
    return reconcile(
        raw_result,
        source_document,
        target_languages,
        source_language=source_language,
        fallback_to_source=options.fallback_to_source,
        regional_fallback=options.regional_fallback,
        fallback_language=options.effective_fallback_language(source_language),
        regional_map=regional_map,
    )
