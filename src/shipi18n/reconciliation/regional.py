"""Regional language resolution.

Decides which language tags must actually be requested from the service so
that every regional tag (``pt-BR``) has its base language (``pt``) available
for fallback, and records the regional-to-base mapping used later by the
reconciliation engine.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from shipi18n.locale_utils import base_language, is_regional
from shipi18n.reconciliation.types import LanguageTag

__all__ = ["RegionalResolution", "resolve_regional_languages"]


@dataclass(frozen=True, slots=True)
class RegionalResolution:
    """Outcome of regional language resolution.

    Attributes:
        processed_targets: Tags to send to the service, each exactly once:
            the requested tags in order, with a synthesized base tag placed
            before the first regional tag that needs it.
        regional_map: Regional tag -> base tag, for every requested regional
            tag when regional fallback is enabled. Empty otherwise.
    """

    processed_targets: tuple[LanguageTag, ...]
    regional_map: Mapping[LanguageTag, LanguageTag] = field(default_factory=dict)


def resolve_regional_languages(
    target_languages: Iterable[LanguageTag],
    regional_fallback: bool,
) -> RegionalResolution:
    """Compute the tags to request and the regional fallback map.

    A base tag is synthesized only when regional fallback is enabled and the
    caller did not request that base explicitly; an explicit request keeps
    its own position in the list. Deduplication is by exact tag.

    Args:
        target_languages: Requested target tags, in caller order
        regional_fallback: Whether regional tags should fall back to their base

    Returns:
        RegionalResolution with processed targets and regional map

    Example:
        >>> res = resolve_regional_languages(["es", "pt-BR", "zh-TW"], True)
        >>> res.processed_targets
        ('es', 'pt', 'pt-BR', 'zh', 'zh-TW')
        >>> dict(res.regional_map)
        {'pt-BR': 'pt', 'zh-TW': 'zh'}
    """
    requested = list(target_languages)
    explicit = set(requested)
    regional_map: dict[LanguageTag, LanguageTag] = {}
    # dict preserves insertion order and gives O(1) membership
    processed: dict[LanguageTag, None] = {}

    for tag in requested:
        if regional_fallback and is_regional(tag):
            base = base_language(tag)
            regional_map[tag] = base
            if base not in explicit:
                processed.setdefault(base, None)
        processed.setdefault(tag, None)

    return RegionalResolution(
        processed_targets=tuple(processed),
        regional_map=regional_map,
    )
