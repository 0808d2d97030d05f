"""Language tag utilities.

Centralizes the handling of BCP-47 style language tags used throughout the
codebase: recognizing a regional tag and finding its base language, and
converting tags for Babel when human-readable language names are needed.

Regional fallback splits on the first hyphen only and does not validate
tags against CLDR. Which tags are supported is decided by the service.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from shipi18n.constants import REGION_SEPARATOR

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "base_language",
    "get_babel_locale",
    "is_regional",
    "language_display_name",
    "normalize_locale",
]


def is_regional(tag: str) -> bool:
    """Return True when the tag carries a subtag after its base language.

    Example:
        >>> is_regional("pt-BR")
        True
        >>> is_regional("pt")
        False
    """
    return REGION_SEPARATOR in tag


def base_language(tag: str) -> str:
    """Return the base language subtag of a language tag.

    Tags without a hyphen are their own base.

    Example:
        >>> base_language("pt-BR")
        'pt'
        >>> base_language("zh-Hant-TW")
        'zh'
        >>> base_language("es")
        'es'
    """
    return tag.split(REGION_SEPARATOR)[0]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace(REGION_SEPARATOR, "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def language_display_name(tag: str, display_locale: str = "en") -> str | None:
    """Return the CLDR display name of a language tag.

    Used to name languages the service lists without a display name.

    Args:
        tag: Language tag to describe (e.g., "pt-BR")
        display_locale: Locale the name is written in (default: English)

    Returns:
        Display name such as "Portuguese (Brazil)", or None when Babel does
        not recognize either tag.

    Example:
        >>> language_display_name("de")
        'German'
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(tag)
        display = get_babel_locale(display_locale)
    except (UnknownLocaleError, ValueError, TypeError):
        return None
    return locale.get_display_name(display)
