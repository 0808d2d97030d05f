"""Type aliases for the reconciliation domain.

Provides semantic type aliases used throughout the reconciliation package
and by user code when annotating documents and translation maps.

Python 3.13+.
"""

from typing import Any

__all__ = [
    "Document",
    "DotPath",
    "LanguageTag",
    "TranslationMap",
]

type LanguageTag = str
"""Language tag, optionally region-qualified (e.g., 'es', 'pt-BR')."""

type DotPath = str
"""Dot-delimited key path into a nested document (e.g., 'common.greeting')."""

type Document = dict[str, Any]
"""Nested mapping of string keys to scalars, lists or further documents."""

type TranslationMap = dict[LanguageTag, Any]
"""Per-language payload decoded from a translate response (sparse)."""
