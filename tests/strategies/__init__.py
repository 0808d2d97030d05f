"""Hypothesis strategies for shipi18n property-based testing.

Usage:
    from tests.strategies import documents, language_tag_lists
"""

from .documents import (
    documents,
    keys,
    language_tag_lists,
    leaves,
    translation_with_holes,
)

__all__ = [
    "documents",
    "keys",
    "language_tag_lists",
    "leaves",
    "translation_with_holes",
]
