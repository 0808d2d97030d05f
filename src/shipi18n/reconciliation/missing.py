"""Missing-key detection between a source document and a translation.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from shipi18n.constants import PATH_SEPARATOR
from shipi18n.reconciliation.types import DotPath

__all__ = ["find_missing_keys", "is_empty_value"]


def is_empty_value(value: Any) -> bool:
    """Return True for values that count as untranslated: None or ''."""
    return value is None or (isinstance(value, str) and not value)


def find_missing_keys(
    source: Mapping[str, Any],
    candidate: Mapping[str, Any],
    prefix: str = "",
) -> list[DotPath]:
    """List dot-paths present in ``source`` but absent or empty in ``candidate``.

    Walks ``source`` in its key order. A key whose candidate value is
    absent, ``None`` or ``""`` is reported and not descended into, so a
    wholly missing branch is reported once, by its head. When both values
    are mappings the walk recurses with the extended prefix. Scalars and
    lists present in the candidate are never missing; lists are not
    compared element-wise.

    Args:
        source: Document in the source language
        candidate: Translated document to check
        prefix: Dot-path of ``source`` within the enclosing document

    Returns:
        Flat list of missing dot-paths, in source order

    Example:
        >>> find_missing_keys({"g": {"x": "1", "y": "2"}}, {"g": {"x": "uno"}})
        ['g.y']
    """
    missing: list[DotPath] = []

    for key, source_value in source.items():
        full_key = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key
        candidate_value = candidate.get(key)

        if is_empty_value(candidate_value):
            missing.append(full_key)
        elif isinstance(source_value, Mapping) and isinstance(candidate_value, Mapping):
            missing.extend(find_missing_keys(source_value, candidate_value, full_key))

    return missing
