"""Dot-path access into nested documents.

Lists are opaque leaves: they are never descended into, so a path segment
can only name a key of a mapping.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from shipi18n.constants import PATH_SEPARATOR
from shipi18n.reconciliation.types import DotPath

__all__ = ["get_path", "set_path"]


def get_path(document: Mapping[str, Any], path: DotPath, default: Any = None) -> Any:
    """Return the value stored at ``path``, or ``default`` when absent.

    Absence includes a missing intermediate key and an intermediate value that
    is not a mapping. Never raises. Pass a sentinel as ``default`` to tell an
    absent path from an explicit ``None`` value.

    Example:
        >>> get_path({"common": {"greeting": "Hola"}}, "common.greeting")
        'Hola'
        >>> get_path({"common": "flat"}, "common.greeting") is None
        True
    """
    current: Any = document
    for key in path.split(PATH_SEPARATOR):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


def set_path(document: MutableMapping[str, Any], path: DotPath, value: Any) -> None:
    """Assign ``value`` at ``path``, creating intermediate documents.

    An intermediate position holding anything other than a mapping (a
    string, a list, ``None``) is replaced by an empty document. Mutates
    ``document`` in place.

    Example:
        >>> doc = {"common": "flat"}
        >>> set_path(doc, "common.greeting", "Hola")
        >>> doc
        {'common': {'greeting': 'Hola'}}
    """
    *parents, leaf = path.split(PATH_SEPARATOR)
    current = document
    for key in parents:
        child = current.get(key)
        if not isinstance(child, MutableMapping):
            child = {}
            current[key] = child
        current = child
    current[leaf] = value
