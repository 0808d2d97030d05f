"""Fallback reconciliation of translate responses.

Provides the client-side engine that completes a sparse per-language
translation map: dot-path access, missing-key detection, regional language
resolution, and the reconciliation pass with its fallback report.

Submodules:
    types     - PEP 695 type aliases (Document, DotPath, LanguageTag, TranslationMap)
    paths     - get_path / set_path over nested documents
    missing   - find_missing_keys
    regional  - resolve_regional_languages, RegionalResolution
    report    - FallbackOptions, FallbackReport
    engine    - reconcile, apply_fallbacks

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from shipi18n.reconciliation.engine import apply_fallbacks, reconcile
from shipi18n.reconciliation.missing import find_missing_keys
from shipi18n.reconciliation.paths import get_path, set_path
from shipi18n.reconciliation.regional import RegionalResolution, resolve_regional_languages
from shipi18n.reconciliation.report import FallbackOptions, FallbackReport
from shipi18n.reconciliation.types import Document, DotPath, LanguageTag, TranslationMap

__all__ = [
    # Engine
    "reconcile",
    "apply_fallbacks",
    # Building blocks
    "find_missing_keys",
    "get_path",
    "set_path",
    "resolve_regional_languages",
    "RegionalResolution",
    # Options and report
    "FallbackOptions",
    "FallbackReport",
    # Type aliases
    "Document",
    "DotPath",
    "LanguageTag",
    "TranslationMap",
]
