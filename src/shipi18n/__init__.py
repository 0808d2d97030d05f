"""shipi18n - Python client for the Shipi18n translation API.

Sends localization content to the remote translation service and completes
the returned translations client-side: regional tags fall back to their base
language, and anything still missing falls back to the source content, with
a report of every substitution.

Public API:
    Shipi18n - Service client (translate_json, translate_text, translate_i18next,
        get_languages)
    ClientConfig - Immutable client configuration
    FallbackOptions - Fallback policy switches
    FallbackReport - Record of fallbacks applied to one response
    TranslationResult - Per-language entries plus metadata and report
    reconcile - Fallback reconciliation engine (usable without the client)

Exceptions:
    Shipi18nError - Classified failure with ``status_code`` and ``code``

Submodules:
    shipi18n.reconciliation - Dot-paths, missing keys, regional resolution, engine
    shipi18n.client - Configuration, transport, requests, results
    shipi18n.locale_utils - Language tag helpers
"""

from .client import ClientConfig, Shipi18n, TranslationResult
from .enums import ErrorCode, GroupByNamespace
from .errors import Shipi18nError
from .reconciliation import FallbackOptions, FallbackReport, reconcile

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("shipi18n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ClientConfig",
    "ErrorCode",
    "FallbackOptions",
    "FallbackReport",
    "GroupByNamespace",
    "Shipi18n",
    "Shipi18nError",
    "TranslationResult",
    "__version__",
    "reconcile",
]
