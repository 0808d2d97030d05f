"""Tests for the result model and response splitting.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from shipi18n import FallbackReport, TranslationResult
from shipi18n.client.results import (
    JsonTranslation,
    NamespaceInfo,
    SupportedLanguage,
    TextTranslation,
    TranslationPair,
    TranslationWarning,
    split_response,
)
from shipi18n.enums import OutputFormat


class TestSplitResponse:
    def test_languages_metadata_and_extras(self) -> None:
        payload = {
            "es": {"greeting": "Hola"},
            "fr": [{"original": "Hello", "translated": "Bonjour"}],
            "de": None,
            "warnings": [],
            "skipped": {"count": 0, "keys": []},
            "requestId": "abc123",
        }
        languages, metadata, extras = split_response(payload)
        assert languages == {
            "es": {"greeting": "Hola"},
            "fr": [{"original": "Hello", "translated": "Bonjour"}],
        }
        assert metadata == {"warnings": [], "skipped": {"count": 0, "keys": []}}
        assert extras == {"requestId": "abc123"}

    def test_service_fallback_info_is_metadata(self) -> None:
        """A fallbackInfo object from the service is never taken as a language."""
        languages, metadata, _ = split_response({"fallbackInfo": {"used": False}})
        assert languages == {}
        assert metadata == {"fallbackInfo": {"used": False}}

    def test_empty_payload(self) -> None:
        assert split_response({}) == ({}, {}, {})

    def test_scalar_under_target_tag_is_language(self) -> None:
        """A requested tag stays a language even when its value is malformed."""
        languages, _, extras = split_response(
            {"es": "oops", "fr": {"a": "b"}, "build": "42"}, ("es", "fr")
        )
        assert languages == {"es": "oops", "fr": {"a": "b"}}
        assert extras == {"build": "42"}

    def test_scalar_without_targets_is_extra(self) -> None:
        languages, _, extras = split_response({"es": "oops"})
        assert languages == {}
        assert extras == {"es": "oops"}

    def test_null_target_dropped(self) -> None:
        assert split_response({"es": None}, ("es",)) == ({}, {}, {})


class TestEntries:
    def test_json_entry(self) -> None:
        entry = JsonTranslation(language="es", document={"a": "b"})
        assert entry.kind is OutputFormat.JSON
        assert entry.payload == {"a": "b"}

    def test_text_entry(self) -> None:
        entry = TextTranslation(
            language="es",
            pairs=(TranslationPair("Hello", "Hola"), TranslationPair("Bye", "Adiós")),
        )
        assert entry.kind is OutputFormat.TEXT
        assert entry.texts == ["Hola", "Adiós"]
        assert entry.payload == list(entry.pairs)

    def test_pair_from_partial_dict(self) -> None:
        assert TranslationPair.from_dict({"translated": "Hola"}) == TranslationPair("", "Hola")


class TestMetadataParsing:
    def test_warning(self) -> None:
        warning = TranslationWarning.from_dict(
            {"type": "placeholder", "message": "Placeholder changed", "details": {"key": "a"}}
        )
        assert warning == TranslationWarning("placeholder", "Placeholder changed", {"key": "a"})

    def test_namespace_info(self) -> None:
        info = NamespaceInfo.from_dict(
            {
                "detected": True,
                "count": 2,
                "namespaces": [
                    {"name": "common", "keyCount": 4},
                    {"name": "auth", "keyCount": 2},
                    "ignored",
                ],
            }
        )
        assert info.detected is True
        assert info.count == 2
        assert [(n.name, n.key_count) for n in info.namespaces] == [("common", 4), ("auth", 2)]
        assert info.user_assigned is None

    def test_user_assigned_namespace(self) -> None:
        info = NamespaceInfo.from_dict(
            {"detected": True, "userAssigned": True, "namespace": "common"}
        )
        assert info.user_assigned is True
        assert info.namespace == "common"
        assert info.namespaces == ()


class TestTranslationResult:
    def _result(self, fallback: FallbackReport | None = None) -> TranslationResult:
        return TranslationResult.from_languages(
            {"es": {"greeting": "Hola"}, "fr": [{"original": "Hi", "translated": "Salut"}]},
            {
                "warnings": [{"type": "length", "message": "Long"}, "bad"],
                "namespaceInfo": {"detected": False},
                "skipped": {"count": 1, "keys": ["brand"]},
            },
            {"requestId": "r1"},
            fallback,
        )

    def test_mapping_access(self) -> None:
        result = self._result()
        assert result["es"] == {"greeting": "Hola"}
        assert result["fr"] == [TranslationPair("Hi", "Salut")]
        assert "es" in result
        assert "de" not in result
        assert list(result) == ["es", "fr"]
        assert len(result) == 2
        assert result.languages == ("es", "fr")
        assert result.get("de") is None
        assert result.get("de", {}) == {}

    def test_missing_language_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            _ = self._result()["de"]

    def test_documents_only_json(self) -> None:
        assert self._result().documents() == {"es": {"greeting": "Hola"}}

    def test_metadata_fields(self) -> None:
        result = self._result()
        assert result.warnings == (TranslationWarning("length", "Long"),)
        assert result.namespace_info == NamespaceInfo(detected=False)
        assert result.skipped == {"count": 1, "keys": ["brand"]}
        assert result.extras == {"requestId": "r1"}

    def test_unused_report_dropped(self) -> None:
        result = self._result(FallbackReport(used=False))
        assert result.fallback is None
        assert result.fallback_used is False

    def test_to_dict_flat_shape(self) -> None:
        report = FallbackReport(used=True, languages_fallback_to_source=("de",))
        data = self._result(report).to_dict()
        assert data["es"] == {"greeting": "Hola"}
        assert data["fr"] == [{"original": "Hi", "translated": "Salut"}]
        assert data["requestId"] == "r1"
        assert data["warnings"] == [{"type": "length", "message": "Long", "details": None}]
        assert data["skipped"] == {"count": 1, "keys": ["brand"]}
        assert data["namespaceInfo"] == {"detected": False}
        assert data["fallbackInfo"] == {
            "used": True,
            "languagesFallbackToSource": ["de"],
            "regionalFallbacks": {},
            "keysFallback": {},
        }

    def test_client_report_replaces_service_fallback_info(self) -> None:
        result = TranslationResult.from_languages(
            {"es": {}},
            {"fallbackInfo": {"used": False}},
            None,
            FallbackReport(used=True, regional_fallbacks={"pt-BR": "pt"}),
        )
        assert result.to_dict()["fallbackInfo"]["regionalFallbacks"] == {"pt-BR": "pt"}

    def test_malformed_language_value_kept_verbatim(self) -> None:
        result = TranslationResult.from_languages({"es": "oops", "fr": {"a": "b"}})
        assert "es" not in result
        assert result.extras == {"es": "oops"}
        assert result.to_dict() == {"es": "oops", "fr": {"a": "b"}}

    def test_language_entry_wins_over_extra(self) -> None:
        result = TranslationResult.from_languages(
            {"es": {"greeting": "Hola"}}, extras={"es": "stale"}
        )
        assert result.to_dict()["es"] == {"greeting": "Hola"}
        assert result["es"] == result.to_dict()["es"]

    def test_service_fallback_info_kept_without_report(self) -> None:
        result = TranslationResult.from_languages({}, {"fallbackInfo": {"used": False}})
        assert result.fallback is None
        assert result.to_dict() == {"fallbackInfo": {"used": False}}


class TestSupportedLanguage:
    def test_named_entry(self) -> None:
        assert SupportedLanguage.from_dict({"code": "es", "name": "Español"}) == (
            SupportedLanguage("es", "Español")
        )

    def test_unnamed_entry_uses_cldr_name(self) -> None:
        assert SupportedLanguage.from_dict({"code": "pt-BR"}).name == "Portuguese (Brazil)"

    def test_unknown_code_named_by_code(self) -> None:
        assert SupportedLanguage.from_dict({"code": "qq"}).name == "qq"
