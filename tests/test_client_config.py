"""Tests for ClientConfig construction, validation and environment loading.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses

import pytest

from shipi18n import ClientConfig, ErrorCode, Shipi18n, Shipi18nError
from shipi18n.constants import DEFAULT_BASE_URL


class TestClientConfig:
    def test_missing_api_key_raises(self) -> None:
        with pytest.raises(Shipi18nError, match="API key is required") as exc_info:
            ClientConfig(api_key="")
        assert exc_info.value.code == ErrorCode.MISSING_API_KEY
        assert exc_info.value.status_code == 400

    def test_defaults(self) -> None:
        config = ClientConfig(api_key="test-key")
        assert config.base_url == "https://ydjkwckq3f.execute-api.us-east-1.amazonaws.com"
        assert config.url_for("/api/translate") == (
            "https://ydjkwckq3f.execute-api.us-east-1.amazonaws.com/api/translate"
        )
        assert config.timeout == 30.0
        assert config.max_retries == 0

    def test_custom_values(self) -> None:
        config = ClientConfig(api_key="k", base_url="https://custom.api.com", timeout=60.0)
        assert config.base_url == "https://custom.api.com"
        assert config.timeout == 60.0

    def test_empty_base_url_selects_default(self) -> None:
        assert ClientConfig(api_key="k", base_url="").base_url == DEFAULT_BASE_URL

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout_rejected(self, timeout: float) -> None:
        with pytest.raises(ValueError, match="timeout must be positive"):
            ClientConfig(api_key="k", timeout=timeout)

    def test_negative_retries_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_retries"):
            ClientConfig(api_key="k", max_retries=-1)

    def test_immutable(self) -> None:
        config = ClientConfig(api_key="k")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "other"  # type: ignore[misc]

    def test_repr_masks_api_key(self) -> None:
        assert "secret" not in repr(ClientConfig(api_key="secret"))

    @pytest.mark.parametrize(
        ("base_url", "expected"),
        [
            ("https://api.example.test", "https://api.example.test/api/translate"),
            ("https://api.example.test/", "https://api.example.test/api/translate"),
        ],
    )
    def test_url_for(self, base_url: str, expected: str) -> None:
        assert ClientConfig(api_key="k", base_url=base_url).url_for("/api/translate") == expected


class TestFromEnv:
    def test_reads_environment(self) -> None:
        env = {
            "SHIPI18N_API_KEY": "env-key",
            "SHIPI18N_BASE_URL": "https://env.example.test",
            "SHIPI18N_TIMEOUT": "12.5",
        }
        config = ClientConfig.from_env(env)
        assert config.api_key == "env-key"
        assert config.base_url == "https://env.example.test"
        assert config.timeout == 12.5

    def test_overrides_win(self) -> None:
        config = ClientConfig.from_env({"SHIPI18N_API_KEY": "env-key"}, api_key="explicit")
        assert config.api_key == "explicit"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(Shipi18nError) as exc_info:
            ClientConfig.from_env({})
        assert exc_info.value.code == ErrorCode.MISSING_API_KEY

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHIPI18N_API_KEY", "os-key")
        monkeypatch.delenv("SHIPI18N_BASE_URL", raising=False)
        monkeypatch.delenv("SHIPI18N_TIMEOUT", raising=False)
        assert ClientConfig.from_env().api_key == "os-key"


class TestClientConstruction:
    def test_from_api_key(self) -> None:
        client = Shipi18n.from_api_key("test-key", timeout=5.0)
        try:
            assert client.config.timeout == 5.0
        finally:
            client.close()

    def test_from_api_key_requires_key(self) -> None:
        with pytest.raises(Shipi18nError, match="API key is required"):
            Shipi18n.from_api_key("")
