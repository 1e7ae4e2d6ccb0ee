"""Tests for configuration and credentials."""

import json
import time
from pathlib import Path

import pytest

from tdma_client import Credentials, TDMAConfig


class TestTDMAConfig:
    """Tests for TDMAConfig."""

    def test_defaults(self) -> None:
        config = TDMAConfig()

        assert config.api_base_url == "https://api.tdameritrade.com/v1/"
        assert config.accounts_url == "https://api.tdameritrade.com/v1/accounts/"
        assert config.timeout == 30.0

    def test_trailing_slash_normalized(self) -> None:
        assert TDMAConfig(base_url="http://x/v1/").api_base_url == "http://x/v1/"
        assert TDMAConfig(base_url="http://x/v1").api_base_url == "http://x/v1/"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TDMA_BASE_URL", "http://sandbox/v1")
        monkeypatch.setenv("TDMA_TIMEOUT", "12.5")

        config = TDMAConfig.from_env()

        assert config.base_url == "http://sandbox/v1"
        assert config.timeout == 12.5

    def test_from_env_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TDMA_TIMEOUT", "soon")

        with pytest.raises(ValueError, match="Invalid TDMA_TIMEOUT"):
            TDMAConfig.from_env()

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"base_url": "http://file/v1", "timeout": 3}))

        config = TDMAConfig.from_file(path)

        assert config.base_url == "http://file/v1"
        assert config.timeout == 3.0

    def test_from_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            TDMAConfig.from_file(tmp_path / "missing.json")

    def test_load_falls_back_to_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("TDMA_BASE_URL", raising=False)
        monkeypatch.delenv("TDMA_TIMEOUT", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert TDMAConfig.load() == TDMAConfig()


class TestCredentials:
    """Tests for Credentials."""

    def test_auth_headers(self) -> None:
        assert Credentials(access_token="abc").auth_headers() == {
            "Authorization": "Bearer abc"
        }

    def test_is_expired(self) -> None:
        assert not Credentials(access_token="a").is_expired
        assert Credentials(access_token="a", epoch_sec_token_expiration=1).is_expired
        future = int(time.time()) + 3600
        assert not Credentials(access_token="a", epoch_sec_token_expiration=future).is_expired

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TDMA_ACCESS_TOKEN", "tok")
        monkeypatch.setenv("TDMA_CLIENT_ID", "APP@AMER.OAUTHAP")

        creds = Credentials.from_env()

        assert creds.access_token == "tok"
        assert creds.client_id == "APP@AMER.OAUTHAP"

    def test_from_env_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TDMA_ACCESS_TOKEN", raising=False)

        with pytest.raises(ValueError, match="TDMA_ACCESS_TOKEN"):
            Credentials.from_env()

    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "credentials.json"
        creds = Credentials(access_token="a", refresh_token="r", epoch_sec_token_expiration=5)

        creds.save(path)

        assert Credentials.from_file(path) == creds
        assert path.stat().st_mode & 0o777 == 0o600

    def test_from_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Credentials.from_file(tmp_path / "nope.json")
