"""Tests for configuration loading and client construction."""

import pytest

from api.client import ApiClient
from app.bootstrap import build_client
from app.config import DEFAULT_API_URL, ApiConfig, ConfigError


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so teardown also removes values that load_dotenv writes
    for name in ("CMC_PRO_API_KEY", "CMC_API_URL", "CMC_TIMEOUT_SECONDS"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestApiConfig:

    def test_from_env(self, clean_env):
        clean_env.setenv("CMC_PRO_API_KEY", "abc")
        config = ApiConfig.from_env(dotenv=False)
        assert config.api_key == "abc"
        assert config.api_url == DEFAULT_API_URL
        assert config.timeout is None

    def test_overrides(self, clean_env):
        clean_env.setenv("CMC_PRO_API_KEY", "abc")
        clean_env.setenv("CMC_API_URL", "https://sandbox-api.coinmarketcap.com")
        clean_env.setenv("CMC_TIMEOUT_SECONDS", "12.5")
        config = ApiConfig.from_env(dotenv=False)
        assert config.api_url == "https://sandbox-api.coinmarketcap.com"
        assert config.timeout == 12.5

    def test_missing_key(self, clean_env):
        with pytest.raises(ConfigError, match="CMC_PRO_API_KEY"):
            ApiConfig.from_env(dotenv=False)

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_bad_timeout(self, clean_env, value):
        clean_env.setenv("CMC_PRO_API_KEY", "abc")
        clean_env.setenv("CMC_TIMEOUT_SECONDS", value)
        with pytest.raises(ConfigError, match="CMC_TIMEOUT_SECONDS"):
            ApiConfig.from_env(dotenv=False)

    def test_dotenv_file_is_read(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("CMC_PRO_API_KEY=from-dotenv\n", encoding="utf-8")
        clean_env.chdir(tmp_path)
        config = ApiConfig.from_env()
        assert config.api_key == "from-dotenv"

    def test_frozen(self):
        config = ApiConfig(api_key="abc")
        with pytest.raises(Exception):
            config.api_key = "other"


class TestClientConstruction:

    def test_from_config(self):
        client = ApiClient.from_config(ApiConfig(api_key="abc", api_url="https://example.test/", timeout=3))
        assert client.api_key == "abc"
        assert client.http.base_url == "https://example.test"
        assert client.http.timeout == 3
        client.close()

    def test_build_client_with_config(self):
        client = build_client(ApiConfig(api_key="abc"))
        assert isinstance(client, ApiClient)
        assert client.cryptocurrency.client is client
        client.close()

    def test_build_client_from_env(self, clean_env):
        clean_env.setenv("CMC_PRO_API_KEY", "env-key")
        with build_client() as client:
            assert client.api_key == "env-key"

    def test_context_manager_closes_session(self, client, mock_session):
        with client:
            pass
        mock_session.close.assert_called_once()
