"""Unit tests for CLI configuration loading."""

import pytest

from freshbooks_classic.auth import APIToken, OAuthToken
from freshbooks_classic.config import ENV_KEYS, build_credential, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and .env file."""
    for env_name in ENV_KEYS.values():
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestBuildCredential:
    """Tests for build_credential()."""

    def test_api_token(self):
        assert build_credential({"api_token": "abc"}) == APIToken("abc")

    def test_oauth(self):
        credential = build_credential({
            "consumer_key": "acme",
            "consumer_secret": "cs",
            "oauth_token": "t",
            "oauth_token_secret": "ts",
        })
        assert credential == OAuthToken("acme", "cs", "t", "ts")

    def test_api_token_wins(self):
        credential = build_credential({"api_token": "abc", "consumer_key": "acme"})
        assert isinstance(credential, APIToken)

    def test_incomplete_oauth(self):
        with pytest.raises(ValueError) as exc_info:
            build_credential({"consumer_key": "acme", "oauth_token": "t"})

        assert "FRESHBOOKS_OAUTH_CONSUMER_SECRET" in str(exc_info.value)

    def test_nothing_configured(self):
        assert build_credential({}) is None


class TestLoadConfig:
    """Tests for load_config()."""

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FRESHBOOKS_ACCOUNT", "acme")
        monkeypatch.setenv("FRESHBOOKS_API_TOKEN", "abc")
        monkeypatch.setenv("FRESHBOOKS_PER_PAGE", "50")

        config = load_config(tmp_path / "missing.yaml")

        assert config.account == "acme"
        assert config.credential == APIToken("abc")
        assert config.per_page == 50

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("account: filecorp\napi_token: fromfile\n")

        config = load_config(path)

        assert config.account == "filecorp"
        assert config.credential == APIToken("fromfile")
        assert config.per_page == 25

    def test_environment_overrides_file(self, monkeypatch, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("account: filecorp\napi_token: fromfile\n")
        monkeypatch.setenv("FRESHBOOKS_ACCOUNT", "envcorp")

        config = load_config(path)

        assert config.account == "envcorp"
        assert config.credential == APIToken("fromfile")

    def test_missing_account(self, tmp_path):
        with pytest.raises(ValueError) as exc_info:
            load_config(tmp_path / "missing.yaml")

        assert "FRESHBOOKS_ACCOUNT" in str(exc_info.value)

    def test_bad_per_page(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FRESHBOOKS_ACCOUNT", "acme")
        monkeypatch.setenv("FRESHBOOKS_PER_PAGE", "lots")

        with pytest.raises(ValueError):
            load_config(tmp_path / "missing.yaml")
