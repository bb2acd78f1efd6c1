"""Tests for configuration loading."""

import pytest

from ecosystem_deploy.api.exceptions import ConfigError
from ecosystem_deploy.constants import DEFAULT_NETWORK, ENV_ACCOUNT, ENV_NETWORK, PROJECT_CONFIG_FILE
from ecosystem_deploy.services.config_service import ConfigService


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("ECOSYSTEM_DEPLOY_NETWORK", "ECOSYSTEM_DEPLOY_ACCOUNT",
                "ECOSYSTEM_DEPLOY_MANIFESTS_DIR", "ECOSYSTEM_DEPLOY_REGISTRY"):
        monkeypatch.delenv(var, raising=False)


class TestConfigService:

    def test_defaults_without_file(self, tmp_path):
        config = ConfigService(tmp_path).load()
        assert config.network == DEFAULT_NETWORK
        assert config.account is None

    def test_file_values(self, tmp_path):
        (tmp_path / PROJECT_CONFIG_FILE).write_text("network: ethereum:sepolia\naccount: ops\n")

        config = ConfigService(tmp_path).load()

        assert config.network == "ethereum:sepolia"
        assert config.account == "ops"

    def test_file_expands_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("OPS_ACCOUNT", "treasury")
        (tmp_path / PROJECT_CONFIG_FILE).write_text("account: ${OPS_ACCOUNT}\n")

        assert ConfigService(tmp_path).load().account == "treasury"

    def test_precedence(self, tmp_path, monkeypatch):
        (tmp_path / PROJECT_CONFIG_FILE).write_text("network: from-file\naccount: file-account\n")
        monkeypatch.setenv(ENV_NETWORK, "from-env")
        monkeypatch.setenv(ENV_ACCOUNT, "env-account")

        config = ConfigService(tmp_path).load({"network": "from-flag", "account": None})

        assert config.network == "from-flag"
        assert config.account == "env-account"

    def test_malformed_file(self, tmp_path):
        (tmp_path / PROJECT_CONFIG_FILE).write_text("network: [")
        with pytest.raises(ConfigError):
            ConfigService(tmp_path).load()

    def test_unknown_key(self, tmp_path):
        (tmp_path / PROJECT_CONFIG_FILE).write_text("chain: 296\n")
        with pytest.raises(ConfigError):
            ConfigService(tmp_path).load()
