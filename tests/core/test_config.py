"""Tests for chronicles.core.config."""

import json
import os

import pytest
import yaml

from chronicles.core.config import Config, get_config, reset_config
from chronicles.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _reset_singleton(monkeypatch):
    """Reset config singleton and the bare PORT override between tests."""
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("CHRONICLES_SERVER__PORT", raising=False)
    monkeypatch.delenv("CHRONICLES_JOURNAL__MATCH_MODE", raising=False)
    monkeypatch.delenv("CHRONICLES_SERVER__DEBUG", raising=False)
    reset_config()
    yield
    reset_config()


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.get("server.host") == "127.0.0.1"
        assert config.get("server.port") == 8001
        assert config.get("server.debug") is False
        assert config.get("journal.skip_segment") == "attachments"
        assert config.get("journal.match_mode") == "filename"
        assert config.get("logging.level") == "INFO"

    def test_yaml_config_file(self, tmp_config_file):
        config = Config(config_file=tmp_config_file)
        assert config.get("server.port") == 9100
        assert config.get("journal.match_mode") == "path"
        # Untouched keys keep their defaults
        assert config.get("journal.on_walk_error") == "skip"

    def test_json_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.json")
        with open(config_path, "w") as f:
            json.dump({"journal": {"skip_segment": "archive"}}, f)

        config = Config(config_file=config_path)
        assert config.get("journal.skip_segment") == "archive"

    def test_missing_config_file_is_ignored(self, tmp_dir):
        config = Config(config_file=os.path.join(tmp_dir, "nope.yaml"))
        assert config.get("server.port") == 8001

    def test_env_overrides_file(self, tmp_dir, monkeypatch):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"journal": {"match_mode": "path"}}, f)

        monkeypatch.setenv("CHRONICLES_JOURNAL__MATCH_MODE", "filename")
        config = Config(config_file=config_path)
        assert config.get("journal.match_mode") == "filename"

    def test_custom_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_SERVER__HOST", "0.0.0.0")
        config = Config(env_prefix="MYAPP_")
        assert config.get("server.host") == "0.0.0.0"

    def test_bare_port_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        assert Config().get("server.port") == "9000"

    def test_prefixed_port_beats_bare_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("CHRONICLES_SERVER__PORT", "9001")
        assert Config().get("server.port") == "9001"

    def test_get_missing_key(self):
        config = Config()
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_set(self):
        config = Config()
        config.set("custom.nested.value", 42)
        assert config.get("custom.nested.value") == 42

    def test_extra_defaults(self):
        config = Config(defaults={"journal": {"render_cache_size": 8}})
        assert config.get("journal.render_cache_size") == 8
        assert config.get("journal.match_mode") == "filename"


class TestValidated:
    def test_defaults(self):
        settings = Config().validated()
        assert settings.server.port == 8001
        assert settings.server.debug is False
        assert settings.journal.match_mode == "filename"
        assert settings.logging.level == "INFO"

    def test_env_strings_are_typed(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("CHRONICLES_SERVER__DEBUG", "true")
        settings = Config().validated()
        assert settings.server.port == 9000
        assert settings.server.debug is True

    def test_bad_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(ConfigurationError, match="port"):
            Config().validated()

    def test_extra_sections_allowed(self):
        config = Config(defaults={"custom": {"key": "value"}})
        assert config.validated().server.host == "127.0.0.1"


class TestGetConfig:
    def test_singleton(self, tmp_config_file):
        c1 = get_config(config_file=tmp_config_file)
        c2 = get_config()
        assert c1 is c2
        assert c2.get("server.port") == 9100

    def test_reset_clears_singleton(self):
        c1 = get_config()
        reset_config()
        c2 = get_config()
        assert c1 is not c2
