"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (CHRONICLES_SECTION__KEY, plus a bare PORT)
    2. Config file (YAML or JSON)
    3. Built-in defaults

Usage:
    config = Config(config_file="chronicles.yaml")

    config.get("server.port")            # dot-notation access
    config.get("journal.match_mode")
"""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from chronicles.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from chronicles.core.config_schema import ChroniclesConfig

_DEFAULT_ENV_PREFIX = "CHRONICLES_"

# Bare PORT, as set by most hosting platforms
_PORT_ENV_VAR = "PORT"


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    CHRONICLES_JOURNAL__MATCH_MODE=path -> config["journal"]["match_mode"] = "path"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
            env_prefix: Prefix for environment variable overrides.
            defaults: Additional default values to merge.
        """
        self.config_file = config_file
        self.env_prefix = env_prefix or ""
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if self.config_file and os.path.exists(self.config_file):
            file_config = self._load_file(self.config_file)
            self._update_dict(self.config_data, file_config)

        # Env vars override everything
        self._load_from_env()

    @staticmethod
    def _get_default_config() -> dict[str, Any]:
        return {
            "server": {
                "host": "127.0.0.1",
                "port": 8001,
                "debug": False,
            },
            "journal": {
                "skip_segment": "attachments",
                "match_mode": "filename",
                "on_walk_error": "skip",
                "render_cache_size": 0,
                "share_indexes": True,
            },
            "logging": {
                "level": "INFO",
                "file": "",
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        with open(path) as f:
            if ext in (".yaml", ".yml"):
                return yaml.safe_load(f) or {}
            elif ext == ".json":
                return json.load(f)
        return {}

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        port = os.environ.get(_PORT_ENV_VAR)
        if port:
            self.set("server.port", port)

        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if part not in current or not isinstance(current[part], dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "server.port", "journal.match_mode"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def validated(self) -> ChroniclesConfig:
        """Return the merged config as a typed, validated model.

        Raises:
            ConfigurationError: If a value has the wrong type or is out of range.
        """
        from chronicles.core.config_schema import ChroniclesConfig

        try:
            return ChroniclesConfig.model_validate(self.config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


# Module-level singleton
_config_instance: Config | None = None


def get_config(
    config_file: str | None = None,
    env_prefix: str = _DEFAULT_ENV_PREFIX,
) -> Config:
    """Get or create the global Config singleton."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config(config_file=config_file, env_prefix=env_prefix)
    return _config_instance


def reset_config() -> None:
    """Reset the global Config singleton (useful for testing)."""
    global _config_instance
    _config_instance = None
