"""Shared test fixtures for chronicles."""

import os
import sys
import tempfile

import pytest
from loguru import logger


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "server": {"port": 9100},
        "journal": {
            "match_mode": "path",
            "render_cache_size": 4,
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def make_journal(tmp_path):
    """Factory: build a journal tree from ``{relative_path: content}``."""

    def _make(files: dict[str, str], root_name: str = "journal"):
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def scenario_journal(make_journal):
    """Two dated entries plus one hidden under attachments/."""
    return make_journal(
        {
            "2020/01/2020-01-02.md": "# January\n\nFirst entry",
            "2020/02/2020-02-15.md": "# February\n\nHello **world**",
            "attachments/2099-09-09.md": "# Hidden",
        }
    )


@pytest.fixture(autouse=True)
def _restore_logging():
    """CLI tests reconfigure loguru; put the default stderr sink back."""
    yield
    logger.remove()
    logger.add(sys.stderr)
