"""Shared pytest configuration and fixtures for all tests."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from mdmerge.api.config.MdmergeConfig import MdmergeConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: end-to-end runs through the CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def minimal_config_dict() -> dict:
    """Minimal valid configuration dict for testing."""
    return {
        "merge": {
            "suffixes": [".md"],
            "page_break": "\\newpage",
            "identity_prefix": "n",
            "local_links": False,
        },
        "log": {
            "level": "INFO",
            "debug_retention_days": 0.5,
            "info_retention_days": 1.0,
            "warning_retention_days": 2.0,
            "error_retention_days": 7.0,
        },
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def mdmerge_home(tmp_path: Path, monkeypatch) -> Path:
    """Isolate MDMERGE_HOME for every test; no config file is written."""
    home = tmp_path / ".mdmerge"
    home.mkdir()
    monkeypatch.setenv("MDMERGE_HOME", str(home))
    return home


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    return minimal_config_dict()


@pytest.fixture
def write_config(mdmerge_home: Path) -> Callable[[dict], Path]:
    """Write a config.json under MDMERGE_HOME."""

    def _write(data: dict) -> Path:
        path = mdmerge_home / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def local_links_config(write_config, minimal_config_dict: dict) -> MdmergeConfig:
    """Config with local link checking and rewriting enabled."""
    minimal_config_dict["merge"]["local_links"] = True
    write_config(minimal_config_dict)
    return MdmergeConfig.load()


@pytest.fixture
def doc_dir(tmp_path: Path, monkeypatch) -> Path:
    """Empty document directory, made the working directory."""
    root = tmp_path / "doc"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def write_md(doc_dir: Path) -> Callable[[str, str], str]:
    """Write a markdown file relative to doc_dir and return its relative path."""

    def _write(name: str, content: str) -> str:
        path = doc_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return name

    return _write
