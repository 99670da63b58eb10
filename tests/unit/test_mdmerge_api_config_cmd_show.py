"""Unit tests for mdmerge.api.config.cmd_show."""

from mdmerge.api.config.cmd_show import cmd_show
from tests.unit.conftest import run_cmd


def test_cmd_show_lists_sections():
    result = run_cmd(cmd_show, "")
    assert result.success is True
    assert result.output["content"] == {"sections": ["merge", "log"]}


def test_cmd_show_section(write_config):
    write_config({"merge": {"identity_prefix": "x"}})

    result = run_cmd(cmd_show, "merge")

    assert result.success is True
    assert result.output["section"] == "merge"
    assert result.output["content"]["identity_prefix"] == "x"
    assert result.output["config_path"].endswith("config.json")


def test_cmd_show_unknown_section():
    result = run_cmd(cmd_show, "vault")
    assert result.success is False
    assert result.output["errors"] == ["Unknown section: vault"]


def test_cmd_show_invalid_config(mdmerge_home):
    (mdmerge_home / "config.json").write_text("not json", encoding="utf-8")

    result = run_cmd(cmd_show, "merge")

    assert result.success is False
    assert result.result.startswith("Failed to load configuration")


def test_cmd_show_never_writes_config(mdmerge_home):
    result = run_cmd(cmd_show, "merge")

    assert result.success is True
    assert result.output["content"]["suffixes"] == [".md"]
    assert list(mdmerge_home.iterdir()) == []
