"""Unit tests for mdmerge.api.log."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

from mdmerge.api.log.append_log import append_log
from mdmerge.api.log.cmd_status import cmd_status
from mdmerge.api.log.read_log_entries import read_log_entries
from tests.unit.conftest import run_cmd


def _stamp(days_ago: float) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days_ago)).isoformat()


def test_append_log_success(tmp_path):
    log_path = tmp_path / "nested" / "logfile"
    append_log(log_path, "merge", "INFO", "Hello")

    content = log_path.read_text(encoding="utf-8")
    assert "[merge] INFO: Hello" in content


def test_append_log_below_min_level(tmp_path):
    log_path = tmp_path / "logfile"
    append_log(log_path, "merge", "DEBUG", "noise", min_level="INFO")
    assert not log_path.exists()


def test_append_log_io_error(tmp_path, monkeypatch):
    log_path = tmp_path / "error.log"

    def mock_open(*args, **kwargs):
        raise OSError("fail")

    monkeypatch.setattr(Path, "open", mock_open)

    # Should not raise
    append_log(log_path, "merge", "ERROR", "Fail")


def test_read_log_entries_prunes_expired(tmp_path):
    log_path = tmp_path / "logfile"
    log_path.write_text(
        "\n".join(
            [
                f"[{_stamp(3)}] [merge] WARN: old warning",
                f"[{_stamp(0)}] [merge] WARN: new warning",
                f"[{_stamp(3)}] [merge] ERROR: recent enough error",
                f"[{_stamp(10)}] [merge] ERROR: old error",
                f"[{_stamp(0)}] [merge] INFO: info",
                "unrelated line",
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    warnings, errors = read_log_entries(log_path)

    assert len(warnings) == 1 and warnings[0].endswith("new warning")
    assert len(errors) == 1 and errors[0].endswith("recent enough error")
    kept = log_path.read_text(encoding="utf-8").splitlines()
    assert len(kept) == 3
    assert not any("old" in line for line in kept)


def test_read_log_entries_naive_timestamp(tmp_path):
    log_path = tmp_path / "logfile"
    naive = datetime.now(timezone.utc).replace(tzinfo=None).isoformat()
    log_path.write_text(f"[{naive}] [merge] ERROR: naive\n", encoding="utf-8")

    _warnings, errors = read_log_entries(log_path)

    assert len(errors) == 1


def test_read_log_entries_missing_file(tmp_path):
    assert read_log_entries(tmp_path / "logfile") == ([], [])


def test_cmd_status_no_log(mdmerge_home):
    result = run_cmd(cmd_status)

    assert result.success is True
    assert result.output["size_bytes"] == 0
    assert result.output["entry_counts"] == {"debug": 0, "info": 0, "warn": 0, "error": 0}


def test_cmd_status_counts_kept_entries(mdmerge_home):
    log_path = mdmerge_home / "logfile"
    append_log(log_path, "merge", "INFO", "one")
    append_log(log_path, "merge", "ERROR", "two")
    with log_path.open("a", encoding="utf-8") as fh:
        fh.write(f"[{_stamp(30)}] [merge] ERROR: expired\n")

    result = run_cmd(cmd_status)

    assert result.success is True
    assert result.output["entry_counts"] == {"debug": 0, "info": 1, "warn": 0, "error": 1}
    assert result.output["oldest_entry"] is not None
    assert "expired" not in log_path.read_text(encoding="utf-8")


def test_cmd_status_invalid_config(write_config):
    write_config({"log": {"error_retention_days": -1}})
    result = run_cmd(cmd_status)
    assert result.success is False
    assert "log.error_retention_days" in result.output["errors"][0]
