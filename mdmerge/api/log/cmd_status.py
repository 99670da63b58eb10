"""Log status command - show log file status after auto-pruning by retention."""

from collections.abc import Iterator
from contextlib import suppress
from datetime import datetime, timedelta, timezone

from ..config.MdmergeConfig import MdmergeConfig
from ..StageResult import StageResult
from . import LogStatusOutput
from .LOG_PATTERN import LOG_PATTERN


def cmd_status() -> StageResult:
    """Show log file status after auto-pruning expired entries by retention."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        log_path = MdmergeConfig.get_logfile_path()
        counts = {"debug": 0, "info": 0, "warn": 0, "error": 0}

        try:
            log_cfg = MdmergeConfig.load().log
        except ValueError as e:
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.output = LogStatusOutput(
                errors=[str(e)],
                log_path=str(log_path),
                size_bytes=0,
                entry_counts=counts,
                oldest_entry=None,
                newest_entry=None,
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.2, "Auto-pruning expired entries...")

        now = datetime.now(timezone.utc)
        cutoffs = {
            "DEBUG": now - timedelta(days=log_cfg.debug_retention_days),
            "INFO": now - timedelta(days=log_cfg.info_retention_days),
            "WARN": now - timedelta(days=log_cfg.warning_retention_days),
            "ERROR": now - timedelta(days=log_cfg.error_retention_days),
        }

        kept_lines: list[str] = []
        oldest_entry: str | None = None
        newest_entry: str | None = None

        if not log_path.exists():
            result_obj.result = "Log file status"
            result_obj.output = LogStatusOutput(
                log_path=str(log_path),
                size_bytes=0,
                entry_counts=counts,
                oldest_entry=None,
                newest_entry=None,
            ).model_dump(mode="python")
            result_obj.success = True
            yield (1.0, "Complete")
            return

        try:
            lines = log_path.read_text(encoding="utf-8", errors="ignore").splitlines()
        except OSError as e:
            result_obj.result = f"Failed to read log: {e}"
            result_obj.output = LogStatusOutput(
                errors=[str(e)],
                log_path=str(log_path),
                size_bytes=0,
                entry_counts=counts,
                oldest_entry=None,
                newest_entry=None,
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.5, f"Processing {len(lines)} entries...")

        for line in lines:
            stripped = line.strip()
            match = LOG_PATTERN.match(stripped)
            if not match:
                continue

            level = match.group(3).upper()
            try:
                entry_time = datetime.fromisoformat(match.group(1))
            except ValueError:
                entry_time = now  # Treat unparseable as current
            if entry_time.tzinfo is None:
                entry_time = entry_time.replace(tzinfo=timezone.utc)

            if entry_time < cutoffs[level]:
                continue

            kept_lines.append(stripped)
            counts[level.lower()] += 1

            ts = entry_time.isoformat()
            if oldest_entry is None or ts < oldest_entry:
                oldest_entry = ts
            if newest_entry is None or ts > newest_entry:
                newest_entry = ts

        yield (0.8, "Writing cleaned log...")

        with suppress(OSError):
            log_path.write_text("\n".join(kept_lines) + "\n" if kept_lines else "", encoding="utf-8")

        size_bytes = log_path.stat().st_size if log_path.exists() else 0

        result_obj.result = "Log file status"
        result_obj.output = LogStatusOutput(
            log_path=str(log_path),
            size_bytes=size_bytes,
            entry_counts=counts,
            oldest_entry=oldest_entry,
            newest_entry=newest_entry,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Checking log status...",
        progress_callback=do_work,
    )
