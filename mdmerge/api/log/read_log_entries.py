from datetime import datetime, timedelta, timezone
from pathlib import Path

from .LOG_PATTERN import LOG_PATTERN


def read_log_entries(
    log_path: Path,
    debug_retention_days: float = 0.5,
    info_retention_days: float = 1.0,
    warning_retention_days: float = 2.0,
    error_retention_days: float = 7.0,
) -> tuple[list[str], list[str]]:
    """Read log entries, filtering expired ones and returning (warnings, errors).

    This is the prune-on-access contract: expired entries are removed when reading.
    """
    warnings: list[str] = []
    errors: list[str] = []

    if not log_path.exists():
        return warnings, errors

    now = datetime.now(timezone.utc)
    cutoffs = {
        "DEBUG": now - timedelta(days=debug_retention_days),
        "INFO": now - timedelta(days=info_retention_days),
        "WARN": now - timedelta(days=warning_retention_days),
        "ERROR": now - timedelta(days=error_retention_days),
    }

    kept_lines: list[str] = []

    try:
        for line in log_path.read_text(encoding="utf-8", errors="ignore").splitlines():
            stripped = line.strip()
            if not stripped:
                continue

            match = LOG_PATTERN.match(stripped)
            if not match:
                continue  # Not ours

            level = match.group(3).upper()
            try:
                entry_time = datetime.fromisoformat(match.group(1))
            except ValueError:
                entry_time = now
            if entry_time.tzinfo is None:
                entry_time = entry_time.replace(tzinfo=timezone.utc)

            if entry_time < cutoffs[level]:
                continue  # Expired

            kept_lines.append(stripped)
            if level == "ERROR":
                errors.append(stripped)
            elif level == "WARN":
                warnings.append(stripped)

        log_path.write_text("\n".join(kept_lines) + "\n" if kept_lines else "", encoding="utf-8")
    except OSError:
        pass

    return warnings, errors
