from datetime import datetime, timezone
from pathlib import Path

from .LOG_PATTERN import LOG_LEVELS


def append_log(log_path: Path, domain: str, level: str, message: str, min_level: str = "DEBUG") -> None:
    """Append a timestamped entry to the unified logfile.

    Args:
        log_path: Path to the logfile
        domain: Domain name (e.g., 'merge', 'config')
        level: Log level (DEBUG, INFO, WARN, ERROR)
        message: Log message
        min_level: Entries below this level are dropped
    """
    if LOG_LEVELS.index(level) < LOG_LEVELS.index(min_level):
        return
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"[{timestamp}] [{domain}] {level}: {message}\n")
    except OSError:
        pass  # Logging should never raise
