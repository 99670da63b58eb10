"""Record a document report in the unified logfile."""

from ..config.MdmergeConfig import MdmergeConfig
from ..log.append_log import append_log
from .DocumentReport import DocumentReport


def _log_report(config: MdmergeConfig, report: DocumentReport, summary: str, failed: bool = False) -> None:
    """Append one WARN line per warning, one ERROR line per error and the summary.

    The summary is an ERROR when the report holds broken links or ``failed``
    is set, an INFO otherwise.
    """
    log_path = MdmergeConfig.get_logfile_path()
    level = config.log.level
    for warning in report.warnings():
        append_log(log_path, "merge", "WARN", warning, min_level=level)
    for error in report.errors():
        append_log(log_path, "merge", "ERROR", error, min_level=level)
    summary_level = "ERROR" if failed or report.link_errors else "INFO"
    append_log(log_path, "merge", summary_level, summary, min_level=level)
