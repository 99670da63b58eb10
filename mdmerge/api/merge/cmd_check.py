"""Check API command: validate every cross-file link of a document."""

from collections.abc import Iterator, Sequence

from ..config.MdmergeConfig import MdmergeConfig
from ..context.build_context import build_context
from ..identity.IdentityError import IdentityError
from ..link.validate_links import validate_links
from ..StageResult import StageResult
from . import MergeCheckOutput
from ._log_report import _log_report
from .DocumentReport import DocumentReport


def cmd_check(files: Sequence[str]) -> StageResult:
    """Build the label context, then check every link against it.

    Nothing is written. The command fails when any link is broken; label
    clashes that no link relies on are only warnings.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        report = DocumentReport(files=list(files))

        def fail(message: str, error: str) -> None:
            result_obj.result = message
            result_obj.output = MergeCheckOutput(**{**report.output_fields(), "errors": [error]}).model_dump(
                mode="python"
            )
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = MdmergeConfig.load()
        except ValueError as e:
            fail(f"Failed to load configuration: {e}", str(e))
            yield (1.0, "Complete")
            return
        merge_cfg = config.merge

        yield (0.3, "Building label context...")
        try:
            report.context, report.duplicate_warnings = build_context(files, merge_cfg.identity_prefix)
        except (IdentityError, OSError, UnicodeDecodeError) as e:
            fail(f"Cannot read input file: {e}", str(e))
            yield (1.0, "Complete")
            return

        yield (0.6, "Validating links...")
        try:
            report.link_errors = validate_links(
                report.context, files, merge_cfg.suffixes, merge_cfg.identity_prefix, merge_cfg.local_links
            )
        except (OSError, UnicodeDecodeError) as e:
            fail(f"Cannot read input file: {e}", str(e))
            yield (1.0, "Complete")
            return

        if report.link_errors:
            summary = f"Found {report.link_error_count} broken link(s) in {len(report.link_errors)} file(s)"
        else:
            summary = f"All links valid in {len(files)} file(s)"
        _log_report(config, report, summary)

        result_obj.result = summary
        result_obj.output = MergeCheckOutput(**report.output_fields()).model_dump(mode="python")
        result_obj.success = not report.link_errors
        yield (1.0, "Complete")

    return StageResult(announce=f"Checking links of {len(files)} file(s)...", progress_callback=do_work)
