"""Context API command: list the labels of every input file."""

from collections.abc import Iterator, Sequence

from ..config.MdmergeConfig import MdmergeConfig
from ..context.build_context import build_context
from ..identity.IdentityError import IdentityError
from ..StageResult import StageResult
from . import MergeContextOutput
from ._log_report import _log_report
from .DocumentReport import DocumentReport


def cmd_context(files: Sequence[str]) -> StageResult:
    """Build the label context of a document and report label clashes."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        report = DocumentReport(files=list(files))

        yield (0.1, "Loading configuration...")
        try:
            config = MdmergeConfig.load()
        except ValueError as e:
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.output = MergeContextOutput(**{**report.output_fields(), "errors": [str(e)]}).model_dump(
                mode="python"
            )
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.3, "Building label context...")
        try:
            report.context, report.duplicate_warnings = build_context(files, config.merge.identity_prefix)
        except (IdentityError, OSError, UnicodeDecodeError) as e:
            result_obj.result = f"Cannot read input file: {e}"
            result_obj.output = MergeContextOutput(**{**report.output_fields(), "errors": [str(e)]}).model_dump(
                mode="python"
            )
            result_obj.success = False
            yield (1.0, "Complete")
            return

        label_count = sum(len(labels) for labels in report.context.labels.values())
        summary = f"Found {label_count} label(s) in {len(report.context.labels)} file(s)"
        _log_report(config, report, summary)

        result_obj.result = summary
        result_obj.output = MergeContextOutput(**report.output_fields()).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Collecting labels of {len(files)} file(s)...", progress_callback=do_work)
