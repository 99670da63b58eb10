"""Merge API command: check a document, then write it as a single file."""

from collections.abc import Iterator, Sequence

from ..config.MdmergeConfig import MdmergeConfig
from ..context.build_context import build_context
from ..identity.IdentityError import IdentityError
from ..link.validate_links import validate_links
from ..StageResult import StageResult
from . import MergeMergeOutput
from ._log_report import _log_report
from .DocumentReport import DocumentReport
from .merge_files import merge_files


def cmd_merge(target: str, files: Sequence[str]) -> StageResult:
    """Merge ``files``, in order, into ``target``.

    Three passes: build the label context, check every link, write the
    merged document. The target is only opened once the first two passes
    found no broken link, so a failed check leaves it untouched.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        report = DocumentReport(files=list(files))

        def output(errors: list[str] | None = None, written: bool = False, line_count: int = 0) -> dict:
            fields = report.output_fields()
            if errors is not None:
                fields["errors"] = errors
            return MergeMergeOutput(**fields, target=target, written=written, line_count=line_count).model_dump(
                mode="python"
            )

        yield (0.1, "Loading configuration...")
        try:
            config = MdmergeConfig.load()
        except ValueError as e:
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.output = output([str(e)])
            result_obj.success = False
            yield (1.0, "Complete")
            return
        merge_cfg = config.merge

        yield (0.2, "Building label context...")
        try:
            report.context, report.duplicate_warnings = build_context(files, merge_cfg.identity_prefix)
        except (IdentityError, OSError, UnicodeDecodeError) as e:
            result_obj.result = f"Cannot read input file: {e}"
            result_obj.output = output([str(e)])
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.4, "Validating links...")
        try:
            report.link_errors = validate_links(
                report.context, files, merge_cfg.suffixes, merge_cfg.identity_prefix, merge_cfg.local_links
            )
        except (OSError, UnicodeDecodeError) as e:
            result_obj.result = f"Cannot read input file: {e}"
            result_obj.output = output([str(e)])
            result_obj.success = False
            yield (1.0, "Complete")
            return
        if report.link_errors:
            summary = f"Found {report.link_error_count} broken link(s) in {len(report.link_errors)} file(s), {target} not written"
            _log_report(config, report, summary)
            result_obj.result = summary
            result_obj.output = output()
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.6, f"Writing {target}...")
        try:
            line_count = merge_files(target, files, merge_cfg)
        except (IdentityError, OSError, UnicodeDecodeError) as e:
            _log_report(config, report, f"Failed writing {target}: {e}", failed=True)
            result_obj.result = f"Failed writing {target}: {e}"
            result_obj.output = output([str(e)])
            result_obj.success = False
            yield (1.0, "Complete")
            return

        summary = f"Merged {len(files)} file(s) into {target}"
        _log_report(config, report, summary)
        result_obj.result = summary
        result_obj.output = output(written=True, line_count=line_count)
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Merging {len(files)} file(s) into {target}...", progress_callback=do_work)
