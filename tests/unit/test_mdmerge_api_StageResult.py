"""Unit tests for mdmerge.api.StageResult and validate_output."""

from collections.abc import Iterator

import pytest

from mdmerge.api._output_schemas import get_output_schema
from mdmerge.api._output_schemas.merge import MergeCheckOutput
from mdmerge.api.merge.cmd_check import cmd_check
from mdmerge.api.StageResult import StageResult
from mdmerge.api.validate_output import validate_output


def test_stage_result_initialization():
    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"test": True}
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    assert result.result == ""
    assert result.output == {}
    assert result.success is False

    assert list(result.progress_callback(result)) == [(1.0, "Complete")]
    assert result.success is True
    assert result.output == {"test": True}


def test_merge_schemas_registered():
    assert get_output_schema("merge", "check") is MergeCheckOutput
    assert get_output_schema("merge", "nope") is None


def test_validate_output_fills_defaults():
    output = {"files": [], "context": {}, "clashes": {}, "link_errors": {}}
    assert validate_output(cmd_check, output) == {"errors": [], "warnings": [], **output}


def test_validate_output_rejects_bad_output():
    with pytest.raises(ValueError, match="Output validation failed for merge.check"):
        validate_output(cmd_check, {"files": "A.md"})


def test_validate_output_skips_non_api_functions():
    def cmd_local():
        pass

    assert validate_output(cmd_local, {"value": "x"}) == {"value": "x"}
