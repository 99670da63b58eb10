"""Output schemas for merge commands."""

from pydantic import BaseModel, ConfigDict, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkErrorRecord(BaseModel):
    """One broken link, as reported under its source file."""

    model_config = ConfigDict(extra="forbid")

    kind: str = Field(..., description="label_clash, dead_label_link, dead_file_link or direct_link")
    file: str = Field(..., description="Target file of the link, relative to the working directory")
    label: str | None = Field(..., description="Label the link points at, null for a direct link")
    message: str = Field(..., description="Human readable description")


class MergeContextOutput(BaseOutputSchema):
    """Output schema for the context command.

    Output structure:
    - errors / warnings: standard lists; clash warnings land in warnings
    - files: input files in document order
    - context: file -> labels in first-seen order
    - clashes: file -> labels defined more than once, only files with clashes
    """

    files: list[str] = Field(..., description="Input files in document order")
    context: dict[str, list[str]] = Field(..., description="Labels defined by each file")
    clashes: dict[str, list[str]] = Field(..., description="Labels defined more than once in a file")


class MergeCheckOutput(MergeContextOutput):
    """Output schema for the check command."""

    link_errors: dict[str, list[LinkErrorRecord]] = Field(
        ..., description="Broken links grouped by source file, only files with errors"
    )


class MergeMergeOutput(MergeCheckOutput):
    """Output schema for the merge command."""

    target: str = Field(..., description="Path of the merged document")
    written: bool = Field(..., description="True once the merged document was fully written")
    line_count: int = Field(..., description="Number of source lines written to the target")


register_output_schema("merge", "context", MergeContextOutput)
register_output_schema("merge", "check", MergeCheckOutput)
register_output_schema("merge", "merge", MergeMergeOutput)
