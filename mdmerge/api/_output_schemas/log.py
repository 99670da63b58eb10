"""Output schemas for log commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LogStatusOutput(BaseOutputSchema):
    """Output schema for log status command."""

    log_path: str = Field(..., description="Path to the logfile")
    size_bytes: int = Field(..., description="Size of the logfile after pruning")
    entry_counts: dict[str, int] = Field(..., description="Entries kept per level (debug, info, warn, error)")
    oldest_entry: str | None = Field(..., description="ISO timestamp of the oldest kept entry")
    newest_entry: str | None = Field(..., description="ISO timestamp of the newest kept entry")


register_output_schema("log", "status", LogStatusOutput)
