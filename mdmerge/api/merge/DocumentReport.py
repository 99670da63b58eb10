"""DocumentReport model: what the check passes found in a document."""

from dataclasses import dataclass, field
from typing import Any

from ..context.Context import Context
from ..context.format_clash_warnings import CLASH_WARNING_HEADER, format_clash_warnings
from ..link.LinkError import LinkError


@dataclass
class DocumentReport:
    files: list[str]
    context: Context = field(default_factory=Context.empty)
    duplicate_warnings: list[str] = field(default_factory=list)
    link_errors: dict[str, list[LinkError]] = field(default_factory=dict)

    @property
    def link_error_count(self) -> int:
        return sum(len(errors) for errors in self.link_errors.values())

    def warnings(self) -> list[str]:
        """Duplicate input files, then label clashes under their header line."""
        clash_lines = format_clash_warnings(self.context)
        if not clash_lines:
            return list(self.duplicate_warnings)
        return [*self.duplicate_warnings, CLASH_WARNING_HEADER, *clash_lines]

    def errors(self) -> list[str]:
        """One line per broken link, grouped by source file."""
        return [f"on file {source}: {error.describe()}" for source, errors in self.link_errors.items() for error in errors]

    def output_fields(self) -> dict[str, Any]:
        return {
            "errors": self.errors(),
            "warnings": self.warnings(),
            "files": list(self.files),
            "context": self.context.to_dict(),
            "clashes": self.context.clashes_to_dict(),
            "link_errors": {
                source: [error.to_dict() for error in errors] for source, errors in self.link_errors.items()
            },
        }
