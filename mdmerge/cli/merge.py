"""Merge commands: merge, check and context."""

import typer

from mdmerge.api.merge.cmd_check import cmd_check
from mdmerge.api.merge.cmd_context import cmd_context
from mdmerge.api.merge.cmd_merge import cmd_merge
from mdmerge.cli._handle_stage_result import _handle_stage_result


def register_merge_commands(app: typer.Typer) -> None:
    """Add the document commands to the top-level app."""

    @app.command(name="merge")
    def merge_cmd(
        target: str = typer.Argument(..., help="File the merged document is written to"),
        files: list[str] = typer.Argument(..., help="Markdown files of the document, in document order"),
    ) -> None:
        """Check the links of a multi-file document and merge it into one file."""
        _handle_stage_result(cmd_merge)(target=target, files=files)

    @app.command(name="check")
    def check_cmd(
        files: list[str] = typer.Argument(..., help="Markdown files of the document"),
    ) -> None:
        """Check the cross-file links of a document without writing anything."""
        _handle_stage_result(cmd_check)(files=files)

    @app.command(name="context")
    def context_cmd(
        files: list[str] = typer.Argument(..., help="Markdown files of the document"),
    ) -> None:
        """Show the labels each file defines and the labels defined twice."""
        _handle_stage_result(cmd_context)(files=files)
