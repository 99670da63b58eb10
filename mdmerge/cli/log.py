"""Log Typer app factory."""

import typer

from mdmerge.api.log.cmd_status import cmd_status
from mdmerge.cli._handle_stage_result import _handle_stage_result


def log() -> typer.Typer:
    """Create and configure the log Typer app."""
    app = typer.Typer(
        name="log",
        help="Logfile operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="status")
    def status_cmd() -> None:
        """Show logfile status after pruning expired entries."""
        _handle_stage_result(cmd_status)()

    return app
