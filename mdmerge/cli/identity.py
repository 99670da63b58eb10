"""Identity Typer app factory."""

import typer

from mdmerge.api.identity.cmd_show import cmd_show
from mdmerge.cli._handle_stage_result import _handle_stage_result


def identity() -> typer.Typer:
    """Create and configure the identity Typer app."""
    app = typer.Typer(
        name="identity",
        help="Inspect file identities used as anchor prefixes",
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

    @app.command(name="show")
    def show_cmd(
        paths: list[str] = typer.Argument(..., help="Files to resolve"),
        root: str | None = typer.Option(None, help="Directory searched when resolving identities back to paths"),
    ) -> None:
        """Show the identity of each file and the path it resolves back to."""
        _handle_stage_result(cmd_show)(paths=paths, root=root)

    return app
