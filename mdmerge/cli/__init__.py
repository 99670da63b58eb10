"""CLI - main entry point."""

import logging
import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from mdmerge.api.identity.IdentityError import IdentityError
    from mdmerge.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        if e.ctx is not None:
            typer.echo(e.ctx.get_usage(), err=True)
        return 2
    except click.exceptions.Abort:
        return 130
    except (IdentityError, ValueError) as e:
        typer.echo(f"Internal error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
