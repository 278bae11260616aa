"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from txnstats.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from txnstats import __version__

        print(f"txnstats {__version__}")
        return 0

    app = _create_app()
    try:
        result = app(argv, prog_name="txnstats", standalone_mode=False)
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.Abort:
        typer.echo("Aborted.", err=True)
        return 130
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return 2
    except Exception as e:
        # Newer typer releases raise their own copies of the click exceptions
        if hasattr(e, "format_message") and isinstance(getattr(e, "exit_code", None), int):
            typer.echo(f"Usage error: {e.format_message()}", err=True)
            return e.exit_code
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return result if isinstance(result, int) else 0
