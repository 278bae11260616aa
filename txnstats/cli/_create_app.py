"""Create the txnstats Typer CLI app."""

import logging
from pathlib import Path

import typer

from txnstats.api.config.ConfigError import ConfigError
from txnstats.api.config.load_config import load_config
from txnstats.api.stats.cmd_report import cmd_report
from txnstats.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CONCURRENCY,
    DEFAULT_DATABASE_NAME,
    DEFAULT_HOSTNAME,
    DEFAULT_PORT,
    DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
    DEFAULT_USERNAME,
    TXNS_COLLECTION,
)
from txnstats.logging_config import setup_logging

from ._handle_stage_result import _handle_stage_result

# Exit status for invalid option combinations; nothing has touched the network yet.
CONFIG_ERROR_EXIT_CODE = 2


def _create_app() -> typer.Typer:
    """Create and configure the CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Report queue depths and transaction states of mgo/txn bookkeeping collections.",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def report(
        hostname: str | None = typer.Option(
            None, "--hostname", help=f"Hostname of the MongoDB server [default: {DEFAULT_HOSTNAME}]"
        ),
        port: int | None = typer.Option(None, "--port", help=f"Port of the MongoDB server [default: {DEFAULT_PORT}]"),
        no_ssl: bool = typer.Option(
            False, "--no-ssl", help="Connect without TLS (by default TLS is used and certificates are not verified)"
        ),
        username: str | None = typer.Option(
            None,
            "--username",
            help=f'User for connecting to MongoDB (use "" for no authentication) [default: {DEFAULT_USERNAME}]',
        ),
        password: str | None = typer.Option(
            None, "--password", envvar="TXNSTATS_PASSWORD", help="Password for connecting to MongoDB"
        ),
        database: str | None = typer.Option(
            None, "--database", help=f"Database holding the txn collections [default: {DEFAULT_DATABASE_NAME}]"
        ),
        txns_collection: str | None = typer.Option(
            None, "--txns-collection", help=f"Transaction collection name [default: {TXNS_COLLECTION}]"
        ),
        concurrency: int | None = typer.Option(
            None, "--concurrency", help=f"Maximum scans in flight at once [default: {DEFAULT_CONCURRENCY}]"
        ),
        batch_size: int | None = typer.Option(
            None, "--batch-size", help=f"Cursor batch size [default: {DEFAULT_BATCH_SIZE}]"
        ),
        timeout_ms: int | None = typer.Option(
            None,
            "--timeout-ms",
            help=f"Server selection timeout in milliseconds [default: {DEFAULT_SERVER_SELECTION_TIMEOUT_MS}]",
        ),
        config_path: Path | None = typer.Option(
            None, "--config", help="JSON config file (default: ~/.txnstats/config.json when present)"
        ),
        display: str = typer.Option("json", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log scan progress to stderr"),
        log_file: Path | None = typer.Option(None, "--log-file", help="Also write log records to this file"),
    ) -> None:
        """Scan the bookkeeping collections once and print the report."""
        if display not in ("json", "yaml"):
            typer.echo(f"error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(CONFIG_ERROR_EXIT_CODE)

        setup_logging(level=logging.DEBUG if verbose else logging.WARNING, log_file=log_file)

        overrides = {
            "database": {
                "name": database,
                "data": {
                    "hostname": hostname,
                    "port": port,
                    "ssl": False if no_ssl else None,
                    "username": username,
                    "password": password,
                    "timeout_ms": timeout_ms,
                },
            },
            "scan": {
                "concurrency": concurrency,
                "batch_size": batch_size,
                "txns_collection": txns_collection,
            },
        }
        try:
            config = load_config(config_path, overrides)
        except ConfigError as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(CONFIG_ERROR_EXIT_CODE) from e

        _handle_stage_result(cmd_report, display_format=display)(config)

    return app
