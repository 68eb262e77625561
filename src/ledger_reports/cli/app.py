"""Main Typer application."""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

import typer
from rich.logging import RichHandler

from ledger_reports.cli.config import CLIConfig
from ledger_reports.cli.formatters import error_console
from ledger_reports.config import default_config_dir
from ledger_reports.models import BALANCE_TOLERANCE

app = typer.Typer(
    name="ledger-reports",
    help="Financial reports from invoices, platform transactions and the general ledger.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    """Send library logs to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=verbose)],
        force=True,
    )


def _parse_tolerance(value: str) -> Decimal:
    try:
        tolerance = Decimal(value)
    except InvalidOperation:
        raise typer.BadParameter(f"Not a number: {value}") from None
    if not tolerance.is_finite() or tolerance <= 0:
        raise typer.BadParameter("Tolerance must be a positive finite number.")
    return tolerance


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
    config_dir: Path | None = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Config directory (default: ~/.config/ledger-reports).",
        envvar="LEDGER_REPORTS_CONFIG_DIR",
    ),
    tolerance: str = typer.Option(
        str(BALANCE_TOLERANCE),
        "--tolerance",
        help="Largest difference still treated as balanced.",
    ),
) -> None:
    """Financial reports from invoices, platform transactions and the general ledger.

    Records come from a JSON file (--input) or from the backend configured
    through SUPABASE_URL/SUPABASE_KEY or the config file.
    """
    _configure_logging(verbose)
    ctx.obj = CLIConfig(
        verbose=verbose,
        config_dir=config_dir or default_config_dir(),
        tolerance=_parse_tolerance(tolerance),
    )
