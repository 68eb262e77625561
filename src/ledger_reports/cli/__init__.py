"""ledger-reports CLI - command-line interface for the financial reports."""

from ledger_reports.cli.app import app

# Import command modules to register them with the app
from ledger_reports.cli.commands import journal, receivables, reports

# Register sub-apps
app.add_typer(reports.app, name="report", help="Profit & loss and balance sheet.")
app.add_typer(journal.app, name="journal", help="Journal entry checks and account ledgers.")
app.add_typer(receivables.app, name="receivables", help="Outstanding invoices.")


def main() -> None:
    """Entry point for the CLI."""
    app()


__all__ = ["app", "main"]
