"""Async command support for Typer."""

import asyncio
from collections.abc import Callable, Coroutine
from functools import wraps
from typing import Any, TypeVar

import typer

from ledger_reports.exceptions import LedgerReportsError, SourceAuthError

T = TypeVar("T")


def report_error(e: LedgerReportsError) -> None:
    """Print a library error with a hint where one helps."""
    from ledger_reports.cli.formatters import print_error, print_info

    print_error(e.message)
    if isinstance(e, SourceAuthError):
        print_info("Check SUPABASE_KEY or the api_key in your config file.")


def async_command(f: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., T]:
    """Decorator to run async Typer commands.

    Library errors are printed and turned into exit code 1.

    Usage:
        @app.command()
        @async_command
        async def my_command(ctx: typer.Context):
            async with get_client(ctx.obj) as client:
                inputs = await client.fetch_report_inputs(period)
                ...
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return asyncio.run(f(*args, **kwargs))
        except LedgerReportsError as e:
            report_error(e)
            raise typer.Exit(1) from None

    return wrapper
