"""Client factory for CLI commands."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from ledger_reports.client import LedgerClient

if TYPE_CHECKING:
    from ledger_reports.cli.config import CLIConfig


@asynccontextmanager
async def get_client(config: CLIConfig) -> AsyncGenerator[LedgerClient]:
    """Create a LedgerClient for CLI use.

    Credential loading priority:
    1. Environment variables (SUPABASE_URL, SUPABASE_KEY)
    2. Config file (~/.config/ledger-reports/config.json)

    Usage:
        async with get_client(cli_config) as client:
            inputs = await client.fetch_report_inputs(period)
    """
    client = LedgerClient(config.load_source_config())

    async with client:
        yield client
