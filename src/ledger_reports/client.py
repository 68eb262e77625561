"""Backend client for fetching report records."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import httpx

from ledger_reports.api.records import RecordsAPI
from ledger_reports.config import SourceConfig
from ledger_reports.engine import ReportInputs

if TYPE_CHECKING:
    from types import TracebackType

    from ledger_reports.models import DateRange

logger = logging.getLogger(__name__)


class LedgerClient:
    """Client for the PostgREST backend that stores the books.

    Usage (context manager - recommended for connection pooling):
        async with LedgerClient(config) as client:
            inputs = await client.fetch_report_inputs(period)

    Usage (external HTTP client - shared across integrations):
        http_client = httpx.AsyncClient(timeout=30.0)
        client = LedgerClient(config, http_client=http_client)
        # Client uses shared pool, doesn't close it
    """

    def __init__(
        self,
        config: SourceConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Backend configuration
            http_client: Optional httpx.AsyncClient for connection pooling.
                        If provided, the client will use this pool and NOT close it.
        """
        self.config = config

        self._http_client = http_client
        self._owns_http_client = http_client is None

        self.records = RecordsAPI(config, http_client)

    def _set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Update HTTP client on all API modules."""
        self._http_client = http_client
        self.records.set_http_client(http_client)

    async def open(self) -> None:
        """Open connection pool for HTTP requests."""
        if self._http_client is None and self._owns_http_client:
            self._set_http_client(httpx.AsyncClient(timeout=self.config.timeout))

    async def close(self) -> None:
        """Close connection pool.

        Only closes the pool if this client owns it (not external).
        """
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._set_http_client(None)

    async def __aenter__(self) -> LedgerClient:
        """Async context manager entry - opens connection pool."""
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit - closes connection pool."""
        await self.close()

    @classmethod
    def from_env(cls) -> LedgerClient:
        """Create client from SUPABASE_URL and SUPABASE_KEY."""
        return cls(SourceConfig.from_env())

    async def fetch_report_inputs(self, period: DateRange | None = None) -> ReportInputs:
        """Fetch every record the financial reports need.

        Invoices, platform transactions and posted journal entries are limited
        to the period; the chart of accounts is not.
        """
        date_from = period.date_from if period else None
        date_to = period.date_to if period else None

        invoices, transactions, entries, accounts = await asyncio.gather(
            self.records.list_invoices(date_from, date_to),
            self.records.list_platform_transactions(date_from, date_to),
            self.records.list_posted_journal_entries(date_from, date_to),
            self.records.list_active_accounts(),
        )
        logger.debug(
            "Fetched %d invoices, %d platform transactions, %d journal entries, %d accounts",
            len(invoices),
            len(transactions),
            len(entries),
            len(accounts),
        )
        return ReportInputs.of(
            invoices=invoices,
            platform_transactions=transactions,
            journal_entries=entries,
            accounts=accounts,
        )
