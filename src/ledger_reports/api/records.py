"""Ledger record endpoints."""

from datetime import date

from ledger_reports.api.base import BaseAPI, QueryParams
from ledger_reports.inputs import parse_records
from ledger_reports.models import Account, Invoice, JournalEntry, PlatformTransaction

PLATFORM_TRANSACTION_SELECT = (
    "*,platforms(name,platform_type),expense_categories(name,category_code)"
)
JOURNAL_ENTRY_SELECT = (
    "*,journal_entry_lines(id,account_id,debit,credit,"
    "accounts(id,account_number,account_name,account_type,account_subtype))"
)


def _date_range(column: str, date_from: date | None, date_to: date | None) -> QueryParams:
    params: QueryParams = []
    if date_from:
        params.append((column, f"gte.{date_from.isoformat()}"))
    if date_to:
        params.append((column, f"lte.{date_to.isoformat()}"))
    return params


class RecordsAPI(BaseAPI):
    """Read-only access to the tables the reports are built from."""

    async def list_invoices(
        self,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Invoice]:
        """List invoices dated within the range.

        Args:
            date_from: First invoice date (inclusive)
            date_to: Last invoice date (inclusive)
        """
        params: QueryParams = [("select", "*")]
        params += _date_range("invoice_date", date_from, date_to)
        rows = await self._get_all("invoices", params)
        return parse_records(Invoice, rows, source="invoices")

    async def list_platform_transactions(
        self,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[PlatformTransaction]:
        """List platform transactions with their platform and expense category."""
        params: QueryParams = [("select", PLATFORM_TRANSACTION_SELECT)]
        params += _date_range("transaction_date", date_from, date_to)
        rows = await self._get_all("platform_transactions", params)
        return parse_records(PlatformTransaction, rows, source="platform_transactions")

    async def list_posted_journal_entries(
        self,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[JournalEntry]:
        """List posted journal entries with their lines and line accounts.

        Draft entries are excluded; only posted entries affect reports.
        """
        params: QueryParams = [("select", JOURNAL_ENTRY_SELECT), ("status", "eq.posted")]
        params += _date_range("entry_date", date_from, date_to)
        rows = await self._get_all("journal_entries", params)
        return parse_records(JournalEntry, rows, source="journal_entries")

    async def list_active_accounts(self) -> list[Account]:
        """List active chart-of-accounts rows ordered by account number."""
        params: QueryParams = [
            ("select", "*"),
            ("is_active", "eq.true"),
            ("order", "account_number"),
        ]
        rows = await self._get_all("accounts", params)
        return parse_records(Account, rows, source="accounts")
