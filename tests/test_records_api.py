"""Tests for record endpoints, pagination and rate limit retry."""

from collections.abc import Iterator
from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from ledger_reports.api import RecordsAPI
from ledger_reports.api.base import BaseAPI
from ledger_reports.config import SourceConfig
from ledger_reports.exceptions import RecordValidationError, SourceError, SourceRateLimitError
from ledger_reports.models import AccountType


@pytest.fixture
def config() -> SourceConfig:
    """Create a test configuration."""
    return SourceConfig(url="https://demo.supabase.co", api_key="anon-key")


@pytest.fixture
def no_sleep() -> Iterator[AsyncMock]:
    """Replace the retry sleep so backoff waits return immediately."""
    with patch.object(BaseAPI._get.retry, "sleep", new_callable=AsyncMock) as sleep:
        yield sleep


def make_response(
    status_code: int, json_data=None, headers: dict | None = None
) -> httpx.Response:
    """Create a mock httpx.Response."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.headers = headers or {}
    response.json.return_value = json_data if json_data is not None else []
    return response


def make_api(config: SourceConfig, side_effect) -> tuple[RecordsAPI, AsyncMock]:
    """Create a RecordsAPI whose HTTP client returns the given responses."""
    http_client = MagicMock(spec=httpx.AsyncClient)
    http_client.get = AsyncMock(side_effect=side_effect)
    return RecordsAPI(config, http_client), http_client.get


class TestRequests:
    """Tests for request construction."""

    async def test_sends_api_key_headers(self, config: SourceConfig) -> None:
        """Requests should carry the apikey and bearer token."""
        api, get = make_api(config, [make_response(200, [])])

        await api.list_invoices()

        headers = get.call_args.kwargs["headers"]
        assert headers["apikey"] == "anon-key"
        assert headers["Authorization"] == "Bearer anon-key"
        assert headers["Accept-Profile"] == "public"

    async def test_invoices_url_and_date_filters(self, config: SourceConfig) -> None:
        """Invoice dates should be filtered inclusively."""
        api, get = make_api(config, [make_response(200, [])])

        await api.list_invoices(date(2024, 1, 1), date(2024, 1, 31))

        assert get.call_args.args[0] == "https://demo.supabase.co/rest/v1/invoices"
        params = get.call_args.kwargs["params"]
        assert ("invoice_date", "gte.2024-01-01") in params
        assert ("invoice_date", "lte.2024-01-31") in params

    async def test_no_filters_without_dates(self, config: SourceConfig) -> None:
        """Without dates no date filter should be sent."""
        api, get = make_api(config, [make_response(200, [])])

        await api.list_platform_transactions()

        keys = [key for key, _ in get.call_args.kwargs["params"]]
        assert "transaction_date" not in keys

    async def test_posted_entries_only(self, config: SourceConfig) -> None:
        """Journal entries should be limited to posted ones with embedded lines."""
        api, get = make_api(config, [make_response(200, [])])

        await api.list_posted_journal_entries(date(2024, 1, 1), None)

        params = dict(get.call_args.kwargs["params"])
        assert params["status"] == "eq.posted"
        assert "journal_entry_lines(" in params["select"]
        assert params["entry_date"] == "gte.2024-01-01"

    async def test_active_accounts_ordered(self, config: SourceConfig) -> None:
        """Accounts should be active only and ordered by number."""
        api, get = make_api(config, [make_response(200, [])])

        await api.list_active_accounts()

        params = dict(get.call_args.kwargs["params"])
        assert params["is_active"] == "eq.true"
        assert params["order"] == "account_number"


class TestParsing:
    """Tests for parsing backend rows."""

    async def test_parses_journal_entries(self, config: SourceConfig) -> None:
        """Embedded lines and accounts should be parsed."""
        rows = [
            {
                "id": "e1",
                "entry_number": "JE-0001",
                "status": "posted",
                "journal_entry_lines": [
                    {
                        "id": "l1",
                        "account_id": "a1",
                        "debit": 100,
                        "credit": 0,
                        "accounts": {"id": "a1", "account_name": "Cash", "account_type": "Asset"},
                    }
                ],
            }
        ]
        api, _ = make_api(config, [make_response(200, rows)])

        entries = await api.list_posted_journal_entries()

        assert entries[0].lines[0].account_type is AccountType.ASSET

    async def test_invalid_rows_raise(self, config: SourceConfig) -> None:
        """Rows that do not match the model should raise RecordValidationError."""
        api, _ = make_api(config, [make_response(200, [{"id": "a1"}])])

        with pytest.raises(RecordValidationError):
            await api.list_active_accounts()


class TestPagination:
    """Tests for limit/offset pagination."""

    async def test_single_short_page(self, config: SourceConfig) -> None:
        """A page shorter than the page size should end the iteration."""
        api, get = make_api(config, [make_response(200, [{"id": "1"}, {"id": "2"}])])

        rows = await api._get_all("invoices", [("select", "*")])

        assert len(rows) == 2
        get.assert_called_once()

    async def test_fetches_following_pages(self, config: SourceConfig) -> None:
        """Full pages should be followed by the next offset."""
        api, get = make_api(
            config,
            [
                make_response(200, [{"id": "1"}, {"id": "2"}]),
                make_response(200, [{"id": "3"}, {"id": "4"}]),
                make_response(200, [{"id": "5"}]),
            ],
        )

        rows = [row async for row in api._iter_rows("invoices", [], page_size=2)]

        assert [row["id"] for row in rows] == ["1", "2", "3", "4", "5"]
        assert get.call_count == 3
        offsets = [dict(call.kwargs["params"])["offset"] for call in get.call_args_list]
        assert offsets == ["0", "2", "4"]

    async def test_exact_multiple_ends_on_empty_page(self, config: SourceConfig) -> None:
        """An empty page after full pages should end the iteration."""
        api, get = make_api(
            config,
            [make_response(200, [{"id": "1"}, {"id": "2"}]), make_response(200, [])],
        )

        rows = [row async for row in api._iter_rows("invoices", [], page_size=2)]

        assert len(rows) == 2
        assert get.call_count == 2


class TestRateLimitRetry:
    """Tests for automatic retry on rate limit errors."""

    async def test_retries_on_rate_limit_and_succeeds(
        self, config: SourceConfig, no_sleep: AsyncMock
    ) -> None:
        """Should retry when 429 is returned and succeed after."""
        api, get = make_api(
            config,
            [
                make_response(429, headers={"Retry-After": "1"}),
                make_response(429, headers={"Retry-After": "1"}),
                make_response(200, [{"invoice_type": "sales"}]),
            ],
        )

        invoices = await api.list_invoices()

        assert get.call_count == 3
        assert len(invoices) == 1

    async def test_retries_without_retry_after_header(
        self, config: SourceConfig, no_sleep: AsyncMock
    ) -> None:
        """Should fall back to exponential backoff when no Retry-After header."""
        api, get = make_api(config, [make_response(429), make_response(200, [])])

        await api.list_invoices()

        assert get.call_count == 2
        no_sleep.assert_called_once()
        assert no_sleep.call_args.args[0] >= 2

    async def test_honors_retry_after(
        self, config: SourceConfig, no_sleep: AsyncMock
    ) -> None:
        """The Retry-After value should be used as the wait."""
        api, _ = make_api(
            config,
            [make_response(429, headers={"Retry-After": "7"}), make_response(200, [])],
        )

        await api.list_invoices()

        assert no_sleep.call_args.args[0] == 7.0

    async def test_gives_up_after_max_attempts(
        self, config: SourceConfig, no_sleep: AsyncMock
    ) -> None:
        """Should raise SourceRateLimitError after 5 attempts."""
        api, get = make_api(config, lambda *args, **kwargs: make_response(429))

        with pytest.raises(SourceRateLimitError):
            await api.list_invoices()

        assert get.call_count == 5

    async def test_does_not_retry_other_errors(
        self, config: SourceConfig, no_sleep: AsyncMock
    ) -> None:
        """Non rate-limit errors should be raised immediately."""
        api, get = make_api(config, [make_response(500, {"message": "boom"})])

        with pytest.raises(SourceError, match="boom"):
            await api.list_invoices()

        assert get.call_count == 1
