"""Base REST client with common functionality."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ledger_reports.exceptions import SourceAuthError, SourceError, SourceRateLimitError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from ledger_reports.config import SourceConfig

logger = logging.getLogger(__name__)

QueryParams = list[tuple[str, str]]

PAGE_SIZE = 1000


def _wait_for_rate_limit(retry_state: RetryCallState) -> float:
    """Custom wait strategy that respects Retry-After header.

    If the exception has a retry_after value, use it.
    Otherwise, fall back to exponential backoff.
    """
    exception = retry_state.outcome.exception() if retry_state.outcome else None

    if isinstance(exception, SourceRateLimitError) and exception.retry_after:
        wait_time = float(exception.retry_after)
        logger.info("Rate limited, waiting %s seconds (from Retry-After header)", wait_time)
        return wait_time

    # Exponential backoff: 2, 4, 8, 16... capped at 60 seconds
    exp_wait = wait_exponential(multiplier=1, min=2, max=60)
    wait_time = exp_wait(retry_state)
    logger.info("Rate limited, waiting %.1f seconds (exponential backoff)", wait_time)
    return wait_time


class BaseAPI:
    """Base class for table endpoints of the PostgREST backend.

    Provides authenticated GET requests, pagination and error handling.
    """

    def __init__(
        self,
        config: SourceConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._http_client = http_client

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.config.api_key,
            "Authorization": f"Bearer {self.config.api_key}",
            "Accept": "application/json",
            "Accept-Profile": self.config.schema,
        }

    @retry(
        retry=retry_if_exception_type(SourceRateLimitError),
        wait=_wait_for_rate_limit,
        stop=stop_after_attempt(5),
        reraise=True,
    )
    async def _get(self, table: str, params: QueryParams) -> list[dict[str, Any]]:
        """Fetch rows from a table.

        Automatically retries on rate limit (429) with exponential backoff,
        respecting Retry-After header when provided.

        Args:
            table: Table name (e.g., "invoices")
            params: PostgREST query parameters; keys may repeat

        Returns:
            Parsed JSON rows

        Raises:
            SourceError: On API error
            SourceRateLimitError: On rate limit (429) after max retries
        """
        url = f"{self.config.rest_url}/{table}"

        logger.debug("Request: GET %s", url)
        logger.debug("Params: %s", params)

        if self._http_client is not None:
            response = await self._http_client.get(url, params=params, headers=self._headers())
        else:
            # Fallback: create per-request client (no pooling)
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await client.get(url, params=params, headers=self._headers())

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> list[dict[str, Any]]:
        """Handle API response, raising appropriate errors."""
        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise SourceRateLimitError(
                "Rate limit exceeded",
                retry_after=int(retry_after) if retry_after else None,
            )

        if response.status_code >= 400:
            try:
                error_body = response.json()
            except ValueError:
                error_body = None

            error_msg = f"API error: {response.status_code}"
            error_code = None
            if isinstance(error_body, dict):
                # PostgREST error format
                error_msg = error_body.get("message") or error_msg
                error_code = error_body.get("code")

            error_cls = SourceAuthError if response.status_code in (401, 403) else SourceError
            raise error_cls(
                error_msg,
                status_code=response.status_code,
                error_code=error_code,
                response_body=error_body,
            )

        if response.status_code == 204:
            return []

        result: list[dict[str, Any]] = response.json()
        return result

    async def _iter_rows(
        self,
        table: str,
        params: QueryParams,
        *,
        page_size: int = PAGE_SIZE,
    ) -> AsyncIterator[dict[str, Any]]:
        """Iterate over every matching row, fetching page by page."""
        offset = 0
        while True:
            page = await self._get(
                table,
                [*params, ("limit", str(page_size)), ("offset", str(offset))],
            )
            for row in page:
                yield row
            if len(page) < page_size:
                return
            offset += page_size

    async def _get_all(self, table: str, params: QueryParams) -> list[dict[str, Any]]:
        """Fetch every matching row."""
        return [row async for row in self._iter_rows(table, params)]
