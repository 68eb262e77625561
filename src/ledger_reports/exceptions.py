"""Typed exceptions for ledger-reports.

The calculation engine never raises for bad data; these cover the layers
around it (configuration, input files and the backend record source).
"""

from pathlib import Path
from typing import Any


class LedgerReportsError(Exception):
    """Base exception for all ledger-reports errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(LedgerReportsError):
    """Backend configuration is missing or unreadable."""


class RecordValidationError(LedgerReportsError):
    """Raw rows did not match the expected record shape."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        super().__init__(message)


class InputFileError(LedgerReportsError):
    """A JSON record file could not be read or parsed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class SourceError(LedgerReportsError):
    """Backend request error with status code and response details."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_code: str | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.response_body = response_body
        super().__init__(message)


class SourceAuthError(SourceError):
    """The backend rejected the API key (401/403)."""


class SourceRateLimitError(SourceError):
    """Rate limit exceeded - includes retry information."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 429,
        retry_after: int | None = None,
    ) -> None:
        self.retry_after = retry_after  # seconds until retry is allowed
        super().__init__(message, status_code=status_code)
