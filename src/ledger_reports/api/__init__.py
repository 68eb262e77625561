"""Backend API modules."""

from ledger_reports.api.records import RecordsAPI

__all__ = ["RecordsAPI"]
