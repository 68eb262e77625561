"""Load report records from JSON files."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ledger_reports.engine import ReportInputs
from ledger_reports.exceptions import InputFileError, RecordValidationError
from ledger_reports.models import (
    Account,
    Invoice,
    JournalEntry,
    JournalEntryLine,
    PlatformTransaction,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_SECTIONS: dict[str, type[BaseModel]] = {
    "invoices": Invoice,
    "platform_transactions": PlatformTransaction,
    "journal_entries": JournalEntry,
    "accounts": Account,
}


def parse_records(model: type[M], rows: Any, *, source: str) -> list[M]:
    """Validate a list of raw rows into models.

    A null section reads as empty.

    Raises:
        RecordValidationError: If a row is missing a required field or has a
            value of the wrong kind
    """
    if rows is None:
        return []
    try:
        return TypeAdapter(list[model]).validate_python(rows)  # type: ignore[valid-type]
    except ValidationError as e:
        msg = f"Invalid records in {source}: {e}"
        raise RecordValidationError(msg, source=source) from e


def inputs_from_data(data: Any, *, source: str = "input") -> ReportInputs:
    """Build ReportInputs from a mapping of section name to raw rows."""
    if not isinstance(data, dict):
        msg = f"Expected a JSON object in {source}"
        raise RecordValidationError(msg, source=source)

    parsed = {
        key: parse_records(model, data.get(key), source=f"{source}:{key}")
        for key, model in _SECTIONS.items()
    }
    logger.debug(
        "Loaded %s",
        ", ".join(f"{len(rows)} {key}" for key, rows in parsed.items()),
    )
    return ReportInputs.of(**parsed)


def _read_json(path: Path) -> Any:
    try:
        with path.open() as f:
            return json.load(f)
    except FileNotFoundError:
        msg = f"Input file not found: {path}"
        raise InputFileError(msg, path=path) from None
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Could not read {path}: {e}"
        raise InputFileError(msg, path=path) from e


def _section(data: Any, *keys: str) -> Any:
    """Pick the first present key from an object; a bare list is returned as-is."""
    if isinstance(data, dict):
        for key in keys:
            if key in data:
                return data[key]
        return None
    return data


def load_inputs(path: Path) -> ReportInputs:
    """Load invoices, platform transactions, journal entries and accounts.

    The file is a JSON object with any of the keys ``invoices``,
    ``platform_transactions``, ``journal_entries`` and ``accounts``; missing
    keys read as empty collections.

    Raises:
        InputFileError: If the file is missing, not JSON, or holds invalid rows
    """
    data = _read_json(path)
    try:
        return inputs_from_data(data, source=str(path))
    except RecordValidationError as e:
        raise InputFileError(e.message, path=path) from e


def load_journal_lines(path: Path) -> list[JournalEntryLine]:
    """Load journal lines from a list or an object with a ``lines`` key."""
    data = _section(_read_json(path), "lines", "journal_entry_lines")
    try:
        return parse_records(JournalEntryLine, data, source=str(path))
    except RecordValidationError as e:
        raise InputFileError(e.message, path=path) from e


def load_journal_entries(path: Path) -> list[JournalEntry]:
    """Load journal entries from a list or an object with ``journal_entries``."""
    data = _section(_read_json(path), "journal_entries")
    try:
        return parse_records(JournalEntry, data, source=str(path))
    except RecordValidationError as e:
        raise InputFileError(e.message, path=path) from e


def load_invoices(path: Path) -> list[Invoice]:
    """Load invoices from a list or an object with ``invoices``."""
    data = _section(_read_json(path), "invoices")
    try:
        return parse_records(Invoice, data, source=str(path))
    except RecordValidationError as e:
        raise InputFileError(e.message, path=path) from e
