"""Tests for loading records from JSON files."""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest

from ledger_reports.exceptions import InputFileError, RecordValidationError
from ledger_reports.inputs import (
    inputs_from_data,
    load_inputs,
    load_invoices,
    load_journal_entries,
    load_journal_lines,
    parse_records,
)
from ledger_reports.models import Invoice


def write_json(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data))
    return path


class TestParseRecords:
    """Tests for parse_records."""

    def test_parses_rows(self) -> None:
        """Rows should validate into models."""
        invoices = parse_records(
            Invoice, [{"invoice_type": "sales", "amount_paid": "10"}], source="test"
        )

        assert invoices[0].amount_paid == Decimal("10")

    def test_none_is_empty(self) -> None:
        """A null section should read as no rows."""
        assert parse_records(Invoice, None, source="test") == []

    def test_invalid_row_raises(self) -> None:
        """A malformed row should raise RecordValidationError."""
        with pytest.raises(RecordValidationError) as exc_info:
            parse_records(Invoice, [{"invoice_type": "refund"}], source="invoices")

        assert exc_info.value.source == "invoices"
        assert "invoices" in exc_info.value.message


class TestInputsFromData:
    """Tests for inputs_from_data."""

    def test_missing_sections_are_empty(self) -> None:
        """Sections absent from the object should be empty tuples."""
        inputs = inputs_from_data({"invoices": [{"invoice_type": "sales"}]})

        assert len(inputs.invoices) == 1
        assert inputs.platform_transactions == ()
        assert inputs.journal_entries == ()
        assert inputs.accounts == ()

    def test_rejects_non_object(self) -> None:
        """A top-level list is not a valid report input."""
        with pytest.raises(RecordValidationError):
            inputs_from_data([], source="x.json")


class TestLoadInputs:
    """Tests for load_inputs."""

    def test_loads_all_sections(self, tmp_path: Path) -> None:
        """Every section should be parsed from the file."""
        path = write_json(
            tmp_path / "books.json",
            {
                "invoices": [{"invoice_type": "sales", "amount_paid": 100}],
                "platform_transactions": [
                    {"transaction_type": "revenue", "amount": 5, "platforms": {"name": "Etsy"}}
                ],
                "journal_entries": [
                    {
                        "status": "posted",
                        "journal_entry_lines": [
                            {"account_id": "cash", "debit": 5, "credit": 0},
                            {"account_id": "sales", "debit": 0, "credit": 5},
                        ],
                    }
                ],
                "accounts": [{"id": "cash", "account_name": "Cash", "account_type": "Asset"}],
            },
        )

        inputs = load_inputs(path)

        assert len(inputs.invoices) == 1
        assert inputs.platform_transactions[0].platform_name == "Etsy"
        assert len(inputs.journal_entries[0].lines) == 2
        assert inputs.accounts[0].account_name == "Cash"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file should raise InputFileError with the path."""
        path = tmp_path / "missing.json"

        with pytest.raises(InputFileError, match="not found") as exc_info:
            load_inputs(path)

        assert exc_info.value.path == path

    def test_invalid_json(self, tmp_path: Path) -> None:
        """A file that is not JSON should raise InputFileError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(InputFileError, match="Could not read"):
            load_inputs(path)

    def test_invalid_records_become_file_errors(self, tmp_path: Path) -> None:
        """Row validation failures should surface as InputFileError."""
        path = write_json(tmp_path / "bad.json", {"accounts": [{"id": "x"}]})

        with pytest.raises(InputFileError) as exc_info:
            load_inputs(path)

        assert isinstance(exc_info.value.__cause__, RecordValidationError)


class TestSectionLoaders:
    """Tests for the single-section loaders."""

    def test_invoices_from_bare_list(self, tmp_path: Path) -> None:
        """A bare list should be read as the records themselves."""
        path = write_json(tmp_path / "inv.json", [{"invoice_type": "sales", "amount_due": 5}])

        assert load_invoices(path)[0].amount_due == Decimal("5")

    def test_invoices_from_object(self, tmp_path: Path) -> None:
        """An object should be read through its invoices key."""
        path = write_json(tmp_path / "inv.json", {"invoices": [{"invoice_type": "purchase"}]})

        assert len(load_invoices(path)) == 1

    def test_journal_entries(self, tmp_path: Path) -> None:
        """Entries should load from the journal_entries key."""
        path = write_json(
            tmp_path / "je.json",
            {"journal_entries": [{"entry_number": "JE-0001", "journal_entry_lines": []}]},
        )

        assert load_journal_entries(path)[0].entry_number == "JE-0001"

    def test_journal_lines(self, tmp_path: Path) -> None:
        """Lines should load from a lines key."""
        path = write_json(tmp_path / "lines.json", {"lines": [{"debit": "1000", "credit": "0"}]})

        assert load_journal_lines(path)[0].debit == Decimal("1000")

    def test_object_without_section_is_empty(self, tmp_path: Path) -> None:
        """An object lacking the section key should give no records."""
        path = write_json(tmp_path / "other.json", {"accounts": []})

        assert load_invoices(path) == []
