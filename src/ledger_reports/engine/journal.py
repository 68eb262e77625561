"""Journal entry balance validation and pre-posting checks."""

import logging
import re
from collections.abc import Iterable
from decimal import Decimal

from ledger_reports.models import (
    BALANCE_TOLERANCE,
    JournalBalance,
    JournalEntry,
    JournalEntryLine,
    Movement,
    PostingCheck,
)
from ledger_reports.models.amounts import total

logger = logging.getLogger(__name__)

ENTRY_NUMBER_PREFIX = "JE"
MIN_POSTABLE_LINES = 2

_TRAILING_NUMBER = re.compile(r"(\d+)$")


def validate_journal_entry_balance(
    lines: Iterable[Movement] | None,
    *,
    tolerance: Decimal = BALANCE_TOLERANCE,
) -> JournalBalance:
    """Check that an entry's debits and credits agree within tolerance.

    This is a predicate only: an unbalanced entry is reported through
    ``is_balanced``, never raised.
    """
    lines = list(lines or ())
    total_debits = total(line.debit for line in lines)
    total_credits = total(line.credit for line in lines)
    difference = abs(total_debits - total_credits)

    return JournalBalance(
        is_balanced=difference < tolerance,
        total_debits=total_debits,
        total_credits=total_credits,
        difference=difference,
    )


def is_effective_line(line: JournalEntryLine) -> bool:
    """Return True if the line names an account and moves money."""
    return bool(line.account_id) and (line.debit != 0 or line.credit != 0)


def check_entry_postable(
    entry: JournalEntry,
    *,
    tolerance: Decimal = BALANCE_TOLERANCE,
) -> PostingCheck:
    """Run the checks an entry must pass before it may be posted.

    Nothing is posted here; the caller decides what to do with the result.
    """
    balance = validate_journal_entry_balance(entry.lines, tolerance=tolerance)
    effective = sum(1 for line in entry.lines if is_effective_line(line))

    problems: list[str] = []
    if entry.is_posted:
        problems.append("Entry is already posted")
    if not balance.is_balanced:
        problems.append(
            f"Debits and credits must be equal (difference {balance.difference})"
        )
    if effective < MIN_POSTABLE_LINES:
        problems.append(f"Journal entry must have at least {MIN_POSTABLE_LINES} lines")

    if problems:
        logger.debug("Entry %s cannot be posted: %s", entry.entry_number or entry.id, problems)

    return PostingCheck(balance=balance, effective_lines=effective, problems=problems)


def next_entry_number(last_entry_number: str | None) -> str:
    """Return the entry number following ``last_entry_number``.

    Numbers look like ``JE-0001``; with no previous entry (or one without a
    trailing number) the sequence starts at ``JE-0001``.
    """
    last = 0
    if last_entry_number:
        match = _TRAILING_NUMBER.search(last_entry_number.strip())
        if match:
            last = int(match.group(1))
    return f"{ENTRY_NUMBER_PREFIX}-{last + 1:04d}"
