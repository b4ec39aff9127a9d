"""Tests for running balance accumulation."""

from datetime import date
from decimal import Decimal

from freightdesk.domain.models import DerivedLedgerEntry, JournalEntry
from freightdesk.domain.services.balances import (
    LedgerView,
    accumulate_account_activity,
    accumulate_running_balance,
    chronological_order,
    current_balance,
    running_totals,
    summarize_ledger,
)


def _entry(
    entry_id: str,
    entry_date: date | None,
    total: str,
    paid: str = "0",
) -> DerivedLedgerEntry:
    total_value = Decimal(total)
    paid_value = Decimal(paid)
    return DerivedLedgerEntry(
        id=entry_id,
        party_type="customer",
        party_id="c-1",
        party_name="Acme",
        invoice_number=f"INV-{entry_id}",
        job_number="",
        description="",
        date=entry_date,
        status="sent",
        total=total_value,
        paid=paid_value,
        outstanding=max(total_value - paid_value, Decimal("0")),
        source="invoice",
    )


def test_running_totals_fold_left_to_right() -> None:
    assert running_totals([Decimal("1"), Decimal("2"), Decimal("3")]) == [
        Decimal("1"),
        Decimal("3"),
        Decimal("6"),
    ]
    assert running_totals([]) == []


def test_store_order_is_resorted_chronologically() -> None:
    """Entries delivered newest first are folded oldest first."""
    entries = [
        _entry("3", date(2024, 3, 1), "300"),
        _entry("1", date(2024, 1, 1), "100"),
        _entry("2", date(2024, 2, 1), "200"),
    ]

    ledger = accumulate_running_balance(entries)

    assert [row.id for row in ledger] == ["1", "2", "3"]
    assert [row.balance for row in ledger] == [
        Decimal("100"),
        Decimal("300"),
        Decimal("600"),
    ]


def test_undated_entries_go_last_and_ties_keep_input_order() -> None:
    entries = [
        _entry("undated", None, "5"),
        _entry("b", date(2024, 1, 1), "1"),
        _entry("a", date(2024, 1, 1), "1"),
    ]

    ordered = chronological_order(entries, lambda entry: entry.date)

    assert [entry.id for entry in ordered] == ["b", "a", "undated"]


def test_accumulation_is_deterministic() -> None:
    entries = [
        _entry("1", date(2024, 1, 1), "100", "25"),
        _entry("2", date(2024, 1, 2), "40"),
    ]

    first = accumulate_running_balance(entries)
    second = accumulate_running_balance(entries)

    assert [row.balance for row in first] == [row.balance for row in second]


def test_unsorted_fold_depends_on_input_order() -> None:
    entries = [
        _entry("1", date(2024, 1, 1), "100"),
        _entry("2", date(2024, 1, 2), "40"),
    ]

    forward = accumulate_running_balance(entries, chronological=False)
    backward = accumulate_running_balance(
        list(reversed(entries)), chronological=False
    )

    assert [row.balance for row in forward] == [Decimal("100"), Decimal("140")]
    assert [row.balance for row in backward] == [Decimal("40"), Decimal("140")]


def test_general_view_accumulates_total_minus_paid() -> None:
    """The general view lets overpayments reduce the balance."""
    entries = [
        _entry("1", date(2024, 1, 1), "100", "150"),
        _entry("2", date(2024, 1, 2), "80"),
    ]

    receivable = accumulate_running_balance(entries, LedgerView.RECEIVABLE)
    general = accumulate_running_balance(entries, LedgerView.GENERAL)

    assert [row.balance for row in receivable] == [Decimal("0"), Decimal("80")]
    assert [row.balance for row in general] == [Decimal("-50"), Decimal("30")]


def test_empty_ledger_has_zero_balance() -> None:
    ledger = accumulate_running_balance([])
    summary = summarize_ledger(ledger, "USD")

    assert ledger == []
    assert current_balance(ledger) == Decimal("0")
    assert summary.entry_count == 0
    assert summary.current_balance == Decimal("0")


def test_summary_totals() -> None:
    ledger = accumulate_running_balance(
        [
            _entry("1", date(2024, 1, 1), "100", "40"),
            _entry("2", date(2024, 1, 2), "50"),
        ]
    )

    summary = summarize_ledger(ledger, "EUR")

    assert summary.entry_count == 2
    assert summary.total == Decimal("150")
    assert summary.paid == Decimal("40")
    assert summary.outstanding == Decimal("110")
    assert summary.current_balance == Decimal("110")
    assert summary.currency_code == "EUR"


def test_account_activity_balance_is_debit_minus_credit() -> None:
    postings = [
        JournalEntry(id="j2", date=date(2024, 1, 5), account_code="1000",
                     credit="30"),
        JournalEntry(id="j1", date=date(2024, 1, 1), account_code="1000",
                     debit="100"),
        JournalEntry(id="j3", date=date(2024, 1, 9), account_code="1000",
                     debit="bad", credit="20"),
    ]

    activity = accumulate_account_activity(postings)

    assert [row.entry.id for row in activity.rows] == ["j1", "j2", "j3"]
    assert [row.balance for row in activity.rows] == [
        Decimal("100"),
        Decimal("70"),
        Decimal("50"),
    ]
    assert activity.total_debit == Decimal("100")
    assert activity.total_credit == Decimal("50")
    assert activity.balance == Decimal("50")
