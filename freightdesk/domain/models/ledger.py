"""Ledger view models built from source documents."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from freightdesk.domain.models.records import JournalEntry


@dataclass(frozen=True)
class PartyRef:
    """Resolved counterparty of a monetary record."""

    party_type: str
    party_id: str
    party_name: str


@dataclass(frozen=True)
class DerivedLedgerEntry:
    """Display-ready projection of an invoice, expense, or vendor bill.

    Attributes:
        id: Identifier of the source document.
        party_type: ``customer`` or ``vendor``.
        party_id: Resolved counterparty id.
        party_name: Resolved counterparty name.
        invoice_number: Document reference shown in the ledger.
        job_number: Shipment job reference, empty when absent.
        description: Ledger line description.
        date: Document date.
        status: Lifecycle status of the source document.
        total: Nominal amount in the display currency.
        paid: Settled amount in the display currency.
        outstanding: ``max(total - paid, 0)``.
        source: ``invoice``, ``expense`` or ``vendor_bill``.
        category: Expense or bill category, when the source has one.
    """

    id: str
    party_type: str
    party_id: str
    party_name: str
    invoice_number: str
    job_number: str
    description: str
    date: date | None
    status: str
    total: Decimal
    paid: Decimal
    outstanding: Decimal
    source: str
    category: str | None = None


@dataclass(frozen=True)
class LedgerEntryWithBalance(DerivedLedgerEntry):
    """Derived entry annotated with its running balance in one sequence."""

    balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class LedgerSummary:
    """Totals shown on ledger summary cards."""

    entry_count: int
    total: Decimal
    paid: Decimal
    outstanding: Decimal
    current_balance: Decimal
    currency_code: str


@dataclass(frozen=True)
class AccountActivityRow:
    """General-ledger posting with its debit-minus-credit running balance."""

    entry: JournalEntry
    debit: Decimal
    credit: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AccountActivity:
    """Postings of an account and their totals."""

    rows: list[AccountActivityRow] = field(default_factory=list)
    total_debit: Decimal = Decimal("0")
    total_credit: Decimal = Decimal("0")

    @property
    def balance(self) -> Decimal:
        """Return total debit minus total credit."""
        return self.total_debit - self.total_credit


__all__ = [
    "PartyRef",
    "DerivedLedgerEntry",
    "LedgerEntryWithBalance",
    "LedgerSummary",
    "AccountActivityRow",
    "AccountActivity",
]
