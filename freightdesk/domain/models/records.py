"""Source documents read from the record store.

Monetary fields keep the raw value handed over by the store. They are parsed
by the ledger services, which decide how absent or malformed values are
treated.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

RawAmount = Decimal | float | int | str | None


@dataclass(frozen=True)
class Invoice:
    """Customer or vendor invoice.

    Attributes:
        id: Store identifier.
        invoice_number: Human reference such as INV-2024-0042.
        invoice_date: Document date.
        status: Lifecycle status (draft, sent, paid, ...).
        total: Nominal amount in ``currency``.
        paid_amount: Amount already settled in ``currency``.
        currency: ISO currency code of the amounts.
        party_type: ``customer`` or ``vendor``; None means customer.
        party_id: Explicit counterparty id.
        party_name: Explicit counterparty display name.
        customer_id: Legacy customer id field.
        customer_name: Legacy customer name field.
        vendor_id: Legacy vendor id field.
        vendor_name: Legacy vendor name field.
        job_number: Optional shipment job reference.
        notes: Free text.
        due_date: Optional payment due date.
    """

    id: str
    invoice_number: str
    invoice_date: date | None
    status: str
    total: RawAmount = None
    paid_amount: RawAmount = None
    currency: str | None = "USD"
    party_type: str | None = None
    party_id: str | None = None
    party_name: str | None = None
    customer_id: str | None = None
    customer_name: str | None = None
    vendor_id: str | None = None
    vendor_name: str | None = None
    job_number: str | None = None
    notes: str | None = None
    due_date: date | None = None


@dataclass(frozen=True)
class Expense:
    """Company-owned operating expense."""

    id: str
    category: str
    date: date | None
    status: str
    amount: RawAmount = None
    currency: str | None = "USD"
    description: str | None = None
    reference: str | None = None
    job_number: str | None = None
    paid_date: date | None = None


@dataclass(frozen=True)
class VendorBill:
    """Bill received from a carrier, port, or other vendor."""

    id: str
    vendor_id: str | None
    vendor_name: str | None
    date: date | None
    status: str
    amount: RawAmount = None
    currency: str | None = "USD"
    bill_number: str | None = None
    job_number: str | None = None
    category: str | None = None
    description: str | None = None
    due_date: date | None = None
    paid_date: date | None = None


@dataclass(frozen=True)
class JournalEntry:
    """General-ledger posting against one account code."""

    id: str
    date: date | None
    account_code: str
    account_name: str = ""
    description: str = ""
    reference: str = ""
    debit: RawAmount = 0
    credit: RawAmount = 0
    currency: str | None = "USD"


__all__ = ["RawAmount", "Invoice", "Expense", "VendorBill", "JournalEntry"]
