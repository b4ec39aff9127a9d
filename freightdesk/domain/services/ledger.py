"""Derive ledger entries from invoices, expenses, and vendor bills.

Every function here is pure: it reads record snapshots and returns new
DerivedLedgerEntry objects in the requested display currency.
"""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger, getLogger

from freightdesk.domain.constants import (
    CLOSED_STATUSES,
    DEFAULT_EXPENSE_PARTY_NAME,
    DEFAULT_SETTLED_EPSILON,
    EXPENSE_CATEGORY_LABELS,
    VENDOR_BILL_CATEGORY_LABELS,
)
from freightdesk.domain.models.ledger import DerivedLedgerEntry
from freightdesk.domain.models.records import Expense, Invoice, VendorBill
from freightdesk.domain.services.currency import (
    DEFAULT_CURRENCY_TABLE,
    CurrencyTable,
    convert_amount,
)
from freightdesk.domain.services.normalization import normalize_status
from freightdesk.domain.services.parsing import NumericPolicy, resolve_amount
from freightdesk.domain.services.party import resolve_party
from freightdesk.domain.services.validation import (
    validate_paid_amount,
    validate_status,
)
from freightdesk.utils.decimal_utils import ZERO

_default_logger = getLogger(__name__)


def is_settled(
    entry: DerivedLedgerEntry,
    epsilon: Decimal = DEFAULT_SETTLED_EPSILON,
) -> bool:
    """Return True when an entry is paid off, cancelled, or negligible."""
    return entry.outstanding <= epsilon or entry.status in CLOSED_STATUSES


def derive_ledger_entries(
    invoices: Iterable[Invoice],
    display_currency: str,
    *,
    include_settled: bool = False,
    epsilon: Decimal = DEFAULT_SETTLED_EPSILON,
    currency_table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
    numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
    logger: Logger | None = None,
) -> list[DerivedLedgerEntry]:
    """Derive ledger entries from invoices.

    Args:
        invoices: Invoices in store order.
        display_currency: Currency of the derived amounts.
        include_settled: Keep paid, cancelled, and negligible invoices.
        epsilon: Outstanding amount at or below which an invoice is settled.
        currency_table: Rates used for conversion.
        numeric_policy: Handling of missing or malformed amounts.
        logger: Logger used for warnings.

    Returns:
        list[DerivedLedgerEntry]: Entries in input order, settled ones
        dropped unless ``include_settled`` is set.
    """
    logger = logger or _default_logger
    entries: list[DerivedLedgerEntry] = []
    for invoice in invoices:
        status = normalize_status(invoice.status)
        validate_status(invoice.id, status, logger)
        total, paid = _convert_pair(
            invoice.id,
            invoice.total,
            invoice.paid_amount,
            invoice.currency,
            display_currency,
            currency_table,
            numeric_policy,
            logger,
            total_field="total",
            paid_field="paid_amount",
        )
        party = resolve_party(invoice)
        entry = DerivedLedgerEntry(
            id=invoice.id,
            party_type=party.party_type,
            party_id=party.party_id,
            party_name=party.party_name,
            invoice_number=invoice.invoice_number or "",
            job_number=invoice.job_number or "",
            description=invoice.notes or f"Invoice {invoice.invoice_number}",
            date=invoice.invoice_date,
            status=status,
            total=total,
            paid=paid,
            outstanding=max(total - paid, ZERO),
            source="invoice",
        )
        if not include_settled and is_settled(entry, epsilon):
            continue
        entries.append(entry)
    return entries


def derive_expense_entries(
    expenses: Iterable[Expense],
    display_currency: str,
    *,
    currency_table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
    numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
    logger: Logger | None = None,
) -> list[DerivedLedgerEntry]:
    """Map every expense to one ledger entry, without filtering."""
    logger = logger or _default_logger
    entries: list[DerivedLedgerEntry] = []
    for expense in expenses:
        status = normalize_status(expense.status)
        amount = _convert_single(
            expense.id,
            expense.amount,
            expense.currency,
            display_currency,
            currency_table,
            numeric_policy,
            logger,
        )
        paid, outstanding = _split_by_status(amount, status)
        label_date = expense.date.isoformat() if expense.date else ""
        entries.append(
            DerivedLedgerEntry(
                id=expense.id,
                party_type="vendor",
                party_id=expense.category or "",
                party_name=EXPENSE_CATEGORY_LABELS.get(
                    expense.category,
                    DEFAULT_EXPENSE_PARTY_NAME,
                ),
                invoice_number=f"EXP-{label_date}",
                job_number=expense.job_number or "",
                description=(
                    expense.description
                    or expense.reference
                    or "Logistics Expense"
                ),
                date=expense.date,
                status=status,
                total=amount,
                paid=paid,
                outstanding=outstanding,
                source="expense",
                category=expense.category,
            )
        )
    return entries


def derive_vendor_bill_entries(
    bills: Iterable[VendorBill],
    display_currency: str,
    *,
    currency_table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
    numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
    logger: Logger | None = None,
) -> list[DerivedLedgerEntry]:
    """Map every vendor bill to one ledger entry, without filtering.

    Bills without a vendor name are labelled by their category.
    """
    logger = logger or _default_logger
    entries: list[DerivedLedgerEntry] = []
    for bill in bills:
        status = normalize_status(bill.status)
        amount = _convert_single(
            bill.id,
            bill.amount,
            bill.currency,
            display_currency,
            currency_table,
            numeric_policy,
            logger,
        )
        paid, outstanding = _split_by_status(amount, status)
        reference = bill.bill_number or bill.job_number or ""
        entries.append(
            DerivedLedgerEntry(
                id=bill.id,
                party_type="vendor",
                party_id=bill.vendor_id or "",
                party_name=(
                    bill.vendor_name
                    or VENDOR_BILL_CATEGORY_LABELS.get(bill.category or "", "")
                ),
                invoice_number=reference,
                job_number=bill.job_number or "",
                description=bill.description or f"Vendor bill {reference}".strip(),
                date=bill.date,
                status=status,
                total=amount,
                paid=paid,
                outstanding=outstanding,
                source="vendor_bill",
                category=bill.category,
            )
        )
    return entries


def _split_by_status(amount: Decimal, status: str) -> tuple[Decimal, Decimal]:
    if status == "paid":
        return amount, ZERO
    return ZERO, amount


def _convert_single(
    record_id: str,
    raw_amount,
    currency: str | None,
    display_currency: str,
    currency_table: CurrencyTable,
    numeric_policy: NumericPolicy,
    logger: Logger,
) -> Decimal:
    amount = resolve_amount(
        raw_amount,
        policy=numeric_policy,
        field="amount",
        record_id=record_id,
        logger=logger,
    )
    return convert_amount(amount, currency, display_currency, currency_table)


def _convert_pair(
    record_id: str,
    raw_total,
    raw_paid,
    currency: str | None,
    display_currency: str,
    currency_table: CurrencyTable,
    numeric_policy: NumericPolicy,
    logger: Logger,
    *,
    total_field: str,
    paid_field: str,
) -> tuple[Decimal, Decimal]:
    total = resolve_amount(
        raw_total,
        policy=numeric_policy,
        field=total_field,
        record_id=record_id,
        logger=logger,
    )
    paid = resolve_amount(
        raw_paid,
        policy=numeric_policy,
        field=paid_field,
        record_id=record_id,
        logger=logger,
    )
    total = convert_amount(total, currency, display_currency, currency_table)
    paid = convert_amount(paid, currency, display_currency, currency_table)
    validate_paid_amount(record_id, total, paid, logger)
    return total, paid


__all__ = [
    "is_settled",
    "derive_ledger_entries",
    "derive_expense_entries",
    "derive_vendor_bill_entries",
]
