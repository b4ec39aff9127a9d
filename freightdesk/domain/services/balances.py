"""Running balance accumulation over ledger sequences."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import fields
from datetime import date
from decimal import Decimal
from enum import Enum
from logging import Logger, getLogger

from freightdesk.domain.models.ledger import (
    AccountActivity,
    AccountActivityRow,
    DerivedLedgerEntry,
    LedgerEntryWithBalance,
    LedgerSummary,
)
from freightdesk.domain.models.records import JournalEntry
from freightdesk.domain.services.parsing import NumericPolicy, resolve_amount
from freightdesk.utils.decimal_utils import ZERO

_default_logger = getLogger(__name__)


def outstanding_contribution(entry: DerivedLedgerEntry) -> Decimal:
    """Contribution of an entry to a receivable or payable ledger."""
    return entry.outstanding


def net_contribution(entry: DerivedLedgerEntry) -> Decimal:
    """Contribution of an entry to the combined general ledger."""
    return entry.total - entry.paid


class LedgerView(str, Enum):
    """Ledger views and the contribution each one accumulates."""

    RECEIVABLE = "receivable"
    PAYABLE = "payable"
    GENERAL = "general"

    @property
    def contribution(self) -> Callable[[DerivedLedgerEntry], Decimal]:
        if self is LedgerView.GENERAL:
            return net_contribution
        return outstanding_contribution


def chronological_order(items: Iterable, date_of: Callable) -> list:
    """Stable sort by ascending date; undated items go last."""
    return sorted(
        items,
        key=lambda item: (date_of(item) is None, date_of(item) or date.min),
    )


def running_totals(contributions: Iterable[Decimal]) -> list[Decimal]:
    """Fold contributions into cumulative sums, left to right."""
    totals: list[Decimal] = []
    balance = ZERO
    for contribution in contributions:
        balance += contribution
        totals.append(balance)
    return totals


def accumulate_running_balance(
    entries: Iterable[DerivedLedgerEntry],
    view: LedgerView = LedgerView.RECEIVABLE,
    *,
    chronological: bool = True,
) -> list[LedgerEntryWithBalance]:
    """Annotate entries with a running balance.

    Args:
        entries: Derived entries, typically in store order.
        view: Ledger view selecting the per-entry contribution.
        chronological: Sort by date ascending before folding. When False
            the input order is folded as given.

    Returns:
        list[LedgerEntryWithBalance]: Entries in folded order with
        ``balance[i] = balance[i-1] + contribution[i]``.
    """
    ordered = (
        chronological_order(entries, lambda entry: entry.date)
        if chronological
        else list(entries)
    )
    balances = running_totals(view.contribution(entry) for entry in ordered)
    return [
        LedgerEntryWithBalance(**_entry_values(entry), balance=balance)
        for entry, balance in zip(ordered, balances)
    ]


def current_balance(entries: Sequence[LedgerEntryWithBalance]) -> Decimal:
    """Return the final running balance, or 0 for an empty ledger."""
    if not entries:
        return ZERO
    return entries[-1].balance


def summarize_ledger(
    entries: Sequence[LedgerEntryWithBalance],
    currency_code: str,
) -> LedgerSummary:
    """Compute summary card totals for a ledger."""
    return LedgerSummary(
        entry_count=len(entries),
        total=sum((entry.total for entry in entries), ZERO),
        paid=sum((entry.paid for entry in entries), ZERO),
        outstanding=sum((entry.outstanding for entry in entries), ZERO),
        current_balance=current_balance(entries),
        currency_code=currency_code,
    )


def accumulate_account_activity(
    postings: Iterable[JournalEntry],
    *,
    chronological: bool = True,
    numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
    logger: Logger | None = None,
) -> AccountActivity:
    """Fold general-ledger postings into a debit-minus-credit balance.

    Args:
        postings: Journal entries of one account or of the whole ledger.
        chronological: Sort by date ascending before folding.
        numeric_policy: Handling of missing or malformed amounts.
        logger: Logger used for substituted amounts.

    Returns:
        AccountActivity: Rows with running balances and debit/credit totals.
    """
    logger = logger or _default_logger
    ordered = (
        chronological_order(postings, lambda posting: posting.date)
        if chronological
        else list(postings)
    )
    rows: list[AccountActivityRow] = []
    balance = ZERO
    total_debit = ZERO
    total_credit = ZERO
    for posting in ordered:
        debit = resolve_amount(
            posting.debit,
            policy=numeric_policy,
            field="debit",
            record_id=posting.id,
            logger=logger,
        )
        credit = resolve_amount(
            posting.credit,
            policy=numeric_policy,
            field="credit",
            record_id=posting.id,
            logger=logger,
        )
        balance += debit - credit
        total_debit += debit
        total_credit += credit
        rows.append(
            AccountActivityRow(
                entry=posting,
                debit=debit,
                credit=credit,
                balance=balance,
            )
        )
    return AccountActivity(
        rows=rows,
        total_debit=total_debit,
        total_credit=total_credit,
    )


def _entry_values(entry: DerivedLedgerEntry) -> dict:
    return {
        item.name: getattr(entry, item.name)
        for item in fields(DerivedLedgerEntry)
    }


__all__ = [
    "LedgerView",
    "outstanding_contribution",
    "net_contribution",
    "chronological_order",
    "running_totals",
    "accumulate_running_balance",
    "current_balance",
    "summarize_ledger",
    "accumulate_account_activity",
]
