"""Use case to build customer receivable and vendor payable ledgers."""

from dataclasses import dataclass
from decimal import Decimal

from freightdesk.application.ports.records_repository import RecordsRepositoryPort
from freightdesk.domain.constants import BASE_CURRENCY, DEFAULT_SETTLED_EPSILON
from freightdesk.domain.models import LedgerEntryWithBalance, LedgerSummary
from freightdesk.domain.services.balances import (
    LedgerView,
    accumulate_running_balance,
    summarize_ledger,
)
from freightdesk.domain.services.currency import (
    DEFAULT_CURRENCY_TABLE,
    CurrencyTable,
)
from freightdesk.domain.services.ledger import (
    derive_ledger_entries,
    derive_vendor_bill_entries,
    is_settled,
)
from freightdesk.domain.services.parsing import NumericPolicy
from freightdesk.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PartyLedger:
    """Ledger rows and summary for one view."""

    view: LedgerView
    entries: list[LedgerEntryWithBalance]
    summary: LedgerSummary


class GetPartyLedgerUseCase:
    """Derive receivable or payable ledgers from stored documents."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        logger=None,
        currency_table: CurrencyTable | None = None,
        numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
        epsilon: Decimal = DEFAULT_SETTLED_EPSILON,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing source documents.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_table: Optional rates used for conversion.
            numeric_policy: Handling of missing or malformed amounts.
            epsilon: Outstanding amount at or below which a record is settled.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()
        self._currency_table = currency_table or DEFAULT_CURRENCY_TABLE
        self._numeric_policy = numeric_policy
        self._epsilon = epsilon

    def execute(
        self,
        view: LedgerView = LedgerView.RECEIVABLE,
        display_currency: str = BASE_CURRENCY,
        party_id: str | None = None,
        include_settled: bool = False,
    ) -> PartyLedger:
        """Return the ledger for a view, optionally for one party.

        Args:
            view: RECEIVABLE for customers, PAYABLE for vendors.
            display_currency: Currency of the returned amounts.
            party_id: Optional customer or vendor id.
            include_settled: Keep settled documents in the ledger.

        Returns:
            PartyLedger: Entries with running balances and summary totals.

        Raises:
            ValueError: If ``view`` is the general ledger.
        """
        if view is LedgerView.GENERAL:
            raise ValueError("Use GetGeneralLedgerUseCase for the general ledger")
        party_type = "customer" if view is LedgerView.RECEIVABLE else "vendor"
        invoices = self._records_repository.fetch_invoices(
            party_type=party_type,
            party_id=party_id,
        )
        entries = derive_ledger_entries(
            invoices,
            display_currency,
            include_settled=include_settled,
            epsilon=self._epsilon,
            currency_table=self._currency_table,
            numeric_policy=self._numeric_policy,
            logger=self._logger,
        )
        if view is LedgerView.PAYABLE:
            bills = self._records_repository.fetch_vendor_bills(vendor_id=party_id)
            bill_entries = derive_vendor_bill_entries(
                bills,
                display_currency,
                currency_table=self._currency_table,
                numeric_policy=self._numeric_policy,
                logger=self._logger,
            )
            if not include_settled:
                bill_entries = [
                    entry
                    for entry in bill_entries
                    if not is_settled(entry, self._epsilon)
                ]
            entries.extend(bill_entries)

        ledger = accumulate_running_balance(entries, view)
        summary = summarize_ledger(ledger, display_currency)
        self._logger.info(
            f"{view.value.capitalize()} ledger built: entries={summary.entry_count}, "
            f"balance={summary.current_balance} {display_currency}"
        )
        return PartyLedger(view=view, entries=ledger, summary=summary)


__all__ = ["GetPartyLedgerUseCase", "PartyLedger"]
