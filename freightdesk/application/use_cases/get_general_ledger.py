"""Use case to build the combined general ledger of documents."""

from freightdesk.application.ports.records_repository import RecordsRepositoryPort
from freightdesk.application.use_cases.get_party_ledger import PartyLedger
from freightdesk.domain.constants import BASE_CURRENCY
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
    derive_expense_entries,
    derive_ledger_entries,
    derive_vendor_bill_entries,
)
from freightdesk.domain.services.parsing import NumericPolicy
from freightdesk.infrastructure.logging.logger import get_app_logger


class GetGeneralLedgerUseCase:
    """Combine invoices, expenses and vendor bills into one ledger."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        logger=None,
        currency_table: CurrencyTable | None = None,
        numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
    ) -> None:
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()
        self._currency_table = currency_table or DEFAULT_CURRENCY_TABLE
        self._numeric_policy = numeric_policy

    def execute(self, display_currency: str = BASE_CURRENCY) -> PartyLedger:
        """Return every document with a total-minus-paid running balance."""
        invoices = self._records_repository.fetch_invoices()
        expenses = self._records_repository.fetch_expenses()
        bills = self._records_repository.fetch_vendor_bills()

        options = {
            "currency_table": self._currency_table,
            "numeric_policy": self._numeric_policy,
            "logger": self._logger,
        }
        entries = [
            *derive_ledger_entries(
                invoices,
                display_currency,
                include_settled=True,
                **options,
            ),
            *derive_expense_entries(expenses, display_currency, **options),
            *derive_vendor_bill_entries(bills, display_currency, **options),
        ]
        ledger = accumulate_running_balance(entries, LedgerView.GENERAL)
        summary = summarize_ledger(ledger, display_currency)
        self._logger.info(
            f"General ledger built: invoices={len(invoices)}, "
            f"expenses={len(expenses)}, bills={len(bills)}, "
            f"net={summary.current_balance} {display_currency}"
        )
        return PartyLedger(
            view=LedgerView.GENERAL,
            entries=ledger,
            summary=summary,
        )


__all__ = ["GetGeneralLedgerUseCase"]
