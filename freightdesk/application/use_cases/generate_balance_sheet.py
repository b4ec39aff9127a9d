"""Use case to generate a balance sheet from stored account balances."""

from datetime import date

from freightdesk.application.ports.records_repository import RecordsRepositoryPort
from freightdesk.domain.constants import BASE_CURRENCY
from freightdesk.domain.models import BalanceSheetStatement
from freightdesk.domain.services.currency import (
    DEFAULT_CURRENCY_TABLE,
    CurrencyTable,
)
from freightdesk.domain.services.parsing import NumericPolicy
from freightdesk.domain.services.statements import build_balance_sheet
from freightdesk.infrastructure.logging.logger import get_app_logger


class GenerateBalanceSheetUseCase:
    """Aggregate the chart of accounts into a balance sheet."""

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

    def execute(
        self,
        as_of_date: date | None = None,
        currency_code: str = BASE_CURRENCY,
    ) -> BalanceSheetStatement:
        """Return the balance sheet as of a date.

        Args:
            as_of_date: Date label of the stored balances.
            currency_code: Currency of the statement.

        Returns:
            BalanceSheetStatement: Aggregated statement.
        """
        accounts = self._records_repository.fetch_accounts()
        statement = build_balance_sheet(
            accounts,
            as_of_date,
            currency_code=currency_code,
            currency_table=self._currency_table,
            numeric_policy=self._numeric_policy,
            logger=self._logger,
        )
        if not statement.is_balanced:
            self._logger.warning(
                "Balance sheet does not balance: "
                f"assets={statement.assets.total_assets}, "
                f"liabilities_and_equity={statement.total_liabilities_and_equity}"
            )
        self._logger.info(
            f"Balance sheet computed from {len(accounts)} accounts: "
            f"assets={statement.assets.total_assets}, currency={currency_code}"
        )
        return statement


__all__ = ["GenerateBalanceSheetUseCase", "BalanceSheetStatement"]
