"""Use case to generate a profit and loss statement for a period."""

from datetime import date

from freightdesk.application.ports.records_repository import RecordsRepositoryPort
from freightdesk.domain.constants import BASE_CURRENCY
from freightdesk.domain.models import ProfitLossStatement
from freightdesk.domain.services.currency import (
    DEFAULT_CURRENCY_TABLE,
    CurrencyTable,
)
from freightdesk.domain.services.parsing import NumericPolicy
from freightdesk.domain.services.statements import build_profit_loss
from freightdesk.infrastructure.logging.logger import get_app_logger


class GenerateProfitLossUseCase:
    """Aggregate general-ledger postings into a profit and loss statement."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        logger=None,
        currency_table: CurrencyTable | None = None,
        numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing general-ledger postings.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_table: Optional rates used for conversion.
            numeric_policy: Handling of missing or malformed amounts.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()
        self._currency_table = currency_table or DEFAULT_CURRENCY_TABLE
        self._numeric_policy = numeric_policy

    def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        currency_code: str = BASE_CURRENCY,
    ) -> ProfitLossStatement:
        """Return the profit and loss statement for the period.

        Args:
            start_date: Optional lower bound for posting dates.
            end_date: Optional upper bound for posting dates.
            currency_code: Currency of the statement.

        Returns:
            ProfitLossStatement: Aggregated statement.
        """
        postings = self._records_repository.fetch_journal_entries(
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched {len(postings)} postings for {start_date} to {end_date}"
        )
        statement = build_profit_loss(
            postings,
            start_date,
            end_date,
            currency_code=currency_code,
            currency_table=self._currency_table,
            numeric_policy=self._numeric_policy,
            logger=self._logger,
        )
        self._logger.info(
            f"Profit and loss computed: revenue={statement.revenue.total}, "
            f"net_income={statement.net_income}, currency={currency_code}"
        )
        return statement


__all__ = ["GenerateProfitLossUseCase", "ProfitLossStatement"]
