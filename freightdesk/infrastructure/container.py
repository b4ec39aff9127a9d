"""Composition root for wiring infrastructure adapters."""

from freightdesk.application.ports.database import DatabaseEnginePort
from freightdesk.application.ports.records_repository import RecordsRepositoryPort
from freightdesk.application.use_cases import (
    GenerateBalanceSheetUseCase,
    GenerateProfitLossUseCase,
    GetAccountLedgerUseCase,
    GetGeneralLedgerUseCase,
    GetPartyLedgerUseCase,
)
from freightdesk.domain.services.currency import (
    DEFAULT_CURRENCY_TABLE,
    CurrencyTable,
)
from freightdesk.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from freightdesk.infrastructure.logging.logger import get_app_logger
from freightdesk.infrastructure.records_repository import (
    SqlAlchemyRecordsRepository,
)
from freightdesk.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_records_repository(
    db_port: DatabaseEnginePort | None = None,
) -> RecordsRepositoryPort:
    """Return the SQL repository of ledger source records."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRecordsRepository(resolved_db)


def build_currency_table() -> CurrencyTable:
    """Return the static currency table."""
    return DEFAULT_CURRENCY_TABLE


def build_settings() -> LedgerSettings:
    """Return ledger settings read from the environment."""
    return LedgerSettings.from_env(build_currency_table())


def build_party_ledger_use_case(
    repository: RecordsRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetPartyLedgerUseCase:
    """Return the receivable/payable ledger use case."""
    resolved_settings = settings or build_settings()
    return GetPartyLedgerUseCase(
        repository or build_records_repository(),
        logger=get_app_logger(),
        currency_table=build_currency_table(),
        numeric_policy=resolved_settings.numeric_policy,
        epsilon=resolved_settings.settled_epsilon,
    )


def build_general_ledger_use_case(
    repository: RecordsRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetGeneralLedgerUseCase:
    """Return the general ledger use case."""
    resolved_settings = settings or build_settings()
    return GetGeneralLedgerUseCase(
        repository or build_records_repository(),
        logger=get_app_logger(),
        currency_table=build_currency_table(),
        numeric_policy=resolved_settings.numeric_policy,
    )


def build_account_ledger_use_case(
    repository: RecordsRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetAccountLedgerUseCase:
    """Return the per-account ledger use case."""
    resolved_settings = settings or build_settings()
    return GetAccountLedgerUseCase(
        repository or build_records_repository(),
        logger=get_app_logger(),
        numeric_policy=resolved_settings.numeric_policy,
    )


def build_profit_loss_use_case(
    repository: RecordsRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GenerateProfitLossUseCase:
    """Return the profit and loss statement use case."""
    resolved_settings = settings or build_settings()
    return GenerateProfitLossUseCase(
        repository or build_records_repository(),
        logger=get_app_logger(),
        currency_table=build_currency_table(),
        numeric_policy=resolved_settings.numeric_policy,
    )


def build_balance_sheet_use_case(
    repository: RecordsRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GenerateBalanceSheetUseCase:
    """Return the balance sheet use case."""
    resolved_settings = settings or build_settings()
    return GenerateBalanceSheetUseCase(
        repository or build_records_repository(),
        logger=get_app_logger(),
        currency_table=build_currency_table(),
        numeric_policy=resolved_settings.numeric_policy,
    )


__all__ = [
    "build_database_adapter",
    "build_records_repository",
    "build_currency_table",
    "build_settings",
    "build_party_ledger_use_case",
    "build_general_ledger_use_case",
    "build_account_ledger_use_case",
    "build_profit_loss_use_case",
    "build_balance_sheet_use_case",
]
