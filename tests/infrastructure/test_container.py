"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

from freightdesk.application.use_cases import (
    GenerateBalanceSheetUseCase,
    GenerateProfitLossUseCase,
    GetAccountLedgerUseCase,
    GetGeneralLedgerUseCase,
    GetPartyLedgerUseCase,
)
from freightdesk.domain.services.currency import DEFAULT_CURRENCY_TABLE
from freightdesk.domain.services.parsing import NumericPolicy
from freightdesk.infrastructure import container
from freightdesk.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from freightdesk.infrastructure.records_repository import (
    SqlAlchemyRecordsRepository,
)
from freightdesk.infrastructure.settings import LedgerSettings


def test_build_database_adapter() -> None:
    assert isinstance(
        container.build_database_adapter(),
        SqlAlchemyDatabaseEngineAdapter,
    )


def test_build_records_repository_uses_given_port() -> None:
    db_port = MagicMock()

    repository = container.build_records_repository(db_port)

    assert isinstance(repository, SqlAlchemyRecordsRepository)
    assert repository._db_port is db_port


def test_build_currency_table_returns_defaults() -> None:
    assert container.build_currency_table() is DEFAULT_CURRENCY_TABLE


def test_use_case_builders_apply_settings(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    repository = MagicMock()
    settings = LedgerSettings(
        settled_epsilon=Decimal("1"),
        numeric_policy=NumericPolicy.REJECT,
    )

    party = container.build_party_ledger_use_case(repository, settings)
    general = container.build_general_ledger_use_case(repository, settings)
    account = container.build_account_ledger_use_case(repository, settings)
    profit_loss = container.build_profit_loss_use_case(repository, settings)
    balance_sheet = container.build_balance_sheet_use_case(repository, settings)

    assert isinstance(party, GetPartyLedgerUseCase)
    assert party._epsilon == Decimal("1")
    assert party._numeric_policy is NumericPolicy.REJECT
    assert isinstance(general, GetGeneralLedgerUseCase)
    assert isinstance(account, GetAccountLedgerUseCase)
    assert isinstance(profit_loss, GenerateProfitLossUseCase)
    assert profit_loss._records_repository is repository
    assert isinstance(balance_sheet, GenerateBalanceSheetUseCase)
    assert balance_sheet._numeric_policy is NumericPolicy.REJECT


def test_builders_read_settings_when_missing(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(
        container,
        "build_settings",
        lambda: LedgerSettings(settled_epsilon=Decimal("2")),
    )

    use_case = container.build_party_ledger_use_case(MagicMock())

    assert use_case._epsilon == Decimal("2")
