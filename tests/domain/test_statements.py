"""Tests for profit and loss and balance sheet aggregation."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from freightdesk.domain.models import Account, JournalEntry
from freightdesk.domain.services.statements import (
    build_balance_sheet,
    build_profit_loss,
    format_period,
)


def _posting(posting_id: str, code: str, debit="0", credit="0", **kwargs):
    return JournalEntry(
        id=posting_id,
        date=date(2024, 6, 1),
        account_code=code,
        debit=debit,
        credit=credit,
        **kwargs,
    )


def _account(code: str, account_type: str, balance, **kwargs) -> Account:
    return Account(
        code=code,
        name=code,
        account_type=account_type,
        balance=balance,
        **kwargs,
    )


def test_profit_loss_lines_and_subtotals() -> None:
    postings = [
        _posting("1", "4100", credit="10000"),
        _posting("2", "4000", credit="2000"),
        _posting("3", "4000", debit="500"),
        _posting("4", "5000", debit="6000"),
        _posting("5", "5100", debit="1000"),
        _posting("6", "5200", debit="2000"),
        _posting("7", "5300", debit="800"),
        _posting("8", "5900", debit="100"),
        _posting("9", "5950", debit="400"),
        _posting("10", "1000", debit="99999"),
    ]

    statement = build_profit_loss(
        postings,
        date(2024, 1, 1),
        date(2024, 12, 31),
        logger=MagicMock(),
    )

    assert statement.revenue.freight_revenue == Decimal("10000")
    assert statement.revenue.service_revenue == Decimal("1500")
    assert statement.revenue.total == Decimal("11500")
    assert statement.cost_of_services.total == Decimal("7000")
    assert statement.gross_profit == Decimal("4500")
    assert statement.operating_expenses.salaries == Decimal("2000")
    assert statement.operating_expenses.rent == Decimal("800")
    assert statement.operating_expenses.total == Decimal("2800")
    assert statement.operating_income == Decimal("1700")
    assert statement.other_expenses.interest_expense == Decimal("100")
    assert statement.other_expenses.taxes == Decimal("400")
    assert statement.net_income == Decimal("1200")
    assert statement.gross_margin == Decimal("4500") / Decimal("11500") * 100
    assert statement.net_margin == Decimal("1200") / Decimal("11500") * 100
    assert statement.period == "2024-01-01 to 2024-12-31"
    assert statement.currency_code == "USD"


def test_profit_loss_with_no_revenue_has_zero_margins() -> None:
    statement = build_profit_loss(
        [_posting("1", "5300", debit="800")],
        None,
        None,
    )

    assert statement.revenue.total == 0
    assert statement.gross_margin == 0
    assert statement.net_margin == 0
    assert statement.net_income == Decimal("-800")


def test_profit_loss_of_empty_period_is_all_zero() -> None:
    statement = build_profit_loss([], None, None)

    assert statement.net_income == 0
    assert statement.gross_margin == 0
    assert statement.period == "inception to today"


def test_profit_loss_reports_catch_all_and_skipped_codes() -> None:
    logger = MagicMock()
    postings = [
        _posting("1", "4550", credit="100"),
        _posting("2", "5450", debit="30"),
        _posting("3", "5450", debit="20"),
        _posting("4", "7000", debit="999"),
    ]

    statement = build_profit_loss(postings, None, None, logger=logger)

    assert statement.revenue.other_income == Decimal("100")
    assert statement.operating_expenses.other == Decimal("50")
    assert statement.unmapped_codes == ("4550", "5450")
    assert statement.skipped_codes == ("7000",)
    assert logger.warning.call_count == 3


def test_profit_loss_converts_posting_currency() -> None:
    statement = build_profit_loss(
        [_posting("1", "4100", credit="100", currency="EUR")],
        None,
        None,
        currency_code="USD",
    )

    assert statement.revenue.total == Decimal("108.00")


def test_balance_sheet_sections_and_totals() -> None:
    accounts = [
        _account("1000", "asset", "5000"),
        _account("1100", "asset", "3000"),
        _account("1200", "asset", "500"),
        _account("1300", "asset", "200"),
        _account("1500", "asset", "10000"),
        _account("1510", "asset", "-2500"),
        _account("1800", "asset", "300"),
        _account("2000", "liability", "1500"),
        _account("2100", "liability", "400"),
        _account("2200", "liability", "1000"),
        _account("2500", "liability", "6000"),
        _account("3000", "equity", "5000"),
        _account("3100", "equity", "1600"),
        _account("4100", "revenue", "4000"),
        _account("5000", "expense", "2000"),
        _account("9000", "other", "123"),
        _account("1400", "asset", "777", is_active=False),
    ]

    statement = build_balance_sheet(accounts, date(2024, 6, 30), logger=MagicMock())

    assets = statement.assets
    assert assets.current_assets.total == Decimal("8700")
    assert assets.fixed_assets.net == Decimal("7500")
    assert assets.other_assets == Decimal("300")
    assert assets.total_assets == Decimal("16500")
    assert statement.liabilities.current_liabilities.total == Decimal("2900")
    assert statement.liabilities.long_term_liabilities.total == Decimal("6000")
    assert statement.liabilities.total_liabilities == Decimal("8900")
    assert statement.equity.current_year_earnings == Decimal("2000")
    assert statement.equity.total_equity == Decimal("8600")
    assert statement.total_liabilities_and_equity == Decimal("17500")
    assert statement.unmapped_codes == ("1800",)
    assert statement.skipped_codes == ("9000",)
    assert statement.is_balanced is False


def test_balance_sheet_totals_are_consistent() -> None:
    accounts = [
        _account("1000", "asset", "1000"),
        _account("1500", "asset", "400"),
        _account("1510", "asset", "-100"),
        _account("1900", "asset", "50"),
        _account("2000", "liability", "300"),
        _account("2900", "liability", "200"),
        _account("3000", "equity", "850"),
    ]

    statement = build_balance_sheet(accounts, None, logger=MagicMock())
    assets = statement.assets

    assert assets.total_assets == (
        assets.current_assets.total + assets.fixed_assets.net + assets.other_assets
    )
    assert statement.total_liabilities_and_equity == (
        statement.liabilities.total_liabilities + statement.equity.total_equity
    )
    assert statement.liabilities.long_term_liabilities.other_long_term == Decimal(
        "200"
    )
    assert statement.is_balanced is True


def test_balance_sheet_of_empty_chart_is_zero() -> None:
    statement = build_balance_sheet([], None)

    assert statement.assets.total_assets == 0
    assert statement.total_liabilities_and_equity == 0
    assert statement.is_balanced is True


def test_format_period() -> None:
    assert format_period(date(2024, 1, 1), None) == "2024-01-01 to today"


def test_profit_loss_ignores_balance_sheet_catch_all_codes() -> None:
    logger = MagicMock()
    postings = [
        _posting("1", "1050", debit="10"),
        _posting("2", "4100", credit="60"),
    ]

    statement = build_profit_loss(postings, None, None, logger=logger)

    assert statement.revenue.total == Decimal("60")
    assert statement.unmapped_codes == ()
    assert statement.skipped_codes == ()
    logger.warning.assert_not_called()


def test_balance_sheet_converted_to_pounds_stays_balanced() -> None:
    accounts = [
        _account("1000", "asset", "100"),
        _account("1100", "asset", "200"),
        _account("2000", "liability", "150"),
        _account("3000", "equity", "150"),
    ]

    in_dollars = build_balance_sheet(accounts, None, logger=MagicMock())
    in_pounds = build_balance_sheet(
        accounts,
        None,
        currency_code="GBP",
        logger=MagicMock(),
    )

    assert in_dollars.is_balanced is True
    assert in_pounds.is_balanced is True
    assert in_pounds.assets.total_assets.quantize(Decimal("0.01")) == Decimal(
        "236.22"
    )
