"""CLI adapter printing the profit and loss statement and balance sheet.

Dates come from ``STATEMENTS_START_DATE``, ``STATEMENTS_END_DATE`` and
``STATEMENTS_AS_OF_DATE`` (YYYY-MM-DD); the currency label comes from the
ledger settings.
"""

from datetime import date
import os

from freightdesk.domain.errors import FreightDeskError
from freightdesk.domain.models import BalanceSheetStatement, ProfitLossStatement
from freightdesk.domain.services.currency import format_amount
from freightdesk.infrastructure.container import (
    build_balance_sheet_use_case,
    build_profit_loss_use_case,
    build_records_repository,
    build_settings,
)
from freightdesk.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _print_profit_loss(statement: ProfitLossStatement) -> None:
    code = statement.currency_code
    print(f"Profit & Loss ({statement.period}, {code})")
    print(f"  Revenue:            {format_amount(statement.revenue.total, code)}")
    print(
        "  Cost of services:   "
        f"{format_amount(statement.cost_of_services.total, code)}"
    )
    print(
        f"  Gross profit:       {format_amount(statement.gross_profit, code)} "
        f"({statement.gross_margin:.2f}%)"
    )
    print(
        "  Operating expenses: "
        f"{format_amount(statement.operating_expenses.total, code)}"
    )
    print(f"  Operating income:   {format_amount(statement.operating_income, code)}")
    print(
        "  Other expenses:     "
        f"{format_amount(statement.other_expenses.total, code)}"
    )
    print(
        f"  Net income:         {format_amount(statement.net_income, code)} "
        f"({statement.net_margin:.2f}%)"
    )
    if statement.unmapped_codes:
        print(f"  Catch-all accounts: {', '.join(statement.unmapped_codes)}")


def _print_balance_sheet(statement: BalanceSheetStatement) -> None:
    code = statement.currency_code
    as_of = statement.as_of_date.isoformat() if statement.as_of_date else "today"
    print(f"Balance Sheet (as of {as_of}, {code})")
    print(
        "  Total assets:       "
        f"{format_amount(statement.assets.total_assets, code)}"
    )
    print(
        "  Total liabilities:  "
        f"{format_amount(statement.liabilities.total_liabilities, code)}"
    )
    print(
        "  Total equity:       "
        f"{format_amount(statement.equity.total_equity, code)}"
    )
    print(
        "  Liabilities+equity: "
        f"{format_amount(statement.total_liabilities_and_equity, code)}"
    )
    print(f"  Balanced:           {'yes' if statement.is_balanced else 'no'}")


def main() -> None:
    """Generate both statements and print them."""
    logger = get_app_logger()
    start_date = _parse_date(os.getenv("STATEMENTS_START_DATE"), logger)
    end_date = _parse_date(os.getenv("STATEMENTS_END_DATE"), logger)
    as_of_date = _parse_date(os.getenv("STATEMENTS_AS_OF_DATE"), logger)

    try:
        settings = build_settings()
        repository = build_records_repository()
        profit_loss = build_profit_loss_use_case(repository, settings).execute(
            start_date=start_date,
            end_date=end_date,
            currency_code=settings.statement_currency,
        )
        balance_sheet = build_balance_sheet_use_case(
            repository, settings
        ).execute(
            as_of_date=as_of_date or end_date,
            currency_code=settings.statement_currency,
        )
    except (RuntimeError, FreightDeskError) as exc:
        logger.error(str(exc))
        return

    _print_profit_loss(profit_loss)
    print()
    _print_balance_sheet(balance_sheet)


if __name__ == "__main__":  # pragma: no cover
    main()
