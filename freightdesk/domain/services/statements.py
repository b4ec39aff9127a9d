"""Profit and loss and balance sheet aggregation.

Both builders are pure: they fold a snapshot of postings or accounts into
line totals, then derive subtotals in a fixed order.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger, getLogger

from freightdesk.domain.constants import BASE_CURRENCY
from freightdesk.domain.models.accounts import Account
from freightdesk.domain.models.records import JournalEntry
from freightdesk.domain.models.statements import (
    AssetsSection,
    BalanceSheetStatement,
    CostOfServicesSection,
    CurrentAssetsSection,
    CurrentLiabilitiesSection,
    EquitySection,
    FixedAssetsSection,
    LiabilitiesSection,
    LongTermLiabilitiesSection,
    OperatingExpensesSection,
    OtherExpensesSection,
    ProfitLossStatement,
    RevenueSection,
)
from freightdesk.domain.policies.account_routing import (
    AccountRoute,
    BalanceSheetLine,
    ProfitLossLine,
    route_account_code,
)
from freightdesk.domain.services.currency import (
    DEFAULT_CURRENCY_TABLE,
    CurrencyTable,
    convert_amount,
)
from freightdesk.domain.services.normalization import normalize_account_code
from freightdesk.domain.services.parsing import NumericPolicy, resolve_amount
from freightdesk.utils.decimal_utils import ZERO, percent_of

_default_logger = getLogger(__name__)


class _RouteLog:
    """Collects catch-all and unmatched codes while folding.

    When ``line_type`` is given, codes routed to another statement are
    ignored without being recorded.
    """

    def __init__(self, logger: Logger, line_type: type | None = None) -> None:
        self._logger = logger
        self._line_type = line_type
        self.unmapped: list[str] = []
        self.skipped: list[str] = []

    def route(self, raw_code) -> AccountRoute | None:
        code = normalize_account_code(raw_code)
        route = route_account_code(code)
        if route is None:
            if code not in self.skipped:
                self._logger.warning(
                    f"Account code {code!r} matches no statement line; skipped"
                )
                self.skipped.append(code)
            return None
        if self._line_type is not None and not isinstance(
            route.line,
            self._line_type,
        ):
            return None
        if not route.exact and code not in self.unmapped:
            self._logger.warning(
                f"Account code {code} routed to catch-all {route.line.value}"
            )
            self.unmapped.append(code)
        return route


def build_profit_loss(
    postings: Iterable[JournalEntry],
    start_date: date | None,
    end_date: date | None,
    *,
    currency_code: str = BASE_CURRENCY,
    currency_table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
    numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
    logger: Logger | None = None,
) -> ProfitLossStatement:
    """Aggregate general-ledger postings into a profit and loss statement.

    Args:
        postings: Postings already restricted to the period.
        start_date: First day of the period.
        end_date: Last day of the period.
        currency_code: Currency of the statement.
        currency_table: Rates used to convert posting amounts.
        numeric_policy: Handling of missing or malformed amounts.
        logger: Logger used for routing warnings.

    Returns:
        ProfitLossStatement: Line totals, subtotals, and margins.
    """
    logger = logger or _default_logger
    routes = _RouteLog(logger, ProfitLossLine)
    lines = {line: ZERO for line in ProfitLossLine}

    for posting in postings:
        route = routes.route(posting.account_code)
        if route is None:
            continue
        debit, credit = _posting_amounts(
            posting,
            currency_code,
            currency_table,
            numeric_policy,
            logger,
        )
        if route.line.is_revenue:
            lines[route.line] += credit - debit
        else:
            lines[route.line] += debit - credit

    revenue = RevenueSection(
        service_revenue=lines[ProfitLossLine.SERVICE_REVENUE],
        freight_revenue=lines[ProfitLossLine.FREIGHT_REVENUE],
        other_income=lines[ProfitLossLine.OTHER_INCOME],
        total=(
            lines[ProfitLossLine.SERVICE_REVENUE]
            + lines[ProfitLossLine.FREIGHT_REVENUE]
            + lines[ProfitLossLine.OTHER_INCOME]
        ),
    )
    cost_of_services = CostOfServicesSection(
        freight_costs=lines[ProfitLossLine.FREIGHT_COSTS],
        handling_costs=lines[ProfitLossLine.HANDLING_COSTS],
        total=(
            lines[ProfitLossLine.FREIGHT_COSTS]
            + lines[ProfitLossLine.HANDLING_COSTS]
        ),
    )
    gross_profit = revenue.total - cost_of_services.total
    gross_margin = percent_of(gross_profit, revenue.total)

    operating_lines = (
        ProfitLossLine.SALARIES,
        ProfitLossLine.RENT,
        ProfitLossLine.UTILITIES,
        ProfitLossLine.INSURANCE,
        ProfitLossLine.DEPRECIATION,
        ProfitLossLine.MARKETING,
        ProfitLossLine.ADMINISTRATIVE,
        ProfitLossLine.OTHER_OPERATING,
    )
    operating_expenses = OperatingExpensesSection(
        salaries=lines[ProfitLossLine.SALARIES],
        rent=lines[ProfitLossLine.RENT],
        utilities=lines[ProfitLossLine.UTILITIES],
        insurance=lines[ProfitLossLine.INSURANCE],
        depreciation=lines[ProfitLossLine.DEPRECIATION],
        marketing=lines[ProfitLossLine.MARKETING],
        administrative=lines[ProfitLossLine.ADMINISTRATIVE],
        other=lines[ProfitLossLine.OTHER_OPERATING],
        total=sum((lines[line] for line in operating_lines), ZERO),
    )
    operating_income = gross_profit - operating_expenses.total

    other_expenses = OtherExpensesSection(
        interest_expense=lines[ProfitLossLine.INTEREST_EXPENSE],
        taxes=lines[ProfitLossLine.TAXES],
        total=(
            lines[ProfitLossLine.INTEREST_EXPENSE]
            + lines[ProfitLossLine.TAXES]
        ),
    )
    net_income = operating_income - other_expenses.total
    net_margin = percent_of(net_income, revenue.total)

    return ProfitLossStatement(
        period=format_period(start_date, end_date),
        start_date=start_date,
        end_date=end_date,
        currency_code=currency_code,
        revenue=revenue,
        cost_of_services=cost_of_services,
        gross_profit=gross_profit,
        gross_margin=gross_margin,
        operating_expenses=operating_expenses,
        operating_income=operating_income,
        other_expenses=other_expenses,
        net_income=net_income,
        net_margin=net_margin,
        unmapped_codes=tuple(routes.unmapped),
        skipped_codes=tuple(routes.skipped),
    )


def build_balance_sheet(
    accounts: Iterable[Account],
    as_of_date: date | None,
    *,
    currency_code: str = BASE_CURRENCY,
    currency_table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
    numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
    logger: Logger | None = None,
) -> BalanceSheetStatement:
    """Aggregate stored account balances into a balance sheet.

    Revenue and expense balances that have not been closed roll into
    current year earnings.

    Args:
        accounts: Chart of accounts with stored balances.
        as_of_date: Date the balances represent.
        currency_code: Currency of the statement.
        currency_table: Rates used to convert account balances.
        numeric_policy: Handling of missing or malformed balances.
        logger: Logger used for routing warnings.

    Returns:
        BalanceSheetStatement: Sections and totals.
    """
    logger = logger or _default_logger
    routes = _RouteLog(logger)
    lines = {line: ZERO for line in BalanceSheetLine}
    unclosed_income = ZERO

    for account in accounts:
        if not account.is_active:
            continue
        route = routes.route(account.code)
        if route is None:
            continue
        balance = resolve_amount(
            account.balance,
            policy=numeric_policy,
            field="balance",
            record_id=account.code,
            logger=logger,
            allow_negative=True,
        )
        balance = convert_amount(
            balance,
            account.currency,
            currency_code,
            currency_table,
        )
        if isinstance(route.line, BalanceSheetLine):
            lines[route.line] += balance
        elif route.line.is_revenue:
            unclosed_income += balance
        else:
            unclosed_income -= balance

    current_assets = CurrentAssetsSection(
        cash=lines[BalanceSheetLine.CASH],
        accounts_receivable=lines[BalanceSheetLine.ACCOUNTS_RECEIVABLE],
        inventory=lines[BalanceSheetLine.INVENTORY],
        prepaid_expenses=lines[BalanceSheetLine.PREPAID_EXPENSES],
        total=(
            lines[BalanceSheetLine.CASH]
            + lines[BalanceSheetLine.ACCOUNTS_RECEIVABLE]
            + lines[BalanceSheetLine.INVENTORY]
            + lines[BalanceSheetLine.PREPAID_EXPENSES]
        ),
    )
    fixed_assets = FixedAssetsSection(
        property_plant_equipment=lines[BalanceSheetLine.PROPERTY_PLANT_EQUIPMENT],
        accumulated_depreciation=lines[BalanceSheetLine.ACCUMULATED_DEPRECIATION],
        net=(
            lines[BalanceSheetLine.PROPERTY_PLANT_EQUIPMENT]
            + lines[BalanceSheetLine.ACCUMULATED_DEPRECIATION]
        ),
    )
    other_assets = lines[BalanceSheetLine.OTHER_ASSETS]
    assets = AssetsSection(
        current_assets=current_assets,
        fixed_assets=fixed_assets,
        other_assets=other_assets,
        total_assets=current_assets.total + fixed_assets.net + other_assets,
    )

    current_liabilities = CurrentLiabilitiesSection(
        accounts_payable=lines[BalanceSheetLine.ACCOUNTS_PAYABLE],
        accrued_expenses=lines[BalanceSheetLine.ACCRUED_EXPENSES],
        short_term_debt=lines[BalanceSheetLine.SHORT_TERM_DEBT],
        total=(
            lines[BalanceSheetLine.ACCOUNTS_PAYABLE]
            + lines[BalanceSheetLine.ACCRUED_EXPENSES]
            + lines[BalanceSheetLine.SHORT_TERM_DEBT]
        ),
    )
    long_term_liabilities = LongTermLiabilitiesSection(
        long_term_debt=lines[BalanceSheetLine.LONG_TERM_DEBT],
        other_long_term=lines[BalanceSheetLine.OTHER_LONG_TERM],
        total=(
            lines[BalanceSheetLine.LONG_TERM_DEBT]
            + lines[BalanceSheetLine.OTHER_LONG_TERM]
        ),
    )
    liabilities = LiabilitiesSection(
        current_liabilities=current_liabilities,
        long_term_liabilities=long_term_liabilities,
        total_liabilities=current_liabilities.total + long_term_liabilities.total,
    )

    current_year_earnings = (
        lines[BalanceSheetLine.CURRENT_YEAR_EARNINGS] + unclosed_income
    )
    equity = EquitySection(
        owners_equity=lines[BalanceSheetLine.OWNERS_EQUITY],
        retained_earnings=lines[BalanceSheetLine.RETAINED_EARNINGS],
        current_year_earnings=current_year_earnings,
        total_equity=(
            lines[BalanceSheetLine.OWNERS_EQUITY]
            + lines[BalanceSheetLine.RETAINED_EARNINGS]
            + current_year_earnings
        ),
    )

    return BalanceSheetStatement(
        as_of_date=as_of_date,
        currency_code=currency_code,
        assets=assets,
        liabilities=liabilities,
        equity=equity,
        total_liabilities_and_equity=(
            liabilities.total_liabilities + equity.total_equity
        ),
        unmapped_codes=tuple(routes.unmapped),
        skipped_codes=tuple(routes.skipped),
    )


def format_period(start_date: date | None, end_date: date | None) -> str:
    """Return a human label for a statement period."""
    start = start_date.isoformat() if start_date else "inception"
    end = end_date.isoformat() if end_date else "today"
    return f"{start} to {end}"


def _posting_amounts(
    posting: JournalEntry,
    currency_code: str,
    currency_table: CurrencyTable,
    numeric_policy: NumericPolicy,
    logger: Logger,
) -> tuple[Decimal, Decimal]:
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
    return (
        convert_amount(debit, posting.currency, currency_code, currency_table),
        convert_amount(credit, posting.currency, currency_code, currency_table),
    )


__all__ = ["build_profit_loss", "build_balance_sheet", "format_period"]
