"""Routing of account codes to statement lines.

Leaf lines are keyed by exact account code. Each first digit also has a
catch-all line for codes the chart does not list. Routes are checked
against the standard chart of accounts when this module is imported.
"""

from dataclasses import dataclass
from enum import Enum

from freightdesk.domain.models.accounts import STANDARD_ACCOUNTS


class ProfitLossLine(str, Enum):
    SERVICE_REVENUE = "service_revenue"
    FREIGHT_REVENUE = "freight_revenue"
    OTHER_INCOME = "other_income"
    FREIGHT_COSTS = "freight_costs"
    HANDLING_COSTS = "handling_costs"
    SALARIES = "salaries"
    RENT = "rent"
    UTILITIES = "utilities"
    INSURANCE = "insurance"
    DEPRECIATION = "depreciation"
    MARKETING = "marketing"
    ADMINISTRATIVE = "administrative"
    OTHER_OPERATING = "other_operating"
    INTEREST_EXPENSE = "interest_expense"
    TAXES = "taxes"

    @property
    def is_revenue(self) -> bool:
        """Revenue lines accumulate credit minus debit."""
        return self in REVENUE_LINES


class BalanceSheetLine(str, Enum):
    CASH = "cash"
    ACCOUNTS_RECEIVABLE = "accounts_receivable"
    INVENTORY = "inventory"
    PREPAID_EXPENSES = "prepaid_expenses"
    PROPERTY_PLANT_EQUIPMENT = "property_plant_equipment"
    ACCUMULATED_DEPRECIATION = "accumulated_depreciation"
    OTHER_ASSETS = "other_assets"
    ACCOUNTS_PAYABLE = "accounts_payable"
    ACCRUED_EXPENSES = "accrued_expenses"
    SHORT_TERM_DEBT = "short_term_debt"
    LONG_TERM_DEBT = "long_term_debt"
    OTHER_LONG_TERM = "other_long_term"
    OWNERS_EQUITY = "owners_equity"
    RETAINED_EARNINGS = "retained_earnings"
    CURRENT_YEAR_EARNINGS = "current_year_earnings"


StatementLine = ProfitLossLine | BalanceSheetLine

REVENUE_LINES = frozenset(
    {
        ProfitLossLine.SERVICE_REVENUE,
        ProfitLossLine.FREIGHT_REVENUE,
        ProfitLossLine.OTHER_INCOME,
    }
)

EXACT_ROUTES: dict[str, StatementLine] = {
    "1000": BalanceSheetLine.CASH,
    "1100": BalanceSheetLine.ACCOUNTS_RECEIVABLE,
    "1200": BalanceSheetLine.INVENTORY,
    "1300": BalanceSheetLine.PREPAID_EXPENSES,
    "1500": BalanceSheetLine.PROPERTY_PLANT_EQUIPMENT,
    "1510": BalanceSheetLine.ACCUMULATED_DEPRECIATION,
    "2000": BalanceSheetLine.ACCOUNTS_PAYABLE,
    "2100": BalanceSheetLine.ACCRUED_EXPENSES,
    "2200": BalanceSheetLine.SHORT_TERM_DEBT,
    "2500": BalanceSheetLine.LONG_TERM_DEBT,
    "3000": BalanceSheetLine.OWNERS_EQUITY,
    "3100": BalanceSheetLine.RETAINED_EARNINGS,
    "3200": BalanceSheetLine.CURRENT_YEAR_EARNINGS,
    "4000": ProfitLossLine.SERVICE_REVENUE,
    "4100": ProfitLossLine.FREIGHT_REVENUE,
    "4900": ProfitLossLine.OTHER_INCOME,
    "5000": ProfitLossLine.FREIGHT_COSTS,
    "5100": ProfitLossLine.HANDLING_COSTS,
    "5200": ProfitLossLine.SALARIES,
    "5300": ProfitLossLine.RENT,
    "5400": ProfitLossLine.UTILITIES,
    "5500": ProfitLossLine.INSURANCE,
    "5600": ProfitLossLine.DEPRECIATION,
    "5700": ProfitLossLine.MARKETING,
    "5800": ProfitLossLine.ADMINISTRATIVE,
    "5900": ProfitLossLine.INTEREST_EXPENSE,
    "5950": ProfitLossLine.TAXES,
    "5999": ProfitLossLine.OTHER_OPERATING,
}

PREFIX_ROUTES: dict[str, StatementLine] = {
    "1": BalanceSheetLine.OTHER_ASSETS,
    "2": BalanceSheetLine.OTHER_LONG_TERM,
    "3": BalanceSheetLine.OWNERS_EQUITY,
    "4": ProfitLossLine.OTHER_INCOME,
    "5": ProfitLossLine.OTHER_OPERATING,
}

_EXPECTED_STATEMENT = {
    "asset": BalanceSheetLine,
    "liability": BalanceSheetLine,
    "equity": BalanceSheetLine,
    "revenue": ProfitLossLine,
    "expense": ProfitLossLine,
}


@dataclass(frozen=True)
class AccountRoute:
    """Line an account code routes to."""

    code: str
    line: StatementLine
    exact: bool


def route_account_code(code: str) -> AccountRoute | None:
    """Return the route of an account code, or None when nothing matches.

    Args:
        code: Account code such as ``4100``.

    Returns:
        AccountRoute | None: Exact route when the code is listed, the
        catch-all of its first digit otherwise, None for other codes.
    """
    cleaned = code.strip()
    line = EXACT_ROUTES.get(cleaned)
    if line is not None:
        return AccountRoute(code=cleaned, line=line, exact=True)
    if cleaned.isdigit():
        line = PREFIX_ROUTES.get(cleaned[0])
        if line is not None:
            return AccountRoute(code=cleaned, line=line, exact=False)
    return None


def validate_routes() -> None:
    """Check the routing tables against the standard chart of accounts.

    Raises:
        ValueError: If a standard account is unmapped, routes to a line of
            the wrong statement, or a line is reachable from no code.
    """
    seen_codes: set[str] = set()
    for account in STANDARD_ACCOUNTS:
        if account.code in seen_codes:
            raise ValueError(f"Duplicate account code in chart: {account.code}")
        seen_codes.add(account.code)
        line = EXACT_ROUTES.get(account.code)
        if line is None:
            raise ValueError(f"No statement line for account {account.code}")
        expected = _EXPECTED_STATEMENT[account.account_type]
        if not isinstance(line, expected):
            raise ValueError(
                f"Account {account.code} ({account.account_type}) routes to "
                f"{line.value}, expected a {expected.__name__}"
            )
    for prefix, line in PREFIX_ROUTES.items():
        expected = BalanceSheetLine if prefix in "123" else ProfitLossLine
        if not isinstance(line, expected):
            raise ValueError(f"Catch-all for prefix {prefix} has wrong statement")
    routed = set(EXACT_ROUTES.values()) | set(PREFIX_ROUTES.values())
    missing = (set(ProfitLossLine) | set(BalanceSheetLine)) - routed
    if missing:
        names = ", ".join(sorted(line.value for line in missing))
        raise ValueError(f"Statement lines without a route: {names}")


validate_routes()


__all__ = [
    "ProfitLossLine",
    "BalanceSheetLine",
    "StatementLine",
    "REVENUE_LINES",
    "EXACT_ROUTES",
    "PREFIX_ROUTES",
    "AccountRoute",
    "route_account_code",
    "validate_routes",
]
