"""Chart of accounts models."""

from dataclasses import dataclass

from freightdesk.domain.models.records import RawAmount

ACCOUNT_TYPES = ("asset", "liability", "equity", "revenue", "expense")


@dataclass(frozen=True)
class Account:
    """Account of the chart of accounts with its stored balance.

    Balances are stored on the account's natural side: assets and expenses
    carry debit balances, liabilities, equity and revenue carry credit
    balances. Contra accounts such as accumulated depreciation are negative.
    """

    code: str
    name: str
    account_type: str
    balance: RawAmount = None
    currency: str | None = "USD"
    parent_code: str | None = None
    is_active: bool = True


def _standard(code: str, name: str, account_type: str) -> Account:
    return Account(code=code, name=name, account_type=account_type, balance=0)


STANDARD_ACCOUNTS: tuple[Account, ...] = (
    _standard("1000", "Cash and Cash Equivalents", "asset"),
    _standard("1100", "Accounts Receivable", "asset"),
    _standard("1200", "Inventory", "asset"),
    _standard("1300", "Prepaid Expenses", "asset"),
    _standard("1500", "Property, Plant & Equipment", "asset"),
    _standard("1510", "Accumulated Depreciation", "asset"),
    _standard("2000", "Accounts Payable", "liability"),
    _standard("2100", "Accrued Expenses", "liability"),
    _standard("2200", "Short-term Debt", "liability"),
    _standard("2500", "Long-term Debt", "liability"),
    _standard("3000", "Owner's Equity", "equity"),
    _standard("3100", "Retained Earnings", "equity"),
    _standard("3200", "Current Year Earnings", "equity"),
    _standard("4000", "Service Revenue", "revenue"),
    _standard("4100", "Freight Revenue", "revenue"),
    _standard("4900", "Other Income", "revenue"),
    _standard("5000", "Freight Costs", "expense"),
    _standard("5100", "Handling Costs", "expense"),
    _standard("5200", "Salaries and Wages", "expense"),
    _standard("5300", "Rent", "expense"),
    _standard("5400", "Utilities", "expense"),
    _standard("5500", "Insurance", "expense"),
    _standard("5600", "Depreciation", "expense"),
    _standard("5700", "Marketing", "expense"),
    _standard("5800", "Administrative Expenses", "expense"),
    _standard("5900", "Interest Expense", "expense"),
    _standard("5950", "Income Tax", "expense"),
    _standard("5999", "Other Expenses", "expense"),
)


__all__ = ["ACCOUNT_TYPES", "Account", "STANDARD_ACCOUNTS"]
