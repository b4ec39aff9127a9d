"""Domain package for ledger rules and core models."""

from .constants import BASE_CURRENCY, DEFAULT_SETTLED_EPSILON
from .errors import FreightDeskError, InvalidAmountError, UnknownCurrencyError
from .models import (
    Account,
    BalanceSheetStatement,
    DerivedLedgerEntry,
    Expense,
    Invoice,
    JournalEntry,
    LedgerEntryWithBalance,
    LedgerSummary,
    ProfitLossStatement,
    VendorBill,
)
from .policies import route_account_code
from .services import (
    DEFAULT_CURRENCY_TABLE,
    CurrencyTable,
    LedgerView,
    accumulate_running_balance,
    build_balance_sheet,
    build_profit_loss,
    convert_amount,
    derive_expense_entries,
    derive_ledger_entries,
    derive_vendor_bill_entries,
    format_amount,
)

__all__ = [
    "BASE_CURRENCY",
    "DEFAULT_SETTLED_EPSILON",
    "FreightDeskError",
    "InvalidAmountError",
    "UnknownCurrencyError",
    "Account",
    "BalanceSheetStatement",
    "DerivedLedgerEntry",
    "Expense",
    "Invoice",
    "JournalEntry",
    "LedgerEntryWithBalance",
    "LedgerSummary",
    "ProfitLossStatement",
    "VendorBill",
    "route_account_code",
    "DEFAULT_CURRENCY_TABLE",
    "CurrencyTable",
    "LedgerView",
    "accumulate_running_balance",
    "build_balance_sheet",
    "build_profit_loss",
    "convert_amount",
    "derive_expense_entries",
    "derive_ledger_entries",
    "derive_vendor_bill_entries",
    "format_amount",
]
