"""Domain services package."""

from .balances import (
    LedgerView,
    accumulate_account_activity,
    accumulate_running_balance,
    current_balance,
    summarize_ledger,
)
from .currency import (
    DEFAULT_CURRENCY_TABLE,
    CurrencyTable,
    convert_amount,
    currency_options,
    format_amount,
    validate_currency_code,
)
from .ledger import (
    derive_expense_entries,
    derive_ledger_entries,
    derive_vendor_bill_entries,
    is_settled,
)
from .normalization import (
    normalize_account_code,
    normalize_currency_code,
    normalize_party_type,
    normalize_status,
)
from .parsing import (
    InvalidAmount,
    NumericPolicy,
    ParsedAmount,
    ValidAmount,
    parse_amount,
    resolve_amount,
)
from .party import resolve_party
from .statements import build_balance_sheet, build_profit_loss
from .validation import validate_paid_amount, validate_status

__all__ = [
    "LedgerView",
    "accumulate_account_activity",
    "accumulate_running_balance",
    "current_balance",
    "summarize_ledger",
    "DEFAULT_CURRENCY_TABLE",
    "CurrencyTable",
    "convert_amount",
    "currency_options",
    "format_amount",
    "validate_currency_code",
    "derive_expense_entries",
    "derive_ledger_entries",
    "derive_vendor_bill_entries",
    "is_settled",
    "normalize_account_code",
    "normalize_currency_code",
    "normalize_party_type",
    "normalize_status",
    "InvalidAmount",
    "NumericPolicy",
    "ParsedAmount",
    "ValidAmount",
    "parse_amount",
    "resolve_amount",
    "resolve_party",
    "build_balance_sheet",
    "build_profit_loss",
    "validate_paid_amount",
    "validate_status",
]
