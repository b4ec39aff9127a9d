"""Domain policies package."""

from .account_routing import (
    AccountRoute,
    BalanceSheetLine,
    ProfitLossLine,
    route_account_code,
    validate_routes,
)

__all__ = [
    "AccountRoute",
    "BalanceSheetLine",
    "ProfitLossLine",
    "route_account_code",
    "validate_routes",
]
