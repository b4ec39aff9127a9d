"""Application use cases package."""

from .generate_balance_sheet import (
    BalanceSheetStatement,
    GenerateBalanceSheetUseCase,
)
from .generate_profit_loss import (
    GenerateProfitLossUseCase,
    ProfitLossStatement,
)
from .get_account_ledger import AccountLedger, GetAccountLedgerUseCase
from .get_general_ledger import GetGeneralLedgerUseCase
from .get_party_ledger import GetPartyLedgerUseCase, PartyLedger

__all__ = [
    "BalanceSheetStatement",
    "GenerateBalanceSheetUseCase",
    "GenerateProfitLossUseCase",
    "ProfitLossStatement",
    "AccountLedger",
    "GetAccountLedgerUseCase",
    "GetGeneralLedgerUseCase",
    "GetPartyLedgerUseCase",
    "PartyLedger",
]
