"""Domain models package."""

from .accounts import ACCOUNT_TYPES, STANDARD_ACCOUNTS, Account
from .ledger import (
    AccountActivity,
    AccountActivityRow,
    DerivedLedgerEntry,
    LedgerEntryWithBalance,
    LedgerSummary,
    PartyRef,
)
from .records import Expense, Invoice, JournalEntry, RawAmount, VendorBill
from .statements import (
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

__all__ = [
    "ACCOUNT_TYPES",
    "STANDARD_ACCOUNTS",
    "Account",
    "AccountActivity",
    "AccountActivityRow",
    "DerivedLedgerEntry",
    "LedgerEntryWithBalance",
    "LedgerSummary",
    "PartyRef",
    "Expense",
    "Invoice",
    "JournalEntry",
    "RawAmount",
    "VendorBill",
    "AssetsSection",
    "BalanceSheetStatement",
    "CostOfServicesSection",
    "CurrentAssetsSection",
    "CurrentLiabilitiesSection",
    "EquitySection",
    "FixedAssetsSection",
    "LiabilitiesSection",
    "LongTermLiabilitiesSection",
    "OperatingExpensesSection",
    "OtherExpensesSection",
    "ProfitLossStatement",
    "RevenueSection",
]
