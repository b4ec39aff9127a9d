"""Application port for reading ledger source records."""

from datetime import date
from typing import Protocol

from freightdesk.domain.models import (
    Account,
    Expense,
    Invoice,
    JournalEntry,
    VendorBill,
)


class RecordsRepositoryPort(Protocol):
    """Port exposing read access to invoices, expenses, bills and accounts.

    Document lists come back fully materialized, ordered by date
    descending.
    """

    def fetch_invoices(
        self,
        party_type: str | None = None,
        party_id: str | None = None,
    ) -> list[Invoice]:
        """Return invoices, optionally for one party type or party."""

    def fetch_expenses(self) -> list[Expense]:
        """Return every expense."""

    def fetch_vendor_bills(
        self,
        vendor_id: str | None = None,
    ) -> list[VendorBill]:
        """Return vendor bills, optionally for one vendor."""

    def fetch_journal_entries(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        account_code: str | None = None,
    ) -> list[JournalEntry]:
        """Return general-ledger postings within an inclusive date range."""

    def fetch_accounts(self) -> list[Account]:
        """Return the chart of accounts with stored balances."""


__all__ = ["RecordsRepositoryPort"]
