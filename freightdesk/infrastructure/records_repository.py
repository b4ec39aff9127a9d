"""SQLAlchemy-backed repository for ledger source records."""

from datetime import date, datetime

from sqlalchemy import text

from freightdesk.application.ports.database import DatabaseEnginePort
from freightdesk.application.ports.records_repository import RecordsRepositoryPort
from freightdesk.domain.models import (
    Account,
    Expense,
    Invoice,
    JournalEntry,
    VendorBill,
)
from freightdesk.domain.services.party import resolve_party

INVOICE_COLUMNS = """
    id, invoice_number, invoice_date, due_date, status, total, paid_amount,
    currency, party_type, party_id, party_name, customer_id, customer_name,
    vendor_id, vendor_name, job_number, notes
"""


def _coerce_date(value) -> date | None:
    """Return a date from a driver value (date, datetime, ISO text or None)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


class SqlAlchemyRecordsRepository(RecordsRepositoryPort):
    """Repository reading invoices, expenses, bills and accounts via SQL."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_invoices(
        self,
        party_type: str | None = None,
        party_id: str | None = None,
    ) -> list[Invoice]:
        """Return invoices ordered by date descending.

        Invoices without a party type count as customer invoices. The party
        filter applies to the resolved counterparty, so legacy customer and
        vendor id columns match as well.

        Args:
            party_type: Optional ``customer`` or ``vendor`` filter.
            party_id: Optional counterparty id filter.

        Returns:
            list[Invoice]: Matching invoices.
        """
        sql = f"SELECT {INVOICE_COLUMNS} FROM invoices WHERE 1=1"
        params: dict[str, str] = {}
        if party_type:
            sql += " AND COALESCE(party_type, 'customer') = :party_type"
            params["party_type"] = party_type
        sql += " ORDER BY invoice_date DESC, id"
        rows = self._fetch(sql, params)
        invoices = [
            Invoice(
                id=str(row.id),
                invoice_number=row.invoice_number,
                invoice_date=_coerce_date(row.invoice_date),
                due_date=_coerce_date(row.due_date),
                status=row.status,
                total=row.total,
                paid_amount=row.paid_amount,
                currency=row.currency,
                party_type=row.party_type,
                party_id=row.party_id,
                party_name=row.party_name,
                customer_id=row.customer_id,
                customer_name=row.customer_name,
                vendor_id=row.vendor_id,
                vendor_name=row.vendor_name,
                job_number=row.job_number,
                notes=row.notes,
            )
            for row in rows
        ]
        if party_id:
            invoices = [
                invoice
                for invoice in invoices
                if resolve_party(invoice).party_id == party_id
            ]
        return invoices

    def fetch_expenses(self) -> list[Expense]:
        """Return every expense ordered by date descending."""
        rows = self._fetch(
            """
            SELECT id, category, expense_date, status, amount, currency,
                   description, reference, job_number, paid_date
            FROM expenses
            ORDER BY expense_date DESC, id
            """
        )
        return [
            Expense(
                id=str(row.id),
                category=row.category,
                date=_coerce_date(row.expense_date),
                status=row.status,
                amount=row.amount,
                currency=row.currency,
                description=row.description,
                reference=row.reference,
                job_number=row.job_number,
                paid_date=_coerce_date(row.paid_date),
            )
            for row in rows
        ]

    def fetch_vendor_bills(
        self,
        vendor_id: str | None = None,
    ) -> list[VendorBill]:
        """Return vendor bills ordered by date descending.

        Args:
            vendor_id: Optional vendor filter.

        Returns:
            list[VendorBill]: Matching bills.
        """
        sql = """
            SELECT id, vendor_id, vendor_name, bill_date, status, amount,
                   currency, bill_number, job_number, category, description,
                   due_date, paid_date
            FROM vendor_bills
            WHERE 1=1
        """
        params: dict[str, str] = {}
        if vendor_id:
            sql += " AND vendor_id = :vendor_id"
            params["vendor_id"] = vendor_id
        sql += " ORDER BY bill_date DESC, id"
        rows = self._fetch(sql, params)
        return [
            VendorBill(
                id=str(row.id),
                vendor_id=row.vendor_id,
                vendor_name=row.vendor_name,
                date=_coerce_date(row.bill_date),
                status=row.status,
                amount=row.amount,
                currency=row.currency,
                bill_number=row.bill_number,
                job_number=row.job_number,
                category=row.category,
                description=row.description,
                due_date=_coerce_date(row.due_date),
                paid_date=_coerce_date(row.paid_date),
            )
            for row in rows
        ]

    def fetch_journal_entries(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        account_code: str | None = None,
    ) -> list[JournalEntry]:
        """Return postings within an inclusive date range, newest first.

        Args:
            start_date: Optional first date of the range.
            end_date: Optional last date of the range.
            account_code: Optional account filter.

        Returns:
            list[JournalEntry]: Matching postings.
        """
        sql = """
            SELECT id, entry_date, account_code, account_name, description,
                   reference, debit, credit, currency
            FROM journal_entries
            WHERE 1=1
        """
        params = self._build_date_params(start_date, end_date)
        if start_date:
            sql += " AND entry_date >= :start_date"
        if end_date:
            sql += " AND entry_date <= :end_date"
        if account_code:
            sql += " AND account_code = :account_code"
            params["account_code"] = account_code
        sql += " ORDER BY entry_date DESC, id"
        rows = self._fetch(sql, params)
        return [
            JournalEntry(
                id=str(row.id),
                date=_coerce_date(row.entry_date),
                account_code=str(row.account_code),
                account_name=row.account_name or "",
                description=row.description or "",
                reference=row.reference or "",
                debit=row.debit,
                credit=row.credit,
                currency=row.currency,
            )
            for row in rows
        ]

    def fetch_accounts(self) -> list[Account]:
        """Return the chart of accounts ordered by code."""
        rows = self._fetch(
            """
            SELECT code, name, account_type, balance, currency, parent_code,
                   is_active
            FROM accounts
            ORDER BY code
            """
        )
        return [
            Account(
                code=str(row.code),
                name=row.name,
                account_type=row.account_type,
                balance=row.balance,
                currency=row.currency,
                parent_code=row.parent_code,
                is_active=bool(row.is_active),
            )
            for row in rows
        ]

    def _fetch(self, sql: str, params: dict[str, str] | None = None) -> list:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            return conn.execute(text(sql), params or {}).all()

    @staticmethod
    def _build_date_params(
        start_date: date | None,
        end_date: date | None,
    ) -> dict[str, str]:
        params: dict[str, str] = {}
        if start_date:
            params["start_date"] = start_date.isoformat()
        if end_date:
            params["end_date"] = end_date.isoformat()
        return params


__all__ = ["SqlAlchemyRecordsRepository"]
