"""DDL bootstrap for the ledger record store."""

from sqlalchemy import text
from sqlalchemy.engine import Engine

from freightdesk.domain.models.accounts import STANDARD_ACCOUNTS

CREATE_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS invoices (
        id TEXT PRIMARY KEY,
        invoice_number TEXT NOT NULL,
        invoice_date DATE,
        due_date DATE,
        status TEXT NOT NULL DEFAULT 'draft',
        total NUMERIC(18, 2),
        paid_amount NUMERIC(18, 2),
        currency TEXT DEFAULT 'USD',
        party_type TEXT,
        party_id TEXT,
        party_name TEXT,
        customer_id TEXT,
        customer_name TEXT,
        vendor_id TEXT,
        vendor_name TEXT,
        job_number TEXT,
        notes TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS expenses (
        id TEXT PRIMARY KEY,
        category TEXT NOT NULL,
        expense_date DATE,
        status TEXT NOT NULL DEFAULT 'pending',
        amount NUMERIC(18, 2),
        currency TEXT DEFAULT 'USD',
        description TEXT,
        reference TEXT,
        job_number TEXT,
        paid_date DATE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS vendor_bills (
        id TEXT PRIMARY KEY,
        vendor_id TEXT,
        vendor_name TEXT,
        bill_date DATE,
        status TEXT NOT NULL DEFAULT 'pending',
        amount NUMERIC(18, 2),
        currency TEXT DEFAULT 'USD',
        bill_number TEXT,
        job_number TEXT,
        category TEXT,
        description TEXT,
        due_date DATE,
        paid_date DATE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS accounts (
        code TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        account_type TEXT NOT NULL,
        balance NUMERIC(18, 2) DEFAULT 0,
        currency TEXT DEFAULT 'USD',
        parent_code TEXT,
        is_active BOOLEAN DEFAULT TRUE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS journal_entries (
        id TEXT PRIMARY KEY,
        entry_date DATE,
        account_code TEXT NOT NULL,
        account_name TEXT,
        description TEXT,
        reference TEXT,
        debit NUMERIC(18, 2) DEFAULT 0,
        credit NUMERIC(18, 2) DEFAULT 0,
        currency TEXT DEFAULT 'USD'
    )
    """,
)

SELECT_ACCOUNT_CODES_SQL = text("SELECT code FROM accounts")

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (
        code,
        name,
        account_type,
        balance,
        currency,
        parent_code,
        is_active
    )
    VALUES (
        :code,
        :name,
        :account_type,
        :balance,
        :currency,
        :parent_code,
        :is_active
    )
    """
)


def create_schema(engine: Engine) -> None:
    """Create the ledger tables when they do not exist.

    Args:
        engine: Engine connected to the ledger database.
    """
    with engine.begin() as conn:
        for statement in CREATE_TABLES_SQL:
            conn.exec_driver_sql(statement)


def seed_standard_accounts(engine: Engine) -> int:
    """Insert the standard chart of accounts, skipping existing codes.

    Args:
        engine: Engine connected to the ledger database.

    Returns:
        int: Number of accounts inserted.
    """
    with engine.begin() as conn:
        existing = {row.code for row in conn.execute(SELECT_ACCOUNT_CODES_SQL)}
        payload = [
            {
                "code": account.code,
                "name": account.name,
                "account_type": account.account_type,
                "balance": 0,
                "currency": account.currency,
                "parent_code": account.parent_code,
                "is_active": account.is_active,
            }
            for account in STANDARD_ACCOUNTS
            if account.code not in existing
        ]
        if payload:
            conn.execute(INSERT_ACCOUNT_SQL, payload)
    return len(payload)


__all__ = ["CREATE_TABLES_SQL", "create_schema", "seed_standard_accounts"]
