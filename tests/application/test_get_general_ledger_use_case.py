"""Tests for the GetGeneralLedgerUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from freightdesk.application.use_cases.get_general_ledger import (
    GetGeneralLedgerUseCase,
)
from freightdesk.domain.models import Expense, Invoice, VendorBill
from freightdesk.domain.services.balances import LedgerView


def test_execute_combines_every_document() -> None:
    """Invoices (settled included), expenses and bills share one balance."""
    repository = MagicMock()
    repository.fetch_invoices.return_value = [
        Invoice(
            id="i1",
            invoice_number="INV-1",
            invoice_date=date(2024, 1, 10),
            status="paid",
            total=100,
            paid_amount=100,
        ),
        Invoice(
            id="i2",
            invoice_number="INV-2",
            invoice_date=date(2024, 1, 20),
            status="sent",
            total=250,
            paid_amount=50,
        ),
    ]
    repository.fetch_expenses.return_value = [
        Expense(
            id="e1",
            category="travel",
            date=date(2024, 1, 15),
            status="pending",
            amount=30,
        ),
    ]
    repository.fetch_vendor_bills.return_value = [
        VendorBill(
            id="b1",
            vendor_id="v-1",
            vendor_name="Trucker",
            date=None,
            status="pending",
            amount=20,
        ),
    ]
    logger = MagicMock()
    use_case = GetGeneralLedgerUseCase(repository, logger=logger)

    result = use_case.execute("USD")

    repository.fetch_invoices.assert_called_once_with()
    assert result.view is LedgerView.GENERAL
    assert [entry.id for entry in result.entries] == ["i1", "e1", "i2", "b1"]
    assert [entry.balance for entry in result.entries] == [
        Decimal("0"),
        Decimal("30"),
        Decimal("230"),
        Decimal("250"),
    ]
    assert result.summary.entry_count == 4
    assert result.summary.total == Decimal("400")
    assert result.summary.paid == Decimal("150")
    logger.info.assert_called_once()


def test_execute_with_no_documents() -> None:
    repository = MagicMock()
    repository.fetch_invoices.return_value = []
    repository.fetch_expenses.return_value = []
    repository.fetch_vendor_bills.return_value = []

    result = GetGeneralLedgerUseCase(repository, logger=MagicMock()).execute()

    assert result.entries == []
    assert result.summary.current_balance == Decimal("0")
