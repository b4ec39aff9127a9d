"""Domain constants for freight ledgers."""

from decimal import Decimal

BASE_CURRENCY = "USD"
DEFAULT_SETTLED_EPSILON = Decimal("0.01")

INVOICE_STATUSES = (
    "draft",
    "sent",
    "paid",
    "partially_paid",
    "overdue",
    "cancelled",
    "pending",
)

CLOSED_STATUSES = ("paid", "cancelled")

PARTY_TYPES = ("customer", "vendor")
DEFAULT_PARTY_TYPE = "customer"

EXPENSE_CATEGORY_LABELS = {
    "bills": "Bills & Utilities",
    "salaries": "Salaries & Wages",
    "office_supplies": "Office Supplies",
    "travel": "Travel & Meals",
    "marketing": "Marketing & Advertising",
    "miscellaneous": "Miscellaneous",
}
DEFAULT_EXPENSE_PARTY_NAME = "Operational Expense"

VENDOR_BILL_CATEGORY_LABELS = {
    "fuel": "Fuel & Trucking",
    "port_fees": "Port & Terminal Fees",
    "customs": "Customs & Duties",
    "warehousing": "Warehousing & Storage",
    "airline_charges": "Airline / Carrier Charges",
    "logistics_overheads": "Logistics Overheads",
}


__all__ = [
    "BASE_CURRENCY",
    "DEFAULT_SETTLED_EPSILON",
    "INVOICE_STATUSES",
    "CLOSED_STATUSES",
    "PARTY_TYPES",
    "DEFAULT_PARTY_TYPE",
    "EXPENSE_CATEGORY_LABELS",
    "DEFAULT_EXPENSE_PARTY_NAME",
    "VENDOR_BILL_CATEGORY_LABELS",
]
