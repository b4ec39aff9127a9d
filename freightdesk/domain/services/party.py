"""Counterparty resolution for invoices.

Each field is resolved from an ordered list of candidate attributes; the
first non-empty value wins and an empty string is the final fallback.
"""

from freightdesk.domain.models.ledger import PartyRef
from freightdesk.domain.models.records import Invoice
from freightdesk.domain.services.normalization import normalize_party_type

PARTY_ID_SOURCES: dict[str, tuple[str, ...]] = {
    "customer": ("party_id", "customer_id"),
    "vendor": ("party_id", "vendor_id"),
}
PARTY_NAME_SOURCES: dict[str, tuple[str, ...]] = {
    "customer": ("party_name", "customer_name"),
    "vendor": ("party_name", "vendor_name"),
}


def first_present(record: object, candidates: tuple[str, ...]) -> str:
    """Return the first non-empty attribute among candidates, else ''."""
    for name in candidates:
        value = getattr(record, name, None)
        if value:
            return str(value)
    return ""


def resolve_party(invoice: Invoice) -> PartyRef:
    """Resolve party type, id and name of an invoice."""
    party_type = normalize_party_type(invoice.party_type)
    return PartyRef(
        party_type=party_type,
        party_id=first_present(invoice, PARTY_ID_SOURCES[party_type]),
        party_name=first_present(invoice, PARTY_NAME_SOURCES[party_type]),
    )


__all__ = [
    "PARTY_ID_SOURCES",
    "PARTY_NAME_SOURCES",
    "first_present",
    "resolve_party",
]
