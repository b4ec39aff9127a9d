"""Domain normalization helpers."""

from freightdesk.domain.constants import BASE_CURRENCY, DEFAULT_PARTY_TYPE, PARTY_TYPES


def normalize_currency_code(code: str | None) -> str:
    """Normalize currency codes coming from records.

    Args:
        code: Raw currency code from a record.

    Returns:
        str: Upper-cased code, or the base currency when empty.
    """
    if not code:
        return BASE_CURRENCY
    cleaned = code.strip()
    return cleaned.upper() if cleaned else BASE_CURRENCY


def normalize_status(status: str | None) -> str:
    """Normalize lifecycle status values.

    Args:
        status: Raw status value from a record.

    Returns:
        str: Lower-cased status, empty when missing.
    """
    if not status:
        return ""
    return status.strip().lower()


def normalize_party_type(party_type: str | None) -> str:
    """Return ``customer`` or ``vendor``, defaulting to customer."""
    if not party_type:
        return DEFAULT_PARTY_TYPE
    cleaned = party_type.strip().lower()
    return cleaned if cleaned in PARTY_TYPES else DEFAULT_PARTY_TYPE


def normalize_account_code(code: str | int | None) -> str:
    """Normalize account codes to stripped strings."""
    if code is None:
        return ""
    return str(code).strip()


__all__ = [
    "normalize_currency_code",
    "normalize_status",
    "normalize_party_type",
    "normalize_account_code",
]
