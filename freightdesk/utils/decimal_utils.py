"""Helpers for Decimal arithmetic."""

from decimal import Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def percent_of(part: Decimal, whole: Decimal) -> Decimal:
    """Return ``part / whole * 100``, or 0 when ``whole`` is not positive.

    Args:
        part: Numerator, e.g. gross profit.
        whole: Denominator, e.g. total revenue.

    Returns:
        Decimal: Percentage, never NaN or infinite.
    """
    if whole <= 0:
        return ZERO
    return (part / whole) * HUNDRED


__all__ = ["ZERO", "HUNDRED", "percent_of"]
