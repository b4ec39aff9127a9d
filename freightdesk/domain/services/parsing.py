"""Explicit parsing of monetary fields.

Parsing keeps "absent", "malformed" and "zero" apart; the caller picks the
policy that turns an invalid value into a default or an error.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from logging import Logger

from freightdesk.domain.errors import InvalidAmountError
from freightdesk.utils.decimal_utils import ZERO

MISSING = "missing"


@dataclass(frozen=True)
class ValidAmount:
    """Successfully parsed amount."""

    value: Decimal


@dataclass(frozen=True)
class InvalidAmount:
    """Amount that could not be used, with the reason."""

    reason: str


ParsedAmount = ValidAmount | InvalidAmount


class NumericPolicy(str, Enum):
    """How invalid monetary fields are handled."""

    DEFAULT_ZERO = "default_zero"
    REJECT = "reject"


def parse_amount(value, *, allow_negative: bool = False) -> ParsedAmount:
    """Parse a raw monetary value.

    Args:
        value: Raw value from a record (Decimal, int, float, str, or None).
        allow_negative: Accept signed values such as stored balances.

    Returns:
        ParsedAmount: ValidAmount for finite numbers (non-negative unless
        allowed), InvalidAmount otherwise.
    """
    if value is None:
        return InvalidAmount(MISSING)
    if isinstance(value, bool):
        return InvalidAmount("boolean is not an amount")
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return InvalidAmount(MISSING)
    if not isinstance(value, (Decimal, int, float, str)):
        return InvalidAmount(f"unsupported type {type(value).__name__}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        return InvalidAmount(f"not a number: {value!r}")
    if not amount.is_finite():
        return InvalidAmount("not finite")
    if amount < 0 and not allow_negative:
        return InvalidAmount("negative amount")
    return ValidAmount(amount)


def resolve_amount(
    value,
    *,
    policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO,
    field: str = "amount",
    record_id: str = "",
    logger: Logger | None = None,
    allow_negative: bool = False,
) -> Decimal:
    """Parse a value and apply the numeric policy.

    Args:
        value: Raw value from a record.
        policy: DEFAULT_ZERO substitutes 0, REJECT raises.
        field: Field name used in messages.
        record_id: Identifier of the record, used in messages.
        logger: Optional logger for substituted values.
        allow_negative: Accept signed values.

    Returns:
        Decimal: Parsed amount, or 0 under DEFAULT_ZERO.

    Raises:
        InvalidAmountError: If the value is invalid under REJECT.
    """
    parsed = parse_amount(value, allow_negative=allow_negative)
    if isinstance(parsed, ValidAmount):
        return parsed.value
    if policy is NumericPolicy.REJECT:
        raise InvalidAmountError(field, parsed.reason, record_id)
    if logger is not None:
        message = f"Defaulting {field} to 0 for record {record_id}: {parsed.reason}"
        if parsed.reason == MISSING:
            logger.debug(message)
        else:
            logger.warning(message)
    return ZERO


__all__ = [
    "MISSING",
    "ValidAmount",
    "InvalidAmount",
    "ParsedAmount",
    "NumericPolicy",
    "parse_amount",
    "resolve_amount",
]
