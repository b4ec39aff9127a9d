"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from freightdesk.domain.constants import INVOICE_STATUSES


def validate_paid_amount(
    record_id: str,
    total: Decimal,
    paid: Decimal,
    logger: Logger,
) -> None:
    """Warn when a record reports more paid than its total.

    Args:
        record_id: Identifier of the source record.
        total: Converted total amount.
        paid: Converted paid amount.
        logger: Logger used for warnings.
    """
    if paid > total:
        logger.warning(
            f"Paid amount exceeds total for record {record_id}: "
            f"paid={paid}, total={total}"
        )


def validate_status(record_id: str, status: str, logger: Logger) -> None:
    """Warn when a record carries a status outside the known lifecycle.

    Args:
        record_id: Identifier of the source record.
        status: Normalized status value.
        logger: Logger used for warnings.
    """
    if status not in INVOICE_STATUSES:
        logger.warning(f"Unknown status for record {record_id}: {status!r}")


__all__ = ["validate_paid_amount", "validate_status"]
