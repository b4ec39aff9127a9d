"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

import dotenv

from freightdesk.domain.constants import BASE_CURRENCY, DEFAULT_SETTLED_EPSILON
from freightdesk.domain.errors import UnknownCurrencyError
from freightdesk.domain.services.currency import (
    DEFAULT_CURRENCY_TABLE,
    CurrencyTable,
    validate_currency_code,
)
from freightdesk.domain.services.parsing import NumericPolicy
from freightdesk.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class LedgerSettings:
    """Runtime settings for ledger views and statements.

    Attributes:
        display_currency: Currency used by the ledger views.
        statement_currency: Currency label of the financial statements.
        settled_epsilon: Outstanding amount below which an invoice is settled.
        include_settled: Whether ledger views keep settled invoices.
        numeric_policy: Handling of malformed monetary fields.
    """

    display_currency: str = BASE_CURRENCY
    statement_currency: str = BASE_CURRENCY
    settled_epsilon: Decimal = DEFAULT_SETTLED_EPSILON
    include_settled: bool = False
    numeric_policy: NumericPolicy = NumericPolicy.DEFAULT_ZERO

    @classmethod
    def from_env(
        cls,
        table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
    ) -> "LedgerSettings":
        """Build settings from environment variables.

        Invalid values are logged and replaced by the defaults.

        Args:
            table: Currency table used to validate currency codes.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            display_currency=cls._currency(
                "FREIGHTDESK_DISPLAY_CURRENCY", table, logger
            ),
            statement_currency=cls._currency(
                "FREIGHTDESK_STATEMENT_CURRENCY", table, logger
            ),
            settled_epsilon=cls._epsilon(logger),
            include_settled=cls._flag("FREIGHTDESK_INCLUDE_SETTLED", logger),
            numeric_policy=cls._numeric_policy(logger),
        )

    @staticmethod
    def _currency(name: str, table: CurrencyTable, logger) -> str:
        raw = os.getenv(name)
        if not raw:
            return table.base_currency
        try:
            return validate_currency_code(raw, table)
        except UnknownCurrencyError as exc:
            logger.warning(f"{name}: {exc}; using {table.base_currency}")
            return table.base_currency

    @staticmethod
    def _epsilon(logger) -> Decimal:
        raw = os.getenv("FREIGHTDESK_SETTLED_EPSILON")
        if not raw:
            return DEFAULT_SETTLED_EPSILON
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            value = None
        if value is None or not value.is_finite() or value < 0:
            logger.warning(
                f"Invalid FREIGHTDESK_SETTLED_EPSILON {raw!r}; "
                f"using {DEFAULT_SETTLED_EPSILON}"
            )
            return DEFAULT_SETTLED_EPSILON
        return value

    @staticmethod
    def _flag(name: str, logger) -> bool:
        raw = os.getenv(name)
        if not raw:
            return False
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value not in _FALSE_VALUES:
            logger.warning(f"Invalid {name} {raw!r}; using false")
        return False

    @staticmethod
    def _numeric_policy(logger) -> NumericPolicy:
        raw = os.getenv("FREIGHTDESK_NUMERIC_POLICY")
        if not raw:
            return NumericPolicy.DEFAULT_ZERO
        try:
            return NumericPolicy(raw.strip().lower())
        except ValueError:
            logger.warning(
                f"Invalid FREIGHTDESK_NUMERIC_POLICY {raw!r}; "
                f"using {NumericPolicy.DEFAULT_ZERO.value}"
            )
            return NumericPolicy.DEFAULT_ZERO


__all__ = ["LedgerSettings"]
