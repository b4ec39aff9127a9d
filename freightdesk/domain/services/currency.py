"""Currency conversion and display formatting.

Rates are expressed against a common base unit (USD = 1). The table is an
explicit object so callers and tests can supply their own rates.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from freightdesk.domain.constants import BASE_CURRENCY
from freightdesk.domain.errors import UnknownCurrencyError
from freightdesk.domain.services.normalization import normalize_currency_code

ONE = Decimal("1")


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class CurrencyTable:
    """Static exchange rates and symbols.

    Attributes:
        rates: Rate of each currency code relative to the base unit.
        symbols: Display symbol of each currency code.
        base_currency: Code whose rate is 1.
        default_symbol: Symbol used for codes without one.
    """

    rates: Mapping[str, Decimal]
    symbols: Mapping[str, str] = field(default_factory=dict)
    base_currency: str = BASE_CURRENCY
    default_symbol: str = "$"

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "rates",
            _frozen({code.upper(): Decimal(str(rate)) for code, rate in self.rates.items()}),
        )
        object.__setattr__(
            self,
            "symbols",
            _frozen({code.upper(): symbol for code, symbol in self.symbols.items()}),
        )

    @property
    def codes(self) -> tuple[str, ...]:
        """Return supported codes in table order."""
        return tuple(self.rates)

    def is_supported(self, code: str | None) -> bool:
        """Return True when the code has a rate in the table."""
        return bool(code) and code.strip().upper() in self.rates

    def rate_for(self, code: str | None) -> Decimal:
        """Return the rate of a code, or 1 when the code is unknown."""
        return self.rates.get(normalize_currency_code(code), ONE)

    def symbol_for(self, code: str | None) -> str:
        """Return the symbol of a code, or the default symbol."""
        return self.symbols.get(normalize_currency_code(code), self.default_symbol)


DEFAULT_CURRENCY_TABLE = CurrencyTable(
    rates={
        "USD": Decimal("1"),
        "EUR": Decimal("1.08"),
        "GBP": Decimal("1.27"),
        "PKR": Decimal("0.0036"),
    },
    symbols={
        "USD": "$",
        "EUR": "€",
        "GBP": "£",
        "PKR": "₨",
    },
)


def convert_amount(
    amount: Decimal,
    from_code: str | None,
    to_code: str | None,
    table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
) -> Decimal:
    """Convert an amount between two currencies through the base unit.

    Args:
        amount: Amount expressed in ``from_code``.
        from_code: Source currency code.
        to_code: Target currency code.
        table: Currency table providing rates.

    Returns:
        Decimal: Amount expressed in ``to_code``. Unknown codes use rate 1.
    """
    from_rate = table.rate_for(from_code)
    to_rate = table.rate_for(to_code)
    if from_rate == to_rate:
        return amount
    return amount * from_rate / to_rate


def format_amount(
    amount: Decimal,
    code: str | None,
    table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
) -> str:
    """Format an amount with its currency symbol and two decimals."""
    return f"{table.symbol_for(code)}{amount:,.2f}"


def currency_options(
    table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
) -> list[dict[str, str]]:
    """Return selector options for every supported currency."""
    return [{"value": code, "label": code} for code in table.codes]


def validate_currency_code(
    code: str | None,
    table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
) -> str:
    """Return the normalized code or raise when the table lacks it.

    Raises:
        UnknownCurrencyError: If the code has no rate in the table.
    """
    if not table.is_supported(code):
        raise UnknownCurrencyError(str(code))
    return normalize_currency_code(code)


__all__ = [
    "CurrencyTable",
    "DEFAULT_CURRENCY_TABLE",
    "convert_amount",
    "format_amount",
    "currency_options",
    "validate_currency_code",
]
