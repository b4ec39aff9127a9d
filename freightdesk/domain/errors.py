"""Domain exceptions."""


class FreightDeskError(Exception):
    """Base class for ledger domain errors."""


class InvalidAmountError(FreightDeskError, ValueError):
    """Raised when a monetary field cannot be used under a reject policy."""

    def __init__(self, field: str, reason: str, record_id: str = "") -> None:
        self.field = field
        self.reason = reason
        self.record_id = record_id
        location = f" on record {record_id}" if record_id else ""
        super().__init__(f"Invalid amount for {field}{location}: {reason}")


class UnknownCurrencyError(FreightDeskError, ValueError):
    """Raised when a currency code is not present in the currency table."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Unsupported currency code: {code}")


__all__ = ["FreightDeskError", "InvalidAmountError", "UnknownCurrencyError"]
