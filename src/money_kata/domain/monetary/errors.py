"""Exceptions raised by monetary operations and currency exchange."""


class CurrencyMismatchError(ValueError):
    """Raised when two Money values of different currencies are combined."""

    def __init__(self, left, right, operation: str = "combine"):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(f"Cannot {operation} Money in different currencies: {left} and {right}")


class InvalidRateError(ValueError):
    """Raised when an exchange rate is not a positive finite number."""

    def __init__(self, rate, reason: str):
        self.rate = rate
        self.reason = reason
        super().__init__(f"Invalid exchange rate {rate!r}: {reason}")


class RateNotFoundError(LookupError):
    """Raised when no rate is registered for the requested currency pair."""

    def __init__(self, from_currency: str, to_currency: str):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(f"No exchange rate registered from '{from_currency}' to '{to_currency}'")
