from __future__ import annotations

import logging
from typing import Dict

logger = logging.getLogger(__name__)


class Currency:
    """A currency identified by its code, with the precision used to round amounts.

    A Currency compares equal to another Currency with the same code and to the code
    string itself, so `Money.dollar(5).currency == "USD"` holds.

    Attributes:
        code (str): Currency code (e.g., "USD", "CHF").
        precision (int): Number of decimal places `Money.rounded` rounds to (0-18).
        name (str): Full currency name.
    """

    # Precision used for codes that are not in the registry
    DEFAULT_PRECISION = 2

    # Class-level registry, filled by `currency_registry`
    _registry: Dict[str, Currency] = {}

    def __init__(self, code: str, precision: int, name: str | None = None):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "CHF").
            precision (int): Number of decimal places (0-18).
            name (str | None): Full currency name. Defaults to the code.

        Raises:
            ValueError: If parameters are invalid.
        """
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if isinstance(precision, bool) or not isinstance(precision, int) or not 0 <= precision <= 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        self._code = code.upper().strip()
        self._precision = precision
        self._name = name.strip() if name is not None else self._code

    @property
    def code(self) -> str:
        return self._code

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def name(self) -> str:
        return self._name

    # region Registry

    @classmethod
    def register(cls, currency: Currency, overwrite: bool = False) -> None:
        """Register a currency so that its code resolves to it.

        Raises:
            ValueError: If the code is already registered and $overwrite is False.
            TypeError: If $currency is not a Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[currency.code] = currency

    @classmethod
    def from_str(cls, code: str) -> Currency:
        """Get a registered currency by code; unknown codes raise `ValueError`."""
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        code = code.upper().strip()
        if code not in cls._registry:
            raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {sorted(cls._registry)}")

        return cls._registry[code]

    @classmethod
    def resolve(cls, currency: Currency | str) -> Currency:
        """Turn a Currency or a currency code into a Currency.

        Registered codes return the registered instance. Unknown codes produce an
        unregistered currency with `DEFAULT_PRECISION` decimals.

        Raises:
            TypeError: If $currency is neither a Currency nor a string.
            ValueError: If $currency is an empty string.
        """
        if isinstance(currency, Currency):
            return currency

        if not isinstance(currency, str):
            raise TypeError(f"$currency must be a Currency instance or a currency code, but provided value is: {currency!r}")

        code = currency.upper().strip()
        registered = cls._registry.get(code)
        if registered is not None:
            return registered

        logger.debug(f"Currency code '{code}' is not registered; using precision {cls.DEFAULT_PRECISION}")
        return cls(code, cls.DEFAULT_PRECISION)

    # endregion

    def __eq__(self, other) -> bool:
        """Equal to a Currency with the same code, or to the code string (case-insensitive)."""
        if isinstance(other, Currency):
            return self.code == other.code
        if isinstance(other, str):
            return self.code == other.upper().strip()
        return False

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.name}')"
