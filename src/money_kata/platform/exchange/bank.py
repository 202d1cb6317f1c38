from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Dict, Tuple

from money_kata.domain.monetary.currency import Currency
from money_kata.domain.monetary.errors import InvalidRateError, RateNotFoundError
from money_kata.domain.monetary.money import Money
from money_kata.utils.numeric_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)

CurrencyPair = Tuple[str, str]


class Bank:
    """In-memory registry of exchange rates that converts Money between currencies.

    A rate registered for ($from_currency, $to_currency) tells how many units of
    $to_currency one unit of $from_currency is worth, so conversion multiplies
    the amount by the rate. Rates are directed: the reverse pair is never derived
    and must be registered on its own.

    The rate table is the only mutable state. Bank does no locking; callers sharing
    one instance between threads must serialize `add_rate` themselves.
    """

    def __init__(self) -> None:
        self._rates: Dict[CurrencyPair, Decimal] = {}

    # region Rates

    def add_rate(self, from_currency: Currency | str, to_currency: Currency | str, rate: DecimalLike) -> None:
        """Register or replace the rate for converting $from_currency into $to_currency.

        Args:
            from_currency: Source currency or its code.
            to_currency: Target currency or its code.
            rate: Units of $to_currency per 1 unit of $from_currency.

        Raises:
            InvalidRateError: If $rate is not a positive finite number.
            ValueError: If both currencies are the same.
        """
        pair = self._pair(from_currency, to_currency)

        # Raise: identity conversion never uses a rate
        if pair[0] == pair[1]:
            raise ValueError(f"Cannot call `add_rate` because $from_currency and $to_currency are both '{pair[0]}'")

        decimal_rate = self._validate_rate(rate)

        previous = self._rates.get(pair)
        self._rates[pair] = decimal_rate
        if previous is None:
            logger.debug(f"Bank registered rate {pair[0]}->{pair[1]} = {decimal_rate}")
        else:
            logger.debug(f"Bank replaced rate {pair[0]}->{pair[1]}: {previous} -> {decimal_rate}")

    def get_rate(self, from_currency: Currency | str, to_currency: Currency | str) -> Decimal:
        """Return the registered rate for the ordered pair.

        Raises:
            RateNotFoundError: If no rate is registered for the pair.
        """
        pair = self._pair(from_currency, to_currency)
        try:
            return self._rates[pair]
        except KeyError:
            raise RateNotFoundError(*pair) from None

    def has_rate(self, from_currency: Currency | str, to_currency: Currency | str) -> bool:
        return self._pair(from_currency, to_currency) in self._rates

    @property
    def rates(self) -> Dict[CurrencyPair, Decimal]:
        """Copy of the rate table keyed by (from_code, to_code)."""
        return dict(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    # endregion

    # region Conversion

    def change(self, money: Money, to_currency: Currency | str) -> Money:
        """Convert $money into $to_currency.

        Money already in $to_currency is returned as is, without a rate lookup. A
        converted amount is rounded to the precision of $to_currency.

        Args:
            money: Amount to convert.
            to_currency: Target currency or its code.

        Returns:
            Money: Converted amount in $to_currency.

        Raises:
            TypeError: If $money is not Money.
            RateNotFoundError: If no rate is registered from $money's currency to $to_currency.
        """
        if not isinstance(money, Money):
            raise TypeError(f"$money must be a Money instance, but provided value is: {money!r}")

        target = Currency.resolve(to_currency)
        if money.currency == target:
            return money

        rate = self.get_rate(money.currency, target)
        result = Money(money.amount * rate, target).rounded()
        logger.debug(f"Bank changed {money} into {result} at rate {rate}")
        return result

    # endregion

    # region Helpers

    @staticmethod
    def _pair(from_currency: Currency | str, to_currency: Currency | str) -> CurrencyPair:
        return Currency.resolve(from_currency).code, Currency.resolve(to_currency).code

    @staticmethod
    def _validate_rate(rate: DecimalLike) -> Decimal:
        try:
            decimal_rate = as_decimal(rate)
        except (TypeError, InvalidOperation) as e:
            raise InvalidRateError(rate, "rate must be a number") from e

        if not decimal_rate.is_finite():
            raise InvalidRateError(rate, "rate must be finite")
        if decimal_rate <= 0:
            raise InvalidRateError(rate, "rate must be positive")
        return decimal_rate

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rates={len(self._rates)})"
