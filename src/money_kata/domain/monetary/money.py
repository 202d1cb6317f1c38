from __future__ import annotations

from decimal import Decimal, getcontext, InvalidOperation, localcontext

from money_kata.domain.monetary.currency import Currency
from money_kata.domain.monetary.currency_registry import CHF, USD
from money_kata.domain.monetary.errors import CurrencyMismatchError
from money_kata.utils.numeric_tools import DecimalLike, as_decimal

# Set high precision for financial calculations
getcontext().prec = 28


class Money:
    """Represents a monetary amount with currency.

    Money is an immutable value object: every operation returns a new instance. Uses
    Python's Decimal for precision arithmetic and keeps the amount exact; `rounded`
    gives a copy rounded to the precision of the currency.

    Supports values between -999_999_999_999_999.999999999999999999 and
    +999_999_999_999_999.999999999999999999
    """

    # Value limits
    MAX_VALUE = Decimal("999_999_999_999_999.999999999999999999")
    MIN_VALUE = Decimal("-999_999_999_999_999.999999999999999999")

    # Digits needed to quantize any in-range amount to 18 decimal places
    ROUNDING_PRECISION = 40

    def __init__(self, amount: DecimalLike, currency: Currency | str):
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric amount (Decimal-like scalar).
            currency: Currency object or currency code such as "USD". Codes that are
                not registered are accepted as well (see `Currency.resolve`).

        Raises:
            ValueError: If amount is invalid or out of range.
            TypeError: If currency is neither a Currency nor a string.
        """
        resolved_currency = Currency.resolve(currency)

        # Raise: $amount must be convertible to Decimal
        try:
            decimal_amount = as_decimal(amount)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Money` because $amount ({amount!r}) cannot be converted to Decimal") from e

        # Raise: amount must be a finite number within allowed range
        if not decimal_amount.is_finite():
            raise ValueError(f"$amount must be a finite number, but provided value is: {decimal_amount}")
        if decimal_amount > self.MAX_VALUE:
            raise ValueError(f"$amount exceeds maximum allowed value {self.MAX_VALUE}, but provided value is: {decimal_amount}")
        if decimal_amount < self.MIN_VALUE:
            raise ValueError(f"$amount is below minimum allowed value {self.MIN_VALUE}, but provided value is: {decimal_amount}")

        self._amount = decimal_amount
        self._currency = resolved_currency

    # region Construction

    @classmethod
    def dollar(cls, amount: DecimalLike) -> Money:
        """Create Money in US dollars."""
        return cls(amount, USD)

    @classmethod
    def franc(cls, amount: DecimalLike) -> Money:
        """Create Money in Swiss francs."""
        return cls(amount, CHF)

    @classmethod
    def zero(cls, currency: Currency | str) -> Money:
        return cls(0, currency)

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '1000.50 USD'.

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            ValueError: If string format is invalid.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'amount currency_code'")

        amount_part, currency_part = parts

        try:
            amount = Decimal(amount_part)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Invalid amount part '{amount_part}' in string '{value_str}'") from e

        return cls(amount, currency_part)

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    # endregion

    # region Operations

    def times(self, multiplier: DecimalLike) -> Money:
        """Return a new Money with $amount multiplied by $multiplier, in the same currency.

        Raises:
            TypeError: If $multiplier is not a number.
        """
        if isinstance(multiplier, Money):
            raise TypeError("Cannot multiply Money by Money")
        return self.__class__(self.amount * self._as_operand(multiplier, "times"), self.currency)

    def plus(self, addend: Money | DecimalLike) -> Money:
        """Return a new Money with $addend added to $amount, in the same currency.

        Args:
            addend: A plain number, or a Money in the same currency.

        Raises:
            CurrencyMismatchError: If $addend is Money in another currency.
            TypeError: If $addend is neither Money nor a number.
        """
        if isinstance(addend, Money):
            self._check_same_currency(addend, "add")
            return self.__class__(self.amount + addend.amount, self.currency)
        return self.__class__(self.amount + self._as_operand(addend, "plus"), self.currency)

    def rounded(self) -> Money:
        """Return a copy with $amount rounded to `currency.precision` (ROUND_HALF_EVEN)."""
        return self.__class__(self._quantized_amount(), self.currency)

    def _quantized_amount(self) -> Decimal:
        with localcontext() as ctx:
            ctx.prec = self.ROUNDING_PRECISION
            return self.amount.quantize(Decimal(1).scaleb(-self.currency.precision))

    def _display_amount(self) -> Decimal:
        # Pad to currency precision; amounts with more decimals are shown exactly
        if self.amount.as_tuple().exponent >= -self.currency.precision:
            return self._quantized_amount()
        return self.amount

    def equals(self, other) -> bool:
        """Check structural equality; same as `==`."""
        return self == other

    def _check_same_currency(self, other: Money, operation: str) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency, operation)

    @staticmethod
    def _as_operand(value, operation: str) -> Decimal:
        try:
            return as_decimal(value)
        except (TypeError, InvalidOperation) as e:
            raise TypeError(f"Cannot call `{operation}` because $value ({value!r}) is not a number") from e

    # endregion

    # region Comparison operators (same currency required for ordering)

    def __eq__(self, other) -> bool:
        """Equal when both are Money of the same type with equal currency and amount."""
        if type(other) is not type(self):
            return False
        return self.currency == other.currency and self.amount == other.amount

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.amount >= other.amount

    # endregion

    # region Arithmetic operators

    def __add__(self, other):
        """Add two Money objects (same currency) or Money + number."""
        try:
            return self.plus(other)
        except TypeError:
            return NotImplemented

    def __radd__(self, other):
        """Right addition: number + Money. Lets `sum()` start from 0."""
        return self.__add__(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency) or Money - number."""
        if isinstance(other, Money):
            self._check_same_currency(other, "subtract")
            return self.__class__(self.amount - other.amount, self.currency)
        try:
            return self.__class__(self.amount - self._as_operand(other, "__sub__"), self.currency)
        except TypeError:
            return NotImplemented

    def __mul__(self, other):
        """Multiply Money by number (returns Money)."""
        try:
            return self.times(other)
        except TypeError:
            return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number (returns Money) or Money by Money (returns Decimal)."""
        if isinstance(other, Money):
            self._check_same_currency(other, "divide")
            if other.amount == 0:
                raise ZeroDivisionError("Cannot divide by zero Money")
            return self.amount / other.amount

        try:
            divisor = self._as_operand(other, "__truediv__")
        except TypeError:
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide Money by zero")
        return self.__class__(self.amount / divisor, self.currency)

    def __neg__(self):
        return self.__class__(-self.amount, self.currency)

    def __abs__(self):
        return self.__class__(abs(self.amount), self.currency)

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self._display_amount()} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self._display_amount()}, {self.currency.code})"

    def __hash__(self) -> int:
        return hash((self.amount, self.currency.code))

    # endregion
