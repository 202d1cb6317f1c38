from decimal import Decimal

import pytest

from money_kata.domain.monetary.currency import Currency
from money_kata.domain.monetary.currency_registry import CHF, JPY, USD
from money_kata.domain.monetary.errors import CurrencyMismatchError
from money_kata.domain.monetary.money import Money


def test_multiply_dollars():
    """Test that times returns a new dollar amount and leaves the original untouched."""
    five = Money.dollar(5)

    assert five.times(2) == Money.dollar(10)
    assert five.times(3) == Money.dollar(15)
    assert five == Money.dollar(5)


def test_multiply_francs():
    five = Money.franc(5)

    assert five.times(2) == Money.franc(10)
    assert five.times(3) == Money.franc(15)


@pytest.mark.parametrize(
    "amount, multiplier, expected",
    [
        (5, 0, "0"),
        (5, -2, "-10"),
        ("2.50", "1.5", "3.75"),
        (0.1, 3, "0.30"),
        (7, Decimal("0.5"), "3.50"),
    ],
)
def test_times_multiplies_amount_in_same_currency(amount, multiplier, expected):
    result = Money(amount, "CHF").times(multiplier)

    assert result == Money(expected, "CHF")
    assert result.currency == CHF


def test_equality():
    """Test that equality checks both amount and currency."""
    assert Money.dollar(5).equals(Money.dollar(5))
    assert not Money.dollar(5).equals(Money.dollar(6))

    assert Money.franc(5).equals(Money.franc(5))
    assert not Money.franc(5).equals(Money.franc(6))

    assert not Money.franc(5).equals(Money.dollar(6))
    assert not Money.franc(5).equals(Money.dollar(5))
    assert Money(5, "USD") != Money(5, "CHF")


def test_equality_is_symmetric_and_ignores_decimal_scale():
    a = Money.dollar(5)
    b = Money(Decimal("5.000"), "usd")

    assert a == a
    assert a == b and b == a
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


@pytest.mark.parametrize("other", [5, Decimal("5"), "5 USD", None, USD])
def test_equals_returns_false_for_non_money(other):
    assert Money.dollar(5).equals(other) is False
    assert (Money.dollar(5) == other) is False


def test_currencies():
    assert Money.dollar(5).currency == "USD"
    assert "CHF" == Money.franc(5).currency
    assert Money.franc(5).currency != "USD"
    assert str(Money.franc(5).currency) == "CHF"


def test_general_constructor_accepts_arbitrary_currency_code():
    money = Money(5, "xyz")

    assert money.currency.code == "XYZ"
    assert money.currency.precision == 2
    assert money == Money(5, "XYZ")


def test_amount_is_kept_exact():
    """Test that amounts finer than the currency precision are neither rounded nor merged."""
    assert Money("10.126", USD).amount == Decimal("10.126")
    assert Money("1.001", "USD") != Money("1.004", "USD")


@pytest.mark.parametrize(
    "a, b",
    [
        ("0.015", "0.015"),
        ("1.001", "2.0049"),
        ("-0.005", "0.0001"),
        (5, "0.125"),
    ],
)
def test_plus_and_times_are_exact_below_currency_precision(a, b):
    assert Money(a, "USD").plus(Money(b, "USD")) == Money(Decimal(str(a)) + Decimal(b), "USD")
    assert Money(a, "USD").times(b) == Money(Decimal(str(a)) * Decimal(b), "USD")


def test_rounded():
    assert Money("10.126", USD).rounded() == Money("10.13", USD)
    assert Money("0.015", USD).plus(Money("0.015", USD)).rounded() == Money("0.03", USD)
    assert Money("100.5", JPY).rounded().amount == Decimal("100")
    assert Money("100.4", JPY).rounded().amount.as_tuple().exponent == 0


def test_rounded_supports_large_amounts_with_high_precision():
    wei = Currency("WEI", 18, "Ether in wei precision")

    large = Money(10_000_000_000, wei)
    assert large.rounded() == large
    assert Money(Money.MAX_VALUE, wei).rounded().amount == Money.MAX_VALUE
    assert Money(Money.MIN_VALUE, wei).rounded().amount == Money.MIN_VALUE
    assert str(large) == "10000000000.000000000000000000 WEI"


def test_money_is_immutable():
    money = Money.dollar(5)

    with pytest.raises(AttributeError):
        money.amount = Decimal("6")
    with pytest.raises(AttributeError):
        money.currency = CHF


def test_plus_number():
    assert Money.dollar(5).plus(5).equals(Money.dollar(10))


def test_plus_money_in_same_currency():
    assert Money.dollar(5).plus(Money.dollar(7)) == Money.dollar(12)
    assert Money.franc(5) + Money.franc(1) == Money.franc(6)


def test_plus_money_in_other_currency_raises():
    with pytest.raises(CurrencyMismatchError) as exc_info:
        Money.dollar(5).plus(Money.franc(5))

    assert exc_info.value.left == USD
    assert exc_info.value.right == CHF
    assert isinstance(exc_info.value, ValueError)


def test_plus_rejects_non_numbers():
    with pytest.raises(TypeError):
        Money.dollar(5).plus(object())
    with pytest.raises(TypeError):
        Money.dollar(5) + "abc"


def test_sum_of_money():
    assert sum([Money.dollar(1), Money.dollar(2), Money.dollar(3)]) == Money.dollar(6)
    assert sum([], Money.zero("USD")) == Money.dollar(0)


def test_arithmetic_operators():
    assert Money.dollar(5) * 2 == Money.dollar(10)
    assert 2 * Money.dollar(5) == Money.dollar(10)
    assert Money.dollar(5) - Money.dollar(2) == Money.dollar(3)
    assert Money.dollar(5) - 2 == Money.dollar(3)
    assert -Money.dollar(5) == Money.dollar(-5)
    assert abs(Money.dollar(-5)) == Money.dollar(5)
    assert Money.dollar(10) / 4 == Money("2.50", "USD")
    assert Money.dollar(10) / Money.dollar(4) == Decimal("2.5")


def test_invalid_arithmetic():
    with pytest.raises(TypeError):
        Money.dollar(5) * Money.dollar(2)
    with pytest.raises(ZeroDivisionError):
        Money.dollar(5) / 0
    with pytest.raises(ZeroDivisionError):
        Money.dollar(5) / Money.dollar(0)
    with pytest.raises(CurrencyMismatchError):
        Money.dollar(5) - Money.franc(2)


def test_ordering_requires_same_currency():
    assert Money.dollar(5) < Money.dollar(6)
    assert Money.dollar(6) >= Money.dollar(6)
    assert max(Money.franc(1), Money.franc(3), Money.franc(2)) == Money.franc(3)

    with pytest.raises(CurrencyMismatchError):
        Money.dollar(5) < Money.franc(6)


@pytest.mark.parametrize("amount", ["abc", float("nan"), float("inf"), True, None, Money.MAX_VALUE + 1])
def test_invalid_amount_raises(amount):
    with pytest.raises(ValueError):
        Money(amount, "USD")


def test_invalid_currency_raises():
    with pytest.raises(TypeError):
        Money(5, 840)
    with pytest.raises(ValueError):
        Money(5, "  ")


def test_string_representations():
    money = Money("1000.5", "USD")

    assert str(money) == "1000.50 USD"
    assert repr(money) == "Money(1000.50, USD)"
    # Extra decimals are shown as they are, not rounded away
    assert str(Money("0.125", "USD")) == "0.125 USD"


def test_from_str():
    assert Money.from_str("1000.50 USD") == Money("1000.5", USD)
    assert Money.from_str(" 3 chf ") == Money.franc(3)

    for bad in ["", "10", "abc USD", "10 USD extra"]:
        with pytest.raises(ValueError):
            Money.from_str(bad)
