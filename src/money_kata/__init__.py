__version__ = "0.0.1"

from money_kata.domain.monetary.currency import Currency
from money_kata.domain.monetary.errors import CurrencyMismatchError, InvalidRateError, RateNotFoundError
from money_kata.domain.monetary.money import Money
from money_kata.platform.exchange.bank import Bank
from money_kata.utils.report.invoice_report import InvoiceReport

__all__ = [
    "Bank",
    "Currency",
    "CurrencyMismatchError",
    "InvalidRateError",
    "InvoiceReport",
    "Money",
    "RateNotFoundError",
]
