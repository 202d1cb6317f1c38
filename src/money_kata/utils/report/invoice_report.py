import logging
from typing import List, Tuple

import pandas as pd

from money_kata.domain.monetary.currency import Currency
from money_kata.domain.monetary.money import Money
from money_kata.platform.exchange.bank import Bank

logger = logging.getLogger(__name__)


class InvoiceReport:
    """
    Usage:
        Collect invoice lines in any currency and total them in one report currency:

        report = InvoiceReport(bank, "USD")
        report.add_line("CodeCorp", Money.dollar(25).times(1000))
        report.add_line("BugBurger", Money.franc(150).times(400))
        report.total()

        InvoiceReport(bank, "USD").print_report()

        or

        lines = report.create_report()
        # do what you need with the string lines

    Parameters:
        bank: Bank
            converts each line into the report currency
        currency: Currency | str
            currency of the total
        custom_logger: logging.Logger
            custom logger for printing the report
    """
    def __init__(self, bank: Bank, currency: Currency | str, custom_logger: logging.Logger = None):
        if not isinstance(bank, Bank):
            raise ValueError(f"bank must be a Bank, but is {type(bank)}")
        self.bank = bank
        self.currency = Currency.resolve(currency)
        self.custom_logger = custom_logger
        self.lines: List[Tuple[str, Money]] = []

    def add_line(self, description: str, money: Money) -> "InvoiceReport":
        if not isinstance(money, Money):
            raise ValueError(f"money must be a Money, but is {type(money)}")
        self.lines.append((description, money))
        return self

    def total(self) -> Money:
        """Sum of all lines converted into the report currency.

        Raises:
            RateNotFoundError: If a line's currency has no rate into the report currency.
        """
        return sum((self.bank.change(m, self.currency) for _, m in self.lines), Money.zero(self.currency))

    def to_dataframe(self) -> pd.DataFrame:
        rows = []
        for description, m in self.lines:
            rows.append({
                "description": description,
                "amount": m.amount,
                "currency": m.currency.code,
                "converted_amount": self.bank.change(m, self.currency).amount,
            })
        return pd.DataFrame(rows, columns=["description", "amount", "currency", "converted_amount"])

    def create_report(self) -> List[str]:
        self.log().debug("start calculating report")
        report = [f"Lines   : {len(self.lines)}     Currency : {self.currency.code}"]
        for description, m in self.lines:
            converted = self.bank.change(m, self.currency)
            report.append(f"{description:<20} {m!s:>24} {converted!s:>24}")
        report.append(f"Total   : {self.total()}")
        self.log().debug("end calculating report")
        return report

    def print_report(self):
        r = self.create_report()
        self.log().debug("+-------------- Report start ---------------")
        for l in r:
            self.log().debug(f"| {l}")
        self.log().debug("+-------------- Report end -----------------")

    def log(self) -> logging.Logger:
        if self.custom_logger is not None:
            return self.custom_logger
        else:
            return logger
