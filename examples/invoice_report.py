from __future__ import annotations

import logging

import pandas as pd

from money_kata.domain.monetary.money import Money
from money_kata.platform.exchange.bank import Bank
from money_kata.platform.exchange.rates_from_dataframe import load_rates_from_dataframe
from money_kata.utils.report.invoice_report import InvoiceReport


logger = logging.getLogger(__name__)


def run() -> None:
    # Rates are "units of to_currency per 1 unit of from_currency"
    rates = pd.DataFrame(
        {
            "from_currency": ["CHF", "EUR"],
            "to_currency": ["USD", "USD"],
            "rate": [1 / 1.5, 1.08],
        }
    )

    bank = Bank()
    load_rates_from_dataframe(bank, rates)

    # Invoice lines in mixed currencies
    report = InvoiceReport(bank, "USD")
    report.add_line("CodeCorp", Money.dollar(25).times(1000))
    report.add_line("BugBurger", Money.franc(150).times(400))

    report.print_report()
    logger.info(f"Invoice total: {report.total()}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    run()
