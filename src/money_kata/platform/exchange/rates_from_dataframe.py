from __future__ import annotations

# load_rates_from_dataframe: Fill a Bank from a rate table held in a pandas DataFrame.

import logging

import pandas as pd

from money_kata.platform.exchange.bank import Bank

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("from_currency", "to_currency", "rate")


def load_rates_from_dataframe(bank: Bank, df: pd.DataFrame) -> int:
    """Register one exchange rate per row of $df on $bank.

    Input DataFrame has to meet these requirements:
    - Columns: from_currency, to_currency, rate. Extra columns are ignored.
    - Rows are registered in order, so a later row for the same pair replaces an earlier one.
    - Validation: `Bank.add_rate` checks each rate; the first bad row raises and stops
      the load. Rows before it stay registered.

    Args:
    - $bank (Bank): Bank receiving the rates.
    - $df (pd.DataFrame): Rate table.

    Returns:
        int: Number of rows registered.

    Raises:
        ValueError: If $df is not a DataFrame or misses required columns.
        InvalidRateError: If a row carries a non-positive or non-finite rate.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a pandas DataFrame, but received {type(df).__name__}. Please provide your rates as a pandas DataFrame.")

    # Check: required columns present
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        missing_cols = ", ".join(sorted(missing))
        raise ValueError(f"The provided DataFrame is missing required columns: {missing_cols}. Please ensure your DataFrame contains these columns: {', '.join(REQUIRED_COLUMNS)}.")

    count = 0
    for row in df.loc[:, list(REQUIRED_COLUMNS)].itertuples(index=False):
        rate = row.rate
        # numpy scalars are not DecimalLike; convert them to plain Python numbers
        if hasattr(rate, "item"):
            rate = rate.item()
        bank.add_rate(str(row.from_currency), str(row.to_currency), rate)
        count += 1

    logger.info(f"Loaded {count} exchange rate(s) from DataFrame into {bank!r}")
    return count
