"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions, the predefined currency registry and Money
calculations with proper precision arithmetic.
"""

# Importing the registry registers the predefined currencies
from money_kata.domain.monetary import currency_registry  # noqa: F401
