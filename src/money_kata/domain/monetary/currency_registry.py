from money_kata.domain.monetary.currency import Currency


USD = Currency("USD", 2, "US Dollar")
CHF = Currency("CHF", 2, "Swiss Franc")
EUR = Currency("EUR", 2, "Euro")
GBP = Currency("GBP", 2, "British Pound")
JPY = Currency("JPY", 0, "Japanese Yen")

for _currency in (USD, CHF, EUR, GBP, JPY):
    Currency.register(_currency, overwrite=True)
