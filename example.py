from treasury_fx import TreasuryRates, load_table, lookup_rate

print(TreasuryRates.__version__)  # 0.1.0

# Default usage: the bundled Treasury sample table
fx = TreasuryRates()
print(fx.last_updated)

# Pairwise rate and conversion
print(fx.rate("EUR", "GBP").unwrap().to_dict())
# => {'from': 'EUR', 'to': 'GBP', 'rate': 0.92832, 'effectiveDate': '2025-12-31'}
print(fx.convert("USD", "JPY", 250).unwrap().to_dict())

# Every rate relative to another base
print(fx.rates("CHF").unwrap().rates["USD"])

# Batch conversion keeps the input order
batch = fx.batch_convert("AUD", "CAD", [10, 20, 30])
print([item.converted_amount for item in batch.unwrap().conversions])

# Bad input comes back as a Failure rather than an exception
result = fx.convert("USD", "XYZ", 1)
if not result.ok:
    print(result.kind.value, result.message)

# Functional API over your own export
table = load_table("exchange_rates.csv")
print(lookup_rate(table, "USD", "MXN").unwrap().rate)
