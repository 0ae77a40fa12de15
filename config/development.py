import os

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Rates are fractions: 0.003 = 0.3%.
EMPLOYMENT_INSURANCE_RATE = os.getenv("EMPLOYMENT_INSURANCE_RATE", "0.003")
INCOME_TAX_RATE = os.getenv("INCOME_TAX_RATE", "0.05")

# Blank disables overtime pay.
OVERTIME_PREMIUM_RATE = os.getenv("OVERTIME_PREMIUM_RATE", "")
