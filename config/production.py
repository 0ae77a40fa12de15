import os

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# No fallback here: an unset variable leaves the rate empty and payroll refuses to compute.
EMPLOYMENT_INSURANCE_RATE = os.getenv("EMPLOYMENT_INSURANCE_RATE")
INCOME_TAX_RATE = os.getenv("INCOME_TAX_RATE")

OVERTIME_PREMIUM_RATE = os.getenv("OVERTIME_PREMIUM_RATE", "")
