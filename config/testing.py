DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

EMPLOYMENT_INSURANCE_RATE = "0.003"
INCOME_TAX_RATE = "0.05"
OVERTIME_PREMIUM_RATE = ""
