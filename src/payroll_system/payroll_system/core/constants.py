"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

HOURS_PER_WORK_DAY = 8
MINUTES_PER_HOUR = 60

DEFAULT_EMPLOYMENT_INSURANCE_RATE = Decimal("0.003")
DEFAULT_INCOME_TAX_RATE = Decimal("0.05")

# Resident tax is re-assessed every year effective June.
RESIDENT_TAX_ASSESSMENT_MONTH = 6

# Pay periods close on the 25th; a period opens on the 26th of the prior month.
PERIOD_CLOSING_DAY = 25
