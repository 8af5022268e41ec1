"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
All amounts are KRW (no subunits).
"""

from decimal import Decimal

# Allowances, per session
REMOTE_ALLOWANCE_PER_SESSION = 5_000
SPECIAL_ALLOWANCE_PER_SESSION = 10_000
WEEKEND_ALLOWANCE_PER_SESSION = 5_000
UNDERSTAFFED_ALLOWANCE_PER_SESSION = 5_000
UNDERSTAFFED_MIN_STUDENTS = 15

# Day-level and event pay
EQUIPMENT_TRANSPORT_PER_DAY = 20_000
EVENT_RATE_PER_HOUR = 25_000

# Monthly
EQUIPMENT_TRANSPORT_MONTHLY_CAP = 300_000
# Minimum taught sessions per month for activity-requirement eligibility
MONTHLY_MINIMUM_SESSIONS = 30

# Withholding: income tax 3% + local income tax 0.3% = 3.3%
INCOME_TAX_RATE = Decimal("0.03")
LOCAL_INCOME_TAX_RATE = Decimal("0.003")
WITHHOLDING_TAX_RATE = INCOME_TAX_RATE + LOCAL_INCOME_TAX_RATE

NOT_APPLICABLE = "해당없음"
