"""Withholding tax (사업소득 원천징수).

The monthly figure uses the combined 3.3% rate; the statement split into
income tax (3%) and local income tax (0.3%) is derived from that same figure
so the two can never disagree.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal

from ..core.constants import INCOME_TAX_RATE, WITHHOLDING_TAX_RATE
from .model import TaxBreakdown


def _floor_amount(gross: int, rate: Decimal) -> int:
    return int((Decimal(int(gross)) * rate).to_integral_value(rounding=ROUND_FLOOR))


def withholding_tax(gross: int) -> int:
    return _floor_amount(gross, WITHHOLDING_TAX_RATE)


def tax_breakdown(gross: int) -> TaxBreakdown:
    total = withholding_tax(gross)
    income = _floor_amount(gross, INCOME_TAX_RATE)
    return TaxBreakdown(income_tax=income, local_income_tax=total - income, total_tax=total)
