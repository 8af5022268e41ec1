"""Payment statement (수당 명세서) rows.

One row per instructor/month in the column layout of the official allowance
statement. Tax is split into income tax (3%) and local income tax (0.3%);
the split always sums to the monthly withholding.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable

from .model import MonthlySettlement
from .tax import tax_breakdown


@dataclass(frozen=True)
class PaymentStatementRow:
    instructor_id: str
    instructor_name: str
    month: str
    special_allowance: int
    remote_allowance: int
    weekend_allowance: int
    understaffed_allowance: int
    event_allowance: int
    equipment_transport_allowance: int
    travel_allowance: int
    main_sessions: int
    assistant_sessions: int
    teaching_base_amount: int
    total_allowance: int
    income_tax: int
    local_income_tax: int
    total_tax: int
    actual_payment: int

    def to_dict(self) -> dict:
        return asdict(self)


# (field, header) in statement column order
STATEMENT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("instructor_id", "강사ID"),
    ("instructor_name", "이름"),
    ("month", "정산월"),
    ("special_allowance", "특별수당"),
    ("remote_allowance", "도서벽지수당"),
    ("weekend_allowance", "휴일(주말) 수당"),
    ("understaffed_allowance", "보조강사 미배치 수당"),
    ("event_allowance", "행사참여수당"),
    ("equipment_transport_allowance", "교구운반수당"),
    ("travel_allowance", "출장수당"),
    ("main_sessions", "주강사 출강 차시"),
    ("assistant_sessions", "보조강사 출강 차시"),
    ("teaching_base_amount", "강사료"),
    ("total_allowance", "수당총합계"),
    ("income_tax", "소득세"),
    ("local_income_tax", "지방소득세"),
    ("total_tax", "근로자세액 합계"),
    ("actual_payment", "실지급액"),
)


def build_statement_row(monthly: MonthlySettlement) -> PaymentStatementRow:
    taxes = tax_breakdown(monthly.gross_total)
    return PaymentStatementRow(
        instructor_id=monthly.instructor_id,
        instructor_name=monthly.instructor_name,
        month=monthly.month,
        special_allowance=monthly.allowances.special,
        remote_allowance=monthly.allowances.remote,
        weekend_allowance=monthly.allowances.weekend,
        understaffed_allowance=monthly.allowances.understaffed,
        event_allowance=monthly.event_amount,
        equipment_transport_allowance=monthly.equipment_transport_amount,
        travel_allowance=monthly.travel_allowance_total,
        main_sessions=monthly.main_sessions,
        assistant_sessions=monthly.assistant_sessions,
        teaching_base_amount=monthly.teaching_base_amount,
        total_allowance=monthly.gross_total,
        income_tax=taxes.income_tax,
        local_income_tax=taxes.local_income_tax,
        total_tax=taxes.total_tax,
        actual_payment=monthly.gross_total - taxes.total_tax,
    )


def to_header_records(rows: Iterable[PaymentStatementRow]) -> list[dict]:
    """Rows keyed by the Korean statement headers, in column order."""

    records = []
    for row in rows:
        data = row.to_dict()
        records.append({header: data[name] for name, header in STATEMENT_COLUMNS})
    return records
