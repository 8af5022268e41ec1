from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import date
from typing import Mapping

from ..activities.model import Activity
from ..common.datetime_utils import month_key
from ..core.enums import ActivityStatus, InstitutionLevel, InstructorRole
from ..routing.model import RouteLeg


@dataclass(frozen=True)
class AllowanceLine:
    """One allowance on one class: rate, session total and why."""

    per_session: int
    total: int
    reason: str

    def to_dict(self) -> dict:
        return {"per_session": self.per_session, "total": self.total, "reason": self.reason}


@dataclass(frozen=True)
class AllowanceBreakdown:
    """Allowance amounts per category (also used as a running sum)."""

    remote: int = 0
    special: int = 0
    weekend: int = 0
    understaffed: int = 0

    @property
    def total(self) -> int:
        return self.remote + self.special + self.weekend + self.understaffed

    def add_lines(self, lines: Mapping[str, AllowanceLine]) -> "AllowanceBreakdown":
        changes = {category: getattr(self, category) + line.total for category, line in lines.items()}
        return replace(self, **changes)

    def __add__(self, other: "AllowanceBreakdown") -> "AllowanceBreakdown":
        return AllowanceBreakdown(**{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)})

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ClassCalculationDetail:
    activity_id: str
    institution_id: str
    institution_name: str
    institution_level: InstitutionLevel
    role: InstructorRole
    status: ActivityStatus
    sessions: int
    students: int
    has_assistant: bool
    base_fee_per_session: int
    base_amount: int
    allowances: Mapping[str, AllowanceLine]

    @property
    def allowances_total(self) -> int:
        return sum(line.total for line in self.allowances.values())

    def to_dict(self) -> dict:
        return {
            "activity_id": self.activity_id,
            "institution_id": self.institution_id,
            "institution_name": self.institution_name,
            "institution_level": self.institution_level.value,
            "role": self.role.value,
            "status": self.status.value,
            "sessions": self.sessions,
            "students": self.students,
            "has_assistant": self.has_assistant,
            "base_fee_per_session": self.base_fee_per_session,
            "base_amount": self.base_amount,
            "allowances": {category: line.to_dict() for category, line in self.allowances.items()},
            "allowances_total": self.allowances_total,
        }


@dataclass(frozen=True)
class TravelCalculationDetail:
    home_city: str
    route: tuple[str, ...]
    route_distances: tuple[RouteLeg, ...]
    total_km: float
    allowance_bracket: str
    allowance_amount: int

    def to_dict(self) -> dict:
        return {
            "home_city": self.home_city,
            "route": list(self.route),
            "route_distances": [leg.to_dict() for leg in self.route_distances],
            "total_km": self.total_km,
            "allowance_bracket": self.allowance_bracket,
            "allowance_amount": self.allowance_amount,
        }


@dataclass(frozen=True)
class EventCalculationDetail:
    activity_id: str
    status: ActivityStatus
    hours: float
    rate_per_hour: int
    amount: int

    def to_dict(self) -> dict:
        return {
            "activity_id": self.activity_id,
            "status": self.status.value,
            "hours": self.hours,
            "rate_per_hour": self.rate_per_hour,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class EquipmentTransportDetail:
    has_transport: bool
    amount: int
    reason: str

    def to_dict(self) -> dict:
        return {"has_transport": self.has_transport, "amount": self.amount, "reason": self.reason}


@dataclass(frozen=True)
class SettlementSummary:
    teaching_base: int
    allowances_total: int
    equipment_transport: int
    event: int
    travel: int
    gross_total: int

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class CalculationDetails:
    """Itemized explanation returned with every daily figure."""

    class_calculations: tuple[ClassCalculationDetail, ...]
    travel_calculation: TravelCalculationDetail
    event_calculations: tuple[EventCalculationDetail, ...]
    equipment_transport: EquipmentTransportDetail
    summary: SettlementSummary

    def to_dict(self) -> dict:
        return {
            "class_calculations": [c.to_dict() for c in self.class_calculations],
            "travel_calculation": self.travel_calculation.to_dict(),
            "event_calculations": [e.to_dict() for e in self.event_calculations],
            "equipment_transport": self.equipment_transport.to_dict(),
            "summary": self.summary.to_dict(),
        }


@dataclass(frozen=True)
class DailySettlement:
    """Settlement of one instructor for one calendar day."""

    instructor_id: str
    instructor_name: str
    settlement_date: date
    class_count: int
    total_sessions: int
    main_sessions: int
    assistant_sessions: int
    teaching_base_amount: int
    allowances: AllowanceBreakdown
    equipment_transport_amount: int
    event_amount: int
    travel_km: float
    travel_allowance: int
    cancelled_sessions: int
    cancelled_amount_preview: int
    gross_total: int
    activities: tuple[Activity, ...]
    calculation_details: CalculationDetails

    @property
    def month(self) -> str:
        return month_key(self.settlement_date)

    def to_dict(self) -> dict:
        return {
            "instructor_id": self.instructor_id,
            "instructor_name": self.instructor_name,
            "date": self.settlement_date.isoformat(),
            "class_count": self.class_count,
            "total_sessions": self.total_sessions,
            "main_sessions": self.main_sessions,
            "assistant_sessions": self.assistant_sessions,
            "teaching_base_amount": self.teaching_base_amount,
            "allowances_breakdown": self.allowances.to_dict(),
            "allowances_total": self.allowances.total,
            "equipment_transport_amount": self.equipment_transport_amount,
            "event_amount": self.event_amount,
            "travel_km": self.travel_km,
            "travel_allowance": self.travel_allowance,
            "cancelled_sessions": self.cancelled_sessions,
            "cancelled_amount_preview": self.cancelled_amount_preview,
            "gross_total": self.gross_total,
            "activities": [a.to_dict() for a in self.activities],
            "calculation_details": self.calculation_details.to_dict(),
        }


@dataclass(frozen=True)
class MonthlySettlement:
    """Month statement of one instructor, built from its daily settlements."""

    instructor_id: str
    instructor_name: str
    month: str
    total_days: int
    total_sessions: int
    main_sessions: int
    assistant_sessions: int
    teaching_base_amount: int
    allowances: AllowanceBreakdown
    equipment_transport_amount: int
    equipment_transport_cap_applied: bool
    equipment_transport_cap_reduced_amount: int
    event_amount: int
    travel_allowance_total: int
    cancelled_sessions: int
    cancelled_amount_preview: int
    gross_total: int
    tax: int
    net_total: int
    minimum_sessions_required: int
    minimum_sessions_met: bool
    minimum_sessions_message: str
    daily_settlements: tuple[DailySettlement, ...]

    @property
    def allowances_total(self) -> int:
        return self.allowances.total

    def to_dict(self, *, include_daily: bool = True) -> dict:
        data = {
            "instructor_id": self.instructor_id,
            "instructor_name": self.instructor_name,
            "month": self.month,
            "total_days": self.total_days,
            "total_sessions": self.total_sessions,
            "main_sessions": self.main_sessions,
            "assistant_sessions": self.assistant_sessions,
            "teaching_base_amount": self.teaching_base_amount,
            "allowances_breakdown": self.allowances.to_dict(),
            "allowances_total": self.allowances_total,
            "equipment_transport_amount": self.equipment_transport_amount,
            "equipment_transport_cap_applied": self.equipment_transport_cap_applied,
            "equipment_transport_cap_reduced_amount": self.equipment_transport_cap_reduced_amount,
            "event_amount": self.event_amount,
            "travel_allowance_total": self.travel_allowance_total,
            "cancelled_sessions": self.cancelled_sessions,
            "cancelled_amount_preview": self.cancelled_amount_preview,
            "gross_total": self.gross_total,
            "tax": self.tax,
            "net_total": self.net_total,
            "minimum_sessions_required": self.minimum_sessions_required,
            "minimum_sessions_met": self.minimum_sessions_met,
            "minimum_sessions_message": self.minimum_sessions_message,
        }
        if include_daily:
            data["daily_settlements"] = [d.to_dict() for d in self.daily_settlements]
        return data


@dataclass(frozen=True)
class TaxBreakdown:
    income_tax: int
    local_income_tax: int
    total_tax: int
