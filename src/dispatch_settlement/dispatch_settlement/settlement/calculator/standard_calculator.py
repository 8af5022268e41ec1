from __future__ import annotations

import logging
from datetime import date
from decimal import ROUND_FLOOR, Decimal
from typing import Mapping, Optional, Sequence

from ...activities.model import Activity, ClassActivity, EventActivity
from ...common.datetime_utils import is_weekend
from ...core.constants import EQUIPMENT_TRANSPORT_PER_DAY, EVENT_RATE_PER_HOUR, NOT_APPLICABLE
from ...core.enums import ActivityType, InstructorRole
from ...core.exceptions import ValidationError
from ...institutions.model import Institution
from ...instructors.model import Instructor
from ...routing.model import DistanceMatrix
from ...routing.route_builder import build_route, route_legs, total_km
from ..allowances.calculator import AllowanceCalculator
from ..fee_rules import base_fee_per_session, travel_bracket_for_km
from ..model import (
    AllowanceBreakdown,
    CalculationDetails,
    ClassCalculationDetail,
    DailySettlement,
    EquipmentTransportDetail,
    EventCalculationDetail,
    SettlementSummary,
    TravelCalculationDetail,
)
from .base import SettlementCalculator

logger = logging.getLogger(__name__)


class StandardSettlementCalculator(SettlementCalculator):
    """Standard rule set.

    gross = teaching base + allowances + equipment transport + event pay + travel.
    Cancelled classes are itemized only as a preview of the foregone base fee.
    """

    def __init__(
        self,
        *,
        allowance_calculator: Optional[AllowanceCalculator] = None,
        event_rate_per_hour: int = EVENT_RATE_PER_HOUR,
        equipment_transport_per_day: int = EQUIPMENT_TRANSPORT_PER_DAY,
    ):
        self._allowances = allowance_calculator or AllowanceCalculator()
        self._event_rate = int(event_rate_per_hour)
        self._equipment_amount = int(equipment_transport_per_day)

    def compute_daily(
        self,
        instructor: Instructor,
        activities: Sequence[Activity],
        institutions: Mapping[str, Institution],
        matrix: DistanceMatrix,
        *,
        settlement_date: Optional[date] = None,
    ) -> DailySettlement:
        day = self._resolve_date(instructor, activities, settlement_date)
        weekend = is_weekend(day)

        class_activities: list[ClassActivity] = []
        event_activities: list[EventActivity] = []
        for activity in activities:
            if activity.activity_type == ActivityType.CLASS:
                class_activities.append(activity)
            elif activity.activity_type == ActivityType.EVENT:
                event_activities.append(activity)
            else:
                raise ValidationError(f"알 수 없는 활동 유형입니다: {activity.activity_type!r}")

        confirmed = [a for a in class_activities if not a.is_cancelled]
        cancelled = [a for a in class_activities if a.is_cancelled]

        travel = self._travel(instructor, confirmed, institutions, matrix)

        teaching_base = 0
        total_sessions = 0
        main_sessions = 0
        assistant_sessions = 0
        allowances = AllowanceBreakdown()
        class_details: list[ClassCalculationDetail] = []

        for activity in confirmed:
            institution = self._institution_for(activity, institutions)
            if institution is None:
                continue

            fee = base_fee_per_session(activity.role, institution.level)
            base_amount = fee * activity.sessions
            lines = self._allowances.for_class(activity=activity, institution=institution, is_weekend=weekend)

            teaching_base += base_amount
            total_sessions += activity.sessions
            if activity.role == InstructorRole.MAIN:
                main_sessions += activity.sessions
            else:
                assistant_sessions += activity.sessions
            allowances = allowances.add_lines(lines)

            class_details.append(
                ClassCalculationDetail(
                    activity_id=activity.activity_id,
                    institution_id=institution.institution_id,
                    institution_name=institution.name,
                    institution_level=institution.level,
                    role=activity.role,
                    status=activity.status,
                    sessions=activity.sessions,
                    students=activity.students,
                    has_assistant=activity.has_assistant,
                    base_fee_per_session=fee,
                    base_amount=base_amount,
                    allowances=lines,
                )
            )

        cancelled_sessions = 0
        cancelled_preview = 0
        for activity in cancelled:
            institution = self._institution_for(activity, institutions)
            if institution is None:
                continue
            cancelled_sessions += activity.sessions
            cancelled_preview += base_fee_per_session(activity.role, institution.level) * activity.sessions

        event_details = tuple(
            EventCalculationDetail(
                activity_id=event.activity_id,
                status=event.status,
                hours=event.event_hours,
                rate_per_hour=self._event_rate,
                amount=0 if event.is_cancelled else self._event_pay(event),
            )
            for event in event_activities
        )
        event_amount = sum(e.amount for e in event_details)

        has_transport = any(a.equipment_transport for a in activities if not a.is_cancelled)
        equipment = EquipmentTransportDetail(
            has_transport=has_transport,
            amount=self._equipment_amount if has_transport else 0,
            reason="교구 운반 수행" if has_transport else NOT_APPLICABLE,
        )

        gross = teaching_base + allowances.total + equipment.amount + event_amount + travel.allowance_amount

        summary = SettlementSummary(
            teaching_base=teaching_base,
            allowances_total=allowances.total,
            equipment_transport=equipment.amount,
            event=event_amount,
            travel=travel.allowance_amount,
            gross_total=gross,
        )

        logger.debug(
            "Daily settlement %s %s: classes=%d cancelled=%d events=%d gross=%d",
            instructor.instructor_id,
            day.isoformat(),
            len(confirmed),
            len(cancelled),
            len(event_activities),
            gross,
        )

        return DailySettlement(
            instructor_id=instructor.instructor_id,
            instructor_name=instructor.name,
            settlement_date=day,
            class_count=len(class_details),
            total_sessions=total_sessions,
            main_sessions=main_sessions,
            assistant_sessions=assistant_sessions,
            teaching_base_amount=teaching_base,
            allowances=allowances,
            equipment_transport_amount=equipment.amount,
            event_amount=event_amount,
            travel_km=travel.total_km,
            travel_allowance=travel.allowance_amount,
            cancelled_sessions=cancelled_sessions,
            cancelled_amount_preview=cancelled_preview,
            gross_total=gross,
            activities=tuple(activities),
            calculation_details=CalculationDetails(
                class_calculations=tuple(class_details),
                travel_calculation=travel,
                event_calculations=event_details,
                equipment_transport=equipment,
                summary=summary,
            ),
        )

    def _resolve_date(self, instructor: Instructor, activities: Sequence[Activity], settlement_date: Optional[date]) -> date:
        if not activities:
            if settlement_date is None:
                raise ValidationError("활동이 없는 날은 정산일(settlement_date)을 지정해야 합니다")
            return settlement_date

        day = settlement_date or activities[0].activity_date
        for activity in activities:
            if activity.instructor_id != instructor.instructor_id:
                raise ValidationError(
                    f"활동 {activity.activity_id}의 강사({activity.instructor_id})가 "
                    f"정산 대상 강사({instructor.instructor_id})와 다릅니다"
                )
            if activity.activity_date != day:
                raise ValidationError(
                    f"활동 {activity.activity_id}의 날짜({activity.activity_date.isoformat()})가 "
                    f"정산일({day.isoformat()})과 다릅니다"
                )
        return day

    def _institution_for(self, activity: ClassActivity, institutions: Mapping[str, Institution]) -> Optional[Institution]:
        institution = institutions.get(activity.institution_id)
        if institution is None:
            logger.warning(
                "Institution %s not found for activity %s, class left out of settlement",
                activity.institution_id,
                activity.activity_id,
            )
        return institution

    def _event_pay(self, event: EventActivity) -> int:
        # Hours carry one decimal (e.g. 2.3h); pay is floored to whole won.
        amount = Decimal(str(event.event_hours)) * self._event_rate
        return int(amount.to_integral_value(rounding=ROUND_FLOOR))

    def _travel(
        self,
        instructor: Instructor,
        confirmed: Sequence[ClassActivity],
        institutions: Mapping[str, Institution],
        matrix: DistanceMatrix,
    ) -> TravelCalculationDetail:
        route = build_route(instructor.home_city, confirmed, institutions)
        legs = route_legs(route, matrix)
        km = total_km(legs)
        bracket = travel_bracket_for_km(km)
        return TravelCalculationDetail(
            home_city=instructor.home_city,
            route=tuple(route),
            route_distances=tuple(legs),
            total_km=km,
            allowance_bracket=bracket.label,
            allowance_amount=bracket.amount,
        )
