from __future__ import annotations

import logging
from typing import Sequence

from ...core.constants import EQUIPMENT_TRANSPORT_MONTHLY_CAP, MONTHLY_MINIMUM_SESSIONS
from ...core.exceptions import ValidationError
from ..model import AllowanceBreakdown, DailySettlement, MonthlySettlement
from ..tax import withholding_tax

logger = logging.getLogger(__name__)


class MonthlySettlementAggregator:
    """Sum daily settlements of one instructor/month, cap equipment transport, withhold tax.

    Also reports whether the month meets the minimum activity requirement
    (taught sessions, cancelled ones excluded). It is informational and
    does not change any amount.
    """

    def __init__(
        self,
        *,
        equipment_transport_cap: int = EQUIPMENT_TRANSPORT_MONTHLY_CAP,
        minimum_sessions: int = MONTHLY_MINIMUM_SESSIONS,
    ):
        self._equipment_cap = int(equipment_transport_cap)
        self._minimum_sessions = int(minimum_sessions)

    def compute_monthly(self, daily_settlements: Sequence[DailySettlement]) -> MonthlySettlement:
        self._validate(daily_settlements)

        dailies = tuple(sorted(daily_settlements, key=lambda d: d.settlement_date))
        first = dailies[0]

        allowances = AllowanceBreakdown()
        for daily in dailies:
            allowances = allowances + daily.allowances

        teaching_base = sum(d.teaching_base_amount for d in dailies)
        event_amount = sum(d.event_amount for d in dailies)
        travel_total = sum(d.travel_allowance for d in dailies)

        equipment = sum(d.equipment_transport_amount for d in dailies)
        cap_applied = equipment > self._equipment_cap
        cap_reduced = 0
        if cap_applied:
            cap_reduced = equipment - self._equipment_cap
            equipment = self._equipment_cap
            logger.info(
                "Equipment transport cap applied for %s %s: -%d",
                first.instructor_id,
                first.month,
                cap_reduced,
            )

        gross = teaching_base + allowances.total + equipment + event_amount + travel_total
        tax = withholding_tax(gross)
        total_sessions = sum(d.total_sessions for d in dailies)
        minimum_met = total_sessions >= self._minimum_sessions

        return MonthlySettlement(
            instructor_id=first.instructor_id,
            instructor_name=first.instructor_name,
            month=first.month,
            total_days=len(dailies),
            total_sessions=total_sessions,
            main_sessions=sum(d.main_sessions for d in dailies),
            assistant_sessions=sum(d.assistant_sessions for d in dailies),
            teaching_base_amount=teaching_base,
            allowances=allowances,
            equipment_transport_amount=equipment,
            equipment_transport_cap_applied=cap_applied,
            equipment_transport_cap_reduced_amount=cap_reduced,
            event_amount=event_amount,
            travel_allowance_total=travel_total,
            cancelled_sessions=sum(d.cancelled_sessions for d in dailies),
            cancelled_amount_preview=sum(d.cancelled_amount_preview for d in dailies),
            gross_total=gross,
            tax=tax,
            net_total=gross - tax,
            minimum_sessions_required=self._minimum_sessions,
            minimum_sessions_met=minimum_met,
            minimum_sessions_message=self._minimum_message(total_sessions, minimum_met),
            daily_settlements=dailies,
        )

    def _minimum_message(self, total_sessions: int, met: bool) -> str:
        if met:
            return f"월 최소 활동 요건 충족 ({total_sessions}차시)"
        return f"월 최소 활동 요건 미충족 ({total_sessions}/{self._minimum_sessions}차시)"

    @staticmethod
    def _validate(daily_settlements: Sequence[DailySettlement]) -> None:
        if not daily_settlements:
            raise ValidationError("월 정산에는 최소 1건의 일별 정산이 필요합니다")

        instructor_ids = {d.instructor_id for d in daily_settlements}
        if len(instructor_ids) > 1:
            raise ValidationError(f"서로 다른 강사의 일별 정산이 섞여 있습니다: {sorted(instructor_ids)}")

        months = {d.month for d in daily_settlements}
        if len(months) > 1:
            raise ValidationError(f"서로 다른 월의 일별 정산이 섞여 있습니다: {sorted(months)}")

        dates = [d.settlement_date for d in daily_settlements]
        if len(set(dates)) != len(dates):
            raise ValidationError("같은 날짜의 일별 정산이 중복되어 있습니다")
