from __future__ import annotations

from ...activities.model import ClassActivity
from ...core.constants import WEEKEND_ALLOWANCE_PER_SESSION
from ...institutions.model import Institution
from .base import AllowanceDecision, AllowanceRule


class WeekendAllowanceRule(AllowanceRule):
    """Saturday/Sunday classes. Events are paid hourly and never reach the allowance rules."""

    category = "weekend"

    def decide(self, *, activity: ClassActivity, institution: Institution, is_weekend: bool) -> AllowanceDecision:
        if is_weekend:
            return AllowanceDecision(per_session=WEEKEND_ALLOWANCE_PER_SESSION, reason="주말(토/일)")
        return AllowanceDecision(per_session=0, reason="평일")
