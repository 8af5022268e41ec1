from __future__ import annotations

from ...activities.model import ClassActivity
from ...core.constants import NOT_APPLICABLE, SPECIAL_ALLOWANCE_PER_SESSION
from ...institutions.model import Institution
from .base import AllowanceDecision, AllowanceRule


class SpecialEducationAllowanceRule(AllowanceRule):
    """특수학급/특수학교."""

    category = "special"

    def decide(self, *, activity: ClassActivity, institution: Institution, is_weekend: bool) -> AllowanceDecision:
        if institution.is_special:
            return AllowanceDecision(per_session=SPECIAL_ALLOWANCE_PER_SESSION, reason="특수학급/특수학교")
        return AllowanceDecision(per_session=0, reason=NOT_APPLICABLE)
