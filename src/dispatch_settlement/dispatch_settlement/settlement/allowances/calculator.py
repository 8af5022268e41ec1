from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ...activities.model import ClassActivity
from ...institutions.model import Institution
from ..model import AllowanceLine
from .base import AllowanceDecision, AllowanceRule
from .remote_rule import RemoteAllowanceRule
from .special_rule import SpecialEducationAllowanceRule
from .understaffed_rule import UnderstaffedClassAllowanceRule
from .weekend_rule import WeekendAllowanceRule


def default_rules() -> list[AllowanceRule]:
    return [
        RemoteAllowanceRule(),
        SpecialEducationAllowanceRule(),
        WeekendAllowanceRule(),
        UnderstaffedClassAllowanceRule(),
    ]


@dataclass
class AllowanceCalculator:
    """Runs every allowance rule on a class; results keyed by rule category."""

    rules: Sequence[AllowanceRule] = field(default_factory=default_rules)

    def per_session(
        self,
        *,
        activity: ClassActivity,
        institution: Institution,
        is_weekend: bool,
    ) -> dict[str, AllowanceDecision]:
        return {
            rule.category: rule.decide(activity=activity, institution=institution, is_weekend=is_weekend)
            for rule in self.rules
        }

    def for_class(self, *, activity: ClassActivity, institution: Institution, is_weekend: bool) -> dict[str, AllowanceLine]:
        decisions = self.per_session(activity=activity, institution=institution, is_weekend=is_weekend)
        return {
            category: AllowanceLine(
                per_session=decision.per_session,
                total=decision.per_session * activity.sessions,
                reason=decision.reason,
            )
            for category, decision in decisions.items()
        }
