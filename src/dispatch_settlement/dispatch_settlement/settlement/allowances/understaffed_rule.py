from __future__ import annotations

from ...activities.model import ClassActivity
from ...core.constants import UNDERSTAFFED_ALLOWANCE_PER_SESSION, UNDERSTAFFED_MIN_STUDENTS
from ...core.enums import InstructorRole
from ...institutions.model import Institution
from .base import AllowanceDecision, AllowanceRule


class UnderstaffedClassAllowanceRule(AllowanceRule):
    """MAIN instructor alone with a large class (15+ students, no assistant)."""

    category = "understaffed"

    def __init__(self, *, min_students: int = UNDERSTAFFED_MIN_STUDENTS):
        self._min_students = int(min_students)

    def decide(self, *, activity: ClassActivity, institution: Institution, is_weekend: bool) -> AllowanceDecision:
        if activity.role != InstructorRole.MAIN:
            return AllowanceDecision(per_session=0, reason="보조강사는 해당없음")
        if activity.students < self._min_students:
            return AllowanceDecision(
                per_session=0,
                reason=f"학생 {activity.students}명 ({self._min_students}명 미만)",
            )
        if activity.has_assistant:
            return AllowanceDecision(per_session=0, reason="보조강사 있음")
        return AllowanceDecision(
            per_session=UNDERSTAFFED_ALLOWANCE_PER_SESSION,
            reason=f"학생 {self._min_students}명 이상 + 보조강사 없음",
        )
