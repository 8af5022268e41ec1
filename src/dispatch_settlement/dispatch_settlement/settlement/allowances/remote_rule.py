from __future__ import annotations

from ...activities.model import ClassActivity
from ...core.constants import NOT_APPLICABLE, REMOTE_ALLOWANCE_PER_SESSION
from ...institutions.model import Institution
from .base import AllowanceDecision, AllowanceRule


class RemoteAllowanceRule(AllowanceRule):
    """도서벽지: institution in a remote/underserved area."""

    category = "remote"

    def decide(self, *, activity: ClassActivity, institution: Institution, is_weekend: bool) -> AllowanceDecision:
        if institution.is_remote:
            return AllowanceDecision(per_session=REMOTE_ALLOWANCE_PER_SESSION, reason="도서벽지 지역")
        return AllowanceDecision(per_session=0, reason=NOT_APPLICABLE)
