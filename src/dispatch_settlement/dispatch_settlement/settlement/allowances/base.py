from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...activities.model import ClassActivity
from ...institutions.model import Institution


@dataclass(frozen=True)
class AllowanceDecision:
    per_session: int
    reason: str


class AllowanceRule(ABC):
    """Strategy Pattern: one conditional per-session allowance.

    Rules are independent and additive; every rule explains itself even when
    it pays nothing.
    """

    category: str

    @abstractmethod
    def decide(
        self,
        *,
        activity: ClassActivity,
        institution: Institution,
        is_weekend: bool,
    ) -> AllowanceDecision:
        raise NotImplementedError
