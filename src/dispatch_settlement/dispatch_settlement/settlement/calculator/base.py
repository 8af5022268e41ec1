from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Mapping, Optional, Sequence

from ...activities.model import Activity
from ...institutions.model import Institution
from ...instructors.model import Instructor
from ...routing.model import DistanceMatrix
from ..model import DailySettlement


class SettlementCalculator(ABC):
    """Calculator interface (Strategy Pattern for daily settlement)."""

    @abstractmethod
    def compute_daily(
        self,
        instructor: Instructor,
        activities: Sequence[Activity],
        institutions: Mapping[str, Institution],
        matrix: DistanceMatrix,
        *,
        settlement_date: Optional[date] = None,
    ) -> DailySettlement:
        raise NotImplementedError
