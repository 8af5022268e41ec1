from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..activities.repository import ActivityRepository
from ..common.datetime_utils import month_bounds, parse_month
from ..core.exceptions import NotFoundError
from ..institutions.repository import InstitutionRepository
from ..instructors.model import Instructor
from ..instructors.repository import InstructorRepository
from ..routing.repository import DistanceMatrixRepository
from .calculator.base import SettlementCalculator
from .calculator.monthly_aggregator import MonthlySettlementAggregator
from .calculator.standard_calculator import StandardSettlementCalculator
from .grouping import group_by_instructor_and_date
from .model import DailySettlement, MonthlySettlement
from .statement import PaymentStatementRow, build_statement_row

logger = logging.getLogger(__name__)


class SettlementService:
    """Loads reference data once per call and runs the settlement engine.

    The engine itself does no I/O; everything it needs is read here from the
    repositories and passed in.
    """

    def __init__(
        self,
        instructors: InstructorRepository,
        institutions: InstitutionRepository,
        activities: ActivityRepository,
        distances: DistanceMatrixRepository,
        *,
        calculator: Optional[SettlementCalculator] = None,
        aggregator: Optional[MonthlySettlementAggregator] = None,
    ):
        self._instructors = instructors
        self._institutions = institutions
        self._activities = activities
        self._distances = distances
        self._calculator = calculator or StandardSettlementCalculator()
        self._aggregator = aggregator or MonthlySettlementAggregator()

    def _require_instructor(self, instructor_id: str) -> Instructor:
        instructor = self._instructors.get_by_id(instructor_id)
        if not instructor:
            raise NotFoundError(f"강사를 찾을 수 없습니다: {instructor_id}")
        return instructor

    def daily_settlement(self, *, instructor_id: str, day: date) -> DailySettlement:
        instructor = self._require_instructor(instructor_id)
        activities = self._activities.list_range(start_date=day, end_date=day, instructor_id=instructor_id)
        return self._calculator.compute_daily(
            instructor,
            activities,
            self._institutions.get_all_by_id(),
            self._distances.load(),
            settlement_date=day,
        )

    def daily_settlements_for_month(self, *, instructor_id: str, month: str) -> list[DailySettlement]:
        instructor = self._require_instructor(instructor_id)
        start, end = month_bounds(*parse_month(month))

        activities = self._activities.list_range(start_date=start, end_date=end, instructor_id=instructor_id)
        by_date = group_by_instructor_and_date(activities).get(instructor_id, {})
        if not by_date:
            return []

        institutions = self._institutions.get_all_by_id()
        matrix = self._distances.load()
        return [
            self._calculator.compute_daily(instructor, by_date[day], institutions, matrix)
            for day in sorted(by_date)
        ]

    def monthly_settlement(self, *, instructor_id: str, month: str) -> Optional[MonthlySettlement]:
        dailies = self.daily_settlements_for_month(instructor_id=instructor_id, month=month)
        if not dailies:
            return None
        return self._aggregator.compute_monthly(dailies)

    def monthly_settlements(self, *, month: str) -> list[MonthlySettlement]:
        """Every instructor with activity in the month, ordered by instructor id."""

        start, end = month_bounds(*parse_month(month))
        grouped = group_by_instructor_and_date(self._activities.list_range(start_date=start, end_date=end))
        if not grouped:
            return []

        instructors = {i.instructor_id: i for i in self._instructors.list_all()}
        institutions = self._institutions.get_all_by_id()
        matrix = self._distances.load()

        results: list[MonthlySettlement] = []
        for instructor_id in sorted(grouped):
            instructor = instructors.get(instructor_id)
            if not instructor:
                logger.warning("Instructor %s not found, %s activities skipped", instructor_id, month)
                continue

            by_date = grouped[instructor_id]
            dailies = [
                self._calculator.compute_daily(instructor, by_date[day], institutions, matrix)
                for day in sorted(by_date)
            ]
            results.append(self._aggregator.compute_monthly(dailies))

        logger.info("Computed %d monthly settlements for %s", len(results), month)
        return results

    def payment_statements(self, *, month: str) -> list[PaymentStatementRow]:
        return [build_statement_row(m) for m in self.monthly_settlements(month=month)]
