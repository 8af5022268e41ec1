from __future__ import annotations

from datetime import date

import pytest
from conftest import SATURDAY, make_class, make_event

from src.dispatch_settlement.dispatch_settlement.core.enums import ActivityStatus
from src.dispatch_settlement.dispatch_settlement.core.exceptions import ValidationError
from src.dispatch_settlement.dispatch_settlement.instructors.model import Instructor
from src.dispatch_settlement.dispatch_settlement.settlement.calculator.monthly_aggregator import (
    MonthlySettlementAggregator,
)
from src.dispatch_settlement.dispatch_settlement.settlement.calculator.standard_calculator import (
    StandardSettlementCalculator,
)


@pytest.fixture
def daily_for(instructor, institutions, matrix):
    calc = StandardSettlementCalculator()

    def _daily(*activities, who=None):
        return calc.compute_daily(who or instructor, list(activities), institutions, matrix)

    return _daily


def _weekdays(count):
    return [day for day in (date(2025, 1, d) for d in range(1, 32)) if day.weekday() < 5][:count]


def _transport_days(daily_for, count):
    return [
        daily_for(make_class(f"a{day.day}", activity_date=day, sessions=1, equipment_transport=True))
        for day in _weekdays(count)
    ]


def test_equipment_transport_is_capped(daily_for):
    monthly = MonthlySettlementAggregator().compute_monthly(_transport_days(daily_for, 18))

    assert monthly.equipment_transport_amount == 300_000
    assert monthly.equipment_transport_cap_applied is True
    assert monthly.equipment_transport_cap_reduced_amount == 60_000
    assert monthly.teaching_base_amount == 720_000
    assert monthly.gross_total == 1_020_000
    assert monthly.tax == 33_660
    assert monthly.net_total == 986_340


def test_cap_not_applied_below_or_at_limit(daily_for):
    aggregator = MonthlySettlementAggregator()

    below = aggregator.compute_monthly(_transport_days(daily_for, 12))
    assert below.equipment_transport_amount == 240_000
    assert below.equipment_transport_cap_applied is False
    assert below.equipment_transport_cap_reduced_amount == 0

    at_cap = aggregator.compute_monthly(_transport_days(daily_for, 15))
    assert at_cap.equipment_transport_amount == 300_000
    assert at_cap.equipment_transport_cap_applied is False


@pytest.fixture
def fifty_thousand_transport_days(instructor, institutions, matrix):
    calc = StandardSettlementCalculator(equipment_transport_per_day=50_000)

    def _days(count):
        return [
            calc.compute_daily(
                instructor,
                [make_class(f"t{day.day}", activity_date=day, sessions=1, equipment_transport=True)],
                institutions,
                matrix,
            )
            for day in _weekdays(count)
        ]

    return _days


def test_transport_sum_of_350k_is_clamped_to_300k(fifty_thousand_transport_days):
    monthly = MonthlySettlementAggregator().compute_monthly(fifty_thousand_transport_days(7))

    assert monthly.equipment_transport_amount == 300_000
    assert monthly.equipment_transport_cap_applied is True
    assert monthly.equipment_transport_cap_reduced_amount == 50_000
    assert monthly.gross_total == 7 * 40_000 + 300_000


def test_transport_sum_of_250k_is_paid_in_full(fifty_thousand_transport_days):
    monthly = MonthlySettlementAggregator().compute_monthly(fifty_thousand_transport_days(5))

    assert monthly.equipment_transport_amount == 250_000
    assert monthly.equipment_transport_cap_applied is False
    assert monthly.equipment_transport_cap_reduced_amount == 0


def test_cap_is_configurable(daily_for):
    monthly = MonthlySettlementAggregator(equipment_transport_cap=40_000).compute_monthly(_transport_days(daily_for, 3))
    assert monthly.equipment_transport_amount == 40_000
    assert monthly.equipment_transport_cap_reduced_amount == 20_000


def test_tax_and_net(daily_for):
    monthly = MonthlySettlementAggregator().compute_monthly([daily_for(make_event(event_hours=4))])

    assert monthly.gross_total == 100_000
    assert monthly.tax == 3_300
    assert monthly.net_total == 96_700


def test_tax_is_floored(daily_for):
    monthly = MonthlySettlementAggregator().compute_monthly([daily_for(make_event(event_hours=1.5))])

    assert monthly.gross_total == 37_500
    assert monthly.tax == 1_237
    assert monthly.net_total == 36_263


def test_sums_categories_and_sorts_days(daily_for):
    later = daily_for(make_class("a", activity_date=SATURDAY, institution_id="school-004", sessions=2))
    earlier = daily_for(make_class("b", activity_date=date(2025, 1, 7), institution_id="school-005", sessions=2))

    monthly = MonthlySettlementAggregator().compute_monthly([later, earlier])

    assert [d.settlement_date for d in monthly.daily_settlements] == [date(2025, 1, 7), SATURDAY]
    assert monthly.month == "2025-01"
    assert monthly.total_days == 2
    assert monthly.total_sessions == 4
    assert monthly.allowances.remote == 10_000
    assert monthly.allowances.special == 20_000
    assert monthly.allowances.weekend == 10_000
    assert monthly.travel_allowance_total == later.travel_allowance + earlier.travel_allowance
    assert monthly.gross_total == later.gross_total + earlier.gross_total


def test_rejects_empty_input():
    with pytest.raises(ValidationError):
        MonthlySettlementAggregator().compute_monthly([])


def test_rejects_mixed_instructors(daily_for):
    other = Instructor(instructor_id="inst-002", name="이강사", home_city="Yongin")
    days = [
        daily_for(make_class("a")),
        daily_for(make_class("b", instructor_id="inst-002", activity_date=SATURDAY), who=other),
    ]
    with pytest.raises(ValidationError):
        MonthlySettlementAggregator().compute_monthly(days)


def test_rejects_mixed_months(daily_for):
    days = [
        daily_for(make_class("a", activity_date=date(2025, 1, 31))),
        daily_for(make_class("b", activity_date=date(2025, 2, 1))),
    ]
    with pytest.raises(ValidationError):
        MonthlySettlementAggregator().compute_monthly(days)


def test_rejects_duplicate_dates(daily_for):
    days = [daily_for(make_class("a")), daily_for(make_class("b"))]
    with pytest.raises(ValidationError):
        MonthlySettlementAggregator().compute_monthly(days)


def test_to_dict_can_leave_out_daily_rows(daily_for):
    monthly = MonthlySettlementAggregator().compute_monthly([daily_for(make_class())])

    assert "daily_settlements" not in monthly.to_dict(include_daily=False)
    assert len(monthly.to_dict()["daily_settlements"]) == 1


def _teaching_days(daily_for, count, sessions=4):
    return [
        daily_for(make_class(f"m{day.day}", activity_date=day, sessions=sessions))
        for day in _weekdays(count)
    ]


def test_minimum_sessions_met(daily_for):
    monthly = MonthlySettlementAggregator().compute_monthly(_teaching_days(daily_for, 8))

    assert monthly.total_sessions == 32
    assert monthly.minimum_sessions_required == 30
    assert monthly.minimum_sessions_met is True
    assert monthly.minimum_sessions_message == "월 최소 활동 요건 충족 (32차시)"


def test_minimum_sessions_not_met_ignores_cancelled(daily_for):
    days = _teaching_days(daily_for, 7)
    days.append(
        daily_for(make_class("c", activity_date=date(2025, 1, 31), sessions=4, status=ActivityStatus.CANCELLED))
    )
    monthly = MonthlySettlementAggregator().compute_monthly(days)

    assert monthly.total_sessions == 28
    assert monthly.cancelled_sessions == 4
    assert monthly.minimum_sessions_met is False
    assert monthly.minimum_sessions_message == "월 최소 활동 요건 미충족 (28/30차시)"
    # informational only
    assert monthly.gross_total == 28 * 40_000


def test_minimum_sessions_is_configurable_and_serialized(daily_for):
    monthly = MonthlySettlementAggregator(minimum_sessions=4).compute_monthly([daily_for(make_class())])

    data = monthly.to_dict(include_daily=False)
    assert data["minimum_sessions_required"] == 4
    assert data["minimum_sessions_met"] is True
    assert data["minimum_sessions_message"] == "월 최소 활동 요건 충족 (4차시)"
