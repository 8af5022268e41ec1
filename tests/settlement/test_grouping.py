from conftest import SATURDAY, TUESDAY, make_class, make_event

from src.dispatch_settlement.dispatch_settlement.settlement.grouping import group_by_instructor_and_date


def test_groups_by_instructor_then_day_keeping_order():
    activities = [
        make_class("a1", institution_id="school-002"),
        make_class("b1", instructor_id="inst-002"),
        make_event("e1"),
        make_class("a2", activity_date=SATURDAY),
        make_class("a0", institution_id="school-001"),
    ]

    grouped = group_by_instructor_and_date(activities)

    assert set(grouped) == {"inst-001", "inst-002"}
    assert [a.activity_id for a in grouped["inst-001"][TUESDAY]] == ["a1", "e1", "a0"]
    assert [a.activity_id for a in grouped["inst-001"][SATURDAY]] == ["a2"]
    assert [a.activity_id for a in grouped["inst-002"][TUESDAY]] == ["b1"]


def test_empty_input():
    assert group_by_instructor_and_date([]) == {}
