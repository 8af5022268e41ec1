from __future__ import annotations

from datetime import date

import pytest

from src.dispatch_settlement.dispatch_settlement.activities.model import ClassActivity, EventActivity
from src.dispatch_settlement.dispatch_settlement.core.enums import ActivityStatus, InstitutionLevel, InstructorRole
from src.dispatch_settlement.dispatch_settlement.institutions.model import Institution
from src.dispatch_settlement.dispatch_settlement.instructors.model import Instructor
from src.dispatch_settlement.dispatch_settlement.routing.model import DistanceMatrix

TUESDAY = date(2025, 1, 14)
SATURDAY = date(2025, 1, 18)
SUNDAY = date(2025, 1, 19)

DEMO_DISTANCES = [
    ("Suwon", "Yongin", 15.2),
    ("Suwon", "Seongnam", 18.5),
    ("Suwon", "Hwaseong", 25.3),
    ("Suwon", "Ansan", 32.1),
    ("Suwon", "Pyeongtaek", 28.7),
    ("Yongin", "Seongnam", 22.8),
    ("Yongin", "Hwaseong", 18.9),
    ("Yongin", "Ansan", 28.4),
    ("Yongin", "Pyeongtaek", 35.2),
    ("Seongnam", "Hwaseong", 30.1),
    ("Seongnam", "Ansan", 25.7),
    ("Seongnam", "Pyeongtaek", 42.3),
    ("Hwaseong", "Ansan", 38.2),
    ("Hwaseong", "Pyeongtaek", 28.5),
    ("Ansan", "Pyeongtaek", 45.8),
    # 80 km from Suwon, used for multi-stop route cases
    ("Suwon", "Gapyeong", 80.0),
]


@pytest.fixture
def matrix() -> DistanceMatrix:
    return DistanceMatrix.from_rows(DEMO_DISTANCES, mirror=True)


@pytest.fixture
def instructor() -> Instructor:
    return Instructor(instructor_id="inst-001", name="김강사", home_city="Suwon")


@pytest.fixture
def institutions() -> dict[str, Institution]:
    items = [
        Institution("school-001", "수원초등학교", "Suwon", InstitutionLevel.ELEMENTARY),
        Institution("school-002", "용인중학교", "Yongin", InstitutionLevel.MIDDLE),
        Institution("school-003", "성남고등학교", "Seongnam", InstitutionLevel.HIGH),
        Institution("school-004", "화성도서벽지초등학교", "Hwaseong", InstitutionLevel.ELEMENTARY, is_remote=True),
        Institution("school-005", "안산특수학교", "Ansan", InstitutionLevel.ELEMENTARY, is_special=True),
        Institution("school-006", "평택도서벽지특수학급", "Pyeongtaek", InstitutionLevel.ELEMENTARY, is_remote=True, is_special=True),
        Institution("school-007", "수원중학교", "Suwon", InstitutionLevel.MIDDLE),
        Institution("school-008", "가평초등학교", "Gapyeong", InstitutionLevel.ELEMENTARY),
    ]
    return {i.institution_id: i for i in items}


def make_class(
    activity_id: str = "act-1",
    *,
    instructor_id: str = "inst-001",
    activity_date: date = TUESDAY,
    status: ActivityStatus = ActivityStatus.CONFIRMED,
    role: InstructorRole = InstructorRole.MAIN,
    institution_id: str = "school-001",
    sessions: int = 4,
    students: int = 20,
    has_assistant: bool = True,
    equipment_transport: bool = False,
) -> ClassActivity:
    return ClassActivity(
        activity_id=activity_id,
        instructor_id=instructor_id,
        activity_date=activity_date,
        status=status,
        role=role,
        institution_id=institution_id,
        sessions=sessions,
        students=students,
        has_assistant=has_assistant,
        equipment_transport=equipment_transport,
    )


def make_event(
    activity_id: str = "evt-1",
    *,
    instructor_id: str = "inst-001",
    activity_date: date = TUESDAY,
    status: ActivityStatus = ActivityStatus.CONFIRMED,
    event_hours: float = 3,
    equipment_transport: bool = False,
) -> EventActivity:
    return EventActivity(
        activity_id=activity_id,
        instructor_id=instructor_id,
        activity_date=activity_date,
        status=status,
        event_hours=event_hours,
        equipment_transport=equipment_transport,
    )


class FakeInstructorRepo:
    def __init__(self, instructors):
        self._by_id = {i.instructor_id: i for i in instructors}

    def get_by_id(self, instructor_id):
        return self._by_id.get(instructor_id)

    def list_all(self):
        return [self._by_id[k] for k in sorted(self._by_id)]


class FakeInstitutionRepo:
    def __init__(self, institutions):
        self._by_id = dict(institutions)

    def get_all_by_id(self):
        return dict(self._by_id)


class FakeActivityRepo:
    def __init__(self, activities):
        self._items = list(activities)
        self.calls = []

    def list_range(self, *, start_date, end_date, instructor_id=None):
        self.calls.append((start_date, end_date, instructor_id))
        return [
            a
            for a in self._items
            if start_date <= a.activity_date <= end_date and (instructor_id is None or a.instructor_id == instructor_id)
        ]


class FakeDistanceRepo:
    def __init__(self, matrix):
        self._matrix = matrix

    def load(self):
        return self._matrix
