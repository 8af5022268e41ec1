from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Union

from ..common.validators import require_non_negative
from ..core.enums import ActivityStatus, ActivityType, InstructorRole
from ..core.exceptions import ValidationError

EVENT_STATUSES = frozenset({ActivityStatus.CONFIRMED, ActivityStatus.COMPLETED, ActivityStatus.CANCELLED})


@dataclass(frozen=True)
class ClassActivity:
    """One class taught by one instructor at one institution on one day."""

    activity_id: str
    instructor_id: str
    activity_date: date
    status: ActivityStatus
    role: InstructorRole
    institution_id: str
    sessions: int
    students: int
    has_assistant: bool = False
    equipment_transport: bool = False
    activity_type: ActivityType = field(default=ActivityType.CLASS, init=False)

    def __post_init__(self) -> None:
        require_non_negative(self.sessions, f"차시 수({self.activity_id})")
        require_non_negative(self.students, f"학생 수({self.activity_id})")

    @property
    def is_cancelled(self) -> bool:
        return self.status == ActivityStatus.CANCELLED

    def to_dict(self) -> dict:
        return {
            "activity_id": self.activity_id,
            "instructor_id": self.instructor_id,
            "date": self.activity_date.isoformat(),
            "type": self.activity_type.value,
            "status": self.status.value,
            "role": self.role.value,
            "institution_id": self.institution_id,
            "sessions": self.sessions,
            "students": self.students,
            "has_assistant": self.has_assistant,
            "equipment_transport": self.equipment_transport,
        }


@dataclass(frozen=True)
class EventActivity:
    """Participation in an event (행사), paid per hour."""

    activity_id: str
    instructor_id: str
    activity_date: date
    status: ActivityStatus
    event_hours: float
    equipment_transport: bool = False
    activity_type: ActivityType = field(default=ActivityType.EVENT, init=False)

    def __post_init__(self) -> None:
        if self.status not in EVENT_STATUSES:
            raise ValidationError(f"행사 상태가 올바르지 않습니다: {self.status.value} ({self.activity_id})")
        require_non_negative(self.event_hours, f"행사 시간({self.activity_id})")

    @property
    def is_cancelled(self) -> bool:
        return self.status == ActivityStatus.CANCELLED

    def to_dict(self) -> dict:
        return {
            "activity_id": self.activity_id,
            "instructor_id": self.instructor_id,
            "date": self.activity_date.isoformat(),
            "type": self.activity_type.value,
            "status": self.status.value,
            "event_hours": self.event_hours,
            "equipment_transport": self.equipment_transport,
        }


Activity = Union[ClassActivity, EventActivity]
