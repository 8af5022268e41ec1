from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Back-office role read from the session (set by the external login flow)."""

    ADMIN = "admin"
    INSTRUCTOR = "instructor"


class ActivityType(str, Enum):
    """Discriminant of the activity union."""

    CLASS = "CLASS"
    EVENT = "EVENT"


class ActivityStatus(str, Enum):
    PLANNED = "PLANNED"
    OPEN = "OPEN"
    ASSIGNED = "ASSIGNED"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class InstructorRole(str, Enum):
    """Role of an instructor on one class (주강사 / 보조강사)."""

    MAIN = "MAIN"
    ASSISTANT = "ASSISTANT"


class InstitutionLevel(str, Enum):
    ELEMENTARY = "ELEMENTARY"
    MIDDLE = "MIDDLE"
    HIGH = "HIGH"
