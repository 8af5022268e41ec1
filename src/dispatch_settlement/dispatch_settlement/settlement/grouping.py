from __future__ import annotations

from datetime import date
from typing import Iterable

from ..activities.model import Activity


def group_by_instructor_and_date(activities: Iterable[Activity]) -> dict[str, dict[date, list[Activity]]]:
    """instructor_id -> activity_date -> activities, keeping input order inside each day."""

    grouped: dict[str, dict[date, list[Activity]]] = {}
    for activity in activities:
        by_date = grouped.setdefault(activity.instructor_id, {})
        by_date.setdefault(activity.activity_date, []).append(activity)
    return grouped
