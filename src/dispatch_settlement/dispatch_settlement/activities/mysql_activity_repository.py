from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..core.enums import ActivityStatus, ActivityType, InstructorRole
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_bool, to_float
from .model import Activity, ClassActivity, EventActivity
from .repository import ActivityRepository

logger = logging.getLogger(__name__)


class MySQLActivityRepository(ActivityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _map(r: dict) -> Optional[Activity]:
        activity_type = ActivityType(r["activity_type"])
        if activity_type == ActivityType.EVENT:
            return EventActivity(
                activity_id=str(r["activity_id"]),
                instructor_id=str(r["instructor_id"]),
                activity_date=r["activity_date"],
                status=ActivityStatus(r["status"]),
                event_hours=to_float(r.get("event_hours")),
                equipment_transport=to_bool(r.get("equipment_transport")),
            )

        if not r.get("role") or not r.get("institution_id"):
            logger.warning("Class activity %s has no role/institution, skipped", r["activity_id"])
            return None
        return ClassActivity(
            activity_id=str(r["activity_id"]),
            instructor_id=str(r["instructor_id"]),
            activity_date=r["activity_date"],
            status=ActivityStatus(r["status"]),
            role=InstructorRole(r["role"]),
            institution_id=str(r["institution_id"]),
            sessions=int(r.get("sessions") or 0),
            students=int(r.get("students") or 0),
            has_assistant=to_bool(r.get("has_assistant")),
            equipment_transport=to_bool(r.get("equipment_transport")),
        )

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        instructor_id: Optional[str] = None,
    ) -> Sequence[Activity]:
        clauses = ["activity_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if instructor_id is not None:
            clauses.append("instructor_id=%s")
            params.append(str(instructor_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    activity_id, instructor_id, activity_date, visit_order, activity_type, status,
                    role, institution_id, sessions, students, has_assistant, event_hours, equipment_transport
                FROM activities
                WHERE {where}
                ORDER BY activity_date ASC, instructor_id ASC, visit_order ASC, activity_id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

        out: list[Activity] = []
        for r in rows:
            activity = self._map(r)
            if activity is not None:
                out.append(activity)
        return out
