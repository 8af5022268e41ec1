from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Instructor
from .repository import InstructorRepository


class MySQLInstructorRepository(InstructorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _map(r: dict) -> Instructor:
        return Instructor(instructor_id=str(r["instructor_id"]), name=r["name"], home_city=r["home_city"])

    def get_by_id(self, instructor_id: str) -> Optional[Instructor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT instructor_id, name, home_city FROM instructors WHERE instructor_id=%s",
                (str(instructor_id),),
            )
            r = fetchone(cur)
            return self._map(r) if r else None

    def list_all(self) -> Sequence[Instructor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT instructor_id, name, home_city FROM instructors ORDER BY instructor_id")
            return [self._map(r) for r in fetchall(cur)]
