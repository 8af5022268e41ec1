from __future__ import annotations

from typing import Mapping

from ..core.enums import InstitutionLevel
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_bool
from .model import Institution
from .repository import InstitutionRepository


class MySQLInstitutionRepository(InstitutionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_all_by_id(self) -> Mapping[str, Institution]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT institution_id, name, city, level, is_remote, is_special
                FROM institutions
                """
            )
            rows = fetchall(cur)
            return {
                str(r["institution_id"]): Institution(
                    institution_id=str(r["institution_id"]),
                    name=r["name"],
                    city=r["city"],
                    level=InstitutionLevel(r["level"]),
                    is_remote=to_bool(r.get("is_remote")),
                    is_special=to_bool(r.get("is_special")),
                )
                for r in rows
            }
