from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_float
from .model import DistanceMatrix
from .repository import DistanceMatrixRepository


class MySQLDistanceMatrixRepository(DistanceMatrixRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self) -> DistanceMatrix:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT city_a, city_b, km FROM city_distances")
            rows = fetchall(cur)
            return DistanceMatrix.from_rows((r["city_a"], r["city_b"], to_float(r["km"])) for r in rows)
