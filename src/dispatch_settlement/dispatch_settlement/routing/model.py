from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


@dataclass(frozen=True)
class RouteLeg:
    from_city: str
    to_city: str
    km: float

    def to_dict(self) -> dict:
        return {"from": self.from_city, "to": self.to_city, "km": self.km}


class DistanceMatrix:
    """Read-only city x city road distance table (km, city hall to city hall).

    The table must list both directions of every pair; `is_symmetric()` and
    `missing_pairs()` exist so a bad configuration can be audited before a batch.
    """

    def __init__(self, distances: Mapping[str, Mapping[str, float]]):
        self._distances = MappingProxyType(
            {city: MappingProxyType(dict(row)) for city, row in distances.items()}
        )

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[str, str, float]], *, mirror: bool = False) -> "DistanceMatrix":
        """Build from (city_a, city_b, km) rows.

        With mirror=True each row also fills the reverse direction.
        """

        table: dict[str, dict[str, float]] = {}
        for city_a, city_b, km in rows:
            table.setdefault(city_a, {})[city_b] = float(km)
            if mirror:
                table.setdefault(city_b, {})[city_a] = float(km)
        return cls(table)

    def lookup(self, city_a: str, city_b: str) -> Optional[float]:
        row = self._distances.get(city_a)
        if row is None:
            return None
        return row.get(city_b)

    def cities(self) -> list[str]:
        names = set(self._distances)
        for row in self._distances.values():
            names.update(row)
        return sorted(names)

    def missing_pairs(self) -> list[tuple[str, str]]:
        cities = self.cities()
        return [
            (a, b)
            for a in cities
            for b in cities
            if a != b and self.lookup(a, b) is None
        ]

    def is_symmetric(self) -> bool:
        for city_a, row in self._distances.items():
            for city_b, km in row.items():
                if self.lookup(city_b, city_a) != km:
                    return False
        return True

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {city: dict(row) for city, row in self._distances.items()}
