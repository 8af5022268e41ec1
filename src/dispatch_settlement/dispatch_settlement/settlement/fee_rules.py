"""Fee rule tables.

Both tables are plain data: adding a level or a distance band is a change to
the rows below, not to the lookup code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import InstitutionLevel, InstructorRole

BASE_FEE_PER_SESSION: dict[tuple[InstructorRole, InstitutionLevel], int] = {
    (InstructorRole.MAIN, InstitutionLevel.ELEMENTARY): 40_000,
    (InstructorRole.MAIN, InstitutionLevel.MIDDLE): 45_000,
    (InstructorRole.MAIN, InstitutionLevel.HIGH): 50_000,
    (InstructorRole.ASSISTANT, InstitutionLevel.ELEMENTARY): 30_000,
    (InstructorRole.ASSISTANT, InstitutionLevel.MIDDLE): 35_000,
    (InstructorRole.ASSISTANT, InstitutionLevel.HIGH): 40_000,
}


@dataclass(frozen=True)
class TravelBracket:
    """Half-open band [min_km, max_km) paid as one flat amount."""

    min_km: float
    max_km: Optional[float]
    amount: int
    label: str

    def contains(self, km: float) -> bool:
        if km < self.min_km:
            return False
        return self.max_km is None or km < self.max_km


# Ordered, contiguous, closed below / open above.
TRAVEL_BRACKETS: tuple[TravelBracket, ...] = (
    TravelBracket(0, 50, 0, "50km 미만 (지급 없음)"),
    TravelBracket(50, 70, 20_000, "50-70km (20,000원)"),
    TravelBracket(70, 90, 30_000, "70-90km (30,000원)"),
    TravelBracket(90, 110, 40_000, "90-110km (40,000원)"),
    TravelBracket(110, 130, 50_000, "110-130km (50,000원)"),
    TravelBracket(130, None, 60_000, "130km 이상 (60,000원)"),
)


def base_fee_per_session(role: InstructorRole, level: InstitutionLevel) -> int:
    return BASE_FEE_PER_SESSION[(InstructorRole(role), InstitutionLevel(level))]


def travel_bracket_for_km(km: float) -> TravelBracket:
    for bracket in TRAVEL_BRACKETS:
        if bracket.contains(km):
            return bracket
    # Negative distances cannot come out of the matrix; treat as the lowest band.
    return TRAVEL_BRACKETS[0]


def travel_allowance_from_km(km: float) -> int:
    return travel_bracket_for_km(km).amount
