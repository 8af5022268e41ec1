from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ..activities.model import ClassActivity
from ..institutions.model import Institution
from .distance import distance
from .model import DistanceMatrix, RouteLeg

logger = logging.getLogger(__name__)

# Matrix values carry one decimal; rounding the sum keeps bracket edges exact.
KM_PRECISION = 1


def build_route(
    home_city: str,
    class_activities: Sequence[ClassActivity],
    institutions: Mapping[str, Institution],
) -> list[str]:
    """Closed loop home -> inst1 -> inst2 -> ... -> home, in visiting order.

    Consecutive visits to the same institution collapse into one stop; two
    different institutions in the same city stay two stops. No reordering.
    """

    if not class_activities:
        return [home_city, home_city]

    route = [home_city]
    previous_id = None
    for activity in class_activities:
        if activity.institution_id == previous_id:
            continue
        previous_id = activity.institution_id

        institution = institutions.get(activity.institution_id)
        if institution is None:
            logger.warning(
                "Institution %s not found for activity %s, stop left out of route",
                activity.institution_id,
                activity.activity_id,
            )
            continue
        route.append(institution.city)

    route.append(home_city)
    return route


def route_legs(route: Sequence[str], matrix: DistanceMatrix) -> list[RouteLeg]:
    return [
        RouteLeg(from_city=a, to_city=b, km=distance(a, b, matrix))
        for a, b in zip(route, route[1:])
    ]


def total_km(legs: Sequence[RouteLeg]) -> float:
    return round(sum(leg.km for leg in legs), KM_PRECISION)
