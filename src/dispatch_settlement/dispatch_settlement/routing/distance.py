from __future__ import annotations

import logging

from .model import DistanceMatrix

logger = logging.getLogger(__name__)


def distance(city_a: str, city_b: str, matrix: DistanceMatrix) -> float:
    """Road distance between two cities in km.

    Same city is always 0. A pair missing from the matrix is a configuration
    gap: it is logged and resolved to 0 so one bad row cannot stop a batch.
    """

    if city_a == city_b:
        return 0.0

    km = matrix.lookup(city_a, city_b)
    if km is None:
        logger.warning("Distance %s -> %s not found in distance matrix, using 0 km", city_a, city_b)
        return 0.0
    return float(km)
