from __future__ import annotations

import logging

from src.dispatch_settlement.dispatch_settlement.routing.distance import distance
from src.dispatch_settlement.dispatch_settlement.routing.model import DistanceMatrix


def test_same_city_is_zero_for_every_city(matrix):
    for city in matrix.cities():
        assert distance(city, city, matrix) == 0


def test_same_city_is_zero_even_if_matrix_says_otherwise():
    odd = DistanceMatrix({"Suwon": {"Suwon": 12.0}})
    assert distance("Suwon", "Suwon", odd) == 0


def test_distance_is_symmetric_for_every_pair(matrix):
    cities = matrix.cities()
    for a in cities:
        for b in cities:
            if matrix.lookup(a, b) is not None:
                assert distance(a, b, matrix) == distance(b, a, matrix)


def test_known_pair(matrix):
    assert distance("Suwon", "Yongin", matrix) == 15.2


def test_missing_pair_returns_zero_and_warns(matrix, caplog):
    with caplog.at_level(logging.WARNING):
        km = distance("Suwon", "Busan", matrix)

    assert km == 0
    assert "Suwon -> Busan" in caplog.text


def test_from_rows_without_mirror_reports_gaps():
    one_way = DistanceMatrix.from_rows([("Suwon", "Yongin", 15.2)])

    assert not one_way.is_symmetric()
    assert one_way.missing_pairs() == [("Yongin", "Suwon")]


def test_mirrored_demo_matrix_is_complete(matrix):
    assert matrix.is_symmetric()
    # Gapyeong is only linked to Suwon
    assert all("Gapyeong" in pair for pair in matrix.missing_pairs())
