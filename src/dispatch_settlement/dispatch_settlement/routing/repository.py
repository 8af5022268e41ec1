from __future__ import annotations

from typing import Protocol

from .model import DistanceMatrix


class DistanceMatrixRepository(Protocol):
    def load(self) -> DistanceMatrix:
        raise NotImplementedError
