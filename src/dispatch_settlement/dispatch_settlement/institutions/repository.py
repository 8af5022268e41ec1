from __future__ import annotations

from typing import Mapping, Protocol

from .model import Institution


class InstitutionRepository(Protocol):
    def get_all_by_id(self) -> Mapping[str, Institution]:
        """Whole registry keyed by institution_id (small, loaded once per batch)."""

        raise NotImplementedError
