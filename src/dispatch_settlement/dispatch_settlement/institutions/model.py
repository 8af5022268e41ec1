from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import InstitutionLevel


@dataclass(frozen=True)
class Institution:
    """Domain entity: school or site an instructor is dispatched to.

    - is_remote: 도서벽지 (remote/underserved area)
    - is_special: 특수학급/특수학교 (special-education site)
    - level: drives the base fee
    """

    institution_id: str
    name: str
    city: str
    level: InstitutionLevel
    is_remote: bool = False
    is_special: bool = False
