from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Instructor:
    """Domain entity: dispatched instructor.

    `home_city` is the origin and end point of every daily route.
    """

    instructor_id: str
    name: str
    home_city: str
