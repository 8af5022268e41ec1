from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Activity


class ActivityRepository(Protocol):
    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        instructor_id: Optional[str] = None,
    ) -> Sequence[Activity]:
        """Activities in [start_date, end_date], ordered by date then entry order.

        Entry order matters: it is the visiting order used for the daily route.
        """

        raise NotImplementedError
