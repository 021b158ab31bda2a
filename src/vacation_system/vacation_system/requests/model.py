from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import RequestStatus


def duration_days(start_date: date, end_date: date) -> int:
    """Inclusive day count: a request from the 10th to the 12th lasts 3 days."""
    return abs((end_date - start_date).days) + 1


@dataclass(frozen=True)
class VacationRequest:
    request_id: int
    user_id: int
    start_date: date
    end_date: date
    reason: Optional[str]
    status: RequestStatus
    created_at: datetime
    comments: Optional[str] = None


@dataclass(frozen=True)
class VacationRequestView(VacationRequest):
    """VacationRequest joined with the owner's display name."""

    user_name: str = ""

    @property
    def duration_days(self) -> int:
        return duration_days(self.start_date, self.end_date)
