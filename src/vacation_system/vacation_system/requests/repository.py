from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import VacationRequest, VacationRequestView


class RequestRepository(Protocol):
    """Vacation request store. Every method is its own unit of work."""

    def create(
        self,
        *,
        user_id: int,
        start_date: date,
        end_date: date,
        reason: Optional[str],
    ) -> VacationRequest:
        """Insert a Pending request; store assigns id and created_at."""

        raise NotImplementedError

    def get(self, *, request_id: int) -> Optional[VacationRequest]:
        raise NotImplementedError

    def list_all(self, *, status: Optional[RequestStatus] = None) -> Sequence[VacationRequestView]:
        """Return views joined with user name, newest first."""

        raise NotImplementedError

    def list_by_owner(self, *, user_id: int) -> Sequence[VacationRequestView]:
        raise NotImplementedError

    def update_status(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        comments: Optional[str] = None,
        expected_status: Optional[RequestStatus] = None,
    ) -> Optional[VacationRequest]:
        """Overwrite status and comments (None clears them).

        Returns None when no request has that id, or when ``expected_status``
        is given and the stored status differs.
        """

        raise NotImplementedError
