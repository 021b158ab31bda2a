from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import RequestStatus, Role
from ..core.exceptions import AuthorizationError, InvalidStatusError, InvalidTransitionError, NotFoundError
from ..users.model import Principal
from .model import VacationRequest, VacationRequestView
from .repository import RequestRepository
from .validation import parse_status, parse_status_filter, validate_submission

logger = logging.getLogger(__name__)


class RequestService:
    """Vacation request lifecycle: submission, transitions and the two read views.

    Transitions only leave ``Pending`` unless ``allow_status_overwrite`` is set,
    in which case any status may be overwritten with any other (last write wins).
    Every method takes an optional ``actor``; when given, role and ownership
    rules are enforced against it.
    """

    def __init__(
        self,
        requests: RequestRepository,
        *,
        allow_status_overwrite: bool = False,
        reject_past_dates: bool = False,
        clock: Callable[[], datetime] = now_local,
    ):
        self._requests = requests
        self._allow_status_overwrite = allow_status_overwrite
        self._reject_past_dates = reject_past_dates
        self._clock = clock

    def _today(self) -> Optional[date]:
        if not self._reject_past_dates:
            return None
        return self._clock().date()

    @staticmethod
    def _require_validator(actor: Optional[Principal]) -> None:
        if actor is not None and not actor.is_validator:
            raise AuthorizationError("Only validators can do this")

    def submit(
        self,
        *,
        user_id: Any,
        start_date: Any,
        end_date: Any,
        reason: Optional[str] = None,
        actor: Optional[Principal] = None,
    ) -> VacationRequest:
        validated = validate_submission(
            user_id=user_id,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            today=self._today(),
        )

        if actor is not None:
            if actor.role != Role.REQUESTER:
                raise AuthorizationError("Only requesters can submit vacation requests")
            if actor.user_id != validated.user_id:
                raise AuthorizationError("You can only submit requests for yourself")

        created = self._requests.create(
            user_id=validated.user_id,
            start_date=validated.start_date,
            end_date=validated.end_date,
            reason=validated.reason,
        )
        logger.info(
            "Vacation request %s submitted by user %s (%s..%s)",
            created.request_id,
            created.user_id,
            created.start_date,
            created.end_date,
        )
        return created

    def update_status(
        self,
        *,
        request_id: int,
        status: Any,
        comments: Optional[str] = None,
        actor: Optional[Principal] = None,
    ) -> VacationRequest:
        new_status = parse_status(status)
        self._require_validator(actor)

        current = self._requests.get(request_id=int(request_id))
        if not current:
            raise NotFoundError("Request not found")

        expected: Optional[RequestStatus] = None
        if not self._allow_status_overwrite:
            if current.status != RequestStatus.PENDING:
                raise InvalidTransitionError(f"Request is already {current.status.value}")
            expected = RequestStatus.PENDING

        updated = self._requests.update_status(
            request_id=int(request_id),
            status=new_status,
            comments=str(comments) if comments else None,
            expected_status=expected,
        )
        if updated is None:
            # Decided (or removed) between the read and the write.
            latest = self._requests.get(request_id=int(request_id))
            if not latest:
                raise NotFoundError("Request not found")
            raise InvalidTransitionError(f"Request is already {latest.status.value}")

        logger.info(
            "Vacation request %s moved %s -> %s%s",
            updated.request_id,
            current.status.value,
            updated.status.value,
            f" by user {actor.user_id}" if actor else "",
        )
        return updated

    def approve(self, *, request_id: int, actor: Optional[Principal] = None) -> VacationRequest:
        return self.update_status(request_id=request_id, status=RequestStatus.APPROVED.value, actor=actor)

    def reject(
        self,
        *,
        request_id: int,
        comments: Optional[str] = None,
        actor: Optional[Principal] = None,
    ) -> VacationRequest:
        return self.update_status(
            request_id=request_id,
            status=RequestStatus.REJECTED.value,
            comments=comments,
            actor=actor,
        )

    def list_for_requester(
        self,
        *,
        user_id: int,
        actor: Optional[Principal] = None,
    ) -> Sequence[VacationRequestView]:
        if actor is not None and not actor.is_validator and actor.user_id != int(user_id):
            raise AuthorizationError("You can only view your own requests")
        return self._requests.list_by_owner(user_id=int(user_id))

    def list_for_validator(
        self,
        *,
        status: Any = None,
        actor: Optional[Principal] = None,
    ) -> Sequence[VacationRequestView]:
        self._require_validator(actor)
        try:
            status_filter = parse_status_filter(status)
        except InvalidStatusError:
            # No request can hold a status outside the set.
            return []
        return self._requests.list_all(status=status_filter)
