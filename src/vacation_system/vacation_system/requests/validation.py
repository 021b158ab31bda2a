"""Submission and status validation.

Everything here is pure: no storage access, no clock reads. The caller passes
``today`` when the past-date rule applies.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import is_blank, require_positive_int
from ..core.constants import STATUS_FILTER_ALL
from ..core.enums import RequestStatus
from ..core.exceptions import (
    InvalidFormatError,
    InvalidRangeError,
    InvalidStatusError,
    MissingFieldError,
    PastDateError,
)


@dataclass(frozen=True)
class ValidatedRequest:
    user_id: int
    start_date: date
    end_date: date
    reason: Optional[str]


def _coerce_date(value: Any, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise InvalidFormatError(f"{field_name} must be a date (YYYY-MM-DD)")


def validate_submission(
    *,
    user_id: Any,
    start_date: Any,
    end_date: Any,
    reason: Optional[str] = None,
    today: Optional[date] = None,
) -> ValidatedRequest:
    """Check a candidate request; the first failing rule wins.

    1. user_id, start_date and end_date are present.
    2. They parse (positive integer id, YYYY-MM-DD dates).
    3. end_date is not before start_date.
    4. start_date is not before ``today``, when ``today`` is given.
    """
    if is_blank(user_id) or is_blank(start_date) or is_blank(end_date):
        raise MissingFieldError("user_id, start_date, and end_date are required")

    owner_id = require_positive_int(user_id, "user_id")
    start = _coerce_date(start_date, "start_date")
    end = _coerce_date(end_date, "end_date")

    if end < start:
        raise InvalidRangeError("End date must be after start date")

    if today is not None and start < today:
        raise PastDateError("Start date cannot be in the past")

    return ValidatedRequest(
        user_id=owner_id,
        start_date=start,
        end_date=end,
        reason=None if is_blank(reason) else str(reason),
    )


def parse_status(value: Any) -> RequestStatus:
    """Exact status name, case-sensitive."""
    if not isinstance(value, str):
        raise InvalidStatusError("Valid status is required")
    try:
        return RequestStatus(value)
    except ValueError:
        raise InvalidStatusError("Valid status is required")


def parse_status_filter(value: Any) -> Optional[RequestStatus]:
    """Map the validator view filter; ``All`` or nothing means unfiltered."""
    if is_blank(value) or value == STATUS_FILTER_ALL:
        return None
    return parse_status(value)
