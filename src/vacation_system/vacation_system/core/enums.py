from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    REQUESTER = "Requester"
    VALIDATOR = "Validator"


class RequestStatus(str, Enum):
    """Approval workflow status of a vacation request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
