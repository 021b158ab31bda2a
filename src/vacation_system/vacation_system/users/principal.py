from __future__ import annotations

from typing import Optional

from flask import request

from ..core.constants import PRINCIPAL_HEADER
from ..core.exceptions import AuthenticationError, NotFoundError
from .model import Principal
from .service import UserService


def resolve_principal(user_service: UserService, *, required: bool = False) -> Optional[Principal]:
    """Identify the caller from the ``X-User-Id`` header.

    Returns None when the header is absent and identification is optional.
    """
    raw = (request.headers.get(PRINCIPAL_HEADER) or "").strip()
    if not raw:
        if required:
            raise AuthenticationError(f"{PRINCIPAL_HEADER} header is required")
        return None

    try:
        user_id = int(raw)
    except ValueError:
        raise AuthenticationError(f"Invalid {PRINCIPAL_HEADER} header")

    try:
        return user_service.get_principal(user_id)
    except NotFoundError:
        raise AuthenticationError("Unknown user")
