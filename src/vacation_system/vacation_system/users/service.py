from __future__ import annotations

from typing import Sequence

from ..core.exceptions import NotFoundError
from .model import Principal, User
from .repository import UserRepository


class UserService:
    """Use case: read the user directory and identify actors."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def get_principal(self, user_id: int) -> Principal:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("User not found")
        return Principal.of(user)
