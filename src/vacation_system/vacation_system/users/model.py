from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object, read-only to this system (owned by the identity source).
    """

    user_id: int
    name: str
    role: Role


@dataclass(frozen=True)
class Principal:
    """The identified actor of an operation."""

    user_id: int
    name: str
    role: Role

    @classmethod
    def of(cls, user: User) -> "Principal":
        return cls(user_id=user.user_id, name=user.name, role=user.role)

    @property
    def is_validator(self) -> bool:
        return self.role == Role.VALIDATOR
