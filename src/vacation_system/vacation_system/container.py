from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .database.connection import DBConfig, DatabaseConnection
from .requests.mysql_request_repository import MySQLRequestRepository
from .requests.repository import RequestRepository
from .requests.service import RequestService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    requests_repo: RequestRepository

    user_service: UserService
    request_service: RequestService


def build_services(
    *,
    users_repo: UserRepository,
    requests_repo: RequestRepository,
    settings: Any = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over the given repositories using the settings flags."""
    request_service = RequestService(
        requests_repo,
        allow_status_overwrite=bool(getattr(settings, "ALLOW_STATUS_OVERWRITE", False)),
        reject_past_dates=bool(getattr(settings, "REJECT_PAST_DATES", False)),
    )
    return Container(
        conn=conn,
        users_repo=users_repo,
        requests_repo=requests_repo,
        user_service=UserService(users_repo),
        request_service=request_service,
    )


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        users_repo=MySQLUserRepository(conn),
        requests_repo=MySQLRequestRepository(conn),
        settings=settings,
        conn=conn,
    )
