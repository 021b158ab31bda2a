from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta

import pytest

from src.vacation_system.vacation_system.container import build_services
from src.vacation_system.vacation_system.core.enums import RequestStatus, Role
from src.vacation_system.vacation_system.core.exceptions import PersistenceError
from src.vacation_system.vacation_system.main import create_app
from src.vacation_system.vacation_system.requests.model import VacationRequest, VacationRequestView
from src.vacation_system.vacation_system.users.model import User


class InMemoryUsers:
    def __init__(self, users):
        self.users_by_id = {u.user_id: u for u in users}

    def get_by_id(self, user_id):
        return self.users_by_id.get(int(user_id))

    def list_all(self):
        return sorted(self.users_by_id.values(), key=lambda u: u.name)


class InMemoryRequests:
    """Mirrors MySQLRequestRepository semantics: FK on user_id, newest first."""

    def __init__(self, users: InMemoryUsers, *, start=datetime(2026, 2, 1, 9, 0, 0)):
        self._users = users
        self._rows: dict[int, VacationRequest] = {}
        self._next_id = 1
        self._now = start
        self.fail_next = False

    def _tick(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now

    def _check_available(self):
        if self.fail_next:
            self.fail_next = False
            raise PersistenceError("connection refused")

    def create(self, *, user_id, start_date, end_date, reason):
        self._check_available()
        if self._users.get_by_id(user_id) is None:
            raise PersistenceError("foreign key constraint fails")
        rid = self._next_id
        self._next_id += 1
        self._rows[rid] = VacationRequest(
            request_id=rid,
            user_id=int(user_id),
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=RequestStatus.PENDING,
            created_at=self._tick(),
        )
        return self._rows[rid]

    def get(self, *, request_id):
        return self._rows.get(int(request_id))

    def _views(self, rows):
        out = [
            VacationRequestView(
                request_id=r.request_id,
                user_id=r.user_id,
                start_date=r.start_date,
                end_date=r.end_date,
                reason=r.reason,
                status=r.status,
                created_at=r.created_at,
                comments=r.comments,
                user_name=self._users.get_by_id(r.user_id).name,
            )
            for r in rows
        ]
        out.sort(key=lambda v: (v.created_at, v.request_id), reverse=True)
        return out

    def list_all(self, *, status=None):
        self._check_available()
        return self._views(r for r in self._rows.values() if status is None or r.status == status)

    def list_by_owner(self, *, user_id):
        self._check_available()
        return self._views(r for r in self._rows.values() if r.user_id == int(user_id))

    def update_status(self, *, request_id, status, comments=None, expected_status=None):
        current = self._rows.get(int(request_id))
        if current is None:
            return None
        if expected_status is not None and current.status != expected_status:
            return None
        self._rows[int(request_id)] = replace(current, status=status, comments=comments)
        return self._rows[int(request_id)]

    def count(self) -> int:
        return len(self._rows)


ALICE = User(user_id=1, name="Alice Martin", role=Role.REQUESTER)
BRUNO = User(user_id=2, name="Bruno Costa", role=Role.REQUESTER)
CHLOE = User(user_id=3, name="Chloe Nguyen", role=Role.VALIDATOR)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers([CHLOE, BRUNO, ALICE])


@pytest.fixture
def requests_repo(users_repo) -> InMemoryRequests:
    return InMemoryRequests(users_repo)


class _Settings:
    ALLOW_STATUS_OVERWRITE = False
    REJECT_PAST_DATES = False


@pytest.fixture
def container(users_repo, requests_repo):
    return build_services(users_repo=users_repo, requests_repo=requests_repo, settings=_Settings)


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="config.testing")
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
