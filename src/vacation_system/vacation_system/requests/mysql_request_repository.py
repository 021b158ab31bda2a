from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import VacationRequest, VacationRequestView
from .repository import RequestRepository

_REQUEST_COLUMNS = "id, user_id, start_date, end_date, reason, status, comments, created_at"


def _row_to_request(r: dict) -> VacationRequest:
    return VacationRequest(
        request_id=int(r["id"]),
        user_id=int(r["user_id"]),
        start_date=normalize_mysql_date(r["start_date"]),
        end_date=normalize_mysql_date(r["end_date"]),
        reason=r.get("reason"),
        status=RequestStatus(r["status"]),
        created_at=r["created_at"],
        comments=r.get("comments"),
    )


def _row_to_view(r: dict) -> VacationRequestView:
    return VacationRequestView(
        request_id=int(r["id"]),
        user_id=int(r["user_id"]),
        start_date=normalize_mysql_date(r["start_date"]),
        end_date=normalize_mysql_date(r["end_date"]),
        reason=r.get("reason"),
        status=RequestStatus(r["status"]),
        created_at=r["created_at"],
        comments=r.get("comments"),
        user_name=r["user_name"],
    )


class MySQLRequestRepository(RequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        user_id: int,
        start_date: date,
        end_date: date,
        reason: Optional[str],
    ) -> VacationRequest:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO vacation_requests(user_id, start_date, end_date, reason, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(user_id), start_date, end_date, reason, RequestStatus.PENDING.value),
            )
            new_id = int(cur.lastrowid)
            cur.execute(
                f"SELECT {_REQUEST_COLUMNS} FROM vacation_requests WHERE id=%s",
                (new_id,),
            )
            return _row_to_request(fetchone(cur))

    def get(self, *, request_id: int) -> Optional[VacationRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_REQUEST_COLUMNS} FROM vacation_requests WHERE id=%s",
                (int(request_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _row_to_request(r)

    def _list_views(
        self,
        *,
        status: Optional[RequestStatus] = None,
        user_id: Optional[int] = None,
    ) -> Sequence[VacationRequestView]:
        clauses = ["1=1"]
        params: list[object] = []

        if status is not None:
            clauses.append("r.status=%s")
            params.append(status.value)
        if user_id is not None:
            clauses.append("r.user_id=%s")
            params.append(int(user_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT r.id, r.user_id, u.name AS user_name,
                       r.start_date, r.end_date, r.reason,
                       r.status, r.comments, r.created_at
                FROM vacation_requests r
                JOIN users u ON u.id = r.user_id
                WHERE {where}
                ORDER BY r.created_at DESC, r.id DESC
                """,
                tuple(params),
            )
            return [_row_to_view(r) for r in fetchall(cur)]

    def list_all(self, *, status: Optional[RequestStatus] = None) -> Sequence[VacationRequestView]:
        return self._list_views(status=status)

    def list_by_owner(self, *, user_id: int) -> Sequence[VacationRequestView]:
        return self._list_views(user_id=int(user_id))

    def update_status(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        comments: Optional[str] = None,
        expected_status: Optional[RequestStatus] = None,
    ) -> Optional[VacationRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            # Row lock keeps the status check and the write in one step.
            cur.execute(
                f"SELECT {_REQUEST_COLUMNS} FROM vacation_requests WHERE id=%s FOR UPDATE",
                (int(request_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            current = _row_to_request(r)
            if expected_status is not None and current.status != expected_status:
                return None

            cur.execute(
                """
                UPDATE vacation_requests
                SET status=%s, comments=%s
                WHERE id=%s
                """,
                (status.value, comments, int(request_id)),
            )
            return replace(current, status=status, comments=comments)
