from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..common.datetime_utils import format_date
from .model import VacationRequest, VacationRequestView


def request_to_dict(req: VacationRequest) -> Dict[str, Any]:
    return {
        "id": req.request_id,
        "user_id": req.user_id,
        "start_date": format_date(req.start_date),
        "end_date": format_date(req.end_date),
        "reason": req.reason,
        "status": req.status.value,
        "comments": req.comments,
        "created_at": req.created_at.isoformat() if req.created_at else None,
    }


def view_to_dict(view: VacationRequestView) -> Dict[str, Any]:
    data = request_to_dict(view)
    data["user_name"] = view.user_name
    data["duration_days"] = view.duration_days
    return data


def views_to_list(views: Iterable[VacationRequestView]) -> List[Dict[str, Any]]:
    return [view_to_dict(v) for v in views]
