from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import domain_error_response, error_response, json_body
from ..core.exceptions import DomainError
from ..container import Container
from ..users.principal import resolve_principal
from .presenter import request_to_dict, views_to_list

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    prefix = app.config.get("API_PREFIX", "")

    def _actor():
        return resolve_principal(
            container.user_service,
            required=bool(app.config.get("REQUIRE_PRINCIPAL", False)),
        )

    @app.route(f"{prefix}/requests", methods=["POST"], endpoint="submit_request")
    def submit_request():
        try:
            actor = _actor()
            payload = json_body()
            created = container.request_service.submit(
                user_id=payload.get("user_id", actor.user_id if actor else None),
                start_date=payload.get("start_date"),
                end_date=payload.get("end_date"),
                reason=payload.get("reason"),
                actor=actor,
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error creating request")
            return error_response("Failed to create request", 500)
        return jsonify(request_to_dict(created)), 201

    @app.route(f"{prefix}/requests", methods=["GET"], endpoint="list_requests")
    def list_requests():
        try:
            views = container.request_service.list_for_validator(
                status=request.args.get("status"),
                actor=_actor(),
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error fetching requests")
            return error_response("Failed to fetch requests", 500)
        return jsonify(views_to_list(views))

    @app.route(f"{prefix}/requests/user/<int:user_id>", methods=["GET"], endpoint="list_user_requests")
    def list_user_requests(user_id: int):
        try:
            views = container.request_service.list_for_requester(user_id=user_id, actor=_actor())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error fetching user requests")
            return error_response("Failed to fetch user requests", 500)
        return jsonify(views_to_list(views))

    @app.route(f"{prefix}/requests/<int:request_id>/status", methods=["PUT"], endpoint="update_request_status")
    def update_request_status(request_id: int):
        try:
            payload = json_body()
            updated = container.request_service.update_status(
                request_id=request_id,
                status=payload.get("status"),
                comments=payload.get("comments"),
                actor=_actor(),
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error updating request status")
            return error_response("Failed to update request status", 500)
        return jsonify(request_to_dict(updated))
