# helpdesk/api/routes/ticket_type_routes.py

from __future__ import annotations

from flask import Blueprint, jsonify, request

from helpdesk.api.middlewares.auth_middleware import current_auth, require_auth
from helpdesk.api.schemas.ticket_type_schema import (
    CreateTicketTypeRequest,
    TicketTypeResponse,
    UpdateTicketTypeRequest,
)
from helpdesk.infrastructure.database.models.ticket_type_model import TicketTypeModel
from helpdesk.infrastructure.database.session import db_session
from helpdesk.repositories.ticket_type_repository import TicketTypeRepository
from helpdesk.services.ticket_type_service import TicketTypeService

bp_ticket_types = Blueprint("ticket_types", __name__, url_prefix="/ticket-types")


def _build_service(session) -> TicketTypeService:
    return TicketTypeService(TicketTypeRepository(session))


def _to_response(t: TicketTypeModel) -> dict:
    return TicketTypeResponse(id=t.id, name=t.name, description=t.description).model_dump(mode="json")


# -------------------------
# Public
# -------------------------

@bp_ticket_types.get("")
def list_ticket_types():
    with db_session() as session:
        items = [_to_response(t) for t in _build_service(session).list_types()]

    return jsonify(items), 200


@bp_ticket_types.get("/<int:type_id>")
def get_ticket_type(type_id: int):
    with db_session() as session:
        body = _to_response(_build_service(session).get_type(type_id=type_id))

    return jsonify(body), 200


# -------------------------
# ADMIN
# -------------------------

@bp_ticket_types.post("")
@require_auth
def create_ticket_type():
    payload = CreateTicketTypeRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        created = _build_service(session).create_type(current_auth(), **payload.model_dump())
        body = _to_response(created)

    return jsonify(body), 201


@bp_ticket_types.put("/<int:type_id>")
@require_auth
def update_ticket_type(type_id: int):
    payload = UpdateTicketTypeRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        updated = _build_service(session).update_type(
            current_auth(), type_id=type_id, **payload.model_dump(exclude_none=True)
        )
        body = _to_response(updated)

    return jsonify(body), 200


@bp_ticket_types.delete("/<int:type_id>")
@require_auth
def delete_ticket_type(type_id: int):
    with db_session() as session:
        _build_service(session).delete_type(current_auth(), type_id=type_id)

    return ("", 204)
