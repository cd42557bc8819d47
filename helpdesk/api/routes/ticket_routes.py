# helpdesk/api/routes/ticket_routes.py

from __future__ import annotations

from flask import Blueprint, jsonify, request

from helpdesk.api.middlewares.auth_middleware import current_auth, require_auth
from helpdesk.api.schemas.comment_schema import CommentResponse
from helpdesk.api.schemas.ticket_schema import CreateTicketRequest, TicketResponse, UpdateTicketRequest
from helpdesk.infrastructure.database.models.ticket_model import TicketModel
from helpdesk.infrastructure.database.session import db_session
from helpdesk.repositories.ticket_repository import TicketRepository
from helpdesk.repositories.ticket_type_repository import TicketTypeRepository
from helpdesk.repositories.user_repository import UserRepository
from helpdesk.services.ticket_service import TicketService

bp_tickets = Blueprint("tickets", __name__, url_prefix="/tickets")


def _build_service(session) -> TicketService:
    return TicketService(
        TicketRepository(session),
        TicketTypeRepository(session),
        UserRepository(session),
    )


def _paging() -> tuple[int, int]:
    limit = max(1, min(request.args.get("limit", 50, type=int), 200))
    offset = max(0, request.args.get("offset", 0, type=int))
    return limit, offset


def _to_response(t: TicketModel, *, with_comments: bool = True) -> dict:
    comments = (
        [
            CommentResponse(
                id=c.id, ticket_id=c.ticket_id, user_id=c.user_id, body=c.body, created_at=c.created_at
            )
            for c in t.comments
        ]
        if with_comments
        else []
    )
    return TicketResponse(
        id=t.id,
        user_id=t.user_id,
        type_id=t.type_id,
        title=t.title,
        description=t.description,
        status=t.status,
        comments=comments,
    ).model_dump(mode="json")


@bp_tickets.get("")
@require_auth
def list_tickets():
    limit, offset = _paging()

    with db_session() as session:
        tickets = _build_service(session).list_all(current_auth(), limit=limit, offset=offset)
        items = [_to_response(t) for t in tickets]

    return jsonify(items), 200


@bp_tickets.get("/mine")
@require_auth
def list_my_tickets():
    limit, offset = _paging()

    with db_session() as session:
        tickets = _build_service(session).list_mine(current_auth(), limit=limit, offset=offset)
        items = [_to_response(t) for t in tickets]

    return jsonify(items), 200


@bp_tickets.get("/<int:ticket_id>")
@require_auth
def get_ticket(ticket_id: int):
    with db_session() as session:
        body = _to_response(_build_service(session).get_ticket(current_auth(), ticket_id=ticket_id))

    return jsonify(body), 200


@bp_tickets.post("")
@require_auth
def create_ticket():
    payload = CreateTicketRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        created = _build_service(session).create_ticket(current_auth(), **payload.model_dump())
        body = _to_response(created, with_comments=False)

    return jsonify(body), 201


@bp_tickets.put("/<int:ticket_id>")
@require_auth
def update_ticket(ticket_id: int):
    payload = UpdateTicketRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        updated = _build_service(session).update_ticket(
            current_auth(), ticket_id=ticket_id, **payload.model_dump(exclude_none=True)
        )
        body = _to_response(updated)

    return jsonify(body), 200


@bp_tickets.delete("/<int:ticket_id>")
@require_auth
def delete_ticket(ticket_id: int):
    with db_session() as session:
        _build_service(session).delete_ticket(current_auth(), ticket_id=ticket_id)

    return ("", 204)
