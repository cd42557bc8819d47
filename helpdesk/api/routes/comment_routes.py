# helpdesk/api/routes/comment_routes.py

from __future__ import annotations

from flask import Blueprint, jsonify, request

from helpdesk.api.middlewares.auth_middleware import current_auth, require_auth
from helpdesk.api.schemas.comment_schema import CommentRequest, CommentResponse
from helpdesk.infrastructure.database.models.comment_model import CommentModel
from helpdesk.infrastructure.database.session import db_session
from helpdesk.repositories.comment_repository import CommentRepository
from helpdesk.repositories.ticket_repository import TicketRepository
from helpdesk.services.comment_service import CommentService

# mounted under /tickets/<int:ticket_id>/comments
bp_comments = Blueprint("comments", __name__)


def _build_service(session) -> CommentService:
    return CommentService(CommentRepository(session), TicketRepository(session))


def _to_response(c: CommentModel) -> dict:
    return CommentResponse(
        id=c.id,
        ticket_id=c.ticket_id,
        user_id=c.user_id,
        body=c.body,
        created_at=c.created_at,
    ).model_dump(mode="json")


@bp_comments.get("")
@require_auth
def list_comments(ticket_id: int):
    with db_session() as session:
        comments = _build_service(session).list_comments(current_auth(), ticket_id=ticket_id)
        items = [_to_response(c) for c in comments]

    return jsonify(items), 200


@bp_comments.get("/<int:comment_id>")
@require_auth
def get_comment(ticket_id: int, comment_id: int):
    with db_session() as session:
        comment = _build_service(session).get_comment(current_auth(), ticket_id=ticket_id, comment_id=comment_id)
        body = _to_response(comment)

    return jsonify(body), 200


@bp_comments.post("")
@require_auth
def create_comment(ticket_id: int):
    payload = CommentRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        created = _build_service(session).create_comment(current_auth(), ticket_id=ticket_id, body=payload.body)
        body = _to_response(created)

    return jsonify(body), 201


@bp_comments.put("/<int:comment_id>")
@require_auth
def update_comment(ticket_id: int, comment_id: int):
    payload = CommentRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        updated = _build_service(session).update_comment(
            current_auth(), ticket_id=ticket_id, comment_id=comment_id, body=payload.body
        )
        body = _to_response(updated)

    return jsonify(body), 200


@bp_comments.delete("/<int:comment_id>")
@require_auth
def delete_comment(ticket_id: int, comment_id: int):
    with db_session() as session:
        _build_service(session).delete_comment(current_auth(), ticket_id=ticket_id, comment_id=comment_id)

    return ("", 204)
