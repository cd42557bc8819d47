# helpdesk/api/routes/user_routes.py

from __future__ import annotations

from flask import Blueprint, jsonify, request

from helpdesk.api.middlewares.auth_middleware import require_auth, require_roles
from helpdesk.api.schemas.user_schema import AdminUpdateUserRequest, AdminUserResponse
from helpdesk.entities.user import Role
from helpdesk.infrastructure.database.models.user_model import UserModel
from helpdesk.infrastructure.database.session import db_session
from helpdesk.repositories.user_repository import UserRepository
from helpdesk.services.user_service import UserService

bp_users = Blueprint("users", __name__, url_prefix="/users")


def _build_service(session) -> UserService:
    return UserService(UserRepository(session))


def _to_response(u: UserModel) -> dict:
    return AdminUserResponse(
        id=u.id,
        email=u.email,
        role=u.role,
        created_at=u.created_at,
        updated_at=u.updated_at,
    ).model_dump(mode="json")


@bp_users.get("")
@require_auth
@require_roles(Role.ADMIN)
def list_users():
    limit = max(1, min(request.args.get("limit", 50, type=int), 200))
    offset = max(0, request.args.get("offset", 0, type=int))

    with db_session() as session:
        users = _build_service(session).list_users(limit=limit, offset=offset)
        items = [_to_response(u) for u in users]

    return jsonify(items), 200


@bp_users.get("/<int:user_id>")
@require_auth
@require_roles(Role.ADMIN)
def get_user(user_id: int):
    with db_session() as session:
        body = _to_response(_build_service(session).get_user(user_id=user_id))

    return jsonify(body), 200


@bp_users.put("/<int:user_id>")
@require_auth
@require_roles(Role.ADMIN)
def admin_update_user(user_id: int):
    payload = AdminUpdateUserRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        updated = _build_service(session).admin_update_user(
            user_id=user_id,
            email=payload.email,
            password=payload.password,
            role=payload.role,
        )
        body = _to_response(updated)

    return jsonify(body), 200


@bp_users.delete("/<int:user_id>")
@require_auth
@require_roles(Role.ADMIN)
def admin_delete_user(user_id: int):
    with db_session() as session:
        _build_service(session).admin_delete_user(user_id=user_id)

    return ("", 204)
