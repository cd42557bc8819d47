# helpdesk/api/routes/auth_routes.py
from flask import Blueprint, current_app, jsonify, request

from helpdesk.api.middlewares.auth_middleware import current_auth, get_jwt_provider, require_auth
from helpdesk.api.schemas.user_schema import (
    LoginRequest,
    LogoutRequest,
    MeResponse,
    RefreshRequest,
    RegisterRequest,
    TokenPairResponse,
    UserResponse,
)
from helpdesk.infrastructure.database.session import db_session
from helpdesk.repositories.refresh_token_repository import RefreshTokenRepository
from helpdesk.repositories.user_repository import UserRepository
from helpdesk.services.auth_service import AuthService, TokenPair
from helpdesk.services.refresh_token_service import RefreshTokenService
from helpdesk.services.user_service import UserService

bp_auth = Blueprint("auth", __name__, url_prefix="/auth")


def _build_service(session) -> AuthService:
    settings = current_app.extensions["settings"]
    refresh_tokens = RefreshTokenService(
        repo=RefreshTokenRepository(session),
        ttl_days=settings.refresh_token_days,
        revoke_lineage_on_reuse=settings.refresh_reuse_revokes_lineage,
    )
    return AuthService(
        user_repository=UserRepository(session),
        refresh_tokens=refresh_tokens,
        jwt_provider=get_jwt_provider(),
    )


def _pair_response(pair: TokenPair) -> dict:
    return TokenPairResponse(
        access_token=pair.access_token,
        refresh_token=pair.refresh_token,
        expires_at=pair.expires_at,
    ).model_dump(mode="json")


@bp_auth.post("/register")
def register():
    payload = RegisterRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        created = UserService(UserRepository(session)).register(
            email=payload.email,
            password=payload.password,
            role=payload.role,
        )
        response = UserResponse(id=created.id, email=created.email, role=created.role)

    return jsonify(response.model_dump(mode="json")), 201


@bp_auth.post("/login")
def login():
    payload = LoginRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        pair = _build_service(session).login(email=payload.email, password=payload.password)

    return jsonify(_pair_response(pair)), 200


@bp_auth.post("/refresh")
def refresh():
    payload = RefreshRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        pair = _build_service(session).refresh(refresh_token=payload.refresh_token)

    return jsonify(_pair_response(pair)), 200


@bp_auth.post("/logout")
def logout():
    payload = LogoutRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        _build_service(session).logout(refresh_token=payload.refresh_token)

    return ("", 204)


@bp_auth.get("/me")
@require_auth
def me():
    auth = current_auth()
    return jsonify(MeResponse(id=auth.subject_id, role=auth.role).model_dump(mode="json")), 200
