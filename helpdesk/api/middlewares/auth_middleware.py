# helpdesk/api/middlewares/auth_middleware.py
from functools import wraps
from typing import Any, Callable, TypeVar

from flask import current_app, g, request

from helpdesk.core.exceptions import ForbiddenError, UnauthorizedError
from helpdesk.entities.user import AuthContext, Role
from helpdesk.infrastructure.security.jwt_provider import JwtProvider

F = TypeVar("F", bound=Callable[..., Any])


def get_jwt_provider() -> JwtProvider:
    return current_app.extensions["jwt_provider"]


def current_auth() -> AuthContext:
    auth = getattr(g, "auth", None)
    if auth is None:
        raise UnauthorizedError("Missing bearer token.")
    return auth


def _get_bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    parts = auth.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    raise UnauthorizedError("Missing bearer token.")


def require_auth(fn: F) -> F:
    @wraps(fn)
    def wrapper(*args, **kwargs):
        token = _get_bearer_token()
        # typed claims, parsed once per request
        g.auth = get_jwt_provider().validate_access_token(token)
        return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def require_roles(*allowed_roles: Role):
    def decorator(fn: F) -> F:
        @wraps(fn)
        def wrapper(*args, **kwargs):
            auth = current_auth()
            if auth.role not in allowed_roles:
                raise ForbiddenError("Access denied.")
            return fn(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
