# helpdesk/infrastructure/security/jwt_provider.py

import base64
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from helpdesk.config.settings import Settings
from helpdesk.core.exceptions import InvalidOrExpiredTokenError
from helpdesk.entities.user import AuthContext, Role

REFRESH_TOKEN_BYTES = 64


@dataclass(frozen=True)
class AccessToken:
    token: str
    expires_at: datetime


class JwtProvider:
    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        access_minutes: int = 60,
    ) -> None:
        if not secret:
            raise ValueError("JWT secret must not be empty.")
        self._secret = secret
        self._algorithm = algorithm
        self._access_minutes = access_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "JwtProvider":
        return cls(settings.jwt_secret, access_minutes=settings.jwt_access_minutes)

    def issue_access_token(self, *, user_id: int, role: Role, now: datetime | None = None) -> AccessToken:
        # whole seconds, so expires_at matches the exp claim exactly
        now = (now or datetime.now(tz=timezone.utc)).replace(microsecond=0)
        exp = now + timedelta(minutes=self._access_minutes)

        claims = {
            "sub": str(user_id),
            "role": Role(role).value,
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
            "jti": uuid4().hex,
            "typ": "access",
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        return AccessToken(token=token, expires_at=exp)

    @staticmethod
    def issue_refresh_token() -> str:
        # opaque lookup key, no claims
        return base64.urlsafe_b64encode(secrets.token_bytes(REFRESH_TOKEN_BYTES)).decode("ascii")

    def validate_access_token(self, token: str) -> AuthContext:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat", "sub", "typ"]},
            )
        except jwt.InvalidTokenError as e:
            raise InvalidOrExpiredTokenError() from e

        if claims.get("typ") != "access":
            raise InvalidOrExpiredTokenError()

        try:
            return AuthContext(subject_id=int(claims["sub"]), role=Role(claims.get("role")))
        except (TypeError, ValueError) as e:
            raise InvalidOrExpiredTokenError() from e
