# helpdesk/services/auth_service.py

import logging
from dataclasses import dataclass
from datetime import datetime

from helpdesk.core.exceptions import InvalidCredentialsError, InvalidOrExpiredTokenError
from helpdesk.entities.user import Role
from helpdesk.infrastructure.security.jwt_provider import JwtProvider
from helpdesk.infrastructure.security.password_hasher import PasswordHasher
from helpdesk.repositories.user_repository import UserRepository
from helpdesk.services.refresh_token_service import RefreshTokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str
    expires_at: datetime


class AuthService:
    """Login, refresh and logout for one request's transaction."""

    def __init__(
        self,
        *,
        user_repository: UserRepository,
        refresh_tokens: RefreshTokenService,
        jwt_provider: JwtProvider,
    ) -> None:
        self._users = user_repository
        self._refresh_tokens = refresh_tokens
        self._jwt = jwt_provider

    def login(self, *, email: str, password: str) -> TokenPair:
        user = self._users.get_by_email(email)
        if user is None:
            # keep timing close to the wrong-password path
            PasswordHasher.dummy_verify(password)
            logger.info("login failed email=%s", email)
            raise InvalidCredentialsError()

        if not PasswordHasher.verify_password(password, user.password_hash):
            logger.info("login failed email=%s", email)
            raise InvalidCredentialsError()

        if PasswordHasher.needs_rehash(user.password_hash):
            user.password_hash = PasswordHasher.hash_password(password)
            logger.info("password rehashed user_id=%s", user.id)

        access = self._jwt.issue_access_token(user_id=user.id, role=Role(user.role))
        issued = self._refresh_tokens.issue(user_id=user.id)

        logger.info("login ok user_id=%s", user.id)
        return TokenPair(access_token=access.token, refresh_token=issued.token, expires_at=access.expires_at)

    def refresh(self, *, refresh_token: str) -> TokenPair:
        user_id, new_refresh = self._refresh_tokens.rotate(refresh_token=refresh_token)

        user = self._users.get_by_id(user_id)
        if user is None:
            raise InvalidOrExpiredTokenError()

        access = self._jwt.issue_access_token(user_id=user.id, role=Role(user.role))
        return TokenPair(access_token=access.token, refresh_token=new_refresh, expires_at=access.expires_at)

    def logout(self, *, refresh_token: str) -> None:
        # unknown and already-revoked tokens succeed too
        if self._refresh_tokens.revoke(refresh_token=refresh_token, reason="logout"):
            logger.info("logout ok")
