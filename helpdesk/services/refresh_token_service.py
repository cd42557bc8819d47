# helpdesk/services/refresh_token_service.py

import hashlib
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from helpdesk.core.exceptions import InvalidOrExpiredTokenError
from helpdesk.infrastructure.database.models.refresh_token_model import RefreshTokenModel
from helpdesk.infrastructure.security.jwt_provider import JwtProvider
from helpdesk.repositories.refresh_token_repository import RefreshTokenRepository

logger = logging.getLogger(__name__)


def _sha256(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class IssuedRefreshToken:
    token: str
    model: RefreshTokenModel


class RefreshTokenService:
    def __init__(
        self,
        *,
        repo: RefreshTokenRepository,
        ttl_days: int = 7,
        revoke_lineage_on_reuse: bool = False,
    ) -> None:
        self._repo = repo
        self._ttl = timedelta(days=ttl_days)
        self._revoke_lineage_on_reuse = revoke_lineage_on_reuse

    def issue(self, *, user_id: int, now: datetime | None = None) -> IssuedRefreshToken:
        now = now or _utcnow()
        token = JwtProvider.issue_refresh_token()

        model = RefreshTokenModel(
            user_id=user_id,
            token_hash=_sha256(token),
            created_at=now,
            expires_at=now + self._ttl,
            revoked_at=None,
            replaced_by_id=None,
            reason=None,
        )
        self._repo.add(model)
        return IssuedRefreshToken(token=token, model=model)

    def rotate(self, *, refresh_token: str) -> tuple[int, str]:
        """
        Single-use rotation: revoke the presented token and mint its successor.

        Runs inside the caller's transaction; any exception raised after the
        revoke rolls both effects back together. Returns (user_id, new_token).
        """
        now = _utcnow()
        token_hash = _sha256(refresh_token)

        stored = self._repo.get_active_by_hash(token_hash)
        if stored is None:
            self._handle_possible_reuse(token_hash, now)
            raise InvalidOrExpiredTokenError()

        if stored.expires_at <= now:
            raise InvalidOrExpiredTokenError()

        # conditional update: a concurrent rotation of the same token loses here
        if not self._repo.revoke_if_active(token_id=stored.id, now=now, reason="rotated"):
            raise InvalidOrExpiredTokenError()

        issued = self.issue(user_id=stored.user_id, now=now)
        self._repo.set_replaced_by(token_id=stored.id, replaced_by_id=issued.model.id)

        logger.info("refresh token rotated user_id=%s token_id=%s", stored.user_id, stored.id)
        return stored.user_id, issued.token

    def revoke(self, *, refresh_token: str, reason: str = "logout") -> bool:
        stored = self._repo.get_active_by_hash(_sha256(refresh_token))
        if stored is None:
            return False
        return self._repo.revoke_if_active(token_id=stored.id, now=_utcnow(), reason=reason)

    def _handle_possible_reuse(self, token_hash: str, now: datetime) -> None:
        revoked = self._repo.get_by_hash(token_hash)
        if revoked is None:
            return

        logger.warning(
            "refresh token reuse detected user_id=%s token_id=%s reason=%s",
            revoked.user_id,
            revoked.id,
            revoked.reason,
        )
        if not self._revoke_lineage_on_reuse:
            return

        count = self._repo.revoke_all_active_for_user(user_id=revoked.user_id, now=now, reason="reuse_detected")
        # the request fails afterwards, so persist the revocation now
        self._repo.commit()
        logger.warning("revoked %s active refresh tokens for user_id=%s", count, revoked.user_id)
