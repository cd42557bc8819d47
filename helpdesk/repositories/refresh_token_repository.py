# helpdesk/repositories/refresh_token_repository.py

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from helpdesk.core.base_repository import BaseRepository
from helpdesk.infrastructure.database.models.refresh_token_model import RefreshTokenModel


class RefreshTokenRepository(BaseRepository[RefreshTokenModel]):
    model = RefreshTokenModel

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_hash(self, token_hash: str) -> RefreshTokenModel | None:
        stmt = select(RefreshTokenModel).where(RefreshTokenModel.token_hash == token_hash)
        return self._session.execute(stmt).scalar_one_or_none()

    def get_active_by_hash(self, token_hash: str) -> RefreshTokenModel | None:
        stmt = select(RefreshTokenModel).where(
            RefreshTokenModel.token_hash == token_hash,
            RefreshTokenModel.revoked_at.is_(None),
        )
        return self._session.execute(stmt).scalar_one_or_none()

    def list_for_user(self, user_id: int) -> list[RefreshTokenModel]:
        stmt = select(RefreshTokenModel).where(RefreshTokenModel.user_id == user_id).order_by(RefreshTokenModel.id)
        return list(self._session.execute(stmt).scalars().all())

    def revoke_if_active(self, *, token_id: int, now: datetime, reason: str) -> bool:
        """Conditional revoke; False means another transaction got there first."""
        stmt = (
            update(RefreshTokenModel)
            .where(RefreshTokenModel.id == token_id, RefreshTokenModel.revoked_at.is_(None))
            .values(revoked_at=now, reason=reason)
        )
        result = self._session.execute(stmt)
        return (result.rowcount or 0) == 1

    def set_replaced_by(self, *, token_id: int, replaced_by_id: int) -> None:
        stmt = (
            update(RefreshTokenModel)
            .where(RefreshTokenModel.id == token_id)
            .values(replaced_by_id=replaced_by_id)
        )
        self._session.execute(stmt)

    def revoke_all_active_for_user(self, *, user_id: int, now: datetime, reason: str) -> int:
        stmt = (
            update(RefreshTokenModel)
            .where(
                RefreshTokenModel.user_id == user_id,
                RefreshTokenModel.revoked_at.is_(None),
                RefreshTokenModel.expires_at > now,
            )
            .values(revoked_at=now, reason=reason)
        )
        result = self._session.execute(stmt)
        return int(result.rowcount or 0)

    def commit(self) -> None:
        self._session.commit()
