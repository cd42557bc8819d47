# helpdesk/repositories/user_repository.py

from sqlalchemy import select
from sqlalchemy.orm import Session

from helpdesk.core.base_repository import BaseRepository
from helpdesk.infrastructure.database.models.user_model import UserModel


class UserRepository(BaseRepository[UserModel]):
    model = UserModel

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_email(self, email: str) -> UserModel | None:
        # exact match, no case folding
        stmt = select(UserModel).where(UserModel.email == email)
        return self._session.execute(stmt).scalar_one_or_none()

    def list_all(self, *, limit: int = 50, offset: int = 0) -> list[UserModel]:
        stmt = select(UserModel).order_by(UserModel.id).limit(limit).offset(offset)
        return list(self._session.execute(stmt).scalars().all())
