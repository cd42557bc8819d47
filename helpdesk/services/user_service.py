# helpdesk/services/user_service.py

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from helpdesk.core.exceptions import EmailAlreadyExistsError, NotFoundError
from helpdesk.entities.user import Role
from helpdesk.infrastructure.database.models.user_model import UserModel
from helpdesk.infrastructure.security.password_hasher import PasswordHasher
from helpdesk.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def register(self, *, email: str, password: str, role: Role | None = None) -> UserModel:
        if self._user_repository.get_by_email(email) is not None:
            raise EmailAlreadyExistsError()

        model = UserModel(
            email=email,
            password_hash=PasswordHasher.hash_password(password),
            role=(role or Role.STUDENT).value,
            created_at=datetime.now(tz=timezone.utc).replace(tzinfo=None),
            updated_at=None,
        )
        created = self._save(model)

        logger.info("user registered user_id=%s role=%s", created.id, created.role)
        return created

    def get_user(self, *, user_id: int) -> UserModel:
        user = self._user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found.")
        return user

    def list_users(self, *, limit: int = 50, offset: int = 0) -> list[UserModel]:
        return self._user_repository.list_all(limit=limit, offset=offset)

    def admin_update_user(
        self,
        *,
        user_id: int,
        email: str | None = None,
        password: str | None = None,
        role: Role | None = None,
    ) -> UserModel:
        user = self.get_user(user_id=user_id)

        if email and email != user.email:
            if self._user_repository.get_by_email(email) is not None:
                raise EmailAlreadyExistsError()
            user.email = email
        if password:
            user.password_hash = PasswordHasher.hash_password(password)
        if role is not None:
            user.role = Role(role).value

        user.updated_at = datetime.now(tz=timezone.utc).replace(tzinfo=None)
        self._save(user)

        logger.info("user updated user_id=%s", user.id)
        return user

    def admin_delete_user(self, *, user_id: int) -> None:
        # cascades to refresh tokens, tickets and comments
        user = self.get_user(user_id=user_id)
        self._user_repository.delete(user)
        logger.info("user deleted user_id=%s", user_id)

    def _save(self, user: UserModel) -> UserModel:
        # a concurrent writer can take the email between the lookup and the flush
        try:
            return self._user_repository.add(user)
        except IntegrityError as e:
            logger.info("email conflict on flush")
            raise EmailAlreadyExistsError() from e
