# helpdesk/repositories/comment_repository.py

from sqlalchemy import select
from sqlalchemy.orm import Session

from helpdesk.core.base_repository import BaseRepository
from helpdesk.infrastructure.database.models.comment_model import CommentModel


class CommentRepository(BaseRepository[CommentModel]):
    model = CommentModel

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def list_by_ticket(self, ticket_id: int) -> list[CommentModel]:
        stmt = select(CommentModel).where(CommentModel.ticket_id == ticket_id).order_by(CommentModel.id)
        return list(self._session.execute(stmt).scalars().all())

    def get_in_ticket(self, *, ticket_id: int, comment_id: int) -> CommentModel | None:
        stmt = select(CommentModel).where(
            CommentModel.id == comment_id,
            CommentModel.ticket_id == ticket_id,
        )
        return self._session.execute(stmt).scalar_one_or_none()
