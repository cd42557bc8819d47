# helpdesk/repositories/ticket_repository.py

from sqlalchemy import select
from sqlalchemy.orm import Session

from helpdesk.core.base_repository import BaseRepository
from helpdesk.infrastructure.database.models.ticket_model import TicketModel


class TicketRepository(BaseRepository[TicketModel]):
    model = TicketModel

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def list_all(self, *, limit: int = 50, offset: int = 0) -> list[TicketModel]:
        stmt = select(TicketModel).order_by(TicketModel.id.desc()).limit(limit).offset(offset)
        return list(self._session.execute(stmt).scalars().all())

    def list_by_user(self, user_id: int, *, limit: int = 50, offset: int = 0) -> list[TicketModel]:
        stmt = (
            select(TicketModel)
            .where(TicketModel.user_id == user_id)
            .order_by(TicketModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(self._session.execute(stmt).scalars().all())
