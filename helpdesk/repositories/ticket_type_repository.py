# helpdesk/repositories/ticket_type_repository.py

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from helpdesk.core.base_repository import BaseRepository
from helpdesk.infrastructure.database.models.ticket_model import TicketModel
from helpdesk.infrastructure.database.models.ticket_type_model import TicketTypeModel


class TicketTypeRepository(BaseRepository[TicketTypeModel]):
    model = TicketTypeModel

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def list_all(self) -> list[TicketTypeModel]:
        stmt = select(TicketTypeModel).order_by(TicketTypeModel.id)
        return list(self._session.execute(stmt).scalars().all())

    def detach_tickets(self, type_id: int) -> int:
        stmt = (
            update(TicketModel)
            .where(TicketModel.type_id == type_id)
            .values(type_id=None)
        )
        result = self._session.execute(stmt)
        return int(result.rowcount or 0)
