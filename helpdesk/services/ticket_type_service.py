# helpdesk/services/ticket_type_service.py
from __future__ import annotations

from helpdesk.core.authorization import ADMIN_ONLY, Action, authorize
from helpdesk.core.exceptions import NotFoundError
from helpdesk.entities.user import AuthContext
from helpdesk.infrastructure.database.models.ticket_type_model import TicketTypeModel
from helpdesk.repositories.ticket_type_repository import TicketTypeRepository


class TicketTypeService:
    def __init__(self, repo: TicketTypeRepository) -> None:
        self._repo = repo

    def list_types(self) -> list[TicketTypeModel]:
        return self._repo.list_all()

    def get_type(self, *, type_id: int) -> TicketTypeModel:
        model = self._repo.get_by_id(type_id)
        if model is None:
            raise NotFoundError("Ticket type not found.")
        return model

    def create_type(self, caller: AuthContext, *, name: str, description: str | None = None) -> TicketTypeModel:
        authorize(caller, ADMIN_ONLY, Action.CREATE)
        return self._repo.add(TicketTypeModel(name=name.strip(), description=description))

    def update_type(
        self,
        caller: AuthContext,
        *,
        type_id: int,
        name: str | None = None,
        description: str | None = None,
    ) -> TicketTypeModel:
        authorize(caller, ADMIN_ONLY, Action.UPDATE)
        model = self.get_type(type_id=type_id)

        if name is not None:
            model.name = name.strip()
        if description is not None:
            model.description = description
        return self._repo.add(model)

    def delete_type(self, caller: AuthContext, *, type_id: int) -> None:
        authorize(caller, ADMIN_ONLY, Action.DELETE)
        model = self.get_type(type_id=type_id)
        self._repo.detach_tickets(type_id)
        self._repo.delete(model)
