# helpdesk/services/ticket_service.py
from __future__ import annotations

import logging
from enum import Enum

from helpdesk.core.authorization import ADMIN_ONLY, Action, Resource, authorize
from helpdesk.core.exceptions import NotFoundError
from helpdesk.entities.user import AuthContext
from helpdesk.infrastructure.database.models.ticket_model import TicketModel
from helpdesk.repositories.ticket_repository import TicketRepository
from helpdesk.repositories.ticket_type_repository import TicketTypeRepository
from helpdesk.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class TicketStatus(str, Enum):
    OPEN = "Open"
    PENDING = "Pending"
    CLOSED = "Closed"


class TicketService:
    def __init__(
        self,
        ticket_repository: TicketRepository,
        ticket_type_repository: TicketTypeRepository,
        user_repository: UserRepository,
    ) -> None:
        self._repo = ticket_repository
        self._types = ticket_type_repository
        self._users = user_repository

    def _get_or_404(self, ticket_id: int) -> TicketModel:
        ticket = self._repo.get_by_id(ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket not found.")
        return ticket

    def _ensure_type_exists(self, type_id: int | None) -> None:
        if type_id is not None and self._types.get_by_id(type_id) is None:
            raise NotFoundError("Ticket type not found.")

    def list_all(self, caller: AuthContext, *, limit: int = 50, offset: int = 0) -> list[TicketModel]:
        authorize(caller, ADMIN_ONLY, Action.READ)
        return self._repo.list_all(limit=limit, offset=offset)

    def list_mine(self, caller: AuthContext, *, limit: int = 50, offset: int = 0) -> list[TicketModel]:
        return self._repo.list_by_user(caller.subject_id, limit=limit, offset=offset)

    def get_ticket(self, caller: AuthContext, *, ticket_id: int) -> TicketModel:
        ticket = self._get_or_404(ticket_id)
        authorize(caller, Resource(owner_id=ticket.user_id), Action.READ)
        return ticket

    def create_ticket(
        self,
        caller: AuthContext,
        *,
        title: str,
        description: str | None = None,
        type_id: int | None = None,
        user_id: int | None = None,
    ) -> TicketModel:
        owner_id = user_id if user_id is not None else caller.subject_id
        authorize(caller, Resource(owner_id=owner_id), Action.CREATE)

        if self._users.get_by_id(owner_id) is None:
            raise NotFoundError("User not found.")
        self._ensure_type_exists(type_id)

        model = TicketModel(
            user_id=owner_id,
            type_id=type_id,
            title=title.strip(),
            description=description,
            status=TicketStatus.OPEN.value,
        )
        created = self._repo.add(model)

        logger.info("ticket created ticket_id=%s user_id=%s by=%s", created.id, owner_id, caller.subject_id)
        return created

    def update_ticket(
        self,
        caller: AuthContext,
        *,
        ticket_id: int,
        title: str | None = None,
        description: str | None = None,
        status: TicketStatus | None = None,
        type_id: int | None = None,
    ) -> TicketModel:
        ticket = self._get_or_404(ticket_id)
        resource = Resource(owner_id=ticket.user_id)
        authorize(caller, resource, Action.UPDATE)

        status_changed = status is not None and TicketStatus(status).value != ticket.status
        type_changed = type_id is not None and type_id != ticket.type_id
        if status_changed or type_changed:
            # only admins move a ticket through its workflow or re-classify it
            authorize(caller, resource, Action.MODERATE)

        if title is not None:
            ticket.title = title.strip()
        if description is not None:
            ticket.description = description
        if status_changed:
            ticket.status = TicketStatus(status).value
        if type_changed:
            self._ensure_type_exists(type_id)
            ticket.type_id = type_id

        self._repo.add(ticket)
        return ticket

    def delete_ticket(self, caller: AuthContext, *, ticket_id: int) -> None:
        ticket = self._get_or_404(ticket_id)
        authorize(caller, Resource(owner_id=ticket.user_id), Action.DELETE)
        self._repo.delete(ticket)
        logger.info("ticket deleted ticket_id=%s by=%s", ticket_id, caller.subject_id)
