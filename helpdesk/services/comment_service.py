# helpdesk/services/comment_service.py
from __future__ import annotations

from datetime import datetime, timezone

from helpdesk.core.authorization import Action, Resource, authorize
from helpdesk.core.exceptions import NotFoundError
from helpdesk.entities.user import AuthContext
from helpdesk.infrastructure.database.models.comment_model import CommentModel
from helpdesk.infrastructure.database.models.ticket_model import TicketModel
from helpdesk.repositories.comment_repository import CommentRepository
from helpdesk.repositories.ticket_repository import TicketRepository


class CommentService:
    """
    Comments are readable by whoever can read the parent ticket, but editing
    or deleting one checks the comment's own author, not the ticket owner.
    """

    def __init__(self, comment_repository: CommentRepository, ticket_repository: TicketRepository) -> None:
        self._repo = comment_repository
        self._tickets = ticket_repository

    def _readable_ticket(self, caller: AuthContext, ticket_id: int) -> TicketModel:
        ticket = self._tickets.get_by_id(ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket not found.")
        authorize(caller, Resource(owner_id=ticket.user_id), Action.READ)
        return ticket

    def _get_or_404(self, ticket_id: int, comment_id: int) -> CommentModel:
        comment = self._repo.get_in_ticket(ticket_id=ticket_id, comment_id=comment_id)
        if comment is None:
            raise NotFoundError("Comment not found.")
        return comment

    def list_comments(self, caller: AuthContext, *, ticket_id: int) -> list[CommentModel]:
        self._readable_ticket(caller, ticket_id)
        return self._repo.list_by_ticket(ticket_id)

    def get_comment(self, caller: AuthContext, *, ticket_id: int, comment_id: int) -> CommentModel:
        self._readable_ticket(caller, ticket_id)
        return self._get_or_404(ticket_id, comment_id)

    def create_comment(self, caller: AuthContext, *, ticket_id: int, body: str) -> CommentModel:
        self._readable_ticket(caller, ticket_id)
        authorize(caller, Resource(owner_id=caller.subject_id), Action.CREATE)

        model = CommentModel(
            ticket_id=ticket_id,
            user_id=caller.subject_id,
            body=body,
            created_at=datetime.now(tz=timezone.utc).replace(tzinfo=None),
        )
        return self._repo.add(model)

    def update_comment(self, caller: AuthContext, *, ticket_id: int, comment_id: int, body: str) -> CommentModel:
        comment = self._get_or_404(ticket_id, comment_id)
        authorize(caller, Resource(owner_id=comment.user_id), Action.UPDATE)

        comment.body = body
        self._repo.add(comment)
        return comment

    def delete_comment(self, caller: AuthContext, *, ticket_id: int, comment_id: int) -> None:
        comment = self._get_or_404(ticket_id, comment_id)
        authorize(caller, Resource(owner_id=comment.user_id), Action.DELETE)
        self._repo.delete(comment)
