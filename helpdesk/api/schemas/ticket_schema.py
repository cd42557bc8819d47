# helpdesk/api/schemas/ticket_schema.py
from pydantic import BaseModel, Field

from helpdesk.api.schemas.comment_schema import CommentResponse
from helpdesk.services.ticket_service import TicketStatus


class CreateTicketRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    type_id: int | None = Field(default=None, gt=0)
    # admins may open a ticket on behalf of someone else
    user_id: int | None = Field(default=None, gt=0)


class UpdateTicketRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    status: TicketStatus | None = None
    type_id: int | None = Field(default=None, gt=0)


class TicketResponse(BaseModel):
    id: int
    user_id: int
    type_id: int | None
    title: str
    description: str | None
    status: TicketStatus
    comments: list[CommentResponse] = []
