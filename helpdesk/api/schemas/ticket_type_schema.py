# helpdesk/api/schemas/ticket_type_schema.py
from pydantic import BaseModel, Field


class CreateTicketTypeRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None


class UpdateTicketTypeRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None


class TicketTypeResponse(BaseModel):
    id: int
    name: str
    description: str | None
