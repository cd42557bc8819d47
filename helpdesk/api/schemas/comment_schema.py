# helpdesk/api/schemas/comment_schema.py
from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

from helpdesk.api.schemas._datetime_serializer import serialize_dt


class CommentRequest(BaseModel):
    body: str = Field(min_length=1, max_length=4000)


class CommentResponse(BaseModel):
    id: int
    ticket_id: int
    user_id: int
    body: str
    created_at: datetime

    @field_serializer("created_at")
    def serialize_dates(self, value: datetime | None):
        return serialize_dt(value)
