# helpdesk/infrastructure/database/models/ticket_type_model.py

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from helpdesk.infrastructure.database.base_model import BaseModel, BigIntId


class TicketTypeModel(BaseModel):
    __tablename__ = "tbTicketTypes"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=True)
