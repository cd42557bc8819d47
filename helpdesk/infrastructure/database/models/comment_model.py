# helpdesk/infrastructure/database/models/comment_model.py

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from helpdesk.infrastructure.database.base_model import BaseModel, BigIntId


class CommentModel(BaseModel):
    __tablename__ = "tbComments"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True)

    ticket_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("tbTickets.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("tbUsers.id", ondelete="CASCADE"), nullable=False
    )

    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    ticket = relationship("TicketModel", back_populates="comments")
    user = relationship("UserModel", back_populates="comments")
