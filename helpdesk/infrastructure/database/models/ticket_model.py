# helpdesk/infrastructure/database/models/ticket_model.py

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from helpdesk.infrastructure.database.base_model import BaseModel, BigIntId


class TicketModel(BaseModel):
    __tablename__ = "tbTickets"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True)

    user_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("tbUsers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("tbTicketTypes.id", ondelete="SET NULL"), nullable=True
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=True)

    # "Open" | "Pending" | "Closed"
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Open")

    user = relationship("UserModel", back_populates="tickets")
    comments = relationship(
        "CommentModel",
        back_populates="ticket",
        cascade="all, delete",
        order_by="CommentModel.id",
    )
