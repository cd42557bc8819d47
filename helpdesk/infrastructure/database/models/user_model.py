# helpdesk/infrastructure/database/models/user_model.py

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from helpdesk.infrastructure.database.base_model import BaseModel, BigIntId


class UserModel(BaseModel):
    __tablename__ = "tbUsers"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True)

    email: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="Student")

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=True)

    refresh_tokens = relationship(
        "RefreshTokenModel", back_populates="user", cascade="all, delete"
    )
    tickets = relationship(
        "TicketModel", back_populates="user", cascade="all, delete"
    )
    comments = relationship(
        "CommentModel", back_populates="user", cascade="all, delete"
    )
