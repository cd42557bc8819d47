# helpdesk/infrastructure/database/models/refresh_token_model.py

from datetime import datetime

from sqlalchemy import CHAR, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from helpdesk.infrastructure.database.base_model import BaseModel, BigIntId


class RefreshTokenModel(BaseModel):
    __tablename__ = "tbRefreshTokens"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True)

    user_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("tbUsers.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # sha256 of the opaque token; the token itself is never stored
    token_hash: Mapped[str] = mapped_column(CHAR(64), nullable=False, unique=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    revoked_at: Mapped[datetime] = mapped_column(DateTime, nullable=True)
    replaced_by_id: Mapped[int] = mapped_column(BigIntId, nullable=True)
    reason: Mapped[str] = mapped_column(String(50), nullable=True)

    user = relationship("UserModel", back_populates="refresh_tokens")

    def is_valid(self, now: datetime) -> bool:
        return self.revoked_at is None and now < self.expires_at
