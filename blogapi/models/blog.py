from __future__ import annotations

from datetime import datetime

from sqlalchemy import false, func, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogapi.extensions import db


class Blog(db.Model):
    __tablename__ = "blogs"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(db.String(255), nullable=False)
    description: Mapped[str] = mapped_column(db.Text, nullable=False)
    article: Mapped[str] = mapped_column(db.Text, nullable=False)
    user_id: Mapped[int] = mapped_column(db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    verified: Mapped[bool] = mapped_column(db.Boolean, default=False, server_default=false(), nullable=False)
    created_at: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(db.DateTime(timezone=True), onupdate=func.now())

    author: Mapped["User"] = relationship(back_populates="blogs")

    __table_args__ = (
        Index("ix_blogs_verified_created_at", "verified", "created_at"),
    )

    def is_owned_by(self, user_id: int | None) -> bool:
        return user_id is not None and self.user_id == user_id
