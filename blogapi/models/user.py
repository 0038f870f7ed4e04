from __future__ import annotations

from datetime import datetime

from flask_login import UserMixin
from sqlalchemy import func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogapi.extensions import db


class User(db.Model, UserMixin):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(db.String(50), unique=True, nullable=False, index=True)
    # sha256 hex digest of the caller's bearer token; the token itself is never stored
    api_token_hash: Mapped[str] = mapped_column(db.String(64), unique=True, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    blogs: Mapped[list["Blog"]] = relationship(back_populates="author")

    def get_id(self) -> str:  # Flask-Login compatibility
        return str(self.id)
