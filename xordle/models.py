"""
SQLAlchemy ORM models.

Tables:
- round_state: the key/value store behind each round
  (key "game-day-12" -> "won", key "guesses-day-12" -> ["north", ...])

Why JSON?
- Values are a status string or a short list of words; JSON keeps them readable.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from .db import Base


class RoundState(Base):
    __tablename__ = "round_state"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=False)

    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
