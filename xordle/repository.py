"""
DB-backed storage with the same get/set API as the in-memory MemoryStorage.

Why: lets Round.load()/save() run against MySQL/SQLite without knowing it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterator, Tuple

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from .models import RoundState


class DBStorage:
    """Key/value storage on the round_state table. Commits on every set() and once per update()."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str, default: Any = None) -> Any:
        row = self.db.get(RoundState, key)
        if row is None:
            return default
        return row.value

    def set(self, key: str, value: Any) -> None:
        self._put(key, value)
        self.db.commit()

    def update(self, values: Dict[str, Any]) -> None:
        """Write several keys in one transaction: all of them or none."""
        try:
            for key, value in values.items():
                self._put(key, value)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _put(self, key: str, value: Any) -> None:
        row = self.db.get(RoundState, key)
        if row is None:
            row = RoundState(key=key, value=value)
            self.db.add(row)
        else:
            row.value = value
        row.updated_at = datetime.utcnow()

    def items(self, prefix: str = "") -> Iterator[Tuple[str, Any]]:
        query = select(RoundState).order_by(RoundState.key)
        if prefix:
            query = query.where(RoundState.key.startswith(prefix, autoescape=True))
        rows = self.db.execute(query).scalars().all()
        for row in rows:
            yield row.key, row.value

    def clear(self) -> None:
        self.db.execute(delete(RoundState))
        self.db.commit()
