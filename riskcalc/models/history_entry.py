"""HistoryEntry model: key-value row holding a serialized trade list."""

from datetime import datetime, timezone
from typing import Any

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON


class HistoryEntry(SQLModel, table=True):
    __tablename__ = "history_entry"

    key: str = Field(primary_key=True)  # e.g. "trades"
    value: list[dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
