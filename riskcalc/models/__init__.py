"""Database models."""

from riskcalc.models.history_entry import HistoryEntry

__all__ = [
    "HistoryEntry",
]
