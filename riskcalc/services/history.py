"""Trade history: pure list operations and the stores that persist them.

History is a newest-first list of trades. It is only ever changed by
prepending an accepted trade or removing one by id, each producing a new list.
"""

import logging
from datetime import datetime, timezone
from typing import Protocol

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.engine import Engine
from sqlmodel import Session

from riskcalc.models.history_entry import HistoryEntry
from riskcalc.schemas.trade import Trade

logger = logging.getLogger(__name__)

_history_adapter = TypeAdapter(list[Trade])


def prepend_trade(history: list[Trade], trade: Trade) -> list[Trade]:
    return [trade, *history]


def remove_trade(history: list[Trade], trade_id: str) -> list[Trade]:
    """Drop the trade with this id. Unknown ids leave the list unchanged."""
    return [t for t in history if t.id != trade_id]


def find_trade(history: list[Trade], trade_id: str) -> Trade | None:
    return next((t for t in history if t.id == trade_id), None)


class HistoryStore(Protocol):
    def load(self, key: str) -> list[Trade]: ...

    def save(self, key: str, history: list[Trade]) -> None: ...


class InMemoryHistoryStore:
    """Dict-backed store, used in tests."""

    def __init__(self, initial: dict[str, list[Trade]] | None = None):
        self._data: dict[str, list[Trade]] = {k: list(v) for k, v in (initial or {}).items()}

    def load(self, key: str) -> list[Trade]:
        return list(self._data.get(key, []))

    def save(self, key: str, history: list[Trade]) -> None:
        self._data[key] = list(history)


def _backup_key(key: str) -> str:
    return f"{key}.unreadable"


def _is_readable(raw) -> bool:
    try:
        _history_adapter.validate_python(raw or [])
    except ValidationError:
        return False
    return True


class SqlHistoryStore:
    """Stores each history list as a JSON value in the history_entry table."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def load(self, key: str) -> list[Trade]:
        with Session(self.engine) as session:
            entry = session.get(HistoryEntry, key)
            raw = entry.value if entry else []

        try:
            return _history_adapter.validate_python(raw or [])
        except ValidationError as e:
            logger.warning(
                f"Ignoring unreadable history under '{key}' ({e.error_count()} errors); "
                f"it will be moved to '{_backup_key(key)}' on the next save"
            )
            return []

    def save(self, key: str, history: list[Trade]) -> None:
        value = _history_adapter.dump_python(history, mode="json")
        with Session(self.engine) as session:
            entry = session.get(HistoryEntry, key)
            if entry is not None and not _is_readable(entry.value):
                backup = HistoryEntry(key=_backup_key(key), value=entry.value)
                session.merge(backup)
                logger.warning(f"Preserved unreadable history '{key}' as '{backup.key}'")
            if entry is None:
                entry = HistoryEntry(key=key, value=value)
            else:
                entry.value = value
                entry.updated_at = datetime.now(timezone.utc)
            session.add(entry)
            session.commit()


# ---------------------------------------------------------------------------
# Browser localStorage import
# ---------------------------------------------------------------------------

_LOCAL_STORAGE_FIELDS = {
    "id": "id",
    "amount": "amount",
    "entryPrice": "entry_price",
    "takeProfit": "take_profit",
    "stopLoss": "stop_loss",
    "leverage": "leverage",
    "asset": "asset",
    "type": "type",
}


def trade_from_local_storage(raw: dict) -> Trade:
    """Convert one trade as saved by the browser (camelCase, epoch millis).

    Records saved before short trades existed have no type and are long.
    """
    fields = {ours: raw[theirs] for theirs, ours in _LOCAL_STORAGE_FIELDS.items() if theirs in raw}
    fields.setdefault("type", "long")
    fields["timestamp"] = datetime.fromtimestamp(raw["timestamp"] / 1000, tz=timezone.utc)
    return Trade.model_validate(fields)


def merge_histories(history: list[Trade], incoming: list[Trade]) -> list[Trade]:
    """Add trades whose id is not already present, keeping newest first."""
    seen = {t.id for t in history}
    added = []
    for trade in incoming:
        if trade.id in seen:
            continue
        seen.add(trade.id)
        added.append(trade)
    return sorted([*history, *added], key=lambda t: t.timestamp, reverse=True)
