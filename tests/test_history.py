"""Tests for history list operations and the history stores."""

import logging
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from riskcalc.models.history_entry import HistoryEntry
from riskcalc.schemas.trade import Trade
from riskcalc.services.history import (
    InMemoryHistoryStore,
    SqlHistoryStore,
    find_trade,
    merge_histories,
    prepend_trade,
    remove_trade,
    trade_from_local_storage,
)

T0 = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _trade(trade_id: str, minutes: int = 0, **overrides) -> Trade:
    fields = dict(
        id=trade_id,
        timestamp=T0 + timedelta(minutes=minutes),
        amount=1000.0,
        entry_price=100.0,
        take_profit=110.0,
        stop_loss=95.0,
        leverage=5.0,
        asset="BTC/EUR",
        type="long",
    )
    fields.update(overrides)
    return Trade(**fields)


@pytest.fixture
def sql_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


# ---------------------------------------------------------------------------
# 1. Pure list operations
# ---------------------------------------------------------------------------

class TestListOperations:
    def test_prepend_puts_newest_first(self):
        history = [_trade("a")]
        updated = prepend_trade(history, _trade("b", minutes=1))
        assert [t.id for t in updated] == ["b", "a"]
        # Original list untouched
        assert [t.id for t in history] == ["a"]

    def test_remove_by_id(self):
        history = [_trade("c"), _trade("b"), _trade("a")]
        assert [t.id for t in remove_trade(history, "b")] == ["c", "a"]

    def test_remove_unknown_id_is_noop(self):
        history = [_trade("b"), _trade("a")]
        assert remove_trade(history, "zzz") == history

    def test_find_trade(self):
        history = [_trade("b"), _trade("a")]
        assert find_trade(history, "a").id == "a"
        assert find_trade(history, "zzz") is None

    def test_trade_is_immutable(self):
        trade = _trade("a")
        with pytest.raises(ValidationError):
            trade.amount = 5.0


# ---------------------------------------------------------------------------
# 2. In-memory store
# ---------------------------------------------------------------------------

class TestInMemoryStore:
    def test_missing_key_loads_empty(self):
        assert InMemoryHistoryStore().load("trades") == []

    def test_save_then_load(self):
        store = InMemoryHistoryStore()
        store.save("trades", [_trade("a")])
        assert [t.id for t in store.load("trades")] == ["a"]

    def test_loaded_list_is_a_copy(self):
        store = InMemoryHistoryStore({"trades": [_trade("a")]})
        store.load("trades").clear()
        assert len(store.load("trades")) == 1

    def test_keys_are_independent(self):
        store = InMemoryHistoryStore()
        store.save("trades", [_trade("a")])
        assert store.load("other") == []


# ---------------------------------------------------------------------------
# 3. SQL store
# ---------------------------------------------------------------------------

class TestSqlStore:
    def test_missing_key_loads_empty(self, sql_engine):
        assert SqlHistoryStore(sql_engine).load("trades") == []

    def test_save_then_load_preserves_trades(self, sql_engine):
        store = SqlHistoryStore(sql_engine)
        trades = [_trade("b", minutes=1, type="short", take_profit=90.0, stop_loss=105.0), _trade("a")]
        store.save("trades", trades)

        loaded = store.load("trades")
        assert loaded == trades
        assert loaded[0].timestamp == T0 + timedelta(minutes=1)

    def test_save_overwrites_existing_value(self, sql_engine):
        store = SqlHistoryStore(sql_engine)
        store.save("trades", [_trade("a")])
        store.save("trades", [_trade("b"), _trade("a")])

        assert [t.id for t in store.load("trades")] == ["b", "a"]
        with Session(sql_engine) as session:
            assert len(session.exec(select(HistoryEntry)).all()) == 1

    def test_save_preserves_unreadable_value(self, sql_engine, caplog):
        with Session(sql_engine) as session:
            session.add(HistoryEntry(key="trades", value=[{"bogus": 1}]))
            session.commit()

        store = SqlHistoryStore(sql_engine)
        with caplog.at_level(logging.WARNING):
            store.save("trades", [_trade("a")])

        assert [t.id for t in store.load("trades")] == ["a"]
        with Session(sql_engine) as session:
            backup = session.get(HistoryEntry, "trades.unreadable")
            assert backup.value == [{"bogus": 1}]
        assert "Preserved unreadable history" in caplog.text

    def test_unreadable_value_loads_empty(self, sql_engine, caplog):
        with Session(sql_engine) as session:
            session.add(HistoryEntry(key="trades", value=[{"bogus": 1}]))
            session.commit()

        with caplog.at_level(logging.WARNING):
            assert SqlHistoryStore(sql_engine).load("trades") == []
        assert "Ignoring unreadable history" in caplog.text


# ---------------------------------------------------------------------------
# 4. Browser localStorage import
# ---------------------------------------------------------------------------

class TestLocalStorageImport:
    def test_converts_camel_case_and_millis(self):
        trade = trade_from_local_storage({
            "id": "abc",
            "amount": 1000,
            "entryPrice": 100,
            "takeProfit": 90,
            "stopLoss": 105,
            "leverage": 10,
            "timestamp": 1704164645000,
            "asset": "ETH/EUR",
            "type": "short",
        })
        assert trade.id == "abc"
        assert trade.entry_price == 100.0
        assert trade.take_profit == 90.0
        assert trade.stop_loss == 105.0
        assert trade.type == "short"
        assert trade.timestamp == T0

    def test_missing_type_defaults_to_long(self):
        trade = trade_from_local_storage({
            "id": "old", "amount": 1, "entryPrice": 100, "takeProfit": 110,
            "stopLoss": 95, "leverage": 1, "timestamp": 0, "asset": "BTC/EUR",
        })
        assert trade.type == "long"

    def test_merge_skips_known_ids_and_sorts_newest_first(self):
        history = [_trade("b", minutes=10), _trade("a", minutes=0)]
        incoming = [_trade("a", minutes=0), _trade("c", minutes=5), _trade("d", minutes=20)]

        merged = merge_histories(history, incoming)
        assert [t.id for t in merged] == ["d", "b", "c", "a"]

    def test_merge_keeps_first_of_duplicated_incoming_ids(self):
        history = [_trade("a", minutes=0)]
        incoming = [_trade("c", minutes=5), _trade("c", minutes=6), _trade("c", minutes=7)]

        merged = merge_histories(history, incoming)
        assert [t.id for t in merged] == ["c", "a"]
        assert merged[0].timestamp == T0 + timedelta(minutes=5)
        assert remove_trade(merged, "c") == history
