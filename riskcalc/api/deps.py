"""Shared API dependencies.

Each collaborator of the trade desk is a dependency so tests can swap it via
app.dependency_overrides.
"""

from riskcalc.database import engine
from riskcalc.services.history import HistoryStore, SqlHistoryStore
from riskcalc.services.price_simulator import RandomWalkSimulator
from riskcalc.services.trade_desk import Clock, IdFactory, PriceSimulator, new_trade_id, utc_now


def get_history_store() -> HistoryStore:
    return SqlHistoryStore(engine)


def get_clock() -> Clock:
    return utc_now


def get_id_factory() -> IdFactory:
    return new_trade_id


def get_price_simulator() -> PriceSimulator:
    return RandomWalkSimulator()
