"""Trade submission, deletion and history views.

Orchestrates: validation → id/timestamp stamping → calculation → history
update. The validator and calculator stay pure; this module owns the calls to
the injected store, clock, id generator and price simulator.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from riskcalc.schemas.trade import HistoryRow, Trade, TradeCalculation, TradeProposal
from riskcalc.services import history as history_ops
from riskcalc.services.calculator import calculate_trade
from riskcalc.services.history import HistoryStore
from riskcalc.services.risk import risk_band
from riskcalc.services.validator import validate_proposal

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]
PriceSimulator = Callable[[float], list[float]]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_trade_id() -> str:
    return uuid.uuid4().hex


@dataclass
class SubmissionResult:
    """Outcome of one submission. errors is empty exactly when accepted."""

    accepted: bool
    trade: Trade | None = None
    calculation: TradeCalculation | None = None
    errors: dict[str, str] = field(default_factory=dict)
    price_history: list[float] = field(default_factory=list)


def preview_trade(proposal: TradeProposal) -> SubmissionResult:
    """Validate and calculate without recording anything."""
    errors = validate_proposal(proposal)
    if errors:
        return SubmissionResult(accepted=False, errors=errors)

    result = calculate_trade(proposal)
    if not result.success:
        return SubmissionResult(accepted=False, errors={"general": result.error})
    return SubmissionResult(accepted=True, calculation=result.calculation)


def submit_trade(
    proposal: TradeProposal,
    store: HistoryStore,
    key: str,
    clock: Clock = utc_now,
    id_factory: IdFactory = new_trade_id,
    simulator: PriceSimulator | None = None,
) -> SubmissionResult:
    """Validate, calculate and prepend a new trade to the stored history.

    Nothing is written when validation or calculation fails.
    """
    errors = validate_proposal(proposal)
    if errors:
        logger.info(f"Rejected {proposal.type} {proposal.asset}: {sorted(errors)}")
        return SubmissionResult(accepted=False, errors=errors)

    trade = Trade(**proposal.model_dump(), id=id_factory(), timestamp=clock())

    result = calculate_trade(trade)
    if not result.success:
        logger.warning(f"Calculation refused for {trade.asset}: {result.error}")
        return SubmissionResult(accepted=False, errors={"general": result.error})

    store.save(key, history_ops.prepend_trade(store.load(key), trade))

    calc = result.calculation
    logger.info(
        f"Recorded trade {trade.id}: {trade.type} {trade.asset} x{trade.leverage:g} "
        f"profit={calc.potential_profit:.2f} loss={calc.potential_loss:.2f} "
        f"rr={calc.risk_reward_ratio:.2f} risk={calc.risk_level}"
    )

    price_history = simulator(trade.entry_price) if simulator else []
    return SubmissionResult(
        accepted=True,
        trade=trade,
        calculation=calc,
        price_history=price_history,
    )


def delete_trade(store: HistoryStore, key: str, trade_id: str) -> bool:
    """Remove a trade by id. Returns False (and writes nothing) for unknown ids."""
    history = store.load(key)
    remaining = history_ops.remove_trade(history, trade_id)
    if len(remaining) == len(history):
        return False
    store.save(key, remaining)
    logger.info(f"Deleted trade {trade_id}")
    return True


def clear_history(store: HistoryStore, key: str) -> int:
    """Drop every trade. Returns how many were removed."""
    count = len(store.load(key))
    store.save(key, [])
    logger.info(f"Cleared {count} trades from history '{key}'")
    return count


def history_row(trade: Trade) -> HistoryRow:
    """Display row for the history table, using the shared risk classifier."""
    result = calculate_trade(trade)
    if not result.success:
        return HistoryRow(trade=trade, risk_reward_ratio=None, risk_level=None, risk_band=None)
    calc = result.calculation
    return HistoryRow(
        trade=trade,
        risk_reward_ratio=round(calc.risk_reward_ratio, 2),
        risk_level=calc.risk_level,
        risk_band=risk_band(calc.risk_level),
    )


def history_rows(store: HistoryStore, key: str) -> list[HistoryRow]:
    return [history_row(t) for t in store.load(key)]
