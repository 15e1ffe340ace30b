"""Profit/loss and risk/reward computation for a single trade.

All functions are pure computation: no I/O, no database access.
Failures are returned as values on CalculationResult, never raised.
"""

import math
from dataclasses import dataclass

from riskcalc.schemas.trade import TradeCalculation, TradeProposal
from riskcalc.services.risk import classify_risk

ZERO_LOSS_ERROR = "risk/reward ratio undefined: zero loss"
OVERFLOW_ERROR = "invalid input: calculation overflow"


@dataclass
class CalculationResult:
    success: bool
    calculation: TradeCalculation | None = None
    error: str | None = None


def direction_multiplier(trade_type: str) -> int:
    """+1 for long, -1 for short, so a favorable move is always positive."""
    return 1 if trade_type == "long" else -1


def _check_inputs(trade: TradeProposal) -> str | None:
    values = {
        "amount": trade.amount,
        "entry_price": trade.entry_price,
        "take_profit": trade.take_profit,
        "stop_loss": trade.stop_loss,
        "leverage": trade.leverage,
    }
    for name, value in values.items():
        if not math.isfinite(value):
            return f"invalid input: {name} must be a finite number"
    for name in ("amount", "entry_price", "leverage"):
        if values[name] <= 0:
            return f"invalid input: {name} must be positive"
    if trade.type not in ("long", "short"):
        return f"invalid input: unknown trade type {trade.type!r}"
    return None


def calculate_trade(trade: TradeProposal) -> CalculationResult:
    """Derive profit, loss, percentages, risk/reward ratio and risk level."""
    error = _check_inputs(trade)
    if error:
        return CalculationResult(success=False, error=error)

    m = direction_multiplier(trade.type)
    entry = trade.entry_price
    position = trade.amount * trade.leverage

    potential_profit = m * (trade.take_profit - entry) * position / entry
    potential_loss = m * (trade.stop_loss - entry) * position / entry
    profit_percentage = m * (trade.take_profit - entry) / entry * 100 * trade.leverage
    loss_percentage = m * (trade.stop_loss - entry) / entry * 100 * trade.leverage

    if potential_loss == 0:
        return CalculationResult(success=False, error=ZERO_LOSS_ERROR)

    risk_reward_ratio = abs(potential_profit / potential_loss)

    outputs = (potential_profit, potential_loss, profit_percentage, loss_percentage, risk_reward_ratio)
    if not all(math.isfinite(v) for v in outputs):
        return CalculationResult(success=False, error=OVERFLOW_ERROR)

    return CalculationResult(
        success=True,
        calculation=TradeCalculation(
            potential_profit=potential_profit,
            potential_loss=potential_loss,
            profit_percentage=profit_percentage,
            loss_percentage=loss_percentage,
            risk_reward_ratio=risk_reward_ratio,
            risk_level=classify_risk(risk_reward_ratio, trade.leverage),
        ),
    )
