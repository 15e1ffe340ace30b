"""Trade proposal validation.

Pure checks on the price levels of a proposed trade. Returns a mapping of
error slot ("take_profit", "stop_loss", "general") to message; an empty
mapping means the trade is accepted.
"""

from riskcalc.schemas.trade import TradeProposal
from riskcalc.utils.constants import MIN_TP_SL_DISTANCE


def validate_trade(
    entry_price: float,
    take_profit: float,
    stop_loss: float,
    trade_type: str,
) -> dict[str, str]:
    """Check TP/SL ordering for the direction and the minimum TP/SL distance.

    All checks run. Field slots are independent; the "general" slot keeps the
    last general violation, so the distance check wins over the TP/SL ordering.
    """
    errors: dict[str, str] = {}

    if trade_type == "long":
        if take_profit <= entry_price:
            errors["take_profit"] = "take-profit must exceed entry price"
        if stop_loss >= entry_price:
            errors["stop_loss"] = "stop-loss must be below entry price"
        if take_profit <= stop_loss:
            errors["general"] = "take-profit must exceed stop-loss"
    elif trade_type == "short":
        if take_profit >= entry_price:
            errors["take_profit"] = "take-profit must be below entry price"
        if stop_loss <= entry_price:
            errors["stop_loss"] = "stop-loss must exceed entry price"
        if take_profit >= stop_loss:
            errors["general"] = "take-profit must be below stop-loss"
    else:
        errors["general"] = f"unknown trade type: {trade_type!r}"

    min_distance = entry_price * MIN_TP_SL_DISTANCE
    if abs(take_profit - stop_loss) < min_distance:
        errors["general"] = "distance between take-profit and stop-loss must be at least 0.1%"

    return errors


def validate_proposal(proposal: TradeProposal) -> dict[str, str]:
    return validate_trade(
        proposal.entry_price,
        proposal.take_profit,
        proposal.stop_loss,
        proposal.type,
    )
