"""Trade API: submit, preview, list history, fetch and delete trades."""

from fastapi import APIRouter, Depends, HTTPException

from riskcalc.config import settings
from riskcalc.schemas.trade import (
    CalculationPreview,
    HistoryRow,
    TradeProposal,
    TradeRead,
    TradeSubmissionRead,
)
from riskcalc.services import trade_desk
from riskcalc.services.calculator import calculate_trade
from riskcalc.services.history import HistoryStore, find_trade
from riskcalc.api.deps import get_clock, get_history_store, get_id_factory, get_price_simulator

router = APIRouter(prefix="/api/trades", tags=["trades"])


def _reject(errors: dict[str, str]):
    raise HTTPException(status_code=422, detail={"errors": errors})


@router.post("", response_model=TradeSubmissionRead, status_code=201)
def submit_trade(
    data: TradeProposal,
    store: HistoryStore = Depends(get_history_store),
    clock=Depends(get_clock),
    id_factory=Depends(get_id_factory),
    simulator=Depends(get_price_simulator),
):
    result = trade_desk.submit_trade(
        data,
        store,
        settings.history_key,
        clock=clock,
        id_factory=id_factory,
        simulator=simulator,
    )
    if not result.accepted:
        _reject(result.errors)
    return TradeSubmissionRead(
        trade=result.trade,
        calculation=result.calculation,
        price_history=result.price_history,
    )


@router.post("/preview", response_model=CalculationPreview)
def preview_trade(data: TradeProposal):
    """Calculate without recording the trade."""
    result = trade_desk.preview_trade(data)
    if not result.accepted:
        _reject(result.errors)
    return CalculationPreview(calculation=result.calculation)


@router.get("", response_model=list[HistoryRow])
def list_trades(
    limit: int = 50,
    offset: int = 0,
    store: HistoryStore = Depends(get_history_store),
):
    rows = trade_desk.history_rows(store, settings.history_key)
    return rows[offset:offset + limit]


@router.get("/{trade_id}", response_model=TradeRead)
def get_trade(trade_id: str, store: HistoryStore = Depends(get_history_store)):
    trade = find_trade(store.load(settings.history_key), trade_id)
    if not trade:
        raise HTTPException(status_code=404, detail="Trade not found")
    result = calculate_trade(trade)
    if not result.success:
        _reject({"general": result.error})
    return TradeRead(trade=trade, calculation=result.calculation)


@router.delete("/{trade_id}", status_code=204)
def delete_trade(trade_id: str, store: HistoryStore = Depends(get_history_store)):
    trade_desk.delete_trade(store, settings.history_key, trade_id)
