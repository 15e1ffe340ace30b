"""Pydantic schemas for trades, calculations and history rows."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

TradeType = Literal["long", "short"]
RiskLevel = Literal["very_high", "high", "medium", "low", "very_low"]
RiskBand = Literal["red", "orange", "yellow", "green"]


class TradeProposal(BaseModel):
    """A position as entered in the form, before id and timestamp are assigned."""

    amount: float = Field(gt=0)
    entry_price: float = Field(gt=0)
    take_profit: float = Field(gt=0)
    stop_loss: float = Field(gt=0)
    leverage: float = Field(default=1.0, gt=0)
    asset: str = Field(default="BTC/EUR", min_length=1, max_length=32)
    type: TradeType = "long"

    @field_validator("asset")
    @classmethod
    def _trim_asset(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("must not be empty")
        return text


class Trade(TradeProposal):
    """An accepted trade. Immutable once created."""

    id: str
    timestamp: datetime

    model_config = {"frozen": True}


class TradeCalculation(BaseModel):
    potential_profit: float
    potential_loss: float
    profit_percentage: float
    loss_percentage: float
    risk_reward_ratio: float
    risk_level: RiskLevel


class TradeRead(BaseModel):
    trade: Trade
    calculation: TradeCalculation


class TradeSubmissionRead(TradeRead):
    price_history: list[float] = []


class CalculationPreview(BaseModel):
    calculation: TradeCalculation


class HistoryRow(BaseModel):
    """One line of the history table."""

    trade: Trade
    risk_reward_ratio: float | None  # Rounded to 2 decimals; None if undefined
    risk_level: RiskLevel | None
    risk_band: RiskBand | None
