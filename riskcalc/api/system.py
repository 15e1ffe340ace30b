"""System API: health check and form options."""

from fastapi import APIRouter

from riskcalc.utils.constants import (
    ASSETS,
    LEVERAGE_OPTIONS,
    RISK_BANDS,
    RISK_LABELS,
    RISK_LEVELS,
    TRADE_TYPES,
)

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/options")
def form_options():
    """Choices offered by the trade form and the risk legend."""
    return {
        "leverage_options": LEVERAGE_OPTIONS,
        "assets": ASSETS,
        "trade_types": TRADE_TYPES,
        "risk_levels": [
            {"level": level, "label": RISK_LABELS[level], "band": RISK_BANDS[level]}
            for level in RISK_LEVELS
        ],
    }
