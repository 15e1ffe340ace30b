"""Shared constants: offered form choices and validation thresholds."""

LEVERAGE_OPTIONS = [1, 2, 3, 4, 5, 10, 20, 50, 100, 150]

ASSETS = ["BTC/EUR", "ETH/EUR", "BNB/EUR", "SOL/EUR", "ADA/EUR"]

TRADE_TYPES = ["long", "short"]

# Take-profit and stop-loss must be at least 0.1% of entry price apart
MIN_TP_SL_DISTANCE = 0.001

# Ordered from highest to lowest risk
RISK_LEVELS = ["very_high", "high", "medium", "low", "very_low"]

RISK_LABELS: dict[str, str] = {
    "very_high": "Very risky",
    "high": "Risky",
    "medium": "Medium",
    "low": "Moderate",
    "very_low": "Very moderate",
}

# Coarser colour band used by the history table
RISK_BANDS: dict[str, str] = {
    "very_high": "red",
    "high": "orange",
    "medium": "yellow",
    "low": "green",
    "very_low": "green",
}
