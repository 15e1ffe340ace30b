"""Risk classification.

Single source of risk tiers. The history table's colour band is derived from
the tier rather than from a second threshold table.
"""

from riskcalc.utils.constants import RISK_BANDS, RISK_LABELS


def adjusted_ratio(risk_reward_ratio: float, leverage: float) -> float:
    """Risk/reward ratio scaled down by leverage."""
    if leverage <= 0:
        raise ValueError(f"leverage must be positive, got {leverage}")
    return risk_reward_ratio * (1 / leverage)


def classify_risk(risk_reward_ratio: float, leverage: float) -> str:
    """Map a (ratio, leverage) pair to one of five risk tiers.

    Leverage of 20x or more forces a high tier whatever the ratio.
    """
    adjusted = adjusted_ratio(risk_reward_ratio, leverage)

    if leverage >= 50:
        return "very_high"
    if leverage >= 20:
        return "high"

    if adjusted <= 0.5:
        return "very_high"
    if adjusted <= 1:
        return "high"
    if adjusted <= 2:
        return "medium"
    if adjusted <= 3:
        return "low"
    return "very_low"


def risk_band(risk_level: str) -> str:
    """Colour band for a risk tier: red, orange, yellow or green."""
    return RISK_BANDS[risk_level]


def risk_label(risk_level: str) -> str:
    return RISK_LABELS[risk_level]
