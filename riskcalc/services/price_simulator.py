"""Simulated price history shown next to a freshly calculated trade.

Cosmetic only: a bounded random walk starting at the entry price. Has no
bearing on any calculation.
"""

import numpy as np

from riskcalc.config import settings


class RandomWalkSimulator:
    """Each step moves the price by up to ±step_pct of the previous price."""

    def __init__(
        self,
        points: int | None = None,
        step_pct: float | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.points = points if points is not None else settings.price_history_points
        self.step_pct = step_pct if step_pct is not None else settings.price_step_pct
        self.rng = rng if rng is not None else np.random.default_rng()

    def __call__(self, entry_price: float) -> list[float]:
        if self.points <= 0:
            return []
        draws = self.rng.random(self.points - 1)
        factors = 1.0 + (draws - 0.5) * 2 * self.step_pct
        path = entry_price * np.cumprod(np.concatenate(([1.0], factors)))
        return [float(p) for p in path]
