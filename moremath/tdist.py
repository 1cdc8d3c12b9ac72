"""Student's t-distribution."""

from __future__ import annotations

import math
from dataclasses import dataclass

from scipy.special import betainc


@dataclass(frozen=True)
class TDist:
    """A Student's t-distribution with ``v`` degrees of freedom."""

    v: float

    def pdf(self, x: float) -> float:
        """Return the probability density at ``x``."""
        v = self.v
        return (
            math.exp(math.lgamma((v + 1) / 2) - math.lgamma(v / 2))
            / math.sqrt(v * math.pi)
            * math.pow(1 + (x * x) / v, -(v + 1) / 2)
        )

    def cdf(self, x: float) -> float:
        """Return the cumulative probability at ``x``."""
        if x == 0:
            return 0.5
        if x > 0:
            v = self.v
            return 1 - 0.5 * float(betainc(v / 2, 0.5, v / (v + x * x)))
        if x < 0:
            return 1 - self.cdf(-x)
        return math.nan

    def bounds(self) -> tuple[float, float]:
        """Return a nominal plotting range for the distribution."""
        return -4.0, 4.0