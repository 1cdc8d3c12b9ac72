"""The normal (Gaussian) distribution."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterable

_INV_SQRT_2PI = 0.39894228040143267793994605993438186847585863116493465766592583

# Coefficients of Acklam's rational approximation to the inverse normal CDF.
_A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
_B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)
_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
)
_P_LOW = 0.02425
_P_HIGH = 1 - _P_LOW


def _tail(q: float) -> float:
    c1, c2, c3, c4, c5, c6 = _C
    d1, d2, d3, d4 = _D
    return (((((c1 * q + c2) * q + c3) * q + c4) * q + c5) * q + c6) / (
        (((d1 * q + d2) * q + d3) * q + d4) * q + 1
    )


@dataclass(frozen=True)
class NormalDist:
    """A normal distribution with mean ``mu`` and standard deviation ``sigma``."""

    mu: float = 0.0
    sigma: float = 1.0

    def pdf(self, x: float) -> float:
        """Return the probability density at ``x``."""
        z = x - self.mu
        return math.exp(-z * z / (2 * self.sigma * self.sigma)) * _INV_SQRT_2PI / self.sigma

    def pdf_each(self, xs: Iterable[float]) -> list[float]:
        """Return the density at each value of ``xs``."""
        if self.mu == 0 and self.sigma == 1:
            return [math.exp(-x * x / 2) * _INV_SQRT_2PI for x in xs]
        a = -1 / (2 * self.sigma * self.sigma)
        b = _INV_SQRT_2PI / self.sigma
        return [math.exp((x - self.mu) ** 2 * a) * b for x in xs]

    def cdf(self, x: float) -> float:
        """Return the cumulative probability at ``x``."""
        return math.erfc(-(x - self.mu) / (self.sigma * math.sqrt(2))) / 2

    def cdf_each(self, xs: Iterable[float]) -> list[float]:
        """Return the cumulative probability at each value of ``xs``."""
        a = 1 / (self.sigma * math.sqrt(2))
        return [math.erfc(-(x - self.mu) * a) / 2 for x in xs]

    def inv_cdf(self, p: float) -> float:
        """Return the value at which the CDF equals ``p``.

        Gives nan outside [0, 1] and -inf/+inf at 0 and 1.
        """
        if p < 0 or p > 1:
            return math.nan
        if p == 0:
            return -math.inf
        if p == 1:
            return math.inf

        if p < _P_LOW:
            x = _tail(math.sqrt(-2 * math.log(p)))
        elif _P_HIGH < p:
            x = -_tail(math.sqrt(-2 * math.log(1 - p)))
        else:
            a1, a2, a3, a4, a5, a6 = _A
            b1, b2, b3, b4, b5 = _B
            q = p - 0.5
            r = q * q
            x = (
                (((((a1 * r + a2) * r + a3) * r + a4) * r + a5) * r + a6)
                * q
                / (((((b1 * r + b2) * r + b3) * r + b4) * r + b5) * r + 1)
            )

        # One step of Halley's method refines the approximation.
        e = 0.5 * math.erfc(-x / math.sqrt(2)) - p
        u = e * math.sqrt(2 * math.pi) * math.exp(x * x / 2)
        x = x - u / (1 + x * u / 2)

        return x * self.sigma + self.mu

    def rand(self, rng: random.Random | None = None) -> float:
        """Draw a random value, using ``rng`` or the module-level generator."""
        source = random if rng is None else rng
        return source.gauss(0.0, 1.0) * self.sigma + self.mu

    def bounds(self) -> tuple[float, float]:
        """Return a range covering three standard deviations either side of the mean."""
        return self.mu - 3 * self.sigma, self.mu + 3 * self.sigma

    def mean(self) -> float:
        """Return the mean of the distribution."""
        return self.mu

    def variance(self) -> float:
        """Return the variance of the distribution."""
        return self.sigma * self.sigma


STD_NORMAL = NormalDist(0.0, 1.0)