"""Confidence intervals for sample quantiles based on order statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .normal import NormalDist
from .sample import Sample

QUANTILE_CI_APPROX_THRESHOLD = 30
"""Sample sizes above this use a normal approximation to the binomial."""


def _binomial_pmf(n: int, p: float, k: int) -> float:
    """Return the probability of exactly ``k`` successes in ``n`` trials."""
    if k < 0 or k > n:
        return 0.0
    return math.comb(n, k) * p**k * (1 - p) ** (n - k)


def _normal_cdf(dist: NormalDist, x: float) -> float:
    """CDF of ``dist`` that also accepts a degenerate zero-width distribution."""
    if dist.sigma == 0:
        if x > dist.mu:
            return 1.0
        if x < dist.mu:
            return 0.0
        return math.nan
    return dist.cdf(x)


@dataclass
class QuantileCIResult:
    """The confidence interval of a quantile, as order statistics.

    ``lo_order`` and ``hi_order`` are 1-based indexes into the sorted
    sample; values outside 1..n mean the bound is -inf or +inf. When
    ``ambiguous`` is true the interval shifted up by one order has the
    same confidence.
    """

    quantile: float
    n: int
    confidence: float = 0.0
    lo_order: int = 0
    hi_order: int = 0
    ambiguous: bool = False

    def sample_ci(self, s: Sample) -> tuple[float, float, float]:
        """Return (quantile, lo, hi) of the unweighted sample ``s``."""
        if s.weights is not None:
            raise ValueError("cannot compute quantile CI on a weighted sample")
        if len(s.xs) != self.n:
            raise ValueError("sample size differs from computed quantile CI")

        if not s.is_sorted:
            s = s.copy().sort()

        q = s.quantile(self.quantile)
        lo = -math.inf if self.lo_order < 1 else s.xs[self.lo_order - 1]
        hi = math.inf if self.hi_order - 1 >= len(s.xs) else s.xs[self.hi_order - 1]
        return q, lo, hi


def _exact_interval(n: int, q: float, confidence: float, res: QuantileCIResult) -> tuple[int, int]:
    # Start from the (lower) mode and grow outward, always taking the
    # larger neighbouring probability and preferring the left on ties.
    x = 0 if q == 0 else int(math.ceil((n + 1) * q) - 1)
    accum = _binomial_pmf(n, q, x)
    left, right = x, x + 1
    lp, rp = _binomial_pmf(n, q, left - 1), _binomial_pmf(n, q, right)
    res.ambiguous = rp == accum

    while accum < confidence and (lp > 0 or rp > 0):
        res.ambiguous = lp == rp
        if lp >= rp:
            accum += lp
            left -= 1
            lp = _binomial_pmf(n, q, left - 1)
        else:
            accum += rp
            right += 1
            rp = _binomial_pmf(n, q, right)
    res.confidence = accum
    return left, right


def _approx_interval(n: int, q: float, confidence: float, res: QuantileCIResult) -> tuple[int, int]:
    norm = NormalDist(n * q, math.sqrt(n * q * (1 - q)))
    alpha = (1 - confidence) / 2

    l1 = norm.inv_cdf(alpha)
    r1 = 2 * norm.mu - l1

    # With the continuity correction, binomial point k is the normal band
    # [k-0.5, k+0.5]; round out to those boundaries and recover k.
    left = int(math.floor(math.floor(l1 - 0.5) + 0.5)) + 1
    right = int(math.floor(math.ceil(r1 - 0.5) + 0.5)) + 1

    def band(lo: int, hi: int) -> float:
        return _normal_cdf(norm, hi - 0.5) - _normal_cdf(norm, lo - 0.5)

    res.confidence = band(left, right)
    biased = band(left, right - 1)
    if biased >= confidence and biased < res.confidence:
        res.confidence, res.ambiguous = biased, True
        right -= 1
    if left <= 0 and right >= n + 1:
        # Covers every interval; the normal tails keep the CDF short of 1.
        res.confidence = 1.0
        res.ambiguous = False
    return left, right


def quantile_ci(
    n: int,
    q: float,
    confidence: float,
    approx_threshold: int = QUANTILE_CI_APPROX_THRESHOLD,
) -> QuantileCIResult:
    """Return the confidence interval of the ``q``'th quantile in a sample of size ``n``.

    Sizes up to ``approx_threshold`` use the exact binomial distribution;
    larger sizes use its normal approximation.
    """
    res = QuantileCIResult(quantile=q, n=n)

    if confidence >= 1:
        res.confidence = 1.0
        res.lo_order = 0
        res.hi_order = n + 1
        return res

    if n <= approx_threshold:
        left, right = _exact_interval(n, q, confidence, res)
    else:
        left, right = _approx_interval(n, q, confidence, res)

    res.lo_order = max(left, 0)
    res.hi_order = min(right, n + 1)
    return res