"""Possibly weighted samples and descriptive statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from scipy.stats import t as _student_t

from .vec import sum_of

_NAN = math.nan
_INF = math.inf


def _log(x: float) -> float:
    if x == 0:
        return -_INF
    if x < 0 or math.isnan(x):
        return _NAN
    return math.log(x)


def bounds(xs: Sequence[float]) -> tuple[float, float]:
    """Return the minimum and maximum of ``xs``, or (nan, nan) if empty."""
    if len(xs) == 0:
        return _NAN, _NAN
    return min(xs), max(xs)


def mean(xs: Sequence[float]) -> float:
    """Return the arithmetic mean of ``xs``, or nan if empty."""
    if len(xs) == 0:
        return _NAN
    m = 0.0
    for i, x in enumerate(xs, start=1):
        m += (x - m) / i
    return m


def mean_ci(xs: Sequence[float], confidence: float) -> tuple[float, float, float]:
    """Return the mean of ``xs`` and its confidence interval (mean, lo, hi).

    The interval is based on the sample standard deviation and Student's
    t-distribution.
    """
    xs = list(xs)
    m = mean(xs)
    if confidence <= 0:
        width = 0.0
    elif confidence >= 1 or len(xs) <= 1:
        width = _INF
    else:
        s = std_dev(xs)
        alpha = (1 - confidence) / 2
        t = -float(_student_t.ppf(alpha, len(xs) - 1))
        width = t * s / math.sqrt(len(xs))
    return m, m - width, m + width


def geo_mean(xs: Sequence[float]) -> float:
    """Return the geometric mean of ``xs``; nan if empty or any value is not positive."""
    if len(xs) == 0:
        return _NAN
    m = 0.0
    for i, x in enumerate(xs, start=1):
        if x <= 0:
            return _NAN
        m += (math.log(x) - m) / i
    return math.exp(m)


def variance(xs: Sequence[float]) -> float:
    """Return the sample variance of ``xs`` using Welford's algorithm."""
    if len(xs) == 0:
        return _NAN
    if len(xs) == 1:
        return 0.0
    m, m2 = 0.0, 0.0
    for n, x in enumerate(xs, start=1):
        delta = x - m
        m += delta / n
        m2 += delta * (x - m)
    return m2 / (len(xs) - 1)


def std_dev(xs: Sequence[float]) -> float:
    """Return the sample standard deviation of ``xs``."""
    return math.sqrt(variance(xs))


def _is_ascending(xs: Sequence[float]) -> bool:
    return all(not (b < a) for a, b in zip(xs, xs[1:]))


@dataclass
class Sample:
    """A collection of data points, optionally weighted.

    ``weights`` of ``None`` gives every point weight 1. ``is_sorted``
    records that ``xs`` is in ascending order.
    """

    xs: list[float] = field(default_factory=list)
    weights: list[float] | None = None
    is_sorted: bool = False

    def _require_unweighted(self, what: str) -> None:
        if self.xs and self.weights is not None:
            raise ValueError(f"weighted {what} is not supported")

    def bounds(self) -> tuple[float, float]:
        """Return (min, max), ignoring zero-weighted points."""
        if not self.xs or (not self.is_sorted and self.weights is None):
            return bounds(self.xs)
        if self.is_sorted:
            if self.weights is None:
                return self.xs[0], self.xs[-1]
            kept = [x for x, w in zip(self.xs, self.weights) if w != 0]
            if not kept:
                return _NAN, _NAN
            return kept[0], kept[-1]
        lo, hi = _INF, -_INF
        for x, w in zip(self.xs, self.weights):
            if w == 0:
                continue
            if x < lo:
                lo = x
            if x > hi:
                hi = x
        if math.isinf(lo):
            return _NAN, _NAN
        return lo, hi

    def sum(self) -> float:
        """Return the (possibly weighted) sum of the sample."""
        if self.weights is None:
            return sum_of(self.xs)
        return sum_of(x * w for x, w in zip(self.xs, self.weights))

    def weight(self) -> float:
        """Return the total weight of the sample."""
        if self.weights is None:
            return float(len(self.xs))
        return sum_of(self.weights)

    def mean(self) -> float:
        """Return the (possibly weighted) arithmetic mean."""
        if not self.xs or self.weights is None:
            return mean(self.xs)
        m, wsum = 0.0, 0.0
        for x, w in zip(self.xs, self.weights):
            wsum += w
            m = _NAN if wsum == 0 else m + (x - m) * w / wsum
        return m

    def mean_ci(self, confidence: float) -> tuple[float, float, float]:
        """Return the mean and its confidence interval (mean, lo, hi)."""
        self._require_unweighted("mean confidence interval")
        return mean_ci(self.xs, confidence)

    def geo_mean(self) -> float:
        """Return the (possibly weighted) geometric mean."""
        if not self.xs or self.weights is None:
            return geo_mean(self.xs)
        m, wsum = 0.0, 0.0
        for x, w in zip(self.xs, self.weights):
            wsum += w
            m = _NAN if wsum == 0 else m + (_log(x) - m) * w / wsum
        return math.exp(m)

    def variance(self) -> float:
        """Return the sample variance of an unweighted sample."""
        self._require_unweighted("variance")
        return variance(self.xs)

    def std_dev(self) -> float:
        """Return the sample standard deviation of an unweighted sample."""
        self._require_unweighted("standard deviation")
        return std_dev(self.xs)

    def quantile(self, q: float) -> float:
        """Return the q'th quantile (Hyndman and Fan method R8).

        ``q`` is clamped to [0, 1]; an empty sample gives nan.
        """
        if not self.xs:
            return _NAN
        if q <= 0:
            return self.bounds()[0]
        if q >= 1:
            return self.bounds()[1]

        s = self if self.is_sorted else self.copy().sort()
        if s.weights is None:
            n = len(s.xs)
            frac, whole = math.modf(1 / 3.0 + q * (n + 1 / 3.0))
            k = int(whole)
            if k <= 0:
                return s.xs[0]
            if k >= n:
                return s.xs[-1]
            return s.xs[k - 1] + frac * (s.xs[k] - s.xs[k - 1])

        target = s.weight() * q
        for x, w in zip(s.xs, s.weights):
            target -= w
            if target < 0:
                return x
        return s.xs[-1]

    def iqr(self) -> float:
        """Return the interquartile range."""
        s = self if self.is_sorted else self.copy().sort()
        return s.quantile(0.75) - s.quantile(0.25)

    def sort(self) -> "Sample":
        """Sort the sample in place, keeping weights aligned, and return it."""
        if self.is_sorted or _is_ascending(self.xs):
            pass
        elif self.weights is None:
            self.xs.sort()
        else:
            pairs = sorted(zip(self.xs, self.weights), key=lambda p: p[0])
            self.xs[:] = [x for x, _ in pairs]
            self.weights[:] = [w for _, w in pairs]
        self.is_sorted = True
        return self

    def copy(self) -> "Sample":
        """Return a copy that shares no data with this sample."""
        weights = None if self.weights is None else list(self.weights)
        return Sample(list(self.xs), weights, self.is_sorted)

    @classmethod
    def of(cls, xs: Iterable[float]) -> "Sample":
        """Build an unweighted sample from any iterable."""
        return cls(list(xs))