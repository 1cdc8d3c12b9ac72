"""Histograms with linearly and logarithmically spaced bins."""

from __future__ import annotations

import math


def _truncate(v: float) -> int | None:
    """Truncate toward zero; None marks a value below every bin, and +inf a value above."""
    if math.isnan(v) or v == -math.inf:
        return None
    if v == math.inf:
        return -1  # handled by caller as "high"
    return int(v)


class _Counts:
    def __init__(self, nbins: int) -> None:
        if nbins < 0:
            raise ValueError("number of bins must be non-negative")
        self.low = 0
        self.high = 0
        self.bins = [0] * nbins

    def _record(self, scaled: float) -> None:
        if scaled == math.inf:
            self.high += 1
            return
        index = _truncate(scaled)
        if index is None or index < 0:
            self.low += 1
        elif index >= len(self.bins):
            self.high += 1
        else:
            self.bins[index] += 1

    def counts(self) -> tuple[int, list[int], int]:
        """Return (values below range, per-bin counts, values above range)."""
        return self.low, list(self.bins), self.high


class LinearHist(_Counts):
    """A histogram with ``nbins`` equal-width bins spanning [min_value, max_value]."""

    def __init__(self, min_value: float, max_value: float, nbins: int) -> None:
        super().__init__(nbins)
        self.min_value = min_value
        self.max_value = max_value
        self._delta = nbins / (max_value - min_value)

    def add(self, x: float) -> None:
        """Count the value ``x``."""
        self._record(self._delta * (x - self.min_value))

    def counts(self) -> tuple[int, list[int], int]:
        """Return (values below range, per-bin counts, values above range)."""
        return super().counts()

    def bin_to_value(self, bin_index: float) -> float:
        """Return the value at the (possibly fractional) bin position."""
        return self.min_value + bin_index / self._delta


class LogHist(_Counts):
    """A histogram with bins for integral values of ``m * log_base(x)`` up to ``max_value``."""

    def __init__(self, base: int, m: float, max_value: float) -> None:
        m_over_logb = m / math.log(base)
        super().__init__(math.ceil(m_over_logb * math.log(max_value)))
        self.base = base
        self.m = m
        self._m_over_logb = m_over_logb

    def _scaled(self, x: float) -> float:
        if x == 0:
            return -math.inf
        if x < 0 or math.isnan(x):
            return math.nan
        return self._m_over_logb * math.log(x)

    def _bin(self, x: float) -> int | None:
        scaled = self._scaled(x)
        if scaled == math.inf:
            return len(self.bins)
        index = _truncate(scaled)
        return index

    def add(self, x: float) -> None:
        """Count the value ``x``."""
        self._record(self._scaled(x))

    def counts(self) -> tuple[int, list[int], int]:
        """Return (values below range, per-bin counts, values above range)."""
        return super().counts()

    def bin_to_value(self, bin_index: float) -> float:
        """Return the value at the (possibly fractional) bin position."""
        return math.pow(self.base, bin_index / self.m)

    def at(self, x: float) -> float:
        """Return the count of the bin holding ``x``, or 0 outside the bins."""
        index = self._bin(x)
        if index is None or index < 0 or index >= len(self.bins):
            return 0.0
        return float(self.bins[index])

    def bounds(self) -> tuple[float, float]:
        """Return the value range spanned by the occupied bins."""
        low_bin = 0
        if self.low == 0:
            low_bin = next((i for i, c in enumerate(self.bins) if c > 0), 0)
        high_bin = len(self.bins)
        if self.high == 0:
            high_bin = next(
                (i + 1 for i in reversed(range(len(self.bins))) if self.bins[i] > 0),
                len(self.bins),
            )
        return self.bin_to_value(low_bin), self.bin_to_value(high_bin)