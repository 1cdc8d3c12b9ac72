"""The distribution of the Mann-Whitney U statistic, with or without ties."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


def _choose(n: int, k: int) -> float:
    """Return the binomial coefficient n over k as a float, 0 outside the valid range."""
    if k < 0 or n < 0 or k > n:
        return 0.0
    return float(math.comb(n, k))


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _two_u_min(n1: int, t: Sequence[int], a: Sequence[int]) -> int:
    two_u = -n1 * n1
    remaining = n1
    for k, tk in enumerate(t, start=1):
        take = min(remaining, tk)
        two_u += take * a[k]
        remaining -= take
    return two_u


def _two_u_max(n1: int, t: Sequence[int], a: Sequence[int]) -> int:
    two_u = -n1 * n1
    remaining = n1
    for k in range(len(t), 0, -1):
        take = min(remaining, t[k - 1])
        two_u += take * a[k]
        remaining -= take
    return two_u


def _make_umemo(two_u: int, n1: int, t: Sequence[int]) -> list[dict[tuple[int, int], float]]:
    """Build the table of cumulative permutation counts for a tie vector.

    Entry ``memo[k][(n1, 2U)]`` is the number of arrangements of a first
    sample of size ``n1`` among the ranks ``t[:k]`` whose U statistic is at
    most ``U`` (Cheung and Klotz, 1997).
    """
    K = len(t)
    if K < 2:
        raise ValueError("tie vector must have at least two ranks")

    a = [0] * (K + 1)
    a[1] = t[0]
    for k in range(2, K + 1):
        a[k] = a[k - 1] + t[k - 2] + t[k - 1]

    memo: list[dict[tuple[int, int], float]] = [{} for _ in range(K + 1)]
    memo[K] = {(n1, two_u): 0.0}

    # Drive the recurrence downward to find every needed (k, n1, 2U).
    tsum = sum(t)
    for k in range(K - 1, 1, -1):
        tsum -= t[k]
        prefix = t[:k]
        level: dict[tuple[int, int], float] = {}
        for n1_next, two_u_next in memo[k + 1]:
            for rk in range(max(0, n1_next - tsum), min(n1_next, t[k]) + 1):
                two_u_k = two_u_next - rk * (a[k + 1] - 2 * n1_next + rk)
                n1_k = n1_next - rk
                if _two_u_min(n1_k, prefix, a) <= two_u_k <= _two_u_max(n1_k, prefix, a):
                    level[(n1_k, two_u_k)] = 0.0
        memo[k] = level

    # Base case k == 2.
    n_2 = t[0] + t[1]
    for key in list(memo[2]):
        n1_k, two_u_k = key
        high = _trunc_div(two_u_k - n1_k * (t[0] - n1_k), n_2)
        memo[2][key] = sum(
            _choose(t[0], n1_k - r2) * _choose(t[1], r2)
            for r2 in range(max(0, n1_k - t[0]), high + 1)
        )

    # Unwind the recurrence upward.
    tsum = t[0]
    for k in range(3, K + 1):
        tsum += t[k - 2]
        prev = memo[k - 1]
        prefix = t[: k - 1]
        for key in list(memo[k]):
            n1_k, two_u_k = key
            total = 0.0
            for rk in range(max(0, n1_k - tsum), min(n1_k, t[k - 1]) + 1):
                two_u_prev = two_u_k - rk * (a[k] - 2 * n1_k + rk)
                n1_prev = n1_k - rk
                count = prev.get((n1_prev, two_u_prev))
                if count is None:
                    if _two_u_max(n1_prev, prefix, a) < two_u_prev:
                        count = _choose(tsum, n1_prev)
                    else:
                        count = 0.0
                total += count * _choose(t[k - 1], rk)
            memo[k][key] = total

    return memo


@dataclass(frozen=True)
class UDist:
    """Distribution of the Mann-Whitney U statistic for samples of sizes n1 and n2.

    ``t`` counts the tied values at each rank; ``None`` means no ties. When
    given, its sum must equal ``n1 + n2``.
    """

    n1: int
    n2: int
    t: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        if self.t is not None:
            object.__setattr__(self, "t", tuple(self.t))

    def _has_ties(self) -> bool:
        return any(count > 1 for count in self.t or ())

    def _p(self, u: int) -> list[float]:
        """Mann and Whitney's p_{n1,n2}(U') for U' from 0 through ``u``."""
        n_small, m_large = sorted((self.n1, self.n2))
        memo = [[0.0] * (u + 1) for _ in range(n_small + 1)]

        for m in range(m_large + 1):
            memo[0][0] = 1.0
            for n in range(1, min(n_small, m) + 1):
                lp = memo[n - 1]
                rp = memo[n] if n <= m - 1 else memo[m - 1]
                out = memo[n]
                nplusm = float(n + m)
                for u1 in range(min(n * m, u), -1, -1):
                    left = n * lp[u1 - m] if u1 - m >= 0 else 0.0
                    out[u1] = (left + m * rp[u1]) / nplusm
        return memo[n_small]

    def _tied_cdf_count(self, two_u: int) -> float:
        memo = _make_umemo(two_u, self.n1, self.t)
        return memo[len(self.t)][(self.n1, two_u)]

    def pmf(self, u: float) -> float:
        """Return the probability that the statistic equals ``u``."""
        if u < 0 or u >= 0.5 + self.n1 * self.n2:
            return 0.0
        if self._has_ties():
            two_u = int(2 * u)
            below = self._tied_cdf_count(two_u - 1)
            upto = self._tied_cdf_count(two_u)
            return (upto - below) / _choose(self.n1 + self.n2, self.n1)
        ui = math.floor(u)
        return self._p(ui)[ui]

    def cdf(self, u: float) -> float:
        """Return the probability that the statistic is at most ``u``."""
        if u < 0:
            return 0.0
        if u >= self.n1 * self.n2:
            return 1.0
        if self._has_ties():
            return self._tied_cdf_count(int(2 * u)) / _choose(self.n1 + self.n2, self.n1)

        ui = math.floor(u)
        # Symmetric about n1*n2/2: sum whichever tail is smaller.
        flip = ui >= (self.n1 * self.n2 + 1) // 2
        if flip:
            ui = self.n1 * self.n2 - ui - 1
        p = sum(self._p(ui)[: ui + 1])
        return 1 - p if flip else p

    def step(self) -> float:
        """Return the spacing between possible values of the statistic."""
        return 0.5

    def bounds(self) -> tuple[float, float]:
        """Return the range of the statistic."""
        return 0.0, float(self.n1 * self.n2)