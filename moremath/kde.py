"""Kernel density estimation of a sample's underlying distribution."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, Protocol

from .normal import NormalDist
from .sample import Sample

_SERIES_MAX_TERMS = 100_000


class _Spread(Protocol):
    def std_dev(self) -> float: ...

    def weight(self) -> float: ...


class _SpreadWithQuantiles(_Spread, Protocol):
    def quantile(self, q: float) -> float: ...


def bandwidth_silverman(data: _Spread) -> float:
    """Return a bandwidth by Silverman's rule of thumb.

    Fast, but sensitive to outliers since it assumes roughly normal data.
    """
    return 1.06 * data.std_dev() * math.pow(data.weight(), -1.0 / 5)


def bandwidth_scott(data: _SpreadWithQuantiles) -> float:
    """Return a bandwidth by Scott's rule.

    Uses the smaller of the standard deviation and IQR/1.349, a robust
    estimate of a Gaussian's standard deviation.
    """
    iqr = data.quantile(0.75) - data.quantile(0.25)
    h_scale = 1.06 * math.pow(data.weight(), -1.0 / 5)
    std_dev = data.std_dev()
    if std_dev < iqr / 1.349:
        return h_scale * std_dev
    return h_scale * (iqr / 1.349)


class KDEKernel(enum.IntEnum):
    """The kernel placed at each sample point."""

    EPANECHNIKOV = 0
    """Smooth kernel with bounded support; minimises asymptotic MISE."""
    GAUSSIAN = 1
    """Gaussian (normal) kernel."""
    DELTA = 2
    """Dirac delta: the CDF steps at each sample; ignores the bandwidth."""


class BoundaryMethod(enum.IntEnum):
    """How the density is corrected for a bounded support."""

    REFLECT = 0
    """Reflect the density estimate at the boundaries."""


class _Kernel(Protocol):
    def pdf_each(self, xs: Iterable[float]) -> list[float]: ...

    def cdf_each(self, xs: Iterable[float]) -> list[float]: ...


@dataclass(frozen=True)
class _EpanechnikovKernel:
    h: float

    def pdf_each(self, xs: Iterable[float]) -> list[float]:
        a = 0.75 / self.h
        inv_hh = 1 / (self.h * self.h)
        return [a * (1 - x * x * inv_hh) if -self.h < x < self.h else 0.0 for x in xs]

    def cdf_each(self, xs: Iterable[float]) -> list[float]:
        inv_h = 1 / self.h
        out = []
        for x in xs:
            if x > self.h:
                out.append(1.0)
            elif x > -self.h:
                u = x * inv_h
                out.append(0.25 * (2 + 3 * u - u * u * u))
            else:
                out.append(0.0)
        return out


class _DeltaKernel:
    def pdf_each(self, xs: Iterable[float]) -> list[float]:
        return [math.inf if x == 0 else 0.0 for x in xs]

    def cdf_each(self, xs: Iterable[float]) -> list[float]:
        return [1.0 if x >= 0 else 0.0 for x in xs]


def _series(term: Callable[[float], float]) -> float:
    """Sum ``term(n)`` for n = 0, 1, 2, ... until the sum stops changing."""
    total = 0.0
    for n in range(_SERIES_MAX_TERMS):
        value = term(float(n))
        new_total = total + value
        if value == 0 or new_total == total:
            return new_total
        total = new_total
    return total


def _bisect(f: Callable[[float], float], low: float, high: float, tolerance: float) -> float:
    """Find a root of ``f`` bracketed by [low, high], accepting discontinuities."""
    f_low = f(low)
    if f_low == 0:
        return low
    f_high = f(high)
    if f_high == 0:
        return high
    if (f_low < 0) == (f_high < 0):
        raise ValueError("root is not bracketed")
    while high - low > tolerance:
        mid = low + (high - low) / 2
        f_mid = f(mid)
        if f_mid == 0:
            return mid
        if (f_mid < 0) == (f_low < 0):
            low, f_low = mid, f_mid
        else:
            high = mid
    return low + (high - low) / 2


@dataclass
class KDE:
    """A kernel density estimate of the distribution behind ``sample``.

    A ``bandwidth`` of 0 is replaced by Scott's rule on first use. If both
    ``boundary_min`` and ``boundary_max`` are 0 the support is unbounded;
    otherwise it is [boundary_min, boundary_max), and either may be infinite.
    """

    sample: Sample = field(default_factory=Sample)
    kernel: KDEKernel = KDEKernel.EPANECHNIKOV
    bandwidth: float = 0.0
    boundary_method: BoundaryMethod = BoundaryMethod.REFLECT
    boundary_min: float = 0.0
    boundary_max: float = 0.0

    def _prepare(self) -> tuple[_Kernel, bool]:
        if self.bandwidth == 0:
            self.bandwidth = bandwidth_scott(self.sample)
        try:
            kind = KDEKernel(self.kernel)
        except ValueError:
            raise ValueError(f"unknown kernel {self.kernel!r}") from None
        kernel: _Kernel
        if kind is KDEKernel.EPANECHNIKOV:
            kernel = _EpanechnikovKernel(self.bandwidth)
        elif kind is KDEKernel.GAUSSIAN:
            kernel = NormalDist(0.0, self.bandwidth)
        else:
            kernel = _DeltaKernel()
        bounded = self.boundary_min != 0 or self.boundary_max != 0
        return kernel, bounded

    def _check_boundary_method(self) -> None:
        try:
            BoundaryMethod(self.boundary_method)
        except ValueError:
            raise ValueError(
                f"unknown boundary correction method {self.boundary_method!r}"
            ) from None

    def _shifted(self, x: float) -> list[float]:
        return [x - xi for xi in self.sample.xs]

    def _averaged(self, each: Callable[[list[float]], list[float]]) -> Callable[[float], float]:
        def y(x: float) -> float:
            ys = Sample(each(self._shifted(x)), self.sample.weights)
            return ys.sum() / ys.weight()

        return y

    def pdf(self, x: float) -> float:
        """Return the estimated probability density at ``x``."""
        kernel, bounded = self._prepare()
        if bounded and (x < self.boundary_min or x >= self.boundary_max):
            return 0.0

        y = self._averaged(kernel.pdf_each)
        if not bounded:
            return y(x)
        self._check_boundary_method()

        lo, hi = self.boundary_min, self.boundary_max
        if math.isinf(hi) and hi > 0:
            return y(x) + y(2 * lo - x)
        if math.isinf(lo) and lo < 0:
            return y(x) + y(2 * hi - x)
        d = 2 * (hi - lo)
        w = 2 * (x - lo)
        return _series(lambda n: y(x + n * d) + y(x + n * d - w)) + _series(
            lambda n: y(x - (n + 1) * d + w) + y(x - (n + 1) * d)
        )

    def cdf(self, x: float) -> float:
        """Return the estimated cumulative probability at ``x``."""
        kernel, bounded = self._prepare()
        if bounded:
            if x < self.boundary_min:
                return 0.0
            if x >= self.boundary_max:
                return 1.0

        y = self._averaged(kernel.cdf_each)
        if not bounded:
            return y(x)
        self._check_boundary_method()

        lo, hi = self.boundary_min, self.boundary_max
        if math.isinf(hi) and hi > 0:
            return y(x) - y(2 * lo - x)
        if math.isinf(lo) and lo < 0:
            return y(x) + (1 - y(2 * hi - x))
        d = 2 * (hi - lo)
        w = 2 * (x - lo)
        return _series(lambda n: y(x + n * d) - y(x + n * d - w)) + _series(
            lambda n: y(x - (n + 1) * d) - y(x - (n + 1) * d - w)
        )

    def bounds(self) -> tuple[float, float]:
        """Return a range holding about 99% of the estimate, widened by 20%."""
        _, bounded = self._prepare()

        low_x, high_x = self.sample.bounds()
        if low_x == high_x:
            low_x -= 1
            high_x += 1

        low_y, high_y, tolerance = 0.005, 0.995, 0.001
        while self.cdf(low_x) > low_y:
            low_x -= high_x - low_x
        while self.cdf(high_x) < high_y:
            high_x += high_x - low_x

        low = _bisect(lambda v: self.cdf(v) - low_y, low_x, high_x, tolerance)
        high = _bisect(lambda v: self.cdf(v) - high_y, low_x, high_x, tolerance)

        width = high - low
        low, high = low - 0.1 * width, high + 0.1 * width

        if bounded:
            low = max(low, self.boundary_min)
            high = min(high, self.boundary_max)
        return low, high