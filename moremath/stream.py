"""Running statistics over a stream of values in constant space."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal


def _format_g(x: float) -> str:
    """Format a float like the shortest-precision ``%g`` verb."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    sign, digit_tuple, exponent = Decimal(repr(x)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    exp10 = len(digits) - 1 + exponent
    prefix = "-" if sign else ""
    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        esign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{esign}{abs(exp10):02d}"
    dp = exp10 + 1
    if dp <= 0:
        body = "0." + "0" * (-dp) + digits
    elif dp >= len(digits):
        body = digits + "0" * (dp - len(digits))
    else:
        body = digits[:dp] + "." + digits[dp:]
    return prefix + body


@dataclass
class StreamStats:
    """Count, total, extremes, mean, RMS and variance of a stream of values."""

    count: int = 0
    total: float = 0.0
    min_value: float = 0.0
    max_value: float = 0.0
    _mean: float = field(default=0.0, init=False, repr=False)
    _mean_of_squares: float = field(default=0.0, init=False, repr=False)
    _vm2: float = field(default=0.0, init=False, repr=False)

    def add(self, x: float) -> None:
        """Update the statistics with the value ``x``."""
        self.total += x
        if self.count == 0:
            self.min_value = self.max_value = x
        else:
            if x < self.min_value:
                self.min_value = x
            if x > self.max_value:
                self.max_value = x
        self.count += 1

        delta = x - self._mean
        self._mean += delta / self.count
        self._mean_of_squares += (x * x - self._mean_of_squares) / self.count
        self._vm2 += delta * (x - self._mean)

    def weight(self) -> float:
        """Return the number of values seen, as a float."""
        return float(self.count)

    def mean(self) -> float:
        """Return the running mean."""
        return self._mean

    def variance(self) -> float:
        """Return the sample variance (nan after exactly one value)."""
        if self.count == 0:
            return 0.0
        if self.count == 1:
            return math.nan
        return self._vm2 / (self.count - 1)

    def std_dev(self) -> float:
        """Return the sample standard deviation."""
        return math.sqrt(self.variance())

    def rms(self) -> float:
        """Return the root mean square of the values."""
        return math.sqrt(self._mean_of_squares)

    def combine(self, other: "StreamStats") -> None:
        """Update these statistics as if every value added to ``other`` were added here."""
        count = self.count + other.count
        if count == 0:
            return

        delta = other._mean - self._mean
        combined_mean = self._mean + delta * other.count / count
        combined_vm2 = (
            self._vm2 + other._vm2 + delta * delta * self.count * other.count / count
        )

        self.total += other.total
        if other.min_value < self.min_value:
            self.min_value = other.min_value
        if other.max_value > self.max_value:
            self.max_value = other.max_value
        self._mean_of_squares += (
            (other._mean_of_squares - self._mean_of_squares) * other.count / count
        )
        self._mean = combined_mean
        self._vm2 = combined_vm2
        self.count = count

    def __str__(self) -> str:
        return (
            f"Count={self.count} Total={_format_g(self.total)} "
            f"Min={_format_g(self.min_value)} Mean={_format_g(self.mean())} "
            f"RMS={_format_g(self.rms())} Max={_format_g(self.max_value)} "
            f"StdDev={_format_g(self.std_dev())}"
        )