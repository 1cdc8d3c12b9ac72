"""Helpers for vectors of floats."""

from __future__ import annotations

import math
from itertools import chain
from typing import Callable, Iterable, Sequence


def vectorize(f: Callable[[float], float]) -> Callable[[Iterable[float]], list[float]]:
    """Return a function that applies ``f`` to every element of a vector."""

    def apply(xs: Iterable[float]) -> list[float]:
        return vmap(f, xs)

    return apply


def vmap(f: Callable[[float], float], xs: Iterable[float]) -> list[float]:
    """Return ``f(x)`` for each ``x`` in ``xs``."""
    return [f(x) for x in xs]


def linspace(lo: float, hi: float, num: int) -> list[float]:
    """Return ``num`` evenly spaced values from ``lo`` to ``hi`` inclusive.

    With ``num == 1`` the result is ``[lo]``.
    """
    if num < 0:
        raise ValueError("num must be non-negative")
    if num == 1:
        return [lo]
    return [lo + i * (hi - lo) / (num - 1) for i in range(num)]


def logspace(lo: float, hi: float, num: int, base: float) -> list[float]:
    """Return ``num`` values evenly spaced on a log scale from base**lo to base**hi."""
    return [math.pow(base, x) for x in linspace(lo, hi, num)]


def sum_of(xs: Iterable[float]) -> float:
    """Return the sum of ``xs`` as a float."""
    total = 0.0
    for x in xs:
        total += x
    return total


def concat(*args: Sequence[float]) -> list[float]:
    """Return the concatenation of the given vectors without modifying them."""
    return list(chain.from_iterable(args))