import math
import random

import pytest

from moremath.normal import STD_NORMAL, NormalDist
from moremath.vec import linspace


def _approx(v):
    return pytest.approx(v, rel=1e-9, abs=1e-12)


@pytest.mark.parametrize(
    "x, want",
    [
        (-10000, 0.0),
        (-1, 1 / math.sqrt(2 * math.pi) * math.exp(-0.5)),
        (0, 1 / math.sqrt(2 * math.pi)),
        (1, 1 / math.sqrt(2 * math.pi) * math.exp(-0.5)),
        (10000, 0.0),
    ],
)
def test_std_normal_pdf(x, want):
    assert STD_NORMAL.pdf(x) == _approx(want)


@pytest.mark.parametrize("x, want", [(-10000, 0.0), (0, 0.5), (10000, 1.0)])
def test_std_normal_cdf(x, want):
    assert STD_NORMAL.cdf(x) == _approx(want)


@pytest.mark.parametrize("dist", [STD_NORMAL, NormalDist(mu=2, sigma=5)])
def test_inv_cdf_bounds(dist):
    assert dist.inv_cdf(-0.01) == pytest.approx(math.nan, nan_ok=True)
    assert dist.inv_cdf(1.01) == pytest.approx(math.nan, nan_ok=True)
    assert dist.inv_cdf(0) == -math.inf
    assert dist.inv_cdf(1) == math.inf


@pytest.mark.parametrize("dist", [STD_NORMAL, NormalDist(mu=2, sigma=5)])
def test_inv_cdf_round_trip(dist):
    for p in linspace(0, 1, 11)[1:-1]:
        x = dist.inv_cdf(p)
        assert dist.inv_cdf(dist.cdf(x)) == pytest.approx(x, rel=1e-9, abs=1e-9)
        assert dist.cdf(x) == pytest.approx(p, rel=1e-9)


def test_inv_cdf_median_is_mean():
    assert NormalDist(2, 5).inv_cdf(0.5) == pytest.approx(2.0, abs=1e-12)


def test_pdf_each_matches_pdf():
    xs = [-3.0, -0.5, 0.0, 1.25, 4.0]
    for dist in (STD_NORMAL, NormalDist(2, 5)):
        for got, x in zip(dist.pdf_each(xs), xs):
            assert got == _approx(dist.pdf(x))


def test_cdf_each_matches_cdf():
    xs = [-3.0, -0.5, 0.0, 1.25, 4.0]
    dist = NormalDist(-1, 0.5)
    for got, x in zip(dist.cdf_each(xs), xs):
        assert got == _approx(dist.cdf(x))


def test_rand_scales_standard_draw_with_seeded_generator():
    base = STD_NORMAL.rand(random.Random(7))
    scaled = NormalDist(3, 2).rand(random.Random(7))
    assert scaled == pytest.approx(base * 2 + 3)


def test_rand_with_zero_sigma_returns_mean():
    assert NormalDist(5, 0).rand(random.Random(1)) == 5


def test_bounds_mean_variance():
    dist = NormalDist(2, 5)
    assert dist.bounds() == (-13, 17)
    assert dist.mean() == 2
    assert dist.variance() == 25