import math
import statistics

import pytest

from moremath.sample import (
    Sample,
    bounds,
    geo_mean,
    mean,
    mean_ci,
    std_dev,
    variance,
)

NAN_PAIR = pytest.approx((math.nan, math.nan), nan_ok=True)


@pytest.mark.parametrize(
    "q, expected",
    [
        (-1, 15),
        (0, 15),
        (0.05, 15),
        (0.30, 19.666666666666666),
        (0.40, 27),
        (0.95, 50),
        (1, 50),
        (2, 50),
    ],
)
def test_sample_quantile(q, expected):
    s = Sample([15, 20, 35, 40, 50])
    assert s.quantile(q) == pytest.approx(expected)


@pytest.mark.parametrize(
    "xs, conf, want",
    [
        ([-8, 2, 3, 4, 5, 6], 0, (2, 2, 2)),
        ([-8, 2, 3, 4, 5, 6], 1, (2, -math.inf, math.inf)),
        ([1], 0, (1, 1, 1)),
        ([1], 0.95, (1, -math.inf, math.inf)),
        ([1], 1, (1, -math.inf, math.inf)),
        ([], 0, (math.nan, math.nan, math.nan)),
        ([], 0.95, (math.nan, math.nan, math.nan)),
        ([], 1, (math.nan, math.nan, math.nan)),
    ],
)
def test_mean_ci_exact_cases(xs, conf, want):
    got = mean_ci(xs, conf)
    assert tuple(got) == pytest.approx(want, nan_ok=True)


@pytest.mark.parametrize(
    "conf, lo, hi",
    [
        (0.95, -3.351092806089359, 7.351092806089359),
        (0.99, -6.39357495385287, 10.39357495385287),
    ],
)
def test_mean_ci_t_interval(conf, lo, hi):
    m, got_lo, got_hi = mean_ci([-8, 2, 3, 4, 5, 6], conf)
    assert m == 2
    assert got_lo == pytest.approx(lo, rel=1e-9)
    assert got_hi == pytest.approx(hi, rel=1e-9)


def test_sample_mean_ci_matches_function():
    s = Sample([-8, 2, 3, 4, 5, 6])
    assert s.mean_ci(0.95) == mean_ci(s.xs, 0.95)


def test_weighted_mean_ci_raises():
    with pytest.raises(ValueError):
        Sample([1.0, 2.0], [1.0, 1.0]).mean_ci(0.95)


def test_bounds_function():
    assert bounds([3.0, -1.0, 7.0]) == (-1.0, 7.0)
    assert tuple(bounds([])) == NAN_PAIR


def test_weighted_bounds_ignore_zero_weights():
    assert Sample([1.0, 5.0, 3.0], [0.0, 1.0, 1.0]).bounds() == (3.0, 5.0)
    assert Sample([1.0, 2.0, 3.0], [0.0, 1.0, 0.0], is_sorted=True).bounds() == (2.0, 2.0)


@pytest.mark.parametrize("is_sorted", [False, True])
def test_weighted_bounds_all_zero(is_sorted):
    s = Sample([1.0, 2.0], [0.0, 0.0], is_sorted=is_sorted)
    assert tuple(s.bounds()) == NAN_PAIR


def test_sorted_bounds_uses_ends():
    assert Sample([1.0, 4.0, 9.0], is_sorted=True).bounds() == (1.0, 9.0)


def test_sum_and_weight():
    assert Sample([1.0, 2.0, 3.0]).sum() == pytest.approx(6.0)
    assert Sample([1.0, 2.0, 3.0]).weight() == 3.0
    weighted = Sample([1.0, 2.0], [2.0, 3.0])
    assert weighted.sum() == pytest.approx(8.0)
    assert weighted.weight() == pytest.approx(5.0)


def test_mean_matches_statistics():
    xs = [2.5, 3.0, 10.0, -4.0, 7.25]
    assert mean(xs) == pytest.approx(statistics.fmean(xs))
    assert mean([]) == pytest.approx(math.nan, nan_ok=True)


def test_weighted_mean_equals_expanded_mean():
    s = Sample([1.0, 2.0, 5.0], [1.0, 3.0, 2.0])
    assert s.mean() == pytest.approx(mean([1.0, 2.0, 2.0, 2.0, 5.0, 5.0]))


def test_geo_mean():
    assert geo_mean([1.0, 4.0, 16.0]) == pytest.approx(4.0)
    assert geo_mean([1.0, 0.0, 2.0]) == pytest.approx(math.nan, nan_ok=True)
    assert geo_mean([]) == pytest.approx(math.nan, nan_ok=True)


def test_weighted_geo_mean_equals_expanded():
    s = Sample([2.0, 8.0], [1.0, 2.0])
    assert s.geo_mean() == pytest.approx(geo_mean([2.0, 8.0, 8.0]))


def test_variance_matches_statistics():
    xs = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    assert variance(xs) == pytest.approx(statistics.variance(xs))
    assert std_dev(xs) == pytest.approx(statistics.stdev(xs))
    assert Sample(xs).variance() == pytest.approx(statistics.variance(xs))


def test_variance_small_samples():
    assert variance([3.0]) == 0.0
    assert variance([]) == pytest.approx(math.nan, nan_ok=True)


def test_weighted_variance_and_std_dev_raise():
    s = Sample([1.0, 2.0], [1.0, 2.0])
    with pytest.raises(ValueError):
        s.variance()
    with pytest.raises(ValueError):
        s.std_dev()


def test_weighted_quantile():
    s = Sample([3.0, 1.0, 2.0], [2.0, 1.0, 1.0])
    assert s.quantile(0.5) == 3.0
    assert s.quantile(0.1) == 1.0


def test_quantile_does_not_reorder_unsorted_input():
    s = Sample([50.0, 15.0, 40.0, 20.0, 35.0])
    assert s.quantile(0.40) == pytest.approx(27)
    assert s.xs == [50.0, 15.0, 40.0, 20.0, 35.0]
    assert not s.is_sorted


def test_quantile_empty_is_nan():
    assert Sample([]).quantile(0.5) == pytest.approx(math.nan, nan_ok=True)


def test_iqr_is_quartile_difference():
    s = Sample([40.0, 15.0, 50.0, 35.0, 20.0])
    sorted_s = s.copy().sort()
    assert s.iqr() == pytest.approx(sorted_s.quantile(0.75) - sorted_s.quantile(0.25))


def test_sort_keeps_weights_aligned():
    s = Sample([3.0, 1.0, 2.0], [30.0, 10.0, 20.0])
    assert s.sort() is s
    assert s.xs == [1.0, 2.0, 3.0]
    assert s.weights == [10.0, 20.0, 30.0]
    assert s.is_sorted


def test_copy_is_independent():
    s = Sample([3.0, 1.0], [1.0, 2.0])
    c = s.copy()
    c.sort()
    assert s.xs == [3.0, 1.0]
    assert s.weights == [1.0, 2.0]
    assert c.xs == [1.0, 3.0]
    assert c.weights == [2.0, 1.0]


def test_of_builds_unweighted_sample():
    s = Sample.of(x for x in (1.0, 2.0))
    assert s.xs == [1.0, 2.0]
    assert s.weights is None