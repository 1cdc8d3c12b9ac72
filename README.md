# moremath

Statistical distributions, histograms, kernel density estimates,
quantile confidence intervals and descriptive statistics with a small,
direct API.

## Installation

```
pip install moremath
```

For running the tests:

```
pip install "moremath[test]"
pytest
```

## What is included

- `moremath.vec`: helpers for float sequences: `linspace`, `logspace`,
  `vmap`, `vectorize`, `sum_of`, `concat`.
- `moremath.sample`: `Sample` (data with optional `weights` and an
  `is_sorted` flag) with `mean`, `geo_mean`, `variance`, `std_dev`,
  `quantile`, `iqr`, `bounds`, `mean_ci`, `sum`, `weight`, `sort` and
  `copy`; plus module-level `mean`, `geo_mean`, `variance`, `std_dev`,
  `bounds` and `mean_ci` for plain sequences. `variance`, `std_dev`
  and `mean_ci` of a weighted `Sample` raise `ValueError`.
- `moremath.stream`: `StreamStats`, constant-space running statistics
  (count, total, min, max, mean, RMS, variance) that can be combined.
- `moremath.normal`: `NormalDist` with `pdf`, `cdf`, `inv_cdf`, `rand`,
  `bounds`, `mean` and `variance`; `STD_NORMAL` is the standard normal.
- `moremath.tdist`: `TDist`, Student's t-distribution with `pdf` and
  `cdf`.
- `moremath.udist`: `UDist`, the exact distribution of the
  Mann-Whitney U statistic, with or without ties, with `pmf` and `cdf`.
- `moremath.quantileci`: `quantile_ci` and `QuantileCIResult`,
  confidence intervals for quantiles via order statistics.
- `moremath.histogram`: `LinearHist` and `LogHist`.
- `moremath.kde`: `KDE` kernel density estimates with Gaussian,
  Epanechnikov and delta kernels (`KDEKernel`), reflection boundary
  correction (`BoundaryMethod`) and the `bandwidth_scott` /
  `bandwidth_silverman` estimators.

## Examples

Descriptive statistics:

```python
from moremath.sample import Sample, mean_ci

s = Sample([15, 20, 35, 40, 50])
s.quantile(0.4)          # 27.0
s.mean()                 # 32.0

mean_ci([-8, 2, 3, 4, 5, 6], 0.95)   # (2.0, -3.35..., 7.35...)
```

Distributions:

```python
from moremath.normal import NormalDist
from moremath.tdist import TDist
from moremath.udist import UDist

NormalDist(2, 5).cdf(2)     # 0.5
TDist(1).cdf(1)             # 0.75...
UDist(3, 3).cdf(2)          # 0.2
```

Quantile confidence intervals:

```python
from moremath.quantileci import quantile_ci
from moremath.sample import Sample

ci = quantile_ci(20, 0.5, 0.95)
median, lo, hi = ci.sample_ci(Sample(list(range(1, 21)), is_sorted=True))
```

Sample sizes up to `approx_threshold` (30 by default) use the exact
binomial distribution; larger ones use its normal approximation.

Histograms:

```python
from moremath.histogram import LinearHist

hist = LinearHist(0, 10, 5)
for x in (-1, 1, 3, 3, 12):
    hist.add(x)
low, bins, high = hist.counts()   # 1, [1, 2, 0, 0, 0], 1
```

Kernel density estimation:

```python
from moremath.kde import KDE, KDEKernel
from moremath.sample import Sample

kde = KDE(Sample([1, 3]), kernel=KDEKernel.GAUSSIAN, bandwidth=2)
kde.pdf(2)      # 0.176...
kde.cdf(2)      # 0.5
low, high = kde.bounds()
```

Running statistics:

```python
from moremath.stream import StreamStats

stats = StreamStats()
for x in (1.0, 2.0, 4.0):
    stats.add(x)
print(stats)
```

## What this package does not do

It has no ready-made hypothesis tests: there is no t-test and no
Mann-Whitney U test function. `TDist` and `UDist` give the
distributions such tests rely on, so a p-value can be computed from a
statistic you work out yourself. There is no command-line tool.