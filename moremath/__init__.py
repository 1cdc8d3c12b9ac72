"""Statistical distributions, histograms, kernel density estimates and descriptive statistics."""

__version__ = "0.1.0"

__all__ = [
    "vec",
    "sample",
    "stream",
    "normal",
    "tdist",
    "histogram",
    "udist",
    "quantileci",
    "kde",
]