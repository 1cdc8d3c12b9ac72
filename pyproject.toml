[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moremath"
version = "0.1.0"
description = "Statistical distributions, histograms, kernel density estimates, quantile confidence intervals and descriptive statistics"
requires-python = ">=3.10"
keywords = [
    "statistics",
    "normal distribution",
    "t-distribution",
    "mann-whitney",
    "kernel density estimation",
    "quantile",
    "confidence interval",
    "histogram",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["moremath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
