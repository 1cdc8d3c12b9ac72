import math

import pytest

from moremath.tdist import TDist

# Expected values at x = -10, -9, ..., 9, in that order.
XS = list(range(-10, 10))

PDF_ONE_DOF = [
    0.0031515830315226806, 0.0038818278802901312, 0.0048970751720583188,
    0.0063661977236758151, 0.0086029698968592104, 0.012242687930145799,
    0.018724110951987692, 0.031830988618379075, 0.063661977236758149,
    0.15915494309189537, 0.31830988618379075, 0.15915494309189537,
    0.063661977236758149, 0.031830988618379075, 0.018724110951987692,
    0.012242687930145799, 0.0086029698968592104, 0.0063661977236758151,
    0.0048970751720583188, 0.0038818278802901312,
]

PDF_FIVE_DOF = [
    4.0989816415343313e-05, 7.4601664362590413e-05, 0.00014444303269563934,
    0.00030134402928803911, 0.00068848154013743002, 0.0017574383788078445,
    0.0051237270519179133, 0.017292578800222964, 0.065090310326216455,
    0.21967979735098059, 0.3796066898224944, 0.21967979735098059,
    0.065090310326216455, 0.017292578800222964, 0.0051237270519179133,
    0.0017574383788078445, 0.00068848154013743002, 0.00030134402928803911,
    0.00014444303269563934, 7.4601664362590413e-05,
]

CDF_ONE_DOF = [
    0.03172551743055356, 0.035223287477277272, 0.039583424160565539,
    0.045167235300866547, 0.052568456711253424, 0.06283295818900117,
    0.077979130377369324, 0.10241638234956672, 0.14758361765043321,
    0.24999999999999978, 0.5, 0.75000000000000022,
    0.85241638234956674, 0.89758361765043326, 0.92202086962263075,
    0.93716704181099886, 0.94743154328874657, 0.95483276469913347,
    0.96041657583943452, 0.96477671252272279,
]

CDF_FIVE_DOF = [
    8.5473787871481787e-05, 0.00014133998712194845, 0.00024645333028622187,
    0.00045837375719920225, 0.00092306914479700695, 0.0020523579900266612,
    0.0051617077404157259, 0.015049623948731284, 0.05096973941492914,
    0.18160873382456127, 0.5, 0.81839126617543867,
    0.9490302605850709, 0.98495037605126878, 0.99483829225958431,
    0.99794764200997332, 0.99907693085520299, 0.99954162624280074,
    0.99975354666971372, 0.9998586600128780,
]


def _cases(dof, values):
    return [(dof, x, want) for x, want in zip(XS, values)]


@pytest.mark.parametrize(
    "dof, x, want", _cases(1, PDF_ONE_DOF) + _cases(5, PDF_FIVE_DOF)
)
def test_pdf(dof, x, want):
    assert TDist(dof).pdf(x) == pytest.approx(want, rel=1e-8)


@pytest.mark.parametrize(
    "dof, x, want", _cases(1, CDF_ONE_DOF) + _cases(5, CDF_FIVE_DOF)
)
def test_cdf(dof, x, want):
    assert TDist(dof).cdf(x) == pytest.approx(want, rel=1e-8)


def test_cdf_of_nan_is_nan():
    assert TDist(3).cdf(math.nan) == pytest.approx(math.nan, nan_ok=True)


def test_cdf_symmetry():
    dist = TDist(2.5)
    for x in (0.3, 1.7, 4.2):
        assert dist.cdf(x) + dist.cdf(-x) == pytest.approx(1.0)


def test_bounds():
    assert TDist(5).bounds() == (-4, 4)