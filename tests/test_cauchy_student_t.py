import math

import numpy as onp
import pytest

from ranvar.exceptions import InvalidParameterError
from ranvar.variates.cauchy import cauchy_sample
from ranvar.variates.student_t import student_t_sample


def test_cauchy_ratio(scripted):
    src = scripted(normal=[1.0, 4.0])
    assert cauchy_sample(src) == 0.25
    assert src.exhausted


def test_cauchy_zero_denominator(scripted):
    assert cauchy_sample(scripted(normal=[1.0, 0.0])) == math.inf
    assert cauchy_sample(scripted(normal=[-1.0, 0.0])) == -math.inf
    assert math.isnan(cauchy_sample(scripted(normal=[0.0, 0.0])))


def test_cauchy_median(rng):
    x = onp.array([cauchy_sample(rng) for _ in range(20000)])
    # median of n standard Cauchy draws has standard deviation ~ pi / (2 sqrt(n))
    assert abs(onp.median(x)) < 0.06
    # quartiles of the standard Cauchy are -1 and 1
    assert onp.quantile(x, 0.75) == pytest.approx(1.0, abs=0.1)


def test_student_t_exact(scripted):
    # df = 2 draws Gamma(1) as a single exponential
    src = scripted(normal=[0.5], exponential=[0.25])
    assert student_t_sample(src, 2.0) == 1.0
    assert src.exhausted

    # df = 4: normal first, then Gamma(2) through the Marsaglia-Tsang squeeze
    src = scripted(normal=[0.6, 0.0], uniform=[0.5])
    expected = math.sqrt(2.0) * 0.6 / math.sqrt(2.0 - 1.0 / 3.0)
    assert student_t_sample(src, 4.0) == pytest.approx(expected, rel=1e-15)
    assert src.exhausted


def test_student_t_variance(rng):
    df = 10.0
    x = onp.array([student_t_sample(rng, df) for _ in range(40000)])
    assert abs(x.mean()) < 0.03
    assert x.var() == pytest.approx(df / (df - 2.0), abs=0.08)


def test_student_t_small_df_no_nan(rng):
    x = onp.array([student_t_sample(rng, 0.05) for _ in range(2000)])
    assert not onp.any(onp.isnan(x))


@pytest.mark.parametrize("df", [0.0, -3.0, math.nan, math.inf])
def test_invalid_df(scripted, df):
    with pytest.raises(InvalidParameterError):
        student_t_sample(scripted(), df)
