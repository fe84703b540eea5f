import math

import numpy as onp

from ranvar.variates.gamma import std_gamma
from ranvar.variates.utils import check_positive


def student_t_sample(rng, df):
    """
    Student-t(df)

    N / sqrt(G / (df / 2)) with N ~ N(0, 1) and G ~ Gamma(df / 2, 1), i.e. a standard normal over the
    root of a chi-squared(df) / df variate. The normal is drawn before the Gamma variate.

    Args:
        rng: source exposing `random()`, `standard_exponential()` and `standard_normal()`
        df (float): degrees of freedom, df > 0

    Returns:
        float
    """
    check_positive("df", df)
    n = rng.standard_normal()
    g = std_gamma(rng, df / 2.0)

    # G underflows to 0.0 for very small df
    with onp.errstate(divide="ignore", invalid="ignore"):
        return float(math.sqrt(df / 2.0) * onp.float64(n) / onp.sqrt(onp.float64(g)))
