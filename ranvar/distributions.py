import numpy as onp

from ranvar.abstract import Distribution
from ranvar.variates import gamma_sample, chisquare_sample, beta_sample, poisson_sample, \
    cauchy_sample, student_t_sample, gamma_method, beta_method, poisson_method
from ranvar.variates.utils import check_positive, check_nonnegative


class Gamma(Distribution):
    def __init__(self, shape, scale=1.0):
        self.shape = check_positive("shape", shape)
        self.scale = check_positive("scale", scale)

    @property
    def method(self):
        return gamma_method(self.shape)

    def sample(self, rng):
        return gamma_sample(rng, self.shape, self.scale)

    def mean(self):
        return self.shape * self.scale

    def var(self):
        return self.shape * self.scale ** 2


class ChiSquare(Distribution):
    def __init__(self, df):
        self.df = check_positive("df", df)

    @property
    def method(self):
        return gamma_method(self.df / 2.0)

    def sample(self, rng):
        return chisquare_sample(rng, self.df)

    def mean(self):
        return self.df

    def var(self):
        return 2.0 * self.df


class Beta(Distribution):
    def __init__(self, a, b):
        self.a = check_positive("a", a)
        self.b = check_positive("b", b)

    @property
    def method(self):
        return beta_method(self.a, self.b)

    def sample(self, rng):
        return beta_sample(rng, self.a, self.b)

    def mean(self):
        return self.a / (self.a + self.b)

    def var(self):
        s = self.a + self.b
        return self.a * self.b / (s * s * (s + 1.0))


class Poisson(Distribution):
    dtype = onp.int64

    def __init__(self, lam):
        self.lam = check_nonnegative("lam", lam)

    @property
    def method(self):
        return poisson_method(self.lam)

    def sample(self, rng):
        return poisson_sample(rng, self.lam)

    def mean(self):
        return self.lam

    def var(self):
        return self.lam


class Cauchy(Distribution):
    """Cauchy(0, scale); mean and variance are undefined"""
    def __init__(self, scale=1.0):
        self.scale = check_positive("scale", scale)

    @property
    def method(self):
        return "normal_ratio"

    def sample(self, rng):
        return self.scale * cauchy_sample(rng)


class StudentT(Distribution):
    """Student-t(df) scaled by `scale`; mean exists for df > 1 and variance for df > 2"""
    def __init__(self, df, scale=1.0):
        self.df = check_positive("df", df)
        self.scale = check_positive("scale", scale)

    @property
    def method(self):
        return gamma_method(self.df / 2.0)

    def sample(self, rng):
        return self.scale * student_t_sample(rng, self.df)

    def mean(self):
        return 0.0 if self.df > 1.0 else onp.nan

    def var(self):
        if self.df > 2.0:
            return self.scale ** 2 * self.df / (self.df - 2.0)
        elif self.df > 1.0:
            return onp.inf
        else:
            return onp.nan
