import numpy as onp


def cauchy_sample(rng):
    """
    Standard Cauchy(0, 1) as the ratio of two independent standard normals

    Heavy-tailed; has no mean. A denominator of exactly 0.0 gives +-inf (or nan for 0/0)
    rather than raising.
    """
    n1 = rng.standard_normal()
    n2 = rng.standard_normal()
    with onp.errstate(divide="ignore", invalid="ignore"):
        return float(onp.float64(n1) / onp.float64(n2))
