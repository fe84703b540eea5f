import math

from ranvar.variates.gamma import std_gamma
from ranvar.variates.utils import check_positive


def _beta_johnk(rng, a, b):
    """
    Joehnk (1964) for a <= 1 and b <= 1

    Draws x = u^(1/a), y = v^(1/b) until x + y <= 1 and returns x / (x + y).
    For tiny a or b both powers can underflow to 0.0, in which case the ratio is
    recomputed from the logarithms, shifted by their maximum so that at least one term is exp(0) = 1.
    """
    while True:
        u = rng.random()
        v = rng.random()
        x = u ** (1.0 / a)
        y = v ** (1.0 / b)

        if x + y <= 1.0:
            if x + y > 0.0:
                return x / (x + y)

            # x and y underflowed
            log_x = _log(u) / a
            log_y = _log(v) / b
            if log_x == -math.inf and log_y == -math.inf:
                if u == 0.0 and v == 0.0:
                    # ratio undefined
                    continue
                # both logs overflowed for subnormal a, b; x / (x + y) is 1, 0 or 1/2
                # depending on whether log_x / log_y = (ln u / ln v) (b / a) is below, above or at 1
                r = (_log(u) / _log(v)) * (b / a)
                if r < 1.0:
                    return 1.0
                elif r > 1.0:
                    return 0.0
                return 0.5

            log_m = max(log_x, log_y)
            log_x -= log_m
            log_y -= log_m
            return math.exp(log_x - math.log(math.exp(log_x) + math.exp(log_y)))


def _beta_gamma_ratio(rng, a, b):
    """Ga / (Ga + Gb) for Ga ~ Gamma(a, 1) and Gb ~ Gamma(b, 1)"""
    ga = std_gamma(rng, a)
    gb = std_gamma(rng, b)
    return ga / (ga + gb)


def _log(u):
    return math.log(u) if u > 0.0 else -math.inf


BETA_METHODS = {
    "johnk": _beta_johnk,
    "gamma_ratio": _beta_gamma_ratio,
}


def beta_method(a, b):
    """Name of the entry of `BETA_METHODS` used for given parameters"""
    if a <= 1.0 and b <= 1.0:
        return "johnk"
    else:
        return "gamma_ratio"


def beta_sample(rng, a, b):
    """
    Beta(a, b)

    Args:
        rng: source exposing `random()`, `standard_exponential()` and `standard_normal()`
        a (float): first shape parameter, a > 0
        b (float): second shape parameter, b > 0

    Returns:
        float in [0, 1]
    """
    check_positive("a", a)
    check_positive("b", b)
    return BETA_METHODS[beta_method(a, b)](rng, a, b)
