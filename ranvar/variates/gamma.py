import math

from ranvar.definitions import MARSAGLIA_TSANG_SQUEEZE
from ranvar.variates.utils import check_positive


def _gamma_exponential(rng, shape):
    """Gamma(1, 1) is Exp(1)"""
    return rng.standard_exponential()


def _gamma_ahrens_dieter(rng, shape):
    """
    Algorithm GS by Ahrens and Dieter (1974) for 0 < shape < 1
    https://link.springer.com/article/10.1007/BF02293108

    Rejection from a mixture of a power density on [0, 1] and an exponential tail on (1, inf).
    Each round consumes one uniform and one standard exponential draw.
    The loop terminates with probability 1 but has no worst-case bound.
    """
    while True:
        u = rng.random()
        v = rng.standard_exponential()

        if u <= 1.0 - shape:
            # power part
            x = u ** (1.0 / shape)
            if x <= v:
                return x
        else:
            # exponential tail
            y = -math.log((1.0 - u) / shape)
            x = (1.0 - shape + shape * y) ** (1.0 / shape)
            if x <= v + y:
                return x


def _gamma_marsaglia_tsang(rng, shape):
    """
    Marsaglia and Tsang (2000), A Simple Method for Generating Gamma Variables, for shape > 1
    https://dl.acm.org/doi/10.1145/358407.358414

    Transforms a standard normal x into b (1 + c x)^3 and accepts via a squeeze test
    that skips both logarithms on most rounds. Expected number of rounds is below 1.05 for shape > 1.
    The loop terminates with probability 1 but has no worst-case bound.
    """
    b = shape - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * b)

    while True:
        # 1 + c x must be positive for the cube to be a valid transformation
        while True:
            x = rng.standard_normal()
            v = 1.0 + c * x
            if v > 0.0:
                break

        v = v * v * v
        u = rng.random()

        # squeeze
        if u < 1.0 - MARSAGLIA_TSANG_SQUEEZE * (x * x) * (x * x):
            return b * v

        # full test; ln(0) = -inf always accepts
        if u == 0.0 or math.log(u) < 0.5 * x * x + b * (1.0 - v + math.log(v)):
            return b * v


GAMMA_METHODS = {
    "exponential": _gamma_exponential,
    "ahrens_dieter": _gamma_ahrens_dieter,
    "marsaglia_tsang": _gamma_marsaglia_tsang,
}


def gamma_method(shape):
    """Name of the entry of `GAMMA_METHODS` used for a given shape"""
    if shape == 1.0:
        return "exponential"
    elif shape < 1.0:
        return "ahrens_dieter"
    else:
        return "marsaglia_tsang"


def std_gamma(rng, shape):
    """
    Gamma(shape, 1)

    Args:
        rng: source exposing `random()`, `standard_exponential()` and `standard_normal()`,
            e.g. `np.random.Generator`
        shape (float): shape parameter k > 0

    Returns:
        float >= 0
    """
    check_positive("shape", shape)
    return GAMMA_METHODS[gamma_method(shape)](rng, shape)


def gamma_sample(rng, shape, scale=1.0):
    """Gamma(shape, scale) with mean shape * scale"""
    check_positive("scale", scale)
    return scale * std_gamma(rng, shape)


def chisquare_sample(rng, df):
    """Chi-squared(df) = 2 * Gamma(df / 2, 1)"""
    check_positive("df", df)
    return 2.0 * std_gamma(rng, df / 2.0)
