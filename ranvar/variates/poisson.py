import math

from ranvar.definitions import POISSON_PTRS_THRESHOLD
from ranvar.special import log_gamma
from ranvar.variates.utils import check_nonnegative


def _poisson_zero(rng, lam):
    return 0


def _poisson_multiplicative(rng, lam):
    """
    Multiplication of uniforms until the product falls below exp(-lam)
    Consumes lam + 1 uniforms in expectation; there is no upper bound on the number of draws.
    """
    enlam = math.exp(-lam)
    count = 0
    prod = 1.0
    while True:
        prod *= rng.random()
        if prod > enlam:
            count += 1
        else:
            return count


def _poisson_ptrs(rng, lam):
    """
    PTRS, transformed rejection with squeeze by Hoermann (1993), for lam >= 10
    https://doi.org/10.1016/0167-6687(93)90997-4

    Candidates k are generated by a transformed uniform whose density is a hat function over
    the Poisson pmf. Most candidates are accepted by the squeeze `us >= 0.07 and v <= vr` or rejected by
    the cheap tail test, and only the rest pay for the log-pmf evaluation with `log_gamma`.
    """
    slam = math.sqrt(lam)
    loglam = math.log(lam)
    b = 0.931 + 2.53 * slam
    a = -0.059 + 0.02483 * b
    invalpha = 1.1239 + 1.1328 / (b - 3.4)
    vr = 0.9277 - 3.6224 / (b - 2.0)

    while True:
        u = rng.random() - 0.5
        v = rng.random()
        us = 0.5 - abs(u)
        if us == 0.0:
            # u = -0.5 sends k to -inf
            continue
        k = math.floor((2.0 * a / us + b) * u + lam + 0.43)

        # squeeze acceptance
        if us >= 0.07 and v <= vr:
            return k

        # squeeze rejection
        if k < 0 or (us < 0.013 and v > us):
            continue

        # ln(0) = -inf always accepts
        if v == 0.0 or (math.log(v) + math.log(invalpha) - math.log(a / (us * us) + b)
                        <= -lam + k * loglam - log_gamma(k + 1)):
            return k


POISSON_METHODS = {
    "zero": _poisson_zero,
    "multiplicative": _poisson_multiplicative,
    "ptrs": _poisson_ptrs,
}


def poisson_method(lam):
    """Name of the entry of `POISSON_METHODS` used for a given rate"""
    if lam == 0:
        return "zero"
    elif lam < POISSON_PTRS_THRESHOLD:
        return "multiplicative"
    else:
        return "ptrs"


def poisson_sample(rng, lam):
    """
    Poisson(lam)

    Below `POISSON_PTRS_THRESHOLD` uniforms are multiplied, which costs O(lam) draws; above,
    PTRS needs O(1) rounds with more arithmetic per round. lam = 0 returns 0 without touching `rng`.

    Args:
        rng: source exposing `random()`
        lam (float): rate, lam >= 0

    Returns:
        int >= 0
    """
    check_nonnegative("lam", lam)
    return POISSON_METHODS[poisson_method(lam)](rng, lam)
