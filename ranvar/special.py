import math

from ranvar.definitions import LOG_GAMMA_SHIFT

# coefficients of the asymptotic (Stirling) series of ln Gamma(x) in powers of 1/x^2,
# i.e. B_2k / (2k (2k - 1)) for k = 1, ..., 10
LOG_GAMMA_COEFFS = (
    8.333333333333333e-02, -2.777777777777778e-03,
    7.936507936507937e-04, -5.952380952380952e-04,
    8.417508417508418e-04, -1.917526917526918e-03,
    6.410256410256410e-03, -2.955065359477124e-02,
    1.796443723688307e-01, -1.39243221690590e+00,
)

HALF_LOG_2PI = 0.5 * math.log(2.0 * math.pi)


def log_gamma(x):
    """
    Natural logarithm of the Gamma function for x > 0

    Evaluates the 10-term Stirling series directly for x > 7. For smaller x, the argument is shifted
    up by n = ceil(7 - x) into the region where the series is accurate and the shift is undone with the
    recurrence ln Gamma(x) = ln Gamma(x + 1) - ln(x), applied n times.

    Args:
        x (float): argument, x > 0. Other values are not checked and propagate as NaN or garbage.

    Returns:
        float
    """
    # int arguments beyond ~1e154 would overflow in x0 * x0
    x = float(x)
    if x == 1.0 or x == 2.0:
        return 0.0

    n = 0
    x0 = x
    if x <= LOG_GAMMA_SHIFT:
        n = math.ceil(LOG_GAMMA_SHIFT - x)
        x0 = x + n

    # Horner evaluation in 1/x0^2, highest order term first
    x2 = 1.0 / (x0 * x0)
    series = LOG_GAMMA_COEFFS[-1]
    for coeff in reversed(LOG_GAMMA_COEFFS[:-1]):
        series = series * x2 + coeff

    gl = series / x0 + HALF_LOG_2PI + (x0 - 0.5) * math.log(x0) - x0

    for _ in range(n):
        x0 -= 1.0
        gl -= math.log(x0)

    return gl
