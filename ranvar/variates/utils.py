import math

from ranvar.exceptions import InvalidParameterError


def check_positive(name, value):
    """Raises `InvalidParameterError` unless `value` is a finite number > 0"""
    if not _is_finite(value) or not value > 0:
        raise InvalidParameterError(f"`{name}` must be finite and > 0, got {value}")
    return value


def check_nonnegative(name, value):
    """Raises `InvalidParameterError` unless `value` is a finite number >= 0"""
    if not _is_finite(value) or not value >= 0:
        raise InvalidParameterError(f"`{name}` must be finite and >= 0, got {value}")
    return value


def _is_finite(value):
    try:
        return math.isfinite(value)
    except TypeError:
        raise InvalidParameterError(f"expected a real number, got `{type(value).__name__}`")
