class InvalidParameterError(ValueError):
    """Raised when a distribution parameter lies outside its domain, e.g. a shape <= 0 or a NaN rate"""
    pass
