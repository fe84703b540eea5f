from abc import ABC, abstractmethod

import numpy as onp


class Distribution(ABC):
    """
    Parameterized distribution that draws variates from a caller-owned source `rng`

    Subclasses implement `sample`, which returns a single variate. Calling the instance
    with `size` fills an array with independent variates drawn one after another from the same source.
    """

    dtype = onp.float64

    @abstractmethod
    def sample(self, rng):
        """Draws one variate from `rng`"""
        pass

    @property
    def method(self):
        """Name of the algorithm selected for the current parameters"""
        return None

    def mean(self):
        return onp.nan

    def var(self):
        return onp.nan

    def __call__(self, rng, size=None):
        if size is None:
            return self.sample(rng)
        size = (int(size),) if isinstance(size, (int, onp.integer)) else tuple(size)
        n = int(onp.prod(size))
        return onp.fromiter((self.sample(rng) for _ in range(n)), dtype=self.dtype, count=n).reshape(size)

    def __repr__(self):
        params = ", ".join(f"{k}={v}" for k, v in vars(self).items())
        return f"{type(self).__name__}({params})"
