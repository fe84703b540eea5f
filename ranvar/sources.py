import numpy as onp

from ranvar.definitions import RNG_ENTROPY_SAMPLE

# capabilities every sampler may draw from
SOURCE_METHODS = ("random", "standard_exponential", "standard_normal")


def make_rng(seed, entropy=RNG_ENTROPY_SAMPLE, spawn_key=()):
    """
    Numpy pseudorandom number generator usable as a source for all samplers

    Args:
        seed (int): seed of the run
        entropy (int): one of the `RNG_ENTROPY_*` tags in `ranvar.definitions`, separating the streams of
            different uses of the same seed
        spawn_key (tuple): optional key for independent child streams, e.g. `(worker_id,)`

    Returns:
        np.random.Generator
    """
    return onp.random.default_rng(onp.random.SeedSequence(entropy=(entropy, int(seed)),
                                                          spawn_key=tuple(int(k) for k in spawn_key)))


def check_source(rng):
    """Raises `TypeError` if `rng` cannot serve as a source of uniform, exponential and normal draws"""
    missing = [m for m in SOURCE_METHODS if not callable(getattr(rng, m, None))]
    if missing:
        raise TypeError(f"`{type(rng).__name__}` is not a valid source; missing {', '.join(missing)}")
    return rng
