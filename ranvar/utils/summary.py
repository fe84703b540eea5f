import warnings

import numpy as onp
import pandas as pd
from tqdm import tqdm

from ranvar.multiproc import sample_parallel


def summarize(spec, *, n, seed, n_workers=1, verbose=False):
    """
    Draws `n` variates of every distribution in `spec` and tabulates empirical against theoretical moments

    Args:
        spec (dict): {name: [Distribution, ...]} as returned by `load_sampling_config`
        n (int): number of variates per distribution
        seed (int): seed; each row draws from its own stream of `seed`, indexed by the row
        n_workers (int): number of processes per distribution
        verbose (bool): show progress bar

    Returns:
        pd.DataFrame with columns
        `name`, `distribution`, `method`, `n`, `mean`, `var`, `median`, `mean_expected`, `var_expected`
    """
    jobs = [(name, dist) for name, dists in spec.items() for dist in dists]

    rows = []
    for j, (name, dist) in enumerate(tqdm(jobs, disable=not verbose)):
        x = sample_parallel(dist, n, seed=seed, stream=j, n_workers=n_workers)

        if not onp.isfinite(dist.mean()):
            warnings.warn(f"{dist} has no finite mean; the sample mean does not converge")

        rows.append(dict(
            name=name,
            distribution=repr(dist),
            method=dist.method,
            n=n,
            mean=onp.mean(x),
            var=onp.var(x),
            median=onp.median(x),
            mean_expected=dist.mean(),
            var_expected=dist.var(),
        ))

    return pd.DataFrame(rows, columns=["name", "distribution", "method", "n", "mean", "var", "median",
                                       "mean_expected", "var_expected"])
