import multiprocessing

import numpy as onp

from ranvar.definitions import RNG_ENTROPY_WORKERS
from ranvar.sources import make_rng


class AsyncExecutor:
    """
    Runs a target function over argument lists in a process pool and collects the results in launch order
    """

    def __init__(self, n_workers=1):
        self.n_workers = n_workers if n_workers > 0 else multiprocessing.cpu_count()
        self._pool = multiprocessing.Pool(self.n_workers)
        self._jobs = []

    def run(self, target, *args_iter):
        self.launch(target, *args_iter)
        return self.finish()

    def launch(self, target, *args_iter):
        # fire off workers
        for args in zip(*args_iter):
            job = self._pool.apply_async(target, args)
            self._jobs.append(job)

    def finish(self):
        # re-raises the first exception of a worker, if any
        try:
            results = [job.get() for job in self._jobs]
        finally:
            self._pool.close()
            self._pool.join()
        return results


def chunk_sizes(n, n_chunks):
    """Splits `n` into `n_chunks` sizes that differ by at most one"""
    base, rest = divmod(n, n_chunks)
    return [base + int(c < rest) for c in range(n_chunks)]


def sample_chunk(dist, n, seed, stream, chunk):
    """Draws `n` variates of `dist` from the independent source of `chunk` within `stream`"""
    rng = make_rng(seed, entropy=RNG_ENTROPY_WORKERS, spawn_key=(stream, chunk))
    return dist(rng, size=n)


def sample_parallel(dist, n, *, seed, stream=0, n_workers=1):
    """
    Draws `n` variates of `dist` split over `n_workers` processes

    Every chunk gets its own source, so no generator state is shared between processes.
    The result only depends on `seed`, `stream`, `n` and `n_workers`.

    Args:
        dist (Distribution): distribution to sample
        n (int): total number of variates
        seed (int): seed from which the sources of all chunks are derived
        stream (int): index separating independent uses of the same seed, e.g. rows of a summary
        n_workers (int): number of processes; values <= 0 use all cpus

    Returns:
        array of shape [n,]
    """
    n_workers = n_workers if n_workers > 0 else multiprocessing.cpu_count()
    sizes = chunk_sizes(n, n_workers)

    if n_workers == 1:
        return sample_chunk(dist, n, seed, stream, 0)

    executor = AsyncExecutor(n_workers=n_workers)
    chunks = executor.run(sample_chunk, [dist] * n_workers, sizes, [seed] * n_workers, [stream] * n_workers,
                          range(n_workers))
    return onp.concatenate(chunks)
