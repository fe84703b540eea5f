import ranvar
from ranvar import Gamma, Poisson, StudentT

if __name__ == "__main__":

    # rng: any source with `random()`, `standard_exponential()` and `standard_normal()`
    rng = ranvar.make_rng(seed=0)

    # single variates
    x = ranvar.gamma_sample(rng, 0.5, 2.0)
    k = ranvar.poisson_sample(rng, 42.0)
    t = ranvar.student_t_sample(rng, 10.0)
    print(f"gamma: {x:.4f}  poisson: {k}  student-t: {t:.4f}")

    # arrays of variates through distribution objects
    for dist in [Gamma(0.5, 2.0), Poisson(42.0), StudentT(10.0)]:
        samples = dist(rng, size=10000)
        print(f"{dist} [{dist.method}]: mean {samples.mean():.4f} (expected {dist.mean():.4f}), "
              f"var {samples.var():.4f} (expected {dist.var():.4f})")
