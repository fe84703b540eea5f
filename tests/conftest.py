import pytest

from ranvar.definitions import RNG_ENTROPY_TEST
from ranvar.sources import make_rng


class ScriptedSource:
    """
    Source replaying fixed sequences of uniform, standard exponential and standard normal draws

    Drawing from an exhausted or unscripted sequence fails the test, so a test also pins down
    exactly which draws a sampler consumes.
    """

    def __init__(self, uniform=(), exponential=(), normal=()):
        self._draws = {
            "uniform": list(uniform),
            "exponential": list(exponential),
            "normal": list(normal),
        }

    def _next(self, kind):
        if not self._draws[kind]:
            raise AssertionError(f"unexpected {kind} draw")
        return self._draws[kind].pop(0)

    def random(self):
        return self._next("uniform")

    def standard_exponential(self):
        return self._next("exponential")

    def standard_normal(self):
        return self._next("normal")

    @property
    def exhausted(self):
        return all(len(v) == 0 for v in self._draws.values())


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def rng():
    return make_rng(0, entropy=RNG_ENTROPY_TEST)
