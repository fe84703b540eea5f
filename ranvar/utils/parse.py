import inspect
import itertools
import warnings
from collections import defaultdict

import ranvar.distributions
from ranvar.abstract import Distribution
from ranvar.definitions import YAML_CLASS, YAML_SAMPLERS
from ranvar.utils.load import load_yaml


def cartesian_dict(d):
    """
    Cartesian product of nested dict of lists
    Example:

    d = {'shape': [0.5, 2.0],
         'scale': [1.0, 3.0]}

    yields
        {'shape': 0.5, 'scale': 1.0}
        {'shape': 0.5, 'scale': 3.0}
        {'shape': 2.0, 'scale': 1.0}
        {'shape': 2.0, 'scale': 3.0}
    """
    if type(d) in [dict, defaultdict]:
        keys, values = d.keys(), d.values()
        for c in itertools.product(*(cartesian_dict(v) for v in values)):
            yield dict(zip(keys, c))
    elif type(d) == list:
        for c in d:
            yield from cartesian_dict(c)
    else:
        yield d


def _parse_distributions(name, config):
    """Instantiates one distribution per combination of list-valued kwargs of a `__class__` entry"""

    if type(config) not in [dict, defaultdict] or YAML_CLASS not in config:
        raise SyntaxError(f"sampler `{name}` needs a `{YAML_CLASS}` entry naming a distribution")

    cls_name = config[YAML_CLASS]
    cls = getattr(ranvar.distributions, str(cls_name), None)
    if not (isinstance(cls, type) and issubclass(cls, Distribution)) or inspect.isabstract(cls):
        raise SyntaxError(f"{YAML_CLASS} `{cls_name}` of sampler `{name}` is not a distribution "
                          f"defined in `ranvar.distributions`. Spelled correctly?")

    kwargs = {k: v for k, v in config.items() if k != YAML_CLASS}
    for v in kwargs.values():
        assert type(v) in [int, float, list], f"Unknown yaml entry `{v}` in sampler `{name}`"

    return [cls(**kw) for kw in cartesian_dict(kwargs)]


def load_sampling_config(path, abspath=False):
    """
    Load yaml config specifying the distributions to sample from

    Expected format:

        samplers:
          gamma:
            __class__: Gamma
            shape: [0.5, 1.0, 4.0]
            scale: 2.0

    Returns:
        dict {name: [Distribution, ...]} with one distribution per combination of list-valued parameters
    """

    config = load_yaml(path, abspath=abspath)
    if config is None:
        raise SyntaxError("`config` is None; make sure the file exists and there are no false tabs "
                          "and indents in the .yaml file")

    if type(config) != dict or type(config.get(YAML_SAMPLERS)) != dict:
        raise SyntaxError(f"config needs a top-level `{YAML_SAMPLERS}` mapping")

    spec = {name: _parse_distributions(name, subconfig) for name, subconfig in config[YAML_SAMPLERS].items()}

    n_dists = sum(len(dists) for dists in spec.values())
    if n_dists >= 1000:
        warnings.warn(f"config defines {n_dists} distributions")

    return spec
