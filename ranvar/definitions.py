from pathlib import Path

# rng entropies; these integers must be different to guarantee different randomness across uses
RNG_ENTROPY_SAMPLE = 0
RNG_ENTROPY_TEST = 1
RNG_ENTROPY_WORKERS = 2

# directories
ROOT_DIR = Path(__file__).parents[0]
PROJECT_DIR = Path(__file__).parents[1]

EXAMPLE_CONFIG = ROOT_DIR / "config/examples/moments.yaml"

# yaml
YAML_CLASS = "__class__"
YAML_SAMPLERS = "samplers"

# algorithm switches
POISSON_PTRS_THRESHOLD = 10.0
LOG_GAMMA_SHIFT = 7.0
MARSAGLIA_TSANG_SQUEEZE = 0.0331
