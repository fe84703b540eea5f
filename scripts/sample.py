import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import warnings
warnings.formatwarning = lambda msg, category, path, lineno, file: f"{path}:{lineno}: {category.__name__}: {msg}\n"

import argparse
from pathlib import Path

import pandas as pd

from ranvar.definitions import EXAMPLE_CONFIG
from ranvar.utils.parse import load_sampling_config
from ranvar.utils.summary import summarize
from ranvar.utils.version_control import str2bool, get_datetime


if __name__ == "__main__":

    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default=EXAMPLE_CONFIG, type=Path)
    parser.add_argument("--n", default=100000, type=int)
    parser.add_argument("--seed", default=0, type=int)
    parser.add_argument("--n_workers", default=1, type=int)
    parser.add_argument("--out", type=Path)
    parser.add_argument("--verbose", default=True, type=str2bool)
    kwargs = parser.parse_args()

    spec = load_sampling_config(kwargs.config.resolve(), abspath=True)
    n_dists = sum(len(dists) for dists in spec.values())
    print(f"loaded {n_dists} distributions from {kwargs.config}", flush=True)

    df = summarize(spec, n=kwargs.n, seed=kwargs.seed, n_workers=kwargs.n_workers, verbose=kwargs.verbose)

    with pd.option_context("display.max_rows", None, "display.max_colwidth", 60, "display.width", 200):
        print(df.to_string(index=False), flush=True)

    if kwargs.out is not None:
        out = kwargs.out
        if out.suffix != ".csv":
            out = out / f"summary{get_datetime()}.csv"
        out.parent.mkdir(exist_ok=True, parents=True)
        df.to_csv(out, index=False)
        print(f"saved summary to {out}", flush=True)
