import warnings
warnings.formatwarning = lambda msg, category, path, lineno, file: f"{path}:{lineno}: {category.__name__}: {msg}\n"

from pathlib import Path
import yaml

from ranvar.definitions import PROJECT_DIR


def load_yaml(path, abspath=False):
    """Load plain yaml config"""

    load_path = path if abspath else (PROJECT_DIR / path)

    try:
        with open(load_path, "r") as stream:
            try:
                config = yaml.safe_load(stream)
                return config

            except yaml.YAMLError as exc:
                warnings.warn(f"YAML parsing error in {Path(path).name}. Returning `None` for config.\n{exc}")
                return None
    except FileNotFoundError:
        warnings.warn(f"{Path(path).name} doesn't exist. Returning `None` for config.")
        return None
