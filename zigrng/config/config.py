"""Configuration for the Ziggurat samplers.

Variables:
---------
distribution_config: dict
    Default table parameters for the built-in distributions. ``r`` is the
    tail boundary that closes the equal-area partition for ``n`` layers,
    ``bits`` the width of the magnitude part of each uniform word.
"""

from copy import deepcopy
from importlib.resources import as_file, files
from pathlib import Path
from typing import Any

import yaml

# Upper bound on rejection attempts per draw. Correct tables accept on the
# first attempt roughly 99% of the time.
MAX_SAMPLING_ATTEMPTS = 10_000

# Relative tolerance of the equal-area check at table construction.
EQUAL_AREA_RTOL = 1e-9

# Number of 64-bit words fetched from a bit generator at once.
DEFAULT_BUFFER_SIZE = 1024

DEFAULT_SEED = 17

distribution_config = {
    "normal": {
        "kind": "normal",
        "n": 256,
        "r": 3.6541528853610088,
        "bits": 31,
    },
    "exponential": {
        "kind": "exponential",
        "n": 256,
        "r": 7.69711747013104972,
        "bits": 32,
    },
}

sampling_config = {
    "distribution": "normal",
    "n_samples": 1000,
    "seed": DEFAULT_SEED,
    "degree": 51,
    "n_layers": 256,
}


def get_table_config(name: str) -> dict[str, Any]:
    """Get a copy of the default table parameters for a distribution.

    Parameters
    ----------
    name : str
        Distribution name, e.g. ``"normal"``.

    Returns
    -------
    dict
        Dictionary with keys ``kind``, ``n``, ``r`` and ``bits``.

    Raises
    ------
    KeyError
        If no defaults are configured for ``name``.
    """
    if name not in distribution_config:
        raise KeyError(
            f"No table configuration for '{name}'. "
            f"Available: {sorted(distribution_config)}"
        )
    return deepcopy(distribution_config[name])


def get_default_sampling_config() -> dict[str, Any]:
    """Get a copy of the default sampling configuration used by the CLI."""
    return deepcopy(sampling_config)


def get_sampling_config_from_yaml(yaml_config_path=None) -> dict[str, Any]:
    """Load a sampling configuration from YAML, on top of the defaults.

    Keys are case-insensitive. ``yaml_config_path`` may be a path or an open
    file-like object; ``None`` loads the configuration shipped with the CLI.
    """
    if yaml_config_path is None:
        with as_file(files("zigrng.cli") / "config_sampling.yaml") as default_path:
            with open(default_path, "rb") as f:
                loaded = yaml.safe_load(f)
    elif hasattr(yaml_config_path, "read"):
        loaded = yaml.safe_load(yaml_config_path)
    else:
        with open(Path(yaml_config_path), "rb") as f:
            loaded = yaml.safe_load(f)

    config = get_default_sampling_config()
    config.update({k.lower(): v for k, v in (loaded or {}).items()})
    unknown = set(config) - set(sampling_config)
    if unknown:
        raise ValueError(f"Unknown sampling configuration keys: {sorted(unknown)}")
    return config
