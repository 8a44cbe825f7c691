from .config import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_SEED,
    EQUAL_AREA_RTOL,
    MAX_SAMPLING_ATTEMPTS,
    distribution_config,
    get_default_sampling_config,
    get_sampling_config_from_yaml,
    get_table_config,
    sampling_config,
)

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_SEED",
    "EQUAL_AREA_RTOL",
    "MAX_SAMPLING_ATTEMPTS",
    "distribution_config",
    "get_default_sampling_config",
    "get_sampling_config_from_yaml",
    "get_table_config",
    "sampling_config",
]
