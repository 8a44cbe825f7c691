# import importlib.metadata
__version__ = "0.1.0"  # importlib.metadata.version(__package__ or __name__)

from zigrng.densities import (
    DensityDescriptor,
    DistributionKind,
    ExponentialDensity,
    NormalDensity,
    PolynomialDensity,
    PowerDensity,
)
from zigrng.exceptions import (
    SamplingLoopExceeded,
    TableConstructionError,
    UniformSourceError,
    UniformSourceExhausted,
    UniformSourceFailure,
    ZigguratError,
)
from zigrng.registry import (
    default_table,
    get_distribution_registry,
    register_distribution,
)
from zigrng.samplers import (
    build_polynomial_table,
    sample_array,
    sample_exponential,
    sample_gaussian,
    sample_normal,
    sample_polynomial,
    sample_power_polynomial,
)
from zigrng.sampling import ZigguratSampler
from zigrng.streams import SamplingStream
from zigrng.tables import ZigguratTable, build_table, solve_tail_boundary

__all__ = [
    "DensityDescriptor",
    "DistributionKind",
    "ExponentialDensity",
    "NormalDensity",
    "PolynomialDensity",
    "PowerDensity",
    "SamplingLoopExceeded",
    "SamplingStream",
    "TableConstructionError",
    "UniformSourceError",
    "UniformSourceExhausted",
    "UniformSourceFailure",
    "ZigguratError",
    "ZigguratSampler",
    "ZigguratTable",
    "build_polynomial_table",
    "build_table",
    "default_table",
    "get_distribution_registry",
    "register_distribution",
    "sample_array",
    "sample_exponential",
    "sample_gaussian",
    "sample_normal",
    "sample_polynomial",
    "sample_power_polynomial",
    "solve_tail_boundary",
]
