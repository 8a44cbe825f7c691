"""Public sampling entry points.

Normal and exponential variates come from the shared default tables of the
global registry. Polynomial densities have no universal table: callers build
one with ``build_polynomial_table`` and pass it in.

Examples
--------
>>> from zigrng import SamplingStream, sample_normal, sample_polynomial
>>> from zigrng import PowerDensity, build_polynomial_table
>>> stream = SamplingStream(seed=17)
>>> z = sample_normal(stream)
>>> table = build_polynomial_table(PowerDensity(51))
>>> p = sample_polynomial(stream, table)
"""

import warnings
from functools import lru_cache

import numpy as np

from zigrng.config import EQUAL_AREA_RTOL
from zigrng.densities import DensityDescriptor, DistributionKind
from zigrng.exceptions import TableConstructionError
from zigrng.registry import get_distribution_registry
from zigrng.sampling.engine import ZigguratSampler
from zigrng.streams import SamplingStream
from zigrng.tables.builder import ZigguratTable, build_table


def sample_normal(stream: SamplingStream) -> float:
    """Standard normal variate."""
    return get_distribution_registry().default_sampler("normal").sample(stream)


def sample_gaussian(stream: SamplingStream, sigma: float = 1.0) -> float:
    """Normal variate with mean 0 and standard deviation ``sigma``."""
    return sigma * sample_normal(stream)


def sample_exponential(stream: SamplingStream) -> float:
    """Unit exponential variate."""
    return get_distribution_registry().default_sampler("exponential").sample(stream)


def sample_polynomial(stream: SamplingStream, table: ZigguratTable) -> float:
    """Variate from a caller-built polynomial table.

    Any table is accepted, but passing one for another distribution family
    triggers a warning since it is most likely a mix-up.
    """
    if table.kind is not DistributionKind.POLYNOMIAL:
        warnings.warn(
            f"sample_polynomial called with a {table.kind.value} table; "
            "sampling from it anyway.",
            stacklevel=2,
        )
    return _sampler_for(table).sample(stream)


def build_polynomial_table(
    descriptor: DensityDescriptor,
    n: int = 256,
    r: float | None = None,
    bits: int = 32,
    rtol: float = EQUAL_AREA_RTOL,
) -> ZigguratTable:
    """Build a Ziggurat table for a polynomial density.

    ``r=None`` solves the tail boundary for ``n`` layers.

    Raises
    ------
    TableConstructionError
        If ``descriptor`` is not a polynomial density or the table is invalid.
    """
    if descriptor.kind is not DistributionKind.POLYNOMIAL:
        raise TableConstructionError(
            f"Expected a polynomial density, got {descriptor!r} "
            f"({descriptor.kind.value})."
        )
    return build_table(descriptor, n=n, r=r, bits=bits, rtol=rtol)


def sample_power_polynomial(stream: SamplingStream, degree: int) -> float:
    """Variate with density proportional to ``(1 - x)**degree`` by direct inversion.

    Reference sampler for ``PowerDensity(degree)`` tables; consumes exactly
    one word per variate.
    """
    if degree < 0:
        raise ValueError(f"degree must be non-negative, got {degree}")
    return 1.0 - stream.uniform() ** (1.0 / (degree + 1.0))


def sample_array(
    stream: SamplingStream,
    size: int | tuple[int, ...],
    distribution: str | ZigguratTable = "normal",
) -> np.ndarray:
    """Fill an array with variates from a registered distribution or a table.

    Parameters
    ----------
    stream : SamplingStream
        Source of randomness.
    size : int or tuple of int
        Output shape.
    distribution : str or ZigguratTable
        Registered distribution name, or a table built by the caller.

    Returns
    -------
    np.ndarray
        float64 array of shape ``size``, filled in stream order.
    """
    if isinstance(distribution, ZigguratTable):
        sampler = _sampler_for(distribution)
    else:
        sampler = get_distribution_registry().default_sampler(distribution)
    return sampler.fill(stream, size)


@lru_cache(maxsize=64)
def _sampler_for(table: ZigguratTable) -> ZigguratSampler:
    # Tables hash by identity, so each caller-built table gets its own sampler.
    return ZigguratSampler(table)
