"""Density descriptors for the distributions the Ziggurat samplers support."""

from zigrng.densities.base import DensityDescriptor, DistributionKind
from zigrng.densities.exponential import ExponentialDensity
from zigrng.densities.normal import NormalDensity
from zigrng.densities.polynomial import PolynomialDensity, PowerDensity

__all__ = [
    "DensityDescriptor",
    "DistributionKind",
    "ExponentialDensity",
    "NormalDensity",
    "PolynomialDensity",
    "PowerDensity",
]
