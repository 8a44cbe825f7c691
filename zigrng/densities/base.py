"""Base class for density descriptors.

A density descriptor is everything the table builder and the sampling engine
need to know about a distribution: its one-sided (half) density, the inverse
of that density, the area of its tail and a sampler for the tail.
"""

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from zigrng.config import MAX_SAMPLING_ATTEMPTS

if TYPE_CHECKING:
    from zigrng.streams import SamplingStream


class DistributionKind(Enum):
    """Closed set of distribution families the samplers support."""

    NORMAL = "normal"
    EXPONENTIAL = "exponential"
    POLYNOMIAL = "polynomial"


class DensityDescriptor(ABC):
    """Abstract description of a monotone decreasing half-density.

    Densities need not be normalised: only ratios of density values enter the
    Ziggurat construction.

    Subclasses set ``kind`` and ``is_symmetric`` and implement the four
    abstract methods. ``half_density`` must be strictly decreasing on
    ``[0, support)``.
    """

    kind: DistributionKind
    is_symmetric: bool = False

    @property
    def support(self) -> float:
        """Right end of the support. Unbounded unless overridden."""
        return math.inf

    @property
    def peak(self) -> float:
        """Density value at the origin, the top of the ziggurat."""
        return self.half_density(0.0)

    @abstractmethod
    def half_density(self, x: float) -> float:
        """Evaluate the (unnormalised) half-density at ``x >= 0``."""

    @abstractmethod
    def inverse_half_density(self, y: float) -> float:
        """Return the ``x`` at which the half-density equals ``y``.

        Only called with ``half_density(support) < y < peak``.
        """

    @abstractmethod
    def tail_area(self, r: float) -> float:
        """Area under the half-density to the right of ``r``."""

    @abstractmethod
    def tail_sample(
        self,
        r: float,
        stream: "SamplingStream",
        max_attempts: int = MAX_SAMPLING_ATTEMPTS,
    ) -> float:
        """Draw from the half-density conditioned on ``x > r``.

        The returned value is strictly greater than ``r``.

        Raises
        ------
        SamplingLoopExceeded
            If an internal rejection loop needs more than ``max_attempts`` tries.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
