"""Unit exponential density ``exp(-x)``."""

import math

from zigrng.config import MAX_SAMPLING_ATTEMPTS
from zigrng.densities.base import DensityDescriptor, DistributionKind
from zigrng.exceptions import SamplingLoopExceeded


class ExponentialDensity(DensityDescriptor):
    """Unit-rate exponential distribution."""

    kind = DistributionKind.EXPONENTIAL
    is_symmetric = False

    def half_density(self, x: float) -> float:
        return math.exp(-x)

    def inverse_half_density(self, y: float) -> float:
        return -math.log(y)

    def tail_area(self, r: float) -> float:
        return math.exp(-r)

    def tail_sample(
        self, r: float, stream, max_attempts: int = MAX_SAMPLING_ATTEMPTS
    ) -> float:
        # Memoryless: the tail beyond r is r plus a fresh exponential.
        for _ in range(max_attempts):
            value = r - math.log(stream.uniform_open())
            if value > r:
                return value
        raise SamplingLoopExceeded(
            f"Exponential tail sampler exceeded {max_attempts} attempts (r={r!r})."
        )
