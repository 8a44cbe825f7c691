"""Half-normal density ``exp(-x**2 / 2)`` and Marsaglia's tail sampler."""

import math

from scipy.special import erfc

from zigrng.config import MAX_SAMPLING_ATTEMPTS
from zigrng.densities.base import DensityDescriptor, DistributionKind
from zigrng.exceptions import SamplingLoopExceeded

_SQRT_HALF = math.sqrt(0.5)
_SQRT_HALF_PI = math.sqrt(0.5 * math.pi)


class NormalDensity(DensityDescriptor):
    """Standard normal distribution, sampled as a half-normal with random sign."""

    kind = DistributionKind.NORMAL
    is_symmetric = True

    def half_density(self, x: float) -> float:
        return math.exp(-0.5 * x * x)

    def inverse_half_density(self, y: float) -> float:
        return math.sqrt(-2.0 * math.log(y))

    def tail_area(self, r: float) -> float:
        return _SQRT_HALF_PI * float(erfc(r * _SQRT_HALF))

    def tail_sample(
        self, r: float, stream, max_attempts: int = MAX_SAMPLING_ATTEMPTS
    ) -> float:
        """Marsaglia's method for the normal tail beyond ``r``.

        Draw ``x = -ln(U1) / r`` and ``y = -ln(U2)`` until ``2y > x**2``; then
        ``r + x`` is distributed as the normal tail.
        """
        inv_r = 1.0 / r
        for _ in range(max_attempts):
            x = -math.log(stream.uniform_open()) * inv_r
            y = -math.log(stream.uniform_open())
            value = r + x
            # x below half an ulp of r rounds back onto the boundary
            if y + y > x * x and value > r:
                return value
        raise SamplingLoopExceeded(
            f"Normal tail sampler exceeded {max_attempts} attempts (r={r!r})."
        )
