"""The Ziggurat sampling state machine.

One 64-bit word per attempt is split into

    bits [0, W)          magnitude Z
    bits [W, W + L)      layer index i
    bit  W + L           sign (symmetric densities only)

``x = Z * w[i]`` is uniform on ``[0, x[i])``. When ``Z < k[i]`` the point lies
inside the inscribed rectangle and is accepted straight away; this fast path
handles ~99% of draws. Otherwise the base layer hands over to the density's
tail sampler and every other layer runs the wedge test
``y[i] + V * (y[i+1] - y[i]) < f(x)``, restarting from a fresh word on
rejection.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from zigrng.config import MAX_SAMPLING_ATTEMPTS
from zigrng.exceptions import SamplingLoopExceeded
from zigrng.streams import SamplingStream
from zigrng.tables.builder import ZigguratTable


class DrawPath(Enum):
    """Which branch of the state machine produced a variate."""

    FAST = "fast"
    WEDGE = "wedge"
    TAIL = "tail"


@dataclass(frozen=True)
class DrawResult:
    """A variate together with how it was obtained."""

    value: float
    path: DrawPath
    attempts: int


class ZigguratSampler:
    """Draws variates from one Ziggurat table.

    The sampler only reads its table, so one instance can serve any number of
    streams and threads. All randomness comes from the stream passed to each
    call.

    Examples
    --------
    >>> from zigrng.registry import default_table
    >>> sampler = ZigguratSampler(default_table("normal"))
    >>> stream = SamplingStream(seed=1)
    >>> z = sampler.sample(stream)
    >>> batch = sampler.fill(stream, 1000)
    """

    def __init__(self, table: ZigguratTable, max_attempts: int = MAX_SAMPLING_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.table = table
        self.max_attempts = max_attempts
        self._magnitude_mask = (1 << table.bits) - 1
        self._layer_mask = table.n - 1
        self._sign_shift = table.bits + table.layer_bits

    def sample(self, stream: SamplingStream) -> float:
        """Draw one variate.

        Raises
        ------
        SamplingLoopExceeded
            If no attempt is accepted within ``max_attempts``.
        """
        table = self.table
        _, y, k, w = table.lookup
        descriptor = table.descriptor
        density = descriptor.half_density
        bits = table.bits
        magnitude_mask = self._magnitude_mask
        layer_mask = self._layer_mask
        next_word = stream.next_word

        for _ in range(self.max_attempts):
            word = next_word()
            z = word & magnitude_mask
            i = (word >> bits) & layer_mask
            if z < k[i]:
                value = z * w[i]
            elif i == 0:
                value = descriptor.tail_sample(table.r, stream, self.max_attempts)
            else:
                value = z * w[i]
                if not y[i] + stream.uniform() * (y[i + 1] - y[i]) < density(value):
                    continue
            if descriptor.is_symmetric and (word >> self._sign_shift) & 1:
                return -value
            return value

        raise SamplingLoopExceeded(
            f"No variate accepted from {table!r} in {self.max_attempts} attempts."
        )

    __call__ = sample

    def sample_traced(self, stream: SamplingStream) -> DrawResult:
        """Draw one variate and report the path and number of attempts it took.

        Consumes exactly the same words as ``sample`` and returns the same value.
        """
        table = self.table
        _, y, k, w = table.lookup
        descriptor = table.descriptor

        for attempt in range(1, self.max_attempts + 1):
            word = stream.next_word()
            z = word & self._magnitude_mask
            i = (word >> table.bits) & self._layer_mask
            if z < k[i]:
                value, path = z * w[i], DrawPath.FAST
            elif i == 0:
                value = descriptor.tail_sample(table.r, stream, self.max_attempts)
                path = DrawPath.TAIL
            else:
                value, path = z * w[i], DrawPath.WEDGE
                wedge = y[i] + stream.uniform() * (y[i + 1] - y[i])
                if not wedge < descriptor.half_density(value):
                    continue
            if descriptor.is_symmetric and (word >> self._sign_shift) & 1:
                value = -value
            return DrawResult(value=value, path=path, attempts=attempt)

        raise SamplingLoopExceeded(
            f"No variate accepted from {table!r} in {self.max_attempts} attempts."
        )

    def fill(self, stream: SamplingStream, size: int | tuple[int, ...]) -> np.ndarray:
        """Draw ``size`` variates into a float64 array, in stream order."""
        shape = (size,) if np.isscalar(size) else tuple(size)
        count = int(np.prod(shape, dtype=np.int64))
        sample = self.sample
        values = np.fromiter(
            (sample(stream) for _ in range(count)), dtype=np.float64, count=count
        )
        return values.reshape(shape)

    def __repr__(self) -> str:
        return f"ZigguratSampler({self.table!r})"


def draw(
    table: ZigguratTable,
    stream: SamplingStream,
    max_attempts: int = MAX_SAMPLING_ATTEMPTS,
) -> float:
    """Draw one variate from ``table`` using ``stream``."""
    return ZigguratSampler(table, max_attempts).sample(stream)


def draw_traced(
    table: ZigguratTable,
    stream: SamplingStream,
    max_attempts: int = MAX_SAMPLING_ATTEMPTS,
) -> DrawResult:
    """Like ``draw``, also reporting the path taken and the attempts used."""
    return ZigguratSampler(table, max_attempts).sample_traced(stream)


def fill(
    table: ZigguratTable,
    stream: SamplingStream,
    size: int | tuple[int, ...],
    max_attempts: int = MAX_SAMPLING_ATTEMPTS,
) -> np.ndarray:
    """Draw an array of ``size`` variates from ``table``."""
    return ZigguratSampler(table, max_attempts).fill(stream, size)
