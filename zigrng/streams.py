"""Uniform-bit streams consumed by the Ziggurat sampling engine.

A ``SamplingStream`` is the only mutable state involved in drawing a variate.
It is owned by exactly one caller; parallel workers get their own streams via
``SamplingStream.spawn``.
"""

import itertools
import operator
from collections.abc import Callable, Iterable

import numpy as np

from zigrng.config import DEFAULT_BUFFER_SIZE
from zigrng.exceptions import UniformSourceExhausted, UniformSourceFailure

_WORD_LIMIT = 1 << 64
_TWO_NEG_52 = 2.0**-52
_TWO_NEG_53 = 2.0**-53


class SamplingStream:
    """Source of 64-bit uniform words, with helpers for uniform floats.

    Words come from a ``numpy.random.Generator`` (PCG64 unless another bit
    generator is supplied) and are fetched in blocks with ``random_raw``.
    Blocking does not change the word sequence, so a seed always replays the
    same draws, including rejected attempts.

    Examples
    --------
    >>> stream = SamplingStream(seed=42)
    >>> word = stream.next_word()
    >>> u = stream.uniform()
    >>> workers = stream.spawn(4)
    """

    def __init__(
        self,
        seed: int | np.random.SeedSequence | None = None,
        generator: np.random.Generator | np.random.BitGenerator | None = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        """Initialize a stream.

        Parameters
        ----------
        seed : int, SeedSequence or None
            Seed for a fresh PCG64 generator. Ignored when ``generator`` is given.
        generator : numpy.random.Generator, BitGenerator or None
            Externally supplied generator to draw words from.
        buffer_size : int
            Number of words fetched per refill.

        Raises
        ------
        ValueError
            If both ``seed`` and ``generator`` are given, or ``buffer_size < 1``.
        TypeError
            If ``generator`` is neither a Generator nor a BitGenerator.
        """
        if seed is not None and generator is not None:
            raise ValueError("Pass either a seed or a generator, not both.")
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")

        if generator is None:
            generator = np.random.default_rng(seed)
        elif isinstance(generator, np.random.BitGenerator):
            generator = np.random.Generator(generator)
        elif not isinstance(generator, np.random.Generator):
            raise TypeError(
                "generator must be a numpy.random.Generator or BitGenerator, "
                f"got {type(generator).__name__}"
            )

        bit_generator = generator.bit_generator
        self._generator = generator
        self._buffer_size = buffer_size
        self._init_source(lambda: bit_generator.random_raw(buffer_size).tolist())

    @classmethod
    def from_words(cls, words: Iterable[int]) -> "SamplingStream":
        """Create a stream that replays an explicit sequence of 64-bit words.

        Used to drive the sampler deterministically from a recorded or
        externally generated word sequence. Once the words run out every
        further draw raises ``UniformSourceExhausted``.
        """
        iterator = iter(words)

        def refill() -> list[int]:
            chunk = list(itertools.islice(iterator, DEFAULT_BUFFER_SIZE))
            if not chunk:
                raise UniformSourceExhausted("Replayed word sequence is exhausted.")
            return [_as_word(word) for word in chunk]

        stream = cls.__new__(cls)
        stream._generator = None
        stream._buffer_size = DEFAULT_BUFFER_SIZE
        stream._init_source(refill)
        return stream

    def _init_source(self, refill: Callable[[], list[int]]) -> None:
        self._refill = refill
        self._buffer: list[int] = []
        self._pos = 0
        self.words_drawn = 0

    @property
    def generator(self) -> np.random.Generator | None:
        """The wrapped numpy generator, ``None`` for replayed streams.

        Words are fetched from it in blocks, so its state runs up to
        ``buffer_size`` words ahead of the stream. Drawing from it directly
        changes the words every later refill delivers, and a seed no longer
        replays the same variates.
        """
        return self._generator

    def next_word(self) -> int:
        """Return the next 64-bit uniform word as a Python int."""
        if self._pos >= len(self._buffer):
            self._buffer = self._refill()
            self._pos = 0
        word = self._buffer[self._pos]
        self._pos += 1
        self.words_drawn += 1
        return word

    def uniform(self) -> float:
        """Uniform float in [0, 1) from the top 53 bits of one word."""
        return (self.next_word() >> 11) * _TWO_NEG_53

    def uniform_open(self) -> float:
        """Uniform float in the open interval (0, 1), safe to take the log of."""
        return ((self.next_word() >> 12) + 0.5) * _TWO_NEG_52

    def spawn(self, n_children: int) -> list["SamplingStream"]:
        """Create independent child streams for parallel workers.

        Raises
        ------
        ValueError
            If the stream replays explicit words and has no generator to spawn from.
        """
        if self._generator is None:
            raise ValueError("Cannot spawn children from a replayed word stream.")
        return [
            SamplingStream(generator=child, buffer_size=self._buffer_size)
            for child in self._generator.spawn(n_children)
        ]

    def __repr__(self) -> str:
        source = "replay" if self._generator is None else type(
            self._generator.bit_generator
        ).__name__
        return f"SamplingStream(source={source}, words_drawn={self.words_drawn})"


def _as_word(word) -> int:
    try:
        value = operator.index(word)
    except TypeError as e:
        raise UniformSourceFailure(
            f"Uniform source produced a non-integer word: {word!r}"
        ) from e
    if not 0 <= value < _WORD_LIMIT:
        raise UniformSourceFailure(
            f"Uniform source produced a value outside the 64-bit range: {value}"
        )
    return value
