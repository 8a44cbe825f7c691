"""Exception hierarchy for the Ziggurat samplers.

None of these errors is recoverable inside the package: they are raised where
the problem is detected and propagate to the caller unchanged.
"""


class ZigguratError(Exception):
    """Base class for all errors raised by zigrng."""


class TableConstructionError(ZigguratError, ValueError):
    """A density or its table parameters cannot produce a valid Ziggurat table.

    Raised for invalid density parameters, non-finite table entries, tables
    that are not monotone, and tables whose layers do not share a common
    area within tolerance.
    """


class UniformSourceError(ZigguratError):
    """The uniform-bit source could not deliver a word."""


class UniformSourceExhausted(UniformSourceError):
    """A finite (replayed) word sequence ran out."""


class UniformSourceFailure(UniformSourceError):
    """The uniform-bit source produced something that is not a 64-bit word."""


class SamplingLoopExceeded(ZigguratError, RuntimeError):
    """A rejection loop ran past its attempt cap.

    Correct tables accept with probability bounded away from zero, so this
    indicates a corrupted table or density.
    """
