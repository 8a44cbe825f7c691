"""Construction of Ziggurat tables.

The area under a half-density is cut into ``n`` horizontal layers of equal
area ``v``. Layer ``i`` is the strip ``y[i] <= y <= y[i+1]``; its bounding
rectangle has width ``x[i]`` and its inscribed rectangle width ``x[i+1]``.
The base layer (``i = 0``) holds the rectangle ``[0, r] x [0, f(r)]`` plus the
whole tail beyond ``r``, folded into a pseudo-width ``x[0] = v / f(r)``.

Starting from the tail boundary ``r`` the boundaries are back-substituted
upward, ``x[i+1] = f^-1(f(x[i]) + v / x[i])``, until the top layer, whose
area is whatever is left under the peak. Only one ``r`` per ``n`` makes that
last area equal ``v``; ``build_table`` checks it and ``solve_tail_boundary``
finds it.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from scipy.optimize import brentq

from zigrng.config import EQUAL_AREA_RTOL
from zigrng.densities.base import DensityDescriptor, DistributionKind
from zigrng.exceptions import TableConstructionError

logger = logging.getLogger(__name__)

_BRENTQ_XTOL = 1e-300
_BRENTQ_MAXITER = 500


@dataclass(frozen=True, eq=False, repr=False)
class ZigguratTable:
    """Immutable Ziggurat table for one density.

    Attributes
    ----------
    descriptor : DensityDescriptor
        The density the table partitions.
    n : int
        Number of layers, a power of two.
    r : float
        Tail boundary; the base layer's rectangle ends here.
    v : float
        Common area of every layer.
    bits : int
        Width W of the magnitude part of a uniform word.
    x : np.ndarray
        ``n + 1`` layer widths, strictly decreasing from ``x[0] = v / f(r)``
        through ``x[1] = r`` to ``x[n] = 0``.
    y : np.ndarray
        ``n + 1`` layer floors, strictly increasing from ``y[0] = 0`` through
        ``y[1] = f(r)`` to ``y[n] = f(0)``; ``y[i] = f(x[i])`` for ``i >= 1``.
    k : np.ndarray
        ``n`` fast-path thresholds, ``floor(2**W * x[i+1] / x[i])``.
    w : np.ndarray
        ``n`` scale factors, ``x[i] / 2**W``.

    All arrays are read-only, so a table can be shared freely between threads.
    """

    descriptor: DensityDescriptor
    n: int
    r: float
    v: float
    bits: int
    x: np.ndarray
    y: np.ndarray
    k: np.ndarray
    w: np.ndarray
    lookup: tuple = field(init=False, compare=False)

    def __post_init__(self):
        for name in ("x", "y", "k", "w"):
            getattr(self, name).flags.writeable = False
        # Plain Python sequences for the per-draw hot path.
        object.__setattr__(
            self,
            "lookup",
            (
                tuple(self.x.tolist()),
                tuple(self.y.tolist()),
                tuple(int(k) for k in self.k.tolist()),
                tuple(self.w.tolist()),
            ),
        )

    @property
    def kind(self) -> DistributionKind:
        return self.descriptor.kind

    @property
    def layer_bits(self) -> int:
        """Number of bits L needed to index a layer."""
        return self.n.bit_length() - 1

    def layer_areas(self) -> np.ndarray:
        """Area of each layer's bounding rectangle, ``x[i] * (y[i+1] - y[i])``."""
        return self.x[:-1] * np.diff(self.y)

    def base_area(self) -> float:
        """Area of the base layer computed from its rectangle and the exact tail."""
        return self.r * float(self.y[1]) + self.descriptor.tail_area(self.r)

    def as_dict(self) -> dict[str, Any]:
        """Plain-Python view of the table, suitable for YAML or JSON dumps."""
        return {
            "distribution": self.kind.value,
            "n": self.n,
            "r": self.r,
            "v": self.v,
            "bits": self.bits,
            "x": self.x.tolist(),
            "y": self.y.tolist(),
            "k": [int(k) for k in self.k.tolist()],
            "w": self.w.tolist(),
        }

    def __repr__(self) -> str:
        return (
            f"ZigguratTable({self.descriptor!r}, n={self.n}, r={self.r!r}, "
            f"v={self.v!r}, bits={self.bits})"
        )


def _check_layout(n: int, bits: int | None = None) -> None:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 2:
        raise TableConstructionError(f"Layer count must be an integer >= 2, got {n!r}")
    if n & (n - 1):
        raise TableConstructionError(f"Layer count must be a power of two, got {n}")
    if bits is not None:
        layer_bits = int(n).bit_length() - 1
        # magnitude, layer index and sign must fit in one 64-bit word
        if bits < 1 or bits + layer_bits + 1 > 64:
            raise TableConstructionError(
                f"bits={bits} with n={n} layers does not fit a 64-bit word."
            )


def _stack_layers(
    descriptor: DensityDescriptor, n: int, r: float
) -> tuple[float, list[float], list[float]]:
    """Back-substitute layer boundaries upward from the tail boundary.

    Returns ``v`` and the boundaries ``x[1:]``, ``y[1:]`` computed before the
    running height reached the peak. A complete stack has ``n - 1`` entries.
    """
    f_r = descriptor.half_density(r)
    v = r * f_r + descriptor.tail_area(r)
    peak = descriptor.peak

    xs = [r]
    ys = [f_r]
    for _ in range(n - 2):
        height = ys[-1] + v / xs[-1]
        if not height < peak:
            break
        x_next = descriptor.inverse_half_density(height)
        if not x_next > 0:
            break
        xs.append(x_next)
        ys.append(descriptor.half_density(x_next))
    return v, xs, ys


def closure_residual(descriptor: DensityDescriptor, n: int, r: float) -> float:
    """Signed relative mismatch of the top layer's area for tail boundary ``r``.

    Zero when ``n`` layers of area ``v`` exactly fill the density. Positive
    when area is left over at the top (``r`` too large), negative when the
    layers reach the peak early (``r`` too small); in that case the value is
    minus the number of layers that did not fit.
    """
    v, xs, ys = _stack_layers(descriptor, n, r)
    if not v > 0:
        return math.inf
    if len(xs) < n - 1:
        return -float(n - 1 - len(xs))
    return (xs[-1] * (descriptor.peak - ys[-1]) - v) / v


def solve_tail_boundary(
    descriptor: DensityDescriptor,
    n: int = 256,
    bracket: tuple[float, float] | None = None,
) -> float:
    """Find the tail boundary ``r`` that closes the partition into ``n`` layers.

    Parameters
    ----------
    descriptor : DensityDescriptor
        Density to partition.
    n : int
        Number of layers, a power of two.
    bracket : tuple of float, optional
        Interval known to contain the root. By default it is derived from
        the support, doubling the upper end for unbounded densities.

    Returns
    -------
    float
        The tail boundary, to machine precision.

    Raises
    ------
    TableConstructionError
        If no sign change of the closure residual can be bracketed.
    """
    _check_layout(n)
    support = descriptor.support

    if bracket is not None:
        lower, upper = (float(b) for b in bracket)
    else:
        bounded = math.isfinite(support)
        lower, upper = (support * 1e-6, 0.5 * support) if bounded else (1e-3, 1.0)
        while closure_residual(descriptor, n, upper) <= 0:
            # bounded supports approach their end, unbounded ones double
            lower, upper = upper, (0.5 * (upper + support) if bounded else 2.0 * upper)
            if not descriptor.half_density(upper) > 0:
                raise TableConstructionError(
                    f"Could not bracket a tail boundary for {descriptor!r} "
                    f"with n={n} before the density underflows."
                )

    if not (
        closure_residual(descriptor, n, lower) < 0
        < closure_residual(descriptor, n, upper)
    ):
        raise TableConstructionError(
            f"Closure residual of {descriptor!r} does not change sign on "
            f"[{lower!r}, {upper!r}] for n={n}."
        )

    r = brentq(
        lambda r: closure_residual(descriptor, n, r),
        lower,
        upper,
        xtol=_BRENTQ_XTOL,
        maxiter=_BRENTQ_MAXITER,
    )
    logger.debug("Solved tail boundary for %r with n=%d: r=%.17g", descriptor, n, r)
    return r


def build_table(
    descriptor: DensityDescriptor,
    n: int = 256,
    r: float | None = None,
    bits: int = 32,
    rtol: float = EQUAL_AREA_RTOL,
) -> ZigguratTable:
    """Build the Ziggurat table of a density.

    Parameters
    ----------
    descriptor : DensityDescriptor
        Density to partition.
    n : int
        Number of layers, a power of two. Defaults to 256.
    r : float or None
        Tail boundary. ``None`` solves it with ``solve_tail_boundary``.
    bits : int
        Width W of the magnitude part of each uniform word. ``bits``, the
        ``log2(n)`` layer bits and one sign bit must fit in 64 bits.
    rtol : float
        Relative tolerance of the equal-area check.

    Returns
    -------
    ZigguratTable

    Raises
    ------
    TableConstructionError
        If the parameters are invalid, any entry is non-finite, the boundaries
        are not strictly monotone, or some layer's area differs from ``v`` by
        more than ``rtol`` (which is what an ``r`` inconsistent with ``n``
        produces).

    Examples
    --------
    >>> from zigrng.densities import NormalDensity
    >>> table = build_table(NormalDensity(), n=256, r=3.6541528853610088, bits=31)
    >>> table.x[1] == table.r
    True
    """
    _check_layout(n, bits)
    if r is None:
        r = solve_tail_boundary(descriptor, n)
    r = float(r)
    if not (math.isfinite(r) and 0.0 < r < descriptor.support):
        raise TableConstructionError(
            f"Tail boundary must lie inside the support of {descriptor!r}, got r={r!r}"
        )

    v, xs, ys = _stack_layers(descriptor, n, r)
    if not (math.isfinite(v) and v > 0 and ys[0] > 0):
        raise TableConstructionError(
            f"Degenerate layer area v={v!r} for {descriptor!r} at r={r!r}"
        )
    if len(xs) < n - 1:
        raise TableConstructionError(
            f"Layers of {descriptor!r} reach the peak after {len(xs)} of {n} layers; "
            f"r={r!r} is too small for n={n}."
        )

    x = np.array([v / ys[0], *xs, 0.0])
    y = np.array([0.0, *ys, descriptor.peak])
    _check_boundaries(descriptor, x, y, v, rtol, n, r)

    scale = float(1 << bits)
    ratios = (x[1:] / x[:-1]).tolist()
    k = np.array([int(ratio * scale) for ratio in ratios], dtype=np.uint64)
    w = x[:-1] / scale

    table = ZigguratTable(
        descriptor=descriptor, n=int(n), r=r, v=v, bits=int(bits), x=x, y=y, k=k, w=w
    )
    logger.debug("Built %r", table)
    return table


def _check_boundaries(descriptor, x, y, v, rtol, n, r) -> None:
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        raise TableConstructionError(
            f"Non-finite table entries for {descriptor!r} (n={n}, r={r!r})"
        )
    if np.any(np.diff(x) >= 0):
        raise TableConstructionError(
            f"Layer widths of {descriptor!r} are not strictly decreasing (n={n}, r={r!r})"
        )
    if np.any(np.diff(y) <= 0):
        raise TableConstructionError(
            f"Layer floors of {descriptor!r} are not strictly increasing (n={n}, r={r!r})"
        )

    mismatch = np.abs(x[:-1] * np.diff(y) - v) / v
    worst = int(np.argmax(mismatch))
    if mismatch[worst] > rtol:
        raise TableConstructionError(
            f"Layer {worst} of {descriptor!r} has relative area error "
            f"{mismatch[worst]:.3e} > {rtol:g}; r={r!r} does not close the "
            f"partition into n={n} layers."
        )
