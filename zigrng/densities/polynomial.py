"""Monotone polynomial densities on a bounded support.

Two descriptors live here:

- ``PolynomialDensity``: any polynomial that is positive and strictly
  decreasing on ``[0, support)``. It has no closed-form inverse, so table
  construction inverts it numerically with ``scipy.optimize.brentq``, and the
  tail is sampled by rejection from a uniform envelope.
- ``PowerDensity``: the special case ``(1 - x)**degree`` on ``[0, 1]``, i.e. a
  Beta(1, degree + 1) distribution. Inverse, tail area and tail sampler are
  all closed form.
"""

import math

import numpy as np
from numpy.polynomial import Polynomial
from numpy.polynomial.polynomial import polypow
from scipy.optimize import brentq

from zigrng.config import MAX_SAMPLING_ATTEMPTS
from zigrng.densities.base import DensityDescriptor, DistributionKind
from zigrng.exceptions import SamplingLoopExceeded, TableConstructionError

# Grid resolution used to check monotonicity at construction.
_SHAPE_CHECK_POINTS = 1025
_BRENTQ_XTOL = 1e-300


class PolynomialDensity(DensityDescriptor):
    """Polynomial half-density ``sum(c[j] * x**j)`` on ``[0, support]``.

    Parameters
    ----------
    coefficients : array-like
        Coefficients in increasing order of degree.
    support : float
        Right end of the support. The density is zero beyond it.

    The polynomial must be positive and strictly decreasing on
    ``[0, support)`` and vanish at ``support``: the base layer of a table
    ends in a tail that thins out to zero, so a density that is cut off at a
    positive height cannot be layered.

    Raises
    ------
    TableConstructionError
        If the coefficients are empty or non-finite, the support is not a
        positive finite number, or the polynomial does not have the shape
        above (up to rounding in its expanded form).

    Examples
    --------
    >>> density = PolynomialDensity([1.0, 0.0, -1.0])  # 1 - x**2 on [0, 1]
    >>> density.half_density(0.5)
    0.75
    """

    kind = DistributionKind.POLYNOMIAL
    is_symmetric = False

    def __init__(self, coefficients, support: float = 1.0):
        coefficients = np.asarray(coefficients, dtype=np.float64)
        if coefficients.ndim != 1 or coefficients.size == 0:
            raise TableConstructionError(
                "Polynomial coefficients must be a non-empty 1-d sequence."
            )
        if not np.all(np.isfinite(coefficients)):
            raise TableConstructionError("Polynomial coefficients must be finite.")
        if not (math.isfinite(support) and support > 0):
            raise TableConstructionError(
                f"Polynomial support must be positive and finite, got {support!r}"
            )

        self._poly = Polynomial(coefficients)
        self._integral = self._poly.integ()
        self._support = float(support)
        self._check_shape()

    def _check_shape(self) -> None:
        coef = self._poly.coef
        # Rounding error bound of the expanded form anywhere on the support
        magnitude = float(np.abs(coef) @ self._support ** np.arange(coef.size))
        noise = 4 * coef.size * np.finfo(np.float64).eps * magnitude

        if abs(float(self._poly(self._support))) > noise:
            raise TableConstructionError(
                f"{self!r} must vanish at the end of its support, got "
                f"{float(self._poly(self._support))!r} at x={self._support!r}."
            )

        grid = np.linspace(0.0, self._support, _SHAPE_CHECK_POINTS)
        values = self._poly(grid)
        if not values[0] > noise or np.any(values < -noise):
            raise TableConstructionError(
                f"{self!r} must be positive on [0, {self._support})."
            )
        steps = np.diff(values)
        # Steps within rounding noise carry no sign, so strictness is only
        # required well above it.
        if np.any(steps > noise) or np.any(steps[values[1:] > 16 * noise] >= 0):
            raise TableConstructionError(
                f"{self!r} must be strictly decreasing on [0, {self._support})."
            )

    @property
    def coefficients(self) -> np.ndarray:
        return self._poly.coef.copy()

    @property
    def support(self) -> float:
        return self._support

    def half_density(self, x: float) -> float:
        if x >= self._support:
            return 0.0
        return float(self._poly(x))

    def inverse_half_density(self, y: float) -> float:
        """Solve ``half_density(x) == y`` on ``[0, support]`` by root finding."""
        if y >= self.peak:
            return 0.0
        if y <= self.half_density(self._support):
            return self._support
        return brentq(
            lambda x: float(self._poly(x)) - y,
            0.0,
            self._support,
            xtol=_BRENTQ_XTOL,
        )

    def tail_area(self, r: float) -> float:
        if r >= self._support:
            return 0.0
        return float(self._integral(self._support) - self._integral(r))

    def tail_sample(
        self, r: float, stream, max_attempts: int = MAX_SAMPLING_ATTEMPTS
    ) -> float:
        """Rejection from the box ``[r, support] x [0, f(r)]``.

        The density is decreasing, so ``f(r)`` bounds it on the tail and the
        acceptance rate is ``tail_area(r) / ((support - r) * f(r))``.
        """
        ceiling = self.half_density(r)
        width = self._support - r
        for _ in range(max_attempts):
            x = r + width * stream.uniform_open()
            if stream.uniform() * ceiling < self.half_density(x) and x > r:
                return x
        raise SamplingLoopExceeded(
            f"Polynomial tail sampler exceeded {max_attempts} attempts (r={r!r})."
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(coefficients={self._poly.coef.tolist()}, "
            f"support={self._support!r})"
        )


class PowerDensity(PolynomialDensity):
    """The density ``(1 - x)**degree`` on ``[0, 1]``.

    Evaluated in factored form, so high degrees stay accurate where the
    expanded coefficients would cancel catastrophically. The expansion is
    only built when ``coefficients`` is requested.
    """

    def __init__(self, degree: int):
        if isinstance(degree, bool) or int(degree) != degree or degree < 1:
            raise TableConstructionError(
                f"PowerDensity degree must be a positive integer, got {degree!r}"
            )
        self.degree = int(degree)
        # Closed-form methods below replace every use of the expanded form.
        self._support = 1.0

    @property
    def coefficients(self) -> np.ndarray:
        return polypow([1.0, -1.0], self.degree, maxpower=self.degree)

    def half_density(self, x: float) -> float:
        if x >= 1.0:
            return 0.0
        return (1.0 - x) ** self.degree

    def inverse_half_density(self, y: float) -> float:
        return 1.0 - y ** (1.0 / self.degree)

    def tail_area(self, r: float) -> float:
        if r >= 1.0:
            return 0.0
        return (1.0 - r) ** (self.degree + 1) / (self.degree + 1)

    def tail_sample(
        self, r: float, stream, max_attempts: int = MAX_SAMPLING_ATTEMPTS
    ) -> float:
        """Exact inversion: ``(1 - x) / (1 - r)`` is distributed as ``U**(1/(degree+1))``."""
        exponent = 1.0 / (self.degree + 1)
        for _ in range(max_attempts):
            x = 1.0 - (1.0 - r) * stream.uniform_open() ** exponent
            if x > r:
                return x
        raise SamplingLoopExceeded(
            f"Power tail sampler exceeded {max_attempts} attempts (r={r!r})."
        )

    def __repr__(self) -> str:
        return f"PowerDensity(degree={self.degree})"
