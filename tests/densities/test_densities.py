"""Tests for the density descriptors."""

import math

import numpy as np
import pytest
from numpy.polynomial import Polynomial
from scipy import integrate, stats

from zigrng.densities import (
    DensityDescriptor,
    DistributionKind,
    ExponentialDensity,
    NormalDensity,
    PolynomialDensity,
    PowerDensity,
)
from zigrng.exceptions import (
    SamplingLoopExceeded,
    TableConstructionError,
    UniformSourceExhausted,
)
from zigrng.streams import SamplingStream
from zigrng.tables import build_table

DESCRIPTORS = [
    NormalDensity(),
    ExponentialDensity(),
    PolynomialDensity([1.0, 0.0, -1.0]),
    PowerDensity(5),
]


@pytest.mark.parametrize("descriptor", DESCRIPTORS, ids=repr)
class TestDescriptorContract:
    """Properties every descriptor must satisfy."""

    def test_inverse_round_trip(self, descriptor):
        upper = min(descriptor.support, 5.0)
        for x in np.linspace(0.01, 0.95 * upper, 25):
            y = descriptor.half_density(x)
            assert descriptor.inverse_half_density(y) == pytest.approx(x, rel=1e-9)

    def test_strictly_decreasing(self, descriptor):
        upper = min(descriptor.support, 5.0)
        values = [descriptor.half_density(x) for x in np.linspace(0.0, upper, 200)]
        assert np.all(np.diff(values[:-1]) < 0)

    def test_tail_area_matches_quadrature(self, descriptor):
        r = 0.3 * min(descriptor.support, 4.0)
        expected, _ = integrate.quad(
            descriptor.half_density, r, descriptor.support, epsabs=1e-13
        )
        assert descriptor.tail_area(r) == pytest.approx(expected, rel=1e-8)

    def test_tail_sample_beyond_r(self, descriptor):
        r = 0.5 * min(descriptor.support, 4.0)
        stream = SamplingStream(seed=7)
        samples = [descriptor.tail_sample(r, stream) for _ in range(2000)]
        assert min(samples) > r
        assert max(samples) <= descriptor.support

    def test_peak(self, descriptor):
        assert descriptor.peak == descriptor.half_density(0.0) > 0


class TestNormalDensity:
    def test_values(self):
        d = NormalDensity()
        assert d.kind is DistributionKind.NORMAL
        assert d.is_symmetric
        assert d.half_density(1.0) == pytest.approx(math.exp(-0.5))
        assert d.support == math.inf

    def test_tail_area_is_scaled_normal_sf(self):
        d = NormalDensity()
        expected = math.sqrt(2 * math.pi) * stats.norm.sf(3.6541528853610088)
        assert d.tail_area(3.6541528853610088) == pytest.approx(expected, rel=1e-12)

    def test_tail_sample_distribution(self):
        """Tail draws follow the normal distribution conditioned on x > r."""
        d = NormalDensity()
        r = 3.0
        stream = SamplingStream(seed=11)
        samples = [d.tail_sample(r, stream) for _ in range(5000)]
        tail = stats.truncnorm(a=r, b=np.inf)
        assert stats.kstest(samples, tail.cdf).pvalue > 0.001

    def test_tail_rejection_consumes_words(self):
        """A rejected tail proposal costs two words; exhaustion propagates."""
        # U1 close to 0 makes x huge; U2 close to 1 makes y tiny: reject
        stream = SamplingStream.from_words([0, 2**64 - 1])
        with pytest.raises(UniformSourceExhausted):
            NormalDensity().tail_sample(3.0, stream)
        assert stream.words_drawn == 2

    def test_tail_attempt_cap(self):
        stream = SamplingStream.from_words([0, 2**64 - 1] * 3)
        with pytest.raises(SamplingLoopExceeded):
            NormalDensity().tail_sample(3.0, stream, max_attempts=3)


class TestExponentialDensity:
    def test_values(self):
        d = ExponentialDensity()
        assert d.kind is DistributionKind.EXPONENTIAL
        assert not d.is_symmetric
        assert d.inverse_half_density(math.exp(-2.5)) == pytest.approx(2.5)

    def test_tail_is_shifted_exponential(self):
        stream = SamplingStream.from_words([1 << 63])
        value = ExponentialDensity().tail_sample(7.5, stream)
        assert value == pytest.approx(7.5 + math.log(2.0), rel=1e-12)


class TestPolynomialDensity:
    def test_evaluation_and_support(self):
        d = PolynomialDensity([2.0, -1.0], support=2.0)
        assert d.kind is DistributionKind.POLYNOMIAL
        assert d.half_density(0.5) == pytest.approx(1.5)
        assert d.half_density(2.0) == 0.0
        assert d.half_density(3.0) == 0.0
        assert d.tail_area(1.0) == pytest.approx(0.5)
        assert d.tail_area(2.5) == 0.0
        np.testing.assert_array_equal(d.coefficients, [2.0, -1.0])

    def test_inverse_edges(self):
        d = PolynomialDensity([1.0, -1.0])
        assert d.inverse_half_density(1.0) == 0.0
        assert d.inverse_half_density(0.0) == 1.0

    @pytest.mark.parametrize(
        "coefficients",
        [
            [1.0, 0.0, 1.0],  # increasing
            [0.5, 0.0, -4.0],  # negative before the support ends
            [1.0, -3.0, 3.0],  # dips and rises again
            [0.0, -1.0],  # zero at the origin
        ],
    )
    def test_rejects_bad_shapes(self, coefficients):
        with pytest.raises(TableConstructionError):
            PolynomialDensity(coefficients)

    @pytest.mark.parametrize(
        "coefficients,support",
        [([], 1.0), ([1.0, np.nan], 1.0), ([1.0, -0.1], 0.0), ([1.0], math.inf)],
    )
    def test_rejects_bad_parameters(self, coefficients, support):
        with pytest.raises(TableConstructionError):
            PolynomialDensity(coefficients, support=support)

    @pytest.mark.parametrize("degree", range(2, 12))
    def test_expanded_power_with_root_at_support(self, degree):
        """Rounding in the expanded form of (1 - x)**degree near x = 1 is tolerated."""
        d = PolynomialDensity((Polynomial([1.0, -1.0]) ** degree).coef)
        assert d.half_density(0.3) == pytest.approx(0.7**degree, rel=1e-12)
        assert d.tail_area(0.0) == pytest.approx(1 / (degree + 1), rel=1e-10)

    def test_expanded_power_builds_table(self):
        table = build_table(PolynomialDensity(PowerDensity(9).coefficients), n=16)
        assert 0.0 < table.r < 1.0
        np.testing.assert_allclose(table.layer_areas(), table.v, rtol=1e-9)

    def test_rejects_positive_value_at_support(self):
        with pytest.raises(TableConstructionError, match="must vanish"):
            PolynomialDensity([2.0, -1.0])
        # The same line ends at zero on a wider support
        assert PolynomialDensity([2.0, -1.0], support=2.0).half_density(1.0) == 1.0

    def test_tail_sample_distribution(self):
        d = PolynomialDensity([1.0, 0.0, -1.0])
        r = 0.4
        stream = SamplingStream(seed=5)
        samples = np.array([d.tail_sample(r, stream) for _ in range(5000)])

        def cdf(x):
            x = np.clip(x, r, 1.0)
            return 1.0 - np.array([d.tail_area(v) for v in np.atleast_1d(x)]) / d.tail_area(r)

        assert stats.kstest(samples, cdf).pvalue > 0.001


class TestPowerDensity:
    def test_matches_expanded_polynomial(self):
        d = PowerDensity(7)
        expanded = PolynomialDensity(d.coefficients)
        for x in [0.0, 0.1, 0.5]:
            assert d.half_density(x) == pytest.approx(expanded.half_density(x), rel=1e-10)
            assert d.tail_area(x) == pytest.approx(expanded.tail_area(x), rel=1e-8)

    def test_high_degree_is_accurate(self):
        d = PowerDensity(51)
        assert d.half_density(0.5) == 0.5**51
        assert d.tail_area(0.0) == pytest.approx(1 / 52)

    @pytest.mark.parametrize("degree", [150, 200, 1000])
    def test_degrees_above_hundred(self, degree):
        d = PowerDensity(degree)
        assert d.tail_area(0.0) == pytest.approx(1 / (degree + 1))
        assert d.inverse_half_density(d.half_density(0.01)) == pytest.approx(
            0.01, rel=1e-9
        )

    def test_coefficients_of_high_degree(self):
        coefficients = PowerDensity(200).coefficients
        assert coefficients.shape == (201,)
        assert coefficients[0] == 1.0
        assert coefficients[1] == -200.0
        assert coefficients[-1] == 1.0

    @pytest.mark.parametrize("degree", [0, -2, 1.5, True])
    def test_invalid_degree(self, degree):
        with pytest.raises(TableConstructionError, match="degree"):
            PowerDensity(degree)

    def test_tail_sample_distribution(self):
        """(1 - X) / (1 - r) is Beta(degree + 1, 1) on the tail."""
        d = PowerDensity(3)
        r = 0.2
        stream = SamplingStream(seed=9)
        samples = np.array([d.tail_sample(r, stream) for _ in range(5000)])
        scaled = (1.0 - samples) / (1.0 - r)
        assert stats.kstest(scaled, stats.beta(4, 1).cdf).pvalue > 0.001
        assert repr(d) == "PowerDensity(degree=3)"


def test_descriptor_is_abstract():
    with pytest.raises(TypeError):
        DensityDescriptor()
