"""Tests for the public sampling entry points."""

import numpy as np
import pytest
from scipy import stats

import zigrng
from zigrng import (
    PolynomialDensity,
    PowerDensity,
    SamplingStream,
    TableConstructionError,
    build_polynomial_table,
    default_table,
    sample_array,
    sample_exponential,
    sample_gaussian,
    sample_normal,
    sample_polynomial,
    sample_power_polynomial,
)
from zigrng.densities import NormalDensity


@pytest.fixture(scope="module")
def power_table():
    return build_polynomial_table(PowerDensity(51))


class TestNormalAndExponential:
    def test_sample_normal_is_deterministic(self):
        a = [sample_normal(SamplingStream(seed=17)) for _ in range(3)]
        assert a[0] == a[1] == a[2]

    def test_gaussian_scales_normal(self):
        z = sample_normal(SamplingStream(seed=5))
        assert sample_gaussian(SamplingStream(seed=5), sigma=2.5) == 2.5 * z
        assert sample_gaussian(SamplingStream(seed=5)) == z

    def test_exponential_non_negative(self, stream):
        assert all(sample_exponential(stream) >= 0 for _ in range(2000))

    def test_sample_array_by_name(self):
        values = sample_array(SamplingStream(seed=1), 100, distribution="exponential")
        stream = SamplingStream(seed=1)
        np.testing.assert_array_equal(values, [sample_exponential(stream) for _ in range(100)])

    def test_sample_array_default_is_normal(self):
        values = sample_array(SamplingStream(seed=1), (4, 5))
        assert values.shape == (4, 5)
        assert values.min() < 0 < values.max()

    def test_sample_array_unknown_name(self, stream):
        with pytest.raises(KeyError, match="not registered"):
            sample_array(stream, 10, distribution="cauchy")


class TestPolynomial:
    def test_build_polynomial_table(self, power_table):
        assert power_table.kind.value == "polynomial"
        assert power_table.n == 256
        assert power_table.bits == 32

    def test_build_rejects_other_kinds(self):
        with pytest.raises(TableConstructionError, match="polynomial"):
            build_polynomial_table(NormalDensity())

    def test_general_polynomial(self, stream):
        table = build_polynomial_table(PolynomialDensity([1.0, -1.0]), n=32)
        values = [sample_polynomial(stream, table) for _ in range(2000)]
        assert 0.0 <= min(values) and max(values) < 1.0

    def test_samples_in_unit_interval(self, power_table, stream):
        values = sample_array(stream, 5000, distribution=power_table)
        assert np.all((values >= 0) & (values < 1))

    def test_non_polynomial_table_warns(self, stream):
        with pytest.warns(UserWarning, match="normal table"):
            sample_polynomial(stream, default_table("normal"))

    def test_ziggurat_matches_beta(self, power_table):
        stream = SamplingStream(seed=42)
        values = [sample_polynomial(stream, power_table) for _ in range(20_000)]
        assert stats.kstest(values, stats.beta(1, 52).cdf).pvalue > 0.001


class TestPowerPolynomialInversion:
    def test_one_word_per_variate(self):
        stream = SamplingStream(seed=1)
        for _ in range(10):
            sample_power_polynomial(stream, 51)
        assert stream.words_drawn == 10

    def test_known_value(self):
        stream = SamplingStream.from_words([1 << 63])
        assert sample_power_polynomial(stream, 1) == pytest.approx(1 - 0.5**0.5)

    def test_degree_zero_is_uniform(self):
        stream = SamplingStream.from_words([1 << 63])
        assert sample_power_polynomial(stream, 0) == 0.5

    def test_negative_degree(self, stream):
        with pytest.raises(ValueError, match="degree"):
            sample_power_polynomial(stream, -1)

    def test_matches_beta(self):
        stream = SamplingStream(seed=42)
        values = [sample_power_polynomial(stream, 51) for _ in range(20_000)]
        assert stats.kstest(values, stats.beta(1, 52).cdf).pvalue > 0.001


def test_version():
    assert isinstance(zigrng.__version__, str)
