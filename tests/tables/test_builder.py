"""Tests for Ziggurat table construction."""

import math

import numpy as np
import pytest
from scipy import integrate

from zigrng.densities import (
    ExponentialDensity,
    NormalDensity,
    PolynomialDensity,
    PowerDensity,
)
from zigrng.exceptions import TableConstructionError
from zigrng.tables import ZigguratTable, build_table, closure_residual, solve_tail_boundary

NORMAL_R = 3.6541528853610088
EXPONENTIAL_R = 7.69711747013104972


@pytest.fixture(scope="module")
def normal():
    return build_table(NormalDensity(), n=256, r=NORMAL_R, bits=31)


@pytest.fixture(scope="module")
def power_table():
    return build_table(PowerDensity(51), n=256)


def assert_valid_layout(table: ZigguratTable, rtol: float = 1e-9):
    """Shared structural checks for any built table."""
    n = table.n
    assert table.x.shape == (n + 1,)
    assert table.y.shape == (n + 1,)
    assert table.k.shape == (n,)
    assert table.w.shape == (n,)
    assert np.all(np.diff(table.x) < 0)
    assert np.all(np.diff(table.y) > 0)
    assert table.x[1] == table.r
    assert table.x[n] == 0.0
    assert table.y[0] == 0.0
    assert table.y[n] == table.descriptor.peak
    np.testing.assert_allclose(table.layer_areas(), table.v, rtol=rtol)
    assert table.base_area() == pytest.approx(table.v, rel=1e-12)


def assert_layers_cover_density(table: ZigguratTable):
    """The layers hold all of the area under the density, plus the wedges above it.

    Strip ``i`` covers the area under the curve between heights ``y[i]`` and
    ``y[i+1]``; the base layer covers its rectangle and the whole tail.
    """
    descriptor = table.descriptor
    total = descriptor.tail_area(0.0)
    assert total < table.v * table.n

    strips = [
        integrate.quad(descriptor.inverse_half_density, table.y[i], table.y[i + 1])[0]
        for i in range(1, table.n)
    ]
    for i, strip in enumerate(strips, start=1):
        inscribed = table.x[i + 1] * (table.y[i + 1] - table.y[i])
        assert inscribed * (1 - 1e-8) <= strip <= table.v * (1 + 1e-8)
    assert table.base_area() + sum(strips) == pytest.approx(total, rel=1e-7)


class TestNormalTable:
    """The canonical 256-layer normal table."""

    def test_layout(self, normal):
        assert_valid_layout(normal)
        assert normal.n == 256
        assert normal.bits == 31
        assert normal.layer_bits == 8

    def test_first_boundary_is_density_at_r(self, normal):
        assert normal.y[1] == NormalDensity().half_density(normal.x[1])
        assert normal.y[1] == math.exp(-0.5 * NORMAL_R**2)

    def test_base_pseudo_width(self, normal):
        assert normal.x[0] == pytest.approx(normal.v / normal.y[1], rel=1e-15)
        assert normal.x[0] > normal.r

    def test_layers_cover_density(self, normal):
        assert_layers_cover_density(normal)
        assert normal.v * normal.n > math.sqrt(math.pi / 2)

    def test_common_area(self, normal):
        assert normal.v == pytest.approx(0.00492867323399, rel=1e-10)

    def test_thresholds_and_scales(self, normal):
        scale = 2.0**31
        assert normal.k.dtype == np.uint64
        assert int(normal.k[-1]) == 0
        assert np.all(normal.k[:-1] < 2**31)
        np.testing.assert_array_equal(normal.w, normal.x[:-1] / scale)
        expected_k0 = math.floor(scale * normal.x[1] / normal.x[0])
        assert int(normal.k[0]) == expected_k0

    def test_arrays_are_read_only(self, normal):
        with pytest.raises(ValueError):
            normal.x[3] = 0.0
        with pytest.raises(ValueError):
            normal.k[0] = 1

    def test_lookup_mirrors_arrays(self, normal):
        x, y, k, w = normal.lookup
        assert list(x) == normal.x.tolist()
        assert list(k) == [int(v) for v in normal.k]
        assert all(type(v) is int for v in k)

    def test_as_dict(self, normal):
        d = normal.as_dict()
        assert d["distribution"] == "normal"
        assert d["n"] == 256
        assert d["r"] == NORMAL_R
        assert len(d["x"]) == 257 and len(d["k"]) == 256
        assert all(isinstance(v, int) for v in d["k"])

    def test_repr(self, normal):
        assert "NormalDensity" in repr(normal)
        assert "n=256" in repr(normal)


class TestExponentialTable:
    def test_layout(self):
        table = build_table(ExponentialDensity(), n=256, r=EXPONENTIAL_R, bits=32)
        assert_valid_layout(table)
        assert table.v == pytest.approx(0.0039496598225815571993, rel=1e-10)
        assert table.y[1] == math.exp(-EXPONENTIAL_R)


class TestInvalidParameters:
    """Tables that must not be built."""

    def test_r_too_small(self):
        with pytest.raises(TableConstructionError, match="too small"):
            build_table(NormalDensity(), n=256, r=3.0)

    def test_r_too_large(self):
        with pytest.raises(TableConstructionError, match="relative area error"):
            build_table(NormalDensity(), n=256, r=4.0)

    def test_r_inconsistent_with_n(self):
        """The canonical boundary only closes 256 layers."""
        with pytest.raises(TableConstructionError):
            build_table(NormalDensity(), n=128, r=NORMAL_R)

    @pytest.mark.parametrize("r", [0.0, -1.0, math.nan, math.inf])
    def test_r_outside_support(self, r):
        with pytest.raises(TableConstructionError, match="support"):
            build_table(NormalDensity(), n=256, r=r)

    def test_r_beyond_bounded_support(self):
        with pytest.raises(TableConstructionError, match="support"):
            build_table(PowerDensity(3), n=16, r=1.5)

    @pytest.mark.parametrize("n", [0, 1, 100, 255, 2.0, True])
    def test_bad_layer_count(self, n):
        with pytest.raises(TableConstructionError, match="Layer count"):
            build_table(NormalDensity(), n=n, r=NORMAL_R)

    @pytest.mark.parametrize("bits", [0, 56, 64])
    def test_bits_do_not_fit(self, bits):
        with pytest.raises(TableConstructionError, match="64-bit word"):
            build_table(NormalDensity(), n=256, r=NORMAL_R, bits=bits)

    def test_table_construction_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_table(NormalDensity(), n=256, r=3.0)


class TestClosureResidual:
    def test_signs(self):
        d = NormalDensity()
        assert closure_residual(d, 256, 3.0) < 0
        assert closure_residual(d, 256, 4.0) > 0
        assert abs(closure_residual(d, 256, NORMAL_R)) < 1e-9

    def test_overshoot_counts_missing_layers(self):
        residual = closure_residual(NormalDensity(), 256, 3.0)
        assert residual == int(residual)
        assert residual <= -1


class TestSolveTailBoundary:
    """Tail boundaries found by root finding."""

    def test_recovers_normal_boundary(self):
        assert solve_tail_boundary(NormalDensity(), 256) == pytest.approx(
            NORMAL_R, rel=1e-10
        )

    def test_recovers_exponential_boundary(self):
        assert solve_tail_boundary(ExponentialDensity(), 256) == pytest.approx(
            EXPONENTIAL_R, rel=1e-10
        )

    def test_explicit_bracket(self):
        r = solve_tail_boundary(NormalDensity(), 256, bracket=(3.0, 4.0))
        assert r == pytest.approx(NORMAL_R, rel=1e-10)

    def test_bracket_without_sign_change(self):
        with pytest.raises(TableConstructionError, match="change sign"):
            solve_tail_boundary(NormalDensity(), 256, bracket=(4.0, 5.0))

    def test_fewer_layers_move_boundary_inward(self):
        assert solve_tail_boundary(NormalDensity(), 64) < NORMAL_R


class TestPolynomialTables:
    """Tables for bounded polynomial densities with solved boundaries."""

    def test_power_layout(self, power_table):
        assert_valid_layout(power_table)
        assert 0.0 < power_table.r < 1.0
        assert power_table.y[-1] == 1.0
        assert_layers_cover_density(power_table)

    def test_general_polynomial(self):
        table = build_table(PolynomialDensity([1.0, 0.0, -1.0]), n=16)
        assert_valid_layout(table)
        assert_layers_cover_density(table)

    def test_high_degree_power(self):
        table = build_table(PowerDensity(200), n=256)
        assert_valid_layout(table)
        assert_layers_cover_density(table)

    def test_explicit_r_must_close(self, power_table):
        with pytest.raises(TableConstructionError):
            build_table(PowerDensity(51), n=256, r=0.5 * power_table.r)
