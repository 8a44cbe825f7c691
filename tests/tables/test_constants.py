"""Tests comparing freshly built tables with the published constants."""

import numpy as np
import pytest

from zigrng.tables import constants
from zigrng.tables.constants import published_table


@pytest.mark.parametrize("name", ["normal", "exponential"])
class TestPublishedTables:
    def test_shapes(self, name):
        table = published_table(name)
        assert table["x"].shape == (257,)
        assert table["y"].shape == (257,)
        assert table["k"].shape == (256,)
        assert table["w"].shape == (256,)
        assert table["k"].dtype == np.uint64

    def test_published_tables_have_equal_areas(self, name):
        table = published_table(name)
        areas = table["x"][:-1] * np.diff(table["y"])
        np.testing.assert_allclose(areas, table["v"], rtol=1e-9)

    def test_built_table_matches(self, name, request):
        built = request.getfixturevalue(f"{name}_table")
        table = published_table(name)

        assert built.r == table["r"]
        assert built.bits == table["bits"]
        assert built.v == pytest.approx(table["v"], rel=1e-12)
        np.testing.assert_allclose(built.x, table["x"], rtol=1e-12, atol=0)
        np.testing.assert_allclose(built.y, table["y"], rtol=1e-12, atol=0)
        np.testing.assert_allclose(built.w, table["w"], rtol=1e-12, atol=0)
        k_diff = built.k.astype(np.int64) - table["k"].astype(np.int64)
        assert np.max(np.abs(k_diff)) <= 1

    def test_returns_copies(self, name):
        table = published_table(name)
        table["x"][0] = -1.0
        assert published_table(name)["x"][0] > 0


def test_module_constants():
    assert constants.NORMAL_X[1] == constants.NORMAL_R
    assert constants.EXPONENTIAL_X[1] == constants.EXPONENTIAL_R
    assert constants.NORMAL_Y[-1] == 1.0
    assert len(constants.NORMAL_K) == len(constants.EXPONENTIAL_W) == 256


def test_unknown_table():
    with pytest.raises(KeyError, match="No published table"):
        published_table("gamma")
