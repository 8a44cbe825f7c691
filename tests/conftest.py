"""Pytest configuration for the zigrng test suite."""

import pytest

from zigrng.registry import default_table
from zigrng.streams import SamplingStream


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-statistical",
        action="store_true",
        default=False,
        help="Run large-sample statistical tests (skipped by default, ~1 min)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "statistical: mark test as a large-sample statistical test (skipped unless --run-statistical is passed)",
    )
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow (large sample sizes, may take several seconds)",
    )
    config.addinivalue_line(
        "markers",
        "rng_validation: mark test as an RNG validation test",
    )


def pytest_collection_modifyitems(config, items):
    """Skip statistical tests unless --run-statistical is passed."""
    if config.getoption("--run-statistical"):
        return
    skip_statistical = pytest.mark.skip(reason="need --run-statistical option to run")
    for item in items:
        if "statistical" in item.keywords:
            item.add_marker(skip_statistical)


@pytest.fixture
def stream():
    """Fresh seeded stream for each test."""
    return SamplingStream(seed=12345)


@pytest.fixture(scope="session")
def normal_table():
    return default_table("normal")


@pytest.fixture(scope="session")
def exponential_table():
    return default_table("exponential")
