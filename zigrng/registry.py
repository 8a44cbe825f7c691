"""Global registry of distributions and their default Ziggurat tables.

Each entry binds a name to a density descriptor and the table parameters
``(n, r, bits)``. Default tables are built lazily, exactly once, and shared
read-only afterwards.

Examples
--------
List available distributions:

>>> from zigrng.registry import get_distribution_registry
>>> print(get_distribution_registry().list_distributions())
['exponential', 'normal']

Register a custom polynomial distribution:

>>> from zigrng.densities import PowerDensity
>>> from zigrng.registry import register_distribution, default_table
>>>
>>> register_distribution("beta_1_52", PowerDensity(51), n=256)
>>> table = default_table("beta_1_52")  # r is solved on first use
"""

import logging
import threading
from typing import Any

from zigrng.config import distribution_config
from zigrng.densities import (
    DensityDescriptor,
    DistributionKind,
    ExponentialDensity,
    NormalDensity,
)
from zigrng.sampling.engine import ZigguratSampler
from zigrng.tables.builder import ZigguratTable, build_table

logger = logging.getLogger(__name__)

_DESCRIPTOR_FACTORIES = {
    DistributionKind.NORMAL: NormalDensity,
    DistributionKind.EXPONENTIAL: ExponentialDensity,
}


class DistributionRegistry:
    """Registry of distributions and their lazily built default tables.

    Lookups are safe from any thread. Each default table is built under a
    lock the first time it is requested and never rebuilt.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._distributions: dict[str, dict[str, Any]] = {}
        self._tables: dict[str, ZigguratTable] = {}
        self._samplers: dict[str, ZigguratSampler] = {}
        self._lock = threading.Lock()

    def register(
        self,
        name: str,
        descriptor: DensityDescriptor,
        n: int = 256,
        r: float | None = None,
        bits: int = 32,
    ) -> None:
        """Register a distribution.

        Parameters
        ----------
        name : str
            Unique name for the distribution (e.g., "normal").
        descriptor : DensityDescriptor
            Density to sample from.
        n : int
            Number of Ziggurat layers.
        r : float or None
            Tail boundary matching ``n``; ``None`` solves it when the table is
            first built.
        bits : int
            Width of the magnitude part of each uniform word.

        Raises
        ------
        ValueError
            If name already registered.
        """
        with self._lock:
            if name in self._distributions:
                raise ValueError(
                    f"Distribution '{name}' is already registered. "
                    f"Use a different name."
                )
            self._distributions[name] = {
                "descriptor": descriptor,
                "n": n,
                "r": r,
                "bits": bits,
            }

    def get(self, name: str) -> dict[str, Any]:
        """Get a distribution's configuration.

        Returns
        -------
        dict
            Dictionary with keys ``descriptor``, ``n``, ``r`` and ``bits``.

        Raises
        ------
        KeyError
            If distribution name not registered.
        """
        if name not in self._distributions:
            raise KeyError(
                f"Distribution '{name}' is not registered. "
                f"Available distributions: {self.list_distributions()}"
            )
        return dict(self._distributions[name])

    def is_registered(self, name: str) -> bool:
        return name in self._distributions

    def list_distributions(self) -> list[str]:
        """Sorted list of registered distribution names."""
        return sorted(self._distributions.keys())

    def default_table(self, name: str) -> ZigguratTable:
        """Return the shared default table of a distribution, building it once."""
        table = self._tables.get(name)
        if table is not None:
            return table

        entry = self.get(name)
        with self._lock:
            if name not in self._tables:
                logger.debug("Building default table for '%s'", name)
                table = build_table(
                    entry["descriptor"], n=entry["n"], r=entry["r"], bits=entry["bits"]
                )
                self._samplers[name] = ZigguratSampler(table)
                self._tables[name] = table
            return self._tables[name]

    def default_sampler(self, name: str) -> ZigguratSampler:
        """Return the shared sampler bound to a distribution's default table."""
        sampler = self._samplers.get(name)
        if sampler is None:
            self.default_table(name)
            sampler = self._samplers[name]
        return sampler

    def __repr__(self) -> str:
        return (
            f"DistributionRegistry({len(self._distributions)} distributions "
            f"registered, {len(self._tables)} tables built)"
        )


# Global singleton instance
_GLOBAL_DISTRIBUTION_REGISTRY = DistributionRegistry()


def register_distribution(
    name: str,
    descriptor: DensityDescriptor,
    n: int = 256,
    r: float | None = None,
    bits: int = 32,
) -> None:
    """Register a distribution globally. See ``DistributionRegistry.register``."""
    _GLOBAL_DISTRIBUTION_REGISTRY.register(name, descriptor, n=n, r=r, bits=bits)


def get_distribution_registry() -> DistributionRegistry:
    """Get the global distribution registry."""
    return _GLOBAL_DISTRIBUTION_REGISTRY


def default_table(name: str) -> ZigguratTable:
    """Shared default table of a globally registered distribution."""
    return _GLOBAL_DISTRIBUTION_REGISTRY.default_table(name)


# Built-in distributions come from the table configuration
for _name, _spec in distribution_config.items():
    register_distribution(
        name=_name,
        descriptor=_DESCRIPTOR_FACTORIES[DistributionKind(_spec["kind"])](),
        n=_spec["n"],
        r=_spec["r"],
        bits=_spec["bits"],
    )
