"""
siunits.units.registry
======================

A thread-safe registry of quantity types, keyed by type name.

- Lookups are forgiving about spelling: "SurfaceDensity", "surface_density"
  and "surface density" all resolve to the same class.
- `DEFAULT_REGISTRY` is bootstrapped with every built-in quantity type and
  backs the lazy ``siunits.<TypeName>`` attribute access.
- Independent registries can be created for testing or for adding custom
  quantity types without touching the default one.
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from typing import Dict, Iterable, Mapping, Type

from siunits.core.quantity import Quantity

logger = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    """Canonical lookup key for a quantity type name.

    Rules:
    - Unicode normalize to NFC and strip surrounding whitespace.
    - Drop underscores, hyphens and inner spaces.
    - Casefold.
    """
    s = unicodedata.normalize("NFC", name.strip())
    for ch in ("_", "-", " "):
        s = s.replace(ch, "")
    return s.casefold()


class QuantityRegistry:
    """Thread-safe registry of `Quantity` subclasses."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._types: Dict[str, Type[Quantity]] = {}

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    # -------------------------- public API ---------------------------------
    def register(self, cls: Type[Quantity], replace: bool = False) -> None:
        """Register (or overwrite if replace is True) a quantity type under its class name."""
        if not (isinstance(cls, type) and issubclass(cls, Quantity) and hasattr(cls, "descriptor")):
            raise TypeError(f"Cannot register {cls!r}: not a concrete Quantity type")

        key = normalize_name(cls.__name__)
        # check-and-set under one lock
        with self._lock:
            existing = self._types.get(key)
            if existing is not None and existing is not cls and not replace:
                raise ValueError(
                    f"Cannot register quantity type '{cls.__name__}': "
                    "a type with this name already exists."
                )
            self._types[key] = cls
        logger.debug("Registered quantity type %s", cls.__name__)

    def register_all(self, types: Iterable[Type[Quantity]]) -> None:
        for cls in types:
            self.register(cls)

    def has(self, name: str) -> bool:
        try:
            self.get(name)
            return True
        except ValueError:
            return False

    def get(self, name: str) -> Type[Quantity]:
        """Lookup a quantity type by name. Raises `ValueError` if unknown."""
        with self._lock:
            cls = self._types.get(normalize_name(name))
        if cls is None:
            raise ValueError(f"Unknown quantity type: {name}")
        return cls

    def all(self) -> Mapping[str, Type[Quantity]]:
        """Snapshot of registered types keyed by class name."""
        with self._lock:
            return {cls.__name__: cls for cls in self._types.values()}

    def names(self) -> list[str]:
        return sorted(self.all())


def _bootstrap_default_registry(reg: QuantityRegistry) -> None:
    from siunits.units.area import Area
    from siunits.units.length import Length
    from siunits.units.mass import Mass
    from siunits.units.surface_density import SurfaceDensity
    from siunits.units.time import Time
    from siunits.units.volume import Volume

    reg.register_all((Length, Mass, Time, Area, Volume, SurfaceDensity))


DEFAULT_REGISTRY = QuantityRegistry()
_bootstrap_default_registry(DEFAULT_REGISTRY)

__all__ = ["QuantityRegistry", "DEFAULT_REGISTRY", "normalize_name"]
