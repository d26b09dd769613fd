"""
siunits: strongly typed physical quantities with lossless unit conversion.

Each quantity type (`Length`, `Mass`, `SurfaceDensity`, ...) pairs a float value
with a unit of one physical dimension and supports conversion, arithmetic,
comparison, formatting and parsing without losing dimensional meaning.
Quantity types are resolved lazily through the default registry to keep import
time low.
"""

from importlib import metadata as _metadata


__author__ = "Parneet Sidhu"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("siunits")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

from siunits.core.prefix import Prefix
from siunits.core.quantity import Quantity
from siunits.errors import QuantityFormatError, SIUnitsError, UnknownUnitSymbolError

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__", "__author__", "__license__",
    "Prefix", "Quantity",
    "SIUnitsError", "QuantityFormatError", "UnknownUnitSymbolError",
]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from siunits.units.registry import QuantityRegistry
# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "QuantityRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from siunits.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. ``siunits.Length`` (or any registered quantity
    type name) is looked up in the default registry on first use.
    """
    if not name.startswith("_"):
        reg = _get_default_registry()
        if name in reg.all():
            return reg.get(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_get_default_registry().all()))
