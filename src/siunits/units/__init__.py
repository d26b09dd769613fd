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
    Lazy attribute access: ``siunits.units.Length`` resolves the quantity
    type through the default registry on first use.
    """
    if not name.startswith("_"):
        reg = _get_default_registry()
        if name in reg.all():
            return reg.get(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_get_default_registry().all()))
