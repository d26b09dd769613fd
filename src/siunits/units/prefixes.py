# siunits/units/prefixes.py
"""SI prefixes (deca … peta, deci … femto)."""

from siunits.core.prefix import Prefix

DECA = Prefix("deca", "da", 1.0e1)
HECTO = Prefix("hecto", "h", 1.0e2)
KILO = Prefix("kilo", "k", 1.0e3)
MEGA = Prefix("mega", "M", 1.0e6)
GIGA = Prefix("giga", "G", 1.0e9)
TERA = Prefix("tera", "T", 1.0e12)
PETA = Prefix("peta", "P", 1.0e15)

DECI = Prefix("deci", "d", 1.0e-1)
CENTI = Prefix("centi", "c", 1.0e-2)
MILLI = Prefix("milli", "m", 1.0e-3)
MICRO = Prefix("micro", "μ", 1.0e-6)
NANO = Prefix("nano", "n", 1.0e-9)
PICO = Prefix("pico", "p", 1.0e-12)
FEMTO = Prefix("femto", "f", 1.0e-15)

# Descending factor order
PREFIXES = (
    PETA, TERA, GIGA, MEGA, KILO, HECTO, DECA,
    DECI, CENTI, MILLI, MICRO, NANO, PICO, FEMTO,
)

__all__ = [
    "DECA", "HECTO", "KILO", "MEGA", "GIGA", "TERA", "PETA",
    "DECI", "CENTI", "MILLI", "MICRO", "NANO", "PICO", "FEMTO",
    "PREFIXES",
]
