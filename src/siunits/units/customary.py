"""
siunits.units.customary
=======================

US customary units expressed as `Prefix` objects whose factor is the ratio to
the matching SI base unit (metre, kilogram, cubic metre).
"""

from siunits.core.prefix import Prefix

# Exact by definition (international yard and pound, 1959)
FOOT_TO_METER = 0.3048
POUND_TO_KILOGRAM = 0.45359237
# 1 US liquid gallon = 231 in³
GALLON_TO_CUBIC_METER = 231.0 * (FOOT_TO_METER / 12.0) ** 3


# Length
INCH = Prefix("inch", "in", FOOT_TO_METER / 12.0)
FOOT = Prefix("foot", "ft", FOOT_TO_METER)
YARD = Prefix("yard", "yd", FOOT_TO_METER * 3.0)
MILE = Prefix("mile", "mi", FOOT_TO_METER * 5280.0)
FATHOM = Prefix("fathom", "ftm", FOOT_TO_METER * 6.0)
LINK = Prefix("link", "lnk", FOOT_TO_METER * 0.66)
CHAIN = Prefix("chain", "ch", FOOT_TO_METER * 66.0)
FURLONG = Prefix("furlong", "fur", FOOT_TO_METER * 660.0)
ROD = Prefix("rod", "rod", FOOT_TO_METER * 16.5)
NAUTICAL_MILE = Prefix("nautical mile", "NM", 1852.0)

# Mass
POUND = Prefix("pound", "lb", POUND_TO_KILOGRAM)
OUNCE = Prefix("ounce", "oz", POUND_TO_KILOGRAM / 16.0)
TON = Prefix("ton", "tn", POUND_TO_KILOGRAM * 2000.0)
LONG_TON = Prefix("long ton", "LT", POUND_TO_KILOGRAM * 2240.0)
STONE = Prefix("stone", "st", POUND_TO_KILOGRAM * 14.0)
SLUG = Prefix("slug", "slug", POUND_TO_KILOGRAM * 32.174048556)

# Volume
GALLON = Prefix("gallon", "gal", GALLON_TO_CUBIC_METER)
QUART = Prefix("quart", "qt", GALLON_TO_CUBIC_METER / 4.0)
PINT = Prefix("pint", "pt", GALLON_TO_CUBIC_METER / 8.0)
CUP = Prefix("cup", "cup", GALLON_TO_CUBIC_METER / 16.0)
FLUID_OUNCE = Prefix("fluid ounce", "fl oz", GALLON_TO_CUBIC_METER / 128.0)
