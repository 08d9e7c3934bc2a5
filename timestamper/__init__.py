from .duration import DominantUnit, Duration, decompose, dominant_unit, remainders
from .formatter import (
    Direction,
    InvalidInputError,
    RelativeTimeFormatter,
    Timestamper,
    timestamper,
)
from .language import (
    LocaleResource,
    UnitLabel,
    UnknownLocaleError,
    available_locales,
    get_locale,
    register_locale,
    unregister_locale,
)
from .relative import RelativeBreakdown
from .util import UNITS

__all__ = [
    "Timestamper",
    "RelativeTimeFormatter",
    "timestamper",
    "Direction",
    "InvalidInputError",
    "UnknownLocaleError",
    "Duration",
    "DominantUnit",
    "decompose",
    "dominant_unit",
    "remainders",
    "LocaleResource",
    "UnitLabel",
    "get_locale",
    "register_locale",
    "unregister_locale",
    "available_locales",
    "RelativeBreakdown",
    "UNITS",
]
