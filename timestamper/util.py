"""Utility constants for timestamper.

Unit ratios are fixed approximations, not calendar-accurate lengths.
A month is a twelfth of a 365-day year.
"""

from fractions import Fraction
from typing import Literal, TypeAlias

Unit: TypeAlias = Literal[
    "seconds",
    "minutes",
    "hours",
    "days",
    "months",
    "years",
    "decades",
    "centuries",
    "millenniums",
]

# Smallest to largest
UNITS: tuple[Unit, ...] = (
    "seconds",
    "minutes",
    "hours",
    "days",
    "months",
    "years",
    "decades",
    "centuries",
    "millenniums",
)

# How many of the previous (smaller) unit make one of this unit
RATIOS: dict[Unit, int | Fraction] = {
    "minutes": 60,
    "hours": 60,
    "days": 24,
    "months": Fraction(365, 12),
    "years": 12,
    "decades": 10,
    "centuries": 10,
    "millenniums": 10,
}

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

DEFAULT_LANG = "es"
