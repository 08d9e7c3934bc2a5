"""Duration decomposition.

Turns a millisecond delta into cumulative magnitudes over a fixed unit
hierarchy and picks the dominant (largest nonzero) unit.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass

from timestamper.util import RATIOS, SECOND, UNITS, Unit

# Units shown by counters, largest first
COUNTER_UNITS: tuple[Unit, ...] = (
    "decades",
    "years",
    "months",
    "days",
    "hours",
    "minutes",
    "seconds",
)


@dataclass(frozen=True, kw_only=True)
class Duration:
    """Cumulative magnitudes of a delta at every unit granularity.

    Each field is the total count of whole units elapsed (``hours`` is the
    total number of hours, not hours-of-day).
    """

    seconds: int = 0
    minutes: int = 0
    hours: int = 0
    days: int = 0
    months: int = 0
    years: int = 0
    decades: int = 0
    centuries: int = 0
    millenniums: int = 0

    def __post_init__(self) -> None:
        for unit in UNITS:
            value = getattr(self, unit)
            if value < 0:
                raise ValueError(f"Duration {unit} must be >= 0, got {value}")

    @classmethod
    def zero(cls) -> "Duration":
        return cls()

    def get(self, unit: Unit) -> int:
        if unit not in UNITS:
            valid = ", ".join(UNITS)
            raise KeyError(f"Unknown unit '{unit}'. Valid units: {valid}")
        return getattr(self, unit)

    def as_dict(self) -> dict[Unit, int]:
        """Return magnitudes keyed by unit, smallest unit first."""
        return {unit: getattr(self, unit) for unit in UNITS}

    def __iter__(self) -> Iterator[tuple[Unit, int]]:
        for unit in UNITS:
            yield unit, getattr(self, unit)

    def __str__(self) -> str:
        parts = ", ".join(f"{unit}={value}" for unit, value in self if value)
        return f"Duration({parts or 'seconds=0'})"


@dataclass(frozen=True)
class DominantUnit:
    """The headline unit of a duration and its magnitude."""

    unit: Unit
    magnitude: int

    @property
    def is_singular(self) -> bool:
        return self.magnitude == 1


def decompose(delta_millis: int) -> Duration:
    """
    Break a millisecond delta into cumulative unit magnitudes.

    Every unit is the floor of the next smaller unit divided by its ratio,
    computed in ascending order.

    Args:
        delta_millis: Non-negative delta in milliseconds. Callers pass
            ``abs(now - target)``.

    Returns:
        Duration with all nine magnitudes filled in

    Raises:
        ValueError: If delta_millis is negative

    Example:
        >>> decompose(90_000).minutes
        1
        >>> decompose(400 * 86_400_000).years
        1
    """
    if delta_millis < 0:
        raise ValueError(
            f"decompose() requires a non-negative delta, got {delta_millis}.\n"
            f"Hint: pass the absolute distance, e.g. decompose(abs(now - ts))"
        )

    magnitudes: dict[str, int] = {"seconds": int(delta_millis // SECOND)}
    previous = magnitudes["seconds"]
    for unit in UNITS[1:]:
        previous = int(previous // RATIOS[unit])
        magnitudes[unit] = previous
    return Duration(**magnitudes)


def dominant_unit(duration: Duration) -> DominantUnit:
    """Return the largest unit with a nonzero magnitude.

    Scans from millenniums down to seconds and stops at the first nonzero
    unit, so 400 days reports as 1 year. An all-zero duration yields
    ``DominantUnit("seconds", 0)``.
    """
    for unit in reversed(UNITS):
        magnitude = getattr(duration, unit)
        if magnitude:
            return DominantUnit(unit, magnitude)
    return DominantUnit("seconds", 0)


def remainders(duration: Duration) -> dict[Unit, int]:
    """Return the non-cumulative component at each counter unit.

    Components run from decades down to seconds. Each is taken modulo its
    own ratio (``hours % 24``, ``days`` modulo the days-per-month ratio, ...),
    except decades, which stays whole and absorbs centuries and millenniums.
    """
    components: dict[Unit, int] = {}
    for index, unit in enumerate(COUNTER_UNITS):
        value = getattr(duration, unit)
        if index == 0:
            components[unit] = value
            continue
        # Ratio of the next larger unit, expressed in this unit
        larger = COUNTER_UNITS[index - 1]
        components[unit] = math.floor(value % RATIOS[larger])
    return components
