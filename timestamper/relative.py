"""Per-unit breakdown of a duration ("1 day, 2 hours, 5 minutes")."""

from dataclasses import dataclass, field

from timestamper.duration import COUNTER_UNITS, Duration, remainders
from timestamper.language import LocaleResource
from timestamper.util import Unit

ABBREVIATIONS: dict[Unit, str] = {
    "decades": "de",
    "years": "y",
    "months": "mo",
    "days": "d",
    "hours": "h",
    "minutes": "m",
    "seconds": "s",
}


@dataclass(frozen=True)
class RelativeBreakdown:
    """Non-cumulative components of a duration, decades down to seconds."""

    duration: Duration
    locale: LocaleResource
    _components: dict[Unit, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_components", remainders(self.duration))

    def components(self) -> dict[Unit, int]:
        """Return the nonzero components, largest unit first."""
        return {
            unit: self._components[unit]
            for unit in COUNTER_UNITS
            if self._components[unit]
        }

    def labelled(self) -> dict[Unit, str]:
        """Return the nonzero components as localized "value label" strings.

        Example:
            >>> breakdown.labelled()
            {'days': '1 day', 'hours': '2 hours', 'minutes': '5 minutes'}
        """
        return {
            unit: f"{value} {self.locale.label(unit, value)}"
            for unit, value in self.components().items()
        }

    def to_counter(self) -> str:
        """Render nonzero components with unit abbreviations, e.g. "1d:02h:05m"."""
        components = self.components()
        if not components:
            return f"0{ABBREVIATIONS['seconds']}"
        parts = []
        for index, (unit, value) in enumerate(components.items()):
            digits = str(value) if index == 0 else f"{value:02d}"
            parts.append(f"{digits}{ABBREVIATIONS[unit]}")
        return ":".join(parts)

    def __str__(self) -> str:
        labelled = self.labelled()
        if not labelled:
            return self.locale.now
        return ", ".join(labelled.values())
