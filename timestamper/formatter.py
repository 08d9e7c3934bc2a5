"""Relative-time formatting of millisecond timestamps.

A Timestamper captures "now" once, decomposes the distance to the source
timestamp and renders it as a sentence ("hace 2 horas"), a short phrase
("2 horas") or a clock-style counter ("2:00:00").
"""

import logging
import math
import numbers
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from time import time as current_time
from typing import Any, Literal, TypeAlias

from dateutil.parser import isoparse
from typing_extensions import override

from timestamper.duration import (
    COUNTER_UNITS,
    DominantUnit,
    Duration,
    decompose,
    dominant_unit,
    remainders,
)
from timestamper.language import LocaleResource, get_locale
from timestamper.relative import RelativeBreakdown
from timestamper.util import DEFAULT_LANG, SECOND

logger = logging.getLogger(__name__)

Direction: TypeAlias = Literal["past", "future", "now"]
Clock: TypeAlias = Callable[[], float]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)

# Counter components above this index are dropped while they lead with zero
_MINUTES_INDEX = COUNTER_UNITS.index("minutes")


class InvalidInputError(TypeError, ValueError):
    """Raised when a timestamp is not a finite number of milliseconds."""


def system_clock() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(current_time() * SECOND)


def _validate_timestamp(timestamp: Any) -> float:
    if isinstance(timestamp, bool) or not isinstance(timestamp, numbers.Real):
        raise InvalidInputError(
            f"Timestamp must be a number of epoch milliseconds.\n"
            f"Got {type(timestamp).__name__!r}: {timestamp!r}\n"
            f"Hint: for datetimes use Timestamper.from_datetime(dt), "
            f"for ISO-8601 text use Timestamper.from_iso(text)"
        )
    try:
        finite = math.isfinite(timestamp)
    except OverflowError as exc:
        raise InvalidInputError(
            f"Timestamp is out of range: {timestamp!r}\n"
            f"Hint: pass epoch milliseconds that fit in a float"
        ) from exc
    if not finite:
        raise InvalidInputError(f"Timestamp must be finite, got {timestamp!r}")
    return timestamp


def _datetime_to_millis(dt: datetime) -> int:
    if dt.tzinfo is None:
        raise InvalidInputError(
            f"Timestamp datetime must be timezone-aware.\n"
            f"Got naive datetime: {dt!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)"
        )
    return (dt - _EPOCH) // _MILLISECOND


class Timestamper:
    """Humanized, localized description of a timestamp relative to now.

    Everything is computed eagerly at construction; reads never touch the
    clock again until reanchor() is called.
    """

    def __init__(
        self,
        timestamp: float,
        lang: str = DEFAULT_LANG,
        *,
        clock: Clock | None = None,
    ):
        """
        Initialize a formatter for a timestamp.

        Args:
            timestamp: Epoch milliseconds (int or finite float)
            lang: Language code of a bundled or registered locale
            clock: Zero-argument callable returning "now" in epoch
                milliseconds (defaults to the system clock)

        Raises:
            InvalidInputError: If timestamp is not a finite number
            UnknownLocaleError: If no locale exists for lang

        Example:
            >>> Timestamper(time.time() * 1000 - 60_000, lang="en").to_sentence()
            '1 minute ago'
        """
        self._locale: LocaleResource = get_locale(lang)
        self._clock: Clock = clock if clock is not None else system_clock
        self._anchor(timestamp)

    def _anchor(self, timestamp: Any) -> None:
        source = _validate_timestamp(timestamp)
        now = self._clock()
        position = now - source
        delta = abs(position)
        duration = decompose(delta)

        self.source_timestamp: float = source
        self.position_delta: float = position
        self.delta_millis: float = delta
        self.duration: Duration = duration
        self.dominant: DominantUnit = dominant_unit(duration)

    @classmethod
    def from_datetime(
        cls,
        dt: datetime,
        lang: str = DEFAULT_LANG,
        *,
        clock: Clock | None = None,
    ) -> "Timestamper":
        """Build a formatter from a timezone-aware datetime."""
        if not isinstance(dt, datetime):
            raise InvalidInputError(
                f"from_datetime() expects a datetime, got {type(dt).__name__!r}"
            )
        return cls(_datetime_to_millis(dt), lang, clock=clock)

    @classmethod
    def from_iso(
        cls,
        text: str,
        lang: str = DEFAULT_LANG,
        *,
        clock: Clock | None = None,
    ) -> "Timestamper":
        """
        Build a formatter from ISO-8601 text with an explicit offset.

        Example:
            >>> clock = lambda: 1_700_000_000_000  # 2023-11-14T22:13:20Z
            >>> Timestamper.from_iso("2023-11-14T20:13:20Z", "en", clock=clock).to_sentence()
            '2 hours ago'
        """
        if not isinstance(text, str):
            raise InvalidInputError(
                f"from_iso() expects a string, got {type(text).__name__!r}"
            )
        try:
            dt = isoparse(text)
        except (ValueError, OverflowError) as exc:
            raise InvalidInputError(
                f"Could not parse ISO-8601 timestamp {text!r}: {exc}"
            ) from exc
        return cls(_datetime_to_millis(dt), lang, clock=clock)

    @property
    def lang(self) -> str:
        return self._locale.code

    @property
    def locale(self) -> LocaleResource:
        return self._locale

    def reanchor(self, timestamp: float) -> "Timestamper":
        """Point this formatter at a new timestamp, reading the clock again.

        Validation matches the constructor; on failure the instance is left
        untouched. Returns self for chaining.
        """
        self._anchor(timestamp)
        logger.debug(
            "Re-anchored to %s (delta %sms, %s)",
            self.source_timestamp,
            self.position_delta,
            self.dominant,
        )
        return self

    def direction(self) -> Direction:
        if self.dominant.magnitude == 0:
            return "now"
        if self.position_delta < 0:
            return "future"
        return "past"

    def grammatical_label(self) -> str:
        return self._locale.label(self.dominant.unit, self.dominant.magnitude)

    def to_sentence(self) -> str:
        """
        Render the full humanized phrase.

        Word order comes from the locale: suffix locales give
        "2 hours ago", prefix locales give "hace 2 horas".
        """
        direction = self.direction()
        if direction == "now":
            return self._locale.now

        quantity = f"{self.dominant.magnitude} {self.grammatical_label()}"
        word = self._locale.ago_time if direction == "past" else self._locale.in_time
        if self._locale.sentence_order == "prefix":
            return f"{word} {quantity}"
        return f"{quantity} {word}"

    def to_short_phrase(self) -> str:
        if self.direction() == "now":
            return self._locale.now
        return f"{self.dominant.magnitude} {self.grammatical_label()}"

    def to_counter(self) -> str:
        """
        Render a clock-style counter such as "1:00:00:00" or "1:30".

        Leading zero components above minutes are dropped; minutes and
        seconds are always shown. Every component after the first is
        zero-padded to two digits.
        """
        values = list(remainders(self.duration).values())
        first = 0
        while first < _MINUTES_INDEX and values[first] == 0:
            first += 1
        shown = values[first:]
        return ":".join(
            str(value) if index == 0 else f"{value:02d}"
            for index, value in enumerate(shown)
        )

    def to_relative(self) -> RelativeBreakdown:
        """Return the per-unit breakdown ("1 day, 2 hours, 5 minutes")."""
        return RelativeBreakdown(self.duration, self._locale)

    def seconds(self) -> int:
        return self.duration.seconds

    def minutes(self) -> int:
        return self.duration.minutes

    def hours(self) -> int:
        return self.duration.hours

    def days(self) -> int:
        return self.duration.days

    def months(self) -> int:
        return self.duration.months

    def years(self) -> int:
        return self.duration.years

    def decades(self) -> int:
        return self.duration.decades

    def centuries(self) -> int:
        return self.duration.centuries

    def millenniums(self) -> int:
        return self.duration.millenniums

    @override
    def __str__(self) -> str:
        return self.to_sentence()

    @override
    def __repr__(self) -> str:
        return (
            f"Timestamper(timestamp={self.source_timestamp!r}, "
            f"lang={self.lang!r}, sentence={self.to_sentence()!r})"
        )


RelativeTimeFormatter = Timestamper


def timestamper(
    timestamp: float, lang: str = DEFAULT_LANG, *, clock: Clock | None = None
) -> Timestamper:
    """
    Return a formatter for a millisecond timestamp.

    Args:
        timestamp: Epoch milliseconds
        lang: Language code ("es" by default)
        clock: Optional "now" provider in epoch milliseconds

    Example:
        >>> from timestamper import timestamper
        >>> timestamper(posted_at_ms).to_sentence()
        'hace 3 minutos'
        >>> timestamper(deadline_ms, lang="en").to_counter()
        '2:14:05'
    """
    return Timestamper(timestamp, lang, clock=clock)
