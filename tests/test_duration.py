"""Tests for duration decomposition and dominant-unit selection."""

import pytest

from timestamper import UNITS, DominantUnit, Duration, decompose, dominant_unit, remainders
from timestamper.util import DAY, HOUR, MINUTE, SECOND


def test_zero_delta_is_all_zero():
    """Test that a zero delta decomposes to the all-zero duration."""
    assert decompose(0) == Duration.zero()
    assert dominant_unit(decompose(0)) == DominantUnit("seconds", 0)


def test_sub_second_delta_has_no_seconds():
    """Test that deltas below one second floor to zero."""
    assert decompose(999).seconds == 0
    assert decompose(1000).seconds == 1


def test_ninety_seconds():
    """Test cumulative magnitudes for 90 seconds."""
    duration = decompose(90 * SECOND)

    assert duration.seconds == 90
    assert duration.minutes == 1
    assert duration.hours == 0


def test_one_day_is_cumulative():
    """Test that each unit holds the total count, not the remainder."""
    duration = decompose(DAY)

    assert duration.seconds == 86_400
    assert duration.minutes == 1_440
    assert duration.hours == 24
    assert duration.days == 1
    assert duration.months == 0


def test_365_days_is_exactly_one_year():
    """Test that the month ratio divides a 365-day year without drift."""
    duration = decompose(365 * DAY)

    assert duration.months == 12
    assert duration.years == 1


def test_one_millennium():
    """Test the top of the unit hierarchy."""
    duration = decompose(365_000 * DAY)

    assert duration.years == 1000
    assert duration.decades == 100
    assert duration.centuries == 10
    assert duration.millenniums == 1
    assert dominant_unit(duration) == DominantUnit("millenniums", 1)


@pytest.mark.parametrize(
    "delta",
    [0, 1, 59_999, 60_000, 3_599_999, DAY - 1, 45 * DAY, 400 * DAY, 12_345_678_901_234],
)
def test_each_unit_floors_the_previous(delta):
    """Test the floor chain and that magnitudes never increase with unit size."""
    duration = decompose(delta)

    assert duration.seconds == delta // 1000
    assert duration.minutes == duration.seconds // 60
    assert duration.hours == duration.minutes // 60
    assert duration.days == duration.hours // 24
    assert duration.months == duration.days * 12 // 365
    assert duration.years == duration.months // 12
    assert duration.decades == duration.years // 10
    assert duration.centuries == duration.decades // 10
    assert duration.millenniums == duration.centuries // 10

    values = [value for _, value in duration]
    assert values == sorted(values, reverse=True)


def test_negative_delta_rejected():
    """Test that decompose requires a non-negative delta."""
    with pytest.raises(ValueError, match="non-negative"):
        decompose(-1)


def test_duration_rejects_negative_fields():
    """Test that Duration validates its magnitudes."""
    with pytest.raises(ValueError, match="hours must be >= 0"):
        Duration(hours=-1)


def test_dominant_prefers_largest_unit():
    """Test that 400 days reports as one year, not 400 days or 13 months."""
    duration = decompose(400 * DAY)

    assert duration.days == 400
    assert duration.months == 13
    assert dominant_unit(duration) == DominantUnit("years", 1)


def test_dominant_for_small_deltas():
    """Test dominant unit selection below one hour."""
    assert dominant_unit(decompose(59 * SECOND)) == DominantUnit("seconds", 59)
    assert dominant_unit(decompose(MINUTE)) == DominantUnit("minutes", 1)
    assert dominant_unit(decompose(3 * HOUR)) == DominantUnit("hours", 3)
    assert dominant_unit(decompose(3 * HOUR)).is_singular is False


def test_get_and_as_dict():
    """Test lookup helpers on Duration."""
    duration = decompose(DAY)

    assert duration.get("hours") == 24
    assert list(duration.as_dict()) == list(UNITS)

    with pytest.raises(KeyError, match="Unknown unit"):
        duration.get("weeks")  # type: ignore[arg-type]


def test_remainders_for_one_day():
    """Test that exactly one day leaves nothing below days."""
    assert remainders(decompose(DAY)) == {
        "decades": 0,
        "years": 0,
        "months": 0,
        "days": 1,
        "hours": 0,
        "minutes": 0,
        "seconds": 0,
    }


def test_remainders_mixed():
    """Test remainders for 1 day, 2 hours, 5 minutes and 7 seconds."""
    components = remainders(decompose(DAY + 2 * HOUR + 5 * MINUTE + 7 * SECOND))

    assert components["days"] == 1
    assert components["hours"] == 2
    assert components["minutes"] == 5
    assert components["seconds"] == 7


def test_remainders_days_wrap_at_month_ratio():
    """Test that days wrap at 365/12 days and are floored."""
    # 45 - 30.4167 = 14.58
    components = remainders(decompose(45 * DAY))

    assert components["months"] == 1
    assert components["days"] == 14


def test_remainders_keep_decades_whole():
    """Test that decades absorb centuries instead of wrapping."""
    components = remainders(decompose(365 * 150 * DAY))

    assert components["decades"] == 15
    assert components["years"] == 0
