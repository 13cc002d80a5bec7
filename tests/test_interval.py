"""
Tests for Duration and the interval factory

Covers ISO-8601 parsing and calendar-aware diffs, including the borrow
rules that make "Jan 31 to Mar 1" come out as one month and one day.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from datefactory.interval import Duration
from datefactory.kernel.errors import IntervalCreationError

UTC = timezone.utc


# =============================================================================
# create_interval
# =============================================================================


def test_create_interval_single_day(interval_factory):
    """Test P1D yields one day and nothing else"""
    duration = interval_factory.create_interval("P1D")

    assert duration.days == 1
    assert duration.years == duration.months == 0
    assert duration.hours == duration.minutes == duration.seconds == 0
    assert duration.microseconds == 0
    assert duration.invert is False
    assert duration.total_days is None


@pytest.mark.parametrize(
    "spec,expected",
    [
        ("P1Y2M3DT4H5M6S", dict(years=1, months=2, days=3, hours=4, minutes=5, seconds=6)),
        ("P2W", dict(days=14)),
        ("P1W3D", dict(days=10)),
        ("PT36H", dict(hours=36)),
        ("PT5M", dict(minutes=5)),
        ("P6M", dict(months=6)),
        ("P0D", dict()),
        ("P0001-02-03T04:05:06", dict(years=1, months=2, days=3, hours=4, minutes=5, seconds=6)),
    ],
)
def test_create_interval_parses_components(interval_factory, spec, expected):
    """Test each designator lands in its own field"""
    duration = interval_factory.create_interval(spec)

    assert duration == Duration(**expected)


@pytest.mark.parametrize(
    "spec",
    ["test", "invalid", "", "P", "PT", "P1YT", "P1.5D", "1D", "p1d", "P1D2Y", "-P1D", "PT1H2D"],
)
def test_create_interval_rejects_malformed_spec(interval_factory, spec):
    """Test malformed specs raise IntervalCreationError containing the spec"""
    with pytest.raises(IntervalCreationError) as exc_info:
        interval_factory.create_interval(spec)

    assert exc_info.value.spec == spec
    assert f"'{spec}'" in str(exc_info.value)


def test_create_interval_rejects_non_string(interval_factory):
    with pytest.raises(IntervalCreationError) as exc_info:
        interval_factory.create_interval(None)

    assert exc_info.value.spec is None
    assert str(exc_info.value).startswith("Failed to create a valid interval using 'None'")


def test_create_interval_keeps_raw_non_string_spec(interval_factory):
    with pytest.raises(IntervalCreationError) as exc_info:
        interval_factory.create_interval(86400)

    assert exc_info.value.spec == 86400
    assert "must be a 'str'" in exc_info.value.reason


# =============================================================================
# diff
# =============================================================================


def test_diff_borrows_days_from_origin_month(interval_factory):
    """Test Jan 31 -> Mar 1 is one month and one day"""
    origin = datetime(2019, 1, 31, tzinfo=UTC)
    target = datetime(2019, 3, 1, tzinfo=UTC)

    duration = interval_factory.diff(origin, target)

    assert (duration.years, duration.months, duration.days) == (0, 1, 1)
    assert duration.invert is False
    assert duration.total_days == 29


def test_diff_borrows_across_year_boundary(interval_factory):
    origin = datetime(2019, 12, 15, tzinfo=UTC)
    target = datetime(2020, 1, 10, tzinfo=UTC)

    duration = interval_factory.diff(origin, target)

    assert (duration.years, duration.months, duration.days) == (0, 0, 26)
    assert duration.total_days == 26


def test_diff_borrows_time_components(interval_factory):
    origin = datetime(2020, 1, 1, 22, 45, 30, 500_000, tzinfo=UTC)
    target = datetime(2020, 1, 2, 1, 30, 15, tzinfo=UTC)

    duration = interval_factory.diff(origin, target)

    assert duration.days == 0
    assert (duration.hours, duration.minutes, duration.seconds) == (2, 44, 44)
    assert duration.microseconds == 500_000
    assert duration.total_days == 0


def test_diff_full_span(interval_factory):
    origin = datetime(2018, 3, 4, 5, 6, 7, tzinfo=UTC)
    target = datetime(2019, 5, 7, 9, 11, 13, tzinfo=UTC)

    duration = interval_factory.diff(origin, target)

    assert duration.to_iso() == "P1Y2M3DT4H5M6S"


def test_diff_is_signed_by_direction(interval_factory):
    """Test target before origin inverts the duration"""
    earlier = datetime(2019, 1, 31, tzinfo=UTC)
    later = datetime(2019, 3, 1, tzinfo=UTC)

    forward = interval_factory.diff(earlier, later)
    backward = interval_factory.diff(later, earlier)

    assert forward.invert is False
    assert backward.invert is True
    assert backward.is_negative
    assert backward.model_copy(update={"invert": False}) == forward


@pytest.mark.parametrize("swap", [False, True])
def test_diff_absolute_is_never_negative(interval_factory, swap):
    """Test absolute mode ignores direction"""
    a = datetime(2020, 2, 29, 12, tzinfo=UTC)
    b = datetime(2021, 3, 1, 6, tzinfo=UTC)
    origin, target = (b, a) if swap else (a, b)

    duration = interval_factory.diff(origin, target, absolute=True)

    assert duration.invert is False
    assert duration.total_days >= 0


def test_diff_of_equal_instants_is_zero(interval_factory, fixed_instant):
    duration = interval_factory.diff(fixed_instant, fixed_instant)

    assert duration == Duration(total_days=0)


def test_diff_compares_in_origin_zone(interval_factory, london):
    """Test same moment in different zones diffs to zero"""
    origin = datetime(2020, 6, 1, 12, 0, tzinfo=london)  # BST, 11:00 UTC
    target = datetime(2020, 6, 1, 11, 0, tzinfo=UTC)

    duration = interval_factory.diff(origin, target)

    assert duration == Duration(total_days=0)


def test_diff_accepts_two_naive_values(interval_factory):
    duration = interval_factory.diff(datetime(2020, 1, 1), datetime(2020, 1, 2))

    assert duration.days == 1


def test_diff_mixing_naive_and_aware_raises(interval_factory):
    """Test native comparison failure is translated"""
    with pytest.raises(IntervalCreationError) as exc_info:
        interval_factory.diff(datetime(2020, 1, 1), datetime(2020, 1, 2, tzinfo=UTC))

    assert exc_info.value.spec is None
    assert isinstance(exc_info.value.__cause__, TypeError)
    assert str(exc_info.value).startswith("Failed to compute a valid interval")


def test_diff_rejects_non_datetime(interval_factory, fixed_instant):
    with pytest.raises(IntervalCreationError):
        interval_factory.diff("2020-01-01", fixed_instant)


# =============================================================================
# Duration
# =============================================================================


def test_duration_rejects_negative_components():
    with pytest.raises(ValidationError):
        Duration(days=-1)


def test_duration_is_frozen():
    duration = Duration(days=1)

    with pytest.raises(ValidationError):
        duration.days = 2


@pytest.mark.parametrize(
    "duration,expected",
    [
        (Duration(), "P0D"),
        (Duration(days=1), "P1D"),
        (Duration(days=1, invert=True), "-P1D"),
        (Duration(hours=4, seconds=6), "PT4H6S"),
        (Duration(seconds=1, microseconds=500_000), "PT1.5S"),
        (Duration(years=1, months=2, days=3, hours=4, minutes=5, seconds=6), "P1Y2M3DT4H5M6S"),
    ],
)
def test_duration_to_iso(duration, expected):
    assert duration.to_iso() == expected
    assert str(duration) == expected


def test_parsed_iso_renders_back(interval_factory):
    spec = "P1Y2M3DT4H5M6S"

    assert interval_factory.create_interval(spec).to_iso() == spec


def test_diff_in_dst_zone(interval_factory):
    """Test diff across a DST change uses wall-clock time in the origin zone"""
    azores = ZoneInfo("Atlantic/Azores")
    origin = datetime(2021, 3, 27, 12, 0, tzinfo=azores)
    target = datetime(2021, 3, 28, 12, 0, tzinfo=azores)

    duration = interval_factory.diff(origin, target)

    assert duration.days == 1
    assert duration.hours == 0
