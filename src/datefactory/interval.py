"""
Durations and the interval factory

A Duration is a calendar-aware span: "1 month" stays one month whether the
month has 28 or 31 days, which is why it cannot simply be a timedelta.
Durations come from parsing an ISO-8601 designator ("P1Y2M3DT4H5M6S") or
from diffing two instants.
"""

import calendar
import re
from datetime import datetime
from typing import Protocol

from pydantic import BaseModel, Field

from datefactory.kernel.errors import IntervalCreationError
from datefactory.kernel.logging import get_logger
from datefactory.kernel.metrics import track_creation

logger = get_logger(__name__)

_DESIGNATOR_PATTERN = re.compile(
    r"^P(?!$)"
    r"(?:(?P<years>\d+)Y)?"
    r"(?:(?P<months>\d+)M)?"
    r"(?:(?P<weeks>\d+)W)?"
    r"(?:(?P<days>\d+)D)?"
    r"(?:T(?=\d)"
    r"(?:(?P<hours>\d+)H)?"
    r"(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+)S)?"
    r")?$"
)

# Alternative form: PYYYY-MM-DDTHH:MM:SS
_COMBINED_PATTERN = re.compile(
    r"^P(?P<years>\d{4})-(?P<months>\d{2})-(?P<days>\d{2})"
    r"T(?P<hours>\d{2}):(?P<minutes>\d{2}):(?P<seconds>\d{2})$"
)


class Duration(BaseModel):
    """
    Signed calendar-aware span

    All component fields are non-negative; the sign lives in invert, which
    is True when the span runs backwards (target before origin).

    Attributes:
        years, months, days, hours, minutes, seconds, microseconds: Components
        invert: True for a negative span
        total_days: Whole days between the two instants (diff results only)
    """

    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    seconds: int = Field(default=0, ge=0)
    microseconds: int = Field(default=0, ge=0, lt=1_000_000)
    invert: bool = False
    total_days: int | None = Field(default=None, ge=0)

    model_config = {"frozen": True}

    @property
    def is_negative(self) -> bool:
        return self.invert

    def to_iso(self) -> str:
        """Render as an ISO-8601 designator string (sign prefixed with '-')"""
        date_part = "".join(
            f"{value}{unit}"
            for value, unit in ((self.years, "Y"), (self.months, "M"), (self.days, "D"))
            if value
        )
        seconds = str(self.seconds)
        if self.microseconds:
            seconds = f"{self.seconds}.{self.microseconds:06d}".rstrip("0")
        time_part = "".join(
            f"{value}{unit}"
            for value, unit in ((self.hours, "H"), (self.minutes, "M"))
            if value
        )
        if self.seconds or self.microseconds:
            time_part += f"{seconds}S"

        if not date_part and not time_part:
            date_part = "0D"

        iso = f"P{date_part}"
        if time_part:
            iso += f"T{time_part}"
        return f"-{iso}" if self.invert else iso

    def __str__(self) -> str:
        return self.to_iso()


class IntervalFactory(Protocol):
    """Protocol for duration creation"""

    def create_interval(self, spec: str) -> Duration:
        """Parse an ISO-8601 duration"""
        ...

    def diff(self, origin: datetime, target: datetime, absolute: bool = False) -> Duration:
        """Compute the calendar-aware span from origin to target"""
        ...


class DefaultIntervalFactory:
    """Interval factory for ISO-8601 durations and instant diffs"""

    @track_creation("interval")
    def create_interval(self, spec: str) -> Duration:
        """
        Parse an ISO-8601 duration designation

        Accepts PnYnMnWnDTnHnMnS (weeks are folded into days) and the
        alternative PYYYY-MM-DDTHH:MM:SS form. Values must be integers.

        Args:
            spec: Duration spec, e.g. "P1Y2M3DT4H5M6S"

        Returns:
            Parsed (non-negative) duration

        Raises:
            IntervalCreationError: If spec is not a valid duration
        """
        if not isinstance(spec, str):
            raise IntervalCreationError(
                spec, "the interval spec must be a 'str'", computed=False
            )

        match = _DESIGNATOR_PATTERN.match(spec) or _COMBINED_PATTERN.match(spec)
        if match is None:
            logger.debug("Malformed interval spec", spec=spec)
            raise IntervalCreationError(spec, "unknown or bad format")

        parts = {name: int(value) for name, value in match.groupdict().items() if value}
        weeks = parts.pop("weeks", 0)
        parts["days"] = parts.get("days", 0) + weeks * 7
        return Duration(**parts)

    @track_creation("diff")
    def diff(self, origin: datetime, target: datetime, absolute: bool = False) -> Duration:
        """
        Perform a calendar-aware diff of two instants

        Args:
            origin: The origin instant
            target: The instant to compare to
            absolute: Force a non-negative result regardless of direction

        Returns:
            Span from origin to target

        Raises:
            IntervalCreationError: If the two values cannot be compared
        """
        try:
            return _calendar_diff(origin, target, absolute)
        except (TypeError, ValueError, OverflowError, AttributeError) as e:
            logger.debug("Interval diff failed", reason=str(e))
            raise IntervalCreationError(None, str(e)) from e


def _calendar_diff(origin: datetime, target: datetime, absolute: bool) -> Duration:
    if not isinstance(origin, datetime) or not isinstance(target, datetime):
        raise TypeError(
            "diff() requires two datetime instances; "
            f"got '{type(origin).__name__}' and '{type(target).__name__}'"
        )

    # Compare wall clocks in the origin's zone
    if origin.tzinfo is not None and target.tzinfo is not None:
        target = target.astimezone(origin.tzinfo)
    invert = target < origin

    start, end = (target, origin) if invert else (origin, target)
    start = start.replace(tzinfo=None)
    end = end.replace(tzinfo=None)

    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day
    hours = end.hour - start.hour
    minutes = end.minute - start.minute
    seconds = end.second - start.second
    microseconds = end.microsecond - start.microsecond

    if microseconds < 0:
        microseconds += 1_000_000
        seconds -= 1
    if seconds < 0:
        seconds += 60
        minutes -= 1
    if minutes < 0:
        minutes += 60
        hours -= 1
    if hours < 0:
        hours += 24
        days -= 1
    if days < 0:
        days += calendar.monthrange(start.year, start.month)[1]
        months -= 1
    if months < 0:
        months += 12
        years -= 1

    return Duration(
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=microseconds,
        invert=invert and not absolute,
        total_days=(end - start).days,
    )
