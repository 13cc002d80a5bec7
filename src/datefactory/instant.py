"""
Instant factory

Builds aware datetimes from free-form specs ("now", "tomorrow", "+2 days",
"@1700000000", ISO-8601 strings) or from a spec plus a strptime format.
Zone arguments are resolved through a TimeZoneFactory; every failure
comes back as InstantCreationError.
"""

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Protocol

from datefactory.kernel.errors import (
    ConfigurationError,
    InstantCreationError,
    TimeZoneCreationError,
)
from datefactory.kernel.logging import get_logger
from datefactory.kernel.metrics import track_creation
from datefactory.timezone import (
    DefaultTimeZoneFactory,
    TimeZoneArg,
    TimeZoneFactory,
    resolve_time_zone,
)

logger = get_logger(__name__)

_RELATIVE_PATTERN = re.compile(
    r"^(?P<amount>[+-]\d+)\s*(?P<unit>second|sec|minute|min|hour|day|week)s?$",
    re.IGNORECASE,
)

_RELATIVE_UNITS = {
    "second": "seconds",
    "sec": "seconds",
    "minute": "minutes",
    "min": "minutes",
    "hour": "hours",
    "day": "days",
    "week": "weeks",
}

# Keywords resolved against today's midnight
_DAY_KEYWORDS = {
    "today": timedelta(0),
    "midnight": timedelta(0),
    "noon": timedelta(hours=12),
    "tomorrow": timedelta(days=1),
    "yesterday": timedelta(days=-1),
}


class DateTimeFactory(Protocol):
    """Protocol for instant creation"""

    def create_instant(
        self, spec: str | None = None, time_zone: TimeZoneArg = None
    ) -> datetime:
        """Create an instant from a free-form spec"""
        ...

    def create_from_format(
        self, format: str, spec: str, time_zone: TimeZoneArg = None
    ) -> datetime:
        """Create an instant by strictly parsing spec against format"""
        ...


class DefaultDateTimeFactory:
    """
    Instant factory backed by datetime

    The instant class is configurable so callers can get their own datetime
    subclass back from every call.
    """

    def __init__(
        self,
        time_zone_factory: TimeZoneFactory | None = None,
        instant_class: type[datetime] | None = None,
        default_time_zone: TimeZoneArg = None,
    ) -> None:
        """
        Args:
            time_zone_factory: Resolves zone identifiers (default-constructed if None)
            instant_class: datetime subclass to return (defaults to datetime)
            default_time_zone: Zone used when a call passes none (system local zone if None)

        Raises:
            ConfigurationError: If instant_class is not a datetime subclass
            TimeZoneCreationError: If default_time_zone is an unknown identifier
        """
        instant_class = instant_class or datetime
        if not (isinstance(instant_class, type) and issubclass(instant_class, datetime)):
            raise ConfigurationError("instant_class", datetime)

        self._instant_class = instant_class
        self._time_zone_factory = time_zone_factory or DefaultTimeZoneFactory()
        try:
            self._default_time_zone = resolve_time_zone(
                default_time_zone, self._time_zone_factory
            )
        except TypeError:
            raise ConfigurationError("default_time_zone", tzinfo) from None

    @track_creation("instant")
    def create_instant(
        self, spec: str | None = None, time_zone: TimeZoneArg = None
    ) -> datetime:
        """
        Create an instant from a free-form spec

        Args:
            spec: "now" (the default), "today", "tomorrow", "+1 day",
                "@<unix seconds>" or an ISO-8601 date/date-time
            time_zone: Zone identifier, tzinfo, or None for the default zone.
                Ignored when spec carries its own offset.

        Returns:
            Aware instant

        Raises:
            InstantCreationError: If spec or time_zone is invalid
        """
        if spec is not None and not isinstance(spec, str):
            raise InstantCreationError(spec, "the instant spec must be a 'str'")

        zone = self._resolve(spec, time_zone)
        text = "now" if spec is None else spec

        try:
            instant = self._parse(text, zone)
        except (ValueError, TypeError, OverflowError, OSError) as e:
            logger.debug("Instant spec could not be parsed", spec=text, reason=str(e))
            raise InstantCreationError(text, str(e)) from e

        return self._coerce(instant)

    @track_creation("instant_from_format")
    def create_from_format(
        self, format: str, spec: str, time_zone: TimeZoneArg = None
    ) -> datetime:
        """
        Create an instant by strictly parsing spec against a strptime format

        Args:
            format: strptime format, e.g. "%Y-%m-%d"
            spec: Date/time string to parse
            time_zone: Zone identifier, tzinfo, or None for the default zone.
                Ignored when format parses an offset (%z).

        Returns:
            Aware instant

        Raises:
            InstantCreationError: If spec does not match format or time_zone is invalid
        """
        zone = self._resolve(spec, time_zone, format)

        try:
            parsed = datetime.strptime(spec, format)
        except (ValueError, TypeError) as e:
            logger.debug(
                "Instant spec did not match format", spec=spec, format=format, reason=str(e)
            )
            raise InstantCreationError(spec, str(e), format) from e

        return self._coerce(self._localize(parsed, zone))

    def _resolve(
        self, spec: str | None, time_zone: object, format: str | None = None
    ) -> tzinfo | None:
        try:
            zone = resolve_time_zone(time_zone, self._time_zone_factory)
        except TimeZoneCreationError as e:
            raise InstantCreationError(
                spec, f"failed to create time zone: {e}", format
            ) from e
        except TypeError as e:
            raise InstantCreationError(spec, str(e), format) from e

        return zone if zone is not None else self._default_time_zone

    def _parse(self, text: str, zone: tzinfo | None) -> datetime:
        keyword = text.strip().lower()

        if keyword == "now":
            return self._now(zone)

        if keyword in _DAY_KEYWORDS:
            midnight = self._now(zone).replace(hour=0, minute=0, second=0, microsecond=0)
            return midnight + _DAY_KEYWORDS[keyword]

        if keyword.startswith("@"):
            return datetime.fromtimestamp(float(keyword[1:]), tz=timezone.utc)

        relative = _RELATIVE_PATTERN.match(keyword)
        if relative:
            unit = _RELATIVE_UNITS[relative.group("unit").lower()]
            return self._now(zone) + timedelta(**{unit: int(relative.group("amount"))})

        return self._localize(datetime.fromisoformat(text.strip()), zone)

    @staticmethod
    def _now(zone: tzinfo | None) -> datetime:
        if zone is None:
            return datetime.now().astimezone()
        return datetime.now(zone)

    @staticmethod
    def _localize(value: datetime, zone: tzinfo | None) -> datetime:
        """Attach zone to a naive value; aware values keep their own offset"""
        if value.tzinfo is not None:
            return value
        if zone is None:
            return value.astimezone()
        return value.replace(tzinfo=zone)

    def _coerce(self, value: datetime) -> datetime:
        if type(value) is self._instant_class:
            return value
        return self._instant_class(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            tzinfo=value.tzinfo,
            fold=value.fold,
        )
