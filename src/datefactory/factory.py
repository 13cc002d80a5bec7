"""
DateFactory - main façade

One object that creates instants, time zones and durations, delegating to
the three specialised factories.

Example:
    >>> from datefactory import DateFactory
    >>> factory = DateFactory()
    >>> start = factory.create_from_format("%Y-%m-%d", "2019-04-01", "UTC")
    >>> end = factory.create_instant("2019-05-02 12:00:00", "UTC")
    >>> str(factory.diff(start, end))
    'P1M1DT12H'
"""

from datetime import datetime, tzinfo

from datefactory.instant import DateTimeFactory, DefaultDateTimeFactory
from datefactory.interval import DefaultIntervalFactory, Duration, IntervalFactory
from datefactory.kernel.settings import DateSettings
from datefactory.timezone import DefaultTimeZoneFactory, TimeZoneArg, TimeZoneFactory


class DateFactory:
    """
    Date façade

    Provides a unified API for:
    - Instant creation (free-form and strict-format)
    - Time zone resolution
    - Duration parsing and instant diffs

    Errors from the collaborators pass through unchanged.
    """

    def __init__(
        self,
        date_time_factory: DateTimeFactory | None = None,
        time_zone_factory: TimeZoneFactory | None = None,
        interval_factory: IntervalFactory | None = None,
    ) -> None:
        """
        Initialize the façade

        Args:
            date_time_factory: Instant factory (built on time_zone_factory if None)
            time_zone_factory: Time zone factory (default-constructed if None)
            interval_factory: Interval factory (default-constructed if None)
        """
        self.time_zone_factory = time_zone_factory or DefaultTimeZoneFactory()
        self.date_time_factory = date_time_factory or DefaultDateTimeFactory(
            self.time_zone_factory
        )
        self.interval_factory = interval_factory or DefaultIntervalFactory()

    @classmethod
    def from_settings(cls, settings: DateSettings) -> "DateFactory":
        """
        Build a façade whose instant factory uses the configured default zone

        Raises:
            TimeZoneCreationError: If settings.default_time_zone is unknown
        """
        time_zone_factory = DefaultTimeZoneFactory()
        date_time_factory = DefaultDateTimeFactory(
            time_zone_factory,
            default_time_zone=settings.default_time_zone,
        )
        return cls(date_time_factory, time_zone_factory)

    def create_instant(
        self, spec: str | None = None, time_zone: TimeZoneArg = None
    ) -> datetime:
        return self.date_time_factory.create_instant(spec, time_zone)

    def create_from_format(
        self, format: str, spec: str, time_zone: TimeZoneArg = None
    ) -> datetime:
        return self.date_time_factory.create_from_format(format, spec, time_zone)

    def create_time_zone(self, spec: str) -> tzinfo:
        return self.time_zone_factory.create_time_zone(spec)

    def create_interval(self, spec: str) -> Duration:
        return self.interval_factory.create_interval(spec)

    def diff(self, origin: datetime, target: datetime, absolute: bool = False) -> Duration:
        return self.interval_factory.diff(origin, target, absolute)
