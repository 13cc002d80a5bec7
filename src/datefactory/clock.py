"""
Clocks - injectable "now"

SystemClock asks the instant factory for the current time on every call;
FixedClock returns one captured instant forever, which makes time-dependent
code deterministic under test.
"""

from datetime import datetime
from typing import Protocol

from datefactory.instant import DateTimeFactory, DefaultDateTimeFactory
from datefactory.kernel.errors import ProviderError
from datefactory.timezone import TimeZoneArg


class Clock(Protocol):
    """Protocol for clocks - allows deterministic testing"""

    def now(self) -> datetime:
        """Return the current instant"""
        ...


class SystemClock:
    """Live clock delegating every call to an instant factory"""

    def __init__(
        self,
        factory: DateTimeFactory | None = None,
        time_zone: TimeZoneArg = None,
    ) -> None:
        """
        Args:
            factory: Instant factory (default-constructed if None)
            time_zone: Zone for every instant (factory default if None)
        """
        self._factory = factory or DefaultDateTimeFactory()
        self._time_zone = time_zone

    def now(self) -> datetime:
        """
        Return the current instant

        Raises:
            ProviderError: If the factory cannot create the instant
        """
        try:
            return self._factory.create_instant(None, self._time_zone)
        except Exception as e:
            raise ProviderError(str(e)) from e


class FixedClock:
    """Frozen clock returning the same instant for its whole lifetime"""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


class CurrentDateTimeProvider:
    """Service providing the current date and time"""

    def __init__(self, factory: DateTimeFactory) -> None:
        self._factory = factory

    def get_date_time(self) -> datetime:
        """
        Return the current instant in the factory's default zone

        Raises:
            ProviderError: If the factory cannot create the instant
        """
        try:
            return self._factory.create_instant()
        except Exception as e:
            raise ProviderError(str(e)) from e
