"""
datefactory - factories for instants, time zones and durations

Wraps datetime and zoneinfo construction behind small factories that turn
every native failure into a library error.
"""

from datefactory.clock import Clock, CurrentDateTimeProvider, FixedClock, SystemClock
from datefactory.factory import DateFactory
from datefactory.instant import DateTimeFactory, DefaultDateTimeFactory
from datefactory.interval import DefaultIntervalFactory, Duration, IntervalFactory
from datefactory.kernel.errors import (
    ConfigurationError,
    DateFactoryError,
    InstantCreationError,
    IntervalCreationError,
    ProviderError,
    TimeZoneCreationError,
)
from datefactory.timezone import (
    DefaultTimeZoneFactory,
    TimeZoneArg,
    TimeZoneFactory,
    resolve_time_zone,
)

__version__ = "0.1.0"
__all__ = [
    # Façade
    "DateFactory",
    # Factories
    "TimeZoneFactory",
    "DefaultTimeZoneFactory",
    "TimeZoneArg",
    "resolve_time_zone",
    "IntervalFactory",
    "DefaultIntervalFactory",
    "Duration",
    "DateTimeFactory",
    "DefaultDateTimeFactory",
    # Clocks
    "Clock",
    "SystemClock",
    "FixedClock",
    "CurrentDateTimeProvider",
    # Errors
    "DateFactoryError",
    "ConfigurationError",
    "TimeZoneCreationError",
    "IntervalCreationError",
    "InstantCreationError",
    "ProviderError",
    "__version__",
]
