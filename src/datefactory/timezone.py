"""
Time zone factory

Resolves zone identifiers ("UTC", "Europe/London") against the IANA
database through zoneinfo, translating lookup failures into
TimeZoneCreationError.

Fun fact: the IANA time zone database is maintained by a handful of
volunteers and still records the 1883 "day of two noons", when US
railroads switched to standard time!
"""

from datetime import tzinfo
from typing import Protocol, TypeAlias
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datefactory.kernel.errors import ConfigurationError, TimeZoneCreationError
from datefactory.kernel.logging import get_logger
from datefactory.kernel.metrics import track_creation

logger = get_logger(__name__)

# None defers to the default zone, a string is an identifier to resolve,
# a tzinfo is used as-is
TimeZoneArg: TypeAlias = str | tzinfo | None


class TimeZoneFactory(Protocol):
    """Protocol for time zone creation"""

    def create_time_zone(self, spec: str) -> tzinfo:
        """Create a time zone from its identifier"""
        ...


class DefaultTimeZoneFactory:
    """Time zone factory backed by zoneinfo"""

    def __init__(self, zone_class: type[ZoneInfo] | None = None) -> None:
        """
        Args:
            zone_class: ZoneInfo subclass to instantiate (defaults to ZoneInfo)

        Raises:
            ConfigurationError: If zone_class is not a ZoneInfo subclass
        """
        zone_class = zone_class or ZoneInfo
        if not (isinstance(zone_class, type) and issubclass(zone_class, ZoneInfo)):
            raise ConfigurationError("zone_class", ZoneInfo)
        self._zone_class = zone_class

    @track_creation("time_zone")
    def create_time_zone(self, spec: str) -> ZoneInfo:
        """
        Create a time zone from an IANA identifier

        Args:
            spec: Zone identifier, e.g. "Europe/London"

        Returns:
            Resolved zone; its key equals spec

        Raises:
            TimeZoneCreationError: If spec is empty or not a known zone
        """
        if not spec:
            raise TimeZoneCreationError(spec, "the time zone identifier must not be empty")

        try:
            return self._zone_class(spec)
        except ZoneInfoNotFoundError as e:
            logger.debug("Unknown time zone", spec=spec)
            raise TimeZoneCreationError(spec, f"unknown time zone identifier ({e})") from e
        except (ValueError, TypeError, OSError) as e:
            logger.debug("Malformed time zone", spec=spec, reason=str(e))
            raise TimeZoneCreationError(spec, str(e)) from e


def resolve_time_zone(time_zone: object, factory: TimeZoneFactory) -> tzinfo | None:
    """
    Resolve a TimeZoneArg to a tzinfo (or None for "use the default")

    Args:
        time_zone: None, an identifier string or a tzinfo
        factory: Factory used to resolve identifier strings

    Returns:
        The resolved zone, or None when no zone was given

    Raises:
        TimeZoneCreationError: If an identifier cannot be resolved
        TypeError: If time_zone is none of the accepted types
    """
    if time_zone is None or time_zone == "":
        return None

    if isinstance(time_zone, str):
        return factory.create_time_zone(time_zone)

    if isinstance(time_zone, tzinfo):
        return time_zone

    raise TypeError(
        "The 'time_zone' argument must be a 'str' or a 'tzinfo'; "
        f"'{type(time_zone).__name__}' provided"
    )
