"""
Kernel - errors, logging, metrics and settings shared by every factory
"""

from datefactory.kernel.errors import (
    ConfigurationError,
    DateFactoryError,
    InstantCreationError,
    IntervalCreationError,
    ProviderError,
    TimeZoneCreationError,
)
from datefactory.kernel.settings import DateSettings, load_settings

__all__ = [
    # Errors
    "DateFactoryError",
    "ConfigurationError",
    "TimeZoneCreationError",
    "IntervalCreationError",
    "InstantCreationError",
    "ProviderError",
    # Settings
    "DateSettings",
    "load_settings",
]
