"""
Pytest configuration and shared fixtures

Fun fact: conftest.py fixtures are discovered automatically and shared with
every test in the same directory and below - no imports required!
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from datefactory.factory import DateFactory
from datefactory.instant import DefaultDateTimeFactory
from datefactory.interval import DefaultIntervalFactory
from datefactory.timezone import DefaultTimeZoneFactory


@pytest.fixture
def time_zone_factory() -> DefaultTimeZoneFactory:
    return DefaultTimeZoneFactory()


@pytest.fixture
def interval_factory() -> DefaultIntervalFactory:
    return DefaultIntervalFactory()


@pytest.fixture
def date_time_factory(time_zone_factory: DefaultTimeZoneFactory) -> DefaultDateTimeFactory:
    return DefaultDateTimeFactory(time_zone_factory)


@pytest.fixture
def date_factory() -> DateFactory:
    """Façade with default collaborators"""
    return DateFactory()


@pytest.fixture
def fixed_instant() -> datetime:
    """
    A well-known instant for deterministic tests

    2025-01-15 12:00:00 UTC, a Wednesday in the middle of Q1.
    """
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def london() -> ZoneInfo:
    return ZoneInfo("Europe/London")
