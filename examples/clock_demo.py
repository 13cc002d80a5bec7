#!/usr/bin/env python3
"""
Clock Demonstration - Injectable "now"

Code that asks a Clock for the time can be tested with a FixedClock and
run in production with a SystemClock, without changing a line.

Scenario:
- Build a subscription expiry check that depends on a Clock
- Run it against a live clock
- Run it against two frozen clocks, before and after expiry
- Show the calendar-aware remaining duration

Run:
    python examples/clock_demo.py
"""

from datetime import datetime

from datefactory import Clock, DateFactory, FixedClock, SystemClock


def print_section(title: str) -> None:
    """Print section header"""
    print(f"\n{'='*70}")
    print(f"  {title}")
    print(f"{'='*70}\n")


class Subscription:
    def __init__(self, expires_at: datetime, clock: Clock, factory: DateFactory) -> None:
        self.expires_at = expires_at
        self.clock = clock
        self.factory = factory

    def is_active(self) -> bool:
        return self.clock.now() < self.expires_at

    def remaining(self) -> str:
        return str(self.factory.diff(self.clock.now(), self.expires_at))


def main() -> None:
    factory = DateFactory()
    expires_at = factory.create_instant("2030-01-31 00:00:00", "Europe/London")

    print_section("Live clock")
    live = Subscription(expires_at, SystemClock(factory.date_time_factory, "UTC"), factory)
    print(f"Active: {live.is_active()}")
    print(f"Remaining: {live.remaining()}")

    print_section("Frozen clock - before expiry")
    before = FixedClock(factory.create_instant("2029-12-15 09:30:00", "Europe/London"))
    frozen = Subscription(expires_at, before, factory)
    print(f"Active: {frozen.is_active()}")
    print(f"Remaining: {frozen.remaining()}")

    print_section("Frozen clock - after expiry")
    after = FixedClock(factory.create_instant("2030-03-01 00:00:00", "Europe/London"))
    expired = Subscription(expires_at, after, factory)
    print(f"Active: {expired.is_active()}")
    print(f"Remaining: {expired.remaining()}  (negative: already expired)")


if __name__ == "__main__":
    main()
