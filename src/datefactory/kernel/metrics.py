"""
Prometheus metrics for datefactory.

Counts created values and creation failures per kind, so an application
can see how often it feeds the factories bad specs.

Every decorated call is recorded, so a zone resolved while creating an
instant counts under both "time_zone" and "instant".
"""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from prometheus_client import Counter, Histogram

values_created_total = Counter(
    "datefactory_values_created_total",
    "Total number of values successfully created by the factories",
    ["kind"],  # instant, instant_from_format, time_zone, interval, diff
)

creation_failures_total = Counter(
    "datefactory_creation_failures_total",
    "Total number of factory calls that raised, nested calls included",
    ["kind"],
)

creation_duration_seconds = Histogram(
    "datefactory_creation_duration_seconds",
    "Duration of factory calls in seconds",
    ["kind"],
    buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05),
)

P = ParamSpec("P")
R = TypeVar("R")


def track_creation(kind: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator to count and time factory calls.

    Args:
        kind: Kind of value the decorated method creates

    Returns:
        Decorated function that records success/failure and duration
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                creation_failures_total.labels(kind=kind).inc()
                raise
            finally:
                creation_duration_seconds.labels(kind=kind).observe(
                    time.perf_counter() - start
                )
            values_created_total.labels(kind=kind).inc()
            return result

        return wrapper

    return decorator
