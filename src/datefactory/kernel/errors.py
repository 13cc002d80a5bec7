"""
Custom exceptions for datefactory

Every factory catches the native failure at the point of construction and
re-raises one of these, so callers only ever handle library errors.

Fun fact: zoneinfo raises ZoneInfoNotFoundError, which is a KeyError -
a zone database really is just a very opinionated dictionary!
"""


class DateFactoryError(Exception):
    """Base exception for all datefactory errors"""

    pass


class ConfigurationError(DateFactoryError):
    """Raised when an injected class does not satisfy the required capability"""

    def __init__(self, parameter: str, expected: type) -> None:
        self.parameter = parameter
        self.expected = expected
        super().__init__(
            f"The '{parameter}' parameter must be a class that extends "
            f"'{expected.__module__}.{expected.__qualname__}'"
        )


class TimeZoneCreationError(DateFactoryError):
    """Raised when a time zone identifier cannot be resolved"""

    def __init__(self, spec: str, reason: str) -> None:
        self.spec = spec
        self.reason = reason
        super().__init__(f"Failed to create a valid time zone using '{spec}': {reason}")


class IntervalCreationError(DateFactoryError):
    """
    Raised when a duration cannot be parsed or computed

    spec is None when the failure came from a diff rather than a parse;
    pass computed=False to report a parse of a literal None.
    """

    def __init__(
        self, spec: object, reason: str, *, computed: bool | None = None
    ) -> None:
        self.spec = spec
        self.reason = reason
        if computed is None:
            computed = spec is None
        if computed:
            message = f"Failed to compute a valid interval: {reason}"
        else:
            message = f"Failed to create a valid interval using '{spec}': {reason}"
        super().__init__(message)


class InstantCreationError(DateFactoryError):
    """Raised when an instant cannot be created from a spec (and optional format)"""

    def __init__(self, spec: object, reason: str, format: str | None = None) -> None:
        self.spec = spec
        self.reason = reason
        self.format = format
        if format is None:
            message = f"Failed to create a valid instant using '{spec}': {reason}"
        else:
            message = (
                f"Failed to create a valid instant using '{spec}' "
                f"and format '{format}': {reason}"
            )
        super().__init__(message)


class ProviderError(DateFactoryError):
    """Raised when a clock or provider cannot produce the current instant"""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to provide the current instant: {reason}")
