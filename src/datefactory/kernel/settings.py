"""
Settings - the handful of options datefactory recognises

Only two kinds of configuration exist for the factories themselves: a time
zone identifier and a date format string. Logging options ride along so the
CLI can be configured from the same place.
"""

import os
from typing import Literal

from pydantic import BaseModel, Field

ENV_PREFIX = "DATEFACTORY_"


class DateSettings(BaseModel):
    """
    Factory and output configuration

    default_time_zone is resolved when a factory is built from these
    settings, so an unknown identifier fails at startup rather than on the
    first call.
    """

    default_time_zone: str | None = Field(
        default=None,
        description="Zone identifier used when a call passes no zone (None = system local zone)",
    )

    display_format: str = Field(
        default="%d/%m/%y %H:%M:%S",
        min_length=1,
        description="strftime format used to render instants for display",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level for the CLI",
    )

    json_logs: bool = Field(
        default=False,
        description="Emit JSON logs instead of console logs",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "default_time_zone": "Europe/London",
                    "display_format": "%d/%m/%y %H:%M:%S",
                    "log_level": "WARNING",
                    "json_logs": False,
                }
            ]
        },
    }


def load_settings() -> DateSettings:
    """
    Build settings from DATEFACTORY_* environment variables

    JSON logs are switched on when ENVIRONMENT=production.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    values: dict[str, object] = {}

    time_zone = os.getenv(f"{ENV_PREFIX}DEFAULT_TIME_ZONE")
    if time_zone:
        values["default_time_zone"] = time_zone

    display_format = os.getenv(f"{ENV_PREFIX}DISPLAY_FORMAT")
    if display_format:
        values["display_format"] = display_format

    log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level.upper()

    values["json_logs"] = os.getenv("ENVIRONMENT", "development").lower() == "production"

    return DateSettings.model_validate(values)
