"""
datefactory CLI

Command-line access to the factories, mostly for checking how a spec,
format or zone identifier will be interpreted.

Usage:
    datefactory now --tz Europe/London
    datefactory parse "2019-04-01" --format "%Y-%m-%d" --tz UTC
    datefactory zone Atlantic/Azores
    datefactory interval P1Y2M3DT4H5M6S
    datefactory diff "2019-01-31" "2019-03-01" --absolute
"""

import json
from datetime import datetime
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from datefactory.factory import DateFactory
from datefactory.kernel.errors import DateFactoryError
from datefactory.kernel.logging import configure_logging
from datefactory.kernel.settings import DateSettings, load_settings

app = typer.Typer(
    name="datefactory",
    help="datefactory - create instants, time zones and durations",
    add_completion=False,
)


class _State:
    settings: DateSettings = DateSettings()
    factory: DateFactory | None = None


state = _State()


def get_factory() -> DateFactory:
    """Get the façade built from the loaded settings"""
    if state.factory is None:
        try:
            state.factory = DateFactory.from_settings(state.settings)
        except DateFactoryError as e:
            fail(e)
    return state.factory


def fail(error: DateFactoryError) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def render(instant: datetime, output_format: Optional[str]) -> str:
    return instant.strftime(output_format or state.settings.display_format)


@app.callback()
def main_callback() -> None:
    """Load settings from the environment and configure logging"""
    try:
        state.settings = load_settings()
    except ValidationError as e:
        typer.echo(f"Error: invalid settings: {e}", err=True)
        raise typer.Exit(1)
    state.factory = None
    configure_logging(
        json_output=state.settings.json_logs,
        log_level=state.settings.log_level,
    )


TimeZoneOption = Annotated[
    Optional[str],
    typer.Option("--tz", "-z", help="Time zone identifier (default zone if omitted)"),
]
OutputFormatOption = Annotated[
    Optional[str],
    typer.Option("--output-format", "-o", help="strftime format for the output"),
]


@app.command()
def now(
    tz: TimeZoneOption = None,
    output_format: OutputFormatOption = None,
) -> None:
    """Show the current instant"""
    factory = get_factory()
    try:
        instant = factory.create_instant(None, tz)
    except DateFactoryError as e:
        fail(e)

    typer.echo(render(instant, output_format))


@app.command()
def parse(
    spec: Annotated[str, typer.Argument(help="Instant spec, e.g. 'tomorrow' or '2019-04-01 12:00:00'")],
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="strptime format for a strict parse"),
    ] = None,
    tz: TimeZoneOption = None,
    output_format: OutputFormatOption = None,
) -> None:
    """Parse an instant spec and show the result"""
    factory = get_factory()
    try:
        if format is None:
            instant = factory.create_instant(spec, tz)
        else:
            instant = factory.create_from_format(format, spec, tz)
    except DateFactoryError as e:
        fail(e)

    typer.echo(render(instant, output_format))
    typer.echo(f"  ISO: {instant.isoformat()}")
    typer.echo(f"  Zone: {instant.tzname()}")


@app.command()
def zone(
    spec: Annotated[str, typer.Argument(help="Time zone identifier, e.g. Europe/London")],
) -> None:
    """Resolve a time zone identifier"""
    factory = get_factory()
    try:
        time_zone = factory.create_time_zone(spec)
        current = factory.create_instant(None, time_zone)
    except DateFactoryError as e:
        fail(e)

    typer.echo(f"✓ {spec}")
    typer.echo(f"  Abbreviation: {current.tzname()}")
    typer.echo(f"  UTC offset: {current.strftime('%z')}")


@app.command()
def interval(
    spec: Annotated[str, typer.Argument(help="ISO-8601 duration, e.g. P1Y2M3DT4H5M6S")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Parse an ISO-8601 duration"""
    factory = get_factory()
    try:
        duration = factory.create_interval(spec)
    except DateFactoryError as e:
        fail(e)

    if json_output:
        typer.echo(json.dumps(duration.model_dump(), indent=2))
        return

    typer.echo(str(duration))
    for field in ("years", "months", "days", "hours", "minutes", "seconds"):
        typer.echo(f"  {field.capitalize()}: {getattr(duration, field)}")


@app.command()
def diff(
    origin: Annotated[str, typer.Argument(help="Origin instant spec")],
    target: Annotated[str, typer.Argument(help="Target instant spec")],
    absolute: Annotated[
        bool,
        typer.Option("--absolute", help="Force a non-negative result"),
    ] = False,
    tz: TimeZoneOption = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show the calendar-aware span between two instants"""
    factory = get_factory()
    try:
        duration = factory.diff(
            factory.create_instant(origin, tz),
            factory.create_instant(target, tz),
            absolute,
        )
    except DateFactoryError as e:
        fail(e)

    if json_output:
        typer.echo(json.dumps(duration.model_dump(), indent=2))
        return

    typer.echo(str(duration))
    typer.echo(f"  Total days: {duration.total_days}")


def main() -> None:
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
