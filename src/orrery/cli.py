"""`orrery` command line — print body-relative time for now, an instant, or a date.

    orrery now --body mars
    orrery at 1770681600000 --style full --longitude -74
    orrery date "2026-02-10 09:00" --tz Asia/Seoul
    orrery parse "T56:040:000.000@86.4"
"""

import json
import logging
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any

import click
from pytz import UnknownTimeZoneError, timezone
from pytz.exceptions import InvalidTimeError

from orrery.bodies import BODIES, UnknownBodyError, get_body
from orrery.clock import Clock, FormatError
from orrery.config import ConfigError, Settings, load_settings
from orrery.models import STYLES, FormatOptions, Timestamp

EXIT_INPUT_ERROR = 1


class OrreryCliError(click.ClickException):
    """Click exception with explicit exit-code control."""

    def __init__(self, message: str, *, exit_code: int = EXIT_INPUT_ERROR) -> None:
        super().__init__(message)
        self.exit_code = int(exit_code)


def _format_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options shared by every command that prints a timestamp."""

    @click.option("--body", "body_name", default=None, help="Catalog body (default: ORRERY_BODY or earth).")
    @click.option("--style", type=click.Choice(STYLES), default=None, help="Output layout.")
    @click.option("--longitude", type=float, default=None, help="Meridian offset label in degrees.")
    @click.option("--no-subtick", is_flag=True, help="Omit the .sss sub-tick group.")
    @click.option("--no-division", is_flag=True, help="Omit the @<tick seconds> group.")
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper


def _settings() -> Settings:
    try:
        return load_settings()
    except ConfigError as e:
        raise OrreryCliError(str(e)) from e


def _clock(settings: Settings, body_name: str | None) -> Clock:
    if body_name is None:
        return Clock(settings.body)
    try:
        return Clock(get_body(body_name))
    except UnknownBodyError as e:
        raise OrreryCliError(e.args[0]) from e


def _emit(
    clock: Clock,
    ts: Timestamp,
    settings: Settings,
    *,
    style: str | None,
    longitude: float | None,
    no_subtick: bool,
    no_division: bool,
) -> None:
    options = FormatOptions(
        longitude=longitude if longitude is not None else settings.longitude,
        subtick=not no_subtick,
        division=not no_division,
    )
    click.echo(clock.format(ts, style or settings.style, options))  # type: ignore[arg-type]


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Body-relative day/tick time."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command("now")
@_format_options
def now_command(body_name: str | None, **format_kwargs: Any) -> None:
    """Print the current time."""
    settings = _settings()
    clock = _clock(settings, body_name)
    _emit(clock, clock.now(), settings, **format_kwargs)


@cli.command("at")
@click.argument("millis", type=int)
@_format_options
def at_command(millis: int, body_name: str | None, **format_kwargs: Any) -> None:
    """Print the time at MILLIS (Unix milliseconds, may be negative)."""
    settings = _settings()
    clock = _clock(settings, body_name)
    _emit(clock, clock.at(millis), settings, **format_kwargs)


@cli.command("date")
@click.argument("when")
@click.option("--tz", "tz_name", default="UTC", show_default=True, help="Timezone for naive input.")
@_format_options
def date_command(when: str, tz_name: str, body_name: str | None, **format_kwargs: Any) -> None:
    """Print the time at WHEN, an ISO 8601 date/time ("YYYY-MM-DD HH:MM")."""
    settings = _settings()
    clock = _clock(settings, body_name)
    try:
        dt = datetime.fromisoformat(when)
    except ValueError as e:
        raise OrreryCliError(f"Invalid date/time: {when}") from e
    if dt.tzinfo is None:
        try:
            dt = timezone(tz_name).localize(dt, is_dst=None)
        except UnknownTimeZoneError as e:
            raise OrreryCliError(f"Unknown timezone: {tz_name}") from e
        except InvalidTimeError as e:
            raise OrreryCliError(f"{when} does not exist or is ambiguous in {tz_name}") from e
    _emit(clock, clock.from_datetime(dt), settings, **format_kwargs)


@cli.command("parse")
@click.argument("text")
@click.option("--body", "body_name", default=None, help="Catalog body (default: ORRERY_BODY or earth).")
def parse_command(text: str, body_name: str | None) -> None:
    """Parse TEXT and print its fields as JSON."""
    clock = _clock(_settings(), body_name)
    try:
        ts = clock.parse(text)
    except FormatError as e:
        raise OrreryCliError(str(e)) from e
    payload = {
        "body": clock.body.name,
        "day_index": ts.day_index,
        "tick": ts.tick,
        "subtick": ts.subtick,
        "year": ts.year,
        "day_of_year": ts.day_of_year,
        "millis": clock.to_millis(ts),
        "utc": clock.to_datetime(ts).isoformat(),
    }
    click.echo(json.dumps(payload, sort_keys=True, indent=2))


@cli.command("bodies")
def bodies_command() -> None:
    """List the built-in bodies with tick length and days per year."""
    for key, body in BODIES.items():
        clock = Clock(body)
        click.echo(f"{key:<10} @{clock.tick_seconds:.1f}s  {clock.days_per_year:.2f} days/year")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
