"""Day-clock engine — converts Unix time to body-relative day/tick time and back."""

import logging
import math
import re
import time
from collections.abc import Callable
from datetime import datetime, timedelta

from pytz import utc

from orrery.models import STYLES, Body, FormatOptions, Style, Timestamp, YearPosition

logger = logging.getLogger(__name__)

TICKS_PER_DAY = 1000
SUBTICKS_PER_TICK = 1000
SUBTICKS_PER_DAY = TICKS_PER_DAY * SUBTICKS_PER_TICK

# Rounding slack allowed when flooring to a subtick, in ULPs of the day count
# (never finer than the ULP of one day, never more than half a subtick).
_ULP_SLACK = 16
_MAX_SLACK_SUBTICKS = 0.5

_EPOCH = datetime(1970, 1, 1, tzinfo=utc)

_DIVISION_RE = re.compile(r"@[\d.]+")
_LONGITUDE_RE = re.compile(r"[+-][\d.]+$")
_SIGNED_INT_RE = re.compile(r"[+-]?\d+")
_UNSIGNED_INT_RE = re.compile(r"\d+")


class FormatError(ValueError):
    """Text is not a formatted day-clock timestamp."""

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        message = f"Invalid orrery timestamp: {text}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


def _system_millis() -> int:
    return time.time_ns() // 1_000_000


def _format_number(value: float) -> str:
    """Render a number the way it was written: -74 stays "-74", 137.4 stays "137.4"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _to_int(field: str, pattern: re.Pattern[str], text: str, name: str) -> int:
    if not pattern.fullmatch(field):
        raise FormatError(text, f"{name} is not an integer: {field!r}")
    return int(field)


class Clock:
    """Day-clock for one body.

    The clock is immutable after construction; every method except ``now`` is a
    pure function of its arguments. ``time_source`` returns Unix milliseconds and
    defaults to the system clock.
    """

    def __init__(self, body: Body, time_source: Callable[[], int] | None = None) -> None:
        self._body = body
        self._tick_seconds = body.day_seconds / TICKS_PER_DAY
        self._days_per_year = body.year_seconds / body.day_seconds
        self._time_source = time_source or _system_millis

    @property
    def body(self) -> Body:
        return self._body

    @property
    def tick_seconds(self) -> float:
        return self._tick_seconds

    @property
    def days_per_year(self) -> float:
        return self._days_per_year

    def at(self, ms: float) -> Timestamp:
        """Time at a given Unix timestamp in milliseconds."""
        epoch_seconds = ms / 1000
        day = epoch_seconds / self._body.day_seconds
        day_index = math.floor(day)

        # Count whole subticks into the day in one step so tick and subtick
        # carry together; a count of a full day rolls over into the next one.
        position = (day - day_index) * SUBTICKS_PER_DAY
        slack = min(
            _ULP_SLACK * math.ulp(max(abs(day), 1.0)) * SUBTICKS_PER_DAY,
            _MAX_SLACK_SUBTICKS,
        )
        carry, count = divmod(math.floor(position + slack), SUBTICKS_PER_DAY)
        day_index += carry
        tick, subtick = divmod(count, SUBTICKS_PER_TICK)

        year_position = None
        if self._days_per_year >= 2:
            year = math.floor(day_index / self._days_per_year)
            year_position = YearPosition(
                year=year,
                day_of_year=day_index - math.floor(year * self._days_per_year),
            )

        return Timestamp(
            epoch_seconds=epoch_seconds,
            day_fractional=day,
            day_index=day_index,
            tick=tick,
            subtick=subtick,
            year_position=year_position,
            days_per_year=self._days_per_year,
        )

    def now(self) -> Timestamp:
        """Time at the current wall-clock instant."""
        return self.at(self._time_source())

    def from_datetime(self, dt: datetime) -> Timestamp:
        """Time at a datetime. Naive datetimes are read as UTC."""
        if dt.tzinfo is None:
            dt = utc.localize(dt)
        return self.at((dt.astimezone(utc) - _EPOCH) // timedelta(milliseconds=1))

    def to_millis(self, ts: Timestamp) -> int:
        """Convert a Timestamp back to Unix milliseconds."""
        return round(ts.epoch_seconds * 1000)

    def to_datetime(self, ts: Timestamp) -> datetime:
        """Convert a Timestamp back to a UTC datetime."""
        return _EPOCH + timedelta(milliseconds=self.to_millis(ts))

    def format(
        self,
        ts: Timestamp,
        style: Style = "display",
        options: FormatOptions | None = None,
    ) -> str:
        """Format: T{Y}:{DDD}:{tick}.{subtick}@{tick_seconds}{±longitude}

        ``canonical`` is always T{D}:{tick}...; ``full`` appends the canonical form
        in parentheses. Bodies without a year position always get the canonical form.
        """
        if style not in STYLES:
            raise ValueError(f"Unknown style: {style!r}. Must be one of: {', '.join(STYLES)}")
        opts = options or FormatOptions()

        tick_str = f"{ts.tick:03d}"
        subtick_str = f".{ts.subtick:03d}" if opts.subtick else ""
        division_str = f"@{self._tick_seconds:.1f}" if opts.division else ""
        longitude_str = ""
        if opts.longitude is not None:
            sign = "+" if opts.longitude >= 0 else ""
            longitude_str = f"{sign}{_format_number(opts.longitude)}"

        suffix = f"{subtick_str}{division_str}{longitude_str}"
        canonical = f"T{ts.day_index}:{tick_str}{suffix}"
        if style == "canonical" or ts.year_position is None:
            return canonical

        width = max(3, len(str(math.ceil(ts.days_per_year))))
        position = ts.year_position
        display = f"T{position.year}:{position.day_of_year:0{width}d}:{tick_str}{suffix}"
        if style == "display":
            return display
        return f"{display} ({canonical})"

    def parse(self, text: str) -> Timestamp:
        """Parse a formatted string back to a Timestamp.

        Accepts T{Y}:{D}:{tick}.{subtick}@{div}{±lon} or the canonical
        T{D}:{tick}.{subtick}@{div}{±lon}. The division and longitude are ignored;
        the clock already knows its own tick duration.
        """
        rest = text[1:] if text.startswith("T") else text
        rest = _DIVISION_RE.sub("", rest, count=1)
        rest = _LONGITUDE_RE.sub("", rest)

        parts = rest.split(":")
        if len(parts) == 2:
            day_index = _to_int(parts[0], _SIGNED_INT_RE, text, "day")
            tick_field = parts[1]
        elif len(parts) == 3:
            year = _to_int(parts[0], _SIGNED_INT_RE, text, "year")
            day_of_year = _to_int(parts[1], _UNSIGNED_INT_RE, text, "day of year")
            day_index = math.floor(year * self._days_per_year) + day_of_year
            tick_field = parts[2]
        else:
            raise FormatError(text, f"expected 2 or 3 fields, got {len(parts)}")

        tick_str, dot, subtick_str = tick_field.partition(".")
        tick = _to_int(tick_str, _UNSIGNED_INT_RE, text, "tick")
        subtick = _to_int(subtick_str, _UNSIGNED_INT_RE, text, "subtick") if dot else 0

        logger.debug(
            "Parsed %r as day=%d tick=%d subtick=%d", text, day_index, tick, subtick
        )
        epoch_seconds = (
            day_index + (tick + subtick / SUBTICKS_PER_TICK) / TICKS_PER_DAY
        ) * self._body.day_seconds
        return self.at(epoch_seconds * 1000)

    def describe(self) -> str:
        """Body name followed by the current time in the display layout."""
        return f"{self._body.name} {self.format(self.now())}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Clock({self._body!r})"
