"""Data model definitions — bodies, structured timestamps, and formatting options."""

import math
from dataclasses import dataclass
from typing import Literal

Style = Literal["canonical", "display", "full"]
STYLES: tuple[Style, ...] = ("canonical", "display", "full")


class InvalidBodyError(ValueError):
    """Body periods are not finite positive numbers, or their ratio overflows."""


@dataclass(frozen=True)
class Body:
    """Physical constants of a single celestial body."""

    name: str  # Display name ("Earth", "Mars", ...)
    day_seconds: float  # Synodic day (solar noon to solar noon), SI seconds
    year_seconds: float  # Orbital period around its primary, SI seconds

    def __post_init__(self) -> None:
        for field_name in ("day_seconds", "year_seconds"):
            value = getattr(self, field_name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidBodyError(
                    f"{self.name}: {field_name} must be a positive number, got {value!r}"
                )
        if not math.isfinite(self.year_seconds / self.day_seconds):
            raise InvalidBodyError(
                f"{self.name}: year_seconds / day_seconds overflows "
                f"({self.year_seconds!r} / {self.day_seconds!r})"
            )


@dataclass(frozen=True)
class YearPosition:
    """Year and zero-based day within that year. Only exists when days_per_year >= 2."""

    year: int  # Epoch-relative year (may be negative)
    day_of_year: int  # 0-indexed day within the year


@dataclass(frozen=True)
class Timestamp:
    """Body-relative time for one instant. Produced by Clock.at, consumed by Clock.format."""

    epoch_seconds: float  # SI seconds since the Unix epoch
    day_fractional: float  # Continuous day count from the epoch
    day_index: int  # Whole days since the epoch (floored, may be negative)
    tick: int  # Thousandths of a day (0-999)
    subtick: int  # Thousandths of a tick (0-999)
    year_position: YearPosition | None  # None for bodies with a sub-two-day year
    days_per_year: float  # Copied from the clock for field width calculations

    @property
    def year(self) -> int | None:
        return self.year_position.year if self.year_position else None

    @property
    def day_of_year(self) -> int | None:
        return self.year_position.day_of_year if self.year_position else None


@dataclass(frozen=True)
class FormatOptions:
    """Optional parts of a formatted timestamp."""

    longitude: float | None = None  # Meridian offset in degrees; decorative label only
    subtick: bool = True  # Include ".sss"
    division: bool = True  # Include "@<tick seconds>"
