"""orrery — body-relative day/tick time for any celestial body.

    orrery()                  # Earth (implied)
    orrery(mars)              # Mars
    orrery("jupiter")         # catalog lookup by name
    orrery(Body("X", ...))    # custom
"""

from orrery.bodies import (
    BODIES,
    UnknownBodyError,
    callisto,
    ceres,
    charon,
    earth,
    enceladus,
    eris,
    europa,
    ganymede,
    get_body,
    haumea,
    io,
    jupiter,
    luna,
    makemake,
    mars,
    mercury,
    neptune,
    pluto,
    saturn,
    titan,
    triton,
    uranus,
    venus,
)
from orrery.clock import Clock, FormatError
from orrery.models import Body, FormatOptions, InvalidBodyError, Style, Timestamp, YearPosition

__version__ = "0.1.0"


def orrery(body: Body | str | None = None) -> Clock:
    """Create a Clock for a celestial body, Earth when omitted."""
    if body is None:
        return Clock(earth)
    if isinstance(body, str):
        return Clock(get_body(body))
    return Clock(body)


__all__ = [
    "BODIES",
    "Body",
    "Clock",
    "FormatError",
    "FormatOptions",
    "InvalidBodyError",
    "Style",
    "Timestamp",
    "UnknownBodyError",
    "YearPosition",
    "get_body",
    "orrery",
    "earth",
    "mercury",
    "venus",
    "mars",
    "jupiter",
    "saturn",
    "uranus",
    "neptune",
    "pluto",
    "ceres",
    "eris",
    "haumea",
    "makemake",
    "luna",
    "io",
    "europa",
    "ganymede",
    "callisto",
    "titan",
    "enceladus",
    "triton",
    "charon",
]
