"""Built-in catalog of celestial bodies.

Day lengths are synodic (solar noon to solar noon). Moons are tidally locked, so
their day equals their orbit around the primary and they only have canonical time.
"""

from orrery.models import Body

_DAY = 86400
_YEAR = 365.25 * _DAY


class UnknownBodyError(KeyError):
    """No catalog body has the requested name."""


# --- Planets ---
earth = Body(name="Earth", day_seconds=_DAY, year_seconds=_YEAR)
mercury = Body(name="Mercury", day_seconds=15201360, year_seconds=87.969 * _DAY)
venus = Body(name="Venus", day_seconds=116.75 * _DAY, year_seconds=224.701 * _DAY)
mars = Body(name="Mars", day_seconds=88775.244, year_seconds=686.980 * _DAY)
jupiter = Body(name="Jupiter", day_seconds=35733, year_seconds=11.862 * _YEAR)
saturn = Body(name="Saturn", day_seconds=38018, year_seconds=29.457 * _YEAR)
uranus = Body(name="Uranus", day_seconds=62064, year_seconds=84.011 * _YEAR)
neptune = Body(name="Neptune", day_seconds=57996, year_seconds=164.79 * _YEAR)

# --- Dwarf planets ---
pluto = Body(name="Pluto", day_seconds=551856.7, year_seconds=247.94 * _YEAR)
ceres = Body(name="Ceres", day_seconds=32668, year_seconds=4.6 * _YEAR)
eris = Body(name="Eris", day_seconds=93240, year_seconds=559.07 * _YEAR)
haumea = Body(name="Haumea", day_seconds=14094, year_seconds=283.8 * _YEAR)
makemake = Body(name="Makemake", day_seconds=82188, year_seconds=305.34 * _YEAR)

# --- Moons (year = orbit around the primary) ---
luna = Body(name="Luna", day_seconds=29.530589 * _DAY, year_seconds=27.321661 * _DAY)
io = Body(name="Io", day_seconds=152853.5, year_seconds=152853.5)
europa = Body(name="Europa", day_seconds=306822.0, year_seconds=306822.0)
ganymede = Body(name="Ganymede", day_seconds=618153.4, year_seconds=618153.4)
callisto = Body(name="Callisto", day_seconds=1441931.2, year_seconds=1441931.2)
titan = Body(name="Titan", day_seconds=1377648.0, year_seconds=1377648.0)
enceladus = Body(name="Enceladus", day_seconds=118386.8, year_seconds=118386.8)
triton = Body(name="Triton", day_seconds=507772.8, year_seconds=507772.8)
charon = Body(name="Charon", day_seconds=551856.7, year_seconds=551856.7)

BODIES: dict[str, Body] = {
    body.name.lower(): body
    for body in (
        earth, mercury, venus, mars, jupiter, saturn, uranus, neptune,
        pluto, ceres, eris, haumea, makemake,
        luna, io, europa, ganymede, callisto, titan, enceladus, triton, charon,
    )
}


def get_body(name: str) -> Body:
    """Look up a catalog body by name, case-insensitively."""
    body = BODIES.get(name.strip().lower())
    if body is None:
        raise UnknownBodyError(f"Unknown body: {name}. Available: {', '.join(BODIES)}")
    return body
