"""Tests for the built-in body catalog and the orrery() factory."""

import pytest

from orrery import BODIES, Clock, UnknownBodyError, bodies, get_body, orrery


def test_catalog_contents():
    assert len(BODIES) == 22
    assert {"earth", "mars", "jupiter", "pluto", "luna", "charon"} <= set(BODIES)


def test_catalog_keys_match_names():
    for key, body in BODIES.items():
        assert key == body.name.lower()


@pytest.mark.parametrize("name", ["mars", "Mars", "  MARS  "])
def test_get_body_is_case_insensitive(name):
    assert get_body(name) is bodies.mars


def test_get_body_unknown():
    with pytest.raises(UnknownBodyError, match="Unknown body: vulcan"):
        get_body("vulcan")


def test_unknown_body_error_is_key_error():
    with pytest.raises(KeyError):
        get_body("vulcan")


def test_earth_constants():
    assert bodies.earth.day_seconds == 86400
    assert bodies.earth.year_seconds == 365.25 * 86400


@pytest.mark.parametrize("body", list(BODIES.values()), ids=lambda b: b.name)
def test_every_body_makes_a_working_clock(body):
    clock = Clock(body)
    ts = clock.at(1770681600000)
    assert clock.parse(clock.format(ts, "canonical")).day_index == ts.day_index


def test_moons_only_have_canonical_time():
    for body in (bodies.luna, bodies.io, bodies.europa, bodies.titan, bodies.charon):
        assert Clock(body).days_per_year < 2


class TestFactory:
    def test_defaults_to_earth(self):
        clock = orrery()
        assert clock.body is bodies.earth
        assert clock.tick_seconds == 86.4

    def test_accepts_body(self):
        assert orrery(bodies.mars).body is bodies.mars

    def test_accepts_catalog_name(self):
        assert orrery("Jupiter").body is bodies.jupiter

    def test_unknown_name(self):
        with pytest.raises(UnknownBodyError):
            orrery("vulcan")
