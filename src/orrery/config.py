"""Runtime settings for the command line and Streamlit entry points.

Values come from the environment, after a local ``.env`` file has been loaded:

- ``ORRERY_BODY``: catalog body name (default ``earth``)
- ``ORRERY_STYLE``: ``canonical`` | ``display`` | ``full`` (default ``display``)
- ``ORRERY_LONGITUDE``: meridian offset in degrees (optional)
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from orrery.bodies import UnknownBodyError, get_body
from orrery.models import STYLES, Body, Style

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """An ORRERY_* environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    """Resolved defaults for one run."""

    body: Body
    style: Style
    longitude: float | None


def load_settings(dotenv: bool = True) -> Settings:
    """Resolve settings from ``.env`` and the process environment.

    Args:
        dotenv: Load a ``.env`` file first. Existing environment variables win.

    Returns:
        Settings with the body already looked up in the catalog.

    Raises:
        ConfigError: If a variable names an unknown body or style, or the
            longitude is not a number.
    """
    if dotenv:
        load_dotenv()

    body_name = os.environ.get("ORRERY_BODY", "earth")
    try:
        body = get_body(body_name)
    except UnknownBodyError as e:
        raise ConfigError(f"ORRERY_BODY: {e.args[0]}") from e

    style = os.environ.get("ORRERY_STYLE", "display").strip().lower()
    if style not in STYLES:
        raise ConfigError(f"ORRERY_STYLE: expected one of {', '.join(STYLES)}, got {style!r}")

    longitude: float | None = None
    raw_longitude = os.environ.get("ORRERY_LONGITUDE", "").strip()
    if raw_longitude:
        try:
            longitude = float(raw_longitude)
        except ValueError as e:
            raise ConfigError(f"ORRERY_LONGITUDE: not a number: {raw_longitude!r}") from e

    logger.debug("Settings: body=%s style=%s longitude=%s", body.name, style, longitude)
    return Settings(body=body, style=style, longitude=longitude)  # type: ignore[arg-type]


def load_settings_with_fallback(dotenv: bool = True) -> tuple[Settings, str | None]:
    """Like load_settings, but fall back to Earth defaults on a bad variable.

    Returns:
        (settings, error) where error is the ConfigError message, or None.
    """
    try:
        return load_settings(dotenv=dotenv), None
    except ConfigError as e:
        logger.warning("Ignoring invalid configuration: %s", e)
        return Settings(body=get_body("earth"), style="display", longitude=None), str(e)
