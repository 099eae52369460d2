"""Environment-driven settings for the CLI.

Values are read from the process environment; the CLI calls
``load_dotenv()`` first so a local ``.env`` file works too.
"""

import os
from dataclasses import dataclass

from suncalc.models import Observer

# Near Kyiv
DEFAULT_OBSERVER = Observer(lat=50.5, lng=30.5, name="50.5, 30.5")


class ConfigError(Exception):
    """Malformed configuration value."""


@dataclass(frozen=True)
class Settings:
    observer: Observer
    timezone: str | None  # IANA name, "auto", or None for UTC
    user_agent: str | None  # Nominatim User-Agent override


def _float_env(name: str) -> float | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} is not a number: {raw!r}") from e


def load_settings() -> Settings:
    """Read SUNCALC_* environment variables.

    Raises:
        ConfigError: When a coordinate is malformed or only one of the two is set.
    """
    lat = _float_env("SUNCALC_LATITUDE")
    lng = _float_env("SUNCALC_LONGITUDE")
    if (lat is None) != (lng is None):
        raise ConfigError("SUNCALC_LATITUDE and SUNCALC_LONGITUDE must be set together")

    observer = DEFAULT_OBSERVER
    if lat is not None and lng is not None:
        observer = Observer(lat=lat, lng=lng, name=f"{lat}, {lng}")

    return Settings(
        observer=observer,
        timezone=os.environ.get("SUNCALC_TIMEZONE") or None,
        user_agent=os.environ.get("SUNCALC_USER_AGENT") or None,
    )
