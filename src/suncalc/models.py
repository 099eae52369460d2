"""Data model definitions — value types shared by the core and the output layers."""

import math
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class QueryInput:
    """Raw CLI input. Not yet resolved."""

    lat: float | None  # Latitude (decimal degrees)
    lng: float | None  # Longitude (decimal degrees)
    address: str | None  # Free-form address, geocoded when lat/lng are missing
    when: datetime  # Instant of interest (aware or naive UTC)


@dataclass(frozen=True)
class Observer:
    """A resolved observing location."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)
    name: str = ""  # Display name (geocoder result or "lat, lng")


@dataclass(frozen=True)
class SunCoordinates:
    """Equatorial coordinates of the sun for a given day count."""

    dec_rad: float  # Declination (radians)
    ra_rad: float  # Right ascension (radians)


@dataclass(frozen=True)
class HorizontalPosition:
    """The sun as seen by an observer.

    Azimuth follows the formula's convention: 0 = south, positive towards
    west. Unpacks as ``(azimuth_rad, altitude_rad)``.
    """

    azimuth_rad: float
    altitude_rad: float

    def __iter__(self):
        yield self.azimuth_rad
        yield self.altitude_rad

    @property
    def az_deg(self) -> float:
        return math.degrees(self.azimuth_rad)

    @property
    def alt_deg(self) -> float:
        return math.degrees(self.altitude_rad)

    @property
    def compass_az_deg(self) -> float:
        """Azimuth as a compass bearing (0=N, 90=E, 180=S, 270=W)."""
        return self.az_deg + 180.0


@dataclass(frozen=True)
class SunAngle:
    """A sun altitude threshold and the two events it produces."""

    angle_deg: float  # Target altitude (degrees)
    rise_name: str  # Event name for the morning crossing
    set_name: str  # Event name for the evening crossing


@dataclass(frozen=True)
class SunTimeEvent:
    """A named instant produced by the sun times solver.

    ``time`` is None when the sun never reaches ``angle_deg`` on that day
    (polar day or polar night). Solar noon and nadir have no threshold,
    so their ``angle_deg`` and ``rising`` are None.
    """

    name: str
    time: datetime | None
    angle_deg: float | None
    rising: bool | None


@dataclass(frozen=True)
class SunReport:
    """The sole input to renderers. Fully computed state."""

    observer: Observer
    when: datetime  # UTC instant the report was computed for
    position: HorizontalPosition
    events: tuple[SunTimeEvent, ...]


SOLAR_NOON = "solarNoon"
NADIR = "nadir"

# Altitude thresholds, ordered from the horizon outwards.
SUN_ANGLES: tuple[SunAngle, ...] = (
    SunAngle(-0.833, "sunrise", "sunset"),
    SunAngle(-0.3, "sunriseEnd", "sunsetStart"),
    SunAngle(-6.0, "dawn", "dusk"),
    SunAngle(-12.0, "nauticalDawn", "nauticalDusk"),
    SunAngle(-18.0, "nightEnd", "night"),
    SunAngle(6.0, "goldenHourEnd", "goldenHour"),
)
