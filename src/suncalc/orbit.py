"""Solar orbital model — where the sun sits on the celestial sphere.

All functions take and return radians, except for ``d`` which is the
fractional day count since J2000.0 (see ``suncalc.timescale.to_days``).
"""

import math

from suncalc.models import SunCoordinates

OBLIQUITY_RAD = math.radians(23.4397)  # Obliquity of the ecliptic
PERIHELION_RAD = math.radians(102.9372)  # Perihelion of the Earth


def solar_mean_anomaly(d: float) -> float:
    return math.radians(357.5291 + 0.98560028 * d)


def ecliptic_longitude(m_rad: float) -> float:
    """Ecliptic longitude of the sun for mean anomaly ``m_rad``."""
    # Equation of center
    c_rad = math.radians(
        1.9148 * math.sin(m_rad)
        + 0.02 * math.sin(2 * m_rad)
        + 0.0003 * math.sin(3 * m_rad)
    )
    # + pi: seen from the Earth, not from the sun
    return m_rad + c_rad + PERIHELION_RAD + math.pi


def declination(l_rad: float, b_rad: float = 0.0) -> float:
    return math.asin(
        math.sin(b_rad) * math.cos(OBLIQUITY_RAD)
        + math.cos(b_rad) * math.sin(OBLIQUITY_RAD) * math.sin(l_rad)
    )


def right_ascension(l_rad: float, b_rad: float = 0.0) -> float:
    return math.atan2(
        math.sin(l_rad) * math.cos(OBLIQUITY_RAD)
        - math.tan(b_rad) * math.sin(OBLIQUITY_RAD),
        math.cos(l_rad),
    )


def sun_coords(d: float) -> SunCoordinates:
    """Declination and right ascension of the sun ``d`` days after J2000.0.

    The sun's ecliptic latitude is taken as zero.
    """
    l_rad = ecliptic_longitude(solar_mean_anomaly(d))
    return SunCoordinates(dec_rad=declination(l_rad), ra_rad=right_ascension(l_rad))
