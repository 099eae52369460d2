"""Horizontal coordinate transform — equatorial to azimuth/altitude and back.

Arguments follow one naming scheme throughout: ``h_rad`` is the local
hour angle (or a target altitude in ``hour_angle``), ``phi_rad`` the
observer latitude, ``dec_rad`` the sun's declination, ``lw_rad`` the
negated observer longitude. Everything is in radians.
"""

import math


def sidereal_time(d: float, lw_rad: float) -> float:
    """Local sidereal time ``d`` days after J2000.0, in radians."""
    return math.radians(280.16 + 360.9856235 * d) - lw_rad


def azimuth(h_rad: float, phi_rad: float, dec_rad: float) -> float:
    """Azimuth measured from south, positive towards west, in (-pi, pi]."""
    return math.atan2(
        math.sin(h_rad),
        math.cos(h_rad) * math.sin(phi_rad) - math.tan(dec_rad) * math.cos(phi_rad),
    )


def _sin_altitude(h_rad: float, phi_rad: float, dec_rad: float) -> float:
    return math.sin(phi_rad) * math.sin(dec_rad) + math.cos(phi_rad) * math.cos(
        dec_rad
    ) * math.cos(h_rad)


def altitude(h_rad: float, phi_rad: float, dec_rad: float) -> float:
    """Altitude above the horizon, in [-pi/2, pi/2]. NaN outside the asin domain."""
    x = _sin_altitude(h_rad, phi_rad, dec_rad)
    if 1.0 < abs(x) <= 1.0 + 1e-12:
        # Rounding at the zenith or nadir
        x = math.copysign(1.0, x)
    if not -1.0 <= x <= 1.0:
        return math.nan
    return math.asin(x)


def altitude_legacy(h_rad: float, phi_rad: float, dec_rad: float) -> float:
    """Compatibility mode: ``sin`` applied where ``asin`` belongs.

    Reproduces the historical output bit for bit. The value is not an
    angle and does not agree with ``hour_angle``; use ``altitude``.
    """
    return math.sin(_sin_altitude(h_rad, phi_rad, dec_rad))


def hour_angle(h_rad: float, phi_rad: float, dec_rad: float) -> float:
    """Hour angle at which the sun reaches altitude ``h_rad``.

    NaN when the altitude is never reached that day (the acos argument
    leaves [-1, 1]). NaN is returned, not raised.
    """
    x = (math.sin(h_rad) - math.sin(phi_rad) * math.sin(dec_rad)) / (
        math.cos(phi_rad) * math.cos(dec_rad)
    )
    if not -1.0 <= x <= 1.0:
        return math.nan
    return math.acos(x)
