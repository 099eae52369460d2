"""Sun computation layer — sun position and daily sun times for an observer.

Everything here except ``run`` is a pure function of its arguments.
Latitudes, longitudes and threshold angles come in as degrees and are
converted to radians once, at the top of each public function.
"""

import math
from collections.abc import Sequence
from datetime import datetime

from suncalc import horizontal, orbit
from suncalc.location import resolve_observer
from suncalc.models import (
    NADIR,
    SOLAR_NOON,
    SUN_ANGLES,
    HorizontalPosition,
    Observer,
    QueryInput,
    SunAngle,
    SunReport,
    SunTimeEvent,
)
from suncalc.timescale import J2000, as_utc, from_julian, to_days

J0 = 0.0009  # Mean solar transit offset (days)


def _radians(deg: float) -> float:
    """Degrees to radians; non-finite input becomes NaN so it flows through math.sin."""
    return math.radians(deg) if math.isfinite(deg) else math.nan


class InvalidCoordinateError(ValueError):
    """Latitude or longitude outside the valid range (strict mode only)."""


def validate_coordinates(lat: float, lng: float) -> None:
    """Raise InvalidCoordinateError unless lat/lng are finite and in range."""
    if not (math.isfinite(lat) and -90.0 <= lat <= 90.0):
        raise InvalidCoordinateError(f"Latitude out of range [-90, 90]: {lat}")
    if not (math.isfinite(lng) and -180.0 <= lng <= 180.0):
        raise InvalidCoordinateError(f"Longitude out of range [-180, 180]: {lng}")


def sun_position(
    when: datetime,
    lat: float,
    lng: float,
    *,
    legacy_altitude: bool = False,
    strict: bool = False,
) -> HorizontalPosition:
    """Compute the sun's azimuth and altitude for an observer.

    Args:
        when: Instant of interest. Naive datetimes are taken as UTC.
        lat: Observer latitude (degrees).
        lng: Observer longitude (degrees, east positive).
        legacy_altitude: Return the historical ``sin``-based altitude value
            instead of the true altitude angle.
        strict: Validate lat/lng ranges before computing.

    Returns:
        HorizontalPosition in radians. Components are NaN when the
        position is undefined for the given inputs.

    Raises:
        InvalidCoordinateError: Only when ``strict`` is set.
    """
    if strict:
        validate_coordinates(lat, lng)

    lw_rad = _radians(-lng)
    phi_rad = _radians(lat)
    d = to_days(when)

    coords = orbit.sun_coords(d)
    h_rad = horizontal.sidereal_time(d, lw_rad) - coords.ra_rad

    alt = horizontal.altitude_legacy if legacy_altitude else horizontal.altitude
    return HorizontalPosition(
        azimuth_rad=horizontal.azimuth(h_rad, phi_rad, coords.dec_rad),
        altitude_rad=alt(h_rad, phi_rad, coords.dec_rad),
    )


def julian_cycle(d: float, lw_rad: float) -> float:
    x = d - J0 - lw_rad / (2 * math.pi) + 0.5
    if not math.isfinite(x):
        return math.nan
    return math.floor(x)


def approx_transit(ht_rad: float, lw_rad: float, n: float) -> float:
    return J0 + (ht_rad + lw_rad) / (2 * math.pi) + n


def solar_transit_j(ds: float, m_rad: float, l_rad: float) -> float:
    """Julian day of the solar transit nearest to ``ds``."""
    return J2000 + ds + 0.0053 * math.sin(m_rad) - 0.0069 * math.sin(2 * l_rad)


def get_set_j(
    h_rad: float,
    lw_rad: float,
    phi_rad: float,
    dec_rad: float,
    n: float,
    m_rad: float,
    l_rad: float,
) -> float:
    """Julian day at which the setting sun crosses altitude ``h_rad`` (NaN if never)."""
    w_rad = horizontal.hour_angle(h_rad, phi_rad, dec_rad)
    a = approx_transit(w_rad, lw_rad, n)
    return solar_transit_j(a, m_rad, l_rad)


def _check_angle_names(angles: Sequence[SunAngle]) -> None:
    seen = {SOLAR_NOON, NADIR}
    for angle in angles:
        for name in (angle.rise_name, angle.set_name):
            if name in seen:
                raise ValueError(f"Duplicate sun time event name: {name}")
            seen.add(name)


def sun_time_events(
    when: datetime,
    lat: float,
    lng: float,
    *,
    angles: Sequence[SunAngle] = SUN_ANGLES,
    strict: bool = False,
) -> tuple[SunTimeEvent, ...]:
    """Solve the daily sun events around ``when`` for an observer.

    The search is anchored on the solar transit closest to ``when`` at
    the observer's longitude. Each threshold's setting crossing is
    solved directly; the rising crossing is its reflection about solar
    noon.

    Args:
        when: Instant selecting the day. Naive datetimes are taken as UTC.
        lat: Observer latitude (degrees).
        lng: Observer longitude (degrees, east positive).
        angles: Altitude thresholds to solve for. Defaults to SUN_ANGLES.
        strict: Validate lat/lng ranges before computing.

    Returns:
        Solar noon, nadir, then a rise and a set event per threshold, in
        table order. An event's ``time`` is None when the sun never
        reaches that altitude on the day.

    Raises:
        ValueError: On duplicate event names in ``angles``.
        InvalidCoordinateError: Only when ``strict`` is set.
    """
    if strict:
        validate_coordinates(lat, lng)
    _check_angle_names(angles)

    lw_rad = _radians(-lng)
    phi_rad = _radians(lat)

    d = to_days(when)
    n = julian_cycle(d, lw_rad)
    ds = approx_transit(0, lw_rad, n)

    m_rad = orbit.solar_mean_anomaly(ds)
    l_rad = orbit.ecliptic_longitude(m_rad)
    dec_rad = orbit.declination(l_rad)

    j_noon = solar_transit_j(ds, m_rad, l_rad)

    events: list[SunTimeEvent] = [
        SunTimeEvent(SOLAR_NOON, from_julian(j_noon), None, None),
        SunTimeEvent(NADIR, from_julian(j_noon - 0.5), None, None),
    ]
    for angle in angles:
        j_set = get_set_j(
            math.radians(angle.angle_deg), lw_rad, phi_rad, dec_rad, n, m_rad, l_rad
        )
        j_rise = j_noon - (j_set - j_noon)
        events.append(
            SunTimeEvent(angle.rise_name, from_julian(j_rise), angle.angle_deg, True)
        )
        events.append(
            SunTimeEvent(angle.set_name, from_julian(j_set), angle.angle_deg, False)
        )
    return tuple(events)


def sun_times(
    when: datetime,
    lat: float,
    lng: float,
    *,
    angles: Sequence[SunAngle] = SUN_ANGLES,
    strict: bool = False,
) -> dict[str, datetime | None]:
    """Map each sun event name to its UTC instant (None if it does not occur).

    Always holds ``solarNoon``, ``nadir`` and both names of every
    threshold in ``angles``.
    """
    events = sun_time_events(when, lat, lng, angles=angles, strict=strict)
    return {event.name: event.time for event in events}


def compute_sun_report(
    observer: Observer,
    when: datetime,
    *,
    legacy_altitude: bool = False,
    strict: bool = False,
) -> SunReport:
    """Compute position and daily events for an Observer and return a SunReport."""
    utc_when = as_utc(when)
    position = sun_position(
        utc_when,
        observer.lat,
        observer.lng,
        legacy_altitude=legacy_altitude,
        strict=strict,
    )
    events = sun_time_events(utc_when, observer.lat, observer.lng, strict=strict)
    return SunReport(observer=observer, when=utc_when, position=position, events=events)


def run(
    query: QueryInput,
    *,
    user_agent: str | None = None,
    legacy_altitude: bool = False,
    strict: bool = False,
) -> SunReport:
    """Top-level entry point: takes a QueryInput and returns a SunReport.

    Geocodes ``query.address`` when no coordinates are given.

    Raises:
        GeocodingError: When the address cannot be resolved.
        InvalidCoordinateError: Only when ``strict`` is set.
    """
    observer = resolve_observer(query, user_agent=user_agent)
    return compute_sun_report(
        observer, query.when, legacy_altitude=legacy_altitude, strict=strict
    )
