"""Location lookup — geocoding and time zone resolution for the CLI layer."""

import logging

import httpx
from pytz import UnknownTimeZoneError, timezone, utc
from pytz.tzinfo import BaseTzInfo
from timezonefinder import TimezoneFinder

from suncalc.models import Observer, QueryInput

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
DEFAULT_USER_AGENT = "suncalc/1.0 (+https://nominatim.org/release-docs/latest/api/Search/)"

_tf: TimezoneFinder | None = None


class GeocodingError(Exception):
    """Geocoder or time zone lookup failure."""


def _timezone_finder() -> TimezoneFinder:
    # Loading the polygon data is slow; only pay for it when "auto" is used.
    global _tf
    if _tf is None:
        _tf = TimezoneFinder()
    return _tf


def geocode_address(address: str, user_agent: str | None = None) -> Observer:
    """Resolve an address string to an Observer via Nominatim (OpenStreetMap).

    Args:
        address: Address string in any language.
        user_agent: User-Agent header sent to Nominatim.

    Returns:
        Observer with the geocoder's coordinates and display name.

    Raises:
        GeocodingError: On HTTP failure or when the address cannot be found.
    """
    params = {"q": address, "format": "json", "limit": 1}
    headers = {"User-Agent": user_agent or DEFAULT_USER_AGENT}
    logger.debug("Geocoding %r", address)
    try:
        resp = httpx.get(NOMINATIM_URL, params=params, headers=headers, timeout=10)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise GeocodingError(f"Nominatim request failed: {e}") from e

    try:
        results = resp.json()
    except ValueError as e:
        raise GeocodingError(f"Nominatim returned invalid JSON: {e}") from e
    if not results:
        raise GeocodingError(f"Address not found: {address}")
    r = results[0]
    observer = Observer(lat=float(r["lat"]), lng=float(r["lon"]), name=r["display_name"])
    logger.debug("Geocoded %r to %s, %s", address, observer.lat, observer.lng)
    return observer


def resolve_observer(query: QueryInput, user_agent: str | None = None) -> Observer:
    """Turn a QueryInput into an Observer, geocoding only when coordinates are absent.

    Raises:
        GeocodingError: When neither coordinates nor a resolvable address are given.
    """
    if query.lat is not None and query.lng is not None:
        return Observer(lat=query.lat, lng=query.lng, name=f"{query.lat}, {query.lng}")
    if query.address:
        return geocode_address(query.address, user_agent=user_agent)
    raise GeocodingError("No coordinates or address given")


def resolve_timezone(lat: float, lng: float, name: str | None) -> BaseTzInfo:
    """Return the display time zone.

    ``None`` means UTC; ``"auto"`` looks the zone up from the coordinates.

    Raises:
        GeocodingError: When the zone is unknown or cannot be found.
    """
    if not name:
        return utc
    if name == "auto":
        tz_str = _timezone_finder().timezone_at(lat=lat, lng=lng)
        if tz_str is None:
            raise GeocodingError(f"Timezone not found: lat={lat}, lng={lng}")
        logger.debug("Resolved timezone %s for %s, %s", tz_str, lat, lng)
        name = tz_str
    try:
        return timezone(name)
    except UnknownTimeZoneError as e:
        raise GeocodingError(f"Unknown timezone: {name}") from e
