"""Tests for geocoding and time zone resolution."""

from datetime import datetime, timezone

import httpx
import pytest
from pytz import utc

from suncalc import location
from suncalc.location import (
    GeocodingError,
    geocode_address,
    resolve_observer,
    resolve_timezone,
)
from suncalc.models import QueryInput

WHEN = datetime(2013, 3, 5, tzinfo=timezone.utc)


def _fake_get(status: int, payload, calls: list | None = None):
    def fake_get(url, params=None, headers=None, timeout=None):
        if calls is not None:
            calls.append({"url": url, "params": params, "headers": headers})
        return httpx.Response(status, json=payload, request=httpx.Request("GET", url))

    return fake_get


def test_geocode_address(monkeypatch) -> None:
    calls: list = []
    payload = [{"lat": "35.1595", "lon": "129.0473", "display_name": "Busan, South Korea"}]
    monkeypatch.setattr(location.httpx, "get", _fake_get(200, payload, calls))

    observer = geocode_address("Busan", user_agent="tests/1.0")

    assert observer.lat == pytest.approx(35.1595)
    assert observer.lng == pytest.approx(129.0473)
    assert observer.name == "Busan, South Korea"
    assert calls[0]["params"]["q"] == "Busan"
    assert calls[0]["headers"]["User-Agent"] == "tests/1.0"


def test_geocode_not_found(monkeypatch) -> None:
    monkeypatch.setattr(location.httpx, "get", _fake_get(200, []))
    with pytest.raises(GeocodingError, match="not found"):
        geocode_address("nowhere at all")


def test_geocode_http_error(monkeypatch) -> None:
    monkeypatch.setattr(location.httpx, "get", _fake_get(503, {"error": "busy"}))
    with pytest.raises(GeocodingError):
        geocode_address("Busan")


def test_resolve_observer_prefers_coordinates(monkeypatch) -> None:
    def no_network(*args, **kwargs):
        raise AssertionError("geocoder must not be called")

    monkeypatch.setattr(location.httpx, "get", no_network)
    observer = resolve_observer(QueryInput(lat=55.0, lng=-3.0, address="ignored", when=WHEN))
    assert (observer.lat, observer.lng) == (55.0, -3.0)


def test_resolve_observer_geocodes_address(monkeypatch) -> None:
    payload = [{"lat": "51.5", "lon": "-0.12", "display_name": "London"}]
    monkeypatch.setattr(location.httpx, "get", _fake_get(200, payload))
    observer = resolve_observer(QueryInput(lat=None, lng=None, address="London", when=WHEN))
    assert observer.name == "London"


def test_resolve_observer_needs_something() -> None:
    with pytest.raises(GeocodingError):
        resolve_observer(QueryInput(lat=None, lng=None, address=None, when=WHEN))


def test_resolve_timezone_default_is_utc() -> None:
    assert resolve_timezone(0.0, 0.0, None) is utc


def test_resolve_timezone_by_name() -> None:
    assert resolve_timezone(0.0, 0.0, "Asia/Seoul").zone == "Asia/Seoul"


def test_resolve_timezone_unknown() -> None:
    with pytest.raises(GeocodingError):
        resolve_timezone(0.0, 0.0, "Mars/Olympus_Mons")


def test_resolve_timezone_auto() -> None:
    assert resolve_timezone(51.5074, -0.1278, "auto").zone == "Europe/London"


def test_geocode_invalid_json(monkeypatch) -> None:
    def fake_get(url, params=None, headers=None, timeout=None):
        return httpx.Response(
            200, text="<html>maintenance</html>", request=httpx.Request("GET", url)
        )

    monkeypatch.setattr(location.httpx, "get", fake_get)
    with pytest.raises(GeocodingError, match="invalid JSON"):
        geocode_address("Busan")
