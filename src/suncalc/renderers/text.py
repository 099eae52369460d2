"""Plain-text and JSON renderers for a SunReport."""

import json
import math
from datetime import datetime, tzinfo

from pytz import utc

from suncalc.i18n import t
from suncalc.models import SunReport, SunTimeEvent


def _sorted_events(events: tuple[SunTimeEvent, ...]) -> list[SunTimeEvent]:
    """Events in chronological order; events that do not occur go last."""
    occurring = sorted((e for e in events if e.time is not None), key=lambda e: e.time)
    missing = [e for e in events if e.time is None]
    return occurring + missing


def _fmt_time(value: datetime | None, tz: tzinfo, missing: str) -> str:
    if value is None:
        return missing
    return value.astimezone(tz).strftime("%Y-%m-%d %H:%M:%S %Z")


def render_text(report: SunReport, tz: tzinfo = utc, lang: str = "en") -> str:
    """Render a SunReport as aligned ``label: value`` lines.

    Args:
        report: Fully computed sun data.
        tz: Time zone to display instants in.
        lang: Language code ('ko' or 'en') for labels.

    Returns:
        Multi-line string, no trailing newline.
    """
    missing = t("not_observed", lang)
    pos = report.position
    rows: list[tuple[str, str]] = [
        (t("label_location", lang), report.observer.name),
        (t("label_time", lang), _fmt_time(report.when, tz, missing)),
        (t("label_azimuth", lang), f"{pos.compass_az_deg:.2f}°"),
        (t("label_altitude", lang), f"{pos.alt_deg:.2f}°"),
    ]
    for event in _sorted_events(report.events):
        rows.append((t(event.name, lang), _fmt_time(event.time, tz, missing)))

    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label.ljust(width)} : {value}" for label, value in rows)


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def report_to_dict(report: SunReport, tz: tzinfo = utc) -> dict:
    """Structured form of a SunReport with ISO 8601 times (None if not observed)."""
    pos = report.position
    return {
        "location": {
            "name": report.observer.name,
            "lat": report.observer.lat,
            "lng": report.observer.lng,
        },
        "when": report.when.astimezone(tz).isoformat(),
        "position": {
            "azimuth_rad": _finite_or_none(pos.azimuth_rad),
            "altitude_rad": _finite_or_none(pos.altitude_rad),
            "azimuth_deg": _finite_or_none(pos.compass_az_deg),
            "altitude_deg": _finite_or_none(pos.alt_deg),
        },
        "times": {
            e.name: e.time.astimezone(tz).isoformat() if e.time is not None else None
            for e in report.events
        },
    }


def render_json(report: SunReport, tz: tzinfo = utc) -> str:
    """Render a SunReport as an indented JSON document."""
    return json.dumps(report_to_dict(report, tz), ensure_ascii=False, indent=2)
