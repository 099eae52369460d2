"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "label_location": {
        "ko": "위치",
        "en": "Location",
    },
    "label_time": {
        "ko": "시각",
        "en": "Time",
    },
    "label_azimuth": {
        "ko": "방위각",
        "en": "Azimuth",
    },
    "label_altitude": {
        "ko": "고도",
        "en": "Altitude",
    },
    "not_observed": {
        "ko": "없음",
        "en": "—",
    },
    "chart_title": {
        "ko": "태양 고도",
        "en": "Sun altitude",
    },
    "solarNoon": {
        "ko": "남중",
        "en": "Solar noon",
    },
    "nadir": {
        "ko": "자정(태양)",
        "en": "Nadir",
    },
    "sunrise": {
        "ko": "일출",
        "en": "Sunrise",
    },
    "sunset": {
        "ko": "일몰",
        "en": "Sunset",
    },
    "sunriseEnd": {
        "ko": "일출 끝",
        "en": "Sunrise end",
    },
    "sunsetStart": {
        "ko": "일몰 시작",
        "en": "Sunset start",
    },
    "dawn": {
        "ko": "시민박명 시작",
        "en": "Dawn",
    },
    "dusk": {
        "ko": "시민박명 끝",
        "en": "Dusk",
    },
    "nauticalDawn": {
        "ko": "항해박명 시작",
        "en": "Nautical dawn",
    },
    "nauticalDusk": {
        "ko": "항해박명 끝",
        "en": "Nautical dusk",
    },
    "nightEnd": {
        "ko": "천문박명 시작",
        "en": "Night end",
    },
    "night": {
        "ko": "천문박명 끝",
        "en": "Night",
    },
    "goldenHourEnd": {
        "ko": "골든아워 끝",
        "en": "Golden hour end",
    },
    "goldenHour": {
        "ko": "골든아워 시작",
        "en": "Golden hour",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
