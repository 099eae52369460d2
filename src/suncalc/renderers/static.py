"""Matplotlib static PNG renderer — the sun's altitude over one day."""

import logging
from datetime import datetime, timedelta, tzinfo
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from pytz import utc

from suncalc.compute import sun_position
from suncalc.i18n import t
from suncalc.models import SOLAR_NOON, SunReport

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).parent.parent.parent.parent
_BG = "#050a1a"
_CURVE_COLOR = "#f0c419"
_HORIZON_COLOR = "#7ec8e3"
_EVENT_COLOR = "#e8e8e8"


def sample_altitudes(
    report: SunReport, step_minutes: int = 10
) -> tuple[list[datetime], np.ndarray]:
    """Sample the sun's altitude (degrees) over the 24 h centred on solar noon.

    Falls back to centring on ``report.when`` if solar noon is unknown.

    Returns:
        (times, altitudes) with one entry per step, both ends included.
    """
    noon = next(
        (e.time for e in report.events if e.name == SOLAR_NOON and e.time is not None),
        report.when,
    )
    offsets = np.arange(-12 * 60, 12 * 60 + step_minutes, step_minutes)
    times = [noon + timedelta(minutes=int(m)) for m in offsets]
    altitudes = np.array(
        [sun_position(tm, report.observer.lat, report.observer.lng).alt_deg for tm in times]
    )
    return times, altitudes


def render_daylight_chart(
    report: SunReport, tz: tzinfo = utc, lang: str = "en", chart_size: int = 10
) -> Figure:
    """Render the daily altitude curve with horizon and event markers.

    Args:
        report: Fully computed sun data.
        tz: Time zone for the x axis.
        lang: Language code ('ko' or 'en') for labels.
        chart_size: Output image width in inches.

    Returns:
        matplotlib Figure object.
    """
    times, altitudes = sample_altitudes(report)
    local_times = [tm.astimezone(tz).replace(tzinfo=None) for tm in times]

    fig, ax = plt.subplots(figsize=(chart_size, chart_size / 2))
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    ax.plot(local_times, altitudes, color=_CURVE_COLOR, linewidth=1.5, zorder=2)
    ax.axhline(0.0, color=_HORIZON_COLOR, linewidth=0.8, alpha=0.6, zorder=1)

    for event in report.events:
        if event.time is None:
            continue
        x = event.time.astimezone(tz).replace(tzinfo=None)
        ax.axvline(x, color=_EVENT_COLOR, linewidth=0.5, alpha=0.3, zorder=1)
        ax.annotate(
            t(event.name, lang),
            xy=(x, 1.0),
            xycoords=("data", "axes fraction"),
            rotation=90,
            va="top",
            ha="right",
            fontsize=7,
            color=_EVENT_COLOR,
        )

    ax.set_title(f"{t('chart_title', lang)} — {report.observer.name}", color=_EVENT_COLOR)
    ax.set_ylim(-90, 90)
    ax.tick_params(colors=_EVENT_COLOR)
    for spine in ax.spines.values():
        spine.set_color(_HORIZON_COLOR)
    fig.autofmt_xdate()

    return fig


def save_daylight_chart(
    report: SunReport,
    output_path: Path | None = None,
    tz: tzinfo = utc,
    lang: str = "en",
) -> Path:
    """Save the daily altitude chart as a PNG file.

    Args:
        report: Fully computed sun data.
        output_path: Destination path. Auto-generated under results/ if None.
        tz: Time zone for the x axis.
        lang: Language code ('ko' or 'en') for labels.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        when_str = report.when.strftime("%Y_%m_%d")
        filename = f"{report.observer.name}__{when_str}.png".replace(" ", "_")
        filename = filename.replace(",", "")
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_daylight_chart(report, tz=tz, lang=lang)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    logger.info("Saved chart to %s", output_path)
    return output_path
