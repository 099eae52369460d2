import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer SUNCALC_* settings out of the tests."""
    for name in (
        "SUNCALC_LATITUDE",
        "SUNCALC_LONGITUDE",
        "SUNCALC_TIMEZONE",
        "SUNCALC_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)
