"""Page tests for app.py using the Streamlit AppTest framework.

Runs the real script, fills the lon/lat form and presses Compute. The
analyzer in session state is seeded with a mock elevation service, so no
network access is needed.

Flow:
    1. Valid site -> metrics, STEEP advisory, "Done."
    2. Negative reference height -> error, previous metrics still shown
    3. Elevation service failure -> error, previous metrics still shown
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from orography_factor.core.site_analyzer import SiteAnalyzer
from conftest import MockElevationService

APP_PATH = Path(__file__).resolve().parents[1] / "orography_factor" / "app.py"


# =============================================================================
# HELPERS
# =============================================================================


def submit(at: AppTest, lon: str, lat: str, z_ref: str) -> None:
    """Fill the lon/lat form and press Compute."""
    at.text_input(key="lon").set_value(lon)
    at.text_input(key="lat").set_value(lat)
    at.text_input(key="z_ref").set_value(z_ref)
    at.button[0].click()
    at.run()


def metric_values(at: AppTest) -> list[str]:
    return [m.value for m in at.metric]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def app(raised_site_elevations: list[float]) -> AppTest:
    """Page with an analyzer returning Ac = 200m over a 100m ring (c0 = 1.32)."""
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.session_state["analyzer"] = SiteAnalyzer(elevation_service=MockElevationService(raised_site_elevations))
    at.run()
    assert not at.exception
    return at


# =============================================================================
# TESTS
# =============================================================================


class TestOrographyPage:
    """Form submission, results and failure handling."""

    def test_initial_page_has_no_results(self, app: AppTest) -> None:
        """Before the first run only the form is shown."""
        assert metric_values(app) == []
        assert app.session_state["analysis"] is None

    def test_valid_run_shows_metrics_and_advisory(self, app: AppTest) -> None:
        """A STEEP result shows c0, Ac, Am and the complex-orography warning."""
        submit(app, lon="4.35", lat="50.85", z_ref="10")

        assert not app.exception
        assert not app.error
        assert metric_values(app) == ["1.32", "200.0", "120.0"]
        assert app.success[0].value == "Done."
        assert len(app.warning) == 1
        assert "1.32 > 1.15" in app.warning[0].value
        assert app.session_state["analysis"].orography.factor == pytest.approx(1.32)

    def test_invalid_height_keeps_previous_result(self, app: AppTest) -> None:
        """Negative z shows the reason and leaves the last result on screen."""
        submit(app, lon="4.35", lat="50.85", z_ref="10")
        previous = app.session_state["analysis"]

        submit(app, lon="4.35", lat="50.85", z_ref="-5")

        assert app.error[0].value == "Reference height z must be a non-negative number."
        assert metric_values(app) == ["1.32", "200.0", "120.0"]
        assert app.session_state["analysis"] is previous

    def test_elevation_failure_keeps_previous_result(self, app: AppTest) -> None:
        """A failing elevation lookup shows its reason and keeps the last result."""
        submit(app, lon="4.35", lat="50.85", z_ref="10")
        previous = app.session_state["analysis"]

        app.session_state["analyzer"] = SiteAnalyzer(elevation_service=MockElevationService([100.0] * 8))
        submit(app, lon="5.57", lat="50.63", z_ref="10")

        assert len(app.error) == 1
        assert "expected 9 values, got 8" in app.error[0].value
        assert metric_values(app) == ["1.32", "200.0", "120.0"]
        assert app.session_state["analysis"] is previous

    def test_invalid_coordinates_show_error(self, app: AppTest) -> None:
        """Out-of-range latitude is rejected before any lookup."""
        submit(app, lon="4.35", lat="95", z_ref="10")

        assert app.error[0].value == "Latitude must be between -90 and 90."
        assert metric_values(app) == []
