"""Orography Factor Playground - Streamlit front-end.

Input modes: WGS84 lon/lat, address (Open-Meteo geocoding) or Belgian Lambert
(EPSG:31370 / EPSG:3812). Always displays both WGS84 and Lambert coordinates
of the resolved site, then c0, Ac, Am and the sampled elevations.

Run: streamlit run orography_factor/app.py
"""

import logging

import streamlit as st

from orography_factor.constants import AppConfig, GeocodingConfig, OrographyConfig
from orography_factor.core.site_analyzer import SiteAnalyzer
from orography_factor.errors import OrographyError
from orography_factor.model.message import AdvisoryMessage, CompletedMessage, ComputingMessage, FailureMessage
from orography_factor.model.site_analysis import SiteAnalysis
from orography_factor.ui.formatting import (
    format_elevation,
    format_factor,
    format_geographic_line,
    format_projected_line,
    sample_rows,
)
from orography_factor.ui.validators import (
    AUTO_SYSTEM,
    parse_location_input,
    parse_number,
    validate_reference_height,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Initialize session state with the analyzer and last result."""
    if "analyzer" not in st.session_state:
        st.session_state.analyzer = SiteAnalyzer()

    if "analysis" not in st.session_state:
        st.session_state.analysis = None


# =============================================================================
# FORM
# =============================================================================


def render_form() -> tuple[bool, str, dict[str, str]]:
    """Render the input form. Returns (submitted, mode, raw values)."""
    mode = st.radio(
        "Input type",
        options=list(AppConfig.INPUT_MODES),
        format_func=AppConfig.INPUT_MODES.get,
        horizontal=True,
        key="input_type",
    )

    with st.form("location_form"):
        values: dict[str, str] = {}
        if mode == "lonlat":
            col_lon, col_lat = st.columns(2)
            values["lon"] = col_lon.text_input("Longitude", key="lon")
            values["lat"] = col_lat.text_input("Latitude", key="lat")
        elif mode == "address":
            values["address"] = st.text_input("Address", key="address")
            values["country_code"] = st.text_input(
                "Country code", value=GeocodingConfig.DEFAULT_COUNTRY_CODE, key="country_code"
            )
        else:
            col_x, col_y = st.columns(2)
            values["easting"] = col_x.text_input("Easting X (m)", key="easting")
            values["northing"] = col_y.text_input("Northing Y (m)", key="northing")
            values["lambert_crs"] = st.selectbox(
                "Lambert system",
                options=[AUTO_SYSTEM, "EPSG:31370", "EPSG:3812"],
                key="lambert_crs",
            )

        values["z_ref"] = st.text_input(
            "Reference height z (m)",
            value=f"{OrographyConfig.DEFAULT_REFERENCE_HEIGHT_M:g}",
            key="z_ref",
        )
        submitted = st.form_submit_button("Compute", type="primary")

    return submitted, mode, values


def run(mode: str, values: dict[str, str]) -> None:
    """Validate the form, run the analysis and store the result.

    On failure the previous result stays in session state.
    """
    z_ref = parse_number(values.get("z_ref"))
    failure = validate_reference_height(z_ref)
    if failure is not None:
        failure.display()
        return

    location = parse_location_input(mode, values)
    if isinstance(location, FailureMessage):
        location.display()
        return

    analyzer: SiteAnalyzer = st.session_state.analyzer
    status = st.empty()
    with status.container():
        ComputingMessage().display()

    try:
        analysis = analyzer.analyze(location, reference_height_m=z_ref)
    except OrographyError as e:
        logger.warning(f"Analysis failed: {e}")
        with status.container():
            FailureMessage(reason=str(e)).display()
        return

    st.session_state.analysis = analysis
    with status.container():
        CompletedMessage().display()


# =============================================================================
# RESULTS
# =============================================================================


def render_results(analysis: SiteAnalysis) -> None:
    """Show coordinates, factor, statistics and the sample table."""
    result = analysis.orography

    st.subheader("Resolved location")
    st.text(format_geographic_line(analysis.location.point, label=analysis.location.label))
    st.text(format_projected_line(analysis.projected))

    st.subheader("Orography factor")
    col_c0, col_ac, col_am = st.columns(3)
    col_c0.metric("c₀", format_factor(result.factor))
    col_ac.metric("Ac (m)", format_elevation(result.site_elevation))
    col_am.metric("Am (m)", format_elevation(result.mean_elevation))

    warning = result.warning
    if warning is not None:
        AdvisoryMessage(warning=warning).display()

    st.dataframe(sample_rows(result), hide_index=True)


def main() -> None:
    """Main application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    st.title(f"{AppConfig.ICON} {AppConfig.TITLE}")

    init_session_state()

    submitted, mode, values = render_form()
    if submitted:
        run(mode, values)

    if st.session_state.analysis is not None:
        render_results(st.session_state.analysis)


if __name__ == "__main__":
    main()
