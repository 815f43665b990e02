"""Display formatting for results.

Pure string builders, kept out of app.py so they can be tested without
Streamlit. Missing values render as an em-dash placeholder.
"""

from math import isfinite
from typing import Optional

from orography_factor.constants import OrographyConfig
from orography_factor.model.geo_point import GeoPoint, ProjectedPoint
from orography_factor.model.orography_result import OrographyResult

PLACEHOLDER = "—"


def fmt(value: Optional[float], digits: int = 6) -> str:
    """Fixed-point number, or the placeholder for None/non-finite."""
    if value is None or not isfinite(value):
        return PLACEHOLDER
    return f"{value:.{digits}f}"


def format_factor(factor: float) -> str:
    """Factor as stored: already floored and rounded."""
    return fmt(factor, OrographyConfig.FACTOR_DECIMALS)


def format_elevation(elevation: Optional[float]) -> str:
    return fmt(elevation, 1)


def format_geographic_line(point: GeoPoint, label: str = "") -> str:
    """E.g. "WGS84: lon 4.351700, lat 50.850300 (Brussels, Brussels Capital, Belgium)"."""
    label_part = f" ({label})" if label else ""
    return f"WGS84: lon {fmt(point.longitude, 6)}, lat {fmt(point.latitude, 6)}{label_part}"


def format_projected_line(point: ProjectedPoint) -> str:
    """E.g. "EPSG:31370: X 149000.123 m, Y 170000.456 m"."""
    return f"{point.system.epsg}: X {fmt(point.easting, 3)} m, Y {fmt(point.northing, 3)} m"


def sample_rows(result: OrographyResult) -> list[dict[str, str]]:
    """One display row per sample, in sampling order."""
    rows = []
    for sample, elevation in zip(result.samples, result.elevations):
        rows.append(
            {
                "Label": sample.label,
                "Distance": f"{sample.distance_m:.0f} m",
                "Bearing": PLACEHOLDER if sample.bearing_deg is None else f"{sample.bearing_deg:.0f}°",
                "Latitude": fmt(sample.location.latitude, 6),
                "Longitude": fmt(sample.location.longitude, 6),
                "Elevation (m)": format_elevation(elevation),
            }
        )
    return rows
