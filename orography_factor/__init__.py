"""Orography Factor - terrain amplification of wind speed at a site.

Estimates the orography factor c0 used in wind-load calculations:
- Site input as WGS84 lon/lat, address, or Belgian Lambert 72 / 2008
- Elevations sampled at the site and 500 m / 1000 m along N, E, S, W
- Simplified complex-orography formula with height attenuation

Modules:
    core: Computation (geodesy, projections, sampling, elevation, calculator)
    model: Data structures (GeoPoint, SampleSet, OrographyResult)
    ui: Streamlit form helpers (validators, formatting)

Example:
    from orography_factor.core import SiteAnalyzer
    from orography_factor.model import GeoPoint

    analysis = SiteAnalyzer().analyze(GeoPoint(longitude=5.57, latitude=50.63), reference_height_m=10.0)
"""
