"""Core foundation classes for geodesic sampling and orography computation.

This module provides the computational backbone:
- GeoCalculator: Geodesic destination points
- CoordinateTransform: WGS84 <-> Belgian Lambert 72 / Lambert 2008
- SamplePlanner: Fixed nine-point sample layout around a site
- OpenMeteoElevationService / DEMElevationService: Batched elevation lookup
- GeocodingService: Address lookup
- OrographyCalculator: Factor c0 from site and ring elevations
- SiteAnalyzer: End-to-end pipeline for one site
"""

from orography_factor.core.coordinate_transform import CoordinateTransform
from orography_factor.core.elevation_service import (
    DEMElevationService,
    ElevationGateway,
    OpenMeteoElevationService,
)
from orography_factor.core.geo_calculator import GeoCalculator
from orography_factor.core.geocoding_service import GeocodeResult, GeocodingService
from orography_factor.core.orography_calculator import OrographyCalculator
from orography_factor.core.sample_planner import SamplePlanner
from orography_factor.core.site_analyzer import SiteAnalyzer

__all__ = [
    # Geo calculator
    "GeoCalculator",
    # Coordinate transform
    "CoordinateTransform",
    # Sampling
    "SamplePlanner",
    # Elevation
    "ElevationGateway",
    "OpenMeteoElevationService",
    "DEMElevationService",
    # Geocoding
    "GeocodingService",
    "GeocodeResult",
    # Computation
    "OrographyCalculator",
    "SiteAnalyzer",
]
