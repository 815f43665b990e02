"""Data model classes for orography factor estimation.

Follows the separation of Location (where the site is) vs Result (what was computed):
- GeoPoint: Location atom (longitude, latitude)
- ProjectedPoint / ProjectionSystem: Belgian Lambert planar coordinates
- SamplePoint / SampleSet: Fixed nine-point sampling layout
- ElevationResult: Elevations aligned with a SampleSet
- OrographyResult / Advisory: Factor c0 and its diagnostics
- PlanarInput / AddressInput: Alternative ways to name a site
- ResolvedLocation / SiteAnalysis: Output of a full site run
- TerrainWarning: Advisories attached to results
"""

from orography_factor.model.elevation_result import ElevationResult
from orography_factor.model.geo_point import GeoPoint, ProjectedPoint, ProjectionSystem
from orography_factor.model.location_input import AddressInput, LocationInput, PlanarInput
from orography_factor.model.orography_result import Advisory, OrographyResult
from orography_factor.model.sample_point import SamplePoint, SampleSet
from orography_factor.model.site_analysis import ResolvedLocation, SiteAnalysis
from orography_factor.model.warning import ComplexOrographyWarning, TerrainWarning

__all__ = [
    "GeoPoint",
    "ProjectedPoint",
    "ProjectionSystem",
    "SamplePoint",
    "SampleSet",
    "ElevationResult",
    "Advisory",
    "OrographyResult",
    "PlanarInput",
    "AddressInput",
    "LocationInput",
    "ResolvedLocation",
    "SiteAnalysis",
    "TerrainWarning",
    "ComplexOrographyWarning",
]
