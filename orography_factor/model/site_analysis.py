"""ResolvedLocation and SiteAnalysis - what a full site run hands back."""

from dataclasses import dataclass

from orography_factor.model.geo_point import GeoPoint, ProjectedPoint, ProjectionSystem
from orography_factor.model.orography_result import OrographyResult


@dataclass(frozen=True)
class ResolvedLocation:
    """A location input normalized to WGS84.

    Attributes:
        point: Geographic position of the site
        label: Human-readable origin ("" for lon/lat, geocoder label, "from EPSG:xxxx")
        display_system: Planar system to show the site in
    """

    point: GeoPoint
    label: str
    display_system: ProjectionSystem


@dataclass(frozen=True)
class SiteAnalysis:
    """Complete result for one site.

    Attributes:
        location: The resolved site
        projected: Site in location.display_system
        orography: Factor and diagnostics
    """

    location: ResolvedLocation
    projected: ProjectedPoint
    orography: OrographyResult
