"""Site analysis - runs the full pipeline for one location.

Flow:
    location input -> WGS84 GeoPoint -> nine sample points
    -> one batched elevation request -> OrographyCalculator
    -> planar representation of the site for display

Any failure aborts the run; there are no partial results and no retries.
"""

import logging
from typing import Optional

from orography_factor.core.coordinate_transform import CoordinateTransform
from orography_factor.core.elevation_service import ElevationGateway, OpenMeteoElevationService
from orography_factor.core.geocoding_service import GeocodingService
from orography_factor.core.orography_calculator import OrographyCalculator
from orography_factor.core.sample_planner import SamplePlanner
from orography_factor.errors import ElevationUnavailable
from orography_factor.model.elevation_result import ElevationResult
from orography_factor.model.geo_point import GeoPoint, ProjectionSystem
from orography_factor.model.location_input import AddressInput, LocationInput, PlanarInput
from orography_factor.model.orography_result import OrographyResult
from orography_factor.model.site_analysis import ResolvedLocation, SiteAnalysis

logger = logging.getLogger(__name__)

# Planar system shown for lon/lat and address input
DEFAULT_DISPLAY_SYSTEM = ProjectionSystem.LAMBERT_72


class SiteAnalyzer:
    """Computes the orography factor for a site given in any supported form.

    Example:
        analyzer = SiteAnalyzer()
        analysis = analyzer.analyze(GeoPoint(longitude=5.57, latitude=50.63), reference_height_m=10.0)
        print(analysis.orography.factor)
    """

    def __init__(
        self,
        elevation_service: Optional[ElevationGateway] = None,
        geocoder: Optional[GeocodingService] = None,
    ):
        """Initialize with optional collaborators.

        Args:
            elevation_service: ElevationGateway (OpenMeteoElevationService if not provided)
            geocoder: GeocodingService (created on first address lookup if not provided)
        """
        self._elevation_service = elevation_service or OpenMeteoElevationService()
        self._geocoder = geocoder

    @property
    def elevation_service(self) -> ElevationGateway:
        """Access the elevation service."""
        return self._elevation_service

    @property
    def geocoder(self) -> GeocodingService:
        """Access the geocoding service."""
        if self._geocoder is None:
            self._geocoder = GeocodingService()
        return self._geocoder

    def resolve_location(self, location: LocationInput) -> ResolvedLocation:
        """Normalize any location input to WGS84.

        Raises:
            InvalidCoordinate: Planar input resolving outside valid lon/lat.
            GeocodeNotFound: Address has no match.
            TypeError: Unsupported input type.
        """
        if isinstance(location, GeoPoint):
            return ResolvedLocation(point=location, label="", display_system=DEFAULT_DISPLAY_SYSTEM)

        if isinstance(location, PlanarInput):
            point, system = CoordinateTransform.from_planar(
                easting=location.easting,
                northing=location.northing,
                system=location.system,
            )
            # Show the site in the system the user picked, not the guessed one
            display_system = location.system or DEFAULT_DISPLAY_SYSTEM
            return ResolvedLocation(point=point, label=f"from {system.epsg}", display_system=display_system)

        if isinstance(location, AddressInput):
            match = self.geocoder.geocode(location.address, country_code=location.country_code)
            return ResolvedLocation(point=match.location, label=match.label, display_system=DEFAULT_DISPLAY_SYSTEM)

        raise TypeError(f"Unsupported location input: {type(location).__name__}")

    def compute(self, origin: GeoPoint, reference_height_m: float) -> OrographyResult:
        """Sample elevations around origin and compute the factor.

        Raises:
            InvalidReferenceHeight: If z is negative or not finite.
            ElevationUnavailable: Gateway failure or misaligned response.
            MissingElevation: A required sample has no elevation.
        """
        samples = SamplePlanner.build_samples(origin)
        raw = self._elevation_service.fetch_elevations(samples.locations)
        if len(raw) != len(samples):
            raise ElevationUnavailable(f"Unexpected elevation response: expected {len(samples)} values, got {len(raw)}.")

        elevations = ElevationResult.from_sequence(raw)
        return OrographyCalculator.compute_factor(
            samples=samples,
            elevations=elevations,
            reference_height_m=reference_height_m,
        )

    def analyze(self, location: LocationInput, reference_height_m: float) -> SiteAnalysis:
        """Run the full pipeline for one site.

        The reference height is validated before any network request.
        """
        z = OrographyCalculator.validate_reference_height(reference_height_m)
        resolved = self.resolve_location(location)
        projected = CoordinateTransform.to_projected(resolved.point, resolved.display_system)
        logger.info(f"Analyzing site {resolved.point} at z={z:.1f}m")
        orography = self.compute(resolved.point, z)
        return SiteAnalysis(location=resolved, projected=projected, orography=orography)
