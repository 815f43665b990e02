"""Shared pytest fixtures for orography_factor tests.

Provides mock elevation services and reusable sites for all tests.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Synthetic terrain is centered on the equator (lat=0) and prime meridian
    (lon=0), where 1 degree = R * pi / 180 ≈ 111,195 meters in both
    directions on the sphere GeoCalculator uses. Cardinal offsets from the
    origin therefore land exactly at the intended distance.
"""

from math import asin, cos, exp, pi, radians, sin, sqrt
from typing import Optional, Sequence

import pytest

from orography_factor.constants import GeoConfig
from orography_factor.core.sample_planner import SamplePlanner
from orography_factor.model.geo_point import GeoPoint
from orography_factor.model.sample_point import SampleSet

# Meters per degree on the spherical Earth model, at the equator
METERS_PER_DEGREE = GeoConfig.EARTH_RADIUS_M * pi / 180


def great_circle_distance_m(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """Reference great-circle distance (haversine) on the same sphere as GeoCalculator."""
    h = sin(radians(lat2 - lat1) / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(
        radians(lon2 - lon1) / 2
    ) ** 2
    return 2 * GeoConfig.EARTH_RADIUS_M * asin(min(1.0, sqrt(h)))


# =============================================================================
# MOCK ELEVATION SERVICES
# =============================================================================


class MockElevationService:
    """Returns a fixed list of elevations and records every request.

    Example with the flat scenario:
        service = MockElevationService(elevations=[100.0] * 9)
    """

    def __init__(self, elevations: Sequence[Optional[float]]) -> None:
        self.elevations = list(elevations)
        self.calls: list[list[GeoPoint]] = []

    def fetch_elevations(self, points: Sequence[GeoPoint]) -> list[Optional[float]]:
        self.calls.append(list(points))
        return list(self.elevations)


class MockHillElevationService:
    """Synthetic Gaussian hill centered at (0, 0).

    Elevation formula:
        elevation = base_elevation + hill_height * exp(-(d / hill_radius_m)^2)
    where d is the planar distance from the origin in meters.

    Example with base=100m, height=200m, radius=1000m:
        - origin: 300m (Ac)
        - 500m away: 100 + 200 * exp(-0.25) ≈ 255.8m
        - 1000m away: 100 + 200 * exp(-1) ≈ 173.6m
    """

    def __init__(self, base_elevation: float, hill_height: float, hill_radius_m: float) -> None:
        self.base_elevation = base_elevation
        self.hill_height = hill_height
        self.hill_radius_m = hill_radius_m
        self.calls: list[list[GeoPoint]] = []

    def elevation_at(self, lon: float, lat: float) -> float:
        d = sqrt((lon * METERS_PER_DEGREE) ** 2 + (lat * METERS_PER_DEGREE) ** 2)
        return self.base_elevation + self.hill_height * exp(-((d / self.hill_radius_m) ** 2))

    def fetch_elevations(self, points: Sequence[GeoPoint]) -> list[Optional[float]]:
        self.calls.append(list(points))
        return [self.elevation_at(lon=p.longitude, lat=p.latitude) for p in points]


class MockPlaneElevationService:
    """Uniformly inclined plane: drops going south and east.

    Elevation formula:
        elevation = base_elevation + lat * M * slope_ns_pct / 100 - lon * M * slope_ew_pct / 100

    Opposite ring samples cancel, so Am equals Ac and the terrain is FLAT.
    """

    def __init__(self, base_elevation: float, slope_ns_pct: float, slope_ew_pct: float) -> None:
        self.base_elevation = base_elevation
        self.slope_ns_pct = slope_ns_pct
        self.slope_ew_pct = slope_ew_pct

    def fetch_elevations(self, points: Sequence[GeoPoint]) -> list[Optional[float]]:
        M = METERS_PER_DEGREE
        return [
            self.base_elevation
            + p.latitude * M * (self.slope_ns_pct / 100)
            - p.longitude * M * (self.slope_ew_pct / 100)
            for p in points
        ]


# =============================================================================
# SITE FIXTURES
# =============================================================================


@pytest.fixture
def origin_equator() -> GeoPoint:
    """Site at the equator/prime meridian intersection (synthetic terrain center)."""
    return GeoPoint(longitude=0.0, latitude=0.0)


@pytest.fixture
def origin_brussels() -> GeoPoint:
    """Grand-Place, Brussels - inside both Belgian Lambert systems."""
    return GeoPoint(longitude=4.3525, latitude=50.8467)


@pytest.fixture
def samples_brussels(origin_brussels: GeoPoint) -> SampleSet:
    """Nine-point sample set around Brussels."""
    return SamplePlanner.build_samples(origin_brussels)


# =============================================================================
# ELEVATION FIXTURES
# =============================================================================


@pytest.fixture
def flat_elevations() -> list[float]:
    """Site and all eight ring samples at 100m: Am = 100, c0 = 1.0."""
    return [100.0] * 9


@pytest.fixture
def raised_site_elevations() -> list[float]:
    """Site at 200m, every ring sample at 100m (ring sum 800).

    Am = (2 * 200 + 800) / 10 = 120, so Ac - Am = 80.
    At z = 10m: c0 = 1 + 0.004 * 80 = 1.32 (STEEP).
    """
    return [200.0] + [100.0] * 8


@pytest.fixture
def mock_hill_200m() -> MockHillElevationService:
    """200m Gaussian hill on a 100m plain, 1000m radius.

    At the summit with z = 10m:
        ring per direction = 200 * (exp(-0.25) + exp(-1)) ≈ 229.34m above base
        Am - base = (2 * 200 + 4 * 229.34) / 10 ≈ 131.73m
        Ac - Am ≈ 68.27m -> raw c0 ≈ 1.2731 -> 1.27 (STEEP)
    """
    return MockHillElevationService(base_elevation=100.0, hill_height=200.0, hill_radius_m=1000.0)


@pytest.fixture
def mock_plane_20pct_south() -> MockPlaneElevationService:
    """Plane at 2500m dropping 20% going south and 5% going east."""
    return MockPlaneElevationService(base_elevation=2500.0, slope_ns_pct=20.0, slope_ew_pct=5.0)
