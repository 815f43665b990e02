"""Property-based tests using Hypothesis.

These tests don't use fixtures since Hypothesis doesn't work well with
function-scoped pytest fixtures. Sample sets are built inline.
"""

import pytest
from hypothesis import given, settings, strategies as st

from orography_factor.constants import OrographyConfig
from orography_factor.core.coordinate_transform import CoordinateTransform
from orography_factor.core.geo_calculator import GeoCalculator
from orography_factor.core.orography_calculator import OrographyCalculator
from orography_factor.core.sample_planner import SamplePlanner
from orography_factor.model.elevation_result import ElevationResult
from orography_factor.model.geo_point import GeoPoint, ProjectionSystem
from orography_factor.model.orography_result import Advisory
from conftest import great_circle_distance_m

SAMPLES = SamplePlanner.build_samples(GeoPoint(longitude=4.3525, latitude=50.8467))

elevation = st.floats(min_value=-400.0, max_value=4800.0, allow_nan=False, allow_infinity=False)
nine_elevations = st.lists(elevation, min_size=9, max_size=9)
reference_height = st.floats(min_value=0.0, max_value=300.0, allow_nan=False, allow_infinity=False)


class TestGeodesicProperties:
    """Destination point on the sphere."""

    @given(
        lon=st.floats(min_value=-179.9, max_value=179.9, allow_nan=False),
        lat=st.floats(min_value=-80.0, max_value=80.0, allow_nan=False),
        bearing=st.floats(min_value=0.0, max_value=360.0, allow_nan=False),
        distance=st.floats(min_value=0.0, max_value=1000.0, allow_nan=False),
    )
    @settings(max_examples=50)
    def test_destination_lies_at_requested_distance(
        self, lon: float, lat: float, bearing: float, distance: float
    ) -> None:
        """Great-circle distance back to the origin equals the requested distance."""
        dest_lon, dest_lat = GeoCalculator.destination(lon, lat, bearing, distance)
        measured = great_circle_distance_m(lon, lat, dest_lon, dest_lat)
        assert measured == pytest.approx(distance, abs=1e-3)

    @given(
        lon=st.floats(min_value=-179.9, max_value=179.9, allow_nan=False),
        lat=st.floats(min_value=-80.0, max_value=80.0, allow_nan=False),
        bearing=st.floats(min_value=0.0, max_value=360.0, allow_nan=False),
        distance=st.floats(min_value=0.0, max_value=1000.0, allow_nan=False),
    )
    @settings(max_examples=100)
    def test_out_and_back_returns_to_origin(self, lon: float, lat: float, bearing: float, distance: float) -> None:
        """Going d along b, then d along (b + 180) mod 360, lands within a few meters of the start.

        The reverse bearing is fixed, so the small convergence of meridians
        (under 1m at 80° and 1000m) is the only error.
        """
        dest_lon, dest_lat = GeoCalculator.destination(lon, lat, bearing, distance)
        back_lon, back_lat = GeoCalculator.destination(dest_lon, dest_lat, (bearing + 180) % 360, distance)
        assert great_circle_distance_m(lon, lat, back_lon, back_lat) < 5.0

    @given(
        lon=st.floats(min_value=-179.9, max_value=179.9, allow_nan=False),
        lat=st.floats(min_value=-89.0, max_value=89.0, allow_nan=False),
        bearing=st.floats(min_value=0.0, max_value=360.0, allow_nan=False),
    )
    @settings(max_examples=30)
    def test_zero_distance_returns_origin(self, lon: float, lat: float, bearing: float) -> None:
        dest_lon, dest_lat = GeoCalculator.destination(lon, lat, bearing, 0.0)
        assert dest_lon == pytest.approx(lon, abs=1e-9)
        assert dest_lat == pytest.approx(lat, abs=1e-9)


class TestTransformProperties:
    """WGS84 <-> Lambert round trips over Belgium."""

    @given(
        lon=st.floats(min_value=2.5, max_value=6.5, allow_nan=False),
        lat=st.floats(min_value=49.4, max_value=51.6, allow_nan=False),
        system=st.sampled_from(list(ProjectionSystem)),
    )
    @settings(max_examples=30)
    def test_roundtrip(self, lon: float, lat: float, system: ProjectionSystem) -> None:
        point = GeoPoint(longitude=lon, latitude=lat)
        back = CoordinateTransform.to_geographic(CoordinateTransform.to_projected(point, system))
        assert back.longitude == pytest.approx(lon, abs=1e-6)
        assert back.latitude == pytest.approx(lat, abs=1e-6)


class TestOrographyProperties:
    """Invariants of the factor for arbitrary elevations."""

    @given(values=nine_elevations, z=reference_height)
    @settings(max_examples=100)
    def test_factor_floor_rounding_and_advisory(self, values: list[float], z: float) -> None:
        """c0 >= 1, has two decimals, and the advisory matches the rounded value."""
        result = OrographyCalculator.compute_factor(SAMPLES, ElevationResult.from_sequence(values), z)

        assert result.factor >= OrographyConfig.MIN_FACTOR
        assert result.factor == round(result.factor, OrographyConfig.FACTOR_DECIMALS)
        assert result.advisory is OrographyCalculator.classify_advisory(result.factor)
        assert (result.warning is not None) == (result.advisory is Advisory.STEEP)

    @given(values=nine_elevations, z=reference_height)
    @settings(max_examples=100)
    def test_mean_is_weighted_average(self, values: list[float], z: float) -> None:
        """Am lies within the range of sampled elevations."""
        result = OrographyCalculator.compute_factor(SAMPLES, ElevationResult.from_sequence(values), z)
        expected = (2 * values[0] + sum(values[1:])) / 10
        assert result.mean_elevation == pytest.approx(expected)
        assert min(values) - 1e-6 <= result.mean_elevation <= max(values) + 1e-6

    @given(values=nine_elevations, z=reference_height, offset=st.floats(min_value=-300.0, max_value=300.0))
    @settings(max_examples=50)
    def test_uniform_offset_does_not_change_factor(self, values: list[float], z: float, offset: float) -> None:
        """Raising the whole terrain leaves the raw factor unchanged."""
        base = OrographyCalculator.compute_factor(SAMPLES, ElevationResult.from_sequence(values), z)
        shifted = OrographyCalculator.compute_factor(
            SAMPLES, ElevationResult.from_sequence([v + offset for v in values]), z
        )
        assert shifted.raw_factor == pytest.approx(base.raw_factor, abs=1e-9)

    @given(
        site=st.floats(min_value=100.0, max_value=1000.0),
        ring=st.floats(min_value=0.0, max_value=99.0),
        z_low=reference_height,
        dz=st.floats(min_value=0.0, max_value=100.0),
    )
    @settings(max_examples=50)
    def test_factor_does_not_increase_with_height(self, site: float, ring: float, z_low: float, dz: float) -> None:
        """For a site above its surroundings, c0 never grows with z."""
        elevations = ElevationResult.from_sequence([site] + [ring] * 8)
        low = OrographyCalculator.compute_factor(SAMPLES, elevations, z_low)
        high = OrographyCalculator.compute_factor(SAMPLES, elevations, z_low + dz)
        assert high.raw_factor <= low.raw_factor + 1e-12
        assert high.factor <= low.factor
