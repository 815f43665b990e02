"""Sample plan builder - the nine points whose elevations define c0.

Layout: the site itself, then two rings (500 m and 1000 m) along the four
cardinal bearings, in the order
CENTER, N-500, N-1000, E-500, E-1000, S-500, S-1000, W-500, W-1000.
"""

from orography_factor.constants import SamplingConfig
from orography_factor.core.geo_calculator import GeoCalculator
from orography_factor.model.geo_point import GeoPoint
from orography_factor.model.sample_point import SamplePoint, SampleSet


class SamplePlanner:
    """Builds the fixed SampleSet around a site.

    Example:
        samples = SamplePlanner.build_samples(GeoPoint(longitude=4.35, latitude=50.85))
        assert samples.keys[1] == "N-500"
    """

    @staticmethod
    def build_samples(origin: GeoPoint) -> SampleSet:
        """Return the nine sample points around origin, center first."""
        points = [
            SamplePoint(
                label=SamplingConfig.CENTER_LABEL,
                distance_m=0.0,
                bearing_deg=None,
                location=origin,
            )
        ]

        for label, bearing_deg in SamplingConfig.BEARINGS_DEG.items():
            for distance_m in SamplingConfig.DISTANCES_M:
                points.append(
                    SamplePoint(
                        label=label,
                        distance_m=distance_m,
                        bearing_deg=bearing_deg,
                        location=GeoCalculator.destination_point(
                            origin=origin,
                            distance_m=distance_m,
                            bearing_deg=bearing_deg,
                        ),
                    )
                )

        return SampleSet(points=tuple(points))
