"""Geodesic destination points on a spherical Earth.

Moves a site a given distance along a bearing, which is all the orography
sampling needs. R = 6,371 km; near the poles the bearing becomes degenerate
and is not specially handled.
"""

from math import asin, atan2, cos, degrees, radians, sin

from orography_factor.constants import GeoConfig
from orography_factor.model.geo_point import GeoPoint

# Earth's mean radius in meters (spherical approximation)
EARTH_RADIUS_M = GeoConfig.EARTH_RADIUS_M


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude in degrees into [-180, 180)."""
    return ((lon + 540) % 360) - 180


class GeoCalculator:
    """Static methods for geodesic offsets on Earth's surface.

    Coordinates are in decimal degrees (WGS84).
    Bearings are in degrees clockwise from North.
    Distances are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def destination(
        lon: float,
        lat: float,
        bearing_deg: float,
        distance_m: float,
    ) -> tuple[float, float]:
        """Calculate destination point given start, bearing, and distance.

        Args:
            lon: Longitude of start point (decimal degrees)
            lat: Latitude of start point (decimal degrees)
            bearing_deg: Bearing in degrees (clockwise from North)
            distance_m: Distance to travel in meters (>= 0)

        Returns:
            Tuple (lon, lat) of destination point in decimal degrees,
            longitude normalized to [-180, 180).

        Raises:
            ValueError: If distance_m is negative.
        """
        if distance_m < 0:
            raise ValueError(f"Distance must be non-negative, got {distance_m}")

        brng = radians(bearing_deg)
        lat1 = radians(lat)
        lon1 = radians(lon)
        d_R = distance_m / EARTH_RADIUS_M

        lat2 = asin(sin(lat1) * cos(d_R) + cos(lat1) * sin(d_R) * cos(brng))
        lon2 = lon1 + atan2(
            sin(brng) * sin(d_R) * cos(lat1),
            cos(d_R) - sin(lat1) * sin(lat2),
        )
        return normalize_longitude(degrees(lon2)), degrees(lat2)

    @staticmethod
    def destination_point(origin: GeoPoint, distance_m: float, bearing_deg: float) -> GeoPoint:
        """GeoPoint variant of destination().

        Example:
            north = GeoCalculator.destination_point(origin, distance_m=500, bearing_deg=0)
        """
        lon, lat = GeoCalculator.destination(
            lon=origin.longitude,
            lat=origin.latitude,
            bearing_deg=bearing_deg,
            distance_m=distance_m,
        )
        return GeoPoint(longitude=lon, latitude=lat)
