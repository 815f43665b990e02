"""GeoPoint and ProjectedPoint - the location atoms of the pipeline.

A GeoPoint is the single source of truth for a location: every input path
(lon/lat, address, Lambert) resolves to one before sampling starts.
ProjectedPoint is the planar (easting, northing) view used for Lambert input
and display.
"""

from dataclasses import dataclass
from enum import Enum
from math import isfinite

from orography_factor.constants import GeoConfig
from orography_factor.errors import InvalidCoordinate


class ProjectionSystem(Enum):
    """Supported planar coordinate systems, valued by their EPSG code."""

    LAMBERT_72 = "EPSG:31370"
    LAMBERT_2008 = "EPSG:3812"

    @property
    def epsg(self) -> str:
        return self.value


@dataclass(frozen=True)
class GeoPoint:
    """A geographic WGS84 position.

    Attributes:
        longitude: Longitude in decimal degrees, in [-180, 180]
        latitude: Latitude in decimal degrees, in [-90, 90]

    Example:
        point = GeoPoint(longitude=4.3517, latitude=50.8503)
    """

    longitude: float
    latitude: float

    def __post_init__(self) -> None:
        """Validate ranges; raises InvalidCoordinate."""
        if not (isfinite(self.longitude) and isfinite(self.latitude)):
            raise InvalidCoordinate("Longitude and latitude must be numbers.")
        if not GeoConfig.LAT_MIN <= self.latitude <= GeoConfig.LAT_MAX:
            raise InvalidCoordinate("Latitude must be between -90 and 90.")
        if not GeoConfig.LON_MIN <= self.longitude <= GeoConfig.LON_MAX:
            raise InvalidCoordinate("Longitude must be between -180 and 180.")

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/pyproj order."""
        return (self.longitude, self.latitude)

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.latitude, self.longitude)

    def __repr__(self) -> str:
        return f"GeoPoint(lon={self.longitude:.6f}, lat={self.latitude:.6f})"


@dataclass(frozen=True)
class ProjectedPoint:
    """A planar position in one of the Belgian Lambert systems.

    Attributes:
        easting: X coordinate in meters
        northing: Y coordinate in meters
        system: Projection the coordinates are expressed in
    """

    easting: float
    northing: float
    system: ProjectionSystem

    def __post_init__(self) -> None:
        if not (isfinite(self.easting) and isfinite(self.northing)):
            raise InvalidCoordinate("Easting and northing must be numbers.")

    def __repr__(self) -> str:
        return f"ProjectedPoint(x={self.easting:.3f}, y={self.northing:.3f}, {self.system.epsg})"
