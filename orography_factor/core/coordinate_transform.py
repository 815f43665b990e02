"""Conversions between WGS84 and the Belgian Lambert planar systems.

Supports two Lambert conformal conic projections (two standard parallels):
- Lambert 72 (EPSG:31370): International 1924 ellipsoid, 7-parameter shift to WGS84
- Lambert 2008 (EPSG:3812): GRS80 ellipsoid, no datum shift

WGS84 geographic coordinates are the common pivot. Raw planar input of
unknown origin is assigned a system by northing magnitude; callers can
always override the guess.
"""

import logging
from functools import lru_cache
from math import isfinite
from typing import Optional

import pyproj
from pyproj.aoi import AreaOfUse

from orography_factor.constants import GeoConfig, ProjectionConfig
from orography_factor.errors import InvalidCoordinate
from orography_factor.model.geo_point import GeoPoint, ProjectedPoint, ProjectionSystem

logger = logging.getLogger(__name__)

_PROJ_DEFINITIONS = {
    ProjectionSystem.LAMBERT_72: ProjectionConfig.LAMBERT_72_PROJ,
    ProjectionSystem.LAMBERT_2008: ProjectionConfig.LAMBERT_2008_PROJ,
}


@lru_cache(maxsize=None)
def _transformers(system: ProjectionSystem) -> tuple[pyproj.Transformer, pyproj.Transformer]:
    """Return (to_projected, to_wgs84) transformers for a system, built once."""
    wgs84 = pyproj.CRS(ProjectionConfig.WGS84)
    planar = pyproj.CRS(_PROJ_DEFINITIONS[system])
    to_projected = pyproj.Transformer.from_crs(wgs84, planar, always_xy=True)
    to_wgs84 = pyproj.Transformer.from_crs(planar, wgs84, always_xy=True)
    return to_projected, to_wgs84


@lru_cache(maxsize=None)
def _area_of_use(system: ProjectionSystem) -> Optional[AreaOfUse]:
    """WGS84 bounds of the EPSG definition of a system, None if PROJ has none."""
    return pyproj.CRS(system.epsg).area_of_use


class CoordinateTransform:
    """Static methods converting between GeoPoint and ProjectedPoint.

    Example:
        lambert = CoordinateTransform.to_projected(point, ProjectionSystem.LAMBERT_72)
        back = CoordinateTransform.to_geographic(lambert)
    """

    @staticmethod
    def detect_system(northing: float) -> ProjectionSystem:
        """Guess the planar system from the northing.

        Northings above NORTHING_THRESHOLD_M are taken as Lambert 72, anything
        else as Lambert 2008. Typical Belgian Lambert 72 northings (20 km to
        250 km) fall below the threshold, so pass the system explicitly for them.
        """
        if northing > ProjectionConfig.NORTHING_THRESHOLD_M:
            return ProjectionSystem.LAMBERT_72
        return ProjectionSystem.LAMBERT_2008

    @staticmethod
    def resolve_system(northing: float, system: Optional[ProjectionSystem] = None) -> ProjectionSystem:
        """Return the explicit system if given, else the heuristic guess."""
        if system is not None:
            return system
        detected = CoordinateTransform.detect_system(northing)
        logger.info(f"Detected {detected.epsg} from northing {northing:.1f}")
        return detected

    @staticmethod
    def to_projected(point: GeoPoint, system: ProjectionSystem) -> ProjectedPoint:
        """Project a WGS84 point into a Lambert system.

        Raises:
            InvalidCoordinate: If the projection yields non-finite values.
        """
        to_projected, _ = _transformers(system)
        x, y = to_projected.transform(point.longitude, point.latitude)
        if not (isfinite(x) and isfinite(y)):
            raise InvalidCoordinate(f"Cannot express {point} in {system.epsg}.")
        return ProjectedPoint(easting=float(x), northing=float(y), system=system)

    @staticmethod
    def to_geographic(point: ProjectedPoint) -> GeoPoint:
        """Unproject Lambert coordinates to WGS84.

        The inverse conic maps any finite easting/northing to some valid
        longitude/latitude (far-off input wraps around the cone), so the
        result is also checked against the system's area of use, widened by
        AREA_OF_USE_MARGIN_DEG. Input read in the wrong system fails here.

        Raises:
            InvalidCoordinate: If the result is not finite, not a valid
                longitude/latitude, or outside the system's area of use.
        """
        _, to_wgs84 = _transformers(point.system)
        lon, lat = to_wgs84.transform(point.easting, point.northing)
        if not (isfinite(lon) and isfinite(lat)):
            raise InvalidCoordinate(
                f"Lambert → WGS84 conversion produced invalid coordinates from {point.system.epsg}."
            )
        if not (GeoConfig.LON_MIN <= lon <= GeoConfig.LON_MAX and GeoConfig.LAT_MIN <= lat <= GeoConfig.LAT_MAX):
            raise InvalidCoordinate(
                f"Lambert → WGS84 conversion produced invalid coordinates: lon {lon:.6f}, lat {lat:.6f}."
            )

        area = _area_of_use(point.system)
        margin = ProjectionConfig.AREA_OF_USE_MARGIN_DEG
        if area is not None and not (
            area.west - margin <= lon <= area.east + margin and area.south - margin <= lat <= area.north + margin
        ):
            logger.warning(f"{point} resolves to lon {lon:.4f}, lat {lat:.4f}, outside {point.system.epsg}")
            raise InvalidCoordinate(
                f"X {point.easting:.1f}, Y {point.northing:.1f} lies outside the area covered by "
                f"{point.system.epsg} (lon {lon:.4f}, lat {lat:.4f}). Check the selected Lambert system."
            )
        return GeoPoint(longitude=float(lon), latitude=float(lat))

    @staticmethod
    def from_planar(
        easting: float,
        northing: float,
        system: Optional[ProjectionSystem] = None,
    ) -> tuple[GeoPoint, ProjectionSystem]:
        """Convert raw planar coordinates, inferring the system when not given.

        Returns:
            Tuple (GeoPoint, system actually used).
        """
        resolved = CoordinateTransform.resolve_system(northing=northing, system=system)
        point = CoordinateTransform.to_geographic(
            ProjectedPoint(easting=easting, northing=northing, system=resolved)
        )
        return point, resolved
