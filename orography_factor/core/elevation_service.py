"""Elevation services for batched terrain elevation queries.

Every service answers one ordered, multi-point request:
- OpenMeteoElevationService: Open-Meteo elevation API, one HTTP GET per batch
- DEMElevationService: local GeoTIFF raster, loaded once into a NumPy array

Both return one value per input point, in input order, with None for points
that have no elevation. Whole-request failures raise ElevationUnavailable.
"""

import logging
import threading
import time
from math import floor
from pathlib import Path
from typing import Optional, Protocol, Sequence

import numpy as np
import rasterio
import requests
from rasterio.warp import transform

from orography_factor.constants import DEMConfig, ElevationConfig, ProjectionConfig
from orography_factor.errors import ElevationUnavailable
from orography_factor.model.elevation_result import ElevationResult
from orography_factor.model.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class ElevationGateway(Protocol):
    """Anything that can look up elevations for an ordered list of points."""

    def fetch_elevations(self, points: Sequence[GeoPoint]) -> list[Optional[float]]:
        """Return elevations in meters, same length and order as points."""
        ...


class OpenMeteoElevationService:
    """Elevation lookups through the Open-Meteo elevation API.

    All points go into a single request as comma-separated latitude and
    longitude lists.

    Example:
        service = OpenMeteoElevationService()
        elevations = service.fetch_elevations([GeoPoint(longitude=4.35, latitude=50.85)])
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: str = ElevationConfig.URL,
        timeout_s: float = ElevationConfig.TIMEOUT_S,
    ) -> None:
        """Initialize with an optional HTTP session.

        Args:
            session: requests.Session to reuse (creates new if not provided)
            url: Elevation endpoint
            timeout_s: Request timeout in seconds
        """
        self._session = session or requests.Session()
        self._url = url
        self._timeout_s = timeout_s

    @staticmethod
    def _format_coordinates(values: Sequence[float]) -> str:
        return ",".join(f"{v:.{ElevationConfig.COORDINATE_DECIMALS}f}" for v in values)

    def fetch_elevations(self, points: Sequence[GeoPoint]) -> list[Optional[float]]:
        """Fetch elevations for all points in one request.

        Raises:
            ElevationUnavailable: On transport/HTTP failure, API error,
                malformed body, or a response of the wrong length.
        """
        if not points:
            return []

        params = {
            "latitude": self._format_coordinates([p.latitude for p in points]),
            "longitude": self._format_coordinates([p.longitude for p in points]),
        }

        try:
            response = self._session.get(self._url, params=params, timeout=self._timeout_s)
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            logger.warning(f"Elevation request failed with HTTP {status}")
            raise ElevationUnavailable(f"Elevation request failed (HTTP {status}).") from e
        except requests.RequestException as e:
            logger.warning(f"Elevation request failed: {e}")
            raise ElevationUnavailable("Elevation request failed.") from e

        if not isinstance(data, dict):
            raise ElevationUnavailable("Unexpected elevation response.")
        if data.get("error"):
            reason = data.get("reason", "unknown reason")
            logger.warning(f"Elevation API reported an error: {reason}")
            raise ElevationUnavailable(f"Elevation request failed: {reason}")

        elevations = data.get("elevation")
        if not isinstance(elevations, list) or len(elevations) != len(points):
            raise ElevationUnavailable("Unexpected elevation response.")

        values = list(ElevationResult.from_sequence(elevations))
        missing = sum(1 for v in values if v is None)
        if missing:
            logger.warning(f"Open-Meteo returned no elevation for {missing} of {len(points)} points")
        logger.info(f"Fetched {len(points)} elevations from Open-Meteo")
        return values


class DEMElevationService:
    """Elevation sampling from a local GeoTIFF Digital Elevation Model.

    The raster is loaded on first access and cached for fast subsequent
    queries. Points are transformed into the raster CRS in one batch.

    Example:
        dem = DEMElevationService(dem_path=Path("data/dem.tif"))
        elevations = dem.fetch_elevations(samples.locations)
    """

    def __init__(self, dem_path: Optional[Path] = None) -> None:
        """Initialize with an optional raster path.

        Args:
            dem_path: Path to DEM file (uses DEMConfig.DEM_PATH by default)
        """
        self._dem_path = Path(dem_path) if dem_path is not None else DEMConfig.DEM_PATH
        self._load_lock = threading.Lock()
        self._dem_crs: Optional[str] = None
        self._dem_array: Optional[np.ndarray] = None
        self._dem_nodata: Optional[float] = None
        self._dem_transform = None

    @property
    def is_loaded(self) -> bool:
        """Check if DEM data has been fully loaded into memory."""
        return self._dem_transform is not None

    def _ensure_loaded(self) -> None:
        """Load DEM into memory on first access (thread-safe)."""
        if self.is_loaded:
            return

        with self._load_lock:
            if self.is_loaded:
                return

            if not self._dem_path.exists():
                raise ElevationUnavailable(f"DEM file not found at {self._dem_path}.")

            logger.info(f"Loading DEM from {self._dem_path}...")
            start_time = time.time()

            with rasterio.open(self._dem_path) as dem:
                self._dem_crs = dem.crs.to_string() if dem.crs else ProjectionConfig.WGS84
                self._dem_array = dem.read(1)
                self._dem_nodata = dem.nodata
                # Set _dem_transform LAST - this is what is_loaded checks
                self._dem_transform = dem.transform

            elapsed = time.time() - start_time
            logger.info(f"DEM loaded in {elapsed:.2f}s (shape: {self._dem_array.shape}, CRS: {self._dem_crs})")

    def _sample(self, x: float, y: float) -> Optional[float]:
        """Look up one raster cell by native CRS coordinates."""
        col_f, row_f = ~self._dem_transform * (x, y)
        col, row = floor(col_f), floor(row_f)

        if row < 0 or row >= self._dem_array.shape[0] or col < 0 or col >= self._dem_array.shape[1]:
            logger.warning(f"Coordinates outside DEM bounds: x={x}, y={y} (row={row}, col={col})")
            return None

        elev = self._dem_array[row, col]
        if self._dem_nodata is not None and elev == self._dem_nodata:
            logger.warning(f"No-data value at x={x}, y={y}")
            return None
        if np.isnan(elev):
            logger.warning(f"NaN elevation at x={x}, y={y}")
            return None
        return float(elev)

    def fetch_elevations(self, points: Sequence[GeoPoint]) -> list[Optional[float]]:
        """Sample the raster at every point.

        Raises:
            ElevationUnavailable: If the DEM file does not exist.
        """
        if not points:
            return []
        self._ensure_loaded()

        lons = [p.longitude for p in points]
        lats = [p.latitude for p in points]
        if self._dem_crs != ProjectionConfig.WGS84:
            xs, ys = transform(ProjectionConfig.WGS84, self._dem_crs, lons, lats)
        else:
            xs, ys = lons, lats

        return [self._sample(x, y) for x, y in zip(xs, ys)]
