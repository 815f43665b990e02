"""Configuration constants for the Orography Factor estimator.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    GeoConfig: Spherical Earth model
    SamplingConfig: Ring distances and cardinal bearings
    OrographyConfig: Factor formula coefficients and advisory thresholds
    ProjectionConfig: Belgian Lambert projection definitions
    ElevationConfig: Open-Meteo elevation API settings
    GeocodingConfig: Open-Meteo geocoding API settings
    DEMConfig: Local elevation raster file paths
"""

from pathlib import Path

# Package root directory (where orography_factor/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of orography_factor/)
PROJECT_ROOT = PACKAGE_DIR.parent

# Data directory outside package (downloaded separately, not shipped with package)
DATA_DIR = PROJECT_ROOT / "data"


class AppConfig:
    """UI application settings."""

    TITLE = "Orography Factor Playground"
    ICON = "⛰️"
    LAYOUT = "centered"

    INPUT_MODES = {
        "lonlat": "WGS84 longitude / latitude",
        "address": "Address",
        "lambert": "Belgian Lambert (EPSG:31370 / EPSG:3812)",
    }
    DEFAULT_INPUT_MODE = "lonlat"


class GeoConfig:
    """Spherical Earth model used by all geodesic offsets."""

    # Mean Earth radius in meters
    EARTH_RADIUS_M = 6_371_000

    LON_MIN, LON_MAX = -180.0, 180.0
    LAT_MIN, LAT_MAX = -90.0, 90.0


class SamplingConfig:
    """Sample ring layout around the site.

    Order matters: the elevation lookup and the calculator both rely on it.
    """

    CENTER_LABEL = "CENTER"

    # Cardinal bearings (degrees clockwise from North), in sampling order
    BEARINGS_DEG = {
        "N": 0.0,
        "E": 90.0,
        "S": 180.0,
        "W": 270.0,
    }

    # Ring distances in meters, in sampling order
    DISTANCES_M = (500.0, 1000.0)

    SAMPLE_COUNT = 1 + len(BEARINGS_DEG) * len(DISTANCES_M)


assert SamplingConfig.SAMPLE_COUNT == 9


class OrographyConfig:
    """Simplified complex-orography formula.

    Am = (SITE_WEIGHT * Ac + sum(ring)) / MEAN_DIVISOR
    c0 = 1 + SENSITIVITY_PER_M * (Ac - Am) * exp(-ATTENUATION_RATE_PER_M * max(0, z - ATTENUATION_ONSET_M))
    """

    SITE_WEIGHT = 2.0
    MEAN_DIVISOR = 10.0
    SENSITIVITY_PER_M = 0.004

    ATTENUATION_RATE_PER_M = 0.014
    ATTENUATION_ONSET_M = 10.0

    # Terrain never reduces the effective wind speed in this model
    MIN_FACTOR = 1.0
    FACTOR_DECIMALS = 2

    # Advisory thresholds on the rounded factor
    FLAT_MAX = 1.0
    TRANSITIONAL_MAX = 1.15

    DEFAULT_REFERENCE_HEIGHT_M = 10.0


class ProjectionConfig:
    """Belgian Lambert conformal conic projections (two standard parallels).

    Both systems pivot through WGS84 geographic coordinates.
    """

    WGS84 = "EPSG:4326"

    # Lambert 72 on the International 1924 ellipsoid, Belge 1972 datum shift
    LAMBERT_72_PROJ = (
        "+proj=lcc +lat_0=90 +lon_0=4.36748666666667 +lat_1=51.1666672333333 +lat_2=49.8333339 "
        "+x_0=150000.013 +y_0=5400088.438 +ellps=intl "
        "+towgs84=-106.8686,52.2978,-103.7239,0.3366,-0.457,1.8422,-1.2747 +units=m +no_defs"
    )

    # Lambert 2008 on GRS80, no datum shift
    LAMBERT_2008_PROJ = (
        "+proj=lcc +lat_0=50.797815 +lon_0=4.35921583333333 +lat_1=49.8333333333333 "
        "+lat_2=51.1666666666667 +x_0=649328 +y_0=665262 +ellps=GRS80 "
        "+towgs84=0,0,0,0,0,0,0 +units=m +no_defs"
    )

    # Northings above this select Lambert 72, anything else Lambert 2008
    NORTHING_THRESHOLD_M = 2_000_000

    # Slack around each system's EPSG area of use when unprojecting
    AREA_OF_USE_MARGIN_DEG = 1.0


class ElevationConfig:
    """Open-Meteo elevation API (multiple points per request)."""

    URL = "https://api.open-meteo.com/v1/elevation"
    TIMEOUT_S = 15
    COORDINATE_DECIMALS = 6


class GeocodingConfig:
    """Open-Meteo geocoding API (single best match)."""

    URL = "https://geocoding-api.open-meteo.com/v1/search"
    TIMEOUT_S = 15
    LANGUAGE = "en"
    RESULT_COUNT = 1
    DEFAULT_COUNTRY_CODE = "BE"


class DEMConfig:
    """Local elevation raster used as an offline alternative to Open-Meteo."""

    DEM_PATH = DATA_DIR / "dem.tif"
