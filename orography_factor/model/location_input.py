"""Location inputs - the ways a caller can name the site.

A GeoPoint is accepted as-is; the two classes here cover planar and
address input. SiteAnalyzer.resolve_location turns any of them into a
ResolvedLocation.
"""

from dataclasses import dataclass
from typing import Optional, Union

from orography_factor.constants import GeocodingConfig
from orography_factor.model.geo_point import GeoPoint, ProjectionSystem


@dataclass(frozen=True)
class PlanarInput:
    """Raw Lambert coordinates.

    Attributes:
        easting: X in meters
        northing: Y in meters
        system: Explicit projection, or None to infer it from the northing
    """

    easting: float
    northing: float
    system: Optional[ProjectionSystem] = None


@dataclass(frozen=True)
class AddressInput:
    """Free-text address to be geocoded.

    Attributes:
        address: Address or place name
        country_code: ISO-3166 alpha-2 hint, empty for no hint
    """

    address: str
    country_code: str = GeocodingConfig.DEFAULT_COUNTRY_CODE


LocationInput = Union[GeoPoint, PlanarInput, AddressInput]
