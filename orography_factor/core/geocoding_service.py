"""Address lookup through the Open-Meteo geocoding API.

Returns the single best match for a free-text address, optionally
restricted to a country.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from orography_factor.constants import GeocodingConfig
from orography_factor.errors import GeocodeNotFound, GeocodingFailed, InvalidCoordinate
from orography_factor.model.geo_point import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeocodeResult:
    """Best geocoding match.

    Attributes:
        location: Geographic position of the match
        label: "name, region, country" with blank parts omitted
    """

    location: GeoPoint
    label: str


class GeocodingService:
    """Resolves addresses to a GeoPoint.

    Example:
        result = GeocodingService().geocode("Grand-Place, Brussels", country_code="BE")
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: str = GeocodingConfig.URL,
        timeout_s: float = GeocodingConfig.TIMEOUT_S,
    ) -> None:
        self._session = session or requests.Session()
        self._url = url
        self._timeout_s = timeout_s

    @staticmethod
    def _label(match: dict) -> str:
        parts = [match.get("name"), match.get("admin1"), match.get("country")]
        return ", ".join(str(p) for p in parts if p)

    def geocode(self, address: str, country_code: str = GeocodingConfig.DEFAULT_COUNTRY_CODE) -> GeocodeResult:
        """Look up the best match for an address.

        Args:
            address: Address or place name
            country_code: ISO-3166 alpha-2 hint, empty for worldwide search

        Returns:
            GeocodeResult with location and display label.

        Raises:
            GeocodeNotFound: Blank address or no results.
            GeocodingFailed: Transport/HTTP failure or malformed response.
        """
        name = (address or "").strip()
        if not name:
            raise GeocodeNotFound("Please enter an address.")

        params = {
            "name": name,
            "count": GeocodingConfig.RESULT_COUNT,
            "language": GeocodingConfig.LANGUAGE,
        }
        cc = (country_code or "").strip().upper()
        if cc:
            params["countryCode"] = cc

        try:
            response = self._session.get(self._url, params=params, timeout=self._timeout_s)
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            logger.warning(f"Geocoding '{name}' failed with HTTP {status}")
            raise GeocodingFailed(f"Geocoding failed (HTTP {status}).") from e
        except requests.RequestException as e:
            logger.warning(f"Geocoding '{name}' failed: {e}")
            raise GeocodingFailed("Geocoding failed.") from e

        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            raise GeocodeNotFound("No results found for that address.")

        match = results[0]
        try:
            location = GeoPoint(longitude=float(match["longitude"]), latitude=float(match["latitude"]))
        except (KeyError, TypeError, ValueError, InvalidCoordinate) as e:
            raise GeocodingFailed("Unexpected geocoding response.") from e

        label = self._label(match)
        logger.info(f"Geocoded '{name}' to {location} ({label})")
        return GeocodeResult(location=location, label=label)
