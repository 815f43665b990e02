"""Validators - Form input parsing for the orography playground.

Centralizes all form validation logic. Validators return Optional[Message]:
- None if valid
- A FailureMessage if invalid (caller displays it)

Design Principles:
- No exceptions for expected validation failures
- Caller controls when/how to display the message
"""

from math import isfinite
from typing import Optional

from orography_factor.constants import GeoConfig
from orography_factor.model.geo_point import GeoPoint, ProjectionSystem
from orography_factor.model.location_input import AddressInput, LocationInput, PlanarInput
from orography_factor.model.message import FailureMessage

AUTO_SYSTEM = "auto"


def parse_number(text: object) -> Optional[float]:
    """Parse a form value as a finite float.

    Returns:
        The number, or None for blank, non-numeric or non-finite input.
    """
    if text is None:
        return None
    stripped = str(text).strip()
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    return value if isfinite(value) else None


def validate_lon_lat(lon: Optional[float], lat: Optional[float]) -> FailureMessage | None:
    """Validate parsed longitude/latitude.

    Returns:
        None if valid, FailureMessage naming the first problem otherwise.
    """
    if lon is None or lat is None:
        return FailureMessage(reason="Longitude and latitude must be numbers.")
    if not GeoConfig.LAT_MIN <= lat <= GeoConfig.LAT_MAX:
        return FailureMessage(reason="Latitude must be between -90 and 90.")
    if not GeoConfig.LON_MIN <= lon <= GeoConfig.LON_MAX:
        return FailureMessage(reason="Longitude must be between -180 and 180.")
    return None


def validate_easting_northing(easting: Optional[float], northing: Optional[float]) -> FailureMessage | None:
    """Validate parsed Lambert coordinates.

    Returns:
        None if valid, FailureMessage if either value is missing.
    """
    if easting is None or northing is None:
        return FailureMessage(reason="Easting and northing must be numbers.")
    return None


def validate_reference_height(z: Optional[float]) -> FailureMessage | None:
    """Validate the reference height.

    Returns:
        None if valid, FailureMessage if missing or negative.
    """
    if z is None or z < 0:
        return FailureMessage(reason="Reference height z must be a non-negative number.")
    return None


def parse_system_choice(choice: str) -> Optional[ProjectionSystem]:
    """Map the Lambert selector value to a ProjectionSystem.

    Returns:
        None for "auto" (infer from northing), else the matching system.

    Raises:
        ValueError: If the choice is neither "auto" nor a supported EPSG code.
    """
    if choice == AUTO_SYSTEM:
        return None
    return ProjectionSystem(choice)


def parse_location_input(mode: str, values: dict[str, str]) -> LocationInput | FailureMessage:
    """Turn raw form values for the selected input mode into a LocationInput.

    Args:
        mode: "lonlat", "address" or "lambert"
        values: Form values keyed by field name (lon, lat, address,
            country_code, easting, northing, lambert_crs)

    Returns:
        A GeoPoint, AddressInput or PlanarInput, or a FailureMessage if invalid.
    """
    if mode == "lonlat":
        lon = parse_number(values.get("lon"))
        lat = parse_number(values.get("lat"))
        failure = validate_lon_lat(lon=lon, lat=lat)
        if failure is not None:
            return failure
        return GeoPoint(longitude=lon, latitude=lat)

    if mode == "address":
        return AddressInput(
            address=values.get("address", ""),
            country_code=values.get("country_code", ""),
        )

    if mode == "lambert":
        easting = parse_number(values.get("easting"))
        northing = parse_number(values.get("northing"))
        failure = validate_easting_northing(easting=easting, northing=northing)
        if failure is not None:
            return failure
        system = parse_system_choice(values.get("lambert_crs", AUTO_SYSTEM))
        return PlanarInput(easting=easting, northing=northing, system=system)

    return FailureMessage(reason=f"Unknown input type: {mode}")
