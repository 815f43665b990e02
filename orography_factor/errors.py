"""Typed failures raised by the orography pipeline.

Every error is terminal for the current computation. Callers catch
OrographyError to display the reason and keep any earlier result.
"""

from typing import Optional


class OrographyError(Exception):
    """Base class for all orography pipeline failures."""


class InvalidCoordinate(OrographyError, ValueError):
    """Longitude/latitude out of range, or planar input resolving outside it."""


class InvalidReferenceHeight(OrographyError, ValueError):
    """Reference height is negative or not a finite number."""


class GeocodeNotFound(OrographyError):
    """The geocoding service returned no match for the address."""


class GeocodingFailed(OrographyError):
    """The geocoding request itself failed (transport, HTTP status, bad body)."""


class ElevationUnavailable(OrographyError):
    """The elevation service failed or returned a misaligned response."""


class MissingElevation(ElevationUnavailable):
    """A required sample has no elevation after the gateway responded.

    Attributes:
        index: Position of the sample in the sample set
        key: Sample key such as "CENTER" or "N-500"
    """

    def __init__(self, index: int, key: Optional[str] = None) -> None:
        self.index = index
        self.key = key
        if index == 0:
            message = "Could not determine site elevation."
        else:
            message = f"Could not determine all sampled elevations (missing {key or f'sample {index}'})."
        super().__init__(message)
