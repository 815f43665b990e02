"""OrographyResult - the computed factor with its intermediate statistics."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from orography_factor.constants import OrographyConfig
from orography_factor.model.elevation_result import ElevationResult
from orography_factor.model.sample_point import SampleSet
from orography_factor.model.warning import ComplexOrographyWarning


class Advisory(Enum):
    """Terrain classification derived from the rounded factor."""

    FLAT = "flat"
    TRANSITIONAL = "transitional"
    STEEP = "steep"


@dataclass(frozen=True)
class OrographyResult:
    """Result of one orography factor computation.

    Attributes:
        factor: Orography factor c0, floored at 1.0 and rounded to 2 decimals
        raw_factor: Unfloored, unrounded formula value
        site_elevation: Ac, elevation at the site in meters
        mean_elevation: Am, weighted mean of site and ring elevations in meters
        attenuation: Height attenuation applied to the terrain term (0-1]
        reference_height_m: Reference height z the factor was evaluated at
        samples: The nine sample points
        elevations: Elevations aligned with samples
        advisory: FLAT, TRANSITIONAL or STEEP
    """

    factor: float
    raw_factor: float
    site_elevation: float
    mean_elevation: float
    attenuation: float
    reference_height_m: float
    samples: SampleSet
    elevations: ElevationResult
    advisory: Advisory

    @property
    def elevation_differential(self) -> float:
        """Ac - Am in meters (positive when the site stands above its surroundings)."""
        return self.site_elevation - self.mean_elevation

    @property
    def warning(self) -> Optional[ComplexOrographyWarning]:
        """Advisory warning when the simplified model may no longer be valid."""
        if self.advisory is Advisory.STEEP:
            return ComplexOrographyWarning(factor=self.factor, limit=OrographyConfig.TRANSITIONAL_MAX)
        return None

    def __repr__(self) -> str:
        return (
            f"OrographyResult(c0={self.factor:.2f}, Ac={self.site_elevation:.1f}m, "
            f"Am={self.mean_elevation:.1f}m, {self.advisory.name})"
        )
