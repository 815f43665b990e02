"""Orography factor from site and ring elevations.

Simplified "complex orography" approach based on the site elevation Ac and
elevations sampled at 500 m and 1000 m along the four cardinal directions:

    Am  = (2 * Ac + sum(ring)) / 10
    att = exp(-0.014 * max(0, z - 10))
    c0  = max(1, 1 + 0.004 * (Ac - Am) * att), rounded to 2 decimals

Policies:
- Strict: any unavailable elevation aborts with MissingElevation
- Floor at 1.0, then round, then classify on the rounded value
- Negative reference heights are rejected
"""

import logging
from math import exp, isfinite

from orography_factor.constants import OrographyConfig
from orography_factor.errors import ElevationUnavailable, InvalidReferenceHeight, MissingElevation
from orography_factor.model.elevation_result import ElevationResult
from orography_factor.model.orography_result import Advisory, OrographyResult
from orography_factor.model.sample_point import SampleSet

logger = logging.getLogger(__name__)


class OrographyCalculator:
    """Turns a SampleSet and its elevations into an OrographyResult.

    Example:
        result = OrographyCalculator.compute_factor(samples, elevations, reference_height_m=10.0)
        print(f"c0 = {result.factor:.2f} ({result.advisory.name})")
    """

    @staticmethod
    def validate_reference_height(reference_height_m: float) -> float:
        """Return the height as float.

        Raises:
            InvalidReferenceHeight: If negative or not finite.
        """
        try:
            z = float(reference_height_m)
        except (TypeError, ValueError) as e:
            raise InvalidReferenceHeight("Reference height z must be a non-negative number.") from e
        if not isfinite(z) or z < 0:
            raise InvalidReferenceHeight("Reference height z must be a non-negative number.")
        return z

    @staticmethod
    def attenuation(reference_height_m: float) -> float:
        """Height attenuation of the terrain term, 1.0 up to the onset height."""
        z = max(0.0, reference_height_m)
        excess = max(0.0, z - OrographyConfig.ATTENUATION_ONSET_M)
        return exp(-OrographyConfig.ATTENUATION_RATE_PER_M * excess)

    @staticmethod
    def classify_advisory(factor: float) -> Advisory:
        """Classify a (rounded) factor.

        Returns:
            FLAT for c0 <= 1.0, TRANSITIONAL for c0 <= 1.15, STEEP above.
            STEEP means the simplified approach may no longer be valid.
        """
        if factor <= OrographyConfig.FLAT_MAX:
            return Advisory.FLAT
        if factor <= OrographyConfig.TRANSITIONAL_MAX:
            return Advisory.TRANSITIONAL
        return Advisory.STEEP

    @staticmethod
    def compute_factor(
        samples: SampleSet,
        elevations: ElevationResult,
        reference_height_m: float,
    ) -> OrographyResult:
        """Compute c0 and its diagnostics.

        Args:
            samples: The nine sample points
            elevations: Elevations aligned 1:1 with samples
            reference_height_m: Height above ground z (>= 0)

        Returns:
            OrographyResult with factor, Ac, Am and advisory.

        Raises:
            InvalidReferenceHeight: If z is negative or not finite.
            ElevationUnavailable: If elevations do not align with samples.
            MissingElevation: If the site or any ring elevation is unavailable.
        """
        z = OrographyCalculator.validate_reference_height(reference_height_m)

        if len(elevations) != len(samples):
            raise ElevationUnavailable(
                f"Expected {len(samples)} elevations, got {len(elevations)}."
            )

        site_elevation = elevations[0]
        if site_elevation is None:
            raise MissingElevation(index=0, key=samples.center.key)

        ring_elevations: list[float] = []
        for index in range(1, len(samples)):
            value = elevations[index]
            if value is None:
                raise MissingElevation(index=index, key=samples[index].key)
            ring_elevations.append(value)

        mean_elevation = (OrographyConfig.SITE_WEIGHT * site_elevation + sum(ring_elevations)) / (
            OrographyConfig.MEAN_DIVISOR
        )
        attenuation = OrographyCalculator.attenuation(z)
        raw_factor = 1 + OrographyConfig.SENSITIVITY_PER_M * (site_elevation - mean_elevation) * attenuation

        factor = round(max(OrographyConfig.MIN_FACTOR, raw_factor), OrographyConfig.FACTOR_DECIMALS)
        advisory = OrographyCalculator.classify_advisory(factor)

        logger.info(
            f"Orography factor c0={factor:.2f} (raw {raw_factor:.4f}, Ac={site_elevation:.1f}m, "
            f"Am={mean_elevation:.1f}m, z={z:.1f}m, {advisory.name})"
        )

        return OrographyResult(
            factor=factor,
            raw_factor=raw_factor,
            site_elevation=site_elevation,
            mean_elevation=mean_elevation,
            attenuation=attenuation,
            reference_height_m=z,
            samples=samples,
            elevations=elevations,
            advisory=advisory,
        )
