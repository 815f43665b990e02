"""SamplePoint and SampleSet - the fixed elevation sampling layout.

A SampleSet holds exactly nine points in a fixed order:
CENTER, N-500, N-1000, E-500, E-1000, S-500, S-1000, W-500, W-1000.
The elevation lookup returns values in this order and the calculator
indexes into it, so the layout is validated on construction.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from orography_factor.constants import SamplingConfig
from orography_factor.model.geo_point import GeoPoint


def expected_layout() -> list[tuple[str, float, Optional[float]]]:
    """Return the (label, distance_m, bearing_deg) combination every SampleSet must match."""
    layout: list[tuple[str, float, Optional[float]]] = [(SamplingConfig.CENTER_LABEL, 0.0, None)]
    for label, bearing_deg in SamplingConfig.BEARINGS_DEG.items():
        for distance_m in SamplingConfig.DISTANCES_M:
            layout.append((label, distance_m, bearing_deg))
    return layout


@dataclass(frozen=True)
class SamplePoint:
    """One elevation sample around the site.

    Attributes:
        label: "CENTER", "N", "E", "S" or "W"
        distance_m: Great-circle distance from the site (0 for the center)
        bearing_deg: Bearing from the site, None for the center
        location: Geographic position of the sample
    """

    label: str
    distance_m: float
    bearing_deg: Optional[float]
    location: GeoPoint

    def __post_init__(self) -> None:
        if self.distance_m < 0:
            raise ValueError(f"Sample distance must be non-negative, got {self.distance_m}")

    @property
    def is_center(self) -> bool:
        return self.bearing_deg is None

    @property
    def key(self) -> str:
        """Unique key such as "CENTER" or "N-500"."""
        if self.is_center:
            return self.label
        return f"{self.label}-{self.distance_m:.0f}"


@dataclass(frozen=True)
class SampleSet:
    """Ordered, immutable set of the nine sample points.

    Raises:
        ValueError: If the points do not match the fixed label/distance/bearing layout.
    """

    points: tuple[SamplePoint, ...]

    def __post_init__(self) -> None:
        actual = [(p.label, float(p.distance_m), p.bearing_deg) for p in self.points]
        if actual != expected_layout():
            raise ValueError(f"Sample set does not match the fixed layout: {[p.key for p in self.points]}")

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> SamplePoint:
        return self.points[index]

    @property
    def center(self) -> SamplePoint:
        return self.points[0]

    @property
    def ring(self) -> tuple[SamplePoint, ...]:
        """The eight non-center samples, in sampling order."""
        return self.points[1:]

    @property
    def locations(self) -> list[GeoPoint]:
        return [p.location for p in self.points]

    @property
    def keys(self) -> list[str]:
        return [p.key for p in self.points]
