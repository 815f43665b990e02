"""ElevationResult - elevations returned for a SampleSet, index-aligned.

None marks a sample the elevation service could not resolve.
"""

from dataclasses import dataclass
from math import isfinite
from typing import Iterator, Optional, Sequence


@dataclass(frozen=True)
class ElevationResult:
    """Elevations in meters above sea level, one per sample.

    Attributes:
        values: Elevation per sample index, or None when unavailable
    """

    values: tuple[Optional[float], ...]

    @classmethod
    def from_sequence(cls, values: Sequence[Optional[float]]) -> "ElevationResult":
        """Build from raw gateway output, turning non-numeric and non-finite entries into None."""
        cleaned: list[Optional[float]] = []
        for value in values:
            if value is None or isinstance(value, (bool, str)):
                cleaned.append(None)
                continue
            try:
                number = float(value)
            except (TypeError, ValueError):
                cleaned.append(None)
                continue
            cleaned.append(number if isfinite(number) else None)
        return cls(values=tuple(cleaned))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Optional[float]]:
        return iter(self.values)

    def __getitem__(self, index: int) -> Optional[float]:
        return self.values[index]

    def is_available(self, index: int) -> bool:
        return self.values[index] is not None

    @property
    def missing_indices(self) -> list[int]:
        return [i for i, value in enumerate(self.values) if value is None]
