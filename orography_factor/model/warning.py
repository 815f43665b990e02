"""Warning - advisories attached to an orography result.

Warnings flag results the simplified model should not be trusted for:
- Complex orography (c0 above the validity limit of the simplified approach)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TerrainWarning(ABC):
    """Abstract base class for orography advisories.

    Subclasses store specific parameters and compute message as property.
    Use isinstance() to check warning type.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable warning message."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ComplexOrographyWarning(TerrainWarning):
    """Factor exceeds the range where the simplified approach is appropriate.

    Attributes:
        factor: Computed orography factor c0
        limit: Upper validity limit of the simplified approach
        warning_type: Type identifier for serialization
    """

    factor: float
    limit: float
    warning_type: str = "ComplexOrographyWarning"

    @property
    def message(self) -> str:
        return (
            f"Note: c₀ = {self.factor:.2f} > {self.limit:.2f} — this simplified “complex orography” "
            f"approach may no longer be appropriate; consider the Eurocode general procedure."
        )
