"""
Configuration and progress tracking for the cloud layout.
"""

from dataclasses import dataclass
from enum import Enum


class RoundingMode(Enum):
    """How spiral coordinates are snapped to the integer grid."""
    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    TRUNCATE = "truncate"


@dataclass
class LayoutConfig:
    """
    Configuration parameters for the circular cloud layouter.

    Spiral search:
        spiral_step: Angle increment per spiral point; also scales the radius
        rounding: How spiral points are snapped to integer coordinates
        search_radius_factor: The search gives up once the spiral radius exceeds
            this multiple of (cloud reach + rectangle width + height)

    Placement:
        compaction_limit: Maximum nudge toward the center, per axis
        check_containment: Reject candidates that contain or are contained
            by a placed rectangle

    Output:
        verbose: Print progress lines while placing
    """
    # Spiral search
    spiral_step: float = 1.0
    rounding: RoundingMode = RoundingMode.HALF_AWAY_FROM_ZERO
    search_radius_factor: float = 2.0

    # Placement
    compaction_limit: int = 100
    check_containment: bool = True

    # Output
    verbose: bool = False


@dataclass
class LayoutProgress:
    """Tracks what the layouter has done so far."""
    rectangles_placed: int = 0
    points_tried: int = 0
    compaction_steps: int = 0
    phase: str = ""

    @property
    def points_per_rectangle(self) -> float:
        """Average number of spiral points consumed per placement."""
        return self.points_tried / self.rectangles_placed if self.rectangles_placed > 0 else 0

    def __str__(self) -> str:
        phase_str = f"[{self.phase}] " if self.phase else ""
        return (
            f"{phase_str}Placed: {self.rectangles_placed} | "
            f"Points tried: {self.points_tried} ({self.points_per_rectangle:.1f}/rect) | "
            f"Compaction steps: {self.compaction_steps}"
        )
