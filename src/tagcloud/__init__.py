"""
tagcloud - Circular tag-cloud layout of rectangles.

Usage:
    from tagcloud import CircularCloudLayouter, Size

    # Basic usage
    layouter = CircularCloudLayouter(center=(0, 0))
    rect = layouter.put_next_rectangle(Size(40, 20))

    # Many sizes at once
    rects = layouter.layout([Size(30, 20), Size(10, 20), Size(15, 25)])

    # With configuration
    config = LayoutConfig(spiral_step=0.5, rounding=RoundingMode.TRUNCATE, verbose=True)
    layouter = CircularCloudLayouter((400, 300), config)

    # Rendering
    TagCloudVisualizer().save(layouter.rectangles, layouter.center, "cloud.png")

Each rectangle is dropped on the first free point of an outward spiral and
then nudged straight toward the center until it would collide, stop getting
closer, or move more than ``compaction_limit`` on either axis.
"""

from .config import LayoutConfig, LayoutProgress, RoundingMode
from .geometry import Point, Rectangle, RectangleIndex, Size
from .layouter import CircularCloudLayouter, SpiralExhaustedError
from .spiral import Spiral
from .visualizer import TagCloudVisualizer

__all__ = [
    "CircularCloudLayouter",
    "SpiralExhaustedError",
    "LayoutConfig",
    "LayoutProgress",
    "RoundingMode",
    "Spiral",
    "RectangleIndex",
    "TagCloudVisualizer",
    "Point",
    "Rectangle",
    "Size",
]

__version__ = "0.1.0"
