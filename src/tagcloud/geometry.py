"""
Geometry primitives for the cloud layout.

Contains:
- Point, Size, Rectangle: immutable integer value types
- RectangleIndex: vectorized store of placed rectangles for collision tests
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, NamedTuple, Optional


class Point(NamedTuple):
    x: int
    y: int


class Size(NamedTuple):
    width: int
    height: int


class Rectangle(NamedTuple):
    """Axis-aligned rectangle with its origin at the top-left corner."""
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_location(cls, location: Point, size: Size) -> "Rectangle":
        return cls(location[0], location[1], size[0], size[1])

    @classmethod
    def bounding(cls, rectangles: Iterable["Rectangle"]) -> "Rectangle":
        """Smallest rectangle enclosing all of the given rectangles."""
        edges = np.array([r.edges for r in rectangles], dtype=np.int64)
        if len(edges) == 0:
            raise ValueError("Cannot compute the bounds of no rectangles")
        left, top = edges[:, 0].min(), edges[:, 1].min()
        right, bottom = edges[:, 2].max(), edges[:, 3].max()
        return cls(int(left), int(top), int(right - left), int(bottom - top))

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    @property
    def edges(self) -> tuple:
        """(left, top, right, bottom)"""
        return (self.left, self.top, self.right, self.bottom)

    def offset(self, dx: int, dy: int) -> "Rectangle":
        return Rectangle(self.x + dx, self.y + dy, self.width, self.height)

    def intersects_with(self, other: "Rectangle") -> bool:
        """True if the interiors overlap. Touching edges do not count."""
        return (other.left < self.right and self.left < other.right and
                other.top < self.bottom and self.top < other.bottom)

    def contains(self, other: "Rectangle") -> bool:
        """True if other lies entirely inside this rectangle, edges included."""
        return (self.left <= other.left and other.right <= self.right and
                self.top <= other.top and other.bottom <= self.bottom)


@dataclass
class RectangleIndex:
    """Ordered store of placed rectangles with vectorized collision checks."""
    check_containment: bool = True
    _rectangles: List[Rectangle] = field(default_factory=list)

    # Cache for numpy arrays
    _edges: Optional[np.ndarray] = None
    _cache_valid: bool = False

    def add(self, rectangle: Rectangle) -> None:
        """Append a rectangle, keeping insertion order."""
        self._rectangles.append(rectangle)
        self._invalidate_cache()

    def _invalidate_cache(self) -> None:
        self._cache_valid = False

    def _get_edges(self) -> np.ndarray:
        """(n, 4) array of left, top, right, bottom, rebuilt only after adds."""
        if not self._cache_valid or self._edges is None:
            if len(self._rectangles) > 0:
                self._edges = np.array([r.edges for r in self._rectangles], dtype=np.int64)
            else:
                self._edges = np.empty((0, 4), dtype=np.int64)
            self._cache_valid = True
        return self._edges

    def __len__(self) -> int:
        return len(self._rectangles)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(self._rectangles)

    def intersects_any(self, rectangle: Rectangle) -> bool:
        if len(self._rectangles) == 0:
            return False
        left, top, right, bottom = self._get_edges().T
        overlap = ((left < rectangle.right) & (rectangle.left < right) &
                   (top < rectangle.bottom) & (rectangle.top < bottom))
        return bool(np.any(overlap))

    def contains_any(self, rectangle: Rectangle) -> bool:
        """True if the rectangle encloses, or is enclosed by, any stored one."""
        if len(self._rectangles) == 0:
            return False
        left, top, right, bottom = self._get_edges().T
        encloses = ((left <= rectangle.left) & (rectangle.right <= right) &
                    (top <= rectangle.top) & (rectangle.bottom <= bottom))
        enclosed = ((rectangle.left <= left) & (right <= rectangle.right) &
                    (rectangle.top <= top) & (bottom <= rectangle.bottom))
        return bool(np.any(encloses | enclosed))

    def collides(self, rectangle: Rectangle) -> bool:
        """Check whether a candidate clashes with anything already placed."""
        if self.intersects_any(rectangle):
            return True
        return self.check_containment and self.contains_any(rectangle)

    def reach_from(self, center: Point) -> float:
        """Distance from center to the farthest corner of any stored rectangle."""
        if len(self._rectangles) == 0:
            return 0.0
        left, top, right, bottom = self._get_edges().T
        dx = np.maximum(np.abs(left - center[0]), np.abs(right - center[0]))
        dy = np.maximum(np.abs(top - center[1]), np.abs(bottom - center[1]))
        return float(np.max(np.hypot(dx, dy)))

    def bounds(self) -> Rectangle:
        return Rectangle.bounding(self._rectangles)
