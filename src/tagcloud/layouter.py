from typing import Iterable, Iterator, List, Optional, Tuple

from .config import LayoutConfig, LayoutProgress
from .geometry import Point, Rectangle, RectangleIndex, Size
from .spiral import Spiral


class SpiralExhaustedError(RuntimeError):
    """The spiral search ran past its safety radius without finding space."""


class CircularCloudLayouter:
    """Places rectangles one at a time into a compact cloud around a center."""

    def __init__(self, center: Point, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()
        self._center = Point(*center)
        self.spiral = Spiral(self._center, self.config.spiral_step, self.config.rounding)
        self.index = RectangleIndex(check_containment=self.config.check_containment)
        self.progress = LayoutProgress()

    @property
    def center(self) -> Point:
        return self._center

    @property
    def rectangles(self) -> Tuple[Rectangle, ...]:
        """Placed rectangles in placement order."""
        return tuple(self.index)

    def bounds(self) -> Rectangle:
        return self.index.bounds()

    def _distance_to_center(self, rectangle: Rectangle) -> int:
        """Squared distance from the rectangle's center to the cloud center."""
        cx, cy = rectangle.center
        return (cx - self._center.x) ** 2 + (cy - self._center.y) ** 2

    def _place_first(self, size: Size) -> Rectangle:
        location = Point(self._center.x - size.width // 2, self._center.y - size.height // 2)
        return Rectangle.from_location(location, size)

    def _find_free_candidate(self, size: Size) -> Rectangle:
        """Walk the spiral until a candidate clears every placed rectangle."""
        reach = self.index.reach_from(self._center)
        # step ** 2 is the radial gap between consecutive spiral points
        max_radius = (self.config.search_radius_factor * (reach + size.width + size.height)
                      + self.spiral.step ** 2)

        while self.spiral.radius <= max_radius:
            point = next(self.spiral)
            self.progress.points_tried += 1
            candidate = Rectangle.from_location(point, size)
            if not self.index.collides(candidate):
                return candidate

        if self.config.verbose:
            print(f"Spiral search gave up at radius {self.spiral.radius:.1f}. {self.progress}")
        raise SpiralExhaustedError(
            f"No free position for {size} within radius {max_radius:.1f} of {self._center}"
        )

    def _move_to_center(self, candidate: Rectangle) -> Rectangle:
        """
        Nudge a free candidate toward the center along a fixed 8-way direction.

        The direction is taken once from the candidate's origin. Each step must
        bring the rectangle's center strictly closer, stay clear of placed
        rectangles, and keep the total shift within ``compaction_limit``.
        """
        dx = self._center.x - candidate.x
        dy = self._center.y - candidate.y
        step_x = (dx > 0) - (dx < 0)
        step_y = (dy > 0) - (dy < 0)
        limit = self.config.compaction_limit

        current = candidate
        while True:
            moved = current.offset(step_x, step_y)
            if self._distance_to_center(moved) >= self._distance_to_center(current):
                break
            if abs(moved.x - candidate.x) > limit or abs(moved.y - candidate.y) > limit:
                break
            if self.index.collides(moved):
                break
            current = moved
            self.progress.compaction_steps += 1

        return current

    def put_next_rectangle(self, size: Size) -> Rectangle:
        """
        Place a rectangle of the given size and return its final position.

        The first rectangle is centered on the cloud center. Later ones go to
        the first free spiral point and are then pulled toward the center.

        Raises:
            ValueError: if width or height is not positive.
            SpiralExhaustedError: if the search passes its safety radius.
        """
        size = Size(*size)
        if size.width <= 0 or size.height <= 0:
            raise ValueError("The size of the rectangle must be a positive number.")

        if len(self.index) == 0:
            rectangle = self._place_first(size)
        else:
            rectangle = self._move_to_center(self._find_free_candidate(size))

        self.index.add(rectangle)
        self.progress.rectangles_placed += 1

        if self.config.verbose and self.progress.rectangles_placed % 25 == 0:
            print(self.progress)

        return rectangle

    # =========================================================================
    # Main Entry Points
    # =========================================================================

    def generate(self, sizes: Iterable[Size]) -> Iterator[Rectangle]:
        """
        Place rectangles lazily, one per size, in the order given.

        Yields:
            The placed Rectangle for each size.
        """
        self.progress.phase = "layout"
        for size in sizes:
            yield self.put_next_rectangle(size)

        if self.config.verbose:
            print(f"Done! {self.progress}")

    def layout(self, sizes: Iterable[Size]) -> List[Rectangle]:
        """Place all sizes and return the rectangles as a list."""
        return list(self.generate(sizes))
