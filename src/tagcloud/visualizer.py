"""
Raster rendering of a finished cloud layout.
"""

import os
from typing import Sequence, Tuple

from PIL import Image, ImageColor, ImageDraw

from .geometry import Point, Rectangle

MIN_IMAGE_SIDE = 400
CENTER_MARKER_SIZE = 8
FILL_ALPHA = 40


class TagCloudVisualizer:
    """Draws placed rectangles and the cloud center onto a square image."""

    def __init__(self, background_color: str = "white", rectangle_color: str = "blue",
                 center_color: str = "red", padding: int = 30):
        self.background_color = background_color
        self.rectangle_color = rectangle_color
        self.center_color = center_color
        self.padding = padding

    def _validate(self, rectangles: Sequence[Rectangle]) -> None:
        if rectangles is None:
            raise TypeError("rectangles must not be None")
        if len(rectangles) == 0:
            raise ValueError("Rectangles list cannot be empty")

    def image_side(self, rectangles: Sequence[Rectangle], center: Point) -> int:
        """Side of a square image that fits the cloud with the center in the middle."""
        max_left = max_right = max_top = max_bottom = 0
        for rect in rectangles:
            max_left = max(max_left, center[0] - rect.left)
            max_right = max(max_right, rect.right - center[0])
            max_top = max(max_top, center[1] - rect.top)
            max_bottom = max(max_bottom, rect.bottom - center[1])

        width = max(max_left, max_right) * 2 + 2 * self.padding
        height = max(max_top, max_bottom) * 2 + 2 * self.padding
        return max(width, height, MIN_IMAGE_SIDE)

    def render(self, rectangles: Sequence[Rectangle], center: Point) -> Image.Image:
        self._validate(rectangles)
        side = self.image_side(rectangles, center)
        offset = (side // 2 - center[0], side // 2 - center[1])

        image = Image.new("RGB", (side, side), self.background_color)
        draw = ImageDraw.Draw(image, "RGBA")
        self._draw_rectangles(draw, rectangles, offset)
        self._draw_center(draw, center, offset)
        draw.text((10, 10), f"Rectangles: {len(rectangles)}", fill="black")
        return image

    def _draw_rectangles(self, draw: ImageDraw.ImageDraw, rectangles: Sequence[Rectangle],
                         offset: Tuple[int, int]) -> None:
        r, g, b = ImageColor.getrgb(self.rectangle_color)[:3]
        for rect in rectangles:
            box = [rect.left + offset[0], rect.top + offset[1],
                   rect.right + offset[0], rect.bottom + offset[1]]
            draw.rectangle(box, fill=(r, g, b, FILL_ALPHA), outline=(r, g, b, 255), width=1)

    def _draw_center(self, draw: ImageDraw.ImageDraw, center: Point, offset: Tuple[int, int]) -> None:
        x, y = center[0] + offset[0], center[1] + offset[1]
        half = CENTER_MARKER_SIZE // 2
        draw.ellipse([x - half, y - half, x + half, y + half], fill=self.center_color)

    def save(self, rectangles: Sequence[Rectangle], center: Point, file_path: str) -> str:
        """Render the layout and write it as PNG. Returns the path written."""
        self._validate(rectangles)
        if not file_path or not str(file_path).strip():
            raise ValueError("File path cannot be empty")

        image = self.render(rectangles, center)
        directory = os.path.dirname(str(file_path))
        if directory:
            os.makedirs(directory, exist_ok=True)
        image.save(file_path, format="PNG")
        return str(file_path)
