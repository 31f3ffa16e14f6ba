"""
Demonstration driver: lays out random word-sized boxes and saves images.

Usage:
    python -m tagcloud.demo [output_dir]
"""

import os
import sys
from typing import Iterator, Tuple

import numpy as np

from .geometry import Point, Size
from .layouter import CircularCloudLayouter
from .visualizer import TagCloudVisualizer

# (name, center, rectangle count, seed)
EXAMPLES = [
    ("example1", Point(400, 300), 15, 1),
    ("example2", Point(100, 100), 50, 2),
    ("example3", Point(500, 500), 100, 3),
]


def random_sizes(count: int, rng: np.random.Generator,
                 width_range: Tuple[int, int] = (20, 80),
                 height_range: Tuple[int, int] = (15, 50)) -> Iterator[Size]:
    """Yield random sizes; upper bounds are exclusive."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    widths = rng.integers(width_range[0], width_range[1], size=count)
    heights = rng.integers(height_range[0], height_range[1], size=count)
    for w, h in zip(widths, heights):
        yield Size(int(w), int(h))


def generate_example(name: str, output_dir: str, center: Point, count: int, seed: int) -> str:
    layouter = CircularCloudLayouter(center)
    rectangles = layouter.layout(random_sizes(count, np.random.default_rng(seed)))
    file_path = os.path.join(output_dir, f"{name}.png")
    return TagCloudVisualizer().save(rectangles, center, file_path)


def generate_demo_images(output_dir: str = "TagCloudImages") -> list:
    os.makedirs(output_dir, exist_ok=True)
    paths = []
    for name, center, count, seed in EXAMPLES:
        paths.append(generate_example(name, output_dir, center, count, seed))
        print(f"Saved {paths[-1]}")
    return paths


if __name__ == "__main__":
    generate_demo_images(*sys.argv[1:2])
