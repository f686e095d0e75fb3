"""Shared synthetic strokes for the test suite.

All strokes are generated in canvas coordinates (y grows downwards).
"""

import math
import random

import pytest

from inkshape.domain import Point


def trace_polygon(vertices: list[tuple[float, float]], spacing: float) -> list[Point]:
    """Sample a polyline through ``vertices`` every ``spacing`` units."""
    points: list[Point] = []
    for (ax, ay), (bx, by) in zip(vertices, vertices[1:]):
        steps = max(1, round(math.hypot(bx - ax, by - ay) / spacing))
        for k in range(steps):
            t = k / steps
            points.append(Point(ax + (bx - ax) * t, ay + (by - ay) * t))
    points.append(Point(*vertices[-1]))
    return points


def sample_circle(
    cx: float, cy: float, r: float, count: int, jitter: float = 0.0, seed: int = 42
) -> list[Point]:
    rng = random.Random(seed)
    points = []
    for i in range(count):
        angle = 2 * math.pi * i / count
        radius = r + (rng.uniform(-jitter, jitter) if jitter else 0.0)
        points.append(Point(cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points


def hook_arrow() -> list[Point]:
    """200px horizontal drag to the right ending in a 20px hook at 45 degrees."""
    points = [Point(float(x), 100.0) for x in range(0, 201, 5)]
    step = 5 * math.cos(math.pi / 4)
    for k in range(1, 5):
        points.append(Point(200.0 + step * k, 100.0 - step * k))
    return points


@pytest.fixture
def circle_points() -> list[Point]:
    """64 samples on a circle of radius 50."""
    return sample_circle(100.0, 100.0, 50.0, 64)


@pytest.fixture
def noisy_circle_points() -> list[Point]:
    """150 samples on a circle of radius 120 with up to 0.75 radial jitter."""
    return sample_circle(200.0, 200.0, 120.0, 150, jitter=0.75)


@pytest.fixture
def rectangle_points() -> list[Point]:
    """Closed 200x100 rectangle traced clockwise from the top-left corner."""
    return trace_polygon([(0, 0), (200, 0), (200, 100), (0, 100), (0, 0)], spacing=2.0)


@pytest.fixture
def triangle_points() -> list[Point]:
    """Closed equilateral triangle with side 200, apex up."""
    h = 100.0 * math.sqrt(3)
    return trace_polygon([(0, h), (100, 0), (200, h), (0, h)], spacing=2.0)


@pytest.fixture
def line_points() -> list[Point]:
    """200px horizontal drag sampled every 5px."""
    return [Point(float(x), 100.0) for x in range(0, 201, 5)]


@pytest.fixture
def arrow_points() -> list[Point]:
    return hook_arrow()


@pytest.fixture
def left_arrow_points() -> list[Point]:
    return [Point(200.0 - p.x, p.y) for p in hook_arrow()]


@pytest.fixture
def down_arrow_points() -> list[Point]:
    """The hook arrow with axes swapped: drawn top to bottom."""
    return [Point(p.y, p.x) for p in hook_arrow()]


@pytest.fixture
def up_arrow_points() -> list[Point]:
    return [Point(p.y, 200.0 - p.x) for p in hook_arrow()]


@pytest.fixture
def scribble_points() -> list[Point]:
    """Zigzag with ten 60px-high teeth."""
    vertices = [(20.0 * i, 60.0 if i % 2 else 0.0) for i in range(11)]
    return trace_polygon(vertices, spacing=6.4)


def random_walk(seed: int, steps: int = 200, step: float = 3.0) -> list[Point]:
    """Walk of ``steps`` fixed-length moves in uniformly random directions."""
    rng = random.Random(seed)
    x = y = 0.0
    points = [Point(x, y)]
    for _ in range(steps):
        angle = rng.uniform(0.0, 2 * math.pi)
        x += step * math.cos(angle)
        y += step * math.sin(angle)
        points.append(Point(x, y))
    return points


@pytest.fixture
def random_walks() -> list[list[Point]]:
    """Thirty seeded 200-step random walks with 3px steps."""
    return [random_walk(seed) for seed in range(1, 31)]
