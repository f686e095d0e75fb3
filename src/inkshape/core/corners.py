"""Corner detection by sliding-window direction analysis.

Finds the points along a stroke where its direction turns sharply. The
result feeds the rectangle and triangle analyzers as polygon vertex
candidates; it is not a general polygon simplifier.

The window scales with the number of samples so short strokes still get
meaningful windows and long strokes are not thrown off by single-sample
jitter. Candidates closer than ``len(points) / 10`` to the previously
accepted corner are dropped, which collapses the run of candidates that a
single real corner produces. That distance is compared against a point
count, so its effect depends on the input device's sampling density.
"""

from collections.abc import Sequence

from inkshape.config import CornerConfig
from inkshape.core.geometry import angle_difference, direction_angle, distance
from inkshape.domain import Point

_DEFAULT_CONFIG = CornerConfig()


def corner_window_size(point_count: int, config: CornerConfig | None = None) -> int:
    """Sliding window size for a stroke of ``point_count`` samples.

    ``max(3, point_count // 20)`` with default settings, optionally capped
    by ``config.max_window_size``.
    """
    config = config or _DEFAULT_CONFIG
    window = max(config.min_window_size, point_count // config.window_divisor)
    if config.max_window_size is not None:
        window = min(window, max(config.min_window_size, config.max_window_size))
    return window


def find_corners(points: Sequence[Point], config: CornerConfig | None = None) -> list[Point]:
    """Find direction-change points along a stroke.

    For each point i with a full window on both sides, the direction of the
    chord from ``i - window`` to ``i`` is compared with the direction of the
    chord from ``i`` to ``i + window``. A turn above the angle threshold
    (45 degrees by default) makes i a corner candidate.

    Args:
        points: Ordered stroke points
        config: Corner detection settings (defaults when None)

    Returns:
        Subsequence of the input that always starts with the first point and
        ends with the last. Strokes too short for two windows yield just the
        endpoints; a single point yields itself; empty input yields [].
    """
    config = config or _DEFAULT_CONFIG
    n = len(points)
    if n == 0:
        return []
    if n == 1:
        return [points[0]]

    window = corner_window_size(n, config)
    if n < window * 2 + 1:
        return [points[0], points[-1]]

    min_separation = n / config.dedup_divisor
    corners: list[Point] = [points[0]]

    for i in range(window, n - window):
        before = points[i - window]
        current = points[i]
        after = points[i + window]

        # A zero-length chord has no direction
        if before == current or current == after:
            continue

        turn = angle_difference(
            direction_angle(current, after),
            direction_angle(before, current),
        )
        if turn <= config.angle_threshold:
            continue

        if distance(current, corners[-1]) > min_separation:
            corners.append(current)

    corners.append(points[-1])
    return corners
