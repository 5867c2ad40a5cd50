"""
Path post-processing for orthogonal routing.

Works on cell paths produced by the pathfinder:
- Compress straight runs down to their corners
- Expand corner paths back to individual cells
- Measure length, corners and cost
- Turn a routed wire into obstacle regions
"""

from typing import List, Sequence

from ..core.region import Point, Region
from ..core.merge import merge_regions


def _direction(a: Point, b: Point):
    return (b.x - a.x, b.y - a.y)


def simplify_path(cells: Sequence[Point]) -> List[Point]:
    """
    Compress a path by dropping points inside straight runs.

    Keeps the first point, the last point and every point where the
    direction of travel changes.

    Args:
        cells: Cell-by-cell path

    Returns:
        Corner-simplified path
    """
    if len(cells) < 3:
        return list(cells)

    simplified = [cells[0]]

    for i in range(1, len(cells) - 1):
        prev_cell = cells[i - 1]
        curr_cell = cells[i]
        next_cell = cells[i + 1]

        # Keep waypoint if direction changes
        if _direction(prev_cell, curr_cell) != _direction(curr_cell, next_cell):
            simplified.append(curr_cell)

    simplified.append(cells[-1])

    return simplified


def expand_path(path: Sequence[Point]) -> List[Point]:
    """
    Walk a corner path cell by cell.

    Consecutive waypoints must share a row or a column.
    """
    if not path:
        return []

    cells = [path[0]]

    for i in range(len(path) - 1):
        start = path[i]
        end = path[i + 1]
        step_x = (end.x > start.x) - (end.x < start.x)
        step_y = (end.y > start.y) - (end.y < start.y)

        x, y = start.x, start.y
        while (x, y) != (end.x, end.y):
            x += step_x
            y += step_y
            cells.append(Point(x, y))

    return cells


def path_length(path: Sequence[Point]) -> int:
    """Number of steps along a path (sum of Manhattan segment lengths)."""
    return sum(
        abs(path[i + 1].x - path[i].x) + abs(path[i + 1].y - path[i].y)
        for i in range(len(path) - 1)
    )


def count_corners(path: Sequence[Point]) -> int:
    """Number of direction changes along a path."""
    return max(0, len(simplify_path(path)) - 2)


def path_cost(path: Sequence[Point], turn_penalty: int, step_cost: int = 1) -> int:
    """
    Cost of a path under the pathfinder's cost model.

    Every step costs step_cost and every direction change adds turn_penalty.
    Works on full and on simplified paths alike.
    """
    return step_cost * path_length(path) + turn_penalty * count_corners(path)


def path_to_regions(path: Sequence[Point]) -> List[Region]:
    """
    Get obstacle regions covering every cell a routed wire passes through.

    Each straight segment becomes a one-cell-thick region; the result is
    merged so it can be handed straight to Area.add. A single-point path
    still occupies its one cell; an empty path occupies nothing.
    """
    if not path:
        return []

    if len(path) == 1:
        return [Region(path[0].x, path[0].y)]

    segments = []
    for i in range(len(path) - 1):
        a = path[i]
        b = path[i + 1]
        left, top = min(a.x, b.x), min(a.y, b.y)
        segments.append(Region(
            left,
            top,
            abs(b.x - a.x) + 1,
            abs(b.y - a.y) + 1,
        ))

    return merge_regions(segments)
