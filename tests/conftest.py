"""
Shared pytest fixtures and utilities for testing
"""

import pytest
from hypothesis import strategies as st

from gridwire.core.region import Point, Region
from gridwire.core.area import Area
from gridwire.core.occupancy import BoundedOccupancy
from gridwire.routing.path_optimizer import expand_path


@pytest.fixture
def empty_area():
    """Area with no obstacles"""
    return Area()


@pytest.fixture
def doughnut_area():
    """5x5 block with a 3x3 hole in the middle"""
    return Area([Region(0, 0, 5, 5)]).subtract([Region(1, 1, 3, 3)])


@pytest.fixture
def gap_wall_field():
    """
    11x11 window split by a wall at x=5 with a single gap at y=7
    """
    area = Area([Region(5, 0, 1, 7), Region(5, 8, 1, 3)])
    return BoundedOccupancy(area, Region(0, 0, 11, 11))


@pytest.fixture
def enclosed_cell_area():
    """Ring of obstacles around the free cell (2, 2)"""
    return Area([Region(0, 0, 5, 5)]).subtract([Region(2, 2)])


# Hypothesis strategies

def region_strategy(min_coord=-5, max_coord=10, max_size=5):
    """Small regions inside a bounded test window"""
    return st.builds(
        Region,
        x=st.integers(min_value=min_coord, max_value=max_coord),
        y=st.integers(min_value=min_coord, max_value=max_coord),
        dx=st.integers(min_value=1, max_value=max_size),
        dy=st.integers(min_value=1, max_value=max_size),
    )


def region_lists(max_regions=8, **kwargs):
    return st.lists(region_strategy(**kwargs), max_size=max_regions)


# Helper functions for tests

def window_cells(min_coord=-6, max_coord=17):
    """Every cell of the square test window covering the strategies above"""
    return [
        (x, y)
        for x in range(min_coord, max_coord)
        for y in range(min_coord, max_coord)
    ]


def assert_no_overlap(regions):
    """Assert that no two regions share a cell"""
    seen = {}
    for region in regions:
        for cell in region.cells():
            assert cell not in seen, f"{region} overlaps {seen[cell]} at {cell}"
            seen[cell] = region


def assert_valid_path(path, start, end):
    """
    Assert that a path runs from start to end along orthogonal segments
    and keeps only corner waypoints
    """
    assert path, "Expected a path, got an empty one"
    assert path[0] == Point.coerce(start), f"Path starts at {path[0]}, expected {start}"
    assert path[-1] == Point.coerce(end), f"Path ends at {path[-1]}, expected {end}"

    for a, b in zip(path, path[1:]):
        assert a.x == b.x or a.y == b.y, f"Segment {a} -> {b} is not orthogonal"
        assert a != b, f"Repeated waypoint {a}"

    for prev, curr, nxt in zip(path, path[1:], path[2:]):
        straight = (prev.x == curr.x == nxt.x) or (prev.y == curr.y == nxt.y)
        assert not straight, f"Waypoint {curr} is not a corner"


def assert_path_clear(path, occupancy):
    """Assert that no cell along a path is occupied"""
    for cell in expand_path(path):
        assert not occupancy.is_occupied(cell.x, cell.y), f"Path crosses occupied cell {cell}"
