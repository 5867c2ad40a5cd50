"""
Grid-based A* routing for orthogonal diagram connectors.

Finds turn-aware shortest paths around obstacles and post-processes them
into corner waypoints.
"""

from .models import RouteResult, SearchStatus
from .astar import Pathfinder, find_path
from .path_optimizer import (
    simplify_path,
    expand_path,
    path_length,
    count_corners,
    path_cost,
    path_to_regions,
)

__all__ = [
    'RouteResult',
    'SearchStatus',
    'Pathfinder',
    'find_path',
    'simplify_path',
    'expand_path',
    'path_length',
    'count_corners',
    'path_cost',
    'path_to_regions',
]
