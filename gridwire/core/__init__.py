"""
Obstacle map primitives: grid value types, rectangle merging, Area and
occupancy adapters.
"""

from .region import Point, Region, coverage
from .merge import merge_regions, regions_contain, bounding_box
from .area import Area
from .occupancy import Occupancy, CellSetOccupancy, BoundedOccupancy
from .config import RouterConfig, load_router_config

__all__ = [
    'Point',
    'Region',
    'coverage',
    'merge_regions',
    'regions_contain',
    'bounding_box',
    'Area',
    'Occupancy',
    'CellSetOccupancy',
    'BoundedOccupancy',
    'RouterConfig',
    'load_router_config',
]
