"""
gridwire - Orthogonal connector routing for diagram tools
Obstacle maps as merged rectangles with holes, and turn-aware grid A*
"""

from importlib.metadata import version, PackageNotFoundError

from .core.region import Point, Region
from .core.area import Area
from .core.occupancy import Occupancy, CellSetOccupancy, BoundedOccupancy
from .core.config import RouterConfig, load_router_config
from .routing.astar import Pathfinder, find_path
from .routing.models import RouteResult, SearchStatus
from .routing.path_optimizer import path_to_regions
from .exceptions import GridwireError, RoutingError, SearchAbortedError

try:
    __version__ = version("gridwire")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    "Point",
    "Region",
    "Area",
    "Occupancy",
    "CellSetOccupancy",
    "BoundedOccupancy",
    "RouterConfig",
    "load_router_config",
    "Pathfinder",
    "find_path",
    "RouteResult",
    "SearchStatus",
    "path_to_regions",
    "GridwireError",
    "RoutingError",
    "SearchAbortedError",
]
