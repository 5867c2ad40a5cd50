"""
Custom exceptions for gridwire
"""


class GridwireError(Exception):
    """Base exception for all gridwire errors"""
    pass


class RoutingError(GridwireError):
    """Base exception for pathfinding failures that are not ordinary results"""
    pass


class SearchAbortedError(RoutingError):
    """Raised when a search exceeds its node expansion budget"""

    def __init__(self, expanded: int, limit: int):
        self.expanded = expanded
        self.limit = limit
        super().__init__(
            f"Search aborted after expanding {expanded} nodes (limit {limit})"
        )
