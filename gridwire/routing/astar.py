"""
A* pathfinding for orthogonal connector routing.

Searches a 4-connected grid (no diagonals) against any occupancy source.
The cost function considers:
- Path length (one step_cost per cell)
- Direction changes (turn_penalty per turn, so straighter paths win)

The heuristic is the Manhattan distance scaled by step_cost. It ignores
turns, which can only add cost, so it never overestimates and the first
path reaching the goal is a cheapest one.

Search states are (cell, incoming direction) pairs, so the turn cost of
every continuation is known exactly. Nodes live in a per-call arena and
refer to their parent by index.
"""

from typing import Dict, List, Optional, Set, Tuple, Union, Mapping
import heapq
import logging
from dataclasses import dataclass

from ..core.region import Point
from ..core.occupancy import Occupancy
from ..core.config import RouterConfig
from ..exceptions import SearchAbortedError
from .models import RouteResult, SearchStatus
from .path_optimizer import simplify_path

logger = logging.getLogger(__name__)

PointLike = Union[Point, Tuple[int, int], Mapping[str, int]]

# North, South, West, East
DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))

# Direction of the start node, which has no incoming step
NO_DIRECTION = -1


@dataclass
class Node:
    """Node in A* search."""
    x: int
    y: int
    direction: int  # Index into DIRECTIONS of the step that reached this node
    g: int          # Cost from start
    h: int          # Heuristic to goal
    parent: int     # Arena index of the parent, -1 for the start node

    @property
    def f(self) -> int:
        return self.g + self.h


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Calculate Manhattan distance between two cells."""
    return abs(x1 - x2) + abs(y1 - y2)


def reconstruct_path(nodes: List[Node], index: int) -> List[Point]:
    """Reconstruct the cell path ending at nodes[index] by following parent indices."""
    path = []
    while index != -1:
        node = nodes[index]
        path.append(Point(node.x, node.y))
        index = node.parent

    path.reverse()
    return path


class Pathfinder:
    """
    Grid A* pathfinder bound to one occupancy source.

    The source is only ever read, and nothing is cached between calls, so
    several searches may run against the same unchanging source at once.
    """

    def __init__(self, occupancy: Occupancy, config: Optional[RouterConfig] = None):
        """
        Initialize pathfinder.

        Args:
            occupancy: Anything with is_occupied(x, y), typically an Area
            config: Search parameters (defaults to RouterConfig())
        """
        self.occupancy = occupancy
        self.config = config or RouterConfig()

    def search(
        self,
        start: PointLike,
        end: PointLike,
        turn_penalty: Optional[int] = None
    ) -> RouteResult:
        """
        Search for the cheapest path between two cells.

        Args:
            start: Starting cell
            end: Goal cell
            turn_penalty: Extra cost per direction change
                (defaults to config.default_turn_penalty)

        Returns:
            RouteResult describing the outcome. The path is
            corner-simplified.
        """
        start = Point.coerce(start)
        end = Point.coerce(end)
        if turn_penalty is None:
            turn_penalty = self.config.default_turn_penalty

        is_occupied = self.occupancy.is_occupied

        # Early exit if start or end is blocked
        if is_occupied(start.x, start.y) or is_occupied(end.x, end.y):
            logger.debug(f"Endpoint blocked: {start} -> {end}")
            return RouteResult(status=SearchStatus.BLOCKED_ENDPOINT, turn_penalty=turn_penalty)

        step_cost = self.config.step_cost
        limit = self.config.max_expanded_nodes
        tx, ty = end.x, end.y

        # Node arena; the arena index doubles as insertion order for tie-breaks
        nodes: List[Node] = [
            Node(start.x, start.y, NO_DIRECTION, 0, step_cost * manhattan_distance(start.x, start.y, tx, ty), -1)
        ]
        node_index: Dict[Tuple[int, int, int], int] = {(start.x, start.y, NO_DIRECTION): 0}
        closed_set: Set[Tuple[int, int, int]] = set()
        blocked: Dict[Tuple[int, int], bool] = {}

        # Entries are (f, arena index); equal f pops the earliest inserted node
        open_set: List[Tuple[int, int]] = [(nodes[0].f, 0)]
        expanded = 0

        while open_set:
            f_cost, current_index = heapq.heappop(open_set)
            current = nodes[current_index]
            state = (current.x, current.y, current.direction)

            # Already expanded, or superseded by a cheaper entry
            if state in closed_set or f_cost != current.f:
                continue

            # Goal reached
            if current.x == tx and current.y == ty:
                path = simplify_path(reconstruct_path(nodes, current_index))
                logger.debug(
                    f"Path found {start} -> {end}: cost {current.g}, "
                    f"{len(path)} waypoints, {expanded} nodes expanded"
                )
                return RouteResult(
                    status=SearchStatus.FOUND,
                    path=path,
                    cost=current.g,
                    expanded=expanded,
                    turn_penalty=turn_penalty,
                )

            if limit is not None and expanded >= limit:
                logger.warning(f"Search {start} -> {end} aborted after {expanded} nodes")
                return RouteResult(status=SearchStatus.ABORTED, expanded=expanded, turn_penalty=turn_penalty)

            closed_set.add(state)
            expanded += 1

            # Explore neighbors
            for direction, (dx, dy) in enumerate(DIRECTIONS):
                nx = current.x + dx
                ny = current.y + dy
                neighbor_state = (nx, ny, direction)

                if neighbor_state in closed_set:
                    continue

                cell = (nx, ny)
                if cell not in blocked:
                    blocked[cell] = is_occupied(nx, ny)
                if blocked[cell]:
                    continue

                # Direction change penalty (the first step never turns)
                cost = step_cost
                if current.direction != NO_DIRECTION and current.direction != direction:
                    cost += turn_penalty
                tentative_g = current.g + cost

                existing_index = node_index.get(neighbor_state)
                if existing_index is not None:
                    existing = nodes[existing_index]
                    # Relax only on strict improvement
                    if tentative_g < existing.g:
                        existing.g = tentative_g
                        existing.parent = current_index
                        heapq.heappush(open_set, (existing.f, existing_index))
                else:
                    neighbor = Node(
                        nx, ny, direction,
                        tentative_g,
                        step_cost * manhattan_distance(nx, ny, tx, ty),
                        current_index,
                    )
                    nodes.append(neighbor)
                    new_index = len(nodes) - 1
                    node_index[neighbor_state] = new_index
                    heapq.heappush(open_set, (neighbor.f, new_index))

        # No path found
        logger.debug(f"No path {start} -> {end} after {expanded} nodes expanded")
        return RouteResult(status=SearchStatus.NO_PATH, expanded=expanded, turn_penalty=turn_penalty)

    def find_path(
        self,
        start: PointLike,
        end: PointLike,
        turn_penalty: Optional[int] = None
    ) -> Optional[List[Point]]:
        """
        Find the cheapest path between two cells.

        Args:
            start: Starting cell
            end: Goal cell
            turn_penalty: Extra cost per direction change
                (defaults to config.default_turn_penalty)

        Returns:
            Corner-simplified list of cells from start to end, or None if
            an endpoint is blocked or no path exists

        Raises:
            SearchAbortedError: If the expansion budget runs out first
        """
        result = self.search(start, end, turn_penalty)

        if result.status == SearchStatus.ABORTED:
            raise SearchAbortedError(result.expanded, self.config.max_expanded_nodes)

        return result.path if result.ok else None


def find_path(
    occupancy: Occupancy,
    start: PointLike,
    end: PointLike,
    turn_penalty: Optional[int] = None,
    config: Optional[RouterConfig] = None
) -> Optional[List[Point]]:
    """
    Find a path with a one-off Pathfinder.

    See Pathfinder.find_path.
    """
    return Pathfinder(occupancy, config).find_path(start, end, turn_penalty)
