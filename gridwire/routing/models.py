"""Search outcome types."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.region import Point


class SearchStatus(str, Enum):
    """How a search ended."""
    FOUND = 'found'
    NO_PATH = 'no_path'
    BLOCKED_ENDPOINT = 'blocked_endpoint'
    ABORTED = 'aborted'


class RouteResult(BaseModel):
    """Structured result of a single search

    Attributes:
        status: How the search ended
        path: Corner-simplified waypoints from start to end (empty unless FOUND)
        cost: Total path cost under the turn-penalty model (None unless FOUND)
        expanded: Number of nodes taken off the open set
        turn_penalty: Turn penalty the search ran with
    """
    status: SearchStatus
    path: List[Point] = Field(default_factory=list)
    cost: Optional[int] = None
    expanded: int = 0
    turn_penalty: int = 0

    @property
    def ok(self) -> bool:
        return self.status == SearchStatus.FOUND

    @property
    def corners(self) -> int:
        return max(0, len(self.path) - 2)
