"""
Occupancy sources for pathfinding.

The pathfinder only needs to ask whether a cell is blocked. Anything with
an is_occupied(x, y) method works: an Area (rectangle-backed), a
CellSetOccupancy (rasterized set of blocked cells), or a BoundedOccupancy
that closes off everything outside a window.
"""

from typing import Iterable, Optional, Protocol, Set, Tuple, runtime_checkable

from .region import Region
from .area import Area


@runtime_checkable
class Occupancy(Protocol):
    """Anything that can tell whether a grid cell is blocked."""

    def is_occupied(self, x: int, y: int) -> bool:
        ...


class CellSetOccupancy:
    """
    Rasterized occupancy backed by a set of blocked cells.

    Lookups are O(1) regardless of obstacle count, at the cost of one entry
    per blocked cell.
    """

    def __init__(self, cells: Optional[Iterable[Tuple[int, int]]] = None):
        self.blocked: Set[Tuple[int, int]] = set(cells) if cells else set()

    @classmethod
    def from_regions(cls, regions: Iterable[Region]) -> 'CellSetOccupancy':
        """Rasterize a list of regions."""
        occupancy = cls()
        for region in regions:
            occupancy.block_region(region)
        return occupancy

    @classmethod
    def from_area(cls, area: Area, window: Region) -> 'CellSetOccupancy':
        """
        Rasterize an Area inside a window.

        Holes are honoured. Cells outside the window are left free.
        """
        return cls(cell for cell in window.cells() if area.is_occupied(*cell))

    def block(self, x: int, y: int) -> None:
        """Mark a single cell as blocked."""
        self.blocked.add((x, y))

    def block_region(self, region: Region) -> None:
        """Mark every cell of a region as blocked."""
        self.blocked.update(region.cells())

    def is_occupied(self, x: int, y: int) -> bool:
        return (x, y) in self.blocked

    def __len__(self) -> int:
        return len(self.blocked)


class BoundedOccupancy:
    """
    Restrict another occupancy source to a rectangular window.

    Cells outside the window count as occupied, so a search over it can
    never wander off indefinitely. The wrapped source is only read.
    """

    def __init__(self, source: Occupancy, bounds: Region):
        """
        Args:
            source: Occupancy source to wrap
            bounds: Window of traversable cells
        """
        self.source = source
        self.bounds = bounds

    @classmethod
    def around(cls, area: Area, margin: int = 1) -> 'BoundedOccupancy':
        """
        Bound an Area by its bounding box grown by margin cells per side.

        An empty Area is bounded around the origin cell.
        """
        box = area.bounds() or Region(0, 0)
        window = Region(
            box.x - margin,
            box.y - margin,
            box.dx + 2 * margin,
            box.dy + 2 * margin,
        )
        return cls(area, window)

    def in_bounds(self, x: int, y: int) -> bool:
        return self.bounds.contains(x, y)

    def is_occupied(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return self.source.is_occupied(x, y)
