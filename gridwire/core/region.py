"""
Grid value types for obstacle maps and routed paths.

A Point addresses a single grid cell. A Region is an axis-aligned block
of cells given by its top-left corner and its width/height in cells.
"""

from typing import Any, Dict, Iterable, Iterator, Set, Tuple, Union, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A cell address on the routing grid."""
    x: int
    y: int

    @classmethod
    def coerce(cls, value: Union['Point', Tuple[int, int], Mapping[str, int]]) -> 'Point':
        """Build a Point from a Point, an (x, y) tuple or an {x, y} mapping."""
        if isinstance(value, Point):
            return value
        if isinstance(value, Mapping):
            return cls(value['x'], value['y'])
        x, y = value
        return cls(x, y)


@dataclass(frozen=True)
class Region:
    """
    Rectangular block of grid cells.

    (x, y) is the top-left cell; dx/dy are the width and height in cells
    and default to a single cell. Extents are half-open: the region covers
    x <= cx < x + dx and y <= cy < y + dy.

    dx/dy must be >= 1 and all fields must be integers. This is the
    caller's responsibility and is not checked.
    """
    x: int
    y: int
    dx: int = 1
    dy: int = 1

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.x + self.dx

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge."""
        return self.y + self.dy

    @property
    def area(self) -> int:
        return self.dx * self.dy

    def contains(self, x: int, y: int) -> bool:
        """Check if a cell lies inside this region."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every covered cell, row by row."""
        for cy in range(self.y, self.bottom):
            for cx in range(self.x, self.right):
                yield (cx, cy)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Region':
        """
        Build a Region from the interchange shape {x, y, dx?, dy?}.

        Missing (or null) dx/dy mean a single cell along that axis.
        """
        dx = data.get('dx')
        dy = data.get('dy')
        return cls(
            x=data['x'],
            y=data['y'],
            dx=1 if dx is None else dx,
            dy=1 if dy is None else dy,
        )

    def to_dict(self) -> Dict[str, int]:
        """Convert to the interchange shape, omitting dx/dy when they are 1."""
        data = {'x': self.x, 'y': self.y}
        if self.dx != 1:
            data['dx'] = self.dx
        if self.dy != 1:
            data['dy'] = self.dy
        return data


def coverage(regions: Iterable[Region]) -> Set[Tuple[int, int]]:
    """
    Return the set of cells covered by a collection of regions.

    Two region lists are equal in coverage when this set is equal,
    however the cells are partitioned into rectangles.
    """
    cells: Set[Tuple[int, int]] = set()
    for region in regions:
        cells.update(region.cells())
    return cells
