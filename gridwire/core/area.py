"""
Obstacle map made of merged rectangles with support for holes.
"""

import logging
from typing import Iterable, Optional, Tuple

from .region import Region
from .merge import merge_regions, regions_contain, bounding_box

logger = logging.getLogger(__name__)


class Area:
    """
    Arbitrary set of grid cells built from rectangles.

    An Area keeps two independently merged channels of regions:
    positive regions (obstacles) and negative regions (holes). A cell is
    occupied when it lies inside a positive region and outside every
    negative region, which allows shapes such as a doughnut.

    Both channels are re-merged after every mutation, so each one is always
    a non-overlapping decomposition of everything ever added to it.

    Mutation is not thread-safe. Concurrent readers are fine as long as
    nothing mutates the Area meanwhile.
    """

    def __init__(self, initial_regions: Optional[Iterable[Region]] = None):
        """
        Initialize an Area.

        Args:
            initial_regions: Optional regions seeding the positive channel
        """
        self._positive: Tuple[Region, ...] = ()
        self._negative: Tuple[Region, ...] = ()

        if initial_regions:
            self.add(initial_regions)

    def add(self, regions: Iterable[Region]) -> 'Area':
        """
        Merge regions into the positive channel.

        Example:
            >>> Area().add([Region(0, 0, 5, 5)]).is_occupied(4, 4)
            True

        Returns:
            This Area, for chaining
        """
        regions = list(regions)
        if not regions:
            return self

        self._positive = tuple(merge_regions([*self._positive, *regions]))
        logger.debug(f"Added {len(regions)} region(s), positive channel now has {len(self._positive)}")
        return self

    def subtract(self, regions: Iterable[Region]) -> 'Area':
        """
        Merge regions into the negative channel, punching holes.

        Example:
            >>> doughnut = Area([Region(0, 0, 5, 5)]).subtract([Region(1, 1, 3, 3)])
            >>> doughnut.is_occupied(2, 2)
            False

        Returns:
            This Area, for chaining
        """
        regions = list(regions)
        if not regions:
            return self

        self._negative = tuple(merge_regions([*self._negative, *regions]))
        logger.debug(f"Subtracted {len(regions)} region(s), negative channel now has {len(self._negative)}")
        return self

    def is_occupied(self, x: int, y: int) -> bool:
        """Check if a cell is inside a positive region and outside every hole."""
        if not regions_contain(self._positive, x, y):
            return False
        return not regions_contain(self._negative, x, y)

    def positive_regions(self) -> Tuple[Region, ...]:
        """
        Get the merged positive regions.

        Holes are not applied. Useful for consumers that want obstacles as
        rectangles rather than per-cell queries.
        """
        return self._positive

    def negative_regions(self) -> Tuple[Region, ...]:
        """Get the merged negative (hole) regions."""
        return self._negative

    def bounds(self) -> Optional[Region]:
        """Bounding box of the positive channel, or None if it is empty."""
        return bounding_box(self._positive)

    def copy(self) -> 'Area':
        """Return an independent Area with the same channels."""
        clone = Area()
        clone._positive = self._positive
        clone._negative = self._negative
        return clone

    @staticmethod
    def union(a: 'Area', b: 'Area') -> 'Area':
        """
        Create a new Area combining two Areas channel by channel.

        The positive channels are merged together and the negative channels
        are merged together. A hole from one operand can therefore remove
        cells that the other operand covers.
        """
        combined = Area()
        combined._positive = tuple(merge_regions([*a._positive, *b._positive]))
        combined._negative = tuple(merge_regions([*a._negative, *b._negative]))
        return combined

    def __contains__(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return self.is_occupied(x, y)

    def __len__(self) -> int:
        return len(self._positive)

    def __repr__(self) -> str:
        return f"Area(positive={len(self._positive)}, negative={len(self._negative)})"
