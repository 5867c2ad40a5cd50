"""
Sweep-line merging of grid regions.

Reduces an arbitrary, possibly overlapping list of regions to a canonical
set of non-overlapping regions covering the same cells:

1. Every left and right edge splits the plane into vertical strips
2. Each strip collects the y-intervals of the regions spanning it
3. Overlapping or touching y-intervals are merged
4. One region is emitted per merged interval per strip

Each strip rescans every input, so a merge costs O(R^2) in the number of
input regions. Re-merging the output returns it unchanged.
"""

from typing import List, Optional, Sequence

from .region import Region


def merge_regions(regions: Sequence[Region]) -> List[Region]:
    """
    Merge regions into a minimal non-overlapping set.

    Args:
        regions: Regions to merge (may overlap or touch)

    Returns:
        Merged regions, ordered by strip (left to right) then by y
    """
    if not regions:
        return []

    # Strip boundaries
    x_coords = set()
    for region in regions:
        x_coords.add(region.x)
        x_coords.add(region.x + region.dx)
    sorted_x = sorted(x_coords)

    merged: List[Region] = []

    for i in range(len(sorted_x) - 1):
        x1 = sorted_x[i]
        x2 = sorted_x[i + 1]
        strip_width = x2 - x1

        if strip_width <= 0:
            continue

        # y-intervals of every region spanning the whole strip
        intervals = [
            (region.y, region.y + region.dy)
            for region in regions
            if region.x <= x1 and region.x + region.dx >= x2
        ]

        if not intervals:
            continue

        intervals.sort(key=lambda interval: interval[0])

        start, end = intervals[0]
        for next_start, next_end in intervals[1:]:
            # Exclusive ends: start == end means the cells touch
            if next_start <= end:
                end = max(end, next_end)
            else:
                merged.append(Region(x1, start, strip_width, end - start))
                start, end = next_start, next_end
        merged.append(Region(x1, start, strip_width, end - start))

    return merged


def regions_contain(regions: Sequence[Region], x: int, y: int) -> bool:
    """Check if a cell lies inside any of the given regions."""
    for region in regions:
        if region.x <= x < region.x + region.dx and region.y <= y < region.y + region.dy:
            return True
    return False


def bounding_box(regions: Sequence[Region]) -> Optional[Region]:
    """
    Get the smallest region enclosing all given regions.

    Returns:
        Enclosing region, or None if there are no regions
    """
    if not regions:
        return None

    min_x = min(region.x for region in regions)
    min_y = min(region.y for region in regions)
    max_x = max(region.x + region.dx for region in regions)
    max_y = max(region.y + region.dy for region in regions)

    return Region(min_x, min_y, max_x - min_x, max_y - min_y)
