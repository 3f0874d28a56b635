# src/tilepaint/mapgen/placement.py
import logging
from typing import Iterator, Optional, Tuple

from ..grid import Grid

XY = Tuple[int, int]

# Returned when no ground cell exists; callers must treat it as invalid.
FALLBACK_START: XY = (0, 0)

logger = logging.getLogger(__name__)


def chebyshev(a: XY, b: XY) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def ring_scan(grid: Grid, radius: int) -> Iterator[XY]:
    """
    Cells of the (2r+1)x(2r+1) box around the center, row-major, clipped to
    the grid. Inner cells are revisited; they were already rejected at a
    smaller radius, so the first ground hit is always on the ring itself.
    """
    cx, cy = grid.center
    for y in range(cy - radius, cy + radius + 1):
        for x in range(cx - radius, cx + radius + 1):
            if grid.in_bounds(x, y):
                yield (x, y)


def find_ground_near_center(grid: Grid) -> Optional[XY]:
    cx, cy = grid.center
    if grid.get(cx, cy):
        return (cx, cy)
    for radius in range(1, max(grid.width, grid.height) + 1):
        for x, y in ring_scan(grid, radius):
            if grid.get(x, y):
                return (x, y)
    return None


def find_start_position(grid: Grid) -> XY:
    """
    Ground cell closest to the center (Chebyshev distance), scanning rings
    outward in a fixed order. Falls back to (0, 0) on an all-wall grid.
    """
    pos = find_ground_near_center(grid)
    if pos is None:
        logger.warning("no ground cell in %dx%d grid; start falls back to %s",
                       grid.width, grid.height, FALLBACK_START)
        return FALLBACK_START
    return pos
