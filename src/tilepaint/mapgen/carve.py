# src/tilepaint/mapgen/carve.py
# Randomized layouts: noise fill + coverage repair, and a backtracking maze.
# Every function takes the RNG explicitly; nothing here touches global state.

import logging
from typing import List, Tuple

from ..grid import Grid, NEIGHBORS4
from ..rng import PMRandom
from .connectivity import (
    DEFAULT_MIN_COVERAGE,
    DEFAULT_REPAIR_PROBABILITY,
    RepairReport,
    repair_connectivity,
)

XY = Tuple[int, int]

MAZE_START: XY = (0, 0)

logger = logging.getLogger(__name__)


def random_fill(width: int, height: int, rng: PMRandom, wall_density: float) -> Grid:
    """Each cell is a wall with probability wall_density, ground otherwise."""
    g = Grid.empty(width, height)
    for y in range(height):
        for x in range(width):
            g.set(x, y, not rng.chance(wall_density))
    return g


def random_connected_grid(
    width: int,
    height: int,
    rng: PMRandom,
    wall_density: float = 0.2,
    min_coverage: float = DEFAULT_MIN_COVERAGE,
    repair_probability: float = DEFAULT_REPAIR_PROBABILITY,
) -> Tuple[Grid, RepairReport]:
    g = random_fill(width, height, rng, wall_density)
    logger.debug("random fill %dx%d: %d ground before repair", width, height, g.ground_count())
    report = repair_connectivity(
        g, g.center, rng,
        min_coverage=min_coverage,
        repair_probability=repair_probability,
    )
    return g, report


def _carvable(g: Grid, x: int, y: int, fx: int, fy: int) -> bool:
    # A wall may be opened from (fx, fy) only if that is its sole ground
    # neighbor; this keeps the carved passages free of cycles.
    if not g.in_bounds(x, y) or g.get(x, y):
        return False
    for nx, ny in g.neighbors4(x, y):
        if (nx, ny) != (fx, fy) and g.get(nx, ny):
            return False
    return True


def maze_grid(width: int, height: int, rng: PMRandom) -> Grid:
    """
    Recursive-backtracking carve from (0, 0) with an explicit stack.
    Ground cells form a spanning tree under 4-adjacency: one simple path
    between any two ground cells, all reachable from the start.
    """
    g = Grid.empty(width, height)
    sx, sy = MAZE_START
    g.set(sx, sy, True)
    stack: List[XY] = [MAZE_START]

    while stack:
        cx, cy = stack[-1]
        options = [
            (cx + dx, cy + dy)
            for dx, dy in NEIGHBORS4
            if _carvable(g, cx + dx, cy + dy, cx, cy)
        ]
        if options:
            nx, ny = rng.pick(options)
            g.set(nx, ny, True)
            stack.append((nx, ny))
        else:
            stack.pop()

    logger.debug("maze %dx%d: carved %d cells", width, height, g.ground_count())
    return g
