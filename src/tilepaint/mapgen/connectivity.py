"""Reachability helpers and the coverage repair pass.

The repair pass grows a 4-connected region outward from a seed cell, opening
walls it touches with a fixed probability, until the region covers a target
fraction of the grid or it can grow no further.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import List, Set, Tuple

from ..grid import Grid
from ..rng import PMRandom

XY = Tuple[int, int]

DEFAULT_MIN_COVERAGE = 0.6
DEFAULT_REPAIR_PROBABILITY = 0.7

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepairReport:
    target: int
    reachable: int
    walls_opened: int

    @property
    def target_met(self) -> bool:
        return self.reachable >= self.target


def reachable_from(grid: Grid, seed: XY) -> Set[XY]:
    """Ground cells 4-connected to seed (empty when seed is a wall)."""
    sx, sy = seed
    if not grid.get(sx, sy):
        return set()
    visited = {seed}
    q = deque([seed])
    while q:
        cx, cy = q.popleft()
        for nx, ny in grid.neighbors4(cx, cy):
            if (nx, ny) not in visited and grid.get(nx, ny):
                visited.add((nx, ny))
                q.append((nx, ny))
    return visited


def coverage(grid: Grid, seed: XY) -> float:
    return len(reachable_from(grid, seed)) / grid.size


def is_connected(grid: Grid) -> bool:
    """True when every ground cell sits in a single 4-connected component."""
    cells = grid.ground_cells()
    if not cells:
        return True
    return len(reachable_from(grid, cells[0])) == len(cells)


def coverage_target(grid: Grid, min_coverage: float) -> int:
    return int(grid.size * min_coverage)


def repair_connectivity(
    grid: Grid,
    seed: XY,
    rng: PMRandom,
    min_coverage: float = DEFAULT_MIN_COVERAGE,
    repair_probability: float = DEFAULT_REPAIR_PROBABILITY,
) -> RepairReport:
    """
    Mutate grid in place so that (softly) at least min_coverage of all cells
    are ground and reachable from seed.
      - seed is always forced to ground
      - a grid already at or above the target is left untouched
      - only walls are ever changed, and only into ground
      - each cell enters the frontier at most once, so work is bounded by
        width*height pops; an exhausted frontier ends the pass early
    """
    sx, sy = seed
    grid.set(sx, sy, True)
    target = coverage_target(grid, min_coverage)

    region = reachable_from(grid, seed)
    if len(region) >= target:
        logger.debug("repair skipped: %d/%d cells already reachable", len(region), target)
        return RepairReport(target=target, reachable=len(region), walls_opened=0)

    reached: Set[XY] = {seed}
    frontier: List[XY] = [seed]
    count = 1
    opened = 0
    while frontier and count < target:
        # Unordered pick: swap the chosen cell with the tail and pop it.
        i = rng.bounded(len(frontier)) - 1
        frontier[i], frontier[-1] = frontier[-1], frontier[i]
        cx, cy = frontier.pop()

        for nx, ny in grid.neighbors4(cx, cy):
            if (nx, ny) in reached:
                continue
            if grid.get(nx, ny):
                reached.add((nx, ny))
                frontier.append((nx, ny))
                count += 1
            elif rng.chance(repair_probability):
                grid.set(nx, ny, True)
                reached.add((nx, ny))
                frontier.append((nx, ny))
                count += 1
                opened += 1

    if count < target:
        logger.debug("repair frontier exhausted at %d/%d cells", count, target)
    else:
        logger.debug("repair reached %d/%d cells, opened %d walls", count, target, opened)
    return RepairReport(target=target, reachable=count, walls_opened=opened)
