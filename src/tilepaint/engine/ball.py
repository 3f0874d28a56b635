# src/tilepaint/engine/ball.py
# Grid rule behind the rolling ball: once pushed, it keeps going until the
# next cell is a wall or the edge of the grid.

from __future__ import annotations

from typing import List, Tuple

from ..errors import InvalidOption
from ..grid import Grid

XY = Tuple[int, int]


DIRS = {
    "left": (-1, 0),
    "right": (1, 0),
    "up": (0, -1),
    "down": (0, 1),
}


def slide(grid: Grid, pos: XY, direction: str) -> Tuple[XY, List[XY]]:
    """
    Roll from pos in direction. Returns (end position, cells covered),
    where the covered list starts with pos itself. A blocked push returns
    (pos, [pos]).
    """
    if direction not in DIRS:
        raise InvalidOption(f"unknown direction {direction!r}")
    dx, dy = DIRS[direction]
    x, y = pos
    path = [pos]
    while grid.is_ground(x + dx, y + dy):
        x, y = x + dx, y + dy
        path.append((x, y))
    return (x, y), path


def can_move(grid: Grid, pos: XY, direction: str) -> bool:
    if direction not in DIRS:
        return False
    dx, dy = DIRS[direction]
    return grid.is_ground(pos[0] + dx, pos[1] + dy)
