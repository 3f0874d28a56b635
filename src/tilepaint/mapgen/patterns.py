# src/tilepaint/mapgen/patterns.py
# Deterministic geometric layouts (no randomness consumed).

import math

from ..grid import Grid

TWO_PI = math.pi * 2


def cross_grid(width: int, height: int) -> Grid:
    """Ground on the middle column and the middle row, walls elsewhere."""
    g = Grid.empty(width, height)
    cx, cy = width // 2, height // 2
    for y in range(height):
        for x in range(width):
            g.set(x, y, x == cx or y == cy)
    return g


def spiral_value(dx: int, dy: int) -> float:
    """
    Angle plus half the distance from the center, wrapped into [0, 2*pi).
    atan2 yields [-pi, pi]; float modulo by a positive divisor maps negative
    sums into the positive range.
    """
    angle = math.atan2(dy, dx)
    distance = math.sqrt(dx * dx + dy * dy)
    return (angle + distance * 0.5) % TWO_PI


def spiral_grid(width: int, height: int) -> Grid:
    g = Grid.empty(width, height)
    cx, cy = width // 2, height // 2
    for y in range(height):
        for x in range(width):
            g.set(x, y, spiral_value(x - cx, y - cy) < math.pi)
    return g
