# src/tilepaint/render/base.py
# The only contract between the generation engine and whatever turns a finished
# level into something playable or viewable.

from typing import List, Optional, Protocol, Set, Tuple

from ..mapgen.generator import GenerationResult
from ..tiles import BALL, tile_for

XY = Tuple[int, int]


class LevelRenderer(Protocol):
    def render(self, result: GenerationResult) -> None:
        ...


def tile_matrix(
    result: GenerationResult,
    painted: Optional[Set[XY]] = None,
    show_ball: bool = True,
    ball: Optional[XY] = None,
) -> List[List[int]]:
    """
    [row][col] tile IDs for a result: walls, ground, painted ground, and the
    ball on top of its cell (the start unless another position is given).
    """
    painted = painted or set()
    g = result.grid
    out = [
        [tile_for(g.get(x, y), (x, y) in painted) for x in range(g.width)]
        for y in range(g.height)
    ]
    if show_ball:
        bx, by = ball if ball is not None else result.start
        out[by][bx] = BALL
    return out
