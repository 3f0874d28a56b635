import sys
from typing import Dict, List, Optional, Set, TextIO, Tuple

from ..engine.state import PaintSession
from ..mapgen.generator import GenerationResult
from ..tiles import BALL, GROUND, PAINTED, WALL
from .base import tile_matrix

XY = Tuple[int, int]

GLYPHS: Dict[int, str] = {
    WALL: "#",
    GROUND: ".",
    PAINTED: "o",
    BALL: "B",
}


def render_lines(
    result: GenerationResult,
    show_ball: bool = True,
    painted: Optional[Set[XY]] = None,
    ball: Optional[XY] = None,
) -> List[str]:
    matrix = tile_matrix(result, painted=painted, show_ball=show_ball, ball=ball)
    return ["".join(GLYPHS[t] for t in row) for row in matrix]


class TextRenderer:
    """Write a level as ASCII art, one row per line, to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, show_ball: bool = True, header: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.show_ball = show_ball
        self.header = header

    def render(self, result: GenerationResult) -> None:
        if self.header:
            seed = "-" if result.seed is None else result.seed
            flag = "" if result.is_valid else "  [INVALID: no ground for the ball]"
            print(f"{result.mode.value} {result.width}x{result.height} seed={seed} "
                  f"start={result.start[0]},{result.start[1]}{flag}", file=self.stream)
        for line in render_lines(result, show_ball=self.show_ball):
            print(line, file=self.stream)

    def render_session(self, session: PaintSession) -> None:
        if self.header:
            print(f"moves={session.moves} painted={len(session.painted)}/{session.total}"
                  f"{'  [CLEAR]' if session.is_complete else ''}", file=self.stream)
        for line in render_lines(session.result, self.show_ball, session.painted, session.ball):
            print(line, file=self.stream)
