# src/tilepaint/engine/state.py
# PaintSession: one attempt at one level. Tracks the ball, painted cells and
# moves, and scores the clear. No timing, input or presentation here.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Set, Tuple

from ..config import DEFAULT_SESSION, SessionSettings
from ..errors import DegenerateLayout
from ..mapgen.generator import GenerationResult
from .ball import can_move, slide

XY = Tuple[int, int]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveOutcome:
    moved: bool
    newly_painted: int
    completed: bool


def star_rating(moves: int, settings: SessionSettings = DEFAULT_SESSION) -> int:
    """3 stars within moves_for_perfect, 2 within good_factor times that, else 1."""
    if moves <= settings.moves_for_perfect:
        return 3
    if moves <= settings.moves_for_perfect * settings.good_factor:
        return 2
    return 1


class PaintSession:
    def __init__(self, result: GenerationResult, settings: Optional[SessionSettings] = None) -> None:
        if not result.is_valid:
            raise DegenerateLayout(
                f"start {result.start} is not ground; regenerate before starting a session"
            )
        self.result = result
        self.settings = settings or DEFAULT_SESSION
        self.ball: XY = result.start
        self.moves = 0
        # The cell under the ball is painted from the start.
        self.painted: Set[XY] = {result.start}
        self.total = result.grid.ground_count()

    @property
    def grid(self):
        return self.result.grid

    @property
    def remaining(self) -> int:
        return self.total - len(self.painted)

    @property
    def is_complete(self) -> bool:
        return self.remaining == 0

    def can_move(self, direction: str) -> bool:
        return can_move(self.grid, self.ball, direction)

    def move(self, direction: str) -> MoveOutcome:
        # A cleared level ignores further input.
        if self.is_complete:
            return MoveOutcome(moved=False, newly_painted=0, completed=True)
        end, path = slide(self.grid, self.ball, direction)
        if end == self.ball:
            return MoveOutcome(moved=False, newly_painted=0, completed=False)
        before = len(self.painted)
        self.painted.update(path)
        self.ball = end
        self.moves += 1
        done = self.is_complete
        if done:
            logger.debug("level cleared in %d moves (%d stars)", self.moves, self.star_rating())
        return MoveOutcome(moved=True, newly_painted=len(self.painted) - before, completed=done)

    def star_rating(self) -> int:
        return star_rating(self.moves, self.settings)
