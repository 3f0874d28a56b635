# src/tilepaint/render/surface.py
# pygame adapter for the level renderer contract. Blits a finished level onto
# any surface (a window, or an off-screen surface in tests).
from __future__ import annotations

from typing import Optional, Set, Tuple

import pygame

from ..config import DEFAULT_RENDER, RenderSettings
from ..engine.state import PaintSession
from ..mapgen.generator import GenerationResult
from .base import tile_matrix
from .tileset import Tileset

XY = Tuple[int, int]


def surface_size(result: GenerationResult, settings: RenderSettings = DEFAULT_RENDER) -> Tuple[int, int]:
    t, m = settings.tile_size, settings.margin
    return (result.width * t + 2 * m, result.height * t + 2 * m)


class SurfaceRenderer:
    def __init__(
        self,
        surface: Optional[pygame.Surface] = None,
        settings: RenderSettings = DEFAULT_RENDER,
        tileset: Optional[Tileset] = None,
    ):
        self.surface = surface
        self._owns_surface = surface is None
        self.settings = settings
        self.tiles = tileset or Tileset(settings.tile_size)

    def render(self, result: GenerationResult) -> None:
        self._draw(result)

    def render_session(self, session: PaintSession) -> None:
        """Draw a level in play: painted cells, and the ball where it rests now."""
        self._draw(session.result, session.painted, session.ball)

    def _draw(self, result: GenerationResult, painted: Optional[Set[XY]] = None, ball: Optional[XY] = None) -> None:
        size = surface_size(result, self.settings)
        if self._owns_surface and (self.surface is None or self.surface.get_size() != size):
            # No target given: keep an off-screen surface sized to the level.
            self.surface = pygame.Surface(size, pygame.SRCALPHA)
        tile, margin = self.settings.tile_size, self.settings.margin
        matrix = tile_matrix(result, painted=painted, show_ball=self.settings.show_ball, ball=ball)
        self.surface.fill((0, 0, 0, 0))
        for y, row in enumerate(matrix):
            for x, tid in enumerate(row):
                self.surface.blit(self.tiles.view(tid, tile), (margin + x * tile, margin + y * tile))
