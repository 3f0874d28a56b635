# src/tilepaint/render/tileset.py
from __future__ import annotations
import os
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import BALL, GROUND, fallback_color

ASSET_DIR = os.path.join("assets", "images")
TILES_DIR = os.path.join(ASSET_DIR, "tiles")


def _path_candidates(tile_id: int) -> Tuple[str, ...]:
    return (
        os.path.join(TILES_DIR, f"{tile_id}.png"),
        os.path.join(TILES_DIR, f"tile_{tile_id}.png"),
        os.path.join(ASSET_DIR, f"{tile_id}.png"),
        os.path.join(ASSET_DIR, f"tile_{tile_id}.png"),
    )


class Tileset:
    """
    Tiny cached loader:
      - Accepts 200.png or tile_200.png
      - Looks in assets/images/tiles/ and assets/images/
      - Falls back to flat colors (the ball is a disc on ground color)
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, tile_id: int) -> pygame.Surface:
        for p in _path_candidates(tile_id):
            if os.path.exists(p):
                img = pygame.image.load(p)
                # convert_alpha needs a display; skip it in headless use
                if pygame.display.get_init() and pygame.display.get_surface() is not None:
                    return img.convert_alpha()
                return img
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        if tile_id == BALL:
            img.fill(fallback_color(GROUND))
            r = self.tile_size // 2
            pygame.draw.circle(img, fallback_color(BALL), (r, r), max(1, r - self.tile_size // 6))
        else:
            img.fill(fallback_color(tile_id))
        return img

    @lru_cache(maxsize=256)
    def view(self, tile_id: int, size: int) -> pygame.Surface:
        base = self.get(tile_id)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))
