# src/tilepaint/render/image.py
# Render finished levels to PNGs using Pillow.
# Works with tile filenames like "200.png" or "tile_200.png".

import os
from functools import lru_cache
from typing import Optional, Set, Tuple

from PIL import Image, ImageDraw

from ..config import DEFAULT_RENDER, RenderSettings
from ..engine.state import PaintSession
from ..mapgen.generator import GenerationResult
from ..tiles import BALL, GROUND, fallback_color
from .base import tile_matrix

XY = Tuple[int, int]

ASSET_DIR = os.path.join("assets", "images")


def _path_candidates(asset_dir: str, tile_id: int) -> Tuple[str, ...]:
    return (
        os.path.join(asset_dir, "tiles", f"{tile_id}.png"),
        os.path.join(asset_dir, "tiles", f"tile_{tile_id}.png"),
        os.path.join(asset_dir, f"{tile_id}.png"),
        os.path.join(asset_dir, f"tile_{tile_id}.png"),
    )


@lru_cache(maxsize=256)
def tile_image(tile_id: int, tile_size: int, asset_dir: str = ASSET_DIR) -> Image.Image:
    for p in _path_candidates(asset_dir, tile_id):
        if os.path.exists(p):
            img = Image.open(p).convert("RGBA")
            if img.size != (tile_size, tile_size):
                img = img.resize((tile_size, tile_size), Image.NEAREST)
            return img
    # Fallback: flat colored tile; the ball is drawn as a disc on ground color
    if tile_id == BALL and tile_size >= 4:
        img = Image.new("RGBA", (tile_size, tile_size), color=fallback_color(GROUND))
        draw = ImageDraw.Draw(img)
        pad = tile_size // 6
        draw.ellipse((pad, pad, tile_size - 1 - pad, tile_size - 1 - pad), fill=fallback_color(BALL))
        return img
    return Image.new("RGBA", (tile_size, tile_size), color=fallback_color(tile_id))


def render_image(
    result: GenerationResult,
    settings: RenderSettings = DEFAULT_RENDER,
    painted: Optional[Set[XY]] = None,
    asset_dir: str = ASSET_DIR,
    ball: Optional[XY] = None,
) -> Image.Image:
    tile, margin = settings.tile_size, settings.margin
    matrix = tile_matrix(result, painted=painted, show_ball=settings.show_ball, ball=ball)
    w = result.width * tile + 2 * margin
    h = result.height * tile + 2 * margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    for y, row in enumerate(matrix):
        for x, tid in enumerate(row):
            img = tile_image(tid, tile, asset_dir)
            x0 = margin + x * tile
            y0 = margin + y * tile
            # Use a 4-item box so Pillow never complains about region size
            canvas.paste(img, (x0, y0, x0 + tile, y0 + tile), img)
    return canvas


class ImageRenderer:
    """Level renderer that writes one PNG per rendered result."""

    def __init__(self, out_png: str, settings: RenderSettings = DEFAULT_RENDER, asset_dir: str = ASSET_DIR):
        self.out_png = out_png
        self.settings = settings
        self.asset_dir = asset_dir
        self.last_image: Optional[Image.Image] = None

    def render(self, result: GenerationResult) -> None:
        self._save(render_image(result, self.settings, asset_dir=self.asset_dir))

    def render_session(self, session: PaintSession) -> None:
        self._save(render_image(session.result, self.settings, session.painted,
                                self.asset_dir, ball=session.ball))

    def _save(self, canvas: Image.Image) -> None:
        out_dir = os.path.dirname(self.out_png)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        canvas.save(self.out_png)
        self.last_image = canvas
