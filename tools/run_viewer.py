#!/usr/bin/env python3
# Minimal interactive viewer for generated levels (no gameplay).
# - Mode cycle (cross -> spiral -> random -> maze -> fixed): G
# - Next / previous seed: RIGHT / LEFT
# - Grow / shrink the grid: UP / DOWN
# - Toggle ball marker: B
# - 60 Hz fixed loop

import argparse, logging
import pygame

from tilepaint.config import GenerationOptions, RenderSettings
from tilepaint.errors import DegenerateLayout
from tilepaint.engine.levels import build_level
from tilepaint.mapgen.fixed import BUILTIN_PATTERNS, get_pattern
from tilepaint.mapgen.generator import Mode
from tilepaint.render.surface import SurfaceRenderer
from tilepaint.render.tileset import Tileset

MODES = [m.value for m in Mode]
MAX_DIM = 40


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--mode", choices=MODES, default="random")
    ap.add_argument("--size", type=int, default=12, help="Grid width and height")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--density", type=float, default=0.2)
    ap.add_argument("--pattern", choices=sorted(BUILTIN_PATTERNS), default="easy_cross")
    ap.add_argument("--tile", type=int, default=24, help="Tile size in pixels")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((MAX_DIM * args.tile, MAX_DIM * args.tile))

    mode, size, seed, show_ball = args.mode, args.size, args.seed, True
    tiles = Tileset(args.tile)

    def rebuild():
        settings = RenderSettings(tile_size=args.tile, show_ball=show_ball)
        renderer = SurfaceRenderer(settings=settings, tileset=tiles)
        opts = GenerationOptions(wall_density=args.density, random_seed=seed)
        pattern = get_pattern(args.pattern) if mode == "fixed" else None
        dims = (None, None) if pattern else (size, size)
        try:
            result = build_level(renderer, mode, *dims, opts, pattern=pattern, retries=3)
        except DegenerateLayout as e:
            print(f"[viewer] {e}")
            return None, None
        return renderer.surface, result

    surface, result = rebuild()
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                    continue
                if ev.key == pygame.K_RIGHT:
                    seed += 1
                elif ev.key == pygame.K_LEFT:
                    seed = max(0, seed - 1)
                elif ev.key == pygame.K_UP:
                    size = min(MAX_DIM, size + 1)
                elif ev.key == pygame.K_DOWN:
                    size = max(1, size - 1)
                elif ev.key == pygame.K_g:
                    mode = MODES[(MODES.index(mode) + 1) % len(MODES)]
                elif ev.key == pygame.K_b:
                    show_ball = not show_ball
                else:
                    continue
                surface, result = rebuild()

        screen.fill((0, 0, 0))
        if surface is not None:
            screen.blit(surface, (0, 0))
        caption = f"tilepaint viewer - {mode} {size}x{size} seed {seed}"
        if result is not None and result.seed is None:
            caption = f"tilepaint viewer - {mode} {result.width}x{result.height}"
        pygame.display.set_caption(caption)
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
