#!/usr/bin/env python3
import argparse, logging, sys

from tilepaint.config import GenerationOptions, RenderSettings
from tilepaint.errors import TilepaintError
from tilepaint.engine.levels import build_level
from tilepaint.engine.state import PaintSession
from tilepaint.mapgen.connectivity import reachable_from
from tilepaint.mapgen.fixed import BUILTIN_PATTERNS, get_pattern
from tilepaint.mapgen.generator import Mode, generate
from tilepaint.render.text import TextRenderer

MODES = [m.value for m in Mode]


def options_from(args):
    return GenerationOptions(
        wall_density=args.density,
        min_coverage=args.coverage,
        repair_probability=args.repair,
        random_seed=args.seed,
    )


def pattern_from(args):
    return get_pattern(args.pattern) if args.mode == "fixed" else None


def dims_from(args):
    # Patterns carry their own size.
    if args.mode == "fixed":
        return None, None
    return args.width, args.height


def cmd_show(args):
    renderer = TextRenderer(sys.stdout)
    build_level(renderer, args.mode, *dims_from(args), options_from(args),
                pattern=pattern_from(args), retries=args.retries)


def cmd_png(args):
    from tilepaint.render.image import ImageRenderer  # Pillow only needed here
    renderer = ImageRenderer(args.out, RenderSettings(tile_size=args.tile))
    result = build_level(renderer, args.mode, *dims_from(args), options_from(args),
                         pattern=pattern_from(args), retries=args.retries)
    print(f"Wrote {args.out} (seed={result.seed})")


def cmd_play(args):
    # Replay a fixed list of pushes and show what got painted.
    result = build_level(TextRenderer(sys.stdout), args.mode, *dims_from(args), options_from(args),
                         pattern=pattern_from(args), retries=args.retries)
    session = PaintSession(result)
    for direction in args.moves.split(","):
        out = session.move(direction.strip())
        if not out.moved:
            print(f"{direction}: blocked")
    print()
    TextRenderer(sys.stdout).render_session(session)
    if session.is_complete:
        print(f"cleared in {session.moves} moves, {session.star_rating()} stars")
    if args.out:
        from tilepaint.render.image import ImageRenderer  # Pillow only needed here
        ImageRenderer(args.out, RenderSettings(tile_size=args.tile)).render_session(session)
        print(f"Wrote {args.out}")


def cmd_stats(args):
    if args.mode not in ("random", "maze"):
        raise SystemExit("stats only makes sense for randomized modes (random, maze)")
    size = args.width * args.height
    fractions = []
    for seed in range(args.first_seed, args.first_seed + args.runs):
        r = generate(args.mode, args.width, args.height, options_from(args).with_seed(seed))
        fractions.append(len(reachable_from(r.grid, r.start)) / size)
    mean = sum(fractions) / len(fractions)
    met = sum(1 for f in fractions if f >= args.coverage)
    print(f"{args.mode} {args.width}x{args.height} runs={args.runs}")
    print(f"  reachable fraction: min={min(fractions):.3f} mean={mean:.3f} max={max(fractions):.3f}")
    print(f"  coverage target {args.coverage:.2f} met in {met}/{args.runs} runs")


def add_level_args(p):
    p.add_argument('--mode', choices=MODES, default='random')
    p.add_argument('--width', type=int, default=10)
    p.add_argument('--height', type=int, default=10)
    p.add_argument('--density', type=float, default=0.2, help='wall density (random mode)')
    p.add_argument('--coverage', type=float, default=0.6, help='repair coverage target')
    p.add_argument('--repair', type=float, default=0.7, help='repair wall-opening chance')
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--pattern', choices=sorted(BUILTIN_PATTERNS), default='easy_cross',
                   help='hand-authored layout (fixed mode)')
    p.add_argument('--retries', type=int, default=0, help='regenerate degenerate layouts')


def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('show')
    add_level_args(p1)
    p1.set_defaults(func=cmd_show)
    p2 = sub.add_parser('png')
    add_level_args(p2)
    p2.add_argument('--out', type=str, required=True)
    p2.add_argument('--tile', type=int, default=16)
    p2.set_defaults(func=cmd_png)
    p3 = sub.add_parser('stats')
    add_level_args(p3)
    p3.add_argument('--runs', type=int, default=50)
    p3.add_argument('--first-seed', type=int, default=0)
    p3.set_defaults(func=cmd_stats)
    p4 = sub.add_parser('play')
    add_level_args(p4)
    p4.add_argument('--moves', type=str, required=True, help='comma-separated: up,down,left,right')
    p4.add_argument('--out', type=str, default=None, help='also write a PNG of the final state')
    p4.add_argument('--tile', type=int, default=16)
    p4.set_defaults(func=cmd_play)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except TilepaintError as e:
        raise SystemExit(f"error: {e}")


if __name__ == '__main__':
    main()
