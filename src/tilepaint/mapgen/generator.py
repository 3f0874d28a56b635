# src/tilepaint/mapgen/generator.py
# Single entry point for level generation: pick a layout, repair it if it is
# random, find the ball start, and return a frozen result.

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from ..config import DEFAULT_OPTIONS, GenerationOptions
from ..errors import InvalidDimension, InvalidOption
from ..grid import FrozenGrid
from ..rng import PMRandom, fresh_seed
from .carve import maze_grid, random_connected_grid
from .fixed import LevelPattern
from .patterns import cross_grid, spiral_grid
from .placement import find_start_position

XY = Tuple[int, int]

logger = logging.getLogger(__name__)

_MODE_ALIASES = {"random_connected": "random", "randomconnected": "random"}


class Mode(str, Enum):
    CROSS = "cross"
    SPIRAL = "spiral"
    RANDOM_CONNECTED = "random"
    MAZE = "maze"
    FIXED = "fixed"

    @classmethod
    def parse(cls, value: Union["Mode", str]) -> "Mode":
        if isinstance(value, cls):
            return value
        key = str(value).lower()
        try:
            return cls(_MODE_ALIASES.get(key, key))
        except ValueError:
            known = ", ".join(m.value for m in cls)
            raise InvalidOption(f"unknown mode {value!r} (expected one of: {known})") from None

    @property
    def uses_rng(self) -> bool:
        return self in (Mode.RANDOM_CONNECTED, Mode.MAZE)


@dataclass(frozen=True)
class GenerationResult:
    grid: FrozenGrid
    start: XY
    mode: Mode
    # Seed that produced the layout; None for deterministic modes.
    seed: Optional[int] = None

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def is_valid(self) -> bool:
        # A start on a wall means no ground existed (or a pattern is broken).
        return self.grid.get(*self.start)


def _check_dimensions(width, height) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidDimension(f"{name} must be a positive integer, got {value!r}")


def _from_pattern(pattern: Optional[LevelPattern], width, height) -> GenerationResult:
    if pattern is None:
        raise InvalidOption("fixed mode requires a pattern")
    if width is not None and width != pattern.width:
        raise InvalidOption(f"pattern {pattern.name!r} is {pattern.width} wide, not {width}")
    if height is not None and height != pattern.height:
        raise InvalidOption(f"pattern {pattern.name!r} is {pattern.height} high, not {height}")
    return GenerationResult(grid=pattern.grid, start=pattern.start, mode=Mode.FIXED)


def generate(
    mode: Union[Mode, str],
    width: Optional[int] = None,
    height: Optional[int] = None,
    options: Optional[GenerationOptions] = None,
    *,
    pattern: Optional[LevelPattern] = None,
) -> GenerationResult:
    """
    Build one level.
      - cross / spiral: deterministic, no RNG consumed
      - random: noise fill at wall_density, then coverage repair from the center
      - maze: backtracking carve from (0, 0)
      - fixed: return pattern's grid and start unchanged
    Bad dimensions and options are rejected before any work starts. The
    result's is_valid is False when no ground cell could hold the ball;
    retrying is left to the caller.
    """
    mode = Mode.parse(mode)
    if mode is Mode.FIXED:
        result = _from_pattern(pattern, width, height)
        logger.debug("fixed pattern %r passed through", pattern.name)
        return result

    if pattern is not None:
        raise InvalidOption(f"pattern {pattern.name!r} only applies to fixed mode, not {mode.value}")
    _check_dimensions(width, height)
    opts = (options or DEFAULT_OPTIONS).validate()

    seed = None
    rng = None
    if mode.uses_rng:
        seed = opts.random_seed if opts.random_seed is not None else fresh_seed()
        rng = PMRandom.from_seed(seed)

    if mode is Mode.CROSS:
        grid = cross_grid(width, height)
    elif mode is Mode.SPIRAL:
        grid = spiral_grid(width, height)
    elif mode is Mode.MAZE:
        grid = maze_grid(width, height, rng)
    else:
        grid, report = random_connected_grid(
            width, height, rng,
            wall_density=opts.wall_density,
            min_coverage=opts.min_coverage,
            repair_probability=opts.repair_probability,
        )
        if not report.target_met:
            logger.info("coverage target missed (%d/%d) for seed %s", report.reachable, report.target, seed)

    start = find_start_position(grid)
    result = GenerationResult(grid=grid.freeze(), start=start, mode=mode, seed=seed)
    logger.debug("generated %s %dx%d seed=%s start=%s ground=%d valid=%s",
                 mode.value, width, height, seed, start, grid.ground_count(), result.is_valid)
    return result
