# src/tilepaint/engine/levels.py
# Application-side level driving: a looping sequence of level recipes, and the
# build step that generates a level and hands it to a renderer.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Union

from ..config import DEFAULT_OPTIONS, GenerationOptions
from ..errors import DegenerateLayout, InvalidOption
from ..mapgen.fixed import LevelPattern, get_pattern
from ..mapgen.generator import GenerationResult, Mode, generate
from ..render.base import LevelRenderer
from ..rng import M, fresh_seed, seed_to_state

logger = logging.getLogger(__name__)


def next_seed(seed: int) -> int:
    """Deterministic successor used when an invalid layout is regenerated."""
    return seed_to_state(seed + 1)


def build_level(
    renderer: LevelRenderer,
    mode: Union[Mode, str],
    width: Optional[int] = None,
    height: Optional[int] = None,
    options: Optional[GenerationOptions] = None,
    *,
    pattern: Optional[LevelPattern] = None,
    retries: int = 0,
) -> GenerationResult:
    """
    Generate a level and hand it to renderer.render().
    Invalid layouts (no ground for the ball) are regenerated up to `retries`
    times with a new seed; randomized modes only, since the others would
    produce the same layout again. Raises DegenerateLayout if the final
    layout is still invalid; the renderer is never called with one.
    """
    opts = options or DEFAULT_OPTIONS
    result = generate(mode, width, height, opts, pattern=pattern)
    attempt = 0
    while not result.is_valid and result.mode.uses_rng and attempt < retries:
        attempt += 1
        seed = next_seed(result.seed)
        logger.info("layout %s seed=%s is degenerate; retry %d/%d with seed=%s",
                    result.mode.value, result.seed, attempt, retries, seed)
        result = generate(result.mode, width, height, opts.with_seed(seed))
    if not result.is_valid:
        raise DegenerateLayout(
            f"{result.mode.value} {result.width}x{result.height} seed={result.seed} "
            f"has no ground cell for the ball"
        )
    renderer.render(result)
    return result


@dataclass(frozen=True)
class LevelRecipe:
    mode: Mode
    width: Optional[int] = None
    height: Optional[int] = None
    options: GenerationOptions = DEFAULT_OPTIONS
    pattern_name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", Mode.parse(self.mode))
        if self.mode is Mode.FIXED and not self.pattern_name:
            raise InvalidOption("fixed recipes need a pattern_name")
        if self.mode is not Mode.FIXED and self.pattern_name:
            raise InvalidOption(f"pattern_name only applies to fixed recipes, not {self.mode.value}")

    @property
    def pattern(self) -> Optional[LevelPattern]:
        return get_pattern(self.pattern_name) if self.pattern_name else None


@dataclass
class LevelSequence:
    """
    Ordered levels that loop back to the first after the last. Randomized
    recipes without their own seed get one derived from base_seed and the
    level number, so a whole run replays from a single number.
    """
    recipes: Sequence[LevelRecipe]
    base_seed: int = field(default_factory=fresh_seed)

    def __post_init__(self) -> None:
        if not self.recipes:
            raise InvalidOption("a level sequence needs at least one recipe")
        self.recipes = list(self.recipes)

    def __len__(self) -> int:
        return len(self.recipes)

    def recipe_for(self, level: int) -> LevelRecipe:
        # Levels are 1-based; wrap around after the last one.
        if level < 1:
            raise InvalidOption(f"levels start at 1, got {level}")
        return self.recipes[(level - 1) % len(self.recipes)]

    def seed_for(self, level: int) -> int:
        return seed_to_state((self.base_seed * 31 + level) % M)

    def options_for(self, level: int) -> GenerationOptions:
        recipe = self.recipe_for(level)
        if recipe.options.random_seed is not None:
            return recipe.options
        return recipe.options.with_seed(self.seed_for(level))

    def generate(self, level: int) -> GenerationResult:
        recipe = self.recipe_for(level)
        return generate(recipe.mode, recipe.width, recipe.height,
                        self.options_for(level), pattern=recipe.pattern)

    def build(self, renderer: LevelRenderer, level: int, retries: int = 0) -> GenerationResult:
        recipe = self.recipe_for(level)
        return build_level(renderer, recipe.mode, recipe.width, recipe.height,
                           self.options_for(level), pattern=recipe.pattern, retries=retries)

    def levels(self, count: int, first: int = 1) -> Iterator[GenerationResult]:
        for level in range(first, first + count):
            yield self.generate(level)


DEFAULT_SEQUENCE: List[LevelRecipe] = [
    LevelRecipe(Mode.FIXED, pattern_name="easy_cross"),
    LevelRecipe(Mode.CROSS, 7, 7),
    LevelRecipe(Mode.SPIRAL, 9, 9),
    LevelRecipe(Mode.RANDOM_CONNECTED, 8, 8),
    LevelRecipe(Mode.MAZE, 9, 9),
    LevelRecipe(Mode.RANDOM_CONNECTED, 10, 10, GenerationOptions(wall_density=0.35)),
]
