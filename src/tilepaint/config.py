from dataclasses import dataclass, replace
from typing import Optional

from .errors import InvalidOption


@dataclass(frozen=True)
class GenerationOptions:
    # Fraction of cells that start as walls (random mode only).
    wall_density: float = 0.2
    # Fraction of the grid the repair pass tries to make reachable.
    min_coverage: float = 0.6
    # Chance that the repair pass opens a wall it touches.
    repair_probability: float = 0.7
    # None -> a fresh seed is drawn and recorded on the result.
    random_seed: Optional[int] = None

    def validate(self) -> "GenerationOptions":
        for name in ("wall_density", "min_coverage", "repair_probability"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidOption(f"{name} must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise InvalidOption(f"{name} must be within [0, 1], got {value!r}")
        if self.random_seed is not None and not isinstance(self.random_seed, int):
            raise InvalidOption(f"random_seed must be an integer, got {self.random_seed!r}")
        return self

    def with_seed(self, seed: Optional[int]) -> "GenerationOptions":
        return replace(self, random_seed=seed)


@dataclass(frozen=True)
class SessionSettings:
    # Moves allowed for a 3-star clear; 2 stars up to moves * good_factor.
    moves_for_perfect: int = 10
    good_factor: float = 1.5


@dataclass(frozen=True)
class RenderSettings:
    tile_size: int = 16
    margin: int = 0
    show_ball: bool = True


# Global defaults (can be swapped by launcher)
DEFAULT_OPTIONS = GenerationOptions()
DEFAULT_SESSION = SessionSettings()
DEFAULT_RENDER = RenderSettings()
