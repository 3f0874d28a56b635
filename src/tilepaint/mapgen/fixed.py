# src/tilepaint/mapgen/fixed.py
# Hand-authored layouts. A pattern is already a finished level: it carries its
# own start cell and skips every generator.

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..errors import InvalidOption
from ..grid import FrozenGrid, Grid, GROUND_CHAR, WALL_CHAR

XY = Tuple[int, int]

START_CHAR = "S"


@dataclass(frozen=True)
class LevelPattern:
    name: str
    grid: FrozenGrid
    start: XY

    def __post_init__(self) -> None:
        x, y = self.start
        if not self.grid.in_bounds(x, y):
            raise InvalidOption(
                f"pattern {self.name!r}: start {self.start} is outside "
                f"{self.grid.width}x{self.grid.height}"
            )

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @classmethod
    def from_rows(cls, name: str, rows: Sequence[str], start: Optional[XY] = None) -> "LevelPattern":
        """
        Parse ASCII rows: '#' wall, '.' ground, 'S' ground holding the start.
        Exactly one 'S' is required unless start is given explicitly.
        """
        marks = [(x, y) for y, row in enumerate(rows) for x, ch in enumerate(row) if ch == START_CHAR]
        if len(marks) > 1:
            raise InvalidOption(f"pattern {name!r}: more than one start marker")
        if start is None:
            if not marks:
                raise InvalidOption(f"pattern {name!r}: no start marker and no explicit start")
            start = marks[0]
        plain = [row.replace(START_CHAR, GROUND_CHAR) for row in rows]
        grid = Grid.from_rows(plain, ground=GROUND_CHAR, wall=WALL_CHAR)
        return cls(name=name, grid=grid.freeze(), start=start)

    def as_rows(self) -> List[str]:
        rows = self.grid.as_rows()
        x, y = self.start
        rows[y] = rows[y][:x] + START_CHAR + rows[y][x + 1:]
        return rows


BUILTIN_PATTERNS: Dict[str, LevelPattern] = {
    p.name: p
    for p in (
        LevelPattern.from_rows("easy_cross", [
            "##.##",
            "##.##",
            "..S..",
            "##.##",
            "##.##",
        ]),
        LevelPattern.from_rows("box", [
            "#######",
            "#S....#",
            "#.###.#",
            "#.###.#",
            "#.....#",
            "#######",
        ]),
        LevelPattern.from_rows("hook", [
            "S....#",
            "####.#",
            "#....#",
            "#.####",
            "#.....",
        ]),
    )
}


def get_pattern(name: str) -> LevelPattern:
    try:
        return BUILTIN_PATTERNS[name]
    except KeyError:
        known = ", ".join(sorted(BUILTIN_PATTERNS))
        raise InvalidOption(f"unknown pattern {name!r} (known: {known})") from None
