from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidDimension, InvalidOption, OutOfBounds

XY = Tuple[int, int]

# 4-neighborhood offsets: up, down, left, right (screen coordinates, y grows down)
NEIGHBORS4: Tuple[XY, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))

GROUND_CHAR = "."
WALL_CHAR = "#"


@dataclass
class Grid:
    """
    Dense ground/wall field backed by a flat row-major buffer.
      - True  = ground (paintable, traversable)
      - False = wall
    Every in-range cell always holds a value; the buffer is allocated up front.
    """
    width: int
    height: int
    buf: Optional[List[bool]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.width, int) or self.width <= 0:
            raise InvalidDimension(f"width must be a positive integer, got {self.width!r}")
        if not isinstance(self.height, int) or self.height <= 0:
            raise InvalidDimension(f"height must be a positive integer, got {self.height!r}")
        if self.buf is None:
            self.buf = [False] * (self.width * self.height)
        elif len(self.buf) != self.width * self.height:
            raise InvalidDimension(
                f"buffer holds {len(self.buf)} cells, expected {self.width * self.height}"
            )

    @classmethod
    def empty(cls, width: int, height: int, fill: bool = False) -> "Grid":
        # Validate before allocating so a bad size never builds a buffer.
        grid = cls(width=width, height=height)
        if fill:
            grid.buf = [True] * (width * height)
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[str], ground: str = GROUND_CHAR, wall: str = WALL_CHAR) -> "Grid":
        """Build a grid from ASCII rows; row 0 is y == 0."""
        if not rows:
            raise InvalidDimension("at least one row is required")
        width = len(rows[0])
        buf: List[bool] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidOption(f"row {y} has {len(row)} columns, expected {width}")
            for ch in row:
                if ch == ground:
                    buf.append(True)
                elif ch == wall:
                    buf.append(False)
                else:
                    raise InvalidOption(f"unexpected character {ch!r} in row {y}")
        return cls(width=width, height=len(rows), buf=buf)

    # ---- addressing ----
    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> XY:
        return (self.width // 2, self.height // 2)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBounds(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        return y * self.width + x

    def get(self, x: int, y: int) -> bool:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: bool) -> None:
        self.buf[self.idx(x, y)] = bool(v)

    def is_ground(self, x: int, y: int) -> bool:
        # Outside the grid behaves like solid wall.
        return self.in_bounds(x, y) and self.buf[y * self.width + x]

    def neighbors4(self, x: int, y: int) -> Iterator[XY]:
        for dx, dy in NEIGHBORS4:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield (nx, ny)

    # ---- queries ----
    def ground_cells(self) -> List[XY]:
        return [(x, y) for y in range(self.height) for x in range(self.width) if self.buf[y * self.width + x]]

    def ground_count(self) -> int:
        return sum(1 for v in self.buf if v)

    def cells(self) -> Iterator[Tuple[int, int, bool]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.buf[y * self.width + x]

    # ---- snapshots / conversion ----
    def copy(self) -> "Grid":
        return Grid(width=self.width, height=self.height, buf=list(self.buf))

    def freeze(self) -> "FrozenGrid":
        return FrozenGrid(width=self.width, height=self.height, buf=tuple(self.buf))

    def as_rows(self, ground: str = GROUND_CHAR, wall: str = WALL_CHAR) -> List[str]:
        out = []
        for y in range(self.height):
            row = self.buf[y * self.width:(y + 1) * self.width]
            out.append("".join(ground if v else wall for v in row))
        return out


class FrozenGrid(Grid):
    """Read-only snapshot handed to renderers once generation has finished."""

    def set(self, x: int, y: int, v: bool) -> None:
        raise TypeError("FrozenGrid is read-only; call copy() to get a mutable grid")

    def freeze(self) -> "FrozenGrid":
        return self
