import pytest

from tilepaint.errors import InvalidDimension, InvalidOption, OutOfBounds
from tilepaint.grid import FrozenGrid, Grid


def test_new_grid_is_dense_and_all_wall():
    g = Grid.empty(4, 3)
    assert len(g.buf) == 12
    assert all(not g.get(x, y) for y in range(3) for x in range(4))
    assert g.ground_count() == 0


@pytest.mark.parametrize("w,h", [(0, 3), (3, 0), (-1, 5), (5, -2)])
def test_bad_dimensions_rejected(w, h):
    with pytest.raises(InvalidDimension):
        Grid.empty(w, h)


def test_out_of_bounds_access():
    g = Grid.empty(3, 2)
    for x, y in [(-1, 0), (3, 0), (0, 2), (0, -1)]:
        with pytest.raises(OutOfBounds):
            g.get(x, y)
        with pytest.raises(OutOfBounds):
            g.set(x, y, True)
    # OutOfBounds is still an IndexError for generic callers
    with pytest.raises(IndexError):
        g.get(5, 5)


def test_set_get_and_is_ground():
    g = Grid.empty(3, 3)
    g.set(1, 2, True)
    assert g.get(1, 2) is True
    assert g.is_ground(1, 2)
    # outside the grid behaves like wall, no exception
    assert g.is_ground(-1, 0) is False
    assert g.ground_cells() == [(1, 2)]


def test_neighbors4_clipped_at_corner():
    g = Grid.empty(3, 3)
    assert sorted(g.neighbors4(0, 0)) == [(0, 1), (1, 0)]
    assert len(list(g.neighbors4(1, 1))) == 4


def test_rows_roundtrip_and_validation():
    rows = ["#.#", "...", "#.#"]
    g = Grid.from_rows(rows)
    assert (g.width, g.height) == (3, 3)
    assert g.as_rows() == rows
    assert g.center == (1, 1)
    with pytest.raises(InvalidOption):
        Grid.from_rows(["#.", "#.#"])
    with pytest.raises(InvalidOption):
        Grid.from_rows(["#x#"])


def test_freeze_is_read_only_snapshot():
    g = Grid.from_rows(["..", "##"])
    frozen = g.freeze()
    assert isinstance(frozen, FrozenGrid)
    with pytest.raises(TypeError):
        frozen.set(0, 0, False)
    # later edits to the source do not leak into the snapshot
    g.set(0, 1, True)
    assert frozen.get(0, 1) is False
    # copy() hands back a mutable grid
    thawed = frozen.copy()
    thawed.set(0, 1, True)
    assert thawed.get(0, 1) is True
    assert frozen.freeze() is frozen
