# tests/test_maze.py
# Carved passages must form a spanning tree over the ground cells.
import pytest

from tilepaint.mapgen.carve import MAZE_START, maze_grid
from tilepaint.mapgen.connectivity import reachable_from
from tilepaint.rng import PMRandom


def count_edges(g):
    edges = 0
    for x, y, ground in g.cells():
        if not ground:
            continue
        if g.is_ground(x + 1, y):
            edges += 1
        if g.is_ground(x, y + 1):
            edges += 1
    return edges


@pytest.mark.parametrize("w,h", [(1, 1), (1, 5), (5, 1), (2, 2), (7, 7), (10, 6), (15, 11)])
@pytest.mark.parametrize("seed", [1, 42, 999])
def test_maze_is_spanning_tree(w, h, seed):
    g = maze_grid(w, h, PMRandom.from_seed(seed))
    n = g.ground_count()
    assert g.get(*MAZE_START)
    assert len(reachable_from(g, MAZE_START)) == n, "maze is not connected"
    assert count_edges(g) == n - 1, "maze has a cycle"


def test_corridor_maze_is_fully_open():
    g = maze_grid(1, 6, PMRandom.from_seed(5))
    assert g.ground_count() == 6


def test_maze_depends_on_seed_only():
    a = maze_grid(11, 11, PMRandom.from_seed(123))
    b = maze_grid(11, 11, PMRandom.from_seed(123))
    assert a == b
    layouts = {tuple(maze_grid(11, 11, PMRandom.from_seed(s)).buf) for s in range(10)}
    assert len(layouts) > 1
