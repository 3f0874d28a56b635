# tests/test_connectivity.py
from tilepaint.grid import Grid
from tilepaint.mapgen.carve import random_connected_grid, random_fill
from tilepaint.mapgen.connectivity import (
    coverage,
    coverage_target,
    is_connected,
    reachable_from,
    repair_connectivity,
)
from tilepaint.rng import PMRandom


def test_reachable_from_wall_is_empty():
    g = Grid.from_rows(["#.", ".."])
    assert reachable_from(g, (0, 0)) == set()
    assert reachable_from(g, (1, 1)) == {(1, 0), (0, 1), (1, 1)}


def test_is_connected_detects_islands():
    assert is_connected(Grid.from_rows(["..#", "#.#", "#.."]))
    assert not is_connected(Grid.from_rows(["..#", "###", "#.."]))
    assert is_connected(Grid.empty(3, 3))


def test_coverage_fraction():
    g = Grid.from_rows(["..", "##"])
    assert coverage(g, (0, 0)) == 0.5
    assert coverage_target(Grid.empty(10, 10), 0.6) == 60
    assert coverage_target(Grid.empty(3, 3), 0.6) == 5


def test_full_probability_meets_target_from_all_walls():
    for seed in range(10):
        g = Grid.empty(10, 10)
        report = repair_connectivity(g, (5, 5), PMRandom.from_seed(seed),
                                     min_coverage=0.6, repair_probability=1.0)
        n = g.ground_count()
        assert report.target_met
        # one pop opens at most 3 new cells once past the seed
        assert 60 <= n <= 63, f"seed {seed}: {n} ground cells"
        assert report.reachable == n
        assert report.walls_opened == n - 1  # the seed is forced, not rolled
        assert len(reachable_from(g, (5, 5))) == n


def test_zero_probability_terminates_with_seed_only():
    g = Grid.empty(8, 8)
    report = repair_connectivity(g, (4, 4), PMRandom.from_seed(1),
                                 min_coverage=0.9, repair_probability=0.0)
    assert g.ground_cells() == [(4, 4)]
    assert report.reachable == 1 and not report.target_met


def test_repair_only_opens_walls():
    rng = PMRandom.from_seed(77)
    g = random_fill(12, 9, rng, 0.45)
    before = list(g.buf)
    repair_connectivity(g, g.center, rng)
    for was, now in zip(before, g.buf):
        assert now or not was, "repair turned ground into wall"


def test_repair_is_idempotent_once_target_met():
    g = Grid.empty(9, 9)
    repair_connectivity(g, (4, 4), PMRandom.from_seed(3), repair_probability=1.0)
    snapshot = list(g.buf)
    report = repair_connectivity(g, (4, 4), PMRandom.from_seed(999), repair_probability=0.2)
    assert g.buf == snapshot
    assert report.walls_opened == 0 and report.target_met


def test_open_grid_is_left_alone():
    g = Grid.empty(6, 6, fill=True)
    report = repair_connectivity(g, (3, 3), PMRandom.from_seed(8))
    assert g.ground_count() == 36
    assert report.reachable == 36 and report.walls_opened == 0


def test_zero_coverage_only_forces_seed():
    g = Grid.empty(5, 5)
    repair_connectivity(g, (2, 2), PMRandom.from_seed(4), min_coverage=0.0)
    assert g.ground_cells() == [(2, 2)]


def test_higher_probability_reaches_more_on_average():
    def total(p):
        out = 0
        for seed in range(30):
            g = Grid.empty(10, 10)
            out += repair_connectivity(g, (5, 5), PMRandom.from_seed(seed),
                                       repair_probability=p).reachable
        return out

    low, mid, high = total(0.3), total(0.7), total(1.0)
    assert low <= mid <= high


def test_random_connected_reports_reachable_region():
    for seed in range(15):
        g, report = random_connected_grid(12, 10, PMRandom.from_seed(seed), wall_density=0.4)
        region = reachable_from(g, g.center)
        assert g.get(*g.center)
        assert len(region) >= report.reachable


def test_existing_ground_counts_toward_target():
    # 10x10, all ground except row 0: 90 cells already reachable, target 60
    for seed in range(50):
        g = Grid.empty(10, 10, fill=True)
        for x in range(10):
            g.set(x, 0, False)
        report = repair_connectivity(g, (5, 5), PMRandom.from_seed(seed))
        assert report.walls_opened == 0, f"seed {seed} opened {report.walls_opened} walls"
        assert report.reachable == 90
        assert g.ground_count() == 90


def test_each_cell_enters_frontier_once():
    # sparse noise leaves plenty of ground to revisit; opened walls can never
    # exceed the walls that existed, and the walk always ends
    for seed in range(20):
        rng = PMRandom.from_seed(seed)
        g = random_fill(15, 15, rng, 0.5)
        walls = g.size - g.ground_count()
        report = repair_connectivity(g, g.center, rng, min_coverage=1.0, repair_probability=0.5)
        assert report.walls_opened <= walls
        assert report.reachable <= g.size
