from tilepaint.tiles import BALL, GROUND, PAINTED, WALL, fallback_color, tile_for


def test_tile_for():
    assert tile_for(False) == WALL
    assert tile_for(False, painted=True) == WALL
    assert tile_for(True) == GROUND
    assert tile_for(True, painted=True) == PAINTED


def test_fallback_colors_distinct():
    colors = {fallback_color(t) for t in (BALL, GROUND, PAINTED, WALL)}
    assert len(colors) == 4
