# Canonical tile IDs used by tile-based renderers

GROUND = 10
PAINTED = 180
WALL = 200
BALL = 60


def tile_for(ground: bool, painted: bool = False) -> int:
    if not ground:
        return WALL
    return PAINTED if painted else GROUND


def fallback_color(tile_id: int) -> tuple:
    """RGBA used when no tile image exists on disk."""
    if tile_id == BALL:
        return (255, 220, 0, 255)
    if tile_id >= WALL:
        return (80, 80, 80, 255)
    if tile_id >= PAINTED:
        return (230, 90, 160, 255)
    if tile_id >= GROUND:
        return (220, 220, 220, 255)
    return (0, 0, 0, 255)
