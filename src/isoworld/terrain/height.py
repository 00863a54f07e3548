"""Analytic terrain height for queries outside the generated grid."""

import math

from .config import WORLD_HEIGHT, WORLD_WIDTH


def terrain_height(
    x: float,
    y: float,
    width: int = WORLD_WIDTH,
    height: int = WORLD_HEIGHT,
) -> float:
    """Closed-form height: a corner-to-corner slope, ripples and a central peak.

    Does not consult the noise engine or any generated grid.

    Args:
        x: World x coordinate in tiles.
        y: World y coordinate in tiles.
        width: World width used to normalize x.
        height: World height used to normalize y.

    Returns:
        Terrain height at (x, y).
    """
    nx = x / width
    ny = y / height

    result = (nx + ny) * 50.0
    result += 10.0 * math.sin(nx * 10.0) * math.cos(ny * 10.0)

    distance = math.hypot(nx - 0.5, ny - 0.5)
    result += 40.0 * max(0.0, 1.0 - distance * 4.0)

    return result
