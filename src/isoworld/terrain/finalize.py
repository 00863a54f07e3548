"""Final pass: turn classified terrain into an immutable tile grid."""

import numpy as np
from numpy.typing import NDArray

from ..biomes import BIOME_ORDER, BIOME_PROPERTIES
from ..grid import Tile, WorldGrid
from ..types import Color
from .config import ColorConfig

# Per-index lookup tables, ordered like BIOME_ORDER
_BASE_COLORS = np.array(
    [BIOME_PROPERTIES[kind].base_color.as_tuple() for kind in BIOME_ORDER],
    dtype=np.int16,
)
_WALKABLE = np.array(
    [BIOME_PROPERTIES[kind].walkable for kind in BIOME_ORDER], dtype=bool
)


def truncate_elevation(elevation: NDArray[np.float64]) -> NDArray[np.int32]:
    """Cast elevation to integers, rounding toward zero."""
    return np.trunc(elevation).astype(np.int32)


def walkable_mask(biomes: NDArray[np.uint8]) -> NDArray[np.bool_]:
    """Walkability of each cell from its biome."""
    return _WALKABLE[biomes]


def jitter_colors(
    biomes: NDArray[np.uint8],
    rng: np.random.Generator,
    config: ColorConfig,
) -> NDArray[np.uint8]:
    """Biome base colors with independent per-channel variation.

    Each RGB channel gets a uniform integer offset in [-jitter, jitter],
    clamped to [0, 255]. Alpha is kept from the base color.

    Args:
        biomes: Biome index array, shape (height, width).
        rng: Random source for the variation.
        config: Color parameters.

    Returns:
        Array of shape (height, width, 4) holding RGBA values.
    """
    colors = _BASE_COLORS[biomes].copy()
    offsets = rng.integers(
        -config.jitter, config.jitter, size=biomes.shape + (3,), endpoint=True
    )
    colors[..., :3] = np.clip(colors[..., :3] + offsets, 0, 255)
    return colors.astype(np.uint8)


def build_tiles(
    elevation: NDArray[np.float64],
    biomes: NDArray[np.uint8],
    rng: np.random.Generator,
    config: ColorConfig,
) -> WorldGrid:
    """Assemble the finished world grid.

    Args:
        elevation: Smoothed elevation field.
        biomes: Biome index array from classification.
        rng: Random source for cosmetic color variation only.
        config: Color parameters.

    Returns:
        WorldGrid with one Tile per cell.
    """
    height, width = elevation.shape
    heights = truncate_elevation(elevation)
    walkable = walkable_mask(biomes)
    colors = jitter_colors(biomes, rng, config)

    rows: list[list[Tile]] = []
    for y in range(height):
        row: list[Tile] = []
        for x in range(width):
            r, g, b, a = (int(c) for c in colors[y, x])
            row.append(
                Tile(
                    x=x,
                    y=y,
                    elevation=int(heights[y, x]),
                    color=Color(r=r, g=g, b=b, a=a),
                    walkable=bool(walkable[y, x]),
                    biome=BIOME_ORDER[biomes[y, x]],
                )
            )
        rows.append(row)

    return WorldGrid.from_rows(rows)
