"""Biome classification from elevation and moisture."""

import numpy as np
from numpy.typing import NDArray

from ..biomes import BiomeKind, biome_index
from .config import LevelsConfig


def classify_biome(
    elevation: float,
    moisture: float,
    levels: LevelsConfig | None = None,
) -> BiomeKind:
    """Classify a single cell.

    Elevation picks the band; moisture only decides forest cover in the
    plains and hills bands.

    Args:
        elevation: Cell elevation.
        moisture: Cell moisture.
        levels: Elevation bands and moisture tiebreaks. Defaults to
            the standard levels.

    Returns:
        The cell's BiomeKind.
    """
    if levels is None:
        levels = LevelsConfig()
    if elevation < levels.deep_water_level:
        return BiomeKind.DEEP_WATER
    if elevation < levels.water_level:
        return BiomeKind.SHALLOW_WATER
    if elevation < levels.beach_level:
        return BiomeKind.BEACH
    if elevation < levels.plains_level:
        if moisture >= levels.plains_forest_moisture:
            return BiomeKind.FOREST
        return BiomeKind.PLAINS
    if elevation < levels.hills_level:
        if moisture >= levels.hills_forest_moisture:
            return BiomeKind.FOREST
        return BiomeKind.HILLS
    if elevation < levels.mountain_level:
        return BiomeKind.MOUNTAINS
    return BiomeKind.SNOW_CAPS


def classify_biomes(
    elevation: NDArray[np.float64],
    moisture: NDArray[np.float64],
    levels: LevelsConfig | None = None,
) -> NDArray[np.uint8]:
    """Classify every cell of a grid.

    Vectorized counterpart of `classify_biome`; conditions are checked
    in the same order, first match wins.

    Args:
        elevation: Elevation field.
        moisture: Moisture field, same shape.
        levels: Elevation bands and moisture tiebreaks. Defaults to
            the standard levels.

    Returns:
        Array of biome indices (see `biome_index`) as uint8.
    """
    if levels is None:
        levels = LevelsConfig()
    conditions = [
        elevation < levels.deep_water_level,
        elevation < levels.water_level,
        elevation < levels.beach_level,
        (elevation < levels.plains_level) & (moisture >= levels.plains_forest_moisture),
        elevation < levels.plains_level,
        (elevation < levels.hills_level) & (moisture >= levels.hills_forest_moisture),
        elevation < levels.hills_level,
        elevation < levels.mountain_level,
    ]
    choices = [
        biome_index(BiomeKind.DEEP_WATER),
        biome_index(BiomeKind.SHALLOW_WATER),
        biome_index(BiomeKind.BEACH),
        biome_index(BiomeKind.FOREST),
        biome_index(BiomeKind.PLAINS),
        biome_index(BiomeKind.FOREST),
        biome_index(BiomeKind.HILLS),
        biome_index(BiomeKind.MOUNTAINS),
    ]
    return np.select(
        conditions, choices, default=biome_index(BiomeKind.SNOW_CAPS)
    ).astype(np.uint8)


def biome_elevation_band(
    kind: BiomeKind,
    levels: LevelsConfig | None = None,
) -> tuple[float, float]:
    """Half-open elevation range [low, high) a biome can occupy."""
    if levels is None:
        levels = LevelsConfig()
    bands = {
        BiomeKind.DEEP_WATER: (-np.inf, levels.deep_water_level),
        BiomeKind.SHALLOW_WATER: (levels.deep_water_level, levels.water_level),
        BiomeKind.BEACH: (levels.water_level, levels.beach_level),
        BiomeKind.PLAINS: (levels.beach_level, levels.plains_level),
        BiomeKind.FOREST: (levels.beach_level, levels.hills_level),
        BiomeKind.HILLS: (levels.plains_level, levels.hills_level),
        BiomeKind.MOUNTAINS: (levels.hills_level, levels.mountain_level),
        BiomeKind.SNOW_CAPS: (levels.mountain_level, np.inf),
    }
    return bands[kind]


