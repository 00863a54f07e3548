"""Main terrain generation orchestration."""

import logging

import numpy as np
from numpy.typing import NDArray

from ..biomes import BIOME_ORDER, BiomeKind, biome_index
from ..exceptions import InvalidDimensionError
from ..grid import WorldGrid
from .classification import classify_biomes
from .config import TerrainConfig
from .fields import make_raw_fields
from .finalize import build_tiles
from .hydrology import apply_hydrology
from .smoothing import smooth_elevation

logger = logging.getLogger(__name__)


class GenerationResult:
    """Result of terrain generation with all intermediate data."""

    def __init__(
        self,
        grid: WorldGrid,
        config: TerrainConfig,
        raw_elevation: NDArray[np.float64],
        carved_elevation: NDArray[np.float64],
        elevation: NDArray[np.float64],
        moisture: NDArray[np.float64],
        river: NDArray[np.float64],
        biomes: NDArray[np.uint8],
    ):
        self.grid = grid
        self.config = config
        self.raw_elevation = raw_elevation
        self.carved_elevation = carved_elevation
        self.elevation = elevation
        self.moisture = moisture
        self.river = river
        self.biomes = biomes


def check_dimensions(width: int, height: int) -> None:
    """Reject non-positive grid dimensions.

    Raises:
        InvalidDimensionError: If width or height is <= 0.
    """
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(width, height)


def generate_terrain(
    config: TerrainConfig,
    rng: np.random.Generator | None = None,
) -> GenerationResult:
    """Generate a complete world from configuration.

    Runs raw field synthesis, hydrology, smoothing and finalization in
    that order.

    Args:
        config: Terrain generation configuration.
        rng: Random source for cosmetic color variation. Defaults to an
            unseeded generator; terrain itself never depends on it.

    Returns:
        GenerationResult with the tile grid and intermediate fields.

    Raises:
        InvalidDimensionError: If the configured size is not positive.
    """
    check_dimensions(config.width, config.height)
    if rng is None:
        rng = np.random.default_rng()

    width, height = config.width, config.height
    water_level = config.levels.water_level

    logger.info(f"Generating terrain {width}x{height} with seed {config.seed}")

    # Pass 1: Raw noise fields
    logger.info("Pass 1: Synthesizing raw fields...")
    raw = make_raw_fields(config)

    # Pass 2: Rivers and lakes
    logger.info("Pass 2: Carving rivers and lakes...")
    carved = apply_hydrology(raw, water_level, config.hydrology)
    carved_cells = int(np.sum(carved.elevation < raw.elevation))
    logger.debug(f"Hydrology lowered {carved_cells:,} cells")

    # Pass 3: Smoothing
    logger.info("Pass 3: Smoothing land...")
    elevation = smooth_elevation(carved.elevation, water_level, config.smoothing)

    # Pass 4: Biomes and tiles
    logger.info("Pass 4: Classifying biomes and building tiles...")
    biomes = classify_biomes(elevation, carved.moisture, config.levels)
    grid = build_tiles(elevation, biomes, rng, config.color)

    _log_terrain_stats(elevation, biomes, config)

    return GenerationResult(
        grid=grid,
        config=config,
        raw_elevation=raw.elevation,
        carved_elevation=carved.elevation,
        elevation=elevation,
        moisture=carved.moisture,
        river=carved.river,
        biomes=biomes,
    )


def generate_world(
    width: int,
    height: int,
    seed: int,
    *,
    config: TerrainConfig | None = None,
    rng: np.random.Generator | None = None,
) -> WorldGrid:
    """Generate a world grid.

    Terrain is deterministic in (width, height, seed); only tile colors
    vary between calls unless a seeded `rng` is passed.

    Args:
        width: World width in tiles.
        height: World height in tiles.
        seed: World seed.
        config: Optional base configuration; size and seed are overridden.
        rng: Random source for cosmetic color variation.

    Returns:
        Fully populated WorldGrid.

    Raises:
        InvalidDimensionError: If width or height is <= 0.
    """
    check_dimensions(width, height)

    base = config or TerrainConfig()
    config = base.model_copy(update={"width": width, "height": height, "seed": seed})

    return generate_terrain(config, rng).grid


def _log_terrain_stats(
    elevation: NDArray[np.float64],
    biomes: NDArray[np.uint8],
    config: TerrainConfig,
) -> None:
    """Log terrain generation statistics."""
    total = elevation.size
    levels = config.levels

    water = int(np.sum(elevation < levels.water_level))
    mountain = int(np.sum(elevation >= levels.mountain_level))
    land = total - water - mountain

    logger.info(f"Terrain stats ({total:,} tiles):")
    logger.info(f"  water: {water:,} ({water / total:.1%})")
    logger.info(f"  land: {land:,} ({land / total:.1%})")
    logger.info(f"  mountain: {mountain:,} ({mountain / total:.1%})")

    for kind in BIOME_ORDER:
        count = int(np.sum(biomes == biome_index(kind)))
        logger.debug(f"  {kind.value}: {count:,} ({count / total:.1%})")

    walkable = sum(
        int(np.sum(biomes == biome_index(kind))) for kind in BiomeKind if kind.walkable
    )
    logger.info(f"  walkable: {walkable:,} ({walkable / total:.1%})")
