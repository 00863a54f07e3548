"""Raw field synthesis: elevation, moisture and river noise per cell."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import ElevationConfig, NoiseLayerConfig, TerrainConfig
from .noise import layered_noise


@dataclass
class TerrainFields:
    """Per-cell terrain attributes, each shaped (height, width).

    Mutable working state of the synthesizer; never exposed in the
    finished world.
    """

    elevation: NDArray[np.float64]
    moisture: NDArray[np.float64]
    river: NDArray[np.float64]


def normalized_coordinates(
    width: int, height: int
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Grid coordinates divided by grid size, shaped (height, width).

    Returns:
        Tuple of (nx, ny) arrays with values in [0, 1).
    """
    nx = np.arange(width, dtype=np.float64) / width
    ny = np.arange(height, dtype=np.float64) / height
    return np.meshgrid(nx, ny)


def sample_layer(
    nx: NDArray[np.float64],
    ny: NDArray[np.float64],
    layer: NoiseLayerConfig,
    seed: int,
    legacy_gradient: bool = False,
) -> NDArray[np.float64]:
    """Sample one layered-noise field at normalized coordinates."""
    return np.asarray(
        layered_noise(
            nx * layer.coordinate_scale,
            ny * layer.coordinate_scale,
            layer.octaves,
            layer.persistence,
            layer.frequency,
            seed,
            legacy_gradient,
        )
    )


def ridge(noise: ArrayLike, exponent: float = 3.0) -> NDArray[np.float64]:
    """Fold noise around its midpoint and sharpen into narrow ridges.

    Peaks where the noise equals 0.5 and falls to 0 at -0.5 and 1.5.
    """
    folded = 1.0 - np.abs(np.asarray(noise, dtype=np.float64) * 2.0 - 1.0)
    # Folded values below zero would turn into NaN under a fractional power
    return np.sign(folded) * np.abs(folded) ** exponent


def island_factor(
    nx: ArrayLike, ny: ArrayLike, exponent: float = 0.5
) -> NDArray[np.float64]:
    """Radial falloff from the map center.

    1 at the center, 0 at distance 0.5 and beyond.
    """
    dx = np.asarray(nx, dtype=np.float64) - 0.5
    dy = np.asarray(ny, dtype=np.float64) - 0.5
    distance = np.sqrt(dx * dx + dy * dy) * 2.0
    return (1.0 - np.minimum(1.0, distance)) ** exponent


def island_attenuation(
    island: ArrayLike, config: ElevationConfig
) -> NDArray[np.float64]:
    """Elevation multiplier for an island factor.

    Never drops below `island_floor`, so map edges keep part of their
    unattenuated elevation.
    """
    return np.asarray(island) * config.island_weight + config.island_floor


def compose_elevation(
    continent: ArrayLike,
    detail: ArrayLike,
    ridges: ArrayLike,
    island: ArrayLike,
    config: ElevationConfig,
) -> NDArray[np.float64]:
    """Blend noise layers into elevation and attenuate toward the edges."""
    blend = (
        np.asarray(continent) * config.continent_weight
        + np.asarray(detail) * config.detail_weight
        + np.asarray(ridges) * config.ridge_weight
    )
    return blend * config.amplitude * island_attenuation(island, config)


def make_raw_fields(config: TerrainConfig) -> TerrainFields:
    """Synthesize raw elevation, moisture and river fields.

    Args:
        config: Terrain generation configuration.

    Returns:
        TerrainFields before any carving or smoothing.
    """
    nx, ny = normalized_coordinates(config.width, config.height)
    layers = config.layers
    legacy = config.legacy_gradient

    def sample(layer: NoiseLayerConfig) -> NDArray[np.float64]:
        return sample_layer(nx, ny, layer, config.layer_seed(layer), legacy)

    continent = sample(layers.continent)
    detail = sample(layers.detail)
    ridges = ridge(sample(layers.ridge), config.elevation.ridge_exponent)
    moisture = sample(layers.moisture)
    river = sample(layers.river)

    island = island_factor(nx, ny, config.elevation.island_exponent)
    elevation = compose_elevation(continent, detail, ridges, island, config.elevation)

    return TerrainFields(elevation=elevation, moisture=moisture, river=river)
