"""Terrain generation configuration models."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator

WORLD_WIDTH = 128
WORLD_HEIGHT = 128

WATER_LEVEL = 20.0
BEACH_LEVEL = 23.0
PLAINS_LEVEL = 35.0
HILLS_LEVEL = 50.0
MOUNTAIN_LEVEL = 70.0

CONTINENT_OCTAVES = 4
TERRAIN_OCTAVES = 6
RIVER_OCTAVES = 2
RIVER_THRESHOLD = 0.82

# Multiplier applied to the world seed before adding a layer's own seed
SEED_STRIDE = 1000


class NoiseLayerConfig(BaseModel):
    """Parameters for one layered-noise field sampled over the grid."""

    coordinate_scale: float = Field(
        default=1.0, description="Multiplier on normalized grid coordinates"
    )
    octaves: int = Field(default=4, ge=0, description="Number of octaves")
    persistence: float = Field(default=0.5, description="Amplitude decay per octave")
    frequency: float = Field(default=1.0, description="Base frequency of octave 0")
    seed: int = Field(default=0, description="Layer seed, offset by the world seed")


# Per-layer defaults; partial layer tables in a config file are merged onto these
_LAYER_DEFAULTS: dict[str, dict[str, float | int]] = {
    "continent": {
        "coordinate_scale": 0.5,
        "octaves": CONTINENT_OCTAVES,
        "persistence": 0.6,
        "frequency": 0.5,
        "seed": 1,
    },
    "detail": {
        "coordinate_scale": 5.0,
        "octaves": TERRAIN_OCTAVES,
        "persistence": 0.5,
        "frequency": 2.0,
        "seed": 2,
    },
    "ridge": {
        "coordinate_scale": 3.0,
        "octaves": 4,
        "persistence": 0.7,
        "frequency": 1.5,
        "seed": 5,
    },
    "moisture": {
        "coordinate_scale": 4.0,
        "octaves": 4,
        "persistence": 0.5,
        "frequency": 2.0,
        "seed": 3,
    },
    "river": {
        "coordinate_scale": 8.0,
        "octaves": RIVER_OCTAVES,
        "persistence": 0.7,
        "frequency": 3.0,
        "seed": 4,
    },
}


def _layer(name: str):
    return lambda: NoiseLayerConfig(**_LAYER_DEFAULTS[name])


class NoiseLayersConfig(BaseModel):
    """All noise layers that feed the raw terrain fields."""

    continent: NoiseLayerConfig = Field(
        default_factory=_layer("continent"), description="Large-scale landmass shape"
    )
    detail: NoiseLayerConfig = Field(
        default_factory=_layer("detail"), description="Fine terrain detail"
    )
    ridge: NoiseLayerConfig = Field(
        default_factory=_layer("ridge"), description="Mountain ridge source noise"
    )
    moisture: NoiseLayerConfig = Field(
        default_factory=_layer("moisture"), description="Moisture field"
    )
    river: NoiseLayerConfig = Field(
        default_factory=_layer("river"), description="River channel noise"
    )

    @model_validator(mode="before")
    @classmethod
    def _merge_layer_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        merged = dict(data)
        for name, value in data.items():
            if name in _LAYER_DEFAULTS and isinstance(value, dict):
                merged[name] = {**_LAYER_DEFAULTS[name], **value}
        return merged


class ElevationConfig(BaseModel):
    """How the noise layers blend into elevation."""

    continent_weight: float = Field(default=0.5, description="Continent contribution")
    detail_weight: float = Field(default=0.2, description="Detail contribution")
    ridge_weight: float = Field(default=0.3, description="Ridge contribution")
    amplitude: float = Field(default=100.0, description="Blend-to-elevation scale")
    ridge_exponent: float = Field(default=3.0, description="Ridge sharpening power")
    island_exponent: float = Field(
        default=0.5, description="Power softening the radial falloff"
    )
    island_weight: float = Field(
        default=0.7, description="Share of elevation subject to falloff"
    )
    island_floor: float = Field(
        default=0.3, description="Share of elevation kept at the map edge"
    )


class LevelsConfig(BaseModel):
    """Elevation bands and moisture tiebreaks for biome classification."""

    water_level: float = Field(default=WATER_LEVEL)
    beach_level: float = Field(default=BEACH_LEVEL)
    plains_level: float = Field(default=PLAINS_LEVEL)
    hills_level: float = Field(default=HILLS_LEVEL)
    mountain_level: float = Field(default=MOUNTAIN_LEVEL)
    deep_water_depth: float = Field(
        default=5.0, description="Depth below water level where deep water starts"
    )
    plains_forest_moisture: float = Field(
        default=0.6, description="Moisture at which plains become forest"
    )
    hills_forest_moisture: float = Field(
        default=0.4, description="Moisture at which hills become forest"
    )

    @property
    def deep_water_level(self) -> float:
        return self.water_level - self.deep_water_depth


class HydrologyConfig(BaseModel):
    """River carving and lake formation parameters."""

    river_threshold: float = Field(
        default=RIVER_THRESHOLD, gt=0.0, lt=1.0, description="River noise cutoff"
    )
    river_depth: float = Field(
        default=5.0, description="Carve depth below water level at full strength"
    )
    tributary_band: float = Field(
        default=0.1, ge=0.0, description="Width of the band just below the cutoff"
    )
    tributary_depth: float = Field(
        default=1.0, description="Carve depth below water level for tributaries"
    )
    lake_elevation_margin: float = Field(
        default=5.0, description="Max height above water level for lake basins"
    )
    lake_moisture: float = Field(
        default=0.7, description="Moisture above which low basins flood"
    )
    lake_depth: float = Field(default=2.0, description="Lake depth below water level")


class SmoothingConfig(BaseModel):
    """Neighborhood smoothing parameters."""

    neighbor_weight: float = Field(
        default=0.7, ge=0.0, le=1.0, description="Weight of the 3x3 mean"
    )


class ColorConfig(BaseModel):
    """Cosmetic tile color parameters."""

    jitter: int = Field(
        default=5, ge=0, le=255, description="Max per-channel color variation"
    )


class TerrainConfig(BaseModel):
    """Complete terrain generation configuration."""

    seed: int = Field(default=0, description="World seed")
    width: int = Field(default=WORLD_WIDTH, gt=0, description="World width in tiles")
    height: int = Field(default=WORLD_HEIGHT, gt=0, description="World height in tiles")
    legacy_gradient: bool = Field(
        default=False,
        description="Use the zero-returning legacy gradient branch",
    )

    layers: NoiseLayersConfig = Field(default_factory=NoiseLayersConfig)
    elevation: ElevationConfig = Field(default_factory=ElevationConfig)
    levels: LevelsConfig = Field(default_factory=LevelsConfig)
    hydrology: HydrologyConfig = Field(default_factory=HydrologyConfig)
    smoothing: SmoothingConfig = Field(default_factory=SmoothingConfig)
    color: ColorConfig = Field(default_factory=ColorConfig)

    def layer_seed(self, layer: NoiseLayerConfig) -> int:
        """Effective seed of a noise layer for this world seed."""
        return layer.seed + self.seed * SEED_STRIDE


def load_config(config_path: Path) -> TerrainConfig:
    """Load terrain configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed TerrainConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return TerrainConfig.model_validate(data)
