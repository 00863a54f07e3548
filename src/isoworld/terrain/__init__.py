"""Procedural terrain generation package.

This package implements seeded gradient noise and the four-pass island
synthesis pipeline: raw fields, hydrology, smoothing and biome tiles.
"""

from .classification import classify_biome, classify_biomes
from .config import TerrainConfig, load_config
from .generator import GenerationResult, generate_terrain, generate_world
from .height import terrain_height
from .noise import NoiseContext, layered_noise, perlin
from .validation import ValidationResult, validate_world

__all__ = [
    "GenerationResult",
    "NoiseContext",
    "TerrainConfig",
    "ValidationResult",
    "classify_biome",
    "classify_biomes",
    "generate_terrain",
    "generate_world",
    "layered_noise",
    "load_config",
    "perlin",
    "terrain_height",
    "validate_world",
]
