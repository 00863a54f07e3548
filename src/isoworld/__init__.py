"""Procedural island worlds for an isometric game."""

from .biomes import BIOME_PROPERTIES, BiomeKind, BiomeProperties
from .exceptions import InvalidDimensionError, WorldGenError
from .grid import Tile, WorldGrid
from .terrain import generate_world, terrain_height
from .types import Color

__all__ = [
    "BIOME_PROPERTIES",
    "BiomeKind",
    "BiomeProperties",
    "Color",
    "InvalidDimensionError",
    "Tile",
    "WorldGenError",
    "WorldGrid",
    "generate_world",
    "terrain_height",
]
