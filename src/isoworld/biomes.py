"""Biome kinds and their static properties."""

from enum import Enum

from pydantic import BaseModel

from .types import Color


class BiomeKind(str, Enum):
    """Biome kinds, ordered by increasing elevation band."""

    DEEP_WATER = "deep_water"
    SHALLOW_WATER = "shallow_water"
    BEACH = "beach"
    PLAINS = "plains"
    FOREST = "forest"
    HILLS = "hills"
    MOUNTAINS = "mountains"
    SNOW_CAPS = "snow_caps"

    @property
    def properties(self) -> "BiomeProperties":
        """Static properties for this biome."""
        return BIOME_PROPERTIES[self]

    @property
    def walkable(self) -> bool:
        """Whether the player can walk on this biome."""
        return BIOME_PROPERTIES[self].walkable

    @property
    def is_water(self) -> bool:
        return self in _WATER_KINDS


class BiomeProperties(BaseModel, frozen=True):
    """Immutable rendering and movement properties of a biome."""

    base_color: Color
    height_modifier: float
    roughness: float
    walkable: bool


BIOME_PROPERTIES: dict[BiomeKind, BiomeProperties] = {
    BiomeKind.DEEP_WATER: BiomeProperties(
        base_color=Color(r=0, g=64, b=220),
        height_modifier=0.3,
        roughness=0.1,
        walkable=False,
    ),
    BiomeKind.SHALLOW_WATER: BiomeProperties(
        base_color=Color(r=0, g=128, b=255),
        height_modifier=0.5,
        roughness=0.2,
        walkable=False,
    ),
    BiomeKind.BEACH: BiomeProperties(
        base_color=Color(r=240, g=220, b=180),
        height_modifier=0.6,
        roughness=0.2,
        walkable=True,
    ),
    BiomeKind.PLAINS: BiomeProperties(
        base_color=Color(r=100, g=210, b=100),
        height_modifier=1.0,
        roughness=0.3,
        walkable=True,
    ),
    BiomeKind.FOREST: BiomeProperties(
        base_color=Color(r=21, g=120, b=35),
        height_modifier=1.1,
        roughness=0.4,
        walkable=True,
    ),
    BiomeKind.HILLS: BiomeProperties(
        base_color=Color(r=90, g=160, b=90),
        height_modifier=1.2,
        roughness=0.6,
        walkable=True,
    ),
    BiomeKind.MOUNTAINS: BiomeProperties(
        base_color=Color(r=150, g=140, b=130),
        height_modifier=1.5,
        roughness=0.8,
        walkable=False,
    ),
    BiomeKind.SNOW_CAPS: BiomeProperties(
        base_color=Color(r=255, g=255, b=255),
        height_modifier=1.6,
        roughness=0.9,
        walkable=False,
    ),
}

# Stable index order for compact uint8 storage of biome arrays
BIOME_ORDER: tuple[BiomeKind, ...] = tuple(BiomeKind)

_WATER_KINDS = frozenset({
    BiomeKind.DEEP_WATER,
    BiomeKind.SHALLOW_WATER,
})


def biome_index(kind: BiomeKind) -> int:
    """Convert BiomeKind to its uint8 storage value."""
    return BIOME_ORDER.index(kind)


def biome_from_index(value: int) -> BiomeKind:
    """Convert a uint8 storage value back to BiomeKind.

    Raises:
        ValueError: If value is not a valid biome index.
    """
    if not 0 <= value < len(BIOME_ORDER):
        raise ValueError(f"Unknown biome index: {value}")
    return BIOME_ORDER[value]
