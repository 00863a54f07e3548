"""Tests for BiomeKind and biome properties."""

import pytest
from pydantic import ValidationError

from isoworld.biomes import (
    BIOME_ORDER,
    BIOME_PROPERTIES,
    BiomeKind,
    biome_from_index,
    biome_index,
)
from isoworld.types import Color


class TestBiomeKindWalkability:
    """Test walkability of biome kinds."""

    def test_water_not_walkable(self) -> None:
        """Both water kinds block movement."""
        assert not BiomeKind.DEEP_WATER.walkable
        assert not BiomeKind.SHALLOW_WATER.walkable

    def test_lowlands_walkable(self) -> None:
        """Beach, plains, forest and hills are walkable."""
        assert BiomeKind.BEACH.walkable
        assert BiomeKind.PLAINS.walkable
        assert BiomeKind.FOREST.walkable
        assert BiomeKind.HILLS.walkable

    def test_peaks_not_walkable(self) -> None:
        """Mountains and snow caps block movement."""
        assert not BiomeKind.MOUNTAINS.walkable
        assert not BiomeKind.SNOW_CAPS.walkable

    def test_is_water(self) -> None:
        """Only the two water kinds count as water."""
        water = {kind for kind in BiomeKind if kind.is_water}
        assert water == {BiomeKind.DEEP_WATER, BiomeKind.SHALLOW_WATER}


class TestBiomeProperties:
    """Test the static properties table."""

    def test_every_kind_has_properties(self) -> None:
        """The table covers every biome."""
        assert set(BIOME_PROPERTIES) == set(BiomeKind)

    def test_known_colors(self) -> None:
        """Base colors match the fixed palette."""
        assert BIOME_PROPERTIES[BiomeKind.DEEP_WATER].base_color.as_tuple() == (0, 64, 220, 255)
        assert BIOME_PROPERTIES[BiomeKind.FOREST].base_color.as_tuple() == (21, 120, 35, 255)
        assert BIOME_PROPERTIES[BiomeKind.SNOW_CAPS].base_color.as_tuple() == (255, 255, 255, 255)

    def test_height_modifiers_increase(self) -> None:
        """Height modifiers grow with elevation, plains at 1."""
        modifiers = [BIOME_PROPERTIES[kind].height_modifier for kind in BIOME_ORDER]
        assert modifiers == sorted(modifiers)
        assert BIOME_PROPERTIES[BiomeKind.PLAINS].height_modifier == 1.0

    def test_properties_accessor(self) -> None:
        """Kinds expose their table entry directly."""
        assert BiomeKind.HILLS.properties.roughness == 0.6

    def test_properties_immutable(self) -> None:
        """Table entries cannot be reassigned."""
        with pytest.raises(ValidationError):
            BIOME_PROPERTIES[BiomeKind.BEACH].walkable = False


class TestBiomeIndex:
    """Tests for BiomeKind <-> uint8 conversion."""

    def test_order_follows_elevation(self) -> None:
        """Index order runs from deep water to snow caps."""
        assert BIOME_ORDER[0] == BiomeKind.DEEP_WATER
        assert BIOME_ORDER[-1] == BiomeKind.SNOW_CAPS
        assert len(BIOME_ORDER) == 8

    def test_round_trip_conversion(self) -> None:
        """Every kind survives index conversion."""
        for kind in BiomeKind:
            assert biome_from_index(biome_index(kind)) == kind

    def test_unknown_index_rejected(self) -> None:
        """Indices past the last kind raise ValueError."""
        with pytest.raises(ValueError):
            biome_from_index(8)


class TestColor:
    """Tests for Color."""

    def test_default_alpha(self) -> None:
        """Alpha defaults to opaque."""
        assert Color(r=1, g=2, b=3).a == 255

    def test_channel_range(self) -> None:
        """Channels outside 0..255 fail validation."""
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)
        with pytest.raises(ValidationError):
            Color(r=0, g=-1, b=0)

    def test_str(self) -> None:
        """Colors print as rgba(r, g, b, a)."""
        assert str(Color(r=1, g=2, b=3, a=4)) == "rgba(1, 2, 3, 4)"
