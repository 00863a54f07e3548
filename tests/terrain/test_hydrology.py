"""Tests for river carving and lake formation."""

import numpy as np
import pytest

from isoworld.terrain.config import WATER_LEVEL, HydrologyConfig, TerrainConfig
from isoworld.terrain.fields import TerrainFields, make_raw_fields
from isoworld.terrain.hydrology import (
    apply_hydrology,
    carve_rivers,
    form_lakes,
    river_strength,
)


def _cell(value: float) -> np.ndarray:
    return np.array([[value]], dtype=np.float64)


class TestRiverStrength:
    """Tests for river strength scaling."""

    def test_zero_below_threshold(self) -> None:
        """Values at or below the threshold have no strength."""
        river = np.array([0.0, 0.5, 0.82])
        np.testing.assert_array_equal(river_strength(river, 0.82), [0.0, 0.0, 0.0])

    def test_full_strength_at_one(self) -> None:
        """A river value of 1 gives full strength."""
        assert river_strength(np.array([1.0]), 0.82)[0] == pytest.approx(1.0)

    def test_linear_between(self) -> None:
        """Strength rises linearly from the threshold to 1."""
        assert river_strength(np.array([0.91]), 0.82)[0] == pytest.approx(0.5)


class TestCarveRivers:
    """Tests for river channel carving."""

    def test_strong_river_carves_deep(self) -> None:
        """Full-strength rivers sit the full river depth below water."""
        config = HydrologyConfig()
        result = carve_rivers(_cell(60.0), _cell(1.0), WATER_LEVEL, config)
        assert result[0, 0] == pytest.approx(WATER_LEVEL - 5.0)

    def test_partial_strength(self) -> None:
        """Channel depth scales with river strength."""
        config = HydrologyConfig()
        result = carve_rivers(_cell(60.0), _cell(0.91), WATER_LEVEL, config)
        assert result[0, 0] == pytest.approx(WATER_LEVEL - 2.5)

    def test_already_low_cells_untouched(self) -> None:
        """Cells already below the channel floor keep their elevation."""
        config = HydrologyConfig()
        result = carve_rivers(_cell(-10.0), _cell(1.0), WATER_LEVEL, config)
        assert result[0, 0] == -10.0

    def test_tributary_band(self) -> None:
        """Cells just below the threshold dip under the water table."""
        config = HydrologyConfig()
        for value in (0.75, 0.8, 0.82):
            result = carve_rivers(_cell(40.0), _cell(value), WATER_LEVEL, config)
            assert result[0, 0] == pytest.approx(WATER_LEVEL - 1.0)

    def test_tributary_band_lower_edge_exclusive(self) -> None:
        """The bottom edge of the tributary band is not carved."""
        config = HydrologyConfig(river_threshold=0.5, tributary_band=0.25)
        result = carve_rivers(_cell(40.0), _cell(0.25), WATER_LEVEL, config)
        assert result[0, 0] == 40.0

    def test_outside_band_untouched(self) -> None:
        """Weak river values leave land alone."""
        config = HydrologyConfig()
        result = carve_rivers(_cell(40.0), _cell(0.5), WATER_LEVEL, config)
        assert result[0, 0] == 40.0

    def test_input_not_modified(self) -> None:
        """Carving returns a new array."""
        elevation = _cell(60.0)
        carve_rivers(elevation, _cell(1.0), WATER_LEVEL, HydrologyConfig())
        assert elevation[0, 0] == 60.0


class TestFormLakes:
    """Tests for lake formation."""

    def test_low_wet_basin_floods(self) -> None:
        """Wet ground just above water level becomes a lake."""
        result = form_lakes(_cell(24.0), _cell(0.8), WATER_LEVEL, HydrologyConfig())
        assert result[0, 0] == pytest.approx(WATER_LEVEL - 2.0)

    def test_dry_basin_untouched(self) -> None:
        """Moisture at the lake threshold is not enough."""
        result = form_lakes(_cell(24.0), _cell(0.7), WATER_LEVEL, HydrologyConfig())
        assert result[0, 0] == 24.0

    def test_high_wet_ground_untouched(self) -> None:
        """Wet ground at the elevation margin stays dry land."""
        result = form_lakes(_cell(25.0), _cell(0.9), WATER_LEVEL, HydrologyConfig())
        assert result[0, 0] == 25.0

    def test_deep_water_stays_deep(self) -> None:
        """Lakes never raise cells already below the lake floor."""
        result = form_lakes(_cell(5.0), _cell(0.9), WATER_LEVEL, HydrologyConfig())
        assert result[0, 0] == 5.0


class TestApplyHydrology:
    """Tests for the full hydrology pass."""

    def test_monotone_on_generated_fields(self, small_config: TerrainConfig) -> None:
        """No cell ever rises."""
        raw = make_raw_fields(small_config)
        carved = apply_hydrology(raw, WATER_LEVEL, small_config.hydrology)
        assert np.all(carved.elevation <= raw.elevation)

    def test_monotone_on_random_fields(self) -> None:
        """No cell rises for arbitrary input fields."""
        rng = np.random.default_rng(5)
        raw = TerrainFields(
            elevation=rng.uniform(-20, 100, (40, 40)),
            moisture=rng.uniform(0, 1, (40, 40)),
            river=rng.uniform(0, 1, (40, 40)),
        )
        carved = apply_hydrology(raw, WATER_LEVEL, HydrologyConfig())
        assert np.all(carved.elevation <= raw.elevation)

    def test_river_and_lake_combine(self) -> None:
        """The deepest applicable clamp wins regardless of order."""
        raw = TerrainFields(
            elevation=_cell(22.0), moisture=_cell(0.9), river=_cell(0.78)
        )
        carved = apply_hydrology(raw, WATER_LEVEL, HydrologyConfig())
        assert carved.elevation[0, 0] == pytest.approx(WATER_LEVEL - 2.0)

    def test_moisture_and_river_preserved(self) -> None:
        """Only elevation changes and the input fields are left intact."""
        raw = TerrainFields(
            elevation=_cell(22.0), moisture=_cell(0.9), river=_cell(0.95)
        )
        carved = apply_hydrology(raw, WATER_LEVEL, HydrologyConfig())
        assert carved.moisture[0, 0] == 0.9
        assert carved.river[0, 0] == 0.95
        assert raw.elevation[0, 0] == 22.0
