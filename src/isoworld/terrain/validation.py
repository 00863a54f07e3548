"""Post-generation validation of world grids."""

import logging
import math

from ..grid import WorldGrid
from .classification import biome_elevation_band
from .config import LevelsConfig, TerrainConfig

logger = logging.getLogger(__name__)

# Land fraction below which a world is reported as nearly all water
MIN_LAND_FRACTION = 0.05


class ValidationResult:
    """Result of world validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_world(
    grid: WorldGrid,
    config: TerrainConfig | None = None,
) -> ValidationResult:
    """Validate a generated world against its structural guarantees.

    Args:
        grid: Generated world grid.
        config: Configuration the grid was generated with. Defaults are
            assumed when omitted.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()
    levels = config.levels if config is not None else LevelsConfig()

    # Check 1: Every coordinate present exactly once
    _check_completeness(grid, result)

    # Check 2: Walkability agrees with biome
    _check_walkability(grid, result)

    # Check 3: Elevations sit inside their biome's band
    _check_elevation_bands(grid, levels, result)

    # Check 4: Some land exists
    _check_land_fraction(grid, result)

    if result.passed:
        logger.info("World validation passed")
    else:
        logger.warning(f"World validation failed with {len(result.errors)} errors")
        for error in result.errors:
            logger.error(f"  - {error}")

    for warning in result.warnings:
        logger.warning(f"  - {warning}")

    return result


def _check_completeness(grid: WorldGrid, result: ValidationResult) -> None:
    """Check the grid covers each coordinate exactly once."""
    expected = grid.width * grid.height
    seen: set[tuple[int, int]] = set()
    count = 0
    duplicates = 0
    out_of_range = 0

    for tile in grid:
        count += 1
        if not grid.in_bounds(tile.x, tile.y):
            out_of_range += 1
            continue
        key = (tile.x, tile.y)
        if key in seen:
            duplicates += 1
        seen.add(key)

    if count != expected:
        result.add_error(f"Grid holds {count} tiles, expected {expected}")
    if duplicates:
        result.add_error(f"{duplicates} duplicate tile coordinates")
    if out_of_range:
        result.add_error(f"{out_of_range} tiles outside the grid")
    missing = expected - len(seen)
    if missing > 0:
        result.add_error(f"{missing} coordinates have no tile")


def _check_walkability(grid: WorldGrid, result: ValidationResult) -> None:
    """Check walkable flags match biome properties."""
    mismatched = sum(1 for tile in grid if tile.walkable != tile.biome.walkable)
    if mismatched:
        result.add_error(f"{mismatched} tiles disagree with their biome's walkability")


def _check_elevation_bands(
    grid: WorldGrid,
    levels: LevelsConfig,
    result: ValidationResult,
) -> None:
    """Check truncated elevations are consistent with biome bands."""
    outside = 0
    for tile in grid:
        low, high = biome_elevation_band(tile.biome, levels)
        # Truncation toward zero can move a value by less than one unit
        lower = math.floor(low) if math.isfinite(low) else low
        upper = math.ceil(high) if math.isfinite(high) else high
        if not lower <= tile.elevation <= upper:
            outside += 1

    if outside:
        result.add_error(f"{outside} tiles have elevations outside their biome band")


def _check_land_fraction(grid: WorldGrid, result: ValidationResult) -> None:
    """Warn when a world has little or no land."""
    total = len(grid)
    land = sum(1 for tile in grid if not tile.biome.is_water)

    if land == 0:
        result.add_warning("No land found")
    elif land / total < MIN_LAND_FRACTION:
        result.add_warning(f"Land fraction {land / total:.1%} is very low")
