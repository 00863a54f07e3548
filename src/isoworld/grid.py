"""Immutable world grid produced by terrain generation."""

from collections import Counter
from typing import Iterator, Sequence

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, PrivateAttr

from .biomes import BiomeKind
from .types import Color

# Height reported for positions outside the grid
INITIAL_ELEVATION = 0.0


class Tile(BaseModel, frozen=True):
    """A single finished world cell.

    This is the only record handed to the renderer and to player physics.
    Elevation is the synthesized float elevation truncated toward zero.
    """

    x: int
    y: int
    elevation: int
    color: Color
    walkable: bool
    biome: BiomeKind

    def __repr__(self) -> str:
        return (
            f"Tile(x={self.x}, y={self.y}, elevation={self.elevation}, "
            f"biome={self.biome.value})"
        )


class WorldGrid(BaseModel, frozen=True):
    """
    Fixed-size, read-only grid of tiles.

    Rows are stored as tuples indexed [y][x]. The grid is fully populated
    at construction and never resized or mutated afterwards.
    """

    width: int
    height: int

    _rows: tuple[tuple[Tile, ...], ...] = PrivateAttr(default=())

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]]) -> "WorldGrid":
        """Build a grid from row-major tiles.

        Args:
            rows: Sequence of rows, each a sequence of tiles, indexed [y][x].

        Returns:
            WorldGrid owning an immutable copy of the tiles.

        Raises:
            ValueError: If rows are ragged or tile coordinates don't match
                their position in the grid.
        """
        height = len(rows)
        width = len(rows[0]) if height else 0
        frozen_rows = tuple(tuple(row) for row in rows)

        for y, row in enumerate(frozen_rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {y} has {len(row)} tiles, expected {width}"
                )
            for x, tile in enumerate(row):
                if tile.x != x or tile.y != y:
                    raise ValueError(
                        f"Tile at [{y}][{x}] reports position ({tile.x}, {tile.y})"
                    )

        grid = cls(width=width, height=height)
        grid._rows = frozen_rows
        return grid

    # --- Tile access ---

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinate is within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        """Get tile at coordinate.

        Raises:
            IndexError: If the coordinate is outside the grid.
        """
        if not self.in_bounds(x, y):
            raise IndexError(
                f"({x}, {y}) is outside {self.width}x{self.height} grid"
            )
        return self._rows[y][x]

    def elevation_at(
        self, x: float, y: float, default: float = INITIAL_ELEVATION
    ) -> float:
        """Terrain height under a continuous position.

        The position is truncated to the containing tile. Positions outside
        the grid report `default`.
        """
        tx, ty = int(x), int(y)
        if x < 0 or y < 0 or not self.in_bounds(tx, ty):
            return default
        return float(self._rows[ty][tx].elevation)

    def is_walkable(self, x: int, y: int) -> bool:
        """Check if the tile at coordinate is walkable (False off-grid)."""
        if not self.in_bounds(x, y):
            return False
        return self._rows[y][x].walkable

    def rows(self) -> tuple[tuple[Tile, ...], ...]:
        return self._rows

    def __iter__(self) -> Iterator[Tile]:  # type: ignore[override]
        for row in self._rows:
            yield from row

    def __len__(self) -> int:
        return self.width * self.height

    # --- Bulk views ---

    def elevation_array(self) -> NDArray[np.int32]:
        """Tile elevations as a read-only (height, width) array."""
        arr = np.array(
            [[tile.elevation for tile in row] for row in self._rows],
            dtype=np.int32,
        ).reshape(self.height, self.width)
        arr.flags.writeable = False
        return arr

    def walkable_array(self) -> NDArray[np.bool_]:
        """Tile walkability as a read-only (height, width) array."""
        arr = np.array(
            [[tile.walkable for tile in row] for row in self._rows],
            dtype=bool,
        ).reshape(self.height, self.width)
        arr.flags.writeable = False
        return arr

    def biome_counts(self) -> dict[BiomeKind, int]:
        """Number of tiles of each biome kind (zero counts included)."""
        counts = Counter(tile.biome for tile in self)
        return {kind: counts.get(kind, 0) for kind in BiomeKind}
