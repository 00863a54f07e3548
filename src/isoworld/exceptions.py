"""Custom exceptions for world generation."""


class WorldGenError(Exception):
    """Base exception for world generation errors."""

    pass


class InvalidDimensionError(WorldGenError, ValueError):
    """Raised when a requested grid dimension is zero or negative."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(
            f"World dimensions must be positive, got {width}x{height}"
        )
