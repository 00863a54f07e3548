"""Shared test fixtures for world generation tests."""

import numpy as np
import pytest

from isoworld.terrain.config import TerrainConfig
from isoworld.terrain.generator import GenerationResult, generate_terrain


@pytest.fixture
def small_config() -> TerrainConfig:
    """32x24 world with a non-default seed."""
    return TerrainConfig(width=32, height=24, seed=7)


@pytest.fixture(scope="session")
def default_result() -> GenerationResult:
    """Full-size 128x128 world for seed 1 with seeded color variation."""
    config = TerrainConfig(width=128, height=128, seed=1)
    return generate_terrain(config, np.random.default_rng(0))


@pytest.fixture
def rng() -> np.random.Generator:
    """Fixed-seed random source for color variation."""
    return np.random.default_rng(1234)
