"""Neighborhood smoothing of land elevation."""

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from .config import SmoothingConfig

# 3x3 box, center included
_NEIGHBORHOOD = np.ones((3, 3), dtype=np.float64)


def neighborhood_mean(elevation: NDArray[np.float64]) -> NDArray[np.float64]:
    """Mean over each cell's 3x3 neighborhood, clipped at the grid edge.

    No wraparound: edge cells average 6 values and corners 4.

    Args:
        elevation: 2D elevation field.

    Returns:
        Array of neighborhood means, same shape as input.
    """
    totals = ndimage.convolve(elevation, _NEIGHBORHOOD, mode="constant", cval=0.0)
    counts = ndimage.convolve(
        np.ones_like(elevation), _NEIGHBORHOOD, mode="constant", cval=0.0
    )
    return totals / counts


def smooth_elevation(
    elevation: NDArray[np.float64],
    water_level: float,
    config: SmoothingConfig,
) -> NDArray[np.float64]:
    """Blend land cells toward their neighborhood mean.

    All neighbor reads use the input array; the result is a new array.
    Cells at or below the water level are copied unchanged so river and
    lake shapes stay crisp.

    Args:
        elevation: Elevation after hydrology.
        water_level: Water table elevation.
        config: Smoothing parameters.

    Returns:
        Smoothed elevation array.
    """
    mean = neighborhood_mean(elevation)
    weight = config.neighbor_weight
    blended = mean * weight + elevation * (1.0 - weight)
    return np.where(elevation <= water_level, elevation, blended)
