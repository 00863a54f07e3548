"""River carving and lake formation.

Every operation here only ever lowers elevation, so the clamps can be
applied in any order with the same result.
"""

import numpy as np
from numpy.typing import NDArray

from .config import HydrologyConfig
from .fields import TerrainFields


def river_strength(
    river: NDArray[np.float64],
    threshold: float,
) -> NDArray[np.float64]:
    """How far river noise exceeds the threshold, scaled to (0, 1].

    Cells at or below the threshold get 0.
    """
    strength = (river - threshold) / (1.0 - threshold)
    return np.where(river > threshold, strength, 0.0)


def carve_rivers(
    elevation: NDArray[np.float64],
    river: NDArray[np.float64],
    water_level: float,
    config: HydrologyConfig,
) -> NDArray[np.float64]:
    """Cut river channels where river noise crosses the threshold.

    Channel depth grows with the river strength. Cells in the tributary
    band just below the threshold dip at least slightly under the water
    table.

    Args:
        elevation: Elevation field.
        river: River noise field.
        water_level: Water table elevation.
        config: Hydrology parameters.

    Returns:
        New elevation array.
    """
    threshold = config.river_threshold
    result = elevation.copy()

    channel = river > threshold
    depth = water_level - river_strength(river, threshold) * config.river_depth
    result[channel] = np.minimum(result[channel], depth[channel])

    tributary = (river > threshold - config.tributary_band) & (river <= threshold)
    result[tributary] = np.minimum(
        result[tributary], water_level - config.tributary_depth
    )

    return result


def form_lakes(
    elevation: NDArray[np.float64],
    moisture: NDArray[np.float64],
    water_level: float,
    config: HydrologyConfig,
) -> NDArray[np.float64]:
    """Flood low, wet basins regardless of river noise.

    Args:
        elevation: Elevation field.
        moisture: Moisture field.
        water_level: Water table elevation.
        config: Hydrology parameters.

    Returns:
        New elevation array.
    """
    result = elevation.copy()
    basin = (elevation < water_level + config.lake_elevation_margin) & (
        moisture > config.lake_moisture
    )
    result[basin] = np.minimum(result[basin], water_level - config.lake_depth)
    return result


def apply_hydrology(
    fields: TerrainFields,
    water_level: float,
    config: HydrologyConfig,
) -> TerrainFields:
    """Carve rivers and lakes into raw terrain fields.

    Returns:
        TerrainFields with lowered elevation; moisture and river unchanged.
    """
    elevation = carve_rivers(fields.elevation, fields.river, water_level, config)
    elevation = form_lakes(elevation, fields.moisture, water_level, config)
    return TerrainFields(
        elevation=elevation,
        moisture=fields.moisture,
        river=fields.river,
    )
