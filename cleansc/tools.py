"""
Useful tools for handling beamforming maps
"""

import numpy as np
from numpy.typing import NDArray


def to_db(
    power_map: NDArray[np.float64],
    dynamic_range_db: float | None = None,
) -> NDArray[np.float64]:
    """Convert a power map to dB. Small values are clipped in order to avoid
    -inf dB outcomes.

    Parameters
    ----------
    power_map : NDArray[np.float64]
        Map (or any array) with power values.
    dynamic_range_db : float, optional
        If specified, values below `max - dynamic_range_db` are clipped.
        Otherwise, the clipping value is the smallest normal float. Pass
        `None` to ignore. Default: `None`.

    Returns
    -------
    NDArray[np.float64]
        Map in dB.

    """
    power_map = np.abs(np.asarray(power_map, dtype=np.float64))
    min_value = float(np.finfo(np.float64).smallest_normal)
    if dynamic_range_db is not None:
        min_value = max(
            np.max(power_map) * 10.0 ** (-abs(dynamic_range_db) / 10.0),
            min_value,
        )
    return 10.0 * np.log10(np.clip(power_map, a_min=min_value, a_max=None))
