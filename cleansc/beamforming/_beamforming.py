"""
Backend for beamforming module
"""

import numpy as np
from numpy.typing import NDArray


def _dirty_map(
    csm: NDArray[np.complex128],
    steering_vectors: NDArray[np.complex128],
    weights: NDArray,
    normalization_factor: float,
) -> NDArray[np.float64]:
    """Computes the beamformer power for all grid points at once.

    Parameters
    ----------
    csm : NDArray[np.complex128]
        Cross-spectral matrix with shape (mic, mic).
    steering_vectors : NDArray[np.complex128]
        Steering vectors with shape (grid y, grid x, mic).
    weights : NDArray
        Microphone weights with shape (mic).
    normalization_factor : float
        Factor that scales the quadratic form.

    Returns
    -------
    NDArray[np.float64]
        Map with shape (grid y, grid x).

    """
    weighted = steering_vectors * weights[None, None, :]
    # (w*e)^H D (e*w) for every grid point
    power = np.einsum(
        "yxm,mn,yxn->yx", weighted.conjugate(), csm, weighted, optimize=True
    )
    return normalization_factor * power.real


def _find_peak(map: NDArray[np.float64]) -> tuple[float, tuple[int, int]]:
    """Returns maximum value and its (row, column) index. Ties are resolved
    by taking the first occurrence in row-major order.

    """
    flat_index = np.argmax(map)
    row, column = np.unravel_index(flat_index, map.shape)
    return float(map[row, column]), (int(row), int(column))
