"""
Beamforming functions
"""

import numpy as np
from numpy.typing import NDArray

from ._beamforming import _dirty_map
from .._general_helpers import (
    _check_csm,
    _check_steering_vectors,
    _get_weights,
    _get_normalization_factor,
)


def dirty_map(
    csm: NDArray[np.complex128],
    steering_vectors: NDArray[np.complex128],
    weights: NDArray | None = None,
    remove_csm_diagonal: bool = True,
) -> NDArray[np.float64]:
    """Computes the frequency-domain delay-and-sum map (dirty map) from a
    cross-spectral matrix and a precomputed steering field.

    Parameters
    ----------
    csm : NDArray[np.complex128]
        Cross-spectral matrix with shape (mic, mic). It is not modified.
    steering_vectors : NDArray[np.complex128]
        Steering vectors with shape (grid y, grid x, mic).
    weights : NDArray, optional
        Microphone weights with length mic. Row and column vectors are both
        accepted. Pass `None` for uniform weighting. Default: `None`.
    remove_csm_diagonal : bool, optional
        When `True`, the main diagonal of the csm is removed and the map is
        normalized with 1/(mic**2 - mic). Otherwise, the normalization is
        1/mic**2. Default: `True`.

    Returns
    -------
    map : NDArray[np.float64]
        Beamformer map with shape (grid y, grid x).

    """
    csm = _check_csm(csm)
    number_of_mics = csm.shape[0]
    steering_vectors = _check_steering_vectors(
        steering_vectors, number_of_mics
    )
    weights = _get_weights(weights, number_of_mics)

    if remove_csm_diagonal:
        np.fill_diagonal(csm, 0)
        normalization_factor = _get_normalization_factor(number_of_mics)
    else:
        normalization_factor = 1 / number_of_mics**2
    return _dirty_map(csm, steering_vectors, weights, normalization_factor)
