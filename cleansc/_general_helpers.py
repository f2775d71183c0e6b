"""
General functionality from helper methods
"""

import numpy as np
from numpy.typing import NDArray
from warnings import warn


def _check_csm(csm) -> NDArray[np.complex128]:
    """Returns a complex copy of the cross-spectral matrix after checking its
    shape. The passed array is never modified.

    Parameters
    ----------
    csm : array-like
        Cross-spectral matrix with shape (mic, mic).

    Returns
    -------
    csm : NDArray[np.complex128]
        Copy of the cross-spectral matrix.

    """
    try:
        csm = np.array(csm, dtype=np.complex128, copy=True)
    except (TypeError, ValueError) as e:
        raise TypeError(
            "csm should be an array-like object with numerical values"
        ) from e
    if csm.ndim != 2 or csm.shape[0] != csm.shape[1]:
        raise ValueError(
            "csm should be a square matrix with shape (mic, mic), got "
            + f"{csm.shape}"
        )
    # Diagonal is discarded anyway, tolerance relative to the csm level
    off_diagonal = ~np.eye(csm.shape[0], dtype=bool)
    tolerance = 1e-8 * np.max(np.abs(csm[off_diagonal]), initial=0.0)
    if not np.allclose(
        csm[off_diagonal],
        csm.conjugate().T[off_diagonal],
        rtol=0,
        atol=tolerance,
    ):
        warn("Passed csm is not hermitian. Results might be unreliable")
    return csm


def _check_steering_vectors(
    steering_vectors, number_of_mics: int
) -> NDArray[np.complex128]:
    """Checks the steering field against the number of microphones.

    Parameters
    ----------
    steering_vectors : array-like
        Steering vectors with shape (grid y, grid x, mic).
    number_of_mics : int
        Number of microphones in the cross-spectral matrix.

    Returns
    -------
    NDArray[np.complex128]

    """
    try:
        steering_vectors = np.asarray(steering_vectors, dtype=np.complex128)
    except (TypeError, ValueError) as e:
        raise TypeError(
            "steering_vectors should be an array-like object with numerical "
            + "values"
        ) from e
    if steering_vectors.ndim != 3:
        raise ValueError(
            "steering_vectors should have shape (grid y, grid x, mic), got "
            + f"{steering_vectors.shape}"
        )
    if steering_vectors.shape[2] != number_of_mics:
        raise ValueError(
            f"Steering vectors have {steering_vectors.shape[2]} microphones "
            + f"but the csm has {number_of_mics}"
        )
    return steering_vectors


def _get_weights(weights, number_of_mics: int) -> NDArray:
    """Returns the weights as a vector with length `number_of_mics`. Row or
    column vectors are accepted. `None` means uniform weighting.

    """
    if weights is None:
        return np.ones(number_of_mics)
    weights = np.asarray(weights).squeeze()
    if weights.ndim == 0:
        weights = weights[None]
    if weights.ndim != 1 or len(weights) != number_of_mics:
        raise ValueError(
            f"weights should be a vector with {number_of_mics} elements, got "
            + f"shape {np.shape(weights)}"
        )
    return weights


def _check_deconvolution_parameters(
    loop_gain: float, maximum_iterations: int
):
    """Validates loop gain and maximum number of iterations for the
    deconvolution. Values are rejected, never clamped.

    """
    if type(maximum_iterations) is bool or not isinstance(
        maximum_iterations, (int, np.integer)
    ):
        raise TypeError("maximum_iterations should be an integer")
    if maximum_iterations < 1:
        raise ValueError(
            f"{maximum_iterations} is not valid. Number of iterations must "
            + "be positive"
        )
    if not (0 < loop_gain < 1):
        raise ValueError(
            f"{loop_gain} is not valid. The loop gain (safety factor) should "
            + "be in ]0, 1["
        )


def _get_normalization_factor(number_of_mics: int) -> float:
    """Normalization of the beamformer output for a csm with removed
    diagonal, i.e., 1/(M**2 - M).

    """
    if number_of_mics < 2:
        raise ValueError(
            "At least two microphones are needed when the csm diagonal is "
            + "removed"
        )
    return 1 / (number_of_mics**2 - number_of_mics)
