"""
Backend for deconvolution module
"""

import numpy as np
from numpy.typing import NDArray
from warnings import warn

from ..beamforming._beamforming import _dirty_map, _find_peak
from .enums import Termination

# Coherent source component
MAXIMUM_SOURCE_ITERATIONS = 50
SOURCE_TOLERANCE = 1e-6


def _coherent_source_component(
    csm: NDArray[np.complex128],
    steering_vector: NDArray[np.complex128],
    weights: NDArray,
    maximum_power: float,
) -> NDArray[np.complex128]:
    """Computes the spatially coherent source component `h` of the peak source
    with the fixed-point iteration given in [1].

    Parameters
    ----------
    csm : NDArray[np.complex128]
        Degraded cross-spectral matrix (without diagonal) with shape
        (mic, mic).
    steering_vector : NDArray[np.complex128]
        Normalized steering vector to the peak location with shape (mic).
    weights : NDArray
        Microphone weights with shape (mic).
    maximum_power : float
        Peak value of the dirty map.

    Returns
    -------
    h : NDArray[np.complex128]
        Coherent source component with shape (mic).

    References
    ----------
    - [1]: Sijtsma P. CLEAN Based on Spatial Source Coherence. International
      Journal of Aeroacoustics. 2007;6(4):357-374.
      doi:10.1260/147547207783359459.

    """
    weighted_steering = steering_vector * weights
    weighted_steering_squared = np.abs(weighted_steering) ** 2
    csm_term = csm @ weighted_steering / maximum_power

    h = steering_vector.copy()
    for _ in range(MAXIMUM_SOURCE_ITERATIONS):
        h_old = h
        # Only the main diagonal of h h^H is kept, the rest belongs to the csm
        H = np.abs(h) ** 2
        h = (csm_term + H * weighted_steering) / np.sqrt(
            1 + np.sum(H * weighted_steering_squared)
        )
        if np.linalg.norm(h - h_old) < SOURCE_TOLERANCE:
            break
    return h


def _clean_sc_deconvolve(
    csm: NDArray[np.complex128],
    steering_vectors: NDArray[np.complex128],
    weights: NDArray,
    loop_gain: float,
    maximum_iterations: int,
) -> tuple[
    NDArray[np.float64],
    NDArray[np.float64],
    NDArray[np.complex128],
    int,
    Termination,
]:
    """Runs the CLEAN-SC iteration. The passed csm is used as the degraded
    csm and is modified in place.

    Parameters
    ----------
    csm : NDArray[np.complex128]
        Cross-spectral matrix with shape (mic, mic).
    steering_vectors : NDArray[np.complex128]
        Steering vectors with shape (grid y, grid x, mic).
    weights : NDArray
        Microphone weights with shape (mic).
    loop_gain : float
        Loop gain in ]0, 1[.
    maximum_iterations : int
        Maximum number of iterations. With 0, nothing is computed and zero
        maps are returned.

    Returns
    -------
    clean_map : NDArray[np.float64]
        Accumulated clean beams with shape (grid y, grid x).
    dirty_map : NDArray[np.float64]
        Last computed dirty map (before the last update of the csm).
    csm : NDArray[np.complex128]
        Degraded csm.
    number_of_iterations : int
        Number of iterations in which the csm was degraded.
    termination : `Termination`
        Reason for stopping.

    """
    number_of_mics = csm.shape[0]
    normalization_factor = 1 / (number_of_mics**2 - number_of_mics)

    np.fill_diagonal(csm, 0)
    clean_map = np.zeros(steering_vectors.shape[:2])
    map = np.zeros_like(clean_map)

    # Stopping criterion given in [1]
    sum_of_degraded_csm = np.sum(np.abs(csm))

    first_peak = None
    termination = Termination.MaximumIterations
    number_of_iterations = 0
    for _ in range(maximum_iterations):
        map = _dirty_map(
            csm, steering_vectors, weights, normalization_factor
        )
        maximum_power, (row, column) = _find_peak(map)

        if first_peak is None:
            first_peak = maximum_power
        if (
            maximum_power <= 0
            or maximum_power < np.finfo(np.float64).eps * first_peak
        ):
            termination = Termination.VanishingPeak
            break

        g = steering_vectors[row, column, :] * np.sqrt(normalization_factor)
        h = _coherent_source_component(csm, g, weights, maximum_power)

        # Clean beam at peak location
        clean_map[row, column] += loop_gain * maximum_power

        # Degraded csm
        csm -= loop_gain * maximum_power * np.outer(h, h.conjugate())
        np.fill_diagonal(csm, 0)
        number_of_iterations += 1

        sum_of_csm = np.sum(np.abs(csm))
        if sum_of_csm > sum_of_degraded_csm:
            termination = Termination.EnergyCriterion
            break
        sum_of_degraded_csm = sum_of_csm

    # A peak vanishing after some iterations is a regular convergence
    if (
        termination == Termination.VanishingPeak
        and number_of_iterations == 0
    ):
        warn(
            f"Peak of the dirty map is not positive ({maximum_power:.3e}). "
            + "There is nothing to deconvolve"
        )
    return clean_map, map, csm, number_of_iterations, termination
