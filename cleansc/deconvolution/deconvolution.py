"""
High-level methods for the deconvolution of beamforming maps
"""

import numpy as np
from numpy.typing import NDArray
from scipy.integrate import simpson

from ._deconvolution import _clean_sc_deconvolve
from .enums import Termination
from .._general_helpers import (
    _check_csm,
    _check_steering_vectors,
    _get_weights,
    _check_deconvolution_parameters,
    _get_normalization_factor,
)


def clean_sc(
    csm: NDArray[np.complex128],
    steering_vectors: NDArray[np.complex128],
    weights: NDArray | None = None,
    loop_gain: float = 0.9,
    maximum_iterations: int = 100,
    return_residual_csm: bool = False,
):
    """Deconvolves the beamforming map of a single frequency with the
    CLEAN-SC algorithm [1]. The main diagonal of the cross-spectral matrix is
    always removed.

    Parameters
    ----------
    csm : NDArray[np.complex128]
        Hermitian cross-spectral matrix with shape (mic, mic). Its main
        diagonal is ignored. The passed array is not modified.
    steering_vectors : NDArray[np.complex128]
        Steering vectors with shape (grid y, grid x, mic).
    weights : NDArray, optional
        Microphone weights with length mic. Row and column vectors are both
        accepted. Pass `None` for uniform weighting. Default: `None`.
    loop_gain : float, optional
        Also called safety factor. It is the fraction of the peak source
        that is removed in each iteration. It must be in ]0, 1[.
        Default: 0.9.
    maximum_iterations : int, optional
        Maximum number of iterations. Default: 100.
    return_residual_csm : bool, optional
        When `True`, the degraded cross-spectral matrix after the last
        iteration is returned as well. Default: `False`.

    Returns
    -------
    map : NDArray[np.float64]
        Deconvolved map with shape (grid y, grid x). It is the sum of all
        clean beams and the remaining dirty map.
    termination : `Termination`
        Reason why the iteration stopped.
    number_of_iterations : int
        Number of iterations in which a source component was removed.
    residual_csm : NDArray[np.complex128]
        Degraded cross-spectral matrix. Only returned if
        `return_residual_csm=True`.

    References
    ----------
    - [1]: Sijtsma P. CLEAN Based on Spatial Source Coherence. International
      Journal of Aeroacoustics. 2007;6(4):357-374.
      doi: 10.1260/147547207783359459.

    Notes
    -----
    - The iteration stops when the degraded csm contains more energy (sum of
      absolute values) than in the previous iteration. The csm update of that
      iteration is kept.
    - The remaining dirty map is the one computed at the beginning of the
      last iteration. Its negative values (unphysical due to the removed
      diagonal) are set to zero.

    """
    csm = _check_csm(csm)
    number_of_mics = csm.shape[0]
    # At least two mics
    _get_normalization_factor(number_of_mics)
    steering_vectors = _check_steering_vectors(
        steering_vectors, number_of_mics
    )
    weights = _get_weights(weights, number_of_mics)
    _check_deconvolution_parameters(loop_gain, maximum_iterations)

    clean_map, remaining_map, csm, number_of_iterations, termination = (
        _clean_sc_deconvolve(
            csm, steering_vectors, weights, loop_gain, maximum_iterations
        )
    )

    if termination == Termination.MaximumIterations:
        print(f"Stopped after maximum iterations ({maximum_iterations})")
    elif termination == Termination.EnergyCriterion:
        print(f"Converged after {number_of_iterations} iterations")
    else:
        print(
            f"Converged after {number_of_iterations} iterations "
            + "(vanishing peak)"
        )

    # Unphysical values for removed diagonal of CSM
    remaining_map[remaining_map < 0] = 0
    map = clean_map + remaining_map

    if return_residual_csm:
        return map, termination, number_of_iterations, csm
    return map, termination, number_of_iterations


def clean_sc_spectrum(
    csm: NDArray[np.complex128],
    steering_vectors: NDArray[np.complex128],
    frequencies_hz: NDArray[np.float64],
    weights: NDArray | None = None,
    loop_gain: float = 0.9,
    maximum_iterations: int = 100,
) -> tuple[NDArray[np.float64], list[Termination]]:
    """Deconvolves each frequency bin with `clean_sc` and integrates the
    resulting maps over frequency.

    Parameters
    ----------
    csm : NDArray[np.complex128]
        Cross-spectral matrices with shape (frequency, mic, mic).
    steering_vectors : NDArray[np.complex128]
        Steering vectors with shape (frequency, grid y, grid x, mic).
    frequencies_hz : NDArray[np.float64]
        Frequency vector in Hz corresponding to the first dimension of the
        passed arrays. It must be strictly increasing.
    weights : NDArray, optional
        Microphone weights with length mic, used for all frequencies. Pass
        `None` for uniform weighting. Default: `None`.
    loop_gain : float, optional
        Loop gain in ]0, 1[. Default: 0.9.
    maximum_iterations : int, optional
        Maximum number of iterations for each frequency. Default: 100.

    Returns
    -------
    map : NDArray[np.float64]
        Map with shape (grid y, grid x). It is integrated with Simpson's
        rule if there are multiple frequencies, otherwise it is the map of
        the single frequency bin.
    terminations : list[`Termination`]
        Reason for stopping for each frequency bin.

    """
    csm = np.asarray(csm)
    steering_vectors = np.asarray(steering_vectors)
    frequencies_hz = np.atleast_1d(np.asarray(frequencies_hz).squeeze())
    if csm.ndim != 3:
        raise ValueError("csm should have shape (frequency, mic, mic)")
    if steering_vectors.ndim != 4:
        raise ValueError(
            "steering_vectors should have shape "
            + "(frequency, grid y, grid x, mic)"
        )
    if not (
        csm.shape[0] == steering_vectors.shape[0] == len(frequencies_hz)
    ):
        raise ValueError(
            "Number of frequencies in csm, steering vectors and frequency "
            + "vector do not match"
        )
    if np.any(np.diff(frequencies_hz) <= 0):
        raise ValueError("frequencies_hz must be strictly increasing")

    maps = np.zeros(
        (len(frequencies_hz), *steering_vectors.shape[1:3]), dtype=np.float64
    )
    terminations = []
    for find, f in enumerate(frequencies_hz):
        print(f"...{f:.1f} Hz...")
        maps[find], termination, _ = clean_sc(
            csm[find],
            steering_vectors[find],
            weights,
            loop_gain,
            maximum_iterations,
        )
        terminations.append(termination)

    # Integrate over all frequencies
    if len(frequencies_hz) > 1:
        map = simpson(maps, x=frequencies_hz, axis=0)
    else:
        map = maps[0]
    return map, terminations
