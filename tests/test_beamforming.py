import cleansc
import numpy as np
import pytest
from cleansc.beamforming._beamforming import _find_peak

rng = np.random.default_rng(0)
number_of_mics = 5
steering_vectors = np.exp(
    2j * np.pi * rng.uniform(size=(6, 8, number_of_mics))
)
a = rng.normal(size=(number_of_mics, 2)) + 1j * rng.normal(
    size=(number_of_mics, 2)
)
csm = a @ a.conjugate().T


class TestBeamformingModule:
    def test_dirty_map(self):
        weights = rng.uniform(0.5, 1, size=number_of_mics)
        map = cleansc.beamforming.dirty_map(csm, steering_vectors, weights)
        assert map.shape == steering_vectors.shape[:2]
        assert map.dtype == np.float64

        # Compare with the quadratic form for each grid point
        D = csm.copy()
        np.fill_diagonal(D, 0)
        norm = 1 / (number_of_mics**2 - number_of_mics)
        expected = np.zeros(steering_vectors.shape[:2])
        for y in range(steering_vectors.shape[0]):
            for x in range(steering_vectors.shape[1]):
                e = steering_vectors[y, x, :] * weights
                expected[y, x] = (norm * e.conjugate() @ D @ e).real
        np.testing.assert_allclose(map, expected, atol=1e-12)

        # Passed csm is not modified
        assert np.all(np.diag(csm) != 0)

    def test_dirty_map_full_csm(self):
        map = cleansc.beamforming.dirty_map(
            csm, steering_vectors, remove_csm_diagonal=False
        )
        e = steering_vectors[2, 3, :]
        expected = (e.conjugate() @ csm @ e).real / number_of_mics**2
        assert np.isclose(map[2, 3], expected)
        # Full csm is positive semidefinite
        assert np.all(map >= -1e-12)

    def test_dirty_map_shape_mismatch(self):
        with pytest.raises(ValueError):
            cleansc.beamforming.dirty_map(csm, steering_vectors[..., :-1])
        with pytest.raises(ValueError):
            cleansc.beamforming.dirty_map(
                csm, steering_vectors, np.ones(number_of_mics + 1)
            )

    def test_find_peak(self):
        map = np.zeros((3, 4))
        map[1, 2] = 5.0
        map[2, 0] = 5.0
        # First occurrence in row-major order
        assert _find_peak(map) == (5.0, (1, 2))

        map[0, 3] = 5.0
        assert _find_peak(map) == (5.0, (0, 3))
